"""
Resource Mapping Module
=======================

Tracks every resource registered during a package build and derives
their manifest identifiers.
"""

from epubgen_core.mapping.identifiers import id_from_path
from epubgen_core.mapping.resource_graph import (
    EpubResource,
    ResourceGraph,
)

__all__ = [
    "id_from_path",
    "EpubResource",
    "ResourceGraph",
]
