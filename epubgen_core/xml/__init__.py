"""
XML Processing Utilities
========================

Common XML helpers used by the markup and descriptor builders.
"""

from epubgen_core.xml.utils import (
    local_name,
    qualified,
    create_element,
    sub_element,
    find_child,
    parse_fragment,
    serialize,
    relative_href,
    to_xml_date,
    XHTML_NS,
    OPS_NS,
    OPF_NS,
    DC_NS,
    CONTAINER_NS,
    XML_NS,
    XHTML_DOCTYPE,
)

__all__ = [
    "local_name",
    "qualified",
    "create_element",
    "sub_element",
    "find_child",
    "parse_fragment",
    "serialize",
    "relative_href",
    "to_xml_date",
    "XHTML_NS",
    "OPS_NS",
    "OPF_NS",
    "DC_NS",
    "CONTAINER_NS",
    "XML_NS",
    "XHTML_DOCTYPE",
]
