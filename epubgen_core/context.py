"""
Build Context
=============

Explicit state of one package build, passed to every step instead of
being held on the packager.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from epubgen_core.config.settings import PackagingConfig
from epubgen_core.document import ChapterReference, EpubDocument
from epubgen_core.mapping.resource_graph import EpubResource, ResourceGraph


@dataclass
class BuildContext:
    """
    Everything a build step needs.

    Attributes:
        document: The book being packaged
        config: Packaging configuration (paths, compression)
        graph: Resource graph, fresh for every build
        modified: Modification timestamp written to the package document
    """
    document: EpubDocument
    config: PackagingConfig = field(default_factory=PackagingConfig)
    graph: ResourceGraph = field(default_factory=ResourceGraph)
    modified: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def root(self) -> str:
        """Graph node standing for the package document."""
        return self.config.package_document_path

    def chapters(self) -> List[ChapterReference]:
        """References for every chapter, in document order."""
        return [ChapterReference.for_chapter(self.document, chapter)
                for chapter in self.document.chapters]

    def resources(self) -> List[EpubResource]:
        """All resources of the package, in manifest order."""
        return self.graph.ordered_dependencies_of(self.root)
