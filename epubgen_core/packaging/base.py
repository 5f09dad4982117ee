"""
Base Packaging Classes
======================

Abstract base class and result container for the packaging framework.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from threading import Event
from typing import Any, BinaryIO, Dict, List, Optional
import logging

from epubgen_core.context import BuildContext
from epubgen_core.document import EpubDocument

logger = logging.getLogger(__name__)


@dataclass
class PackageResult:
    """
    Container for packaging results.

    Only returned for a complete, finalized archive; failed builds raise.

    Attributes:
        output_path: Path of the written package, if written to a file
        entries: Archive entry names in write order
        manifest_ids: Manifest item ids in manifest order
        spine_ids: Spine itemrefs in reading order
        total_size_bytes: Number of bytes written to the output
        metadata: Additional packaging metadata
    """
    output_path: Optional[Path] = None
    entries: List[str] = field(default_factory=list)
    manifest_ids: List[str] = field(default_factory=list)
    spine_ids: List[str] = field(default_factory=list)
    total_size_bytes: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def chapters_packaged(self) -> int:
        return int(self.metadata.get('chapters', 0))

    def summary(self) -> str:
        """Generate a text summary of packaging results."""
        lines = [
            f"Output: {self.output_path or '<stream>'}",
            f"Entries: {len(self.entries)}",
            f"Manifest items: {len(self.manifest_ids)}",
            f"Spine items: {len(self.spine_ids)}",
            f"Chapters: {self.chapters_packaged}",
        ]

        if self.total_size_bytes > 0:
            size_kb = self.total_size_bytes / 1024
            lines.append(f"Size: {size_kb:.1f} KB")

        return "\n".join(lines)


class BasePackager(ABC):
    """
    Abstract base class for document packagers.

    A build runs in two phases: ``collect`` registers every resource in a
    fresh BuildContext without touching the output, ``write`` serializes
    the collected context. ``package`` runs both.
    """

    @abstractmethod
    def collect(self, document: EpubDocument,
                modified: Optional[datetime] = None) -> BuildContext:
        """
        Collect every resource of the package.

        Args:
            document: Document to package
            modified: Modification timestamp; defaults to now

        Returns:
            BuildContext holding the populated resource graph
        """
        pass

    @abstractmethod
    def write(self, context: BuildContext, output: BinaryIO,
              cancel_event: Optional[Event] = None) -> PackageResult:
        """
        Serialize a collected build to a binary stream.

        Args:
            context: Collected build
            output: Writable binary stream
            cancel_event: Set to abort the build between entries

        Returns:
            PackageResult describing the written archive
        """
        pass

    def package(self, document: EpubDocument, output: BinaryIO,
                modified: Optional[datetime] = None,
                cancel_event: Optional[Event] = None) -> PackageResult:
        """Collect and write in one step."""
        context = self.collect(document, modified=modified)
        return self.write(context, output, cancel_event=cancel_event)

    @property
    def package_format(self) -> str:
        """Return the format of packages created (e.g., 'EPUB')."""
        return "Unknown"
