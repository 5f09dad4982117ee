"""
EPUB Packager
=============

Assembles a collected build into an EPUB (OCF ZIP) archive.

Entry order is fixed:

1. ``mimetype`` - stored uncompressed, always the first entry
2. ``META-INF/container.xml``
3. the package document
4. every resource of the build, in manifest order

Every entry after ``mimetype`` is deflated at the configured level.
"""

from datetime import datetime, timezone
from threading import Event
from typing import BinaryIO, List, Optional, Sequence, Tuple
import logging
import zipfile

from epubgen_core.config.settings import CONTAINER_PATH, PackagingConfig
from epubgen_core.context import BuildContext
from epubgen_core.document import EpubDocument
from epubgen_core.errors import BuildCancelledError
from epubgen_core.mapping.resource_graph import ResourceGraph
from epubgen_core.markup import BaseMarkupBuilder, ChapterBuilder, CoverBuilder, NavigationBuilder
from epubgen_core.packaging.base import BasePackager, PackageResult
from epubgen_core.packaging.descriptor import (
    MIMETYPE,
    generate_container_xml,
    generate_package_document,
)

logger = logging.getLogger(__name__)

# (archive name, payload, stored uncompressed)
ArchiveEntry = Tuple[str, bytes, bool]


def _zip_date_time(moment: datetime) -> tuple:
    """ZIP entry timestamp (UTC, clamped to the 1980 ZIP epoch)."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return max(moment.timetuple()[:6], (1980, 1, 1, 0, 0, 0))


def default_builders() -> List[BaseMarkupBuilder]:
    """Cover, navigation and content builders, in registration order."""
    return [CoverBuilder(), NavigationBuilder(), ChapterBuilder()]


class EpubPackager(BasePackager):
    """
    EPUB 3 packager.

    Example:
        packager = EpubPackager()
        context = packager.collect(document)
        with open("book.epub", "wb") as f:
            result = packager.write(context, f)
    """

    def __init__(self,
                 config: Optional[PackagingConfig] = None,
                 builders: Optional[Sequence[BaseMarkupBuilder]] = None):
        """
        Initialize EPUB packager.

        Args:
            config: Packaging configuration (paths, compression level)
            builders: Markup builders run in order during collection;
                their order is the spine order
        """
        self.config = config or PackagingConfig()
        self.builders = list(builders) if builders is not None else default_builders()

    @property
    def package_format(self) -> str:
        return "EPUB"

    def collect(self, document: EpubDocument,
                modified: Optional[datetime] = None) -> BuildContext:
        """
        Register every resource of the package in a fresh resource graph.

        Args:
            document: Document to package
            modified: Modification timestamp; defaults to now

        Returns:
            BuildContext ready to be written

        Raises:
            EpubBuildError: On structural conflicts or malformed markup
        """
        context = BuildContext(document=document, config=self.config, graph=ResourceGraph())
        if modified is not None:
            context.modified = modified

        context.graph.reset()
        context.graph.add_root(context.root)

        for builder in self.builders:
            builder.build(context)

        logger.info(f"Collected {len(context.graph) - 1} resources for '{document.title}'")
        return context

    def archive_entries(self, context: BuildContext) -> Tuple[List[ArchiveEntry], List[str], List[str]]:
        """
        Produce every archive entry of the build, in write order.

        Returns:
            (entries, manifest ids, spine ids)
        """
        package_document, manifest_ids, spine_ids = generate_package_document(context)

        entries: List[ArchiveEntry] = [
            ("mimetype", MIMETYPE.encode('ascii'), True),
            (CONTAINER_PATH, generate_container_xml(context.config), False),
            (context.config.package_document_path, package_document, False),
        ]
        for resource in context.resources():
            entries.append((resource.path, resource.content or b"", False))

        return entries, manifest_ids, spine_ids

    def write(self, context: BuildContext, output: BinaryIO,
              cancel_event: Optional[Event] = None) -> PackageResult:
        """
        Write a collected build to a binary stream.

        A failed or cancelled write leaves the archive unfinalized: no central
        directory is written, so the partial output is not a readable ZIP.

        Args:
            context: Build returned by ``collect``
            output: Writable binary stream; left open
            cancel_event: Set to abort the build between entries

        Returns:
            PackageResult describing the archive

        Raises:
            BuildCancelledError: If cancelled or the stream was closed mid-write
        """
        entries, manifest_ids, spine_ids = self.archive_entries(context)
        date_time = _zip_date_time(context.modified)

        try:
            start = output.tell() if output.seekable() else 0
            zf = zipfile.ZipFile(output, 'w',
                                 compression=zipfile.ZIP_DEFLATED,
                                 compresslevel=self.config.compression_level)
            try:
                for name, payload, stored in entries:
                    if cancel_event is not None and cancel_event.is_set():
                        raise BuildCancelledError(f"build cancelled before writing {name}")
                    self._write_entry(zf, name, payload, stored, date_time)
            except BaseException:
                # Abandon the archive so close() never writes a central directory
                zf.fp = None
                raise
            zf.close()
        except ValueError as e:
            if getattr(output, 'closed', False):
                raise BuildCancelledError("output stream closed before the archive was finalized") from e
            raise

        output.flush()

        result = PackageResult(
            entries=[name for name, _, _ in entries],
            manifest_ids=manifest_ids,
            spine_ids=spine_ids,
            metadata={
                'identifier': context.document.identifier,
                'chapters': len(context.document.chapters),
                'modified': context.modified.isoformat(),
            },
        )
        if output.seekable():
            result.total_size_bytes = output.tell() - start

        logger.info(f"Wrote EPUB package: {len(entries)} entries, {result.total_size_bytes} bytes")
        return result

    def _write_entry(self, zf: zipfile.ZipFile, name: str, payload: bytes,
                     stored: bool, date_time: tuple) -> None:
        info = zipfile.ZipInfo(name, date_time=date_time)
        info.external_attr = 0o644 << 16
        if stored:
            zf.writestr(info, payload, compress_type=zipfile.ZIP_STORED)
        else:
            zf.writestr(info, payload,
                        compress_type=zipfile.ZIP_DEFLATED,
                        compresslevel=self.config.compression_level)
        logger.debug(f"Added archive entry: {name} ({len(payload)} bytes)")
