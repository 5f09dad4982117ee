"""
EPUB Output
===========

Write an EpubDocument to a stream or a file.
"""

from datetime import datetime
from pathlib import Path
from threading import Event
from typing import BinaryIO, Optional, Union
import logging

from epubgen_core.config.settings import EpubConfig
from epubgen_core.document import EpubDocument
from epubgen_core.packaging.base import PackageResult
from epubgen_core.packaging.epub_packager import EpubPackager

logger = logging.getLogger(__name__)


def write_epub_stream(stream: BinaryIO,
                      document: EpubDocument,
                      config: Optional[EpubConfig] = None,
                      modified: Optional[datetime] = None,
                      cancel_event: Optional[Event] = None) -> PackageResult:
    """
    Write the document as an EPUB archive to a writable binary stream.

    The stream is left open.
    """
    config = config or EpubConfig()
    packager = EpubPackager(config.packaging)
    context = packager.collect(document, modified=modified)
    return packager.write(context, stream, cancel_event=cancel_event)


def write_epub(filename: Union[str, Path],
               document: EpubDocument,
               config: Optional[EpubConfig] = None,
               modified: Optional[datetime] = None,
               cancel_event: Optional[Event] = None) -> PackageResult:
    """
    Write the document as an EPUB file.

    Resources are collected before the file is opened, so a document that
    fails to assemble leaves no file behind. If writing fails, the partial
    file is removed before the error is re-raised.

    Args:
        filename: Output path
        document: Document to package
        config: Build configuration
        modified: Modification timestamp; defaults to now
        cancel_event: Set to abort the build between archive entries

    Returns:
        PackageResult with output_path and total_size_bytes set
    """
    output_path = Path(filename)
    config = config or EpubConfig()
    packager = EpubPackager(config.packaging)

    context = packager.collect(document, modified=modified)

    try:
        with open(output_path, 'wb') as f:
            result = packager.write(context, f, cancel_event=cancel_event)
    except Exception as e:
        logger.error(f"Packaging failed, removing partial file {output_path}: {e}", exc_info=True)
        output_path.unlink(missing_ok=True)
        raise

    result.output_path = output_path
    result.total_size_bytes = output_path.stat().st_size
    logger.info(f"Created package: {output_path} ({result.total_size_bytes} bytes)")
    return result
