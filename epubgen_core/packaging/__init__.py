"""
Packaging Framework
===================

Provides the packaging interface and the EPUB implementation.

Components:
- BasePackager: Abstract base class for packagers
- PackageResult: Container for packaging results
- EpubPackager: EPUB (OCF ZIP) packager
- generate_container_xml / generate_package_document: descriptor files
"""

from epubgen_core.packaging.base import (
    BasePackager,
    PackageResult,
)

from epubgen_core.packaging.descriptor import (
    MIMETYPE,
    PACKAGE_MEDIA_TYPE,
    generate_container_xml,
    generate_package_document,
)

from epubgen_core.packaging.epub_packager import (
    EpubPackager,
    default_builders,
)

__all__ = [
    # Base classes
    "BasePackager",
    "PackageResult",
    # Descriptors
    "MIMETYPE",
    "PACKAGE_MEDIA_TYPE",
    "generate_container_xml",
    "generate_package_document",
    # EPUB packaging
    "EpubPackager",
    "default_builders",
]
