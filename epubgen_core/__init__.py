"""
epubgen_core
============

Assembles a structured e-book (cover, navigation, chapters) into an
EPUB 3 package.

Architecture
------------

    epubgen_core/
    ├── document.py    - Document model (EpubDocument, EpubContent)
    ├── styles.py      - Stylesheet assets
    ├── config/        - Configuration management
    ├── xml/           - XML processing utilities
    ├── mapping/       - Resource graph and manifest identifiers
    ├── markup/        - Cover, navigation and chapter builders
    ├── packaging/     - Package descriptors and the EPUB packager
    └── write.py       - Stream and file output

Usage
-----

    from epubgen_core import EpubDocument, EpubContent, write_epub

    document = EpubDocument(
        identifier="urn:isbn:978-0-00-000000-0",
        language="en-US",
        title="Fire and Ice",
        author="Robert Frost",
        chapters=[EpubContent(content="<p>Some say the world will end in fire;</p>")],
    )
    result = write_epub("fire-and-ice.epub", document)
    print(result.summary())

"""

__version__ = "1.0.0"

from epubgen_core.config.settings import (
    EpubConfig,
    PackagingConfig,
    configure_logging,
    load_config,
    save_config,
)

from epubgen_core.document import (
    ChapterReference,
    EpubContent,
    EpubDocument,
)

from epubgen_core.errors import (
    BuildCancelledError,
    ChapterNotFoundError,
    DanglingDependencyError,
    EpubBuildError,
    MarkupError,
    StructuralConflictError,
)

from epubgen_core.mapping import (
    EpubResource,
    ResourceGraph,
    id_from_path,
)

from epubgen_core.packaging import (
    EpubPackager,
    PackageResult,
)

from epubgen_core.write import (
    write_epub,
    write_epub_stream,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "EpubConfig",
    "PackagingConfig",
    "configure_logging",
    "load_config",
    "save_config",
    # Document
    "ChapterReference",
    "EpubContent",
    "EpubDocument",
    # Errors
    "BuildCancelledError",
    "ChapterNotFoundError",
    "DanglingDependencyError",
    "EpubBuildError",
    "MarkupError",
    "StructuralConflictError",
    # Mapping
    "EpubResource",
    "ResourceGraph",
    "id_from_path",
    # Packaging
    "EpubPackager",
    "PackageResult",
    # Output
    "write_epub",
    "write_epub_stream",
]
