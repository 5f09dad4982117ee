"""
Build Errors
============

Exception taxonomy for EPUB package builds. Every error raised during a
build derives from EpubBuildError and is propagated to the caller; a build
either produces a complete archive or raises.
"""


class EpubBuildError(Exception):
    """Base class for all package build failures."""


class StructuralConflictError(EpubBuildError):
    """A resource path was registered with two different media types."""

    def __init__(self, path: str, existing: str, requested: str):
        self.path = path
        self.existing = existing
        self.requested = requested
        super().__init__(
            f"resource '{path}' is already registered as '{existing}', "
            f"cannot re-register it as '{requested}'"
        )


class DanglingDependencyError(EpubBuildError):
    """A dependency edge references a node that is not registered."""

    def __init__(self, node: str):
        self.node = node
        super().__init__(f"node does not exist in the resource graph: {node}")


class ChapterNotFoundError(EpubBuildError):
    """A chapter was looked up that is not part of the document."""


class MarkupError(EpubBuildError):
    """A markup document could not be built or parsed."""


class BuildCancelledError(EpubBuildError):
    """The build was cancelled or its output stream went away mid-write."""
