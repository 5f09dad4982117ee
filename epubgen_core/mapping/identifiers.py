"""
Manifest identifiers derived from archive paths.
"""

import re

_SEPARATOR_RUN = re.compile(r"[./_-]+")


def id_from_path(path: str) -> str:
    """
    Derive a manifest id from a root-relative archive path.

    Every run of slashes, dots, underscores and hyphens collapses into a
    single hyphen. The mapping is deterministic but not injective; callers
    are responsible for not generating paths that collide.

    Example:
        >>> id_from_path("epub/content/chapter-1.xhtml")
        'epub-content-chapter-1-xhtml'
    """
    return _SEPARATOR_RUN.sub("-", path)
