"""
Markup Builders
===============

Builders for the XHTML documents of a package:

- CoverBuilder: title page
- NavigationBuilder: table of contents (navigation document)
- ChapterBuilder: one content document per chapter

All builders register their documents, and the stylesheets those
documents link to, in the build's resource graph.
"""

from epubgen_core.markup.base import (
    BaseMarkupBuilder,
    CSS_MEDIA_TYPE,
    XHTML_MEDIA_TYPE,
    register_document,
    stylesheet_hrefs,
    xhtml_document,
)
from epubgen_core.markup.chapter import ChapterBuilder
from epubgen_core.markup.cover import CoverBuilder
from epubgen_core.markup.navigation import NavigationBuilder

__all__ = [
    "BaseMarkupBuilder",
    "CSS_MEDIA_TYPE",
    "XHTML_MEDIA_TYPE",
    "register_document",
    "stylesheet_hrefs",
    "xhtml_document",
    "ChapterBuilder",
    "CoverBuilder",
    "NavigationBuilder",
]
