"""
Chapter Document Builder
========================

Builds one XHTML document per chapter. The chapter's markup is embedded
verbatim inside ``<main>``, after a heading with the resolved title.
Ids and paths derive from the chapter's position in the document.
"""

from typing import List
import logging

from epubgen_core.context import BuildContext
from epubgen_core.document import ChapterReference, EpubContent
from epubgen_core.mapping.resource_graph import EpubResource
from epubgen_core.markup.base import (
    BaseMarkupBuilder,
    h,
    register_document,
    stylesheet_hrefs,
    xhtml_document,
)
from epubgen_core.xml.utils import parse_fragment, sub_element

logger = logging.getLogger(__name__)


class ChapterBuilder(BaseMarkupBuilder):
    """Builds the content documents, one per chapter."""

    style_names = ("global", "content")

    def build(self, context: BuildContext) -> List[EpubResource]:
        return [self.build_chapter(context, chapter) for chapter in context.document.chapters]

    def build_chapter(self, context: BuildContext, chapter: EpubContent) -> EpubResource:
        """
        Build and register a single chapter document.

        Args:
            context: Current build
            chapter: Chapter of the build's document

        Returns:
            The registered chapter resource

        Raises:
            ChapterNotFoundError: If the chapter is not part of the document
            MarkupError: If the chapter content is not well-formed markup
        """
        ref = ChapterReference.for_chapter(context.document, chapter)
        path = context.config.chapter_path(ref.number)
        styles = self.styles()

        html, body = xhtml_document(
            context.document.language,
            ref.title,
            stylesheet_hrefs(context, path, styles),
        )
        article = sub_element(body, h('article'), attrib={'class': 'chapter'})
        sub_element(article, h('h1'), text=ref.title, attrib={'class': 'chapter__title'})
        article.append(parse_fragment(ref.chapter.content, 'main'))

        resource = register_document(
            context, path, html, styles,
            id=ref.chapter_id,
            include_in_spine=True,
        )
        logger.debug(f"Built chapter {ref.number}: {path}")
        return resource
