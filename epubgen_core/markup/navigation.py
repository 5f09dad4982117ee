"""
Navigation Document Builder
===========================

Builds the EPUB navigation document: a ``<nav epub:type="toc">`` landmark
with one list entry per chapter, in document order.
"""

from typing import List
import logging

from epubgen_core.context import BuildContext
from epubgen_core.mapping.resource_graph import EpubResource
from epubgen_core.markup.base import (
    BaseMarkupBuilder,
    h,
    register_document,
    stylesheet_hrefs,
    xhtml_document,
)
from epubgen_core.xml.utils import OPS_NS, qualified, relative_href, sub_element

logger = logging.getLogger(__name__)

NAV_ID = "toc"
NAV_LIST_ID = "tocList"


class NavigationBuilder(BaseMarkupBuilder):
    """
    Builds the table of contents.

    The document carries the ``nav`` manifest property and is part of the
    spine.
    """

    style_names = ("global", "navigation")

    def build(self, context: BuildContext) -> List[EpubResource]:
        """
        Build and register the navigation document.

        Args:
            context: Current build

        Returns:
            List with the navigation resource
        """
        config = context.config
        path = config.navigation_path
        styles = self.styles()

        html, body = xhtml_document(
            context.document.language,
            context.document.title,
            stylesheet_hrefs(context, path, styles),
        )

        nav = sub_element(body, h('nav'), attrib={
            qualified(OPS_NS, 'type'): 'toc',
            'id': NAV_ID,
        })
        # TODO: translate the heading to the document language
        sub_element(nav, h('h2'), text=config.navigation_heading)
        contents = sub_element(nav, h('ol'), attrib={'class': 'toc', 'id': NAV_LIST_ID})

        chapters = context.chapters()
        for ref in chapters:
            item = sub_element(contents, h('li'), attrib={'id': ref.chapter_id})
            sub_element(item, h('a'), text=ref.title, attrib={
                'href': relative_href(config.chapter_path(ref.number), path),
            })

        resource = register_document(
            context, path, html, styles,
            properties="nav",
            include_in_spine=True,
        )
        logger.debug(f"Built navigation document with {len(chapters)} entries")
        return [resource]
