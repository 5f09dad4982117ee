"""
Cover page builder.
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
from epubgen_core.xml.utils import sub_element

logger = logging.getLogger(__name__)


class CoverBuilder(BaseMarkupBuilder):
    """Builds the cover page showing the title and the author."""

    style_names = ("global", "cover")

    def build(self, context: BuildContext) -> List[EpubResource]:
        document = context.document
        path = context.config.cover_path
        styles = self.styles()

        html, body = xhtml_document(
            document.language,
            document.title,
            stylesheet_hrefs(context, path, styles),
        )
        cover = sub_element(body, h('div'), attrib={'class': 'cover'})
        sub_element(cover, h('h1'), text=document.title, attrib={'class': 'cover__title'})
        sub_element(cover, h('h2'), text=document.author, attrib={'class': 'cover__author'})

        resource = register_document(context, path, html, styles, include_in_spine=True)
        logger.debug(f"Built cover page: {path}")
        return [resource]
