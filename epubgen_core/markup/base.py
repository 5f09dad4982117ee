"""
Markup Builder Base
===================

Shared XHTML scaffolding and the style injection protocol used by the
cover, navigation and chapter builders.

Each builder creates its full ``<head>`` (title and stylesheet links)
before the body is attached, then registers the document and the
stylesheets it links to in the build's resource graph.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple
import logging

from epubgen_core.context import BuildContext
from epubgen_core.errors import MarkupError
from epubgen_core.mapping.resource_graph import EpubResource
from epubgen_core.styles import select_styles
from epubgen_core.xml.utils import (
    XHTML_DOCTYPE,
    XHTML_NS,
    XML_NS,
    OPS_NS,
    create_element,
    find_child,
    qualified,
    relative_href,
    serialize,
    sub_element,
)

logger = logging.getLogger(__name__)

XHTML_MEDIA_TYPE = "application/xhtml+xml"
CSS_MEDIA_TYPE = "text/css"

XHTML_NSMAP = {None: XHTML_NS, 'epub': OPS_NS}


def h(tag: str) -> str:
    """Qualified XHTML tag name."""
    return qualified(XHTML_NS, tag)


def stylesheet_hrefs(context: BuildContext, document_path: str,
                     styles: Dict[str, str]) -> List[str]:
    """
    Hrefs of the named styles as seen from the document at ``document_path``.

    Args:
        context: Current build
        document_path: Archive path of the document linking the styles
        styles: Style name -> style text

    Returns:
        One href per style, in the order of ``styles``
    """
    return [
        relative_href(context.config.stylesheet_path(name), document_path)
        for name in styles
    ]


def xhtml_document(language: str, title: str,
                   hrefs: Optional[List[str]] = None) -> Tuple[Any, Any]:
    """
    Create an XHTML root with a complete head and an empty body.

    Args:
        language: Language tag for ``xml:lang`` and ``lang``
        title: Text of the ``<title>`` element
        hrefs: Hrefs of stylesheets to link from the head

    Returns:
        (html root element, body element)
    """
    html = create_element(h('html'), nsmap=XHTML_NSMAP, attrib={
        qualified(XML_NS, 'lang'): language,
        'lang': language,
    })

    head = sub_element(html, h('head'))
    sub_element(head, h('title'), text=title)
    for href in hrefs or []:
        sub_element(head, h('link'), attrib={
            'rel': 'stylesheet',
            'type': CSS_MEDIA_TYPE,
            'href': href,
        })

    body = sub_element(html, h('body'))
    return html, body


def register_stylesheets(context: BuildContext, document_path: str,
                         styles: Dict[str, str]) -> None:
    """Register each style as a stylesheet required by ``document_path``."""
    for name, text in styles.items():
        context.graph.upsert(
            EpubResource(
                path=context.config.stylesheet_path(name),
                media_type=CSS_MEDIA_TYPE,
                content=text.encode('utf-8'),
            ),
            required_by=document_path,
        )


def register_document(context: BuildContext,
                      path: str,
                      html: Any,
                      styles: Optional[Dict[str, str]] = None,
                      **fields) -> EpubResource:
    """
    Register an XHTML document and the stylesheets it links to.

    A placeholder for the document is registered first so the stylesheet
    edges have a node to attach to; the serialized document is merged
    into it afterwards.

    Args:
        context: Current build
        path: Archive path of the document
        html: Root element built by ``xhtml_document``
        styles: Style name -> style text linked from the document's head
        **fields: Extra EpubResource fields (id, properties, include_in_spine)

    Returns:
        The registered resource

    Raises:
        MarkupError: If styles are requested for a document without a head
            element and strict markup is enabled
    """
    graph = context.graph

    if not graph.contains(path):
        graph.upsert(EpubResource(path=path, media_type=XHTML_MEDIA_TYPE), required_by=context.root)

    if styles:
        if find_child(html, 'head') is None:
            if context.config.strict_markup:
                raise MarkupError(f"document has no head element to link styles from: {path}")
            logger.warning(f"Skipping styles for {path}: document has no head element")
        else:
            register_stylesheets(context, path, styles)

    content = serialize(html, doctype=XHTML_DOCTYPE, pretty_print=context.config.pretty_print)
    return graph.upsert(
        EpubResource(path=path, media_type=XHTML_MEDIA_TYPE, content=content, **fields),
        required_by=context.root,
    )


class BaseMarkupBuilder(ABC):
    """
    Abstract base class for document builders.

    Subclasses build one or more XHTML documents and register them in the
    build's resource graph through ``register_document``.

    Example:
        class ColophonBuilder(BaseMarkupBuilder):
            style_names = ("global",)

            def build(self, context):
                path = f"{context.config.metadata_root}/colophon.xhtml"
                styles = self.styles()
                html, body = xhtml_document(
                    context.document.language, "Colophon",
                    stylesheet_hrefs(context, path, styles),
                )
                ...
                return [register_document(context, path, html, styles)]
    """

    #: Named styles linked from every document this builder emits
    style_names: Tuple[str, ...] = ("global",)

    def styles(self) -> Dict[str, str]:
        """Style name -> style text for this builder's documents."""
        return select_styles(*self.style_names)

    @abstractmethod
    def build(self, context: BuildContext) -> List[EpubResource]:
        """
        Build and register this builder's documents.

        Args:
            context: Current build

        Returns:
            The registered document resources, in registration order
        """
        pass
