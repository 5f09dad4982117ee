"""
XML Utility Functions
=====================

lxml helpers shared by the markup builders and the package descriptor
builder: namespaces, element creation, fragment parsing, serialization
and path arithmetic for hrefs inside the archive.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
import logging
import posixpath

from lxml import etree

from epubgen_core.errors import MarkupError

logger = logging.getLogger(__name__)

XHTML_NS = "http://www.w3.org/1999/xhtml"
OPS_NS = "http://www.idpf.org/2007/ops"
OPF_NS = "http://www.idpf.org/2007/opf"
DC_NS = "http://purl.org/dc/elements/1.1/"
CONTAINER_NS = "urn:oasis:names:tc:opendocument:xmlns:container"
XML_NS = "http://www.w3.org/XML/1998/namespace"

XHTML_DOCTYPE = "<!DOCTYPE html>"


def local_name(element: Any) -> str:
    """
    Extract local name from element tag, stripping any namespace prefix.

    Args:
        element: XML element

    Returns:
        Local tag name without namespace

    Example:
        >>> elem = etree.Element("{http://www.w3.org/1999/xhtml}head")
        >>> local_name(elem)
        'head'
    """
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def qualified(namespace: str, tag_name: str) -> str:
    """Return the Clark-notation name ``{namespace}tag_name``."""
    return f"{{{namespace}}}{tag_name}"


def create_element(tag: str, text: Optional[str] = None,
                   attrib: Optional[Dict[str, str]] = None,
                   nsmap: Optional[dict] = None) -> Any:
    """
    Create an XML element with optional text and attributes.

    Attributes whose value is None are left out.

    Args:
        tag: Element tag name
        text: Optional text content
        attrib: Optional attributes dict
        nsmap: Optional namespace map

    Returns:
        New lxml Element
    """
    attrs = {k: v for k, v in (attrib or {}).items() if v is not None}
    elem = etree.Element(tag, attrib=attrs, nsmap=nsmap)
    if text:
        elem.text = text
    return elem


def sub_element(parent: Any, tag: str, text: Optional[str] = None,
                attrib: Optional[Dict[str, str]] = None) -> Any:
    """Append a child element, skipping None-valued attributes."""
    attrs = {k: v for k, v in (attrib or {}).items() if v is not None}
    elem = etree.SubElement(parent, tag, attrib=attrs)
    if text:
        elem.text = text
    return elem


def find_child(element: Any, name: str) -> Optional[Any]:
    """Find the first direct child with the given local name."""
    for child in element:
        if local_name(child) == name:
            return child
    return None


def parse_fragment(markup: str, wrapper: str, namespace: str = XHTML_NS) -> Any:
    """
    Parse a markup fragment by wrapping it in a single element.

    The fragment is embedded verbatim; it must be well-formed XML once
    wrapped. Unprefixed elements land in ``namespace``.

    Args:
        markup: Raw markup fragment
        wrapper: Local name of the wrapping element
        namespace: Default namespace for the fragment

    Returns:
        The wrapping lxml Element with the fragment as its content

    Raises:
        MarkupError: If the fragment is not well-formed
    """
    source = f'<{wrapper} xmlns="{namespace}" xmlns:epub="{OPS_NS}">{markup}</{wrapper}>'
    parser = etree.XMLParser(resolve_entities=False, strip_cdata=False)
    try:
        return etree.fromstring(source.encode('utf-8'), parser)
    except etree.XMLSyntaxError as e:
        raise MarkupError(f"content is not well-formed markup: {e}") from e


def serialize(root: Any, doctype: Optional[str] = None, pretty_print: bool = True) -> bytes:
    """Serialize an element tree to UTF-8 bytes with an XML declaration."""
    return etree.tostring(
        root,
        encoding='utf-8',
        xml_declaration=True,
        pretty_print=pretty_print,
        doctype=doctype,
    )


def relative_href(target: str, start_file: str) -> str:
    """
    Compute the href of ``target`` as seen from the document ``start_file``.

    Both paths are archive paths (forward slashes, root-relative).

    Example:
        >>> relative_href("epub/global.css", "epub/content/chapter-1.xhtml")
        '../global.css'
    """
    start_dir = posixpath.dirname(start_file) or "."
    return posixpath.relpath(target, start_dir)


def to_xml_date(moment: datetime) -> str:
    """
    Format a timestamp as an XML date in UTC (``CCYY-MM-DDThh:mm:ssZ``).

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
