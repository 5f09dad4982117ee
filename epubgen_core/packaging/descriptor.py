"""
Package Descriptors
===================

Generates the two descriptor files of an EPUB container:

- ``META-INF/container.xml``, pointing at the package document
- the package document (OPF) with metadata, manifest and spine

The manifest lists every resource reachable from the package document
node of the resource graph; the spine lists those marked for the spine,
in the same order.
"""

from typing import Any, List, Tuple
import logging

from epubgen_core.config.settings import PackagingConfig
from epubgen_core.context import BuildContext
from epubgen_core.xml.utils import (
    CONTAINER_NS,
    DC_NS,
    OPF_NS,
    create_element,
    qualified,
    relative_href,
    serialize,
    sub_element,
    to_xml_date,
)

logger = logging.getLogger(__name__)

MIMETYPE = "application/epub+zip"
PACKAGE_MEDIA_TYPE = "application/oebps-package+xml"

# The id of the dc:identifier element, referenced by unique-identifier
IDENTIFIER_ID = "identifier"
TITLE_ID = "title"


def generate_container_xml(config: PackagingConfig) -> bytes:
    """
    Create the OCF container file.

    Args:
        config: Packaging configuration providing the package document path

    Returns:
        container.xml content as bytes
    """
    container = create_element(qualified(CONTAINER_NS, 'container'),
                               attrib={'version': '1.0'},
                               nsmap={None: CONTAINER_NS})
    rootfiles = sub_element(container, qualified(CONTAINER_NS, 'rootfiles'))
    sub_element(rootfiles, qualified(CONTAINER_NS, 'rootfile'), attrib={
        'full-path': config.package_document_path,
        'media-type': PACKAGE_MEDIA_TYPE,
    })
    return serialize(container, pretty_print=config.pretty_print)


def _opf(tag: str) -> str:
    return qualified(OPF_NS, tag)


def _build_metadata(package: Any, context: BuildContext) -> None:
    document = context.document
    metadata = sub_element(package, _opf('metadata'))

    sub_element(metadata, _opf('meta'), text=to_xml_date(context.modified),
                attrib={'property': 'dcterms:modified'})
    sub_element(metadata, qualified(DC_NS, 'identifier'), text=document.identifier,
                attrib={'id': IDENTIFIER_ID})
    sub_element(metadata, qualified(DC_NS, 'title'), text=document.title,
                attrib={'id': TITLE_ID})
    sub_element(metadata, qualified(DC_NS, 'creator'), text=document.author)
    sub_element(metadata, qualified(DC_NS, 'language'), text=document.language)


def build_manifest(package: Any, context: BuildContext) -> Tuple[List[str], List[str]]:
    """
    Append manifest and spine to the package element.

    Args:
        package: The ``<package>`` element
        context: Collected build

    Returns:
        (manifest ids, spine ids), both in traversal order
    """
    manifest = sub_element(package, _opf('manifest'))
    spine = sub_element(package, _opf('spine'))
    descriptor_path = context.config.package_document_path

    manifest_ids = []
    spine_ids = []
    for resource in context.resources():
        item_id = resource.manifest_id
        sub_element(manifest, _opf('item'), attrib={
            'id': item_id,
            'href': relative_href(resource.path, descriptor_path),
            'media-type': resource.media_type,
            'properties': resource.properties,
        })
        manifest_ids.append(item_id)

        if resource.include_in_spine:
            sub_element(spine, _opf('itemref'), attrib={'idref': item_id})
            spine_ids.append(item_id)

    return manifest_ids, spine_ids


def generate_package_document(context: BuildContext) -> Tuple[bytes, List[str], List[str]]:
    """
    Create the package document.

    Args:
        context: Collected build

    Returns:
        (OPF content as bytes, manifest ids, spine ids)
    """
    package = create_element(_opf('package'), attrib={
        'version': '3.0',
        'unique-identifier': IDENTIFIER_ID,
    }, nsmap={None: OPF_NS, 'dc': DC_NS})

    _build_metadata(package, context)
    manifest_ids, spine_ids = build_manifest(package, context)

    logger.debug(f"Package document: {len(manifest_ids)} manifest items, "
                 f"{len(spine_ids)} spine items")
    return serialize(package, pretty_print=context.config.pretty_print), manifest_ids, spine_ids
