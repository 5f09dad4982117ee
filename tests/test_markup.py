"""
Tests for the cover, navigation and chapter builders.
"""

import logging

import pytest
from lxml import etree

from conftest import MODIFIED, XMLNS
from epubgen_core import ChapterNotFoundError, EpubContent, MarkupError, PackagingConfig
from epubgen_core.context import BuildContext
from epubgen_core.markup import (
    ChapterBuilder,
    CoverBuilder,
    NavigationBuilder,
    register_document,
    xhtml_document,
)
from epubgen_core.xml.utils import XHTML_NS, create_element, qualified, sub_element


def make_context(document, **config_overrides):
    context = BuildContext(document=document, config=PackagingConfig(**config_overrides),
                           modified=MODIFIED)
    context.graph.add_root(context.root)
    return context


def parse(resource):
    return etree.fromstring(resource.content)


def stylesheet_hrefs_of(root):
    return root.xpath("/x:html/x:head/x:link[@rel='stylesheet']/@href", namespaces=XMLNS)


class TestCoverBuilder:
    """Tests for the cover page."""

    def test_cover_shows_title_and_author(self, document):
        context = make_context(document)
        [cover] = CoverBuilder().build(context)
        root = parse(cover)

        assert root.xpath("string(/x:html/x:head/x:title)", namespaces=XMLNS) == "Fire and Ice"
        assert root.xpath("string(//x:h1)", namespaces=XMLNS) == "Fire and Ice"
        assert root.xpath("string(//x:h2)", namespaces=XMLNS) == "Robert Frost"

    def test_cover_registration(self, document):
        context = make_context(document)
        [cover] = CoverBuilder().build(context)
        assert cover.path == "epub/cover.xhtml"
        assert cover.media_type == "application/xhtml+xml"
        assert cover.include_in_spine is True

    def test_cover_links_global_and_cover_styles(self, document):
        context = make_context(document)
        [cover] = CoverBuilder().build(context)
        assert stylesheet_hrefs_of(parse(cover)) == ["global.css", "cover.css"]
        assert context.graph.contains("epub/global.css")
        assert context.graph.contains("epub/cover.css")
        assert context.graph.get("epub/cover.css").media_type == "text/css"

    def test_document_language(self, document):
        context = make_context(document)
        [cover] = CoverBuilder().build(context)
        root = parse(cover)
        assert root.get("lang") == "en-US"
        assert root.get("{http://www.w3.org/XML/1998/namespace}lang") == "en-US"


class TestNavigationBuilder:
    """Tests for the navigation document."""

    def test_nav_landmark(self, document):
        context = make_context(document)
        [nav] = NavigationBuilder().build(context)
        root = parse(nav)
        navs = root.xpath("//x:nav[@epub:type='toc']", namespaces=XMLNS)
        assert len(navs) == 1

    def test_one_entry_per_chapter_in_document_order(self, document):
        context = make_context(document)
        [nav] = NavigationBuilder().build(context)
        root = parse(nav)

        labels = root.xpath("//x:nav/x:ol/x:li/x:a/text()", namespaces=XMLNS)
        hrefs = root.xpath("//x:nav/x:ol/x:li/x:a/@href", namespaces=XMLNS)
        assert labels == ["Prologue", "Chapter 2"]
        assert hrefs == ["content/chapter-1.xhtml", "content/chapter-2.xhtml"]

    def test_order_is_not_sorted(self, document):
        """Entries follow array order even when titles would sort differently."""
        document.chapters = [
            EpubContent(title="Zebra", content="z"),
            EpubContent(title="Aardvark", content="a"),
        ]
        context = make_context(document)
        [nav] = NavigationBuilder().build(context)
        labels = parse(nav).xpath("//x:li/x:a/text()", namespaces=XMLNS)
        assert labels == ["Zebra", "Aardvark"]

    def test_nav_registration(self, document):
        context = make_context(document)
        [nav] = NavigationBuilder().build(context)
        assert nav.path == "epub/nav.xhtml"
        assert nav.properties == "nav"
        assert nav.include_in_spine is True
        assert stylesheet_hrefs_of(parse(nav)) == ["global.css", "navigation.css"]

    def test_configured_heading(self, document):
        context = make_context(document, navigation_heading="Contents")
        [nav] = NavigationBuilder().build(context)
        assert parse(nav).xpath("string(//x:nav/x:h2)", namespaces=XMLNS) == "Contents"


class TestChapterBuilder:
    """Tests for content documents."""

    def test_one_document_per_chapter(self, document):
        context = make_context(document)
        chapters = ChapterBuilder().build(context)
        assert [c.path for c in chapters] == [
            "epub/content/chapter-1.xhtml",
            "epub/content/chapter-2.xhtml",
        ]
        assert [c.id for c in chapters] == ["chapter-1", "chapter-2"]
        assert all(c.include_in_spine for c in chapters)

    def test_heading_precedes_content(self, hello_document):
        context = make_context(hello_document)
        [chapter] = ChapterBuilder().build(context)
        root = parse(chapter)

        article = root.xpath("//x:article", namespaces=XMLNS)[0]
        children = [etree.QName(child).localname for child in article]
        assert children == ["h1", "main"]
        assert article[0].text == "Chapter 1"
        assert root.xpath("string(//x:main)", namespaces=XMLNS) == "Hello, world"

    def test_markup_embedded_verbatim(self, document):
        context = make_context(document)
        chapters = ChapterBuilder().build(context)
        paragraphs = parse(chapters[0]).xpath("//x:main/x:p/text()", namespaces=XMLNS)
        assert paragraphs == ["Some say the world will end in fire,"]

    def test_styles_relative_to_content_directory(self, document):
        context = make_context(document)
        chapters = ChapterBuilder().build(context)
        assert stylesheet_hrefs_of(parse(chapters[0])) == ["../global.css", "../content.css"]

    def test_chapters_share_one_stylesheet(self, document):
        context = make_context(document)
        ChapterBuilder().build(context)
        css = [r.path for r in context.resources() if r.media_type == "text/css"]
        assert css == ["epub/global.css", "epub/content.css"]

    def test_malformed_content_raises(self, document):
        document.chapters = [EpubContent(content="<p>unclosed")]
        context = make_context(document)
        with pytest.raises(MarkupError):
            ChapterBuilder().build(context)

    def test_foreign_chapter_raises(self, document):
        """A chapter that is not part of the document has no position."""
        context = make_context(document)
        stranger = EpubContent(content="<p>Some say in ice.</p>", title="Prologue")
        with pytest.raises(ChapterNotFoundError):
            ChapterBuilder().build_chapter(context, stranger)
        assert not context.graph.contains("epub/content/chapter-1.xhtml")

    def test_build_chapter_uses_document_position(self, document):
        context = make_context(document)
        resource = ChapterBuilder().build_chapter(context, document.chapters[1])
        assert resource.path == "epub/content/chapter-2.xhtml"
        assert resource.id == "chapter-2"

    def test_empty_title_is_kept(self, document):
        """An explicit empty title is not replaced by the numbered label."""
        document.chapters[0].title = ""
        context = make_context(document)
        [chapter, _] = ChapterBuilder().build(context)
        heading = parse(chapter).xpath("//x:h1[@class='chapter__title']", namespaces=XMLNS)[0]
        assert not heading.text


class TestStyleInjection:
    """Tests for documents lacking a head element."""

    @staticmethod
    def headless_html():
        html = create_element(qualified(XHTML_NS, 'html'), nsmap={None: XHTML_NS})
        sub_element(html, qualified(XHTML_NS, 'body'))
        return html

    def test_strict_mode_raises(self, document):
        context = make_context(document)
        with pytest.raises(MarkupError):
            register_document(context, "epub/extra.xhtml", self.headless_html(),
                              {'global': "body {}"})

    def test_lenient_mode_skips_styles(self, document, caplog):
        context = make_context(document, strict_markup=False)
        with caplog.at_level(logging.WARNING):
            resource = register_document(context, "epub/extra.xhtml", self.headless_html(),
                                         {'global': "body {}"})
        assert resource.content
        assert not context.graph.contains("epub/global.css")
        assert "no head element" in caplog.text

    def test_document_with_head_gets_links(self, document):
        context = make_context(document)
        html, body = xhtml_document("en", "Extra", ["global.css"])
        register_document(context, "epub/extra.xhtml", html, {'global': "body {}"})
        assert context.graph.get("epub/global.css").content == b"body {}"
        assert context.graph.dependencies_of("epub/extra.xhtml") == ["epub/global.css"]
