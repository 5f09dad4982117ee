"""
Tests for archive assembly.
"""

import io
import threading
import zipfile

import pytest
from lxml import etree

from conftest import MODIFIED, XMLNS
from epubgen_core import (
    BuildCancelledError,
    EpubContent,
    EpubPackager,
    MarkupError,
    PackagingConfig,
)
from epubgen_core.packaging import BasePackager


def build_bytes(document, **config_overrides):
    packager = EpubPackager(PackagingConfig(**config_overrides))
    buffer = io.BytesIO()
    result = packager.package(document, buffer, modified=MODIFIED)
    return buffer.getvalue(), result


class TestMimetypeEntry:
    """The mimetype marker must be first and stored."""

    def test_first_entry_is_mimetype(self, document):
        data, _ = build_bytes(document)
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            first = zf.infolist()[0]
            assert first.filename == "mimetype"
            assert first.compress_type == zipfile.ZIP_STORED
            assert zf.read("mimetype") == b"application/epub+zip"

    def test_mimetype_readable_at_fixed_offset(self, document):
        """Readers sniff the format from the bytes right after the first local header."""
        data, _ = build_bytes(document)
        assert data[:4] == b"PK\x03\x04"
        assert data[30:38] == b"mimetype"
        assert data[38:58] == b"application/epub+zip"

    def test_other_entries_are_deflated(self, document):
        data, _ = build_bytes(document)
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            for info in zf.infolist()[1:]:
                assert info.compress_type == zipfile.ZIP_DEFLATED, info.filename


class TestEntryOrder:
    """Tests for the fixed archive layout."""

    def test_entry_order(self, document):
        data, result = build_bytes(document)
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            names = zf.namelist()
        assert names == [
            "mimetype",
            "META-INF/container.xml",
            "epub/document.opf",
            "epub/cover.xhtml",
            "epub/nav.xhtml",
            "epub/content/chapter-1.xhtml",
            "epub/content/chapter-2.xhtml",
            "epub/global.css",
            "epub/cover.css",
            "epub/navigation.css",
            "epub/content.css",
        ]
        assert result.entries == names

    def test_manifest_matches_content_entries(self, document):
        data, result = build_bytes(document)
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            content_entries = zf.namelist()[3:]
        assert len(result.manifest_ids) == len(content_entries)

    def test_custom_metadata_root(self, document):
        data, _ = build_bytes(document, metadata_root="OEBPS", content_root="OEBPS/text")
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            names = zf.namelist()
            container = etree.fromstring(zf.read("META-INF/container.xml"))
        assert names[2] == "OEBPS/document.opf"
        assert "OEBPS/text/chapter-1.xhtml" in names
        assert container.xpath("string(//c:rootfile/@full-path)", namespaces=XMLNS) == "OEBPS/document.opf"


class TestRoundTrip:

    def test_chapter_content_survives(self, hello_document):
        data, _ = build_bytes(hello_document)
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            chapter = zf.read("epub/content/chapter-1.xhtml")
        assert b"Hello, world" in chapter
        root = etree.fromstring(chapter)
        assert root.xpath("string(//x:main)", namespaces=XMLNS) == "Hello, world"

    def test_stylesheet_content_passes_through(self, document):
        from epubgen_core.styles import STYLES

        data, _ = build_bytes(document)
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            assert zf.read("epub/global.css").decode("utf-8") == STYLES["global"]


class TestDeterminism:

    def test_same_input_same_spine(self, document):
        _, first = build_bytes(document)
        _, second = build_bytes(document)
        assert first.spine_ids == second.spine_ids

    def test_same_input_same_bytes(self, document):
        first, _ = build_bytes(document)
        second, _ = build_bytes(document)
        assert first == second

    def test_each_build_starts_fresh(self, document):
        """Building twice with one packager does not accumulate resources."""
        packager = EpubPackager()
        first = packager.collect(document, modified=MODIFIED)
        second = packager.collect(document, modified=MODIFIED)
        assert first.graph is not second.graph
        assert len(first.resources()) == len(second.resources())


class TestFailures:
    """Tests for build failure propagation."""

    def test_collect_failure_writes_nothing(self, document):
        document.chapters.append(EpubContent(content="<p>broken"))
        packager = EpubPackager()
        buffer = io.BytesIO()
        with pytest.raises(MarkupError):
            packager.package(document, buffer)
        assert buffer.getvalue() == b""

    def test_cancel_event(self, document):
        packager = EpubPackager()
        context = packager.collect(document, modified=MODIFIED)
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(BuildCancelledError):
            packager.write(context, io.BytesIO(), cancel_event=cancel)

    def test_package_honours_cancel_event(self, document):
        """package() hands the cancel event through to write()."""
        cancel = threading.Event()
        cancel.set()
        buffer = io.BytesIO()
        with pytest.raises(BuildCancelledError):
            EpubPackager().package(document, buffer, modified=MODIFIED, cancel_event=cancel)
        assert not zipfile.is_zipfile(buffer)

    def test_unknown_keyword_is_rejected(self, document):
        """Misspelled options fail loudly instead of being ignored."""
        with pytest.raises(TypeError):
            EpubPackager().collect(document, cancel=threading.Event())

    def test_cancel_mid_write_leaves_unreadable_archive(self, document):
        """Entries already written are not finalized into a valid ZIP."""

        class CancelAfter(threading.Event):
            def __init__(self, checks):
                super().__init__()
                self.remaining = checks

            def is_set(self):
                self.remaining -= 1
                return self.remaining < 0

        packager = EpubPackager()
        context = packager.collect(document, modified=MODIFIED)
        buffer = io.BytesIO()
        with pytest.raises(BuildCancelledError):
            packager.write(context, buffer, cancel_event=CancelAfter(3))

        assert buffer.getvalue().startswith(b"PK")
        assert not zipfile.is_zipfile(buffer)
        with pytest.raises(zipfile.BadZipFile):
            zipfile.ZipFile(buffer)

    def test_closed_output_stream(self, document):
        packager = EpubPackager()
        context = packager.collect(document, modified=MODIFIED)
        output = io.BytesIO()
        output.close()
        with pytest.raises(BuildCancelledError):
            packager.write(context, output)


class TestPackageResult:

    def test_result_counts(self, document):
        data, result = build_bytes(document)
        assert result.total_size_bytes == len(data)
        assert result.chapters_packaged == 2
        assert len(result.spine_ids) == 4
        assert "Spine items: 4" in result.summary()

    def test_is_a_packager(self):
        packager = EpubPackager()
        assert isinstance(packager, BasePackager)
        assert packager.package_format == "EPUB"
