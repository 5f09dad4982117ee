"""
Shared fixtures for the epubgen_core test suite.

Run with: pytest tests/ -v
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from epubgen_core import EpubContent, EpubDocument

XMLNS = {
    'x': "http://www.w3.org/1999/xhtml",
    'epub': "http://www.idpf.org/2007/ops",
    'opf': "http://www.idpf.org/2007/opf",
    'dc': "http://purl.org/dc/elements/1.1/",
    'c': "urn:oasis:names:tc:opendocument:xmlns:container",
}

MODIFIED = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def document():
    """Two-chapter document, the first with an explicit title."""
    return EpubDocument(
        identifier="urn:uuid:3f2c9a52-8d4e-4b8a-9a57-1b2f0c7e6d11",
        language="en-US",
        title="Fire and Ice",
        author="Robert Frost",
        chapters=[
            EpubContent(title="Prologue", content="<p>Some say the world will end in fire,</p>"),
            EpubContent(content="<p>Some say in ice.</p>"),
        ],
    )


@pytest.fixture
def hello_document():
    """One untitled chapter containing plain text."""
    return EpubDocument(
        identifier="__test-document",
        language="en-US",
        title="Test Document",
        author="Test Author",
        chapters=[EpubContent(content="Hello, world")],
    )
