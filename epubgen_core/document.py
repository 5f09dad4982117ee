"""
Document Model
==============

Plain data structures describing the book to package, plus the chapter
reference used by the builders to derive stable ids, paths and titles.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from epubgen_core.errors import ChapterNotFoundError


@dataclass
class EpubContent:
    """A single piece of content within the document, normally one chapter."""

    content: str                 # Raw XHTML fragment, embedded verbatim
    title: Optional[str] = None  # Explicit title; defaults to "Chapter N"


@dataclass
class EpubDocument:
    """
    The book to package.

    Attributes:
        identifier: Globally unique identifier (ISBN, URL, UUID URN...)
        language: RFC 5646 language tag such as "en" or "en-US"
        title: Title of the book
        author: Author of the book
        chapters: Chapters in reading order
    """
    identifier: str
    language: str
    title: str
    author: str = ""
    chapters: List[EpubContent] = field(default_factory=list)


@dataclass(frozen=True)
class ChapterReference:
    """
    Pairs a chapter with its zero-based position in the document.

    Builders, including custom ones, obtain references through
    ``for_chapter``. An explicit title is used as given, even when empty.
    """

    index: int
    chapter: EpubContent

    @property
    def number(self) -> int:
        """One-based chapter number used for display, ids and paths."""
        return self.index + 1

    @property
    def title(self) -> str:
        if self.chapter.title is not None:
            return self.chapter.title
        return f"Chapter {self.number}"

    @property
    def chapter_id(self) -> str:
        return f"chapter-{self.number}"

    @classmethod
    def for_chapter(cls, document: EpubDocument, chapter: EpubContent) -> 'ChapterReference':
        """
        Locate a chapter in the document by identity.

        Args:
            document: Document owning the chapter
            chapter: Chapter object to locate

        Returns:
            ChapterReference with the chapter's position

        Raises:
            ChapterNotFoundError: If the chapter is not in document.chapters
        """
        for index, candidate in enumerate(document.chapters):
            if candidate is chapter:
                return cls(index=index, chapter=chapter)
        raise ChapterNotFoundError(f"chapter not found in document: {chapter.title}")
