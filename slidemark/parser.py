"""Split a heading-structured document into navigable pages.

The document is scanned once, line by line. A single leading top-level
heading (``# ``) becomes the title page; every second-level heading
(``## ``) opens a section, and third-level headings (``### ``) inside a
section split it into sub-pages that keep the section title.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional

from .constants import PresenterConstants
from .model import Page, PageKind

logger = logging.getLogger(__name__)

# A heading needs text after its marker
TITLE_HEADING = re.compile(r"^#\s+(\S.*)$")
SECTION_HEADING = re.compile(r"^##\s+(\S.*)$")
SUBSECTION_HEADING = re.compile(r"^###\s+(\S.*)$")
# Any heading that ends the title page body
TITLE_BOUNDARY = re.compile(r"^#{1,3}\s+\S")


class DocumentStructureError(Exception):
    """Raised when a document yields no pages to present."""


class ParserState(Enum):
    SCANNING_FOR_TITLE = "scanning_for_title"
    SCANNING_FOR_SECTION = "scanning_for_section"
    IN_SECTION = "in_section"
    IN_SUBSECTION = "in_subsection"


class DocumentParser:
    """Single-pass state machine that turns lines into Page records.

    Feed lines with :meth:`feed` and collect the result with :meth:`finish`.
    Body lines accumulate in one buffer that is flushed whenever a heading
    closes the block it belongs to.
    """

    def __init__(self, has_title: bool = True):
        self.state = (ParserState.SCANNING_FOR_TITLE if has_title
                      else ParserState.SCANNING_FOR_SECTION)
        self.pages: List[Page] = []
        self._buffer: List[str] = []
        self._title: Optional[str] = None
        self._section_title: Optional[str] = None
        self._subtitle: Optional[str] = None
        self._section_pages: List[Page] = []

    def feed(self, line: str) -> None:
        """Consume one line of the document."""
        if self.state is ParserState.SCANNING_FOR_TITLE:
            if self._title is None:
                match = TITLE_HEADING.match(line)
                if match:
                    self._title = match.group(1).strip()
                return
            if not TITLE_BOUNDARY.match(line):
                self._buffer.append(line)
                return
            # The heading that ends the title body is handled below
            self._emit_title()

        section = SECTION_HEADING.match(line)

        if self.state is ParserState.SCANNING_FOR_SECTION:
            # Orphan sub-headings and stray text before a section are ignored
            if section:
                self._open_section(section.group(1).strip())
            return

        if section:
            self._close_section()
            self._open_section(section.group(1).strip())
            return

        subsection = SUBSECTION_HEADING.match(line)
        if subsection:
            self._close_block()
            self._subtitle = subsection.group(1).strip()
            self.state = ParserState.IN_SUBSECTION
            return

        self._buffer.append(line)

    def finish(self) -> List[Page]:
        """Flush any open block and return the pages in document order."""
        if self.state is ParserState.SCANNING_FOR_TITLE:
            if self._title is not None:
                self._emit_title()
        elif self.state in (ParserState.IN_SECTION, ParserState.IN_SUBSECTION):
            self._close_section()
        self.state = ParserState.SCANNING_FOR_SECTION
        return self.pages

    def _take_buffer(self) -> str:
        text = "\n".join(self._buffer).strip()
        self._buffer = []
        return text

    def _emit_title(self) -> None:
        self.pages.append(Page(
            kind=PageKind.TITLE,
            title=self._title or "",
            content=self._take_buffer(),
        ))
        self.state = ParserState.SCANNING_FOR_SECTION

    def _open_section(self, title: str) -> None:
        self._section_title = title
        self._subtitle = None
        self._section_pages = []
        self._buffer = []
        self.state = ParserState.IN_SECTION

    def _close_block(self) -> None:
        """Turn the buffered block into a sub-page if it has any text."""
        content = self._take_buffer()
        if content:
            self._section_pages.append(Page(
                kind=PageKind.CONTENT,
                title=self._section_title or "",
                content=content,
                subtitle=self._subtitle,
            ))

    def _close_section(self) -> None:
        self._close_block()
        if self._section_pages:
            self.pages.extend(self._section_pages)
        else:
            # Every section heading is represented by at least one page
            self.pages.append(Page(kind=PageKind.CONTENT, title=self._section_title or ""))
        self._section_pages = []
        self._subtitle = None


def parse_document(document: str) -> List[Page]:
    """Parse document text into an ordered list of pages.

    Returns an empty list when the document has neither a top-level nor a
    second-level heading; use :func:`require_pages` to treat that as fatal.
    """
    lines = document.split("\n")
    has_title = any(TITLE_HEADING.match(line) for line in lines)
    parser = DocumentParser(has_title=has_title)
    for line in lines:
        parser.feed(line)
    pages = parser.finish()
    logger.debug(f"Parsed {len(pages)} pages (title page: {has_title})")
    return pages


def require_pages(pages: List[Page]) -> List[Page]:
    """Return pages unchanged, or raise DocumentStructureError if empty."""
    if not pages:
        raise DocumentStructureError(PresenterConstants.NO_STRUCTURE_MESSAGE)
    return pages
