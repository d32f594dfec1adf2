"""Lay out a page for a terminal of a given size."""

from typing import List, Optional

from .constants import PresenterConstants
from .formatter import format_content
from .model import Page, TerminalSize
from .settings import PresenterSettings
from .styles import ANSI_STYLES, StyleTable


def wrap_line(line: str, width: int) -> List[str]:
    """Greedy word wrap of a single line.

    Words are separated by single spaces, so runs of spaces (indents after a
    style sequence, aligned code) are kept inside a line; spaces falling at
    a wrap point are dropped. A word longer than ``width`` is split into
    ``width``-sized chunks after flushing the current line.

    Returns an empty list for an empty (or all-blank) line.
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    if not line.strip():
        return []

    lines: List[str] = []
    current: Optional[str] = None
    wrapped = False
    for word in line.split(" "):
        if current is None and not word and wrapped:
            # Spaces at the start of a continuation line
            continue
        if len(word) > width:
            if current and current.strip():
                lines.append(current.rstrip(" "))
            current = None
            for start in range(0, len(word), width):
                lines.append(word[start:start + width])
            wrapped = True
        elif current is None:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current += " " + word
        else:
            if current.strip():
                lines.append(current.rstrip(" "))
            current = word or None
            wrapped = True
    if current and current.strip():
        lines.append(current.rstrip(" "))
    return lines


def center_block(lines: List[str], available_rows: int) -> List[str]:
    """Pad lines with blank rows above and below to fill available_rows.

    Content taller than available_rows is returned unpadded.
    """
    top = max(0, (available_rows - len(lines)) // 2)
    bottom = max(0, available_rows - top - len(lines))
    return [""] * top + lines + [""] * bottom


def format_status_line(index: int, total: int, styles: StyleTable = ANSI_STYLES) -> str:
    """Dimmed ``[n/total] q:quit`` hint for the bottom row (index is 0-based)."""
    text = PresenterConstants.STATUS_LINE_FORMAT.format(index + 1, total)
    return styles.wrap(styles.dim, text)


class PageRenderer:
    """Renders Page records into screen-sized strings."""

    def __init__(self, styles: StyleTable = ANSI_STYLES,
                 settings: Optional[PresenterSettings] = None):
        self.styles = styles
        self.settings = settings or PresenterSettings()

    def left_padding(self, columns: int) -> int:
        if columns >= self.settings.min_columns_for_padding:
            return self.settings.left_padding
        return 0

    def header_lines(self, page: Page) -> List[str]:
        lines = [self.styles.wrap(self.styles.heading, page.title)]
        if not page.is_title and page.subtitle:
            lines.append("")
            lines.append(PresenterConstants.SUBTITLE_INDENT
                         + self.styles.wrap(self.styles.heading, page.subtitle))
        return lines

    def content_lines(self, page: Page, width: int) -> List[str]:
        """Format, split and wrap the page body; blank lines are dropped."""
        if not page.content:
            return []
        lines: List[str] = []
        for line in format_content(page.content, self.styles).split("\n"):
            if line:
                lines.extend(wrap_line(line, width))
        return lines

    def render_lines(self, page: Page, size: TerminalSize) -> List[str]:
        """Return the screen rows for page, status row excluded."""
        total_rows = size.rows - PresenterConstants.STATUS_LINE_ROWS
        padding = self.left_padding(size.columns)
        width = max(1, size.columns - padding)

        header = self.header_lines(page)
        body = self.content_lines(page, width)
        available_rows = max(0, total_rows - len(header))
        lines = header + center_block(body, available_rows)

        if padding:
            margin = " " * padding
            lines = [margin + line for line in lines]
        return lines

    def render(self, page: Page, size: TerminalSize) -> str:
        """Return the frame body for page as one newline-joined string."""
        return "\n".join(self.render_lines(page, size))


def render_page(page: Page, size: TerminalSize, styles: StyleTable = ANSI_STYLES) -> str:
    """Render page with default settings."""
    return PageRenderer(styles).render(page, size)
