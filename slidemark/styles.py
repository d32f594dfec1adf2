"""Terminal style table used by the formatter and renderer.

Styles are plain start sequences; every styled span is closed with the
table's ``reset`` sequence right after its text.
"""

from __future__ import annotations

from dataclasses import dataclass

ESC = "\x1b"


@dataclass(frozen=True)
class StyleTable:
    """Start sequences for the visual treatments used on a page.

    Attributes:
        heading: Page titles and subtitles
        bold: ``**strong**`` / ``__strong__`` spans
        italic: ``*emphasis*`` / ``_emphasis_`` spans
        code: Inline code spans and fenced code block lines
        reset: Return to normal text
        dim: Status line
    """
    heading: str
    bold: str
    italic: str
    code: str
    reset: str
    dim: str

    def wrap(self, style: str, text: str) -> str:
        """Return text between the given start sequence and a reset."""
        return f"{style}{text}{self.reset}"

    @classmethod
    def from_terminal(cls, term) -> 'StyleTable':
        """Build a table from a blessed Terminal's capabilities.

        Output streams that do not support styling get the plain table.
        """
        if not term.does_styling:
            return PLAIN_STYLES
        return cls(
            heading=str(term.green),
            bold=str(term.red),
            italic=str(term.cyan),
            code=str(term.color_rgb(255, 135, 0)),  # xterm-256 color 208
            reset=str(term.normal),
            dim=str(term.dim),
        )


ANSI_STYLES = StyleTable(
    heading=f"{ESC}[32m",
    bold=f"{ESC}[31m",
    italic=f"{ESC}[36m",
    code=f"{ESC}[38;5;208m",
    reset=f"{ESC}[0m",
    dim=f"{ESC}[2m",
)

PLAIN_STYLES = StyleTable(heading="", bold="", italic="", code="", reset="", dim="")
