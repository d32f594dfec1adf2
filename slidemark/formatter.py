"""Convert inline markup in page bodies into styled terminal text.

Formatting is an ordered sequence of independent passes. Each pass takes
the whole text and a StyleTable and returns new text; the order of
``PASSES`` is part of the contract:

1. fenced code blocks (before inline code, so their backticks are gone)
2. stray heading markers
3. bold, then 4. italic (double delimiters before single ones)
5. inline code
6. links
7. unordered and 8. ordered list markers (after emphasis, so ``* item``
   bullets are not mistaken for emphasis delimiters)

No pass ever fails: text that matches no pattern is left as it is.
"""

from __future__ import annotations

import re
from typing import Callable, Tuple

from .constants import PresenterConstants
from .styles import ANSI_STYLES, StyleTable

TextPass = Callable[[str, StyleTable], str]

CODE_BLOCK = re.compile(r"```(.*?)```", re.DOTALL)
LANGUAGE_TAG = re.compile(r"\w+")
HEADING_MARKER = re.compile(r"^#{1,6}[ \t]+", re.MULTILINE)
BOLD_ASTERISK = re.compile(r"\*\*([^*\n]+)\*\*")
BOLD_UNDERSCORE = re.compile(r"__([^_\n]+)__")
# Single delimiters must hug their text; '_' must also not sit inside a word
ITALIC_ASTERISK = re.compile(r"\*(?![\s*])([^*\n]+?)(?<!\s)\*")
ITALIC_UNDERSCORE = re.compile(r"(?<!\w)_(?![\s_])([^_\n]+?)(?<!\s)_(?!\w)")
INLINE_CODE = re.compile(r"`([^`\n]+)`")
LINK = re.compile(r"\[([^\]\n]+)\]\([^)\n]+\)")
UNORDERED_MARKER = re.compile(r"^[-*][ \t]+", re.MULTILINE)
ORDERED_MARKER = re.compile(r"^\d+\.[ \t]+", re.MULTILINE)


def format_code_blocks(text: str, styles: StyleTable) -> str:
    """Indent and style every line of each fenced code block."""
    def replace(match: re.Match) -> str:
        lines = match.group(1).split("\n")
        # Rest of the opening fence line: a language tag or nothing
        if len(lines) > 1 and (LANGUAGE_TAG.fullmatch(lines[0]) or not lines[0].strip()):
            lines = lines[1:]
        # Line holding the closing fence
        if len(lines) > 1 and not lines[-1].strip():
            lines = lines[:-1]
        return "\n".join(
            styles.wrap(styles.code, PresenterConstants.CODE_BLOCK_INDENT + line.rstrip())
            for line in lines
        )
    return CODE_BLOCK.sub(replace, text)


def strip_heading_markers(text: str, styles: StyleTable) -> str:
    del styles  # Unused
    return HEADING_MARKER.sub("", text)


def format_bold(text: str, styles: StyleTable) -> str:
    replace = lambda m: styles.wrap(styles.bold, m.group(1))
    text = BOLD_ASTERISK.sub(replace, text)
    return BOLD_UNDERSCORE.sub(replace, text)


def format_italic(text: str, styles: StyleTable) -> str:
    replace = lambda m: styles.wrap(styles.italic, m.group(1))
    text = ITALIC_ASTERISK.sub(replace, text)
    return ITALIC_UNDERSCORE.sub(replace, text)


def format_inline_code(text: str, styles: StyleTable) -> str:
    return INLINE_CODE.sub(lambda m: styles.wrap(styles.code, m.group(1)), text)


def strip_links(text: str, styles: StyleTable) -> str:
    """Keep a link's label and drop its target."""
    del styles  # Unused
    return LINK.sub(r"\1", text)


def format_unordered_lists(text: str, styles: StyleTable) -> str:
    del styles  # Unused
    return UNORDERED_MARKER.sub(PresenterConstants.BULLET, text)


def format_ordered_lists(text: str, styles: StyleTable) -> str:
    del styles  # Unused
    return ORDERED_MARKER.sub(PresenterConstants.LIST_INDENT, text)


PASSES: Tuple[TextPass, ...] = (
    format_code_blocks,
    strip_heading_markers,
    format_bold,
    format_italic,
    format_inline_code,
    strip_links,
    format_unordered_lists,
    format_ordered_lists,
)


def format_content(text: str, styles: StyleTable = ANSI_STYLES) -> str:
    """Apply every formatting pass to text, in order.

    Args:
        text: Raw page body
        styles: Style table supplying start and reset sequences

    Returns:
        Styled text with markup delimiters removed
    """
    for text_pass in PASSES:
        text = text_pass(text, styles)
    return text
