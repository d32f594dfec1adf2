"""Slidemark - present a markdown document page by page in a terminal."""

from .model import Page, PageKind, TerminalSize
from .parser import DocumentStructureError, parse_document
from .formatter import format_content
from .view import PageRenderer, render_page, wrap_line
from .navigation import Navigator

__all__ = [
    'Page',
    'PageKind',
    'TerminalSize',
    'DocumentStructureError',
    'parse_document',
    'format_content',
    'PageRenderer',
    'render_page',
    'wrap_line',
    'Navigator',
]
