"""Page records produced by the document parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class PageKind(Enum):
    """Kinds of navigable pages."""
    TITLE = "title"
    CONTENT = "content"


@dataclass(frozen=True)
class Page:
    """One navigable screen: title, optional subtitle and raw body.

    Attributes:
        kind: TITLE for the leading top-level heading, CONTENT otherwise
        title: Text of the owning top- or second-level heading
        subtitle: Third-level heading text, for sub-pages only
        content: Raw markup body, trimmed of leading/trailing blank lines
    """
    kind: PageKind
    title: str
    content: str = ""
    subtitle: Optional[str] = None

    @property
    def is_title(self) -> bool:
        return self.kind is PageKind.TITLE


class TerminalSize(NamedTuple):
    rows: int
    columns: int
