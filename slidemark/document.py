"""Reading documents from storage."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class DocumentReadError(Exception):
    """Raised when a document cannot be read."""


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace('\r\n', '\n').replace('\r', '\n')


def load_document(filename: str) -> str:
    """Read a UTF-8 document and return its text with LF line endings.

    Args:
        filename: Path to the document

    Raises:
        DocumentReadError: If the file is missing, unreadable or not UTF-8
    """
    try:
        with open(filename, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {filename}: {e}")
        raise DocumentReadError(str(e)) from e
    logger.debug(f"Read {len(content)} characters from {filename}")
    return normalize_newlines(content)
