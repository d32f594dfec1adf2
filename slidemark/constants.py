"""Constants and configuration for the slidemark presenter."""

class PresenterConstants:
    """Central configuration constants for the presenter."""
    
    # Page layout
    MIN_COLUMNS_FOR_PADDING = 100  # Terminals at least this wide get a left margin
    LEFT_PADDING_SPACES = 4  # Width of that left margin
    STATUS_LINE_ROWS = 1  # Bottom row reserved for the status line
    SUBTITLE_INDENT = "  "  # Indent of the subtitle under the page title

    # Content formatting
    CODE_BLOCK_INDENT = "  "  # Prefix for every line of a fenced code block
    LIST_INDENT = "  "  # Replaces ordered list markers
    BULLET = "  • "  # Replaces unordered list markers

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize
    INTERRUPT_PIPE_MARKER = b'C'  # Byte written to pipe on SIGINT

    # Messages
    STATUS_LINE_FORMAT = "[{}/{}] q:quit"
    NO_STRUCTURE_MESSAGE = "No valid structure found (need H1 or H2 headings)"
    USAGE_MESSAGE = "Usage: slidemark [--version] [--keytest] [--log FILE] <file.md>"
