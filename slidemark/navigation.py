"""Current-page state for a presentation session."""


class Navigator:
    """Holds the current page index, clamped to the page range."""

    def __init__(self, page_count: int):
        if page_count < 1:
            raise ValueError(f"page_count must be at least 1, got {page_count}")
        self.page_count = page_count
        self.index = 0

    @property
    def position(self) -> int:
        """1-based page number."""
        return self.index + 1

    @property
    def at_first(self) -> bool:
        return self.index == 0

    @property
    def at_last(self) -> bool:
        return self.index == self.page_count - 1

    def advance(self) -> bool:
        """Move to the next page; returns False when already on the last one."""
        new_index = min(self.index + 1, self.page_count - 1)
        moved = new_index != self.index
        self.index = new_index
        return moved

    def retreat(self) -> bool:
        """Move to the previous page; returns False when already on the first one."""
        new_index = max(self.index - 1, 0)
        moved = new_index != self.index
        self.index = new_index
        return moved
