"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional
import sys
import select

from .model import TerminalSize


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._curtsies_active: bool = False

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.hide_cursor, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            try:
                from curtsies import Input  # type: ignore
                # Enter raw mode immediately so reads work
                self._curtsies_input = Input(keynames='curtsies')  # type: ignore
                self._curtsies_input.__enter__()
                self._curtsies_active = True
            except Exception:
                # Justification: curtsies may fail to initialize when stdin
                # is not a terminal. The presenter then receives no keys
                # instead of crashing during startup.
                self._curtsies_input = None
                self._curtsies_active = False

    def cleanup(self):
        """Clear the screen, show the cursor and leave fullscreen mode."""
        if self.is_fullscreen:
            print(self.term.home + self.term.clear, end='')
            print(self.term.normal_cursor, end='')
            print(self.term.exit_fullscreen, end='', flush=True)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                if self._curtsies_active:
                    # Exit raw mode context
                    self._curtsies_input.__exit__(None, None, None)  # type: ignore
            except Exception:
                # Justification: teardown should never crash the app. Any
                # failure to exit raw mode is non-fatal at this point.
                pass
            finally:
                self._curtsies_input = None
                self._curtsies_active = False

    def write_frame(self, body: str, status: str):
        """Replace the screen with body, then write the status line below it.

        Args:
            body: Rendered page rows joined with newlines
            status: Status line text, written on the row after body
        """
        print(self.term.home + self.term.clear + self.term.hide_cursor + body, end='')
        print("\n" + status, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key token as a string, or None if no key is ready
            or curtsies input is not active.
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            evt = next(self._curtsies_input)  # blocks
            return str(evt)
        t = 0.0 if timeout == 0 else float(timeout)
        r, _, _ = select.select([sys.stdin], [], [], t)
        if not r:
            return None
        evt = next(self._curtsies_input)
        return str(evt)

    @property
    def size(self) -> TerminalSize:
        """Current terminal size, queried on each access."""
        return TerminalSize(rows=max(1, self.term.height), columns=max(1, self.term.width))
