"""Presentation session: event loop, drawing and signal handling."""

import logging
import os
import select
import signal
from typing import List, Optional

from .commands import CommandRegistry
from .constants import PresenterConstants
from .keyboard import KeyboardHandler, KeyEvent
from .model import Page
from .navigation import Navigator
from .parser import require_pages
from .settings import PresenterSettings
from .styles import PLAIN_STYLES, StyleTable
from .terminal import TerminalInterface
from .view import PageRenderer, format_status_line

logger = logging.getLogger(__name__)


class Presenter:
    """Shows one page at a time and reacts to keys and resizes.

    The page list is fixed for the lifetime of the presenter; only the
    navigator's index changes, and only in response to key events.
    """

    def __init__(self, pages: List[Page], terminal: Optional[TerminalInterface] = None,
                 settings: Optional[PresenterSettings] = None,
                 styles: Optional[StyleTable] = None):
        """Initialize the presenter components.

        Raises:
            DocumentStructureError: If pages is empty
        """
        self.pages = tuple(require_pages(pages))
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.settings = settings or PresenterSettings()
        if styles is None:
            styles = (StyleTable.from_terminal(self.terminal.term)
                      if self.settings.color else PLAIN_STYLES)
        self.styles = styles
        self.renderer = PageRenderer(self.styles, self.settings)
        self.navigator = Navigator(len(self.pages))
        self.command_registry = CommandRegistry()
        self.running = False
        self._interrupted = False
        # Resize and interrupt signaling pipe, open only while run() is active
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None

    @property
    def current_page(self) -> Page:
        return self.pages[self.navigator.index]

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, PresenterConstants.RESIZE_PIPE_MARKER)

    def _handle_sigint(self, signum, frame):
        """Handle SIGINT (Ctrl-C) by ending the session."""
        del signum, frame # Unused
        self._interrupted = True
        os.write(self._resize_pipe_w, PresenterConstants.INTERRUPT_PIPE_MARKER)

    def run(self):
        """Run the presentation loop until the user quits."""
        self.terminal.setup()
        self.running = True
        self._interrupted = False

        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        original_int_handler = signal.signal(signal.SIGINT, self._handle_sigint)

        try:
            with self.terminal.term.cbreak():
                need_draw = True

                while self.running:
                    if need_draw:
                        self._draw()
                        need_draw = False

                    # Wait for input on stdin or the signal pipe
                    ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                    if self._resize_pipe_r in ready:
                        os.read(self._resize_pipe_r, 1024)
                        if self._interrupted:
                            logger.debug("Interrupted, quitting")
                            self.running = False
                        else:
                            # Same page, new dimensions
                            need_draw = True
                    elif 0 in ready:
                        key_event = self.keyboard.get_key_event(timeout=0)
                        if key_event:
                            need_draw = self._handle_key_event(key_event)

        except KeyboardInterrupt:
            logger.debug("KeyboardInterrupt, quitting")
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            signal.signal(signal.SIGINT, original_int_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self._resize_pipe_r = self._resize_pipe_w = None
            self.terminal.cleanup()

    def render(self) -> str:
        """Return the body of the current frame at the current terminal size."""
        return self.renderer.render(self.current_page, self.terminal.size)

    def status_line(self) -> str:
        return format_status_line(self.navigator.index, len(self.pages), self.styles)

    def _draw(self):
        """Draw the current page and status line."""
        self.terminal.write_frame(self.render(), self.status_line())

    def _handle_key_event(self, key_event: KeyEvent) -> bool:
        """Handle a keyboard event.

        Returns:
            True if the screen must be redrawn
        """
        redraw = self.command_registry.execute(self, key_event)
        if redraw:
            logger.debug(f"Key {key_event.raw!r}: page {self.navigator.position}/{len(self.pages)}")
        return redraw
