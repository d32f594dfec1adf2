"""Command pattern implementation for presenter key bindings."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType

if TYPE_CHECKING:
    from .presenter import Presenter
    from .keyboard import KeyEvent


class NavigationAction(Enum):
    """Decoded identity of a key press."""
    NEXT = "next"
    PREVIOUS = "previous"
    QUIT = "quit"
    UNRECOGNIZED = "unrecognized"


class PresenterCommand(ABC):
    """Base class for presenter commands."""

    action: NavigationAction

    @abstractmethod
    def execute(self, presenter: 'Presenter', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            presenter: Presenter instance
            key_event: The key event that triggered this command

        Returns:
            True if the screen must be redrawn
        """
        pass


class NextPageCommand(PresenterCommand):
    action = NavigationAction.NEXT

    def execute(self, presenter, key_event):
        presenter.navigator.advance()
        return True


class PreviousPageCommand(PresenterCommand):
    action = NavigationAction.PREVIOUS

    def execute(self, presenter, key_event):
        presenter.navigator.retreat()
        return True


class QuitCommand(PresenterCommand):
    action = NavigationAction.QUIT

    def execute(self, presenter, key_event):
        presenter.running = False
        return False


class CommandRegistry:
    """Registry for mapping keys to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], PresenterCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default key bindings."""
        next_page = NextPageCommand()
        for key in ((KeyType.REGULAR, 'n'), (KeyType.REGULAR, ' '),
                    (KeyType.SPECIAL, 'right'), (KeyType.REGULAR, 'j'),
                    (KeyType.SPECIAL, 'enter')):
            self.register(key, next_page)

        previous_page = PreviousPageCommand()
        for key in ((KeyType.REGULAR, 'p'), (KeyType.REGULAR, 'b'),
                    (KeyType.SPECIAL, 'left'), (KeyType.REGULAR, 'k')):
            self.register(key, previous_page)

        quit_command = QuitCommand()
        self.register((KeyType.REGULAR, 'q'), quit_command)
        self.register((KeyType.CTRL, 'c'), quit_command)

    def register(self, key: Tuple[KeyType, str], command: PresenterCommand):
        """Register a command for a key."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[PresenterCommand]:
        """Get the command for a key, or None if the key is unbound."""
        return self._commands.get((key_type, value))

    def action_for(self, key_event: 'KeyEvent') -> NavigationAction:
        """Return the navigation action a key event maps to."""
        command = self.get_command(key_event.key_type, key_event.value)
        return command.action if command else NavigationAction.UNRECOGNIZED

    def execute(self, presenter: 'Presenter', key_event: 'KeyEvent') -> bool:
        """Execute the command bound to the key event.

        Returns:
            True if the screen must be redrawn; unbound keys are ignored
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(presenter, key_event)
        return False
