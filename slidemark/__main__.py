"""Slidemark CLI entry point.

Allows running via `python -m slidemark` and provides the console script
defined in `pyproject.toml`.

Usage:
    slidemark <file.md>
    slidemark --log presenter.log <file.md>
    slidemark --version
    slidemark --keytest

Keys: n/space/right/j/enter = next, p/b/left/k = previous, q/Ctrl-C = quit
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from .constants import PresenterConstants
from .version import get_version_string


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def configure_logging(log_file: str) -> None:
    """Send debug logs to a file; the terminal itself shows the slides."""
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def run_keyboard_test() -> None:
    """Print each decoded key and the navigation action it maps to.

    Quit with ESC.
    """
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyEvent, KeyType
    from .commands import CommandRegistry

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    registry = CommandRegistry()

    try:
        while True:
            ev: KeyEvent | None = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                print("Exiting keyboard test.")
                break
            action = registry.action_for(ev)
            print(f"type={ev.key_type.value} value={ev.value!r} "
                  f"raw='{_escape_bytes(ev.raw)}' action={action.value}\r")
    finally:
        term.cleanup()


def _parse_args(args: List[str]) -> tuple[Optional[str], Optional[str]]:
    """Return (log_file, path) from the command line arguments.

    Raises ValueError for a ``--log`` without a file name or a second path.
    """
    log_file = None
    path = None
    while args:
        arg = args.pop(0)
        if arg == '--log':
            if not args:
                raise ValueError("--log needs a file name")
            log_file = args.pop(0)
        elif path is None:
            path = arg
        else:
            raise ValueError(f"unexpected argument: {arg}")
    return log_file, path


def main(argv: Optional[List[str]] = None) -> int:
    # Very small arg parsing: version, keyboard test, optional log file and the document path
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return 0

    try:
        log_file, path = _parse_args(args)
    except ValueError as e:
        print(e, file=sys.stderr)
        print(PresenterConstants.USAGE_MESSAGE, file=sys.stderr)
        return 1
    if log_file:
        configure_logging(log_file)
    if not path:
        print(PresenterConstants.USAGE_MESSAGE, file=sys.stderr)
        return 1

    # Lazy import to avoid importing UI deps for --version
    from .document import DocumentReadError, load_document
    from .parser import DocumentStructureError, parse_document
    from .presenter import Presenter
    from .settings import load_settings

    try:
        pages = parse_document(load_document(path))
        presenter = Presenter(pages, settings=load_settings())
    except (DocumentReadError, DocumentStructureError) as e:
        print(e, file=sys.stderr)
        return 1
    presenter.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
