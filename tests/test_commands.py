"""Tests for key bindings."""

import pytest
from unittest.mock import Mock
from slidemark.commands import CommandRegistry, NavigationAction, QuitCommand
from slidemark.keyboard import KeyboardHandler, KeyEvent, KeyType
from slidemark.navigation import Navigator

KEYS = KeyboardHandler(terminal_interface=None)


@pytest.mark.parametrize("raw,action", [
    ('n', NavigationAction.NEXT),
    ('<SPACE>', NavigationAction.NEXT),
    ('<RIGHT>', NavigationAction.NEXT),
    ('\x1b[C', NavigationAction.NEXT),
    ('j', NavigationAction.NEXT),
    ('\r', NavigationAction.NEXT),
    ('<Ctrl-j>', NavigationAction.NEXT),
    ('p', NavigationAction.PREVIOUS),
    ('b', NavigationAction.PREVIOUS),
    ('<LEFT>', NavigationAction.PREVIOUS),
    ('\x1b[D', NavigationAction.PREVIOUS),
    ('k', NavigationAction.PREVIOUS),
    ('q', NavigationAction.QUIT),
    ('\x03', NavigationAction.QUIT),
    ('x', NavigationAction.UNRECOGNIZED),
    ('N', NavigationAction.UNRECOGNIZED),
    ('<UP>', NavigationAction.UNRECOGNIZED),
    ('\x1b', NavigationAction.UNRECOGNIZED),
])
def test_key_bindings(raw, action):
    registry = CommandRegistry()
    assert registry.action_for(KEYS.parse_key(raw)) == action


def make_presenter(page_count=3):
    presenter = Mock()
    presenter.navigator = Navigator(page_count)
    presenter.running = True
    return presenter


def test_next_and_previous_commands_move_and_redraw():
    registry = CommandRegistry()
    presenter = make_presenter()

    assert registry.execute(presenter, KEYS.parse_key('n')) is True
    assert presenter.navigator.index == 1
    assert registry.execute(presenter, KEYS.parse_key('p')) is True
    assert presenter.navigator.index == 0


def test_navigation_at_boundary_still_redraws():
    registry = CommandRegistry()
    presenter = make_presenter(page_count=1)
    assert registry.execute(presenter, KEYS.parse_key('p')) is True
    assert registry.execute(presenter, KEYS.parse_key('n')) is True
    assert presenter.navigator.index == 0


def test_quit_command_stops_presenter():
    registry = CommandRegistry()
    presenter = make_presenter()
    assert registry.execute(presenter, KEYS.parse_key('q')) is False
    assert presenter.running is False


def test_unbound_key_is_ignored():
    registry = CommandRegistry()
    presenter = make_presenter()
    assert registry.execute(presenter, KEYS.parse_key('z')) is False
    assert presenter.navigator.index == 0
    assert presenter.running is True


def test_register_custom_binding():
    registry = CommandRegistry()
    registry.register((KeyType.SPECIAL, 'escape'), QuitCommand())
    event = KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')
    assert registry.action_for(event) == NavigationAction.QUIT
