"""Tests for page index navigation."""

import pytest
from slidemark.navigation import Navigator


def test_starts_at_first_page():
    nav = Navigator(3)
    assert nav.index == 0
    assert nav.position == 1
    assert nav.at_first


def test_advance_and_retreat():
    nav = Navigator(3)
    assert nav.advance() is True
    assert nav.advance() is True
    assert nav.index == 2
    assert nav.at_last
    assert nav.retreat() is True
    assert nav.index == 1


def test_retreat_at_first_page_stays():
    nav = Navigator(3)
    assert nav.retreat() is False
    assert nav.index == 0


def test_advance_at_last_page_stays():
    nav = Navigator(2)
    nav.advance()
    assert nav.advance() is False
    assert nav.index == 1


def test_single_page():
    nav = Navigator(1)
    assert nav.at_first and nav.at_last
    assert not nav.advance()
    assert not nav.retreat()
    assert nav.index == 0


def test_index_never_leaves_range():
    nav = Navigator(4)
    for step in "++++++---------++-+":
        nav.advance() if step == "+" else nav.retreat()
        assert 0 <= nav.index <= 3


def test_requires_pages():
    with pytest.raises(ValueError):
        Navigator(0)
