"""Tests for the click-backed console"""
import pytest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import click

from toptrumps.console import Console


def test_prompt_choice_shows_numbered_menu(monkeypatch):
    echoed = []
    seen = {}

    def fake_prompt(text, type=None, **kwargs):
        seen["type"] = type
        return 2

    monkeypatch.setattr(click, "echo", lambda message=None, **kw: echoed.append(message))
    monkeypatch.setattr(click, "prompt", fake_prompt)

    index, label = Console().prompt_choice("Pick one", ["Alpha", "Bravo", "Charlie"])

    assert (index, label) == (1, "Bravo")
    assert echoed == ["Pick one", "  1: Alpha", "  2: Bravo", "  3: Charlie"]
    assert isinstance(seen["type"], click.IntRange)
    assert seen["type"].min == 1
    assert seen["type"].max == 3


def test_prompt_choice_with_no_options_raises():
    with pytest.raises(ValueError):
        Console().prompt_choice("Nothing here", [])


def test_prompt_choice_retries_bad_input(monkeypatch):
    answers = iter(["abc", "0", "4", "3"])
    monkeypatch.setattr(click, "echo", lambda *a, **kw: None)
    monkeypatch.setattr("click.termui.visible_prompt_func", lambda prompt: next(answers))

    index, label = Console().prompt_choice("Pick one", ["A", "B", "C"])

    assert (index, label) == (2, "C")


def test_clear_display_can_be_disabled(monkeypatch):
    calls = []
    monkeypatch.setattr(click, "clear", lambda: calls.append(1))

    Console(clear_screen=False).clear_display()
    assert calls == []

    Console().clear_display()
    assert calls == [1]


def test_highlight():
    assert Console(color=False).highlight(500, "yellow") == "500"
    styled = Console(color=True).highlight("A380", "cyan")
    assert click.unstyle(styled) == "A380"
    assert styled != "A380"
