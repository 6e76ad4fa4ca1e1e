"""
Top Trumps — Console I/O
Prompts, menus and coloured output. All terminal access goes through here,
so the engine never touches stdin/stdout directly.
"""

from __future__ import annotations
from typing import Sequence

import click


class Console:
    """
    Blocking request/response boundary between the players and the engine.

    prompt_choice never returns until the player picks a valid option, so
    nothing outside this class ever sees bad input.
    """

    def __init__(self, color: bool = True, clear_screen: bool = True):
        self.color = color
        self.clear_screen = clear_screen

    def prompt_choice(self, heading: str, options: Sequence[str]) -> tuple[int, str]:
        """
        Show a 1-based numbered menu and return (0-based index, label).
        Non-numeric or out-of-range answers are re-prompted by click.
        """
        if not options:
            raise ValueError(f"No options to choose from for {heading!r}")

        click.echo(heading)
        for number, label in enumerate(options, start=1):
            click.echo(f"  {number}: {label}")

        choice = click.prompt(
            ">",
            type=click.IntRange(1, len(options)),
            prompt_suffix=" ",
            show_choices=False,
        )
        index = choice - 1
        return index, options[index]

    def render_line(self, text: str = "") -> None:
        click.echo(text)

    def clear_display(self) -> None:
        if self.clear_screen:
            click.clear()

    def pause(self, message: str = "Press <ENTER> to continue") -> None:
        click.pause(info=message)

    def highlight(self, text, colour: str) -> str:
        if not self.color:
            return str(text)
        return click.style(str(text), fg=colour)
