"""Game driver: runs rounds through the console until a deck runs out."""

from __future__ import annotations
import logging
from typing import Sequence

from .battle_log import comparison_lines, game_over_line, outcome_line
from .models import Card, GameState, RoundResult, NUM_PLAYERS, player_label
from .rules import (
    new_game, select_card, attribute_options, choose_attribute,
    phase_resolve, phase_cleanup,
)

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, decks: Sequence[list[Card]], console, num_players: int = NUM_PLAYERS):
        self.console = console
        self.state = new_game(decks, num_players)

    def run(self) -> GameState:
        """Play rounds until the game ends. Returns the final state."""
        while True:
            result = self.play_round()
            if self.state.is_over:
                self.console.render_line()
                self.console.render_line("     -----")
                self.console.render_line(game_over_line(result))
                return self.state

            self.console.pause()
            self.console.clear_display()
            phase_cleanup(self.state)

    def play_round(self) -> RoundResult:
        state = self.state
        console = self.console

        # Each player picks a card from their own deck
        for player in range(state.num_players):
            names = [card.name for card in state.decks[player]]
            index, _ = console.prompt_choice(f"{player_label(player)} - pick a card!", names)
            select_card(state, player, index)
            console.render_line()

        # Priority player picks what to compare
        _, attribute = console.prompt_choice(
            f"Okay, {player_label(state.priority_player).lower()} - "
            f"select a property to challenge your opponent with!",
            list(attribute_options(state)),
        )
        choose_attribute(state, attribute)
        console.render_line()

        _, result = phase_resolve(state)

        for line in comparison_lines(result, console.highlight):
            console.render_line(line)
        console.render_line()
        console.render_line(outcome_line(result))
        return result
