"""
Top Trumps Engine — Round Log Serializer
Converts RoundResults into display lines and clean JSON payloads.
Readers of these payloads never touch GameState.
"""

from __future__ import annotations
from typing import Callable, Optional

from .models import GameState, RoundResult, player_label


def _plain(text, colour: str) -> str:
    return str(text)


def comparison_lines(
    result: RoundResult,
    highlight: Callable[[object, str], str] = _plain,
) -> list[str]:
    """One line per player: whose card, which attribute, what value."""
    attribute = highlight(result.attribute.lower(), "magenta")
    return [
        f"{player_label(player)}'s {highlight(s.card.name, 'cyan')} has a "
        f"{attribute} of {highlight(s.value, 'yellow')}"
        for player, s in enumerate(result.selections)
    ]


def outcome_line(result: RoundResult) -> str:
    if result.is_draw:
        return "There was a draw!"
    return f"{player_label(result.round_winner)} wins!"


def game_over_line(result: RoundResult) -> Optional[str]:
    """Closing announcement, or None if the game carries on."""
    if result.match_winner is None:
        return None
    return (
        f"{player_label(result.eliminated_player)} has run out of cards! "
        f"The winner is {player_label(result.match_winner).lower()}, as they have the most cards."
    )


def to_round_payload(result: RoundResult) -> dict:
    """
    Serialize a RoundResult into a JSON-ready dict.
    Every field a transcript reader needs is here. Nothing more.
    """
    return {
        "round": result.round_number,
        "priority_player": player_label(result.priority_player),
        "attribute": result.attribute,
        "selections": [
            {
                "player": player_label(player),
                "card": s.card.name,
                "deck_index": s.index,
                "value": s.value,
            }
            for player, s in enumerate(result.selections)
        ],
        "winner": player_label(result.round_winner) if result.round_winner is not None else "Draw",
        "transferred": [card.name for card in result.transferred],
        "deck_sizes": {
            player_label(player): size for player, size in enumerate(result.deck_sizes)
        },
        "match_winner": (
            player_label(result.match_winner) if result.match_winner is not None else None
        ),
    }


def to_transcript(state: GameState) -> dict:
    return {
        "game_id": state.game_id,
        "rounds": [to_round_payload(r) for r in state.round_history],
        "final_deck_sizes": {
            player_label(player): size for player, size in enumerate(state.deck_sizes())
        },
        "match_winner": (
            player_label(state.match_winner) if state.match_winner is not None else None
        ),
    }
