"""
Top Trumps Rules Engine — Round Resolution
This is the deterministic core. No randomness, no I/O. Every outcome is explainable.
The console layer feeds choices in and renders RoundResult, but never influences it.
"""

from __future__ import annotations
import logging
from typing import Optional, Sequence

from .models import (
    Card, GamePhase, GameState, RoundResult, Selection, NUM_PLAYERS, player_label
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

def new_game(decks: Sequence[list[Card]], num_players: int = NUM_PLAYERS) -> GameState:
    """
    Start a game from pre-dealt decks. Extra decks beyond num_players are ignored.
    Too few decks can only come from a programming error, so this raises.
    """
    if len(decks) < num_players:
        raise ValueError(f"Need {num_players} decks, got {len(decks)}")
    state = GameState(decks=[list(d) for d in decks[:num_players]])
    logger.info("New game %s with deck sizes %s", state.game_id, state.deck_sizes())
    return state


# ---------------------------------------------------------------------------
# Phase: Selection
# ---------------------------------------------------------------------------

def select_card(state: GameState, player: int, index: int) -> Selection:
    """Record which card `player` puts forward. The card stays in the deck."""
    _require_phase(state, GamePhase.AWAITING_SELECTIONS)
    deck = state.decks[player]
    if not (0 <= index < len(deck)):
        raise IndexError(f"{player_label(player)} has no card at index {index}")

    selection = Selection(card=deck[index], index=index)
    state.selections[player] = selection
    logger.debug("%s selected %s (index %d)", player_label(player), selection.card.name, index)
    return selection


# ---------------------------------------------------------------------------
# Phase: Attribute choice
# ---------------------------------------------------------------------------

def attribute_options(state: GameState) -> tuple[str, ...]:
    """Attribute names the priority player may choose from."""
    selection = state.selections[state.priority_player]
    if selection is None:
        raise RuntimeError(f"{player_label(state.priority_player)} has not selected a card")
    return selection.card.attribute_names()


def choose_attribute(state: GameState, name: str) -> GameState:
    """Lock in the attribute all selected cards are compared on."""
    _require_phase(state, GamePhase.AWAITING_SELECTIONS)
    if not state.all_selected():
        raise RuntimeError("Every player must select a card before an attribute is chosen")
    if name not in attribute_options(state):
        raise ValueError(f"{name!r} is not an attribute of the selected card")

    state.chosen_attribute = name
    state.phase = GamePhase.ATTRIBUTE_CHOSEN
    return state


# ---------------------------------------------------------------------------
# Phase: Resolve, the heart of the engine
# ---------------------------------------------------------------------------

def phase_resolve(state: GameState) -> tuple[GameState, RoundResult]:
    """
    Compare the chosen attribute, move cards on a win, check for game end.
    Returns updated state and a complete RoundResult for rendering.
    """
    _require_phase(state, GamePhase.ATTRIBUTE_CHOSEN)
    attribute = state.chosen_attribute

    # Step 1: Read every selected card's value
    for selection in state.selections:
        selection.value = selection.card.attribute_value(attribute)
    values = [s.value for s in state.selections]

    # Step 2: Strict maximum wins, shared maximum is a draw
    round_winner = determine_round_winner(values)

    # Step 3: Transfer
    transferred: list[Card] = []
    if round_winner is not None:
        transferred = transfer_cards(state.decks, round_winner, state.selections)

    # Step 4: Game end
    eliminated = find_empty_deck(state.decks)
    match_winner = None
    if eliminated is not None:
        match_winner = player_with_most_cards(state.decks)
        state.match_winner = match_winner

    result = RoundResult(
        round_number=state.current_round,
        priority_player=state.priority_player,
        attribute=attribute,
        selections=list(state.selections),
        round_winner=round_winner,
        transferred=transferred,
        deck_sizes=state.deck_sizes(),
        eliminated_player=eliminated,
        match_winner=match_winner,
    )
    state.round_history.append(result)

    if round_winner is None:
        logger.info("Round %d: draw on %s at %d", state.current_round, attribute, max(values))
    else:
        logger.info(
            "Round %d: %s wins on %s (%s); deck sizes now %s",
            state.current_round, player_label(round_winner), attribute, values, result.deck_sizes,
        )
    if match_winner is not None:
        logger.info(
            "%s has run out of cards; %s wins the game",
            player_label(eliminated), player_label(match_winner),
        )

    state.phase = GamePhase.GAME_END if match_winner is not None else GamePhase.RESOLVED
    return state, result


def determine_round_winner(values: Sequence[int]) -> Optional[int]:
    """Index of the single highest value, or None when the top value is shared."""
    best = max(values)
    leaders = [i for i, v in enumerate(values) if v == best]
    if len(leaders) > 1:
        return None
    return leaders[0]


def transfer_cards(
    decks: list[list[Card]],
    winner: int,
    selections: Sequence[Selection],
) -> list[Card]:
    """
    Move every loser's selected card to the end of the winner's deck.
    The winner's own card stays where it is.

    All removals are worked out before any deck changes, then applied
    highest index first per deck, so recorded indexes stay valid.
    """
    removals: dict[int, list[int]] = {}
    winnings: list[Card] = []
    for player, selection in enumerate(selections):
        if player == winner:
            continue
        if decks[player][selection.index] is not selection.card:
            raise RuntimeError(
                f"{player_label(player)}'s deck changed since selection at index {selection.index}"
            )
        removals.setdefault(player, []).append(selection.index)
        winnings.append(selection.card)

    for player, indexes in removals.items():
        for index in sorted(indexes, reverse=True):
            del decks[player][index]

    decks[winner].extend(winnings)
    return winnings


def find_empty_deck(decks: Sequence[list[Card]]) -> Optional[int]:
    """First player with no cards left, if any."""
    for player, deck in enumerate(decks):
        if not deck:
            return player
    return None


def player_with_most_cards(decks: Sequence[list[Card]]) -> int:
    """Largest deck wins; equal sizes go to the lowest player index."""
    sizes = [len(d) for d in decks]
    return sizes.index(max(sizes))


# ---------------------------------------------------------------------------
# Phase: Cleanup
# ---------------------------------------------------------------------------

def phase_cleanup(state: GameState) -> GameState:
    """
    - Hand priority to the next player, wrapping around
    - Clear this round's selections
    - Advance round counter
    """
    _require_phase(state, GamePhase.RESOLVED)
    state.phase = GamePhase.ROUND_END

    state.priority_player = next_priority(state.priority_player, state.num_players)
    state.selections = [None] * state.num_players
    state.chosen_attribute = None
    state.current_round += 1

    state.phase = GamePhase.AWAITING_SELECTIONS
    return state


def next_priority(priority_player: int, num_players: int) -> int:
    return (priority_player + 1) % num_players


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require_phase(state: GameState, expected: GamePhase) -> None:
    if state.phase != expected:
        raise RuntimeError(f"Expected phase {expected.value}, game is in {state.phase.value}")
