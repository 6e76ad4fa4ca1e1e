"""
Top Trumps Engine — Data Models
All game state is represented here. Pure data, no round logic.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional
import uuid


NUM_PLAYERS = 2


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class GamePhase(Enum):
    AWAITING_SELECTIONS = "awaiting_selections"
    ATTRIBUTE_CHOSEN = "attribute_chosen"
    RESOLVED = "resolved"
    ROUND_END = "round_end"
    GAME_END = "game_end"


class UnknownAttributeError(KeyError):
    """Raised when a card is asked for an attribute it does not have."""


# ---------------------------------------------------------------------------
# Card
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Card:
    name: str
    num_engines: int
    max_pax: int
    range: int          # km
    cost: int           # millions USD

    def attribute_names(self) -> tuple[str, ...]:
        return ATTRIBUTE_NAMES

    def attribute_value(self, name: str) -> int:
        extractor = _EXTRACTORS.get(name)
        if extractor is None:
            raise UnknownAttributeError(name)
        return extractor(self)

    def attributes(self) -> dict[str, int]:
        """Readable name → value, in table order."""
        return {name: extract(self) for name, extract in ATTRIBUTES}


# ---------------------------------------------------------------------------
# Attribute Table
# Readable name shown to players, paired with how to read it off a card.
# Order here is the order of the attribute menu.
# ---------------------------------------------------------------------------

ATTRIBUTES: tuple[tuple[str, Callable[[Card], int]], ...] = (
    ("Number of engines", lambda c: c.num_engines),
    ("Maximum passenger count", lambda c: c.max_pax),
    ("Range", lambda c: c.range),
    ("Cost when new", lambda c: c.cost),
)

ATTRIBUTE_NAMES: tuple[str, ...] = tuple(name for name, _ in ATTRIBUTES)

_EXTRACTORS: dict[str, Callable[[Card], int]] = dict(ATTRIBUTES)


# ---------------------------------------------------------------------------
# Round State
# ---------------------------------------------------------------------------

@dataclass
class Selection:
    """The card a player put forward this round."""
    card: Card
    index: int                   # Position in the deck at selection time
    value: Optional[int] = None  # Filled in once the attribute is known


@dataclass
class RoundResult:
    round_number: int
    priority_player: int
    attribute: str
    selections: list[Selection]
    round_winner: Optional[int]          # None = draw
    transferred: list[Card]              # Cards that moved to the winner
    deck_sizes: list[int]                # After transfer
    eliminated_player: Optional[int] = None
    match_winner: Optional[int] = None

    @property
    def is_draw(self) -> bool:
        return self.round_winner is None

    @property
    def values(self) -> list[int]:
        return [s.value for s in self.selections]


# ---------------------------------------------------------------------------
# Full Game State
# ---------------------------------------------------------------------------

@dataclass
class GameState:
    decks: list[list[Card]]
    game_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    priority_player: int = 0
    current_round: int = 1
    phase: GamePhase = GamePhase.AWAITING_SELECTIONS
    selections: list[Optional[Selection]] = field(default_factory=list)
    chosen_attribute: Optional[str] = None
    round_history: list[RoundResult] = field(default_factory=list)
    match_winner: Optional[int] = None

    def __post_init__(self):
        if not self.selections:
            self.selections = [None] * len(self.decks)

    @property
    def num_players(self) -> int:
        return len(self.decks)

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.GAME_END

    def deck_sizes(self) -> list[int]:
        return [len(d) for d in self.decks]

    def total_cards(self) -> int:
        return sum(self.deck_sizes())

    def all_selected(self) -> bool:
        return all(s is not None for s in self.selections)


def player_label(player: int) -> str:
    return f"Player {player + 1}"
