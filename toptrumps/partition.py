"""
Top Trumps Engine — Deck Partitioner
Deals cards from a shared pool into equal-sized per-player decks.
Cards leave the pool as they are dealt and never come back.
"""

from __future__ import annotations
import logging
import random
from typing import Iterable, Optional

from .models import Card

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pool
# ---------------------------------------------------------------------------

class CardPool:
    """Cards not yet dealt to any player."""

    def __init__(self, cards: Iterable[Card]):
        self.cards: list[Card] = list(cards)

    @classmethod
    def from_catalog(cls, catalog: Iterable[Card]) -> CardPool:
        return cls(catalog)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"CardPool({len(self.cards)} cards)"

    def draw(self, rng: random.Random) -> Card:
        """Remove and return a uniformly random card."""
        if not self.cards:
            raise IndexError("Cannot draw: pool is empty")
        chosen = rng.randrange(len(self.cards))
        card = self.cards[chosen]
        # Swap-remove: order of the rest doesn't matter
        last = self.cards.pop()
        if chosen < len(self.cards):
            self.cards[chosen] = last
        return card


# ---------------------------------------------------------------------------
# Dealing
# ---------------------------------------------------------------------------

def deal(pool: CardPool, count: int, rng: Optional[random.Random] = None) -> list[Card]:
    """Draw `count` cards at random from the pool into a new deck."""
    if count > len(pool):
        raise ValueError(f"Cannot deal {count} card(s) from a pool of {len(pool)}")
    rng = rng or random.Random()
    return [pool.draw(rng) for _ in range(count)]


def usable_pool_size(pool_size: int, num_decks: int) -> int:
    """Largest size <= pool_size that splits evenly into num_decks."""
    size = pool_size
    while size % num_decks != 0:
        size -= 1
    return size


def split_cards(
    pool: CardPool,
    num_decks: int,
    rng: Optional[random.Random] = None,
) -> list[list[Card]]:
    """
    Split the pool into `num_decks` decks of equal size.
    Any remainder that doesn't divide evenly is left in the pool, out of play.

    A pool smaller than the number of decks is a programming error, not
    something a player can cause, so it raises rather than degrading.
    """
    if num_decks < 1:
        raise ValueError(f"Need at least one deck, got {num_decks}")
    num_cards = len(pool)
    if num_cards < num_decks:
        raise ValueError(
            f"There are not enough available cards (have: {num_cards}) "
            f"in order to create {num_decks} new deck(s)"
        )

    rng = rng or random.Random()
    cards_per_deck = usable_pool_size(num_cards, num_decks) // num_decks

    decks = [deal(pool, cards_per_deck, rng) for _ in range(num_decks)]

    logger.debug(
        "Dealt %d deck(s) of %d card(s); %d left out of play",
        num_decks, cards_per_deck, len(pool),
    )
    return decks
