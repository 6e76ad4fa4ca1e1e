"""
Top Trumps — Aircraft Card Catalog
15 airliners. An odd count, so one card sits out of every two-player game.
"""

from toptrumps.models import Card, ATTRIBUTE_NAMES

AIRCRAFT_CARDS: tuple[Card, ...] = (

    # ── WIDEBODIES ────────────────────────────────────────────────────────
    Card(name="Airbus A380-800", num_engines=4, max_pax=853, range=15200, cost=445),
    Card(name="Boeing 747-400", num_engines=4, max_pax=660, range=13450, cost=266),
    Card(name="Boeing 777-300ER", num_engines=2, max_pax=550, range=13650, cost=375),
    Card(name="Airbus A350-900", num_engines=2, max_pax=440, range=15000, cost=317),
    Card(name="Boeing 787-9", num_engines=2, max_pax=420, range=14140, cost=292),
    Card(name="Airbus A330-300", num_engines=2, max_pax=440, range=11750, cost=264),

    # ── TRIJETS ───────────────────────────────────────────────────────────
    Card(name="McDonnell Douglas MD-11", num_engines=3, max_pax=410, range=12455, cost=150),
    Card(name="Lockheed L-1011 TriStar", num_engines=3, max_pax=400, range=7420, cost=20),

    # ── NARROWBODIES ──────────────────────────────────────────────────────
    Card(name="Boeing 737-800", num_engines=2, max_pax=189, range=5436, cost=106),
    Card(name="Airbus A320neo", num_engines=2, max_pax=194, range=6300, cost=111),
    Card(name="Boeing 757-200", num_engines=2, max_pax=239, range=7250, cost=65),
    Card(name="Concorde", num_engines=4, max_pax=128, range=7222, cost=46),

    # ── REGIONAL ──────────────────────────────────────────────────────────
    Card(name="Embraer E190", num_engines=2, max_pax=114, range=4537, cost=52),
    Card(name="ATR 72-600", num_engines=2, max_pax=78, range=1528, cost=26),
    Card(name="Antonov An-225 Mriya", num_engines=6, max_pax=88, range=15400, cost=250),
)


def validate_catalog(cards) -> None:
    """
    Fail fast on a catalog the engine cannot play with.
    Every card must expose the same attribute names, each an int.
    """
    if not cards:
        raise ValueError("Card catalog is empty")
    for card in cards:
        if not isinstance(card, Card):
            raise TypeError(f"Catalog entry {card!r} is not a Card")
        if card.attribute_names() != ATTRIBUTE_NAMES:
            raise ValueError(f"Card {card.name!r} has unexpected attributes")
        for name, value in card.attributes().items():
            # bool is an int subclass but never a sensible stat
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Card {card.name!r} has non-integer {name!r}: {value!r}")
