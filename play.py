"""
Top Trumps — Console Game
Deals the aircraft catalog between two players and runs a hot-seat game
in the terminal.

Usage:
    python play.py                          # settings from env / .env
    python play.py --seed 42                # reproducible deal
    python play.py --transcript game.json   # save every round as JSON
    python play.py --list-cards             # show the catalog and exit
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import random
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import click

from toptrumps.battle_log import to_transcript
from toptrumps.cards import AIRCRAFT_CARDS, validate_catalog
from toptrumps.config import load_settings
from toptrumps.console import Console
from toptrumps.game import Game
from toptrumps.models import ATTRIBUTE_NAMES, NUM_PLAYERS
from toptrumps.partition import CardPool, split_cards

logger = logging.getLogger("toptrumps")


# ---------------------------------------------------------------------------
# Catalog listing
# ---------------------------------------------------------------------------

def list_cards(console: Console) -> None:
    """Print every card with its stats, one per line."""
    console.render_line(f"{len(AIRCRAFT_CARDS)} cards")
    console.render_line("=" * 60)
    for card in AIRCRAFT_CARDS:
        stats = ", ".join(
            f"{name}: {card.attribute_value(name)}" for name in ATTRIBUTE_NAMES
        )
        console.render_line(f"{console.highlight(card.name, 'cyan')}  ({stats})")


# ---------------------------------------------------------------------------
# Game
# ---------------------------------------------------------------------------

def play_game(console: Console, seed=None, banner_delay: float = 1.0):
    """Deal, play to the end, and return the final GameState."""
    validate_catalog(AIRCRAFT_CARDS)

    console.clear_display()
    console.render_line(
        f"Top trumps, but it's planes and only has {len(AIRCRAFT_CARDS)} cards"
    )
    console.render_line()
    time.sleep(banner_delay)

    pool = CardPool.from_catalog(AIRCRAFT_CARDS)
    decks = split_cards(pool, NUM_PLAYERS, random.Random(seed))
    logger.info("Dealt with seed %s; %d card(s) left out", seed, len(pool))

    return Game(decks, console).run()


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv=None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Top Trumps: planes edition")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed the deal for a reproducible game")
    parser.add_argument("--log-level", default=settings.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--no-clear", action="store_true",
                        help="Don't clear the terminal between rounds")
    parser.add_argument("--no-color", action="store_true",
                        help="Plain text output")
    parser.add_argument("--banner-delay", type=float, default=settings.banner_delay,
                        help="Seconds to show the startup banner (default: %(default)s)")
    parser.add_argument("--transcript", metavar="PATH",
                        help="Write a JSON transcript of the game to PATH")
    parser.add_argument("--list-cards", action="store_true",
                        help="List every card in the catalog and exit")

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    console = Console(
        color=settings.color and not args.no_color,
        clear_screen=settings.clear_screen and not args.no_clear,
    )

    if args.list_cards:
        list_cards(console)
        return 0

    try:
        state = play_game(console, seed=args.seed, banner_delay=args.banner_delay)
    except (click.Abort, EOFError):
        console.render_line()
        console.render_line("Game abandoned.")
        return 1

    if args.transcript:
        with open(args.transcript, "w") as f:
            json.dump(to_transcript(state), f, indent=2)
        console.render_line(f"Transcript saved to: {args.transcript}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
