"""Tests for Card and the attribute table"""
import dataclasses
import pytest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from toptrumps.models import (
    Card, ATTRIBUTE_NAMES, GameState, GamePhase, UnknownAttributeError, player_label
)
from toptrumps.cards import AIRCRAFT_CARDS, validate_catalog


def test_card_attribute_names_in_menu_order():
    card = Card("Test Jet", num_engines=2, max_pax=180, range=6000, cost=100)
    assert card.attribute_names() == (
        "Number of engines", "Maximum passenger count", "Range", "Cost when new"
    )


def test_card_attribute_value_by_readable_name():
    card = Card("Test Jet", num_engines=2, max_pax=180, range=6000, cost=100)
    assert card.attribute_value("Number of engines") == 2
    assert card.attribute_value("Maximum passenger count") == 180
    assert card.attribute_value("Range") == 6000
    assert card.attribute_value("Cost when new") == 100


def test_unknown_attribute_raises():
    card = Card("Test Jet", num_engines=2, max_pax=180, range=6000, cost=100)
    with pytest.raises(UnknownAttributeError):
        card.attribute_value("Top speed")
    with pytest.raises(KeyError):
        card.attribute_value("range")


def test_card_is_immutable():
    card = Card("Test Jet", num_engines=2, max_pax=180, range=6000, cost=100)
    with pytest.raises(dataclasses.FrozenInstanceError):
        card.range = 1


def test_every_catalog_card_has_the_same_attributes():
    for card in AIRCRAFT_CARDS:
        assert card.attribute_names() == ATTRIBUTE_NAMES
        assert all(isinstance(v, int) for v in card.attributes().values())


def test_catalog_validates():
    validate_catalog(AIRCRAFT_CARDS)


def test_validate_catalog_rejects_bad_data():
    with pytest.raises(ValueError):
        validate_catalog(())
    with pytest.raises(TypeError):
        validate_catalog([{"name": "Not a card"}])
    with pytest.raises(ValueError):
        validate_catalog([Card("Broken", num_engines="two", max_pax=1, range=1, cost=1)])


def test_game_state_starts_awaiting_selections():
    state = GameState(decks=[[], []])
    assert state.phase == GamePhase.AWAITING_SELECTIONS
    assert state.selections == [None, None]
    assert state.num_players == 2
    assert state.priority_player == 0


def test_player_label_is_one_based():
    assert player_label(0) == "Player 1"
    assert player_label(1) == "Player 2"
