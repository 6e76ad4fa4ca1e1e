"""Top Trumps Rules Engine"""

from .models import Card, GameState, GamePhase, RoundResult, Selection
from .partition import CardPool, split_cards
from .game import Game

__all__ = ['Card', 'GameState', 'GamePhase', 'RoundResult', 'Selection',
           'CardPool', 'split_cards', 'Game']
