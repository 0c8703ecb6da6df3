"""
Core game components: terms, players, selectors and the round state machine.
"""

from .terms import Difficulty, Language, CatalogKey, Term, parse_difficulty, parse_language
from .player import Player
from .exceptions import ImposterGameError, EmptyCatalogError
from .word_selector import WordHistorySelector
from .imposter_selector import ImposterSelector, compute_weights, imposter_weight
from .game_engine import GameSession, GameStatus, ImposterGame, IMPOSTER_ROLE, ROLE_ERROR

__all__ = [
    'Difficulty',
    'Language',
    'CatalogKey',
    'Term',
    'parse_difficulty',
    'parse_language',
    'Player',
    'ImposterGameError',
    'EmptyCatalogError',
    'WordHistorySelector',
    'ImposterSelector',
    'compute_weights',
    'imposter_weight',
    'GameSession',
    'GameStatus',
    'ImposterGame',
    'IMPOSTER_ROLE',
    'ROLE_ERROR',
]
