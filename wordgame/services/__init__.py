"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import GuessEvaluation, evaluate
from .game_service import GameService, get_game_service
from .session_store import InMemorySessionStore, SessionStore
from .word_bank import WordBank

__all__ = [
    'GuessEvaluation', 'evaluate',
    'GameService', 'get_game_service',
    'InMemorySessionStore', 'SessionStore',
    'WordBank'
]
