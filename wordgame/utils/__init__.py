"""
Utilities Package

Contains request helpers and the game logger.
"""

from .helpers import get_request_value
from .game_logger import game_logger, GameLogger

__all__ = ['get_request_value', 'game_logger', 'GameLogger']
