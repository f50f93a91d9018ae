"""
Game Errors

Typed errors raised by the game core and mapped to HTTP responses by the controllers.
"""


class GameError(Exception):
    """Base class for all recoverable game errors."""
    code = 'GAME_ERROR'
    status_code = 400
    default_message = 'Game error'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {
            'success': False,
            'error': self.message,
            'code': self.code
        }


class MissingSessionID(GameError):
    code = 'MISSING_SESSION_ID'
    default_message = 'Session ID is required'


class SessionNotFound(GameError):
    code = 'SESSION_NOT_FOUND'
    status_code = 404
    default_message = 'Session not found'


class InvalidGuessFormat(GameError):
    code = 'INVALID_GUESS_FORMAT'
    default_message = 'Guess must be exactly 5 letters'


class NotInWordList(GameError):
    code = 'NOT_IN_WORD_LIST'
    default_message = 'Word not in word list'


class GameAlreadyOver(GameError):
    code = 'GAME_ALREADY_OVER'
    default_message = 'Game is already over'
