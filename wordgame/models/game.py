"""
Game Data Models

Contains the session record, per-letter verdicts and the redacted views
handed to the transport layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Tuple


class Verdict(Enum):
    """Per-letter evaluation of a guess."""
    RIGHT = "RIGHT"
    CLOSE = "CLOSE"
    WRONG = "WRONG"


@dataclass(frozen=True)
class LetterResult:
    """One guessed letter together with its verdict."""
    letter: str
    verdict: Verdict

    def to_dict(self) -> Dict[str, str]:
        return {'letter': self.letter, 'verdict': self.verdict.value}


# Positionally aligned with the submitted guess
GuessResult = Tuple[LetterResult, ...]


@dataclass
class Session:
    """Server-side state of a single game. The secret word never leaves the server
    except through a RevealedView."""
    secret_word: str
    remaining_guesses: int
    guess_history: List[GuessResult] = field(default_factory=list)
    wrong_letters: List[str] = field(default_factory=list)  # keeps duplicates
    close_letters: Set[str] = field(default_factory=set)
    right_letters: Set[str] = field(default_factory=set)
    game_over: bool = False


@dataclass(frozen=True)
class PublicView:
    """Externally visible projection of an in-progress session."""
    guesses: Tuple[GuessResult, ...]
    wrong_letters: Tuple[str, ...]
    close_letters: Tuple[str, ...]
    right_letters: Tuple[str, ...]
    remaining_guesses: int
    game_over: bool

    @property
    def secret_word(self) -> Optional[str]:
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'guesses': [[letter.to_dict() for letter in guess] for guess in self.guesses],
            'wrongLetters': list(self.wrong_letters),
            'closeLetters': list(self.close_letters),
            'rightLetters': list(self.right_letters),
            'remainingGuesses': self.remaining_guesses,
            'gameOver': self.game_over
        }


@dataclass(frozen=True)
class RevealedView(PublicView):
    """Projection of a finished session, answer included."""
    answer: str = ""

    @property
    def secret_word(self) -> Optional[str]:
        return self.answer

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['secretWord'] = self.answer
        return data
