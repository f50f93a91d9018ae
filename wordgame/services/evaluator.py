"""
Guess Evaluator

Implements the authentic Wordle letter evaluation algorithm as a pure function.
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from ..models.game import GuessResult, LetterResult, Verdict


@dataclass(frozen=True)
class GuessEvaluation:
    """Outcome of comparing one guess against the secret word."""
    result: GuessResult
    right_letters: FrozenSet[str]
    close_letters: FrozenSet[str]
    wrong_letters: Tuple[str, ...]  # one entry per WRONG position

    @property
    def solved(self) -> bool:
        return all(letter.verdict is Verdict.RIGHT for letter in self.result)


def evaluate(secret_word: str, guess: str) -> GuessEvaluation:
    """
    Compare a guess against the secret word.

    Exact matches are claimed first; remaining letters are then matched against
    whatever is left of the secret, so each secret letter backs at most one
    RIGHT or CLOSE verdict.

    Args:
        secret_word: The answer
        guess: The candidate word, same length as the answer

    Returns:
        GuessEvaluation with per-letter verdicts and letter categories

    Raises:
        ValueError: If the two words differ in length
    """
    if len(secret_word) != len(guess):
        raise ValueError("Guess and secret word must be the same length")

    # Working copy of the secret; consumed positions become None
    target_chars: List[Optional[str]] = list(secret_word)
    verdicts: List[Verdict] = []

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target_chars[i]:
            verdicts.append(Verdict.RIGHT)
            target_chars[i] = None
        else:
            verdicts.append(Verdict.WRONG)

    # Second pass: displaced letters, first unconsumed occurrence wins
    for i, letter in enumerate(guess):
        if verdicts[i] is Verdict.RIGHT:
            continue
        if letter in target_chars:
            verdicts[i] = Verdict.CLOSE
            target_chars[target_chars.index(letter)] = None

    result = tuple(LetterResult(letter, verdict) for letter, verdict in zip(guess, verdicts))
    return GuessEvaluation(
        result=result,
        right_letters=frozenset(r.letter for r in result if r.verdict is Verdict.RIGHT),
        close_letters=frozenset(r.letter for r in result if r.verdict is Verdict.CLOSE),
        wrong_letters=tuple(r.letter for r in result if r.verdict is Verdict.WRONG)
    )
