"""
Game State Machine

Operations over a single Session: creation, guess submission, redacted views
and reset. A session is InProgress until it is won or out of guesses, after
which it is Over for good.
"""

from typing import Optional, Union

from ..config.game_settings import MAX_GUESSES, WORD_LENGTH, is_valid_word
from ..errors import GameAlreadyOver, InvalidGuessFormat, NotInWordList
from ..models.game import GuessResult, PublicView, RevealedView, Session
from .evaluator import evaluate
from .word_bank import WordBank


def check_guess_budget(max_guesses) -> int:
    """Reject budgets that would start a game already out of guesses."""
    if isinstance(max_guesses, bool) or not isinstance(max_guesses, int) or max_guesses < 1:
        raise ValueError(f"max_guesses must be a positive integer, got {max_guesses!r}")
    return max_guesses


def create_session(word_bank: WordBank,
                   secret_word: Optional[str] = None,
                   max_guesses: int = MAX_GUESSES) -> Session:
    """
    Start a new game.

    A caller-supplied word is used only when it is exactly five ASCII letters;
    anything else falls back to a uniform draw from the word bank.

    Raises:
        ValueError: If max_guesses is below 1
    """
    check_guess_budget(max_guesses)
    if is_valid_word(secret_word):
        word = secret_word.lower()
    else:
        word = word_bank.choose()
    return Session(secret_word=word, remaining_guesses=max_guesses)


def validate_guess(raw_guess, word_bank: Optional[WordBank] = None) -> str:
    """
    Check a raw guess and return it normalized to lowercase.

    Raises:
        InvalidGuessFormat: Not a string of exactly five ASCII letters
        NotInWordList: word_bank was given and does not contain the guess
    """
    if not isinstance(raw_guess, str):
        raise InvalidGuessFormat("Guess must be a valid string")
    if len(raw_guess) != WORD_LENGTH:
        raise InvalidGuessFormat(f"Guess must be exactly {WORD_LENGTH} letters")
    if not (raw_guess.isascii() and raw_guess.isalpha()):
        raise InvalidGuessFormat("Guess must contain only letters")

    guess = raw_guess.lower()
    if word_bank is not None and guess not in word_bank:
        raise NotInWordList()
    return guess


def submit_guess(session: Session,
                 raw_guess,
                 word_bank: Optional[WordBank] = None,
                 dedupe_wrong_letters: bool = False) -> GuessResult:
    """
    Apply one guess to the session.

    All checks run before anything is touched, so a rejected guess leaves the
    session exactly as it was.

    Args:
        session: Session to mutate
        raw_guess: Guess as received from the client
        word_bank: When given, the guess must be one of its words
        dedupe_wrong_letters: Treat wrong_letters as a set instead of a multiset

    Returns:
        The per-letter result of the guess

    Raises:
        InvalidGuessFormat, NotInWordList, GameAlreadyOver
    """
    guess = validate_guess(raw_guess, word_bank)
    if session.game_over:
        raise GameAlreadyOver()

    evaluation = evaluate(session.secret_word, guess)

    session.guess_history.append(evaluation.result)
    for letter in evaluation.wrong_letters:
        if dedupe_wrong_letters and letter in session.wrong_letters:
            continue
        session.wrong_letters.append(letter)
    session.close_letters |= evaluation.close_letters
    session.right_letters |= evaluation.right_letters
    session.remaining_guesses = max(session.remaining_guesses - 1, 0)

    if guess == session.secret_word or session.remaining_guesses <= 0:
        session.game_over = True

    return evaluation.result


def get_view(session: Session) -> Union[PublicView, RevealedView]:
    """Snapshot of the session safe to hand to clients."""
    fields = dict(
        guesses=tuple(session.guess_history),
        wrong_letters=tuple(session.wrong_letters),
        close_letters=tuple(sorted(session.close_letters)),
        right_letters=tuple(sorted(session.right_letters)),
        remaining_guesses=session.remaining_guesses,
        game_over=session.game_over
    )
    if session.game_over:
        return RevealedView(answer=session.secret_word, **fields)
    return PublicView(**fields)


def reset_session(session: Session,
                  word_bank: WordBank,
                  max_guesses: int = MAX_GUESSES) -> PublicView:
    """Discard all progress and start over on a fresh random word, in place."""
    fresh = create_session(word_bank, max_guesses=max_guesses)
    session.secret_word = fresh.secret_word
    session.guess_history = fresh.guess_history
    session.wrong_letters = fresh.wrong_letters
    session.close_letters = fresh.close_letters
    session.right_letters = fresh.right_letters
    session.remaining_guesses = fresh.remaining_guesses
    session.game_over = fresh.game_over
    return get_view(session)
