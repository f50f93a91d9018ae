"""
Game Service

Request-level game operations over a session store.
"""

from typing import Optional, Union

from flask import current_app

from ..config.game_settings import MAX_GUESSES
from ..errors import MissingSessionID, SessionNotFound
from ..models.game import PublicView, RevealedView, Session
from .game_state import check_guess_budget, create_session, get_view, reset_session, submit_guess
from .session_store import InMemorySessionStore, SessionStore
from .word_bank import WordBank

View = Union[PublicView, RevealedView]


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Session creation under transport-supplied identifiers
    - Guess validation and evaluation
    - Redacted game state that never exposes an unfinished answer
    - Reset and deletion of sessions
    """

    def __init__(self,
                 word_bank: WordBank,
                 store: Optional[SessionStore] = None,
                 max_guesses: int = MAX_GUESSES,
                 require_dictionary_word: bool = False,
                 dedupe_wrong_letters: bool = False):
        self.word_bank = word_bank
        self.store = store if store is not None else InMemorySessionStore()
        self.max_guesses = check_guess_budget(max_guesses)
        self.require_dictionary_word = require_dictionary_word
        self.dedupe_wrong_letters = dedupe_wrong_letters

    def new_game(self, session_id: str, answer: Optional[str] = None) -> Session:
        """
        Creates a new session under session_id.

        Args:
            session_id: Opaque identifier chosen by the caller
            answer: Optional secret word; invalid words fall back to a random pick

        Returns:
            The new Session
        """
        if not session_id:
            raise MissingSessionID()
        session = create_session(self.word_bank, answer, self.max_guesses)
        with self.store.lock(session_id):
            self.store.put(session_id, session)
        return session

    def get_state(self, session_id: str) -> View:
        """Returns the redacted view of a session."""
        with self.store.lock(self._require_id(session_id)):
            return get_view(self._fetch(session_id))

    def guess(self, session_id: str, guess) -> View:
        """
        Processes a guess and returns the updated view.

        Raises:
            MissingSessionID, SessionNotFound, InvalidGuessFormat,
            NotInWordList, GameAlreadyOver
        """
        with self.store.lock(self._require_id(session_id)):
            session = self._fetch(session_id)
            submit_guess(
                session,
                guess,
                word_bank=self.word_bank if self.require_dictionary_word else None,
                dedupe_wrong_letters=self.dedupe_wrong_letters
            )
            return get_view(session)

    def reset(self, session_id: str) -> PublicView:
        """Replaces the session's game with a fresh one on a new random word."""
        with self.store.lock(self._require_id(session_id)):
            return reset_session(self._fetch(session_id), self.word_bank, self.max_guesses)

    def delete(self, session_id: str) -> None:
        """Removes a session from the store."""
        with self.store.lock(self._require_id(session_id)):
            if not self.store.delete(session_id):
                raise SessionNotFound()

    @property
    def active_sessions(self) -> int:
        return len(self.store)

    def shutdown(self) -> None:
        self.store.close()

    @staticmethod
    def _require_id(session_id: Optional[str]) -> str:
        if not session_id:
            raise MissingSessionID()
        return session_id

    def _fetch(self, session_id: str) -> Session:
        session = self.store.get(session_id)
        if session is None:
            raise SessionNotFound()
        return session


def get_game_service() -> Optional[GameService]:
    """Get the game service owned by the current application."""
    return current_app.extensions.get('game_service')
