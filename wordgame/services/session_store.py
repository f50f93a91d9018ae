"""
Session Store

Maps opaque session identifiers to Session records. The store is owned by the
application instance and serializes mutations per session identifier.
"""

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import ContextManager, Dict, Iterator, List, Optional

from ..models.game import Session


class SessionStore(ABC):
    """Interface every session backend implements."""

    @abstractmethod
    def get(self, session_id: str) -> Optional[Session]:
        """Return the session or None if it does not exist."""

    @abstractmethod
    def put(self, session_id: str, session: Session) -> None:
        """Insert or replace a session."""

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Remove a session. Returns False if it did not exist."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def lock(self, session_id: str) -> ContextManager[None]:
        """Hold exclusive access to one session for a read-modify-write cycle."""

    def close(self) -> None:
        """Release all resources held by the store."""


class InMemorySessionStore(SessionStore):
    """
    Process-local session store.

    Sessions live until deleted or until the store is closed; nothing expires
    on its own.
    """

    def __init__(self):
        self._sessions: Dict[str, Session] = {}
        # session_id -> [lock, holders and waiters]
        self._locks: Dict[str, List] = {}
        self._guard = threading.Lock()

    def get(self, session_id: str) -> Optional[Session]:
        with self._guard:
            return self._sessions.get(session_id)

    def put(self, session_id: str, session: Session) -> None:
        with self._guard:
            self._sessions[session_id] = session

    def delete(self, session_id: str) -> bool:
        with self._guard:
            return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._guard:
            return len(self._sessions)

    def __contains__(self, session_id) -> bool:
        with self._guard:
            return session_id in self._sessions

    @contextmanager
    def lock(self, session_id: str) -> Iterator[None]:
        """
        Per-session reentrant lock. The entry is dropped once nobody holds or
        waits on it and no session is stored under session_id.
        """
        with self._guard:
            entry = self._locks.get(session_id)
            if entry is None:
                entry = self._locks[session_id] = [threading.RLock(), 0]
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0 and session_id not in self._sessions:
                    self._locks.pop(session_id, None)

    def close(self) -> None:
        with self._guard:
            self._sessions.clear()
            self._locks.clear()
