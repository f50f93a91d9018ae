import threading

import pytest

from wordgame.models.game import Session
from wordgame.services.session_store import InMemorySessionStore, SessionStore


def make_session(word="apple"):
    return Session(secret_word=word, remaining_guesses=6)


def test_put_get_delete():
    store = InMemorySessionStore()
    session = make_session()
    store.put("abc", session)
    assert store.get("abc") is session
    assert "abc" in store
    assert len(store) == 1
    assert store.delete("abc") is True
    assert store.get("abc") is None
    assert store.delete("abc") is False
    assert len(store) == 0


def test_close_clears_sessions():
    store = InMemorySessionStore()
    store.put("a", make_session())
    store.put("b", make_session("grape"))
    store.close()
    assert len(store) == 0


def test_lock_is_reentrant():
    store = InMemorySessionStore()
    with store.lock("abc"):
        with store.lock("abc"):
            store.put("abc", make_session())
    assert store.get("abc") is not None


def test_lock_serializes_per_session():
    store = InMemorySessionStore()
    store.put("abc", make_session())
    counter = {"value": 0}

    def bump():
        for _ in range(200):
            with store.lock("abc"):
                current = counter["value"]
                counter["value"] = current + 1

    threads = [threading.Thread(target=bump) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert counter["value"] == 800


def test_lock_entries_for_unknown_ids_are_dropped():
    store = InMemorySessionStore()
    for i in range(100):
        with store.lock(f"unknown-{i}"):
            assert store.get(f"unknown-{i}") is None
    assert len(store._locks) == 0


def test_lock_entry_lives_with_its_session():
    store = InMemorySessionStore()
    with store.lock("abc"):
        store.put("abc", make_session())
    assert "abc" in store._locks

    with store.lock("abc"):
        store.delete("abc")
    assert len(store._locks) == 0


def test_store_backends_must_provide_a_lock():
    class LocklessStore(SessionStore):
        def get(self, session_id):
            return None

        def put(self, session_id, session):
            pass

        def delete(self, session_id):
            return False

        def __len__(self):
            return 0

    with pytest.raises(TypeError):
        LocklessStore()
