from __future__ import annotations

import threading

from catalog.bootstrap import SessionBootstrapper
from catalog.session_store import GuestSessionStore
from catalog.state import MovieCardState


def _bootstrapper(catalog, store, *, reuse=False):  # type: ignore[no-untyped-def]
    state = MovieCardState()
    return state, SessionBootstrapper(catalog, state, threading.RLock(), store=store, reuse_stored_session=reuse)


def test_bootstrap_loads_genres_and_persists_session(fake_catalog, session_store):
    state, boot = _bootstrapper(fake_catalog, session_store)

    outcome = boot.bootstrap()

    assert outcome.ok is True
    assert outcome.failed_step is None
    assert state.genres == {28: "Action", 18: "Drama"}
    assert state.guest_session_id == "guest-123"
    assert state.err is False
    assert session_store.load() == "guest-123"


def test_genre_failure_aborts_before_session(fake_catalog, session_store):
    fake_catalog.fail_genres = True
    state, boot = _bootstrapper(fake_catalog, session_store)

    outcome = boot.bootstrap()

    assert outcome.failed_step == "genres"
    assert outcome.session_started is False
    assert fake_catalog.session_calls == 0
    assert state.err is True
    assert state.guest_session_id is None


def test_session_failure_is_reported_distinctly(fake_catalog, session_store):
    fake_catalog.fail_session = True
    state, boot = _bootstrapper(fake_catalog, session_store)

    outcome = boot.bootstrap()

    assert outcome.failed_step == "session"
    assert outcome.genres_loaded is True
    assert state.genres
    assert state.err is True
    assert session_store.load() is None


def test_stored_session_is_not_reused_by_default(fake_catalog, session_store):
    session_store.save("old-guest")
    state, boot = _bootstrapper(fake_catalog, session_store)

    boot.bootstrap()

    assert fake_catalog.session_calls == 1
    assert state.guest_session_id == "guest-123"
    assert session_store.load() == "guest-123"


def test_stored_session_reused_when_enabled(fake_catalog, session_store):
    session_store.save("old-guest")
    state, boot = _bootstrapper(fake_catalog, session_store, reuse=True)

    outcome = boot.bootstrap()

    assert outcome.session_reused is True
    assert fake_catalog.session_calls == 0
    assert state.guest_session_id == "old-guest"


def test_persist_failure_does_not_fail_bootstrap(fake_catalog, tmp_path, monkeypatch):
    store = GuestSessionStore(tmp_path / "s.json")

    def boom(session_id):  # type: ignore[no-untyped-def]
        raise PermissionError("read-only")

    monkeypatch.setattr(store, "save", boom)
    state, boot = _bootstrapper(fake_catalog, store)

    outcome = boot.bootstrap()

    assert outcome.ok is True
    assert state.guest_session_id == "guest-123"
