from __future__ import annotations

import json
from pathlib import Path

from catalog.session_store import GuestSessionStore


def test_save_and_load_round_trip(session_store: GuestSessionStore):
    assert session_store.load() is None

    session_store.save("guest-1")

    assert session_store.load() == "guest-1"
    data = json.loads(session_store.path.read_text(encoding="utf-8"))
    assert data == {"guestSessionId": "guest-1"}


def test_save_preserves_other_keys(tmp_path: Path):
    path = tmp_path / "nested" / "store.json"
    path.parent.mkdir()
    path.write_text(json.dumps({"other": 1}), encoding="utf-8")
    store = GuestSessionStore(path)

    store.save("guest-2")

    assert json.loads(path.read_text(encoding="utf-8")) == {"other": 1, "guestSessionId": "guest-2"}
    assert [p.name for p in path.parent.iterdir()] == ["store.json"]


def test_corrupt_file_is_treated_as_empty(tmp_path: Path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")

    assert GuestSessionStore(path).load() is None


def test_clear_removes_key(session_store: GuestSessionStore):
    session_store.save("guest-3")

    session_store.clear()

    assert session_store.load() is None
