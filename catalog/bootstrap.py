from __future__ import annotations

"""
catalog/bootstrap.py

Arranque de la tarjeta: catálogo de géneros + guest session.

Orden secuencial: géneros -> sesión. Un fallo en cualquiera de los dos pasos
activa el flag genérico `err` y aborta el resto. El BootstrapOutcome sí
distingue qué paso falló (`failed_step`).

La persistencia del id es best-effort: si no se puede escribir el fichero se
avisa y se sigue con el id en memoria.
"""

import threading
from dataclasses import dataclass
from typing import Literal

from catalog import logger as logger
from catalog.catalog_client import CatalogApi
from catalog.config_catalog import GUEST_SESSION_REUSE
from catalog.models import CatalogClientError, build_genre_map
from catalog.session_store import GuestSessionStore
from catalog.state import MovieCardState

BootstrapStep = Literal["genres", "session"]


@dataclass(frozen=True)
class BootstrapOutcome:
    genres_loaded: bool = False
    session_started: bool = False
    session_reused: bool = False
    genres_error: str | None = None
    session_error: str | None = None

    @property
    def failed_step(self) -> BootstrapStep | None:
        if self.genres_error is not None:
            return "genres"
        if self.session_error is not None:
            return "session"
        return None

    @property
    def ok(self) -> bool:
        return self.failed_step is None


class SessionBootstrapper:
    def __init__(
        self,
        client: CatalogApi,
        state: MovieCardState,
        lock: threading.RLock,
        *,
        store: GuestSessionStore | None = None,
        reuse_stored_session: bool | None = None,
    ) -> None:
        self._client = client
        self._state = state
        self._lock = lock
        self._store = store if store is not None else GuestSessionStore()
        self._reuse = GUEST_SESSION_REUSE if reuse_stored_session is None else reuse_stored_session

    def bootstrap(self) -> BootstrapOutcome:
        try:
            genres = self._client.get_genres()
        except CatalogClientError as exc:
            logger.error(f"[BOOT] genre catalog failed: {exc}")
            with self._lock:
                self._state.err = True
            return BootstrapOutcome(genres_error=str(exc))

        with self._lock:
            self._state.genres = build_genre_map(genres)
        logger.debug_ctx("BOOT", f"genres loaded: {len(genres)}")

        stored = self._load_stored_session() if self._reuse else None
        if stored is not None:
            with self._lock:
                self._state.guest_session_id = stored
            logger.debug_ctx("BOOT", "reusing stored guest session")
            return BootstrapOutcome(genres_loaded=True, session_started=True, session_reused=True)

        try:
            session_id = self._client.start_guest_session()
        except CatalogClientError as exc:
            logger.error(f"[BOOT] guest session failed: {exc}")
            with self._lock:
                self._state.err = True
            return BootstrapOutcome(genres_loaded=True, session_error=str(exc))

        with self._lock:
            self._state.guest_session_id = session_id
        self._persist(session_id)

        return BootstrapOutcome(genres_loaded=True, session_started=True)

    def _load_stored_session(self) -> str | None:
        try:
            return self._store.load()
        except OSError as exc:
            logger.warning(f"[BOOT] could not read guest session store: {exc!r}", always=True)
            return None

    def _persist(self, session_id: str) -> None:
        try:
            self._store.save(session_id)
        except OSError as exc:
            logger.warning(f"[BOOT] could not persist guest session: {exc!r}", always=True)
