from __future__ import annotations

"""
catalog/movie_card.py

MovieCard: el "componente" de búsqueda (independiente de la UI).

Entrada única: search_value. Salida: view() -> MovieCardView.

Ciclo de vida
-------------
- mount():   suscribe el monitor de conectividad + bootstrap (géneros + guest session)
- unmount(): cancela la suscripción
- también usable como context manager (`with MovieCard(...) as card:`)

Eventos
-------
- set_search_value(v): v sin espacios; si cambia y no queda vacío -> current_page=1 + fetch(v, 1)
- change_page(p):      current_page=p + fetch(search_value, p)
- add_to_rated(id, r): RatingResult (nunca se traga el error)
"""

import threading
from collections.abc import Callable
from types import TracebackType

from catalog import logger as logger
from catalog.bootstrap import BootstrapOutcome, SessionBootstrapper
from catalog.catalog_client import CatalogApi, CatalogClient
from catalog.connectivity import ConnectivityMonitor
from catalog.rating import RatingResult, RatingSubmitter
from catalog.search import SearchOrchestrator, SearchOutcome
from catalog.session_store import GuestSessionStore
from catalog.state import MovieCardState
from catalog.view_state import MovieCardView, build_view


class MovieCard:
    def __init__(
        self,
        client: CatalogApi | None = None,
        *,
        monitor: ConnectivityMonitor | None = None,
        store: GuestSessionStore | None = None,
        reuse_stored_session: bool | None = None,
    ) -> None:
        self._client: CatalogApi = client if client is not None else CatalogClient()
        self._monitor = monitor if monitor is not None else ConnectivityMonitor()
        self._lock = threading.RLock()

        self.state = MovieCardState(is_offline=self._monitor.is_offline)
        self.search_value: str = ""
        self.bootstrap_outcome: BootstrapOutcome | None = None

        self._bootstrapper = SessionBootstrapper(
            self._client,
            self.state,
            self._lock,
            store=store,
            reuse_stored_session=reuse_stored_session,
        )
        self._search = SearchOrchestrator(self._client, self.state, self._lock)
        self._rating = RatingSubmitter(self._client, self.state, self._lock)

        self._unsubscribe: Callable[[], None] | None = None

    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    def mount(self) -> BootstrapOutcome:
        if self._unsubscribe is None:
            self._unsubscribe = self._monitor.subscribe(self._on_connectivity)
        # El estado de red puede haber cambiado mientras estaba desmontado.
        with self._lock:
            self.state.is_offline = self._monitor.is_offline
        self.bootstrap_outcome = self._bootstrapper.bootstrap()
        if not self.bootstrap_outcome.ok:
            logger.warning(f"[CARD] bootstrap failed at step={self.bootstrap_outcome.failed_step}", always=True)
        return self.bootstrap_outcome

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __enter__(self) -> "MovieCard":
        self.mount()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unmount()

    def _on_connectivity(self, online: bool) -> None:
        with self._lock:
            self.state.is_offline = not online

    # ------------------------------------------------------------------
    # Eventos
    # ------------------------------------------------------------------

    def fetch_movies(self, query: str, page: int) -> SearchOutcome:
        return self._search.fetch_movies(query, page)

    def set_search_value(self, value: str | None) -> SearchOutcome | None:
        new_value = (value or "").strip()
        if new_value == self.search_value:
            return None
        self.search_value = new_value
        if not new_value:
            return None
        with self._lock:
            self.state.current_page = 1
        return self._search.fetch_movies(new_value, 1)

    def change_page(self, page: int) -> SearchOutcome | None:
        if not self.search_value:
            return None
        with self._lock:
            self.state.current_page = page
        return self._search.fetch_movies(self.search_value, page)

    def add_to_rated(self, movie_id: int, rating: float) -> RatingResult:
        return self._rating.add_to_rated(movie_id, rating)

    def refresh_connectivity(self) -> bool:
        return self._monitor.refresh()

    # ------------------------------------------------------------------
    # Vista
    # ------------------------------------------------------------------

    def view(self) -> MovieCardView:
        with self._lock:
            return build_view(self.state, self.search_value)
