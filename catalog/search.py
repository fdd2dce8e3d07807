from __future__ import annotations

"""
catalog/search.py

Orquestador de búsqueda: fetch_movies(query, page).

- Al empezar: loading=True, err=False, no_movie_error=False.
- Éxito con resultados: movies + pages; éxito vacío: movies=[] + no_movie_error.
- CatalogClientError: err=True.
- loading se limpia en `finally`.

Peticiones solapadas: cada llamada recibe una generación creciente. Solo la
respuesta de la última generación emitida toca el estado (y limpia loading);
una respuesta superada devuelve SearchOutcome.STALE sin efectos.
"""

import threading
from enum import Enum

from catalog import logger as logger
from catalog.catalog_client import CatalogApi
from catalog.models import CatalogClientError
from catalog.state import MovieCardState


class SearchOutcome(str, Enum):
    RESULTS = "results"
    EMPTY = "empty"
    ERROR = "error"
    STALE = "stale"


class SearchOrchestrator:
    def __init__(self, client: CatalogApi, state: MovieCardState, lock: threading.RLock) -> None:
        self._client = client
        self._state = state
        self._lock = lock
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def fetch_movies(self, query: str, page: int) -> SearchOutcome:
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._state.loading = True
            self._state.err = False
            self._state.no_movie_error = False
            self._state.search_error = None

        logger.debug_ctx("SEARCH", f"gen={generation} query={query!r} page={page}")

        outcome = SearchOutcome.STALE
        try:
            result = self._client.search_movies(query, page)
        except CatalogClientError as exc:
            with self._lock:
                if self._is_current(generation):
                    self._state.err = True
                    self._state.search_error = str(exc)
                    outcome = SearchOutcome.ERROR
            if outcome is SearchOutcome.ERROR:
                logger.error(f"[SEARCH] query={query!r} page={page} failed: {exc}")
        else:
            with self._lock:
                if self._is_current(generation):
                    if result.results:
                        self._state.movies = list(result.results)
                        self._state.pages = result.total_pages
                        self._state.no_movie_error = False
                        outcome = SearchOutcome.RESULTS
                    else:
                        self._state.movies = []
                        self._state.no_movie_error = True
                        outcome = SearchOutcome.EMPTY
        finally:
            with self._lock:
                if self._is_current(generation):
                    self._state.loading = False

        if outcome is SearchOutcome.STALE:
            logger.debug_ctx("SEARCH", f"gen={generation} superseded by gen={self._generation}; response dropped")
        return outcome
