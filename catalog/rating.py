from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Literal

from catalog import logger as logger
from catalog.catalog_client import CatalogApi, validate_rating
from catalog.models import CatalogClientError
from catalog.state import MovieCardState

RatingStatus = Literal["ok", "no_session", "error"]


@dataclass(frozen=True)
class RatingResult:
    status: RatingStatus
    movie_id: int
    rating: float
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class RatingSubmitter:
    """
    Envía la valoración de un movie bajo la guest session activa.

    Sin sesión no hay llamada de red (status="no_session"). Un rating fuera
    de 0.5..10 (pasos de 0.5) o un fallo del catálogo se devuelven al caller
    como RatingResult(status="error").
    """

    def __init__(self, client: CatalogApi, state: MovieCardState, lock: threading.RLock) -> None:
        self._client = client
        self._state = state
        self._lock = lock

    def add_to_rated(self, movie_id: int, rating: float) -> RatingResult:
        with self._lock:
            session_id = self._state.guest_session_id

        if not session_id:
            logger.debug_ctx("RATE", f"no guest session; movie_id={movie_id} not rated")
            return RatingResult(status="no_session", movie_id=movie_id, rating=rating)

        try:
            rating = validate_rating(rating)
        except (TypeError, ValueError) as exc:
            logger.warning(f"[RATE] movie_id={movie_id} invalid rating: {exc}", always=True)
            return RatingResult(status="error", movie_id=movie_id, rating=rating, error=str(exc))

        try:
            self._client.rate_movie(movie_id, rating, session_id)
        except CatalogClientError as exc:
            logger.warning(f"[RATE] movie_id={movie_id} rating={rating} failed: {exc}", always=True)
            return RatingResult(status="error", movie_id=movie_id, rating=rating, error=str(exc))

        with self._lock:
            self._state.rated[movie_id] = rating
        return RatingResult(status="ok", movie_id=movie_id, rating=rating)
