from __future__ import annotations

"""
catalog/catalog_client.py

Cliente HTTP del catálogo de películas (TMDB v3).

Operaciones
-----------
- get_genres()                                  GET  /genre/movie/list
- search_movies(query, page)                    GET  /search/movie
- start_guest_session()                         GET  /authentication/guest_session/new
- rate_movie(movie_id, rating, session_id)      POST /movie/{id}/rating

Principios
----------
- requests.Session compartida por cliente (pooling vía HTTPAdapter), lazy-init thread-safe.
- Sin reintentos: un fallo es terminal para esa operación (la UI decide).
- Cualquier fallo de transporte, HTTP != 2xx, JSON inválido o payload con forma
  inesperada se traduce a CatalogClientError.
- Logs vía catalog/logger.py: debug_ctx("CATALOG", ...) para diagnóstico.
"""

import threading
from collections.abc import Mapping
from typing import Protocol

import requests
from requests.adapters import HTTPAdapter
from requests.exceptions import RequestException

from catalog import logger as logger
from catalog.config_catalog import (
    CATALOG_BASE_URL,
    CATALOG_HTTP_POOL_SIZE,
    CATALOG_HTTP_TIMEOUT_SECONDS,
    CATALOG_HTTP_USER_AGENT,
    CATALOG_INCLUDE_ADULT,
    CATALOG_LANGUAGE,
    CATALOG_MAX_PAGES,
    TMDB_API_KEY,
    TMDB_READ_TOKEN,
)
from catalog.models import CatalogClientError, Genre, SearchPage, parse_genres, parse_search_page

__all__ = ["CatalogApi", "CatalogClient", "CatalogClientError"]


class CatalogApi(Protocol):
    """Contrato que consumen los orquestadores (permite fakes en tests)."""

    def get_genres(self) -> list[Genre]: ...

    def search_movies(self, query: str, page: int) -> SearchPage: ...

    def start_guest_session(self) -> str: ...

    def rate_movie(self, movie_id: int, rating: float, session_id: str) -> None: ...


def _dbg(msg: object) -> None:
    logger.debug_ctx("CATALOG", msg)


def validate_rating(rating: float) -> float:
    """La API acepta 0.5 .. 10.0 en pasos de 0.5."""
    value = float(rating)
    if value < 0.5 or value > 10.0 or (value * 2) != int(value * 2):
        raise ValueError(f"Rating must be between 0.5 and 10 in steps of 0.5, got {rating!r}")
    return value


class CatalogClient:
    def __init__(
        self,
        *,
        base_url: str = CATALOG_BASE_URL,
        api_key: str | None = TMDB_API_KEY,
        read_token: str | None = TMDB_READ_TOKEN,
        language: str = CATALOG_LANGUAGE,
        include_adult: bool = CATALOG_INCLUDE_ADULT,
        timeout_s: float = CATALOG_HTTP_TIMEOUT_SECONDS,
        max_pages: int = CATALOG_MAX_PAGES,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.include_adult = include_adult
        self._api_key = api_key
        self._read_token = read_token
        self._timeout_s = timeout_s
        self._max_pages = max_pages
        self._session: requests.Session | None = None
        self._session_lock = threading.Lock()

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    def _get_session(self) -> requests.Session:
        if self._session is not None:
            return self._session

        with self._session_lock:
            if self._session is not None:
                return self._session

            if not self._api_key and not self._read_token:
                raise CatalogClientError("Missing catalog credentials (TMDB_API_KEY or TMDB_READ_TOKEN).")

            session = requests.Session()
            adapter = HTTPAdapter(
                max_retries=0,
                pool_connections=CATALOG_HTTP_POOL_SIZE,
                pool_maxsize=CATALOG_HTTP_POOL_SIZE,
            )
            session.mount("https://", adapter)
            session.mount("http://", adapter)

            headers = {
                "User-Agent": CATALOG_HTTP_USER_AGENT,
                "Accept": "application/json",
            }
            if self._read_token:
                headers["Authorization"] = f"Bearer {self._read_token}"
            session.headers.update(headers)

            self._session = session
            return session

    def _url(self, path: str) -> str:
        p = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}{p}"

    def _params(self, extra: Mapping[str, object] | None = None) -> dict[str, object]:
        params: dict[str, object] = {}
        if self._api_key and not self._read_token:
            params["api_key"] = self._api_key
        if extra:
            params.update(extra)
        return params

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, object] | None = None,
        json_body: Mapping[str, object] | None = None,
    ) -> object:
        url = self._url(path)
        session = self._get_session()
        _dbg(f"{method} {path} params={dict(params or {})!r}")

        try:
            resp = session.request(
                method,
                url,
                params=self._params(params),
                json=json_body,
                timeout=self._timeout_s,
            )
        except RequestException as exc:
            raise CatalogClientError(f"Connection error calling {path}: {exc!r}") from exc

        if not 200 <= resp.status_code < 300:
            detail = logger.truncate_line((resp.text or "").strip(), 200)
            raise CatalogClientError(f"HTTP {resp.status_code} on {path}: {detail}")

        try:
            return resp.json()
        except ValueError as exc:
            raise CatalogClientError(f"Non-JSON response on {path}: {exc}") from exc

    # ------------------------------------------------------------------
    # Operaciones
    # ------------------------------------------------------------------

    def get_genres(self) -> list[Genre]:
        payload = self._request_json("GET", "/genre/movie/list", params={"language": self.language})
        return parse_genres(payload)

    def search_movies(self, query: str, page: int) -> SearchPage:
        q = (query or "").strip()
        if not q:
            raise ValueError("search query must be a non-empty string")
        if page < 1:
            raise ValueError(f"page is 1-based, got {page!r}")

        payload = self._request_json(
            "GET",
            "/search/movie",
            params={
                "query": q,
                "page": page,
                "language": self.language,
                "include_adult": "true" if self.include_adult else "false",
            },
        )
        return parse_search_page(payload, max_pages=self._max_pages)

    def start_guest_session(self) -> str:
        payload = self._request_json("GET", "/authentication/guest_session/new")
        if not isinstance(payload, dict):
            raise CatalogClientError("Unexpected payload for guest session (not a dict).")
        if payload.get("success") is False:
            raise CatalogClientError("Catalog refused to create a guest session.")
        sid = payload.get("guest_session_id")
        if not isinstance(sid, str) or not sid.strip():
            raise CatalogClientError("Guest session response without 'guest_session_id'.")
        return sid

    def rate_movie(self, movie_id: int, rating: float, session_id: str) -> None:
        value = validate_rating(rating)
        payload = self._request_json(
            "POST",
            f"/movie/{int(movie_id)}/rating",
            params={"guest_session_id": session_id},
            json_body={"value": value},
        )
        if isinstance(payload, dict) and payload.get("success") is False:
            raise CatalogClientError(f"Rating rejected: {payload.get('status_message')!r}")

    def close(self) -> None:
        with self._session_lock:
            if self._session is not None:
                self._session.close()
                self._session = None
