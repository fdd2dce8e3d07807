from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from catalog.catalog_client import CatalogClient
from catalog.connectivity import ConnectivityMonitor
from catalog.models import CatalogClientError, Genre, Movie, SearchPage
from catalog.session_store import GuestSessionStore


# ---------------------------------------------------------------------------
# HTTP fakes (requests.Session)
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class FakeResponse:
    status_code: int = 200
    payload: object | None = None
    text: str = ""

    def json(self) -> object:
        if self.payload is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


@dataclass(slots=True)
class SessionCall:
    method: str
    url: str
    params: dict[str, object]
    json: object | None
    timeout: float | None


class FakeSession:
    """
    Minimal requests.Session mock with programmable routing.

    Records calls and returns the FakeResponse produced by `router(method, url)`.
    """

    def __init__(self, router: Callable[[str, str], FakeResponse]) -> None:
        self._router = router
        self.calls: list[SessionCall] = []
        self.closed = False

    def request(self, method, url, *, params=None, json=None, timeout=None):  # type: ignore[no-untyped-def]
        self.calls.append(SessionCall(method=method, url=url, params=dict(params or {}), json=json, timeout=timeout))
        return self._router(method, url)

    def close(self) -> None:
        self.closed = True


CatalogHttp = Callable[..., tuple[CatalogClient, FakeSession]]


@pytest.fixture()
def catalog_http() -> CatalogHttp:
    """
    Factory: CatalogClient (api_key "k", base https://api.example/3/) sobre un FakeSession.

    Sin router, cada request devuelve FakeResponse(status_code, payload, text).
    """

    def _build(
        router: Callable[[str, str], FakeResponse] | None = None,
        *,
        status_code: int = 200,
        payload: object | None = None,
        text: str = "",
    ) -> tuple[CatalogClient, FakeSession]:
        if router is None:
            response = FakeResponse(status_code=status_code, payload=payload, text=text)

            def _fixed(method: str, url: str) -> FakeResponse:
                return response

            router = _fixed

        client = CatalogClient(
            base_url="https://api.example/3/",
            api_key="k",
            read_token=None,
            language="en-US",
            include_adult=False,
        )
        session = FakeSession(router)
        client._session = session  # type: ignore[assignment]
        return client, session

    return _build


# ---------------------------------------------------------------------------
# Catalog fake (CatalogApi)
# ---------------------------------------------------------------------------


def build_movies(count: int, *, start_id: int = 1) -> list[Movie]:
    return [
        Movie(
            id=start_id + i,
            title=f"Movie {start_id + i}",
            genre_ids=[28],
            overview="",
            release_date="1999-03-30",
            vote_average=7.5,
        )
        for i in range(count)
    ]


@dataclass
class FakeCatalog:
    genres: list[Genre] = field(default_factory=lambda: [Genre(id=28, name="Action"), Genre(id=18, name="Drama")])
    session_id: str = "guest-123"
    pages: dict[tuple[str, int], SearchPage] = field(default_factory=dict)
    fail_genres: bool = False
    fail_session: bool = False
    fail_search: bool = False
    fail_rating: bool = False
    on_search: Callable[[str, int], None] | None = None

    search_calls: list[tuple[str, int]] = field(default_factory=list)
    rate_calls: list[tuple[int, float, str]] = field(default_factory=list)
    genre_calls: int = 0
    session_calls: int = 0

    def get_genres(self) -> list[Genre]:
        self.genre_calls += 1
        if self.fail_genres:
            raise CatalogClientError("HTTP 401 on /genre/movie/list")
        return list(self.genres)

    def search_movies(self, query: str, page: int) -> SearchPage:
        self.search_calls.append((query, page))
        if self.on_search is not None:
            self.on_search(query, page)
        if self.fail_search:
            raise CatalogClientError("Connection error calling /search/movie")
        return self.pages.get((query, page), SearchPage(results=[], total_pages=0, page=page))

    def start_guest_session(self) -> str:
        self.session_calls += 1
        if self.fail_session:
            raise CatalogClientError("HTTP 503 on /authentication/guest_session/new")
        return self.session_id

    def rate_movie(self, movie_id: int, rating: float, session_id: str) -> None:
        self.rate_calls.append((movie_id, rating, session_id))
        if self.fail_rating:
            raise CatalogClientError("HTTP 500 on /movie/rating")


@pytest.fixture()
def make_movies() -> Callable[..., list[Movie]]:
    return build_movies


@pytest.fixture()
def fake_catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture()
def session_store(tmp_path: Path) -> GuestSessionStore:
    return GuestSessionStore(tmp_path / "guest_session.json")


@pytest.fixture()
def online_monitor() -> ConnectivityMonitor:
    return ConnectivityMonitor(lambda: True)
