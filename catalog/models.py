from __future__ import annotations

"""
catalog/models.py

Tipos del catálogo y parseo estricto de payloads.

- Genre / Movie: TypedDict (los registros del catálogo se tratan como opacos,
  solo se tipan los campos que consume el renderer).
- SearchPage: resultado normalizado de una búsqueda (se reemplaza entero en cada fetch).
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TypedDict


class CatalogClientError(Exception):
    pass


class Genre(TypedDict):
    id: int
    name: str


class Movie(TypedDict, total=False):
    id: int
    title: str
    original_title: str
    poster_path: str | None
    genre_ids: list[int]
    overview: str
    release_date: str
    vote_average: float


@dataclass(frozen=True)
class SearchPage:
    results: list[Movie] = field(default_factory=list)
    total_pages: int = 0
    page: int = 1
    total_results: int = 0


def _require_dict(payload: object, *, what: str) -> Mapping[str, object]:
    if not isinstance(payload, dict):
        raise CatalogClientError(f"Unexpected payload for {what} (not a dict).")
    return payload


def parse_genres(payload: object) -> list[Genre]:
    data = _require_dict(payload, what="genres")
    genres_obj = data.get("genres")
    if not isinstance(genres_obj, list):
        raise CatalogClientError("Unexpected payload: 'genres' is not a list.")

    out: list[Genre] = []
    for g in genres_obj:
        if not isinstance(g, dict):
            raise CatalogClientError("Unexpected payload: genre is not a dict.")
        gid = g.get("id")
        name = g.get("name")
        if not isinstance(gid, int) or not isinstance(name, str):
            raise CatalogClientError(f"Unexpected genre record: {g!r}")
        out.append(Genre(id=gid, name=name))
    return out


def parse_search_page(payload: object, *, max_pages: int | None = None) -> SearchPage:
    data = _require_dict(payload, what="search")

    results_obj = data.get("results")
    if results_obj is None:
        results_obj = []
    if not isinstance(results_obj, list):
        raise CatalogClientError("Unexpected payload: 'results' is not a list.")

    results: list[Movie] = []
    for it in results_obj:
        if not isinstance(it, dict) or not isinstance(it.get("id"), int):
            raise CatalogClientError("Unexpected payload: movie without integer 'id'.")
        results.append(it)  # type: ignore[arg-type]

    total_pages = data.get("total_pages", 0)
    if not isinstance(total_pages, int) or total_pages < 0:
        raise CatalogClientError("Unexpected payload: 'total_pages' is not a non-negative int.")
    if max_pages is not None:
        total_pages = min(total_pages, max_pages)

    page = data.get("page", 1)
    total_results = data.get("total_results", len(results))

    return SearchPage(
        results=results,
        total_pages=total_pages,
        page=page if isinstance(page, int) else 1,
        total_results=total_results if isinstance(total_results, int) else len(results),
    )


def build_genre_map(genres: Iterable[Genre]) -> dict[int, str]:
    return {g["id"]: g["name"] for g in genres}


def genre_names(movie: Movie, genre_map: Mapping[int, str]) -> list[str]:
    """Nombres de género del movie; ids desconocidos se omiten."""
    return [genre_map[gid] for gid in movie.get("genre_ids") or [] if gid in genre_map]


def poster_url(movie: Movie, *, image_base_url: str) -> str | None:
    path = movie.get("poster_path")
    if not path:
        return None
    p = path if path.startswith("/") else f"/{path}"
    return f"{image_base_url.rstrip('/')}{p}"
