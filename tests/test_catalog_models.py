from __future__ import annotations

import pytest

from catalog.models import (
    CatalogClientError,
    build_genre_map,
    genre_names,
    parse_genres,
    parse_search_page,
    poster_url,
)


def test_parse_genres_and_map():
    genres = parse_genres({"genres": [{"id": 28, "name": "Action"}, {"id": 35, "name": "Comedy"}]})

    assert build_genre_map(genres) == {28: "Action", 35: "Comedy"}


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"genres": "nope"},
        {"genres": [{"id": "28", "name": "Action"}]},
        {"genres": ["Action"]},
    ],
)
def test_parse_genres_rejects_unexpected_shapes(payload):
    with pytest.raises(CatalogClientError):
        parse_genres(payload)


def test_parse_search_page_empty_results():
    page = parse_search_page({"page": 1, "results": [], "total_pages": 0, "total_results": 0})

    assert page.results == []
    assert page.total_pages == 0


def test_parse_search_page_missing_results_is_empty():
    assert parse_search_page({"total_pages": 0}).results == []


def test_parse_search_page_rejects_movies_without_id():
    with pytest.raises(CatalogClientError):
        parse_search_page({"results": [{"title": "x"}], "total_pages": 1})


def test_parse_search_page_rejects_negative_pages():
    with pytest.raises(CatalogClientError):
        parse_search_page({"results": [], "total_pages": -1})


def test_genre_names_skips_unknown_ids():
    movie = {"id": 1, "genre_ids": [28, 999, 18]}

    assert genre_names(movie, {28: "Action", 18: "Drama"}) == ["Action", "Drama"]
    assert genre_names({"id": 2}, {28: "Action"}) == []


def test_poster_url():
    assert poster_url({"id": 1, "poster_path": "/p.jpg"}, image_base_url="https://img/t/p/w500/") == (
        "https://img/t/p/w500/p.jpg"
    )
    assert poster_url({"id": 1, "poster_path": None}, image_base_url="https://img") is None
