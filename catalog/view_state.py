from __future__ import annotations

"""
catalog/view_state.py

Variante explícita de la vista: función pura (estado, search_value) -> MovieCardView.

Precedencia estricta:
  OFFLINE > LOADING > ERROR > EMPTY > RESULTS > IDLE
RESULTS exige search_value no vacío y movies no vacío.
"""

from dataclasses import dataclass, field
from enum import Enum

from catalog.config_catalog import PAGINATION_PAGE_SIZE
from catalog.models import Movie
from catalog.state import MovieCardState


class ViewState(str, Enum):
    OFFLINE = "offline"
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    RESULTS = "results"
    IDLE = "idle"


@dataclass(frozen=True)
class MovieCardView:
    kind: ViewState
    movies: list[Movie] = field(default_factory=list)
    genres: dict[int, str] = field(default_factory=dict)
    rated: dict[int, float] = field(default_factory=dict)
    current_page: int = 1
    total_items: int = 0
    can_rate: bool = False

    @property
    def page_count(self) -> int:
        return -(-self.total_items // PAGINATION_PAGE_SIZE) if self.total_items > 0 else 0


def pagination_total(pages: int) -> int:
    return max(0, int(pages)) * PAGINATION_PAGE_SIZE


def resolve_view_state(state: MovieCardState, search_value: str | None) -> ViewState:
    if state.is_offline:
        return ViewState.OFFLINE
    if state.loading:
        return ViewState.LOADING
    if state.err:
        return ViewState.ERROR
    if state.no_movie_error:
        return ViewState.EMPTY
    if search_value and state.movies:
        return ViewState.RESULTS
    return ViewState.IDLE


def build_view(state: MovieCardState, search_value: str | None) -> MovieCardView:
    kind = resolve_view_state(state, search_value)
    if kind is not ViewState.RESULTS:
        return MovieCardView(kind=kind)
    return MovieCardView(
        kind=kind,
        movies=list(state.movies),
        genres=dict(state.genres),
        rated=dict(state.rated),
        current_page=state.current_page,
        total_items=pagination_total(state.pages),
        can_rate=bool(state.guest_session_id),
    )
