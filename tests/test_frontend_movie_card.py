from __future__ import annotations

from contextlib import nullcontext

import pytest

import frontend.movie_card as movie_card
from catalog.view_state import MovieCardView, ViewState


class _RecordingStreamlit:
    def __init__(self) -> None:
        self.session_state: dict[str, object] = {}
        self.number_inputs: list[dict[str, object]] = []

    def columns(self, spec):  # type: ignore[no-untyped-def]
        return [nullcontext() for _ in spec]

    def number_input(self, label, **kwargs):  # type: ignore[no-untyped-def]
        self.number_inputs.append({"label": label, **kwargs})


@pytest.fixture()
def fake_st(monkeypatch: pytest.MonkeyPatch) -> _RecordingStreamlit:
    fake = _RecordingStreamlit()
    monkeypatch.setattr(movie_card, "st", fake)
    return fake


def test_pagination_rendered_for_single_page(fake_st):
    view = MovieCardView(kind=ViewState.RESULTS, total_items=10, current_page=1)

    movie_card._render_pagination(object(), view)  # type: ignore[arg-type]

    assert len(fake_st.number_inputs) == 1
    widget = fake_st.number_inputs[0]
    assert widget["min_value"] == 1
    assert widget["max_value"] == 1
    assert fake_st.session_state[movie_card.PAGE_WIDGET_KEY] == 1


def test_pagination_widget_follows_current_page(fake_st):
    view = MovieCardView(kind=ViewState.RESULTS, total_items=50, current_page=2)

    movie_card._render_pagination(object(), view)  # type: ignore[arg-type]

    assert fake_st.number_inputs[0]["max_value"] == 5
    assert fake_st.session_state[movie_card.PAGE_WIDGET_KEY] == 2
