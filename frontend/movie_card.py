from __future__ import annotations

"""
movie_card.py

Render Streamlit de la tarjeta de búsqueda.

Una rama por variante de catalog.view_state.ViewState (precedencia resuelta
en build_view, aquí solo se pinta):
- OFFLINE  -> aviso sin conexión
- LOADING  -> spinner
- ERROR    -> indicador de error genérico
- EMPTY    -> "There's no such movie"
- RESULTS  -> lista + paginación (total = pages * 10)
- IDLE     -> nada
"""

from typing import Final

import streamlit as st

from catalog.movie_card import MovieCard
from catalog.view_state import MovieCardView, ViewState
from frontend.front_logger import log_info
from frontend.movie_item import render_movie_item

PAGE_WIDGET_KEY: Final[str] = "movie_card_page"


def render_error_indicator() -> None:
    st.error("BOOM! Something went wrong. We are already working on it.")


def _on_page_change(card: MovieCard) -> None:
    page = int(st.session_state[PAGE_WIDGET_KEY])
    log_info(f"page -> {page} (query={card.search_value!r})")
    card.change_page(page)


def _render_pagination(card: MovieCard, view: MovieCardView) -> None:
    # El widget refleja siempre current_page (p.ej. tras volver a la página 1 por nueva búsqueda).
    last_page = max(1, view.page_count)
    st.session_state[PAGE_WIDGET_KEY] = min(view.current_page, last_page)

    _, col, _ = st.columns([2, 1, 2])
    with col:
        st.number_input(
            f"Page (of {last_page})",
            min_value=1,
            max_value=last_page,
            step=1,
            key=PAGE_WIDGET_KEY,
            on_change=_on_page_change,
            args=(card,),
        )


def _render_results(card: MovieCard, view: MovieCardView) -> None:
    on_rate = card.add_to_rated if view.can_rate else None
    for movie in view.movies:
        render_movie_item(
            movie,
            view.genres,
            on_rate=on_rate,
            user_rating=view.rated.get(int(movie.get("id", 0))),
        )
    _render_pagination(card, view)


def render_movie_card(card: MovieCard) -> ViewState:
    view = card.view()

    if view.kind is ViewState.OFFLINE:
        st.warning("### No Internet Connection\nPlease check your network and try again.")
    elif view.kind is ViewState.LOADING:
        with st.spinner("Loading..."):
            st.empty()
    elif view.kind is ViewState.ERROR:
        render_error_indicator()
    elif view.kind is ViewState.EMPTY:
        st.info("There's no such movie")
    elif view.kind is ViewState.RESULTS:
        _render_results(card, view)

    return view.kind
