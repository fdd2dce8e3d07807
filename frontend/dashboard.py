from __future__ import annotations

# =============================================================================
# frontend/dashboard.py
#
# Página Streamlit: caja de búsqueda + tarjeta de resultados.
#
# PRINCIPIOS:
# - Una MovieCard por sesión de navegador (st.session_state), montada una vez.
# - Cada rerun re-sondea la conectividad y propaga search_value a la tarjeta.
# - El render es una función del estado (frontend/movie_card.py).
# =============================================================================

import sys
from pathlib import Path
from typing import Final

import streamlit as st

# =============================================================================
# 1) Fix de import path (solo para Streamlit)
# =============================================================================

_PROJECT_ROOT: Final[Path] = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from catalog.movie_card import MovieCard  # noqa: E402
from frontend.config_front_base import FRONT_DEBUG, FRONT_PAGE_TITLE  # noqa: E402
from frontend.movie_card import render_movie_card  # noqa: E402

_CARD_KEY: Final[str] = "movie_card"


def _get_card() -> MovieCard:
    card = st.session_state.get(_CARD_KEY)
    if isinstance(card, MovieCard):
        return card

    card = MovieCard()
    with st.spinner("Connecting to the catalog..."):
        card.mount()
    st.session_state[_CARD_KEY] = card
    return card


def _debug_banner(card: MovieCard) -> None:
    if not FRONT_DEBUG:
        return
    s = card.state
    outcome = card.bootstrap_outcome
    st.caption(
        "DEBUG | "
        f"offline={s.is_offline} loading={s.loading} err={s.err} empty={s.no_movie_error} | "
        f"movies={len(s.movies)} pages={s.pages} page={s.current_page} | "
        f"session={'yes' if s.guest_session_id else 'no'} "
        f"bootstrap_failed={outcome.failed_step if outcome else None} "
        f"search_error={s.search_error!r}"
    )


# =============================================================================
# 2) Página
# =============================================================================

st.set_page_config(page_title=FRONT_PAGE_TITLE, layout="centered")

card = _get_card()
card.refresh_connectivity()

search_value = st.text_input("Search", placeholder="Type to search...", key="search_value")

with st.spinner("Loading..."):
    card.set_search_value(search_value.strip())

_debug_banner(card)
render_movie_card(card)
