from __future__ import annotations

"""
movie_item.py

Ficha de un movie dentro de la lista de resultados (Streamlit).

- Póster, título, fecha de estreno, géneros (vía mapping id -> nombre),
  overview recortado y nota media coloreada por tramos.
- Control de valoración (0.5 .. 10) que delega en `on_rate` y muestra el
  resultado (éxito o error) en la propia ficha.

Los helpers de formato son puros para poder testearlos sin Streamlit.
"""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Final

import streamlit as st

from catalog.config_catalog import CATALOG_IMAGE_BASE_URL
from catalog.models import Movie, genre_names, poster_url
from catalog.rating import RatingResult
from frontend.config_front_base import FRONT_OVERVIEW_MAX_CHARS, FRONT_POSTER_WIDTH

OnRate = Callable[[int, float], RatingResult]

# (límite superior exclusivo, color)
_VOTE_BANDS: Final[tuple[tuple[float, str], ...]] = (
    (3.0, "#E90000"),
    (5.0, "#E97E00"),
    (7.0, "#E9D100"),
)
_VOTE_TOP_COLOR: Final[str] = "#66E900"


def vote_color(vote_average: float | None) -> str:
    v = float(vote_average or 0.0)
    for upper, color in _VOTE_BANDS:
        if v < upper:
            return color
    return _VOTE_TOP_COLOR


def format_release_date(raw: str | None) -> str:
    """'1999-03-30' -> 'March 30, 1999'. Vacío o inválido -> ''."""
    if not raw:
        return ""
    try:
        d = datetime.strptime(raw.strip(), "%Y-%m-%d")
    except ValueError:
        return ""
    return f"{d:%B} {d.day}, {d.year}"


def truncate_overview(text: str | None, max_chars: int = FRONT_OVERVIEW_MAX_CHARS) -> str:
    s = (text or "").strip()
    if len(s) <= max_chars:
        return s
    cut = s[:max_chars]
    # Corte a mitad de palabra -> retrocede al último espacio
    if not s[max_chars].isspace():
        space = cut.rfind(" ")
        if space > 0:
            cut = cut[:space]
    return cut.rstrip(" ,.;:") + "..."


def _render_rate_result(result: RatingResult) -> None:
    if result.ok:
        st.success(f"Rated {result.rating:g}")
    elif result.status == "no_session":
        st.warning("Rating is unavailable: no guest session.")
    else:
        st.error("Could not save your rating. Please try again.")


def render_movie_item(
    movie: Movie,
    genres: Mapping[int, str],
    *,
    on_rate: OnRate | None = None,
    user_rating: float | None = None,
    key_prefix: str = "movie",
) -> None:
    movie_id = int(movie.get("id", 0))
    key = f"{key_prefix}_{movie_id}"

    with st.container(border=True):
        col_img, col_body = st.columns([1, 3])

        with col_img:
            url = poster_url(movie, image_base_url=CATALOG_IMAGE_BASE_URL)
            if url:
                st.image(url, width=FRONT_POSTER_WIDTH)
            else:
                st.caption("No poster")

        with col_body:
            vote = movie.get("vote_average")
            color = vote_color(vote)
            st.markdown(
                f"**{movie.get('title') or movie.get('original_title') or '—'}** "
                f"<span style='border:2px solid {color};border-radius:50%;padding:2px 6px;float:right'>"
                f"{float(vote or 0.0):.1f}</span>",
                unsafe_allow_html=True,
            )

            released = format_release_date(movie.get("release_date"))
            if released:
                st.caption(released)

            names = genre_names(movie, genres)
            if names:
                st.markdown(" ".join(f"`{n}`" for n in names))

            overview = truncate_overview(movie.get("overview"))
            if overview:
                st.write(overview)

            if on_rate is None:
                return

            rating = st.slider(
                "Your rating",
                min_value=0.5,
                max_value=10.0,
                value=float(user_rating) if user_rating else 5.0,
                step=0.5,
                key=f"{key}_slider",
            )
            if st.button("Rate", key=f"{key}_rate"):
                _render_rate_result(on_rate(movie_id, float(rating)))
            elif user_rating:
                st.caption(f"Your rating: {user_rating:g}")
