from __future__ import annotations

from dataclasses import dataclass, field

from catalog.models import Movie


@dataclass
class MovieCardState:
    """
    Estado de una tarjeta de búsqueda.

    Invariante: como mucho uno de {loading, err, no_movie_error} es True al
    renderizar (cada fetch resetea err/no_movie_error al arrancar).
    """

    is_offline: bool = False
    loading: bool = False
    err: bool = False
    no_movie_error: bool = False
    movies: list[Movie] = field(default_factory=list)
    pages: int = 1
    current_page: int = 1
    genres: dict[int, str] = field(default_factory=dict)
    guest_session_id: str | None = None
    rated: dict[int, float] = field(default_factory=dict)
    # Detalle del último fallo de búsqueda (solo diagnóstico; la UI muestra el indicador genérico).
    search_error: str | None = None
