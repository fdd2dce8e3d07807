from __future__ import annotations

from pathlib import Path
from typing import Final
from urllib.parse import urlparse

from catalog.config_base import (
    DATA_DIR,
    _cap_float_min,
    _cap_int,
    _get_env_bool,
    _get_env_float,
    _get_env_int,
    _get_env_str,
    _resolve_dir,
)

# ============================================================
# Catálogo (TMDB v3): credenciales + endpoints
# ============================================================

# api_key (v3) o read token (v4, cabecera Bearer). Si hay token, tiene prioridad.
TMDB_API_KEY: str | None = _get_env_str("TMDB_API_KEY", None)
TMDB_READ_TOKEN: str | None = _get_env_str("TMDB_READ_TOKEN", None)

CATALOG_BASE_URL: Final[str] = (
    _get_env_str("CATALOG_BASE_URL", "https://api.themoviedb.org/3") or "https://api.themoviedb.org/3"
).rstrip("/")
CATALOG_IMAGE_BASE_URL: Final[str] = (
    _get_env_str("CATALOG_IMAGE_BASE_URL", "https://image.tmdb.org/t/p/w500") or "https://image.tmdb.org/t/p/w500"
).rstrip("/")

CATALOG_LANGUAGE: Final[str] = _get_env_str("CATALOG_LANGUAGE", "en-US") or "en-US"
CATALOG_INCLUDE_ADULT: bool = _get_env_bool("CATALOG_INCLUDE_ADULT", False)

# La API rechaza page > 500 aunque total_pages sea mayor.
CATALOG_MAX_PAGES: int = _cap_int(
    "CATALOG_MAX_PAGES",
    _get_env_int("CATALOG_MAX_PAGES", 500),
    min_v=1,
    max_v=500,
)

# El control de paginación cuenta items en bloques de 10 (total = pages * 10).
PAGINATION_PAGE_SIZE: Final[int] = 10

# ============================================================
# Catálogo (HTTP client tuning)
# ============================================================

CATALOG_HTTP_TIMEOUT_SECONDS: float = _cap_float_min(
    "CATALOG_HTTP_TIMEOUT_SECONDS",
    _get_env_float("CATALOG_HTTP_TIMEOUT_SECONDS", 10.0),
    min_v=0.5,
)

CATALOG_HTTP_POOL_SIZE: int = _cap_int(
    "CATALOG_HTTP_POOL_SIZE",
    _get_env_int("CATALOG_HTTP_POOL_SIZE", 4),
    min_v=1,
    max_v=64,
)

CATALOG_HTTP_USER_AGENT: Final[str] = (
    _get_env_str("CATALOG_HTTP_USER_AGENT", "MovieCard/1.0 (streamlit)") or "MovieCard/1.0 (streamlit)"
)

# ============================================================
# Guest session (almacenamiento duradero)
# ============================================================

GUEST_SESSION_STORAGE_KEY: Final[str] = "guestSessionId"

_GUEST_SESSION_STORE_RAW: Final[str | None] = _get_env_str("GUEST_SESSION_STORE_PATH", None)
GUEST_SESSION_STORE_PATH: Final[Path] = (
    _resolve_dir(_GUEST_SESSION_STORE_RAW, base=DATA_DIR)
    if _GUEST_SESSION_STORE_RAW
    else DATA_DIR / "guest_session.json"
)

# Por defecto el id se escribe pero no se reutiliza al arrancar (cada montaje abre sesión nueva).
GUEST_SESSION_REUSE: bool = _get_env_bool("GUEST_SESSION_REUSE", False)

# ============================================================
# Conectividad
# ============================================================

CONNECTIVITY_PROBE_HOST: Final[str] = (
    _get_env_str("CONNECTIVITY_PROBE_HOST", None) or (urlparse(CATALOG_BASE_URL).hostname or "api.themoviedb.org")
)
CONNECTIVITY_PROBE_PORT: int = _cap_int(
    "CONNECTIVITY_PROBE_PORT",
    _get_env_int("CONNECTIVITY_PROBE_PORT", 443),
    min_v=1,
    max_v=65535,
)
CONNECTIVITY_PROBE_TIMEOUT_SECONDS: float = _cap_float_min(
    "CONNECTIVITY_PROBE_TIMEOUT_SECONDS",
    _get_env_float("CONNECTIVITY_PROBE_TIMEOUT_SECONDS", 2.0),
    min_v=0.1,
)
