from __future__ import annotations

"""
frontend/config_front_base.py

Config base del FRONTEND (Streamlit).

Objetivos:
- Cargar variables de entorno SOLAMENTE desde .env.front (sin fallback a .env).
- Proveer defaults razonables si una clave no existe en .env.front.

Notas:
- Las credenciales del catálogo NO viven aquí: las lee catalog/config_catalog.py.
- No reimplementa logging: usa frontend/front_logger.py.
"""

import os
from pathlib import Path
from typing import Final

from dotenv import dotenv_values

FRONTEND_DIR: Final[Path] = Path(__file__).resolve().parent
PROJECT_DIR: Final[Path] = FRONTEND_DIR.parent

_ENV_FRONT_PATH: Final[Path] = PROJECT_DIR / ".env.front"

# Carga SOLO desde .env.front (si no existe, config vacía -> defaults)
_ENV: Final[dict[str, str]] = {
    k: v for k, v in (dotenv_values(_ENV_FRONT_PATH).items() if _ENV_FRONT_PATH.exists() else []) if v is not None
}


# ---------------------------------------------------------------------
# Helpers defensivos
# ---------------------------------------------------------------------

_TRUE_SET: Final[set[str]] = {"1", "true", "t", "yes", "y", "on"}
_FALSE_SET: Final[set[str]] = {"0", "false", "f", "no", "n", "off"}


def _clean(v: object | None) -> str | None:
    if v is None:
        return None
    s = str(v).strip()
    if not s:
        return None
    if len(s) >= 2 and (s[0] == s[-1]) and s[0] in ("'", '"'):
        s = s[1:-1].strip()
    return s or None


def _get_env_str(name: str, default: str | None = None) -> str | None:
    # Prioridad: .env.front -> env real del proceso -> default
    v = _clean(_ENV.get(name))
    if v is not None:
        return v
    v2 = _clean(os.getenv(name))
    if v2 is not None:
        return v2
    return default


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env_str(name, None)
    if raw is None:
        return default
    s = raw.lower()
    if s in _TRUE_SET:
        return True
    if s in _FALSE_SET:
        return False
    return default


def _get_env_int(name: str, default: int, *, min_v: int, max_v: int) -> int:
    raw = _get_env_str(name, None)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(min_v, min(max_v, value))


# ---------------------------------------------------------------------
# Flags del front
# ---------------------------------------------------------------------

FRONT_DEBUG: bool = _get_env_bool("FRONT_DEBUG", False)

FRONT_PAGE_TITLE: Final[str] = _get_env_str("FRONT_PAGE_TITLE", "Movie search") or "Movie search"

# Overview recortado en la ficha (por palabra completa)
FRONT_OVERVIEW_MAX_CHARS: Final[int] = _get_env_int("FRONT_OVERVIEW_MAX_CHARS", 200, min_v=20, max_v=5000)

FRONT_POSTER_WIDTH: Final[int] = _get_env_int("FRONT_POSTER_WIDTH", 180, min_v=60, max_v=600)
