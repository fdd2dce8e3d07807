from __future__ import annotations

"""
catalog/logger.py

Logger central del proyecto (fachada sobre `logging`).

API estable
-----------
- debug / info / warning / error
- progress (siempre visible, sin timestamps)
- debug_ctx(tag, msg) (debug contextual alineado con SILENT/DEBUG)
- truncate_line(text) (evita volcar payloads enormes en logs)

Política
--------
- SILENT_MODE=True: suprime debug/info/warning (salvo always=True). `error()` siempre emite.
- DEBUG_MODE=True: permite trazas útiles; en SILENT+DEBUG se emiten por `progress`.
- El logging nunca debe romper la UI.

Notas técnicas
--------------
- No importamos `catalog.config_base` directamente (config_base importa este módulo).
  Leemos la config desde `sys.modules` si ya está importada.
- Inicialización idempotente: Streamlit re-ejecuta el script en cada interacción.
- Si LOGGER_FILE_ENABLED=True y hay path, todo se duplica a fichero (best-effort).
"""

import logging
import os
import sys
import threading
from types import ModuleType, TracebackType
from typing import Final, Mapping, TypedDict

from typing_extensions import TypeAlias, Unpack

_ExcInfoTuple: TypeAlias = tuple[type[BaseException], BaseException, TracebackType | None]
ExcInfo: TypeAlias = bool | _ExcInfoTuple | BaseException | None


class LogKwargs(TypedDict, total=False):
    """Subconjunto de kwargs soportados por logging.Logger.*."""

    exc_info: ExcInfo
    stack_info: bool
    stacklevel: int
    extra: Mapping[str, object] | None


# ============================================================================
# CONFIGURACIÓN GLOBAL
# ============================================================================

LOGGER_NAME: Final[str] = "movie_card"

_LOGGER: logging.Logger | None = None
_CONFIGURED: bool = False

_FILE_HANDLER_TAG: Final[str] = "_movie_card_file_handler"
_PROGRESS_FILE_LOCK = threading.Lock()

_CONFIG_MODULE: Final[str] = "catalog.config_base"


def _safe_get_cfg() -> ModuleType | None:
    """Devuelve catalog.config_base si ya ha sido importado (evita circular imports)."""
    mod = sys.modules.get(_CONFIG_MODULE)
    return mod if isinstance(mod, ModuleType) else None


def _cfg_bool(name: str, default: bool = False) -> bool:
    cfg = _safe_get_cfg()
    if cfg is None:
        return default
    return bool(getattr(cfg, name, default))


def _cfg_str(name: str, default: str | None = None) -> str | None:
    cfg = _safe_get_cfg()
    if cfg is None:
        return default
    v = getattr(cfg, name, default)
    if v is None:
        return None
    s = str(v).strip()
    return s or default


def is_silent_mode() -> bool:
    return _cfg_bool("SILENT_MODE", False)


def is_debug_mode() -> bool:
    return _cfg_bool("DEBUG_MODE", False)


# ============================================================================
# NIVEL + LOGGERS EXTERNOS
# ============================================================================

_LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _resolve_level_from_config() -> int:
    """
    Prioridad:
      1) LOG_LEVEL explícito
      2) DEBUG_MODE
      3) INFO
    """
    lvl = _cfg_str("LOG_LEVEL", None)
    if lvl:
        mapped = _LEVELS.get(lvl.upper())
        if mapped is not None:
            return mapped
    if is_debug_mode():
        return logging.DEBUG
    return logging.INFO


def _configure_external_loggers() -> None:
    """Silencia urllib3/requests aunque el root esté en DEBUG, salvo HTTP_DEBUG=True."""
    if _cfg_bool("HTTP_DEBUG", False):
        return
    for name in ("urllib3", "urllib3.connectionpool", "requests"):
        logging.getLogger(name).setLevel(logging.WARNING)


# ============================================================================
# FILE LOGGING (opcional)
# ============================================================================


def _file_logging_path() -> str | None:
    """
    Prioridad:
      0) ENV LOGGER_FILE_PATH
      1) catalog.config_base.LOGGER_FILE_PATH
    """
    if not _cfg_bool("LOGGER_FILE_ENABLED", False):
        return None
    env_p = (os.getenv("LOGGER_FILE_PATH") or "").strip()
    if env_p:
        return env_p
    return _cfg_str("LOGGER_FILE_PATH", None)


def _ensure_file_handler(root: logging.Logger, *, level: int) -> None:
    path = _file_logging_path()
    if not path:
        return

    for h in root.handlers:
        if getattr(h, _FILE_HANDLER_TAG, False):
            h.setLevel(level)
            return

    try:
        dir_name = os.path.dirname(path)
        if dir_name:
            os.makedirs(dir_name, exist_ok=True)
        fh = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    except OSError:
        return

    fh.setLevel(level)
    fh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    setattr(fh, _FILE_HANDLER_TAG, True)
    root.addHandler(fh)


def _append_progress_to_file(message: str) -> None:
    path = _file_logging_path()
    if not path:
        return
    try:
        with _PROGRESS_FILE_LOCK:
            with open(path, "a", encoding="utf-8") as f:
                f.write(f"{message}\n")
    except OSError:
        return


# ============================================================================
# INICIALIZACIÓN
# ============================================================================


def _ensure_configured() -> logging.Logger:
    global _LOGGER, _CONFIGURED

    level = _resolve_level_from_config()
    root = logging.getLogger()

    if not _CONFIGURED:
        if not root.handlers:
            logging.basicConfig(
                level=level,
                format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            )
        _LOGGER = logging.getLogger(LOGGER_NAME)
        _CONFIGURED = True

    root.setLevel(level)
    _configure_external_loggers()
    _ensure_file_handler(root, level=level)

    assert _LOGGER is not None
    return _LOGGER


def get_logger() -> logging.Logger:
    return _ensure_configured()


def _should_log(*, always: bool = False) -> bool:
    if always:
        return True
    return not is_silent_mode()


# ============================================================================
# PROGRESO (NO logging)
# ============================================================================


def progress(message: str) -> None:
    """Línea siempre visible (ignora SILENT_MODE). Se persiste a fichero si procede."""
    try:
        sys.stdout.write(f"{message}\n")
        sys.stdout.flush()
    except (OSError, ValueError):
        pass
    _append_progress_to_file(message)


# ============================================================================
# API PÚBLICA
# ============================================================================


def debug(msg: str, *args: object, always: bool = False, **kwargs: Unpack[LogKwargs]) -> None:
    if not _should_log(always=always):
        return
    _ensure_configured().debug(msg, *args, **kwargs)


def info(msg: str, *args: object, always: bool = False, **kwargs: Unpack[LogKwargs]) -> None:
    if not _should_log(always=always):
        return
    _ensure_configured().info(msg, *args, **kwargs)


def warning(msg: str, *args: object, always: bool = False, **kwargs: Unpack[LogKwargs]) -> None:
    if not _should_log(always=always):
        return
    _ensure_configured().warning(msg, *args, **kwargs)


def error(msg: str, *args: object, always: bool = False, **kwargs: Unpack[LogKwargs]) -> None:
    """ERROR siempre se emite (ignora SILENT_MODE)."""
    _ensure_configured().error(msg, *args, **kwargs)


# ============================================================================
# DEBUG CONTEXTUAL + TRUNCADO
# ============================================================================

_DEFAULT_LOG_LINE_MAX_CHARS: Final[int] = 500


def truncate_line(text: str, max_chars: int | None = None) -> str:
    """Trunca una línea para no volcar cuerpos HTTP/JSON enormes."""
    limit = max_chars if isinstance(max_chars, int) and max_chars > 0 else _DEFAULT_LOG_LINE_MAX_CHARS
    if len(text) <= limit:
        return text
    return text[: max(0, limit - 12)] + " …(truncated)"


def debug_ctx(tag: str, msg: object) -> None:
    """
    Debug contextual con tag.

    - DEBUG_MODE=False -> no-op
    - DEBUG_MODE=True:
        * SILENT_MODE=True  -> progress("[TAG][DEBUG] ...")
        * SILENT_MODE=False -> info("[TAG][DEBUG] ...")
    """
    if not is_debug_mode():
        return

    t = (tag or "DEBUG").strip().upper()
    line = f"[{t}][DEBUG] {truncate_line(str(msg))}"
    if is_silent_mode():
        progress(line)
    else:
        info(line)
