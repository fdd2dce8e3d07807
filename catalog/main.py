from __future__ import annotations

"""
catalog/main.py

Punto de entrada (console_scripts: `start`).

Lanza la tarjeta de búsqueda en Streamlit usando el intérprete actual:
    python -m streamlit run frontend/dashboard.py [--server.port N]

Reglas de consola (alineado con catalog/logger.py)
-------------------------------------------------
- Estado global (inicio / fin): logger.progress(...)
- Debug contextual: logger.debug_ctx("DASH", "...")
- Ctrl+C: salida limpia, sin stacktrace.
"""

import argparse
import subprocess
import sys
from pathlib import Path

from catalog import logger as logger
from catalog.config_base import DEBUG_MODE, SILENT_MODE
from catalog.config_catalog import TMDB_API_KEY, TMDB_READ_TOKEN


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="start",
        description="Movie search card (Streamlit) over the TMDB catalog",
    )
    parser.add_argument("--port", type=int, default=None, help="Puerto del servidor Streamlit")
    return parser.parse_args(argv)


def _dashboard_path() -> Path:
    return Path(__file__).resolve().parents[1] / "frontend" / "dashboard.py"


def build_streamlit_cmd(dashboard_path: Path, *, port: int | None = None) -> list[str]:
    cmd = [sys.executable, "-m", "streamlit", "run", str(dashboard_path)]
    if port is not None:
        cmd += ["--server.port", str(port)]
    return cmd


def start(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    dashboard_path = _dashboard_path()

    if not dashboard_path.exists():
        logger.error(f"[MovieCard] Dashboard not found: {str(dashboard_path)!r}")
        return 1

    if not TMDB_API_KEY and not TMDB_READ_TOKEN:
        logger.warning(
            "[MovieCard] TMDB_API_KEY / TMDB_READ_TOKEN not set; every catalog call will fail.",
            always=True,
        )

    cmd = build_streamlit_cmd(dashboard_path, port=args.port)
    if DEBUG_MODE and not SILENT_MODE:
        logger.debug_ctx("DASH", f"cmd={cmd!r}")

    logger.progress("[MovieCard] Inicio (Streamlit)")
    try:
        result = subprocess.run(cmd, check=False)
    except KeyboardInterrupt:
        logger.info("\n[MovieCard] Interrumpido por el usuario (Ctrl+C).", always=True)
        return 130
    except OSError as exc:
        logger.error(f"[MovieCard] Error lanzando Streamlit: {exc!r}")
        return 1
    finally:
        logger.progress("[MovieCard] Fin")

    if result.returncode != 0:
        logger.info(f"[MovieCard] Streamlit terminó con código {result.returncode}.", always=True)
    return int(result.returncode)


if __name__ == "__main__":
    raise SystemExit(start())
