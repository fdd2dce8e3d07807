from __future__ import annotations

"""
frontend/front_logger.py

Logger ultra simple para frontend:
- En Streamlit, lo más fiable suele ser no spamear stdout.
- Si FRONT_DEBUG=True, permite info/warnings en consola.
- Los eventos del catálogo ya se registran en catalog/logger.py.
"""

from frontend.config_front_base import FRONT_DEBUG


def log_warning(msg: str) -> None:
    if FRONT_DEBUG:
        print(f"[FRONT][WARN] {msg}")


def log_info(msg: str) -> None:
    if FRONT_DEBUG:
        print(f"[FRONT] {msg}")
