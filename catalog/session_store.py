from __future__ import annotations

"""
catalog/session_store.py

Almacenamiento duradero del id de guest session (clave fija `guestSessionId`).

- Fichero JSON pequeño bajo DATA_DIR.
- Escritura atómica (tempfile + os.replace) para no dejar ficheros a medias.
- Fichero corrupto => se trata como vacío (load() devuelve None).
"""

import json
import os
import tempfile
from pathlib import Path

from catalog import logger as logger
from catalog.config_catalog import GUEST_SESSION_STORAGE_KEY, GUEST_SESSION_STORE_PATH


class GuestSessionStore:
    def __init__(self, path: Path = GUEST_SESSION_STORE_PATH, *, key: str = GUEST_SESSION_STORAGE_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _read_all(self) -> dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Guest session store is not valid JSON, ignoring: {self.path}", always=True)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> str | None:
        value = self._read_all().get(self.key)
        if isinstance(value, str) and value.strip():
            return value
        return None

    def save(self, session_id: str) -> None:
        """Escribe `{key: session_id}` preservando otras claves del fichero."""
        data = self._read_all()
        data[self.key] = session_id
        self._write_atomic(data)
        logger.debug_ctx("SESSION", f"guest session persisted -> {self.path}")

    def clear(self) -> None:
        data = self._read_all()
        if self.key not in data:
            return
        data.pop(self.key)
        self._write_atomic(data)

    def _write_atomic(self, data: dict[str, object]) -> None:
        dirpath = self.path.parent
        dirpath.mkdir(parents=True, exist_ok=True)

        temp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile("w", encoding="utf-8", delete=False, dir=str(dirpath)) as tf:
                temp_name = tf.name
                json.dump(data, tf, ensure_ascii=False, indent=2)
                tf.flush()
                try:
                    os.fsync(tf.fileno())
                except OSError:
                    pass

            os.replace(temp_name, str(self.path))
        finally:
            if temp_name and os.path.exists(temp_name):
                try:
                    os.remove(temp_name)
                except OSError:
                    pass
