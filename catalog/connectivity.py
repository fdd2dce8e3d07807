from __future__ import annotations

"""
catalog/connectivity.py

Monitor de conectividad (online/offline) con ciclo de vida explícito.

- subscribe(listener) -> unsubscribe ; o bien `with monitor.watching(listener):`
- set_online(bool): señal de plataforma. Cada señal se propaga en el acto (sin debounce).
- refresh(): re-sondea la plataforma (probe) y propaga el resultado.

El probe por defecto abre una conexión TCP al host del catálogo: desde el proceso
de Streamlit no hay eventos `online/offline` de navegador, así que "online"
significa "el servidor alcanza el catálogo".
"""

import socket
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from catalog import logger as logger
from catalog.config_catalog import (
    CONNECTIVITY_PROBE_HOST,
    CONNECTIVITY_PROBE_PORT,
    CONNECTIVITY_PROBE_TIMEOUT_SECONDS,
)

Listener = Callable[[bool], None]
Probe = Callable[[], bool]


def tcp_probe(
    host: str = CONNECTIVITY_PROBE_HOST,
    port: int = CONNECTIVITY_PROBE_PORT,
    timeout_s: float = CONNECTIVITY_PROBE_TIMEOUT_SECONDS,
) -> bool:
    try:
        with socket.create_connection((host, port), timeout=timeout_s):
            return True
    except OSError as exc:
        logger.debug_ctx("NET", f"probe {host}:{port} failed: {exc!r}")
        return False


class ConnectivityMonitor:
    def __init__(self, probe: Probe = tcp_probe, *, initial: bool | None = None) -> None:
        self._probe = probe
        self._lock = threading.Lock()
        self._listeners: list[Listener] = []
        self._online = probe() if initial is None else bool(initial)

    @property
    def is_online(self) -> bool:
        return self._online

    @property
    def is_offline(self) -> bool:
        return not self._online

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    @contextmanager
    def watching(self, listener: Listener) -> Iterator["ConnectivityMonitor"]:
        unsubscribe = self.subscribe(listener)
        try:
            yield self
        finally:
            unsubscribe()

    def set_online(self, online: bool) -> None:
        with self._lock:
            changed = self._online != bool(online)
            self._online = bool(online)
            listeners = list(self._listeners)

        if changed:
            logger.info(f"[NET] connectivity -> {'online' if online else 'offline'}")

        for listener in listeners:
            listener(bool(online))

    def refresh(self) -> bool:
        online = self._probe()
        self.set_online(online)
        return online
