"""Connectivity checks."""

from __future__ import annotations

import socket

import structlog

logger = structlog.get_logger("pyreq.connectivity")


class SocketConnectivityProbe:
    """Reports connectivity by opening a TCP connection to a well-known host.

    Holds no state between calls, so it can be shared across requests.
    """

    def __init__(self, host: str = "8.8.8.8", port: int = 53, timeout: float = 1.5) -> None:
        self._host = host
        self._port = port
        self._timeout = timeout

    def is_connected(self) -> bool:
        try:
            with socket.create_connection((self._host, self._port), timeout=self._timeout):
                return True
        except OSError as exc:
            logger.debug("connectivity_probe_failed", host=self._host, port=self._port, error=str(exc))
            return False


class StaticConnectivity:
    """Always answers the same; used when probing is disabled and in tests."""

    def __init__(self, connected: bool = True) -> None:
        self._connected = connected

    def is_connected(self) -> bool:
        return self._connected
