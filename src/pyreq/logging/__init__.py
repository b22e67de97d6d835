"""PyReq Logging — logging port and structlog adapter."""

from pyreq.logging.port import LoggingPort
from pyreq.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
