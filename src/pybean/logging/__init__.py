"""PyBean Logging — logging port and structlog adapter."""

from pybean.logging.port import LoggingPort
from pybean.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
