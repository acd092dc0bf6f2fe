"""Error types raised by the logging façade."""

from __future__ import annotations

from typing import Any


class ConfigurationError(ValueError):
    """Raised when a configuration source cannot be read or decoded.

    ``spec`` carries the offending appender or layout entry when the failure
    is tied to one.
    """

    def __init__(self, message: str, *, spec: Any = None) -> None:
        super().__init__(message)
        self.spec = spec


__all__ = ["ConfigurationError"]
