"""Runtime state container and access helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import RLock

from lib_log_facade.application.ports import AppenderPort
from lib_log_facade.application.registry import Registry


@dataclass(slots=True)
class LoggingRuntime:
    """Process-wide registry plus the appenders built from configuration."""

    registry: Registry
    owned_appenders: list[AppenderPort] = field(default_factory=list)


_STATE = LoggingRuntime(registry=Registry())
_STATE_LOCK = RLock()


def current_runtime() -> LoggingRuntime:
    """Return the active runtime."""

    with _STATE_LOCK:
        return _STATE


def set_registry(registry: Registry) -> LoggingRuntime:
    """Install ``registry`` as the process-wide default and return the new runtime."""

    with _STATE_LOCK:
        global _STATE
        _STATE = LoggingRuntime(registry=registry)
        return _STATE


def reset_runtime() -> LoggingRuntime:
    """Replace the active runtime with one holding a fresh, empty registry."""

    return set_registry(Registry())


__all__ = [
    "LoggingRuntime",
    "current_runtime",
    "reset_runtime",
    "set_registry",
]
