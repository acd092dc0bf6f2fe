"""Appender port describing event sinks.

Purpose
-------
Define the single contract loggers rely on: an appender is any callable that
accepts one :class:`LoggingEvent`. Plain functions, lambdas, and the concrete
adapters all satisfy it.

Contents
--------
* :class:`AppenderPort` – runtime-checkable protocol with ``__call__``.

System Role
-----------
Keeps :class:`lib_log_facade.application.logger.Logger` and the registry
independent of concrete sinks.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_facade.domain.events import LoggingEvent


@runtime_checkable
class AppenderPort(Protocol):
    """Consume a logging event for its side effect."""

    def __call__(self, event: LoggingEvent) -> None:
        """Deliver ``event``; exceptions propagate to the log call site."""


__all__ = ["AppenderPort"]
