"""Category logger gating calls by level and fanning out to appenders.

Purpose
-------
Provide the object host code logs through. A logger owns an ordered list of
appenders; the :class:`~lib_log_facade.application.registry.Registry` is the
only component that binds or clears them.

Contents
--------
* :class:`Logger` with one method and one ``is_*_enabled`` predicate per
  severity.

System Role
-----------
Application-layer orchestrator between the domain event and the adapter
sinks. Fan-out is synchronous: every appender runs on the caller's thread in
binding order and its exceptions propagate unchanged.
"""

from __future__ import annotations

from typing import Any

from lib_log_facade.domain.events import LoggingEvent
from lib_log_facade.domain.levels import Level

from .ports import AppenderPort


class Logger:
    """Named logger bound to zero or more appenders.

    Parameters
    ----------
    category:
        Category name; also copied onto every event.
    level:
        Threshold as a :class:`Level` or level name. Unknown values resolve
        to ``TRACE``.
    """

    def __init__(self, category: str, level: Level | str | None = None) -> None:
        self._category = category
        self._threshold: Level = Level.to_level(level, Level.TRACE)
        self._appenders: list[AppenderPort] = []

    @property
    def category(self) -> str:
        return self._category

    @property
    def threshold(self) -> Level:
        """Return the minimum level this logger accepts."""

        return self._threshold

    @property
    def appenders(self) -> tuple[AppenderPort, ...]:
        """Return the bound appenders in invocation order."""

        return tuple(self._appenders)

    def set_level(self, level: Level | str | None) -> None:
        """Replace the threshold; unrecognised names fall back to ``TRACE``."""

        self._threshold = Level.to_level(level, Level.TRACE)

    def is_level_enabled(self, level: Level) -> bool:
        """Return ``True`` when a call at ``level`` would reach the appenders."""

        return self._threshold.is_at_most(level)

    def log(self, level: Level, message: Any, error: BaseException | None = None) -> None:
        """Emit an event at ``level`` without consulting the threshold.

        Appenders are invoked in binding order. An appender that raises aborts
        the remaining fan-out and the exception reaches the caller.
        """

        event = LoggingEvent(category=self._category, level=level, message=message, error=error, source_logger=self)
        for appender in tuple(self._appenders):
            appender(event)

    def trace(self, message: Any, error: BaseException | None = None) -> None:
        if self.is_level_enabled(Level.TRACE):
            self.log(Level.TRACE, message, error)

    def debug(self, message: Any, error: BaseException | None = None) -> None:
        if self.is_level_enabled(Level.DEBUG):
            self.log(Level.DEBUG, message, error)

    def info(self, message: Any, error: BaseException | None = None) -> None:
        if self.is_level_enabled(Level.INFO):
            self.log(Level.INFO, message, error)

    def warn(self, message: Any, error: BaseException | None = None) -> None:
        if self.is_level_enabled(Level.WARN):
            self.log(Level.WARN, message, error)

    def error(self, message: Any, error: BaseException | None = None) -> None:
        if self.is_level_enabled(Level.ERROR):
            self.log(Level.ERROR, message, error)

    def fatal(self, message: Any, error: BaseException | None = None) -> None:
        if self.is_level_enabled(Level.FATAL):
            self.log(Level.FATAL, message, error)

    def is_trace_enabled(self) -> bool:
        return self.is_level_enabled(Level.TRACE)

    def is_debug_enabled(self) -> bool:
        return self.is_level_enabled(Level.DEBUG)

    def is_info_enabled(self) -> bool:
        return self.is_level_enabled(Level.INFO)

    def is_warn_enabled(self) -> bool:
        return self.is_level_enabled(Level.WARN)

    def is_error_enabled(self) -> bool:
        return self.is_level_enabled(Level.ERROR)

    def is_fatal_enabled(self) -> bool:
        return self.is_level_enabled(Level.FATAL)

    def _attach(self, appender: AppenderPort) -> None:
        # Registry-only mutator.
        self._appenders.append(appender)

    def _detach_all(self) -> None:
        self._appenders.clear()

    def __repr__(self) -> str:
        return f"Logger(category={self._category!r}, threshold={self._threshold}, appenders={len(self._appenders)})"


__all__ = ["Logger"]
