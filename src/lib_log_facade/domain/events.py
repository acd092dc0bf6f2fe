"""Domain event describing one accepted log call.

Purpose
-------
Capture an immutable snapshot of a log call so every appender bound to a
logger observes exactly the same data.

Contents
--------
* :class:`LoggingEvent` frozen dataclass with error helpers.
* ``_now`` helper capturing a timezone-aware local timestamp.

System Role
-----------
Created by :class:`lib_log_facade.application.logger.Logger` per accepted call
and consumed by appenders and layouts; never retained after fan-out.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .levels import Level


def _now() -> datetime:
    """Return the current local time with its UTC offset attached."""

    return datetime.now().astimezone()


@dataclass(slots=True, frozen=True)
class LoggingEvent:
    """Immutable record of a single log call.

    Attributes
    ----------
    category:
        Category of the logger that accepted the call.
    level:
        :class:`Level` the call was made at.
    message:
        Caller-supplied message; rendered with :func:`str` by layouts.
    error:
        Optional exception attached to the call.
    source_logger:
        Logger that produced the event. Informational only.
    timestamp:
        Moment of the log call (not of emission).
    """

    category: str
    level: Level
    message: Any
    error: BaseException | None = None
    source_logger: Any = field(default=None, compare=False, repr=False)
    timestamp: datetime = field(default_factory=_now)

    @property
    def error_name(self) -> str | None:
        """Return the exception class name, or ``None`` without an error."""

        if self.error is None:
            return None
        return type(self.error).__name__

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        return str(self.error)

    @property
    def error_stack(self) -> str | None:
        """Return the formatted traceback text when the error carries one."""

        if self.error is None or self.error.__traceback__ is None:
            return None
        return "".join(traceback.format_exception(type(self.error), self.error, self.error.__traceback__)).rstrip("\n")


__all__ = ["LoggingEvent"]
