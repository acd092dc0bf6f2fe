"""Layout port describing event-to-text renderers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_facade.domain.events import LoggingEvent


@runtime_checkable
class LayoutPort(Protocol):
    """Render a logging event into a single string."""

    def __call__(self, event: LoggingEvent) -> str: ...


__all__ = ["LayoutPort"]
