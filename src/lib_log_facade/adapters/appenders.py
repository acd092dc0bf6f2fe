"""Concrete appenders: Rich console, append-only file, and level filter.

Purpose
-------
Provide the sinks the configuration language can name and the filter that
wraps them.

Contents
--------
* :data:`_STYLE_MAP` – default level-to-style mapping for the console.
* :class:`ConsoleAppender` – prints rendered events through Rich.
* :class:`FileAppender` – appends rendered events to a file.
* :class:`LevelFilter` – forwards events at or above a threshold.

System Role
-----------
Adapters satisfying :class:`lib_log_facade.application.ports.AppenderPort`.
All of them are plain callables so they compose with each other and with
user-supplied functions.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Mapping, MutableMapping

from rich.console import Console

from lib_log_facade.application.ports import AppenderPort, LayoutPort
from lib_log_facade.domain.events import LoggingEvent
from lib_log_facade.domain.levels import Level

from .layouts import basic_layout


_STYLE_MAP: Mapping[Level, str] = {
    Level.TRACE: "dim",
    Level.DEBUG: "dim",
    Level.INFO: "cyan",
    Level.WARN: "yellow",
    Level.ERROR: "red",
    Level.FATAL: "bold red",
}

#: Default Rich styles keyed by :class:`Level`.


class ConsoleAppender:
    """Print each event as one rendered line through a Rich console.

    Rendered text is printed verbatim: Rich markup, emoji codes, and
    highlighting are disabled so ``[INFO]`` stays literal.
    """

    def __init__(
        self,
        layout: LayoutPort | None = None,
        *,
        console: Console | None = None,
        colorize: bool = True,
        styles: MutableMapping[Level | str, str] | None = None,
    ) -> None:
        self._layout = layout or basic_layout
        self._console = console if console is not None else Console(soft_wrap=True)
        self._colorize = colorize
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = Level.to_level(key)
            if level is not None:
                merged[level] = value
        self._style_map = merged

    @property
    def layout(self) -> LayoutPort:
        return self._layout

    def __call__(self, event: LoggingEvent) -> None:
        style = self._style_map.get(event.level, "") if self._colorize else ""
        self._console.print(
            self._layout(event),
            style=style or None,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def __repr__(self) -> str:
        return f"ConsoleAppender(layout={self._layout!r})"


class FileAppender:
    """Append each rendered event plus a newline to ``path``.

    The file is opened once, in append mode, when the appender is created and
    flushed after every line. Use :meth:`close` (or a ``with`` block) to
    release the handle.
    """

    def __init__(self, path: str | Path, layout: LayoutPort | None = None, *, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._layout = layout or basic_layout
        self._handle: IO[str] | None = self._path.open("a", encoding=encoding)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._handle is None

    def __call__(self, event: LoggingEvent) -> None:
        if self._handle is None:
            raise ValueError(f"FileAppender for {self._path} is closed")
        self._handle.write(self._layout(event) + "\n")
        self._handle.flush()

    def close(self) -> None:
        """Close the underlying handle; further events raise ``ValueError``."""

        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "FileAppender":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileAppender({str(self._path)!r})"


class LevelFilter:
    """Forward events to ``inner`` only when they rank at or above ``threshold``.

    ``threshold`` accepts a :class:`Level` or a level name; unknown names
    resolve to ``ALL`` and let every event through.

    Examples
    --------
    >>> seen = []
    >>> only_errors = LevelFilter("ERROR", seen.append)
    >>> only_errors(LoggingEvent("app", Level.WARN, "skipped"))
    >>> only_errors(LoggingEvent("app", Level.FATAL, "kept"))
    >>> [event.message for event in seen]
    ['kept']
    """

    def __init__(self, threshold: Level | str, inner: AppenderPort) -> None:
        self._threshold: Level = Level.to_level(threshold, Level.ALL)
        self._inner = inner

    @property
    def threshold(self) -> Level:
        return self._threshold

    @property
    def inner(self) -> AppenderPort:
        return self._inner

    def __call__(self, event: LoggingEvent) -> None:
        if event.level.is_at_least(self._threshold):
            self._inner(event)

    def close(self) -> None:
        """Close the wrapped appender when it owns a resource."""

        close = getattr(self._inner, "close", None)
        if callable(close):
            close()

    def __repr__(self) -> str:
        return f"LevelFilter({self._threshold}, {self._inner!r})"


__all__ = ["ConsoleAppender", "FileAppender", "LevelFilter"]
