"""Layouts rendering logging events into text.

Purpose
-------
Implement the three layouts appenders can be configured with: the pattern
layout driven by a template, the fixed basic layout, and the message
pass-through layout.

Contents
--------
* :class:`PatternLayout` – replays a compiled token list per event.
* :func:`basic_layout` – ``timestamp [LEVEL] category - message`` plus an
  error line when the event carries an exception.
* :func:`message_pass_through_layout` – the message only.
* :data:`TTCC_CONVERSION_PATTERN` – default pattern template.

System Role
-----------
Adapters implementing :class:`lib_log_facade.application.ports.LayoutPort`.
Template parsing lives in :mod:`lib_log_facade.domain.pattern`; this module
holds the conversion table.
"""

from __future__ import annotations

from collections.abc import Callable

from lib_log_facade.domain.events import LoggingEvent
from lib_log_facade.domain.pattern import Directive, Literal, Token, compile_pattern

from ._formatting import format_locale_time, format_timestamp, resolve_date_format

TTCC_CONVERSION_PATTERN = "%r %p %c - %m%n"
"""Template used when a pattern layout is created without one."""


def _render_category(event: LoggingEvent, argument: str | None) -> str:
    category = event.category
    if not argument:
        return category
    try:
        precision = int(argument)
    except ValueError:
        return category
    segments = category.split(".")
    if precision <= 0 or precision >= len(segments):
        return category
    return ".".join(segments[-precision:])


def _render_date(event: LoggingEvent, argument: str | None) -> str:
    return format_timestamp(event.timestamp, resolve_date_format(argument))


_CONVERTERS: dict[str, Callable[[LoggingEvent, str | None], str]] = {
    "c": _render_category,
    "d": _render_date,
    "m": lambda event, _argument: str(event.message),
    "n": lambda _event, _argument: "\n",
    "p": lambda event, _argument: str(event.level),
    "r": lambda event, _argument: format_locale_time(event.timestamp),
    "%": lambda _event, _argument: "%",
}
# Conversion character -> renderer(event, argument).


class PatternLayout:
    """Layout rendering events through a ``%``-directive template.

    The template is compiled once; unknown conversion characters are
    rendered as the literal directive text.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_facade.domain.levels import Level
    >>> event = LoggingEvent("db", Level.INFO, "ok", timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc))
    >>> PatternLayout("%-5p %c - %m%n")(event)
    'INFO  db - ok\\n'
    """

    def __init__(self, pattern: str | None = None) -> None:
        self._pattern = pattern or TTCC_CONVERSION_PATTERN
        self._tokens: tuple[Token, ...] = compile_pattern(self._pattern)

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Return the compiled token list replayed for every event."""

        return self._tokens

    def __call__(self, event: LoggingEvent) -> str:
        parts: list[str] = []
        for token in self._tokens:
            if isinstance(token, Literal):
                parts.append(token.text)
            else:
                parts.append(self._render_directive(token, event))
        return "".join(parts)

    @staticmethod
    def _render_directive(directive: Directive, event: LoggingEvent) -> str:
        converter = _CONVERTERS.get(directive.conversion)
        raw = directive.source if converter is None else converter(event, directive.argument)
        return directive.fit(raw)

    def __repr__(self) -> str:
        return f"PatternLayout({self._pattern!r})"


def basic_layout(event: LoggingEvent) -> str:
    """Render ``timestamp [LEVEL] category - message``.

    When the event carries an error a second line repeats the prefix followed
    by the traceback text, or ``Name: message`` for errors never raised.
    """

    prefix = f"{format_timestamp(event.timestamp)} [{event.level}] {event.category} - "
    output = prefix + str(event.message)
    if event.error is not None:
        detail = event.error_stack
        if detail is None:
            detail = f"{event.error_name}: {event.error_message}"
        output += "\n" + prefix + detail
    return output


def message_pass_through_layout(event: LoggingEvent) -> str:
    """Return the event message unchanged."""

    return str(event.message)


__all__ = [
    "PatternLayout",
    "TTCC_CONVERSION_PATTERN",
    "basic_layout",
    "message_pass_through_layout",
]
