"""Composition helpers turning configuration variants into live adapters.

Purpose
-------
Map each decoded appender/layout spec onto the concrete adapter implementing
it. This is the only place that knows which class backs which configuration
``type``.

Contents
--------
* :func:`build_layout` – layout spec to layout callable.
* :func:`build_appender` – appender spec to appender callable.
* :func:`close_appenders` – release resources held by built appenders.

System Role
-----------
Outer ring of the architecture: the registry receives :func:`build_appender`
as a collaborator and never imports adapters itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rich.console import Console

from lib_log_facade.adapters import ConsoleAppender, FileAppender, LevelFilter, PatternLayout
from lib_log_facade.adapters.layouts import basic_layout, message_pass_through_layout
from lib_log_facade.application.ports import AppenderPort, LayoutPort
from lib_log_facade.domain.configuration import (
    AppenderSpec,
    BasicLayoutSpec,
    ConsoleAppenderSpec,
    FileAppenderSpec,
    LayoutSpec,
    LevelFilterSpec,
    PassThroughLayoutSpec,
    PatternLayoutSpec,
)
from lib_log_facade.domain.errors import ConfigurationError
from lib_log_facade.domain.levels import Level

logger = logging.getLogger(__name__)


def build_layout(spec: LayoutSpec | None) -> LayoutPort | None:
    """Return the layout for ``spec``; ``None`` lets the appender pick its default."""

    if spec is None:
        return None
    if isinstance(spec, PassThroughLayoutSpec):
        return message_pass_through_layout
    if isinstance(spec, BasicLayoutSpec):
        return basic_layout
    if isinstance(spec, PatternLayoutSpec):
        return PatternLayout(spec.pattern)
    raise ConfigurationError(f"Unsupported layout spec {spec!r}", spec=spec)


def build_appender(spec: AppenderSpec, *, console: Console | None = None) -> AppenderPort:
    """Construct the appender described by ``spec``.

    Parameters
    ----------
    spec:
        Decoded appender variant.
    console:
        Optional Rich console shared by every console appender; tests inject
        a recording console here.

    Raises
    ------
    ConfigurationError
        When the spec is not a known variant or its file cannot be opened.
    """

    if isinstance(spec, ConsoleAppenderSpec):
        return ConsoleAppender(build_layout(spec.layout), console=console)
    if isinstance(spec, FileAppenderSpec):
        try:
            return FileAppender(spec.filename, build_layout(spec.layout))
        except OSError as exc:
            raise ConfigurationError(f"Cannot open log file {spec.filename!r}: {exc}", spec=spec) from exc
    if isinstance(spec, LevelFilterSpec):
        threshold = Level.to_level(spec.level, Level.ALL)
        if threshold is Level.ALL and spec.level.strip().upper() != "ALL":
            logger.warning("unknown filter level %r, forwarding every event", spec.level)
        return LevelFilter(threshold, build_appender(spec.appender, console=console))
    raise ConfigurationError(f"Unsupported appender spec {spec!r}", spec=spec)


def close_appenders(appenders: Iterable[AppenderPort]) -> None:
    """Call ``close()`` on every appender that provides one."""

    for appender in appenders:
        close = getattr(appender, "close", None)
        if callable(close):
            close()


__all__ = ["build_appender", "build_layout", "close_appenders"]
