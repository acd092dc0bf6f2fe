"""Typed configuration records decoded from JSON-like mappings.

Purpose
-------
Turn the loosely typed ``{"appenders": [...], "levels": {...}}`` structure into
a closed set of frozen variants so unknown appender or layout types fail at
decode time instead of during appender construction.

Contents
--------
* Layout variants: :class:`PassThroughLayoutSpec`, :class:`BasicLayoutSpec`,
  :class:`PatternLayoutSpec`.
* Appender variants: :class:`ConsoleAppenderSpec`, :class:`FileAppenderSpec`,
  :class:`LevelFilterSpec`.
* :class:`Configuration` and :func:`decode_configuration`.

System Role
-----------
Consumed by :meth:`lib_log_facade.application.registry.Registry.configure`;
the runtime composition root maps each variant onto a concrete appender.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class PassThroughLayoutSpec:
    """Render only the event message."""


@dataclass(frozen=True, slots=True)
class BasicLayoutSpec:
    """Render the fixed ``timestamp [LEVEL] category - message`` line."""


@dataclass(frozen=True, slots=True)
class PatternLayoutSpec:
    """Render through a pattern template; ``None`` selects the default."""

    pattern: str | None = None


LayoutSpec = Union[PassThroughLayoutSpec, BasicLayoutSpec, PatternLayoutSpec]


@dataclass(frozen=True, slots=True)
class ConsoleAppenderSpec:
    layout: LayoutSpec | None = None
    categories: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class FileAppenderSpec:
    filename: str
    layout: LayoutSpec | None = None
    categories: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class LevelFilterSpec:
    """Forward to ``appender`` only events at or above ``level``."""

    level: str
    appender: "AppenderSpec"
    categories: tuple[str, ...] | None = None


AppenderSpec = Union[ConsoleAppenderSpec, FileAppenderSpec, LevelFilterSpec]


@dataclass(frozen=True, slots=True)
class Configuration:
    """Decoded configuration record.

    Attributes
    ----------
    appenders:
        Appender specs in declaration order. ``None`` means the source named
        no appenders at all, which selects the default console appender.
    levels:
        Category name to level name, applied after appenders are bound.
    """

    appenders: tuple[AppenderSpec, ...] | None = None
    levels: Mapping[str, str] = field(default_factory=dict)


def _decode_layout(raw: Any) -> LayoutSpec | None:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"layout must be a mapping, got {raw!r}", spec=raw)
    kind = raw.get("type")
    if kind == "messagePassThrough":
        return PassThroughLayoutSpec()
    if kind == "basic":
        return BasicLayoutSpec()
    if kind == "pattern":
        pattern = raw.get("pattern")
        if pattern is not None and not isinstance(pattern, str):
            raise ConfigurationError(f"pattern layout needs a string pattern: {raw!r}", spec=raw)
        return PatternLayoutSpec(pattern=pattern)
    raise ConfigurationError(f"Unknown layout type {kind!r} in {raw!r}", spec=raw)


def _decode_categories(raw: Any, spec: Mapping[str, Any]) -> tuple[str, ...] | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return (raw,)
    if isinstance(raw, Sequence) and all(isinstance(item, str) for item in raw):
        return tuple(raw)
    raise ConfigurationError(f"category must be a string or a list of strings: {spec!r}", spec=spec)


def _decode_appender(raw: Any) -> AppenderSpec:
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"appender entry must be a mapping, got {raw!r}", spec=raw)
    kind = raw.get("type")
    categories = _decode_categories(raw.get("category"), raw)
    if kind == "console":
        return ConsoleAppenderSpec(layout=_decode_layout(raw.get("layout")), categories=categories)
    if kind == "file":
        filename = raw.get("filename")
        if not isinstance(filename, str) or not filename:
            raise ConfigurationError(f"file appender requires a filename: {raw!r}", spec=raw)
        return FileAppenderSpec(filename=filename, layout=_decode_layout(raw.get("layout")), categories=categories)
    if kind == "logLevelFilter":
        if raw.get("appender") is None:
            raise ConfigurationError(f"logLevelFilter requires a nested appender: {raw!r}", spec=raw)
        return LevelFilterSpec(level=str(raw.get("level", "")), appender=_decode_appender(raw["appender"]), categories=categories)
    raise ConfigurationError(f"Unknown appender type {kind!r} in {raw!r}", spec=raw)


def decode_configuration(payload: Mapping[str, Any]) -> Configuration:
    """Decode a raw configuration mapping into a :class:`Configuration`.

    Raises
    ------
    ConfigurationError
        When the payload or one of its entries has an unexpected shape or
        names an unknown appender/layout type.

    Examples
    --------
    >>> config = decode_configuration({"appenders": [{"type": "console"}], "levels": {"db": "WARN"}})
    >>> config.appenders
    (ConsoleAppenderSpec(layout=None, categories=None),)
    >>> dict(config.levels)
    {'db': 'WARN'}
    """

    if not isinstance(payload, Mapping):
        raise ConfigurationError(f"configuration must be a mapping, got {type(payload).__name__}", spec=payload)
    raw_appenders = payload.get("appenders")
    appenders: tuple[AppenderSpec, ...] | None = None
    if raw_appenders is not None:
        if isinstance(raw_appenders, (str, bytes)) or not isinstance(raw_appenders, Sequence):
            raise ConfigurationError("appenders must be a list", spec=raw_appenders)
        appenders = tuple(_decode_appender(entry) for entry in raw_appenders)
    raw_levels = payload.get("levels") or {}
    if not isinstance(raw_levels, Mapping):
        raise ConfigurationError("levels must be a mapping of category to level name", spec=raw_levels)
    levels = {str(category): str(level) for category, level in raw_levels.items()}
    return Configuration(appenders=appenders, levels=levels)


__all__ = [
    "AppenderSpec",
    "BasicLayoutSpec",
    "Configuration",
    "ConsoleAppenderSpec",
    "FileAppenderSpec",
    "LayoutSpec",
    "LevelFilterSpec",
    "PassThroughLayoutSpec",
    "PatternLayoutSpec",
    "decode_configuration",
]
