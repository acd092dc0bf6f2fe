"""Domain entities and value objects used by the logging façade."""

from __future__ import annotations

from .configuration import (
    AppenderSpec,
    BasicLayoutSpec,
    Configuration,
    ConsoleAppenderSpec,
    FileAppenderSpec,
    LayoutSpec,
    LevelFilterSpec,
    PassThroughLayoutSpec,
    PatternLayoutSpec,
    decode_configuration,
)
from .errors import ConfigurationError
from .events import LoggingEvent
from .levels import Level
from .pattern import Directive, Literal, compile_pattern

__all__ = [
    "AppenderSpec",
    "BasicLayoutSpec",
    "Configuration",
    "ConfigurationError",
    "ConsoleAppenderSpec",
    "Directive",
    "FileAppenderSpec",
    "LayoutSpec",
    "Level",
    "LevelFilterSpec",
    "Literal",
    "LoggingEvent",
    "PassThroughLayoutSpec",
    "PatternLayoutSpec",
    "compile_pattern",
    "decode_configuration",
]
