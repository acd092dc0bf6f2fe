"""Adapter implementations for appenders and layouts."""

from __future__ import annotations

from .appenders import ConsoleAppender, FileAppender, LevelFilter
from .layouts import TTCC_CONVERSION_PATTERN, PatternLayout, basic_layout, message_pass_through_layout

__all__ = [
    "ConsoleAppender",
    "FileAppender",
    "LevelFilter",
    "PatternLayout",
    "TTCC_CONVERSION_PATTERN",
    "basic_layout",
    "message_pass_through_layout",
]
