"""Public package surface of the category-based logging façade.

Typical use::

    import lib_log_facade as logging_facade

    logging_facade.add_appender(logging_facade.ConsoleAppender(logging_facade.PatternLayout("%-5p %c - %m")))
    log = logging_facade.get_logger("app.db")
    log.set_level("INFO")
    log.info("connected")
"""

from __future__ import annotations

from .adapters import (
    TTCC_CONVERSION_PATTERN,
    ConsoleAppender,
    FileAppender,
    LevelFilter,
    PatternLayout,
    basic_layout,
    message_pass_through_layout,
)
from .application import ALL_CATEGORIES, DEFAULT_CATEGORY, AppenderPort, LayoutPort, Logger, Registry
from .domain import Configuration, ConfigurationError, Level, LoggingEvent, decode_configuration
from .runtime import (
    add_appender,
    clear_appenders,
    configure,
    current_registry,
    get_default_logger,
    get_logger,
    shutdown,
    use_registry,
)

__all__ = [
    "ALL_CATEGORIES",
    "AppenderPort",
    "Configuration",
    "ConfigurationError",
    "ConsoleAppender",
    "DEFAULT_CATEGORY",
    "FileAppender",
    "LayoutPort",
    "Level",
    "LevelFilter",
    "Logger",
    "LoggingEvent",
    "PatternLayout",
    "Registry",
    "TTCC_CONVERSION_PATTERN",
    "add_appender",
    "basic_layout",
    "clear_appenders",
    "configure",
    "current_registry",
    "decode_configuration",
    "get_default_logger",
    "get_logger",
    "message_pass_through_layout",
    "shutdown",
    "use_registry",
]
