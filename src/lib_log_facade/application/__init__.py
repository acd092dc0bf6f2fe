"""Application layer: loggers, the category registry, and their ports."""

from __future__ import annotations

from .logger import Logger
from .ports import AppenderPort, LayoutPort
from .registry import ALL_CATEGORIES, DEFAULT_CATEGORY, Registry

__all__ = ["ALL_CATEGORIES", "AppenderPort", "DEFAULT_CATEGORY", "LayoutPort", "Logger", "Registry"]
