"""Protocols the application layer expects from adapters."""

from __future__ import annotations

from .appender import AppenderPort
from .layout import LayoutPort

__all__ = ["AppenderPort", "LayoutPort"]
