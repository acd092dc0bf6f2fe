"""Severity levels shared by loggers, filters, and layouts.

Purpose
-------
Offer one canonical, totally ordered set of severities so gating decisions in
loggers and level filters compare ranks instead of names.

Contents
--------
* :class:`Level` enum with rank comparison and lenient name lookup.

System Role
-----------
Leaf of the domain layer; every other module depends on it and it depends on
nothing else in the package.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any


class Level(Enum):
    """Enumerated severities ordered by numeric rank.

    ``ALL`` and ``OFF`` are sentinels ranking below and above every other
    level respectively.
    """

    ALL = -math.inf
    TRACE = 5000
    DEBUG = 10000
    INFO = 20000
    WARN = 30000
    ERROR = 40000
    FATAL = 50000
    OFF = math.inf

    @property
    def rank(self) -> float:
        """Return the numeric rank used for every comparison."""

        return self.value

    def is_at_most(self, other: "Level") -> bool:
        """Return ``True`` when this level ranks at or below ``other``.

        Examples
        --------
        >>> Level.DEBUG.is_at_most(Level.INFO)
        True
        >>> Level.OFF.is_at_most(Level.FATAL)
        False
        """

        return self.rank <= other.rank

    def is_at_least(self, other: "Level") -> bool:
        """Return ``True`` when this level ranks at or above ``other``."""

        return self.rank >= other.rank

    @classmethod
    def to_level(cls, name: Any, default: "Level | None" = None) -> "Level | None":
        """Resolve ``name`` case-insensitively, falling back to ``default``.

        Level instances pass through unchanged; ``None``, non-strings, and
        unknown names all yield ``default``.

        Examples
        --------
        >>> Level.to_level("warn", Level.INFO) is Level.WARN
        True
        >>> Level.to_level("verbose", Level.INFO) is Level.INFO
        True
        """

        if isinstance(name, Level):
            return name
        if not isinstance(name, str):
            return default
        return _BY_NAME.get(name.strip().upper(), default)

    def __str__(self) -> str:
        return self.name


_BY_NAME: dict[str, Level] = {level.name: level for level in Level}

#: Upper-case name lookup table for :meth:`Level.to_level`.


__all__ = ["Level"]
