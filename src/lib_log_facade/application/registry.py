"""Category registry creating loggers and binding appenders to them.

Purpose
-------
Own the ``category -> Logger`` cache and the ``category -> [appender]``
pending lists, including the wildcard category, so that appender
registration order is independent of logger creation order.

Contents
--------
* :data:`DEFAULT_CATEGORY` / :data:`ALL_CATEGORIES` reserved names.
* :class:`Registry` – injectable catalogue guarded by a re-entrant lock.

System Role
-----------
Sole mutator of logger appender lists. The runtime façade keeps one
process-wide instance but callers may create and inject their own.

Binding rules
-------------
* A new logger binds its own-category appenders first, then the wildcard
  appenders, each group in the order it was added.
* Adding an appender for the wildcard binds it to every existing logger in
  creation order; adding it for a concrete category binds it to that
  category's logger when one exists. Either way it is appended after the
  logger's current bindings.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from threading import RLock
from typing import Any

from lib_log_facade.domain.configuration import AppenderSpec, Configuration, ConsoleAppenderSpec
from lib_log_facade.domain.levels import Level

from .logger import Logger
from .ports import AppenderPort

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "[default]"
"""Category used when :meth:`Registry.get_logger` receives no valid name."""

ALL_CATEGORIES = "[all]"
"""Wildcard category binding an appender to every current and future logger."""


def _normalise_categories(categories: tuple[Any, ...]) -> tuple[str, ...]:
    """Flatten the accepted ``add_appender`` category forms into a tuple.

    Examples
    --------
    >>> _normalise_categories(())
    ('[all]',)
    >>> _normalise_categories((["a", "b"],))
    ('a', 'b')
    >>> _normalise_categories(("a", "b"))
    ('a', 'b')
    """

    if not categories or categories[0] is None:
        return (ALL_CATEGORIES,)
    first = categories[0]
    if len(categories) == 1 and not isinstance(first, str) and isinstance(first, Iterable):
        return tuple(first)
    return tuple(categories)


class Registry:
    """Catalogue of loggers and appender bindings keyed by category."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._loggers: dict[str, Logger] = {}
        self._pending: dict[str, list[AppenderPort]] = {}

    def get_logger(self, category: Any = None) -> Logger:
        """Return the cached logger for ``category``, creating it on first use.

        Non-string categories map to :data:`DEFAULT_CATEGORY`. Repeated calls
        with the same category return the identical instance.
        """

        if not isinstance(category, str):
            category = DEFAULT_CATEGORY
        with self._lock:
            existing = self._loggers.get(category)
            if existing is not None:
                return existing
            created = Logger(category)
            for appender in self._pending.get(category, ()):
                created._attach(appender)
            for appender in self._pending.get(ALL_CATEGORIES, ()):
                created._attach(appender)
            self._loggers[category] = created
            logger.debug("created logger %r with %d appender(s)", category, len(created.appenders))
            return created

    def get_default_logger(self) -> Logger:
        return self.get_logger(DEFAULT_CATEGORY)

    def add_appender(self, appender: AppenderPort, *categories: Any) -> None:
        """Register ``appender`` for the given categories.

        ``categories`` may be omitted or ``None`` (wildcard), one or more
        strings, or a single iterable of strings.
        """

        with self._lock:
            for category in _normalise_categories(categories):
                self._pending.setdefault(category, []).append(appender)
                if category == ALL_CATEGORIES:
                    for bound in self._loggers.values():
                        bound._attach(appender)
                elif category in self._loggers:
                    self._loggers[category]._attach(appender)
                logger.debug("registered appender %r for category %r", appender, category)

    def clear_appenders(self) -> None:
        """Forget every pending appender and unbind all appenders from loggers."""

        with self._lock:
            self._pending = {}
            for bound in self._loggers.values():
                bound._detach_all()

    def configure(
        self,
        configuration: Configuration,
        build_appender: Callable[[AppenderSpec], AppenderPort],
    ) -> list[AppenderPort]:
        """Replace all bindings with those described by ``configuration``.

        Appenders are cleared first, then built with ``build_appender`` and
        added in declaration order, then category levels are applied. A
        configuration without an ``appenders`` entry binds a default console
        appender to every category. Failures propagate and leave the registry
        cleared or partially configured.

        Returns
        -------
        list
            The appenders built for this configuration, in declaration order.
        """

        with self._lock:
            self.clear_appenders()
            built: list[AppenderPort] = []
            if configuration.appenders is None:
                default = build_appender(ConsoleAppenderSpec())
                built.append(default)
                self.add_appender(default)
            else:
                for spec in configuration.appenders:
                    appender = build_appender(spec)
                    built.append(appender)
                    self.add_appender(appender, spec.categories)
            for category, level_name in configuration.levels.items():
                self.get_logger(category).set_level(Level.to_level(level_name, Level.TRACE))
            logger.debug("configured %d appender(s) and %d level(s)", len(built), len(configuration.levels))
            return built

    def loggers(self) -> tuple[Logger, ...]:
        """Return the existing loggers in creation order."""

        with self._lock:
            return tuple(self._loggers.values())

    def pending_appenders(self, category: str) -> tuple[AppenderPort, ...]:
        """Return the appenders registered for ``category`` (exact key)."""

        with self._lock:
            return tuple(self._pending.get(category, ()))


__all__ = ["ALL_CATEGORIES", "DEFAULT_CATEGORY", "Registry"]
