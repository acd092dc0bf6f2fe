"""Runtime façade over the process-wide logger registry.

Purpose
-------
Expose the stable entry points (``get_logger``, ``add_appender``,
``configure`` ...) host applications use instead of talking to a
:class:`~lib_log_facade.application.registry.Registry` directly.

Contents
--------
* ``get_logger`` / ``get_default_logger`` – cached logger lookup.
* ``add_appender`` / ``clear_appenders`` – programmatic binding.
* ``configure`` – apply a mapping, decoded configuration, or JSON file.
* ``shutdown`` – close appenders built by ``configure``.
* ``current_registry`` / ``use_registry`` – access or inject the registry.

System Role
-----------
Outer shell: composes the registry with the adapter factories in
:mod:`._composition` and the file helpers in :mod:`lib_log_facade.config`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import partial
from pathlib import Path
from typing import Any

from rich.console import Console

from lib_log_facade.application.logger import Logger
from lib_log_facade.application.ports import AppenderPort
from lib_log_facade.application.registry import Registry
from lib_log_facade.config import find_configuration, load_configuration_file
from lib_log_facade.domain.configuration import AppenderSpec, Configuration, decode_configuration

from ._composition import build_appender, build_layout, close_appenders
from ._state import _STATE_LOCK, LoggingRuntime, current_runtime, reset_runtime, set_registry

logger = logging.getLogger(__name__)

ConfigurationSource = Configuration | Mapping[str, Any] | str | Path | None


def current_registry() -> Registry:
    """Return the process-wide registry."""

    return current_runtime().registry


def use_registry(registry: Registry) -> Registry:
    """Install ``registry`` as the process-wide default.

    The previous registry is cleared and appenders built by an earlier
    :func:`configure` call are closed.
    """

    with _STATE_LOCK:
        previous = current_runtime()
        previous.registry.clear_appenders()
        close_appenders(previous.owned_appenders)
        set_registry(registry)
    return registry


def get_logger(category: Any = None) -> Logger:
    """Return the cached logger for ``category`` (see :meth:`Registry.get_logger`)."""

    return current_registry().get_logger(category)


def get_default_logger() -> Logger:
    return current_registry().get_default_logger()


def add_appender(appender: AppenderPort, *categories: Any) -> None:
    """Bind ``appender`` to ``categories``; no categories means every logger."""

    current_registry().add_appender(appender, *categories)


def clear_appenders() -> None:
    """Unbind every appender from every logger and forget pending bindings."""

    current_registry().clear_appenders()


def _resolve_configuration(source: ConfigurationSource, search_paths: Iterable[str | Path]) -> Configuration | None:
    if isinstance(source, Configuration):
        return source
    if isinstance(source, Mapping):
        return decode_configuration(source)
    path = Path(source) if source is not None else find_configuration(search_paths)
    if path is None:
        return None
    logger.debug("loading logging configuration from %s", path)
    return decode_configuration(load_configuration_file(path))


def configure(
    source: ConfigurationSource = None,
    *,
    search_paths: Iterable[str | Path] = (),
    console: Console | None = None,
) -> list[AppenderPort]:
    """Replace the registry's appenders and levels from ``source``.

    Parameters
    ----------
    source:
        A decoded :class:`Configuration`, a raw mapping, or a path to a JSON
        file. ``None`` searches for a file via
        :func:`lib_log_facade.config.find_configuration` and does nothing when
        none is found.
    search_paths:
        Extra directories searched when ``source`` is ``None``.
    console:
        Rich console handed to every console appender built here.

    Returns
    -------
    list
        Appenders built from the configuration, in declaration order.

    Raises
    ------
    ConfigurationError
        When the source cannot be read or names an unknown type. Decoding
        happens before the registry is touched; failures while building
        appenders leave it cleared or partially configured.
    """

    configuration = _resolve_configuration(source, search_paths)
    if configuration is None:
        return []
    with _STATE_LOCK:
        runtime = current_runtime()
        runtime.registry.clear_appenders()
        close_appenders(runtime.owned_appenders)
        runtime.owned_appenders = []
        build = partial(build_appender, console=console)

        def _build_owned(spec: AppenderSpec) -> AppenderPort:
            appender = build(spec)
            runtime.owned_appenders.append(appender)
            return appender

        return runtime.registry.configure(configuration, _build_owned)


def shutdown() -> None:
    """Close appenders built by :func:`configure` and clear all bindings."""

    with _STATE_LOCK:
        runtime = current_runtime()
        runtime.registry.clear_appenders()
        close_appenders(runtime.owned_appenders)
        runtime.owned_appenders = []
    built = runtime.registry.configure(configuration, partial(build_appender, console=console))
    runtime.owned_appenders = built
    return built


def shutdown() -> None:
    """Close appenders built by :func:`configure` and clear all bindings."""

    runtime = current_runtime()
    runtime.registry.clear_appenders()
    close_appenders(runtime.owned_appenders)
    runtime.owned_appenders = []


__all__ = [
    "LoggingRuntime",
    "add_appender",
    "build_appender",
    "build_layout",
    "clear_appenders",
    "configure",
    "current_registry",
    "get_default_logger",
    "get_logger",
    "reset_runtime",
    "shutdown",
    "use_registry",
]
