"""Environment and file based configuration helpers.

Purpose
-------
Locate and read the JSON configuration consumed by
:func:`lib_log_facade.configure`, and optionally populate the environment from
a nearby ``.env`` file first.

Contents
--------
* :func:`enable_dotenv` / :func:`should_use_dotenv` – ``.env`` support backed
  by python-dotenv.
* :func:`find_configuration` – discover ``log_facade.json``.
* :func:`load_configuration_file` – read and parse a configuration file.

System Role
-----------
Edge of the system: the only module touching configuration files or the
process environment. Errors are reported as
:class:`~lib_log_facade.domain.errors.ConfigurationError`.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from pathlib import Path
from threading import Lock
from typing import Any

from dotenv import find_dotenv, load_dotenv

from lib_log_facade.domain.errors import ConfigurationError

DOTENV_ENV_VAR = "LOG_FACADE_USE_DOTENV"
"""Environment toggle enabling ``.env`` loading for the CLI."""

CONFIG_ENV_VAR = "LOG_FACADE_CONFIG"
"""Environment variable naming the configuration file explicitly."""

CONFIG_FILENAME = "log_facade.json"
"""File name searched for by :func:`find_configuration`."""

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOCK = Lock()
_DOTENV_LOADED: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is enabled.

    An explicit CLI choice wins over the environment toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` (searching upwards from the cwd) once.

    Existing environment variables keep precedence over file entries.
    Returns the resolved path of the loaded file, or ``None`` when none was
    found.
    """

    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        if _DOTENV_LOADED is not None:
            return _DOTENV_LOADED
        candidate = find_dotenv(usecwd=True)
        if not candidate:
            return None
        path = Path(candidate).resolve()
        load_dotenv(path, override=False)
        _DOTENV_LOADED = path
        return path


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None


def find_configuration(paths: Iterable[str | Path] = ()) -> Path | None:
    """Return the configuration file to use, or ``None``.

    :data:`CONFIG_ENV_VAR` wins when set. Otherwise the current directory is
    searched first, then every entry of ``paths`` in order, for
    :data:`CONFIG_FILENAME`.
    """

    explicit = os.getenv(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit)
    for directory in (Path.cwd(), *(Path(entry) for entry in paths)):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_configuration_file(path: str | Path) -> dict[str, Any]:
    """Read ``path`` as UTF-8 JSON.

    Raises
    ------
    ConfigurationError
        When the file cannot be read, is not valid JSON, or does not hold a
        JSON object. The underlying exception is chained.
    """

    target = Path(path)
    try:
        payload = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Problem reading configuration file {target}. Error was {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Configuration file {target} must contain a JSON object", spec=payload)
    return payload


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "DOTENV_ENV_VAR",
    "enable_dotenv",
    "find_configuration",
    "load_configuration_file",
    "should_use_dotenv",
]
