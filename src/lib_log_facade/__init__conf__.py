"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

import sys
from collections.abc import Callable
from importlib import metadata as _metadata

name = "lib_log_facade"
title = "Category-based logging façade with appenders and pattern layouts"
shell_command = "lib_log_facade"
author = "bitranox"


def _resolve_version() -> str:
    try:
        return _metadata.version(name)
    except _metadata.PackageNotFoundError:
        return "0.0.0.dev0"


version = _resolve_version()


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner, one line per call to ``writer``."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    emit = writer or sys.stdout.write
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")
