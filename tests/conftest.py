from __future__ import annotations

from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_facade.runtime import reset_runtime, shutdown


@pytest.fixture
def record_console() -> Console:
    """Rich console writing to memory without colour or wrapping."""

    return Console(file=StringIO(), record=True, color_system=None, width=200, soft_wrap=True)


@pytest.fixture(autouse=True)
def fresh_runtime() -> Iterator[None]:
    """Give every test an empty process-wide registry."""

    reset_runtime()
    try:
        yield
    finally:
        shutdown()
        reset_runtime()
