from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lib_log_facade.adapters.appenders import ConsoleAppender, LevelFilter
from lib_log_facade.adapters.layouts import PatternLayout, basic_layout, message_pass_through_layout
from lib_log_facade.application.ports import AppenderPort, LayoutPort
from lib_log_facade.domain.events import LoggingEvent
from lib_log_facade.domain.levels import Level


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[LoggingEvent] = []

    def __call__(self, event: LoggingEvent) -> None:
        self.calls.append(event)


class _NotCallable:
    pass


def _event() -> LoggingEvent:
    return LoggingEvent("svc", Level.INFO, "msg", timestamp=datetime(2025, 1, 1, tzinfo=timezone.utc))


@pytest.mark.parametrize("layout", [PatternLayout("%m"), basic_layout, message_pass_through_layout])
def test_layouts_satisfy_layout_port(layout: object) -> None:
    assert isinstance(layout, LayoutPort)
    assert isinstance(layout(_event()), str)  # type: ignore[operator]


def test_recorder_and_wrappers_satisfy_appender_port(record_console) -> None:
    recorder = _Recorder()

    for candidate in (recorder, LevelFilter("INFO", recorder), ConsoleAppender(console=record_console)):
        assert isinstance(candidate, AppenderPort)
        candidate(_event())

    assert len(recorder.calls) == 2


def test_non_callables_do_not_satisfy_appender_port() -> None:
    assert not isinstance(_NotCallable(), AppenderPort)
