from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from lib_log_facade.adapters.appenders import ConsoleAppender, FileAppender, LevelFilter
from lib_log_facade.adapters.layouts import PatternLayout, message_pass_through_layout
from lib_log_facade.application.ports import AppenderPort
from lib_log_facade.domain.events import LoggingEvent
from lib_log_facade.domain.levels import Level


def _event(level: Level = Level.INFO, message: str = "hello") -> LoggingEvent:
    return LoggingEvent("tests", level, message, timestamp=datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc))


def test_console_appender_prints_rendered_line(record_console) -> None:
    appender = ConsoleAppender(PatternLayout("%p %c - %m"), console=record_console)

    appender(_event())

    assert record_console.export_text() == "INFO tests - hello\n"


def test_console_appender_defaults_to_basic_layout(record_console) -> None:
    appender = ConsoleAppender(console=record_console)

    appender(_event())

    assert record_console.export_text() == "2025-09-23 12:00:00.000 [INFO] tests - hello\n"


def test_console_appender_keeps_brackets_and_markup_literal(record_console) -> None:
    appender = ConsoleAppender(message_pass_through_layout, console=record_console)

    appender(_event(message="[bold]not markup[/bold] :smile:"))

    assert record_console.export_text() == "[bold]not markup[/bold] :smile:\n"


@pytest.mark.parametrize("colorize", [True, False])
def test_console_appender_colour_flag_does_not_change_text(record_console, colorize: bool) -> None:
    appender = ConsoleAppender(message_pass_through_layout, console=record_console, colorize=colorize)

    appender(_event(Level.FATAL))

    assert record_console.export_text() == "hello\n"


def test_console_appender_accepts_style_overrides(record_console) -> None:
    appender = ConsoleAppender(message_pass_through_layout, console=record_console, styles={"info": "green", "bogus": "red"})

    appender(_event())

    assert record_console.export_text() == "hello\n"


def test_file_appender_appends_lines(tmp_path: Path) -> None:
    target = tmp_path / "app.log"
    target.write_text("existing\n", encoding="utf-8")

    with FileAppender(target, message_pass_through_layout) as appender:
        appender(_event(message="one"))
        appender(_event(message="two"))
        assert target.read_text(encoding="utf-8") == "existing\none\ntwo\n"

    assert appender.closed


def test_file_appender_creates_missing_file(tmp_path: Path) -> None:
    target = tmp_path / "new.log"
    appender = FileAppender(str(target))

    appender(_event())
    appender.close()

    assert target.read_text(encoding="utf-8") == "2025-09-23 12:00:00.000 [INFO] tests - hello\n"


def test_closed_file_appender_raises(tmp_path: Path) -> None:
    appender = FileAppender(tmp_path / "x.log")
    appender.close()
    appender.close()

    with pytest.raises(ValueError, match="closed"):
        appender(_event())


def test_file_appender_open_failure_propagates(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        FileAppender(tmp_path / "missing-dir" / "x.log")


def test_level_filter_forwards_at_or_above_threshold() -> None:
    seen: list[Level] = []
    gate = LevelFilter(Level.WARN, lambda event: seen.append(event.level))

    for level in (Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR):
        gate(_event(level))

    assert seen == [Level.WARN, Level.ERROR]


def test_level_filter_accepts_names_and_defaults_unknown_to_all() -> None:
    assert LevelFilter("error", print).threshold is Level.ERROR
    assert LevelFilter("nonsense", print).threshold is Level.ALL


def test_level_filters_compose() -> None:
    seen: list[str] = []
    inner = LevelFilter("ERROR", lambda event: seen.append(event.message))
    outer = LevelFilter("INFO", inner)

    outer(_event(Level.DEBUG, "debug"))
    outer(_event(Level.WARN, "warn"))
    outer(_event(Level.FATAL, "fatal"))

    assert seen == ["fatal"]


def test_level_filter_close_delegates(tmp_path: Path) -> None:
    file_appender = FileAppender(tmp_path / "x.log")
    gate = LevelFilter("INFO", file_appender)

    gate.close()

    assert file_appender.closed


@pytest.mark.parametrize(
    "appender",
    [
        ConsoleAppender(message_pass_through_layout),
        LevelFilter("INFO", print),
        print,
    ],
)
def test_appenders_satisfy_port(appender: object) -> None:
    assert isinstance(appender, AppenderPort)
