from __future__ import annotations

import json
from pathlib import Path

import pytest

import lib_log_facade as lf
import lib_log_facade.runtime as runtime_module
from lib_log_facade.domain.events import LoggingEvent
from lib_log_facade.runtime import current_registry


def test_get_logger_uses_process_wide_registry() -> None:
    assert lf.get_logger("x") is lf.get_logger("x")
    assert lf.get_logger("x") is current_registry().get_logger("x")
    assert lf.get_default_logger() is lf.get_logger(None)
    assert lf.get_default_logger().category == lf.DEFAULT_CATEGORY


def test_add_and_clear_appenders_through_facade() -> None:
    seen: list[str] = []
    lf.add_appender(lambda event: seen.append(f"all:{event.message}"))
    lf.add_appender(lambda event: seen.append(f"db:{event.message}"), "db")

    lf.get_logger("db").info("q")
    lf.clear_appenders()
    lf.get_logger("db").info("dropped")

    assert seen == ["db:q", "all:q"]


def test_use_registry_swaps_the_default() -> None:
    registry = lf.Registry()
    lf.use_registry(registry)

    assert current_registry() is registry
    assert lf.get_logger("svc") is registry.get_logger("svc")


def test_configure_from_mapping(record_console) -> None:
    built = lf.configure(
        {
            "appenders": [{"type": "console", "layout": {"type": "pattern", "pattern": "%-5p %c - %m"}}],
            "levels": {"noisy": "WARN"},
        },
        console=record_console,
    )

    lf.get_logger("noisy").info("hidden")
    lf.get_logger("noisy").warn("shown")
    lf.get_logger("app").debug("visible")

    assert len(built) == 1
    assert record_console.export_text() == "WARN  noisy - shown\nDEBUG app - visible\n"


def test_configure_from_file_with_filter(tmp_path: Path, record_console) -> None:
    log_file = tmp_path / "errors.log"
    config_file = tmp_path / "log_facade.json"
    config_file.write_text(
        json.dumps(
            {
                "appenders": [
                    {
                        "type": "logLevelFilter",
                        "level": "ERROR",
                        "category": "db",
                        "appender": {
                            "type": "file",
                            "filename": str(log_file),
                            "layout": {"type": "messagePassThrough"},
                        },
                    }
                ]
            }
        ),
        encoding="utf-8",
    )

    lf.configure(config_file, console=record_console)
    db = lf.get_logger("db")
    db.warn("ignored")
    db.error("kept")
    lf.get_logger("web").fatal("not routed")
    lf.shutdown()

    assert log_file.read_text(encoding="utf-8") == "kept\n"


def test_configure_without_appenders_uses_console(record_console) -> None:
    lf.configure({"levels": {}}, console=record_console)

    lf.get_logger("app").info("hello")

    assert record_console.export_text().endswith("[INFO] app - hello\n")


def test_configure_discovers_file_in_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, record_console) -> None:
    (tmp_path / "log_facade.json").write_text(
        json.dumps({"appenders": [{"type": "console", "layout": {"type": "messagePassThrough"}}]}),
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_FACADE_CONFIG", raising=False)

    built = lf.configure(console=record_console)
    lf.get_logger("x").info("found")

    assert len(built) == 1
    assert record_console.export_text() == "found\n"


def test_configure_without_any_source_is_a_noop(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[LoggingEvent] = []
    lf.add_appender(seen.append)
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_FACADE_CONFIG", raising=False)

    assert lf.configure() == []
    lf.get_logger("x").info("still bound")
    assert len(seen) == 1


def test_configure_unknown_type_raises_configuration_error() -> None:
    with pytest.raises(lf.ConfigurationError, match="Unknown appender type 'carrier-pigeon'"):
        lf.configure({"appenders": [{"type": "carrier-pigeon"}]})


def test_configure_unreadable_file_wraps_cause(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    with pytest.raises(lf.ConfigurationError, match="Problem reading configuration file") as info:
        lf.configure(broken)

    assert isinstance(info.value.__cause__, json.JSONDecodeError)


def test_reconfigure_closes_previous_file_appenders(tmp_path: Path, record_console) -> None:
    first = lf.configure({"appenders": [{"type": "file", "filename": str(tmp_path / "a.log")}]})
    lf.configure({"appenders": [{"type": "console"}]}, console=record_console)

    assert first[0].closed  # type: ignore[attr-defined]


def test_appender_failure_reaches_the_caller() -> None:
    def _broken(event: LoggingEvent) -> None:
        raise RuntimeError("sink down")

    lf.add_appender(_broken, "fragile")

    with pytest.raises(RuntimeError, match="sink down"):
        lf.get_logger("fragile").error("boom")

    lf.get_logger("sturdy").error("unaffected")


def test_failed_configure_still_owns_appenders_built_before_the_failure(tmp_path: Path) -> None:
    config = {
        "appenders": [
            {"type": "file", "filename": str(tmp_path / "good.log")},
            {"type": "file", "filename": str(tmp_path / "missing" / "bad.log")},
        ]
    }

    with pytest.raises(lf.ConfigurationError):
        lf.configure(config)
    opened = lf.get_logger("x").appenders
    assert len(opened) == 1

    lf.shutdown()

    assert all(appender.closed for appender in opened)  # type: ignore[attr-defined]


def test_reconfigure_unbinds_old_appenders_before_closing_them(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, record_console
) -> None:
    lf.configure({"appenders": [{"type": "file", "filename": str(tmp_path / "a.log")}]})
    lf.get_logger("worker")
    still_bound: list[int] = []
    original_close = runtime_module.close_appenders

    def _checking_close(appenders) -> None:
        still_bound.append(len(current_registry().get_logger("worker").appenders))
        original_close(appenders)

    monkeypatch.setattr(runtime_module, "close_appenders", _checking_close)

    lf.configure({"appenders": [{"type": "console"}]}, console=record_console)

    assert still_bound == [0]


def test_use_registry_unbinds_configured_appenders_from_the_old_registry(tmp_path: Path) -> None:
    lf.configure({"appenders": [{"type": "file", "filename": str(tmp_path / "a.log")}]})
    old = current_registry()
    worker = old.get_logger("worker")
    opened = worker.appenders

    lf.use_registry(lf.Registry())

    assert worker.appenders == ()
    assert all(appender.closed for appender in opened)  # type: ignore[attr-defined]
