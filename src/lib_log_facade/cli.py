"""Click command line interface for the logging façade.

Purpose
-------
Let operators inspect package metadata, try out pattern templates, and
exercise a configuration file without writing Python.

Contents
--------
* :func:`cli` – command group (``info``, ``render``, ``demo``).
* :func:`main` – test-friendly runner returning an exit code.

System Role
-----------
Presentation layer; talks only to the runtime façade and the adapters.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from .adapters.layouts import PatternLayout
from .domain.errors import ConfigurationError
from .domain.events import LoggingEvent
from .domain.levels import Level
from .runtime import configure, get_logger, shutdown

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def summary_info() -> str:
    """Return the metadata banner printed by ``info``."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load a nearby .env before running commands (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, version: bool, use_dotenv: bool | None) -> None:
    """Category-based logging façade."""

    if log_config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()
    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("render", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("pattern")
@click.option("--message", "-m", default="Hello World", show_default=True, help="Message of the sample event.")
@click.option("--category", "-c", default="lib_log_facade.cli", show_default=True, help="Category of the sample event.")
@click.option("--level", "-l", default="INFO", show_default=True, help="Level name of the sample event.")
def cli_render(pattern: str, message: str, category: str, level: str) -> None:
    """Render PATTERN for a sample event and print the result."""

    event = LoggingEvent(category=category, level=Level.to_level(level, Level.INFO), message=message)
    rendered = PatternLayout(pattern)(event)
    click.echo(rendered, nl=not rendered.endswith("\n"))


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help=f"JSON configuration file (default: ${log_config.CONFIG_ENV_VAR} or ./{log_config.CONFIG_FILENAME}).",
)
@click.option("--category", "-c", default="demo", show_default=True, help="Category to log under.")
def cli_demo(config_path: Path | None, category: str) -> None:
    """Configure the registry and emit one event per level."""

    source = config_path or log_config.find_configuration()
    try:
        configure(source if source is not None else {})
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc

    demo_logger = get_logger(category)
    try:
        demo_logger.trace("trace message")
        demo_logger.debug("debug message")
        demo_logger.info("info message")
        demo_logger.warn("warn message")
        demo_logger.error("error message", ValueError("sample failure"))
        demo_logger.fatal("fatal message")
    finally:
        shutdown()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click command in a test-friendly manner.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Zero on success, the Click exit code otherwise.
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.exceptions.Exit as exit_signal:
        return exit_signal.exit_code
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main", "summary_info"]
