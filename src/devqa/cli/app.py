# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared state."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..config import ConfigError
from ..config_loader import load_config
from ..constants import USAGE_EXIT_CODE
from .commands import register_commands
from .shared import RunContext, build_cli_logger

app = typer.Typer(
    name="devqa",
    help="Run the project's style checker, static analyzer and test suite.",
    add_completion=False,
)


def _configure_debug_logging() -> None:
    """Stream module debug records to stderr."""

    root_logger = logging.getLogger("devqa")
    if root_logger.handlers:
        return
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    root: Path = typer.Option(
        Path(),
        "--root",
        "-r",
        exists=True,
        file_okay=False,
        dir_okay=True,
        help="Existing project directory the tools run in.",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colour output."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji output."),
    debug: bool = typer.Option(False, "--debug", help="Print each executed command line."),
) -> None:
    """Resolve shared options and show usage when no command is given.

    Raises:
        typer.Exit: With status 2 when no command is supplied, or 1 when the
            configuration cannot be loaded.
    """

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=USAGE_EXIT_CODE)

    logger = build_cli_logger(emoji=not no_emoji, debug=debug, no_color=no_color)
    if debug:
        _configure_debug_logging()
    resolved_root = root.resolve()
    try:
        config = load_config(resolved_root)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    logger.debug(f"root={resolved_root} standard={config.standard} level={config.analyze_level}")
    ctx.obj = RunContext(root=resolved_root, logger=logger, config=config)


register_commands(app)


def main() -> None:
    """Console script entry point."""

    app(prog_name="devqa")


__all__ = ["app", "main"]
