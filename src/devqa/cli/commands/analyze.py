# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Static analysis command."""

from __future__ import annotations

import typer

from .. import services
from ._params import PATHS_HELP, PATHS_METAVAR, run_operation


def analyze_command(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, metavar=PATHS_METAVAR, help=PATHS_HELP, show_default=False),
    level: str | None = typer.Option(
        None,
        "--level",
        "-l",
        help="Analysis strictness level (0-9 or 'max'). Defaults to the configured level.",
    ),
) -> None:
    """Run the static analyzer.

    Raises:
        typer.Exit: Always, carrying the analyzer's exit status.
    """

    outcome = run_operation(ctx, lambda state: services.analyze(state, paths or (), level=level))
    raise typer.Exit(code=outcome.exit_code)


def register(app: typer.Typer) -> None:
    """Register the ``analyze`` command with ``app``."""

    app.command(name="analyze")(analyze_command)
