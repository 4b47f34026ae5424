# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Style check and style fix commands."""

from __future__ import annotations

import typer

from .. import services
from ._params import PATHS_HELP, PATHS_METAVAR, run_operation


def sniff_command(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, metavar=PATHS_METAVAR, help=PATHS_HELP, show_default=False),
) -> None:
    """Check code style and print a colourised error and warning summary.

    Raises:
        typer.Exit: Always; the style checker's own status is not propagated.
    """

    outcome = run_operation(ctx, lambda state: services.sniff(state, paths or ()))
    raise typer.Exit(code=outcome.exit_code)


def sniff_fix_command(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, metavar=PATHS_METAVAR, help=PATHS_HELP, show_default=False),
) -> None:
    """Automatically fix code style violations where possible.

    Raises:
        typer.Exit: Always, carrying the fixer's exit status.
    """

    outcome = run_operation(ctx, lambda state: services.sniff_fix(state, paths or ()))
    raise typer.Exit(code=outcome.exit_code)


def register(app: typer.Typer) -> None:
    """Register the ``sniff`` and ``sniff-fix`` commands with ``app``."""

    app.command(name="sniff")(sniff_command)
    app.command(name="sniff-fix")(sniff_fix_command)
