# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Composite command running every check in sequence."""

from __future__ import annotations

import typer

from .. import services
from ..shared import get_run_context
from ._params import PATHS_HELP, PATHS_METAVAR, run_operation


def all_command(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, metavar=PATHS_METAVAR, help=PATHS_HELP, show_default=False),
) -> None:
    """Run style check, static analysis and coverage tests; all three always run.

    Raises:
        typer.Exit: Always, carrying the exit status of the coverage test run.
    """

    outcome = run_operation(ctx, lambda state: services.run_all(state, paths or ()))
    failed = [step.kind.label for step in outcome.steps if not step.result.succeeded]
    logger = get_run_context(ctx).logger
    if failed:
        logger.warn(f"Steps reporting problems: {', '.join(failed)}")
    else:
        logger.ok("All checks completed")
    raise typer.Exit(code=outcome.exit_code)


def register(app: typer.Typer) -> None:
    """Register the ``all`` command with ``app``."""

    app.command(name="all")(all_command)
