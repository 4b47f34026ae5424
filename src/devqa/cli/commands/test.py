# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Test runner commands."""

from __future__ import annotations

import typer

from .. import services
from ._params import PATHS_HELP, PATHS_METAVAR, run_operation


def test_command(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, metavar=PATHS_METAVAR, help=PATHS_HELP, show_default=False),
) -> None:
    """Run the test suite.

    Raises:
        typer.Exit: Always, carrying the test runner's exit status.
    """

    outcome = run_operation(ctx, lambda state: services.test(state, paths or ()))
    raise typer.Exit(code=outcome.exit_code)


def test_coverage_command(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, metavar=PATHS_METAVAR, help=PATHS_HELP, show_default=False),
) -> None:
    """Run the test suite with coverage; reports go to build/logs/clover.xml and build/logs/junit.xml.

    Raises:
        typer.Exit: Always, carrying the test runner's exit status.
    """

    outcome = run_operation(ctx, lambda state: services.test_coverage(state, paths or ()))
    raise typer.Exit(code=outcome.exit_code)


def register(app: typer.Typer) -> None:
    """Register the ``test`` and ``testCoverage`` commands with ``app``."""

    app.command(name="test")(test_command)
    app.command(name="testCoverage")(test_coverage_command)
