# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parameter helpers shared by the devqa commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import typer

from ..shared import CLIError, RunContext, get_run_context

PATHS_METAVAR = "[PATHS...]"
PATHS_HELP = "Files or directories passed to the tool. Defaults to the tool's configured paths."

OutcomeT = TypeVar("OutcomeT")


def run_operation(ctx: typer.Context, operation: Callable[[RunContext], OutcomeT]) -> OutcomeT:
    """Invoke ``operation`` with the current :class:`RunContext`.

    Raises:
        typer.Exit: When the operation raises :class:`CLIError`.
    """

    state = get_run_context(ctx)
    try:
        return operation(state)
    except CLIError as exc:
        state.logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


__all__ = ["PATHS_HELP", "PATHS_METAVAR", "run_operation"]
