# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the wrapped QA tools as subprocesses and report their outcome."""

from __future__ import annotations

import logging
import os
import shutil

# Bandit: subprocess usage is intentional; tool commands are passed as argument
# lists and ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .constants import COMMAND_NOT_FOUND_EXIT_CODE

LOGGER = logging.getLogger(__name__)


class ExitCodePolicy(str, Enum):
    """Decide whether a tool's exit status becomes the wrapper's exit status."""

    PROPAGATE = "propagate"
    SUPPRESS = "suppress"


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Outcome of a single wrapped tool invocation."""

    command: tuple[str, ...]
    stdout: str
    stderr: str
    exit_code: int

    @property
    def output(self) -> str:
        """Return stdout followed by stderr."""

        if self.stdout and self.stderr:
            return f"{self.stdout.rstrip()}\n{self.stderr}"
        return self.stdout or self.stderr

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    def effective_exit_code(self, policy: ExitCodePolicy) -> int:
        """Return the exit status the wrapper should report under ``policy``.

        Args:
            policy: Exit code policy chosen by the calling operation.

        Returns:
            int: ``0`` when the policy suppresses the tool status, otherwise the
            tool's own exit code.
        """

        if policy is ExitCodePolicy.SUPPRESS:
            return 0
        return self.exit_code


def _has_directory_part(executable: str) -> bool:
    separators = {os.sep, os.altsep} - {None}
    return any(separator in executable for separator in separators)


def _normalize_args(args: Sequence[str], cwd: Path | None) -> list[str]:
    """Return ``args`` with the executable resolved to an absolute path.

    Bare names are looked up on ``PATH``. Relative paths such as
    ``vendor/bin/phpunit`` are resolved against ``cwd``, the directory the tool
    runs in, rather than the directory devqa was started from.

    Args:
        args: Raw command arguments supplied by the caller.
        cwd: Working directory of the tool, ``None`` for the current directory.

    Returns:
        list[str]: Argument list with an absolute executable path.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be resolved.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    if _has_directory_part(head):
        base = cwd if cwd is not None else Path.cwd()
        resolved = shutil.which(str(base / head_path))
        if resolved is None:
            msg = f"Executable '{head}' was not found in {base}"
            raise FileNotFoundError(msg)
        return [str(Path(resolved).resolve()), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_tool(command: Sequence[str], *, capture: bool = False, cwd: Path | None = None) -> ToolResult:
    """Run one wrapped tool to completion and return its :class:`ToolResult`.

    Output is streamed straight to the terminal unless ``capture`` is set. A
    missing executable is reported as exit status ``127`` instead of raising so
    that composite runs continue with their remaining steps.

    Args:
        command: Executable followed by its arguments.
        capture: Whether stdout and stderr should be captured for post-processing.
        cwd: Working directory for the tool, defaults to the current directory.

    Returns:
        ToolResult: Captured output (empty when streaming) and exit status.
    """

    LOGGER.debug("running %s", " ".join(command))
    try:
        normalized = _normalize_args(command, cwd)
    except FileNotFoundError as exc:
        LOGGER.debug("tool unavailable: %s", exc)
        return ToolResult(
            command=tuple(command),
            stdout="",
            stderr=str(exc),
            exit_code=COMMAND_NOT_FOUND_EXIT_CODE,
        )
    # Bandit: commands come from the wrapper's tool table plus user supplied
    # path arguments; no shell expansion takes place.
    completed = subprocess.run(  # nosec B603
        normalized,
        cwd=str(cwd) if cwd is not None else None,
        check=False,
        capture_output=capture,
        text=True,
    )
    return ToolResult(
        command=tuple(command),
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
        exit_code=completed.returncode,
    )


__all__ = ["ExitCodePolicy", "ToolResult", "run_tool"]
