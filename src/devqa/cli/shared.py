# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, invocation state)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

import typer
from rich.console import Console
from rich.text import Text

from ..config import DevQAConfig


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Write status lines through Rich consoles bound to stdout and stderr.

    Each console decides on colour from its own stream, so redirecting one
    stream never changes how the other is rendered.
    """

    console: Console
    err_console: Console
    use_emoji: bool
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def _status(self, glyph: str, message: str, style: str, *, console: Console | None = None) -> None:
        text = Text(self.glyph(glyph))
        text.append(message, style=style)
        (console or self.console).print(text)

    def fail(self, message: str) -> None:
        """Log a failure message on stderr."""

        self._status("❌", message, "bold red", console=self.err_console)

    def warn(self, message: str) -> None:
        """Log a warning message."""

        self._status("⚠️", message, "bold yellow")

    def ok(self, message: str) -> None:
        """Log a success message."""

        self._status("✅", message, "bold green")

    def info(self, message: str) -> None:
        self._status("ℹ️", message, "")

    def section(self, title: str) -> None:
        """Print a header announcing the next wrapped tool run."""

        text = Text("\n")
        text.append("───", style="bold blue")
        text.append(f" {title} ", style="bold cyan")
        text.append("───", style="bold blue")
        self.console.print(text)

    def glyph(self, symbol: str) -> str:
        """Return ``symbol`` followed by a space when emoji output is enabled."""

        return f"{symbol} " if self.use_emoji else ""

    def echo(self, message: str) -> None:
        """Write tool output to stdout verbatim, without Rich markup or wrapping."""

        typer.echo(message)

    def print(self, renderable: Text) -> None:
        """Render ``renderable`` through the stdout console."""

        self.console.print(renderable)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload; ``key=value`` pairs are highlighted.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            value_style = "bold blue" if key in {"command", "cmd"} else "bold green"
            text.append(raw_value, style=value_style)
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to dedicated stdout and stderr Rich consoles.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance for the current invocation.
    """

    console = Console(no_color=no_color, highlight=False, emoji=False, soft_wrap=True)
    err_console = Console(stderr=True, no_color=no_color, highlight=False, emoji=False, soft_wrap=True)
    return CLILogger(console=console, err_console=err_console, use_emoji=emoji, debug_enabled=debug)


@dataclass(slots=True)
class RunContext:
    """State shared by every command of one invocation."""

    root: Path
    logger: CLILogger
    config: DevQAConfig = field(default_factory=DevQAConfig)


def get_run_context(ctx: typer.Context) -> RunContext:
    """Return the :class:`RunContext` stored by the application callback.

    Raises:
        CLIError: If the callback did not run before the command.
    """

    state = ctx.find_object(RunContext)
    if state is None:
        raise CLIError("devqa commands must be invoked through the devqa application")
    return state


__all__: Final = [
    "CLIError",
    "CLILogger",
    "RunContext",
    "build_cli_logger",
    "get_run_context",
]
