# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from devqa.cli import services
from devqa.process import ToolResult


@dataclass(slots=True)
class FakeToolRunner:
    """Record tool invocations and replay canned results keyed by executable."""

    responses: dict[str, tuple[int, str]] = field(default_factory=dict)
    missing: set[str] = field(default_factory=set)
    calls: list[list[str]] = field(default_factory=list)
    captured: list[bool] = field(default_factory=list)
    cwds: list[Path | None] = field(default_factory=list)

    def __call__(self, command: Sequence[str], *, capture: bool = False, cwd: Path | None = None) -> ToolResult:
        self.calls.append(list(command))
        self.captured.append(capture)
        self.cwds.append(cwd)
        if command[0] in self.missing:
            message = f"Executable '{command[0]}' was not found on PATH"
            return ToolResult(command=tuple(command), stdout="", stderr=message, exit_code=127)
        exit_code, stdout = self.responses.get(command[0], (0, ""))
        return ToolResult(command=tuple(command), stdout=stdout, stderr="", exit_code=exit_code)

    @property
    def executables(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_tools(monkeypatch: pytest.MonkeyPatch) -> FakeToolRunner:
    """Replace subprocess execution of the wrapped tools with a recorder."""

    runner = FakeToolRunner()
    monkeypatch.setattr(services, "run_tool", runner)
    return runner


@pytest.fixture
def write_pyproject(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing ``pyproject.toml`` into ``tmp_path``."""

    def _write(content: str) -> Path:
        path = tmp_path / "pyproject.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
