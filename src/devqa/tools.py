# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build command lines for the wrapped QA tools."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from .config import DevQAConfig, ToolConfig, validate_analyze_level
from .constants import COVERAGE_REPORT, JUNIT_REPORT


class ToolKind(str, Enum):
    """Wrapped tool invocations known to devqa."""

    SNIFF = "sniff"
    SNIFF_FIX = "sniff-fix"
    ANALYZE = "analyze"
    TEST = "test"
    TEST_COVERAGE = "test-coverage"

    @property
    def label(self) -> str:
        return _TITLES[self]


_TITLES: dict[ToolKind, str] = {
    ToolKind.SNIFF: "Code style check",
    ToolKind.SNIFF_FIX: "Code style fix",
    ToolKind.ANALYZE: "Static analysis",
    ToolKind.TEST: "Tests",
    ToolKind.TEST_COVERAGE: "Tests with coverage",
}


def tool_config(kind: ToolKind, config: DevQAConfig) -> ToolConfig:
    """Return the configured :class:`ToolConfig` for ``kind``."""

    mapping = {
        ToolKind.SNIFF: config.sniff,
        ToolKind.SNIFF_FIX: config.sniff_fix,
        ToolKind.ANALYZE: config.analyze,
        ToolKind.TEST: config.test,
        ToolKind.TEST_COVERAGE: config.test_coverage,
    }
    return mapping[kind]


def _builtin_args(kind: ToolKind, config: DevQAConfig, level: str | None) -> list[str]:
    if kind in {ToolKind.SNIFF, ToolKind.SNIFF_FIX}:
        return [f"--standard={config.standard}"]
    if kind is ToolKind.ANALYZE:
        resolved = validate_analyze_level(level) if level is not None else config.analyze_level
        return [f"--level={resolved}"]
    if kind is ToolKind.TEST_COVERAGE:
        return ["--coverage-clover", str(COVERAGE_REPORT), "--log-junit", str(JUNIT_REPORT)]
    return []


def build_command(
    kind: ToolKind,
    config: DevQAConfig,
    paths: Sequence[str] = (),
    *,
    level: str | None = None,
) -> list[str]:
    """Return the argument list used to run ``kind``.

    The configured executable and arguments come first, followed by the flags
    devqa always adds for the tool, then ``paths`` (or the tool's default
    paths when ``paths`` is empty).

    Args:
        kind: Tool to invoke.
        config: Wrapper configuration.
        paths: Files or directories supplied on the command line.
        level: Optional analysis level overriding ``config.analyze_level``.

    Returns:
        list[str]: Command ready for :func:`devqa.process.run_tool`.

    Raises:
        ValueError: If ``level`` is not a valid analysis level.
    """

    tool = tool_config(kind, config)
    targets = list(paths) if paths else list(tool.default_paths)
    return [tool.executable, *tool.args, *_builtin_args(kind, config, level), *targets]


__all__ = ["ToolKind", "build_command", "tool_config"]
