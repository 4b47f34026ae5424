# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants for the devqa command wrapper."""

from __future__ import annotations

from pathlib import Path
from typing import Final

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "devqa"

DEFAULT_STANDARD: Final[str] = "PSR12"
DEFAULT_ANALYZE_LEVEL: Final[str] = "5"
ANALYZE_LEVELS: Final[frozenset[str]] = frozenset({*(str(level) for level in range(10)), "max"})

SOURCE_PATHS: Final[tuple[str, ...]] = ("src",)
TEST_PATHS: Final[tuple[str, ...]] = ("tests",)
SOURCE_AND_TEST_PATHS: Final[tuple[str, ...]] = (*SOURCE_PATHS, *TEST_PATHS)

# Coverage artefacts are written to fixed locations relative to the project root.
REPORT_DIR: Final[Path] = Path("build") / "logs"
COVERAGE_REPORT: Final[Path] = REPORT_DIR / "clover.xml"
JUNIT_REPORT: Final[Path] = REPORT_DIR / "junit.xml"

USAGE_EXIT_CODE: Final[int] = 2
COMMAND_NOT_FOUND_EXIT_CODE: Final[int] = 127

__all__ = [
    "ANALYZE_LEVELS",
    "COMMAND_NOT_FOUND_EXIT_CODE",
    "COVERAGE_REPORT",
    "DEFAULT_ANALYZE_LEVEL",
    "DEFAULT_STANDARD",
    "JUNIT_REPORT",
    "PYPROJECT_FILENAME",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
    "REPORT_DIR",
    "SOURCE_AND_TEST_PATHS",
    "SOURCE_PATHS",
    "TEST_PATHS",
    "USAGE_EXIT_CODE",
]
