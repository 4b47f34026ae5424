# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models describing the wrapped tools and their defaults."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    ANALYZE_LEVELS,
    DEFAULT_ANALYZE_LEVEL,
    DEFAULT_STANDARD,
    SOURCE_AND_TEST_PATHS,
    SOURCE_PATHS,
    TEST_PATHS,
)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


def validate_analyze_level(value: Any) -> str:
    """Return ``value`` normalised to a static analysis level string.

    Raises:
        ValueError: If the level is outside ``0``-``9`` and not ``max``.
    """

    level = str(value).strip().lower()
    if level not in ANALYZE_LEVELS:
        allowed = ", ".join(sorted(ANALYZE_LEVELS))
        raise ValueError(f"analysis level must be one of: {allowed}")
    return level


class ToolConfig(BaseModel):
    """Executable, fixed arguments and default targets for one wrapped tool."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    executable: str
    args: list[str] = Field(default_factory=list)
    default_paths: list[str] = Field(default_factory=list)

    @field_validator("executable")
    @classmethod
    def require_executable(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("executable must not be empty")
        return value


class DevQAConfig(BaseModel):
    """Top-level wrapper configuration loaded from ``[tool.devqa]``."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    standard: str = DEFAULT_STANDARD
    analyze_level: str = DEFAULT_ANALYZE_LEVEL
    sniff: ToolConfig = Field(
        default_factory=lambda: ToolConfig(executable="phpcs", args=["-p"], default_paths=list(SOURCE_AND_TEST_PATHS)),
    )
    sniff_fix: ToolConfig = Field(
        default_factory=lambda: ToolConfig(executable="phpcbf", default_paths=list(SOURCE_AND_TEST_PATHS)),
    )
    analyze: ToolConfig = Field(
        default_factory=lambda: ToolConfig(
            executable="phpstan",
            args=["analyse", "--no-progress"],
            default_paths=list(SOURCE_PATHS),
        ),
    )
    test: ToolConfig = Field(
        default_factory=lambda: ToolConfig(executable="phpunit", default_paths=list(TEST_PATHS)),
    )
    test_coverage: ToolConfig = Field(
        default_factory=lambda: ToolConfig(executable="phpunit", default_paths=list(TEST_PATHS)),
    )

    @field_validator("analyze_level", mode="before")
    @classmethod
    def check_level(cls, value: Any) -> str:
        return validate_analyze_level(value)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation of the configuration."""

        return self.model_dump(mode="json")


__all__ = ["ConfigError", "DevQAConfig", "ToolConfig", "validate_analyze_level"]
