# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load :class:`DevQAConfig` from the ``[tool.devqa]`` table of ``pyproject.toml``."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import ConfigError, DevQAConfig
from .constants import PYPROJECT_FILENAME, PYPROJECT_SECTION_KEY, PYPROJECT_TOOL_KEY

LOGGER = logging.getLogger(__name__)


def _normalise_keys(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``payload`` with TOML-style dashed keys converted to identifiers."""

    normalised: dict[str, Any] = {}
    for key, value in payload.items():
        name = str(key).replace("-", "_")
        normalised[name] = _normalise_keys(value) if isinstance(value, Mapping) else value
    return normalised


def read_pyproject_section(path: Path) -> dict[str, Any]:
    """Return the ``[tool.devqa]`` table from ``path`` or an empty mapping.

    Args:
        path: Location of the ``pyproject.toml`` file.

    Returns:
        dict[str, Any]: Normalised section payload.

    Raises:
        ConfigError: If the file is not valid TOML or the section is not a table.
    """

    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return _normalise_keys(section)


def load_config(root: Path) -> DevQAConfig:
    """Return the wrapper configuration for the project rooted at ``root``.

    Tool tables in ``pyproject.toml`` are merged over the built-in defaults so a
    project may override a single field, such as the executable, without
    restating the rest.

    Args:
        root: Project root containing an optional ``pyproject.toml``.

    Returns:
        DevQAConfig: Validated configuration.

    Raises:
        ConfigError: If the file or its values are invalid.
    """

    pyproject = root / PYPROJECT_FILENAME
    overrides = read_pyproject_section(pyproject)
    if not overrides:
        return DevQAConfig()
    LOGGER.debug("loading devqa configuration from %s", pyproject)
    merged = DevQAConfig().to_dict()
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = {**current, **value}
        else:
            merged[key] = value
    try:
        return DevQAConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {pyproject}: {exc}") from exc


__all__ = ["load_config", "read_pyproject_section"]
