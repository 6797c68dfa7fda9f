# SPDX-License-Identifier: MIT
"""Configuration for version increments.

Projects can record the build metadata policy they want for increments in
their pyproject.toml:

    [tool.semver-value]
    build-policy = "keep"

The setting is read explicitly and handed to each increment:

    config = VersionConfig.from_pyproject("pyproject.toml")
    version.increment_minor(config.build_policy)
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

TOOL_TABLE = "semver-value"


class ConfigError(Exception):
    """Raised when version configuration is invalid."""

    pass


class BuildPolicy(str, Enum):
    """What happens to build metadata when a version is incremented."""

    CLEAR = "clear"
    KEEP = "keep"


@dataclass(frozen=True)
class VersionConfig:
    """Settings consulted by the increment operations.

    Attributes:
        build_policy: Whether increments clear or keep build metadata
    """

    build_policy: BuildPolicy = BuildPolicy.CLEAR

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "VersionConfig":
        """Create a VersionConfig from a pyproject.toml file.

        Args:
            pyproject_path: Path to pyproject.toml

        Returns:
            VersionConfig instance

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.debug("Could not decode %s: %s", path, e)
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "VersionConfig":
        """Create a VersionConfig from a parsed pyproject.toml dictionary.

        Missing tables fall back to the defaults.
        """
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")

        table = tool.get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        raw_policy = table.get("build-policy", BuildPolicy.CLEAR.value)
        try:
            policy = BuildPolicy(raw_policy)
        except ValueError:
            choices = ", ".join(p.value for p in BuildPolicy)
            raise ConfigError(
                f"Invalid build-policy {raw_policy!r}: expected one of {choices}"
            ) from None

        return cls(build_policy=policy)
