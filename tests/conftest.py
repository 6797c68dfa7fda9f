# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for version tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def keep_build_pyproject(tmp_path: Path) -> Path:
    """Create a pyproject.toml that keeps build metadata on increments."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        """[project]
name = "test-project"
version = "1.0.0"

[tool.semver-value]
build-policy = "keep"
"""
    )
    return pyproject
