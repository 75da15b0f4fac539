# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for pkgversions tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory with a [tool.pkgversions] table."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "test-project"
version = "1.0.0"

[tool.pkgversions]
scheme = "generic"
reverse = true
"""
    )
    return project_dir


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """Create a temporary project whose pyproject.toml has no pkgversions table."""
    project_dir = tmp_path / "plain_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text('[project]\nname = "plain"\n')
    return project_dir
