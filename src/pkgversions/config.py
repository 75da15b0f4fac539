# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml.

Settings live in the ``[tool.pkgversions]`` table::

    [tool.pkgversions]
    scheme = "generic"
    reverse = true
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .compare import SCHEMES
from .parse import VersionError


class ConfigError(VersionError):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml, if one was found
        scheme: Default version scheme (auto, semver or generic)
        reverse: Sort newest first by default
    """

    project_dir: Optional[Path] = None
    scheme: str = "auto"
    reverse: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a setting has the wrong type or value
        """
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")

        tool_config = tool.get("pkgversions", {})
        if not isinstance(tool_config, dict):
            raise ConfigError("[tool.pkgversions] must be a table")

        scheme = tool_config.get("scheme", "auto")
        if scheme not in SCHEMES:
            raise ConfigError(
                f"Invalid scheme '{scheme}' in [tool.pkgversions] (expected one of {', '.join(SCHEMES)})"
            )

        reverse = tool_config.get("reverse", False)
        if not isinstance(reverse, bool):
            raise ConfigError("'reverse' in [tool.pkgversions] must be a boolean")

        return cls(project_dir=project_dir, scheme=scheme, reverse=reverse)


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory at or above ``start_dir`` holding pyproject.toml.

    Returns:
        Path to the project root, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return None


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load configuration for the project containing ``project_dir``.

    Falls back to the defaults when no pyproject.toml is found.
    """
    root = find_project_root(project_dir)
    if root is None:
        return CLIConfig()
    return CLIConfig.from_pyproject(root)
