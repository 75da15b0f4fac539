# SPDX-License-Identifier: MIT
"""Command-line interface for pkgversions."""

from .main import cli, main

__all__ = ["cli", "main"]
