# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import compare, sort, latest, parse

__all__ = ["compare", "sort", "latest", "parse"]
