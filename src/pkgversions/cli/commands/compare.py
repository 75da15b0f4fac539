# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

from typing import Optional

import click

from ...compare import compare as compare_versions, resolve_scheme
from ...parse import InvalidVersionError
from ..main import echo_error, echo_info, pass_context, scheme_option, Context

_SYMBOLS = {-1: "<", 0: "==", 1: ">"}


@click.command()
@click.argument("version1")
@click.argument("version2")
@scheme_option
@pass_context
def compare(ctx: Context, version1: str, version2: str, scheme: Optional[str]) -> None:
    """Compare VERSION1 with VERSION2.

    Prints the relation between the two versions. Build metadata is ignored
    for semantic versions, and a missing epoch counts as 0 for generic ones.

    \b
    Examples:
        pkgversions compare 1.0.0-alpha 1.0.0        # 1.0.0-alpha < 1.0.0
        pkgversions compare 1.0.0+a 1.0.0+b          # 1.0.0+a == 1.0.0+b
        pkgversions compare -s generic 2:1.0 3.0     # 2:1.0 > 3.0
    """
    scheme = resolve_scheme((version1, version2), ctx.resolve_scheme(scheme))
    if ctx.verbose:
        echo_info(f"Scheme: {scheme}")

    try:
        result = compare_versions(version1, version2, scheme)
    except (InvalidVersionError, TypeError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(f"{version1} {_SYMBOLS[result]} {version2}")
