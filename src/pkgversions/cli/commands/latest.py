# SPDX-License-Identifier: MIT
"""Print the newest of several versions."""

from __future__ import annotations

from typing import Optional

import click

from ...compare import latest as latest_version, resolve_scheme
from ...parse import InvalidVersionError
from ..main import echo_error, echo_info, echo_success, pass_context, scheme_option, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@scheme_option
@pass_context
def latest(ctx: Context, versions: tuple[str, ...], scheme: Optional[str]) -> None:
    """Print the newest of VERSIONS.

    \b
    Examples:
        pkgversions latest 1.0.0 1.1.0-rc.1 1.0.9    # 1.1.0-rc.1
        pkgversions latest 1:0.9 2.0                 # 1:0.9
    """
    scheme = ctx.resolve_scheme(scheme)
    if ctx.verbose:
        echo_info(f"Scheme: {resolve_scheme(versions, scheme)}")

    try:
        newest = latest_version(versions, scheme)
    except (InvalidVersionError, TypeError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_success(newest)
