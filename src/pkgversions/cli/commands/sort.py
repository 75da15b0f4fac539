# SPDX-License-Identifier: MIT
"""Sort versions from oldest to newest."""

from __future__ import annotations

from typing import Optional

import click
from click.core import ParameterSource

from ...compare import resolve_scheme, sort_versions
from ...parse import InvalidVersionError
from ..main import echo_error, echo_info, pass_context, scheme_option, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@scheme_option
@click.option(
    "--reverse/--no-reverse",
    "-r",
    default=False,
    help="Print the newest version first (defaults to [tool.pkgversions].reverse).",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], scheme: Optional[str], reverse: bool) -> None:
    """Sort VERSIONS and print them one per line.

    \b
    Examples:
        pkgversions sort 1.10 1.9 1.9rc1        # 1.9rc1, 1.9, 1.10
        pkgversions sort -r 1.0.0 1.0.0-rc.1    # 1.0.0, 1.0.0-rc.1
        pkgversions sort --no-reverse 1.0 2.0   # oldest first, whatever the config says
    """
    scheme = ctx.resolve_scheme(scheme)
    if click.get_current_context().get_parameter_source("reverse") is ParameterSource.DEFAULT:
        reverse = ctx.checked_config().reverse
    if ctx.verbose:
        echo_info(f"Scheme: {resolve_scheme(versions, scheme)}")

    try:
        ordered = sort_versions(versions, scheme, reverse=reverse)
    except (InvalidVersionError, TypeError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    for version in ordered:
        echo_info(version)
