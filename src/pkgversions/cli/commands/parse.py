# SPDX-License-Identifier: MIT
"""Show how a version string is broken into chunks and units."""

from __future__ import annotations

from typing import Optional

import click

from ...chunks import Chunk, Digits
from ...compare import parse_with_scheme
from ...parse import InvalidVersionError
from ...semver import SemVer
from ..main import echo_error, echo_info, pass_context, scheme_option, Context


def _describe_chunk(chunk: Chunk) -> str:
    return " ".join(
        f"digits({unit.value})" if isinstance(unit, Digits) else f"text({unit.value!r})"
        for unit in chunk
    )


def _echo_chunks(label: str, chunks: tuple[Chunk, ...]) -> None:
    if not chunks:
        echo_info(f"{label}: (none)")
        return
    echo_info(f"{label}:")
    for chunk in chunks:
        echo_info(f"  {_describe_chunk(chunk)}")


@click.command()
@click.argument("version")
@scheme_option
@pass_context
def parse(ctx: Context, version: str, scheme: Optional[str]) -> None:
    """Parse VERSION and print its structure.

    \b
    Examples:
        pkgversions parse 1.2.3-rc.1+build.5
        pkgversions parse -s generic 2:1.4.7rc1-3
    """
    scheme = ctx.resolve_scheme(scheme)

    try:
        parsed = parse_with_scheme(version, scheme)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if isinstance(parsed, SemVer):
        echo_info("Type: semver")
        echo_info(f"Core: {parsed.base_version}")
        _echo_chunks("Pre-release", parsed.prerel)
        _echo_chunks("Build metadata", parsed.meta)
    else:
        echo_info("Type: generic")
        echo_info(f"Epoch: {parsed.epoch if parsed.epoch is not None else '(none)'}")
        _echo_chunks("Chunks", parsed.chunks)
        _echo_chunks("Release", parsed.release)

    if ctx.verbose:
        echo_info(f"Rendered: {parsed}")
