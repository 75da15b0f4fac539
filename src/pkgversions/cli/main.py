# SPDX-License-Identifier: MIT
"""CLI entry point for the pkgversions command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from ..config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def checked_config(self) -> CLIConfig:
        """Load configuration, exiting with an error message if it is invalid."""
        try:
            return self.load_config()
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)

    def resolve_scheme(self, scheme: Optional[str]) -> str:
        """Return ``scheme`` if given on the command line, else the configured one."""
        if scheme is not None:
            return scheme
        return self.checked_config().scheme


pass_context = click.make_pass_decorator(Context, ensure=True)

scheme_option = click.option(
    "--scheme",
    "-s",
    type=click.Choice(["auto", "semver", "generic"]),
    default=None,
    help="Version scheme (defaults to [tool.pkgversions].scheme, then auto).",
)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="pkgversions")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory instead of the current one.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse, compare and sort version strings.

    Understands semantic versions (1.2.3-rc.1+build) and generic package
    versions (2:1.4.7rc1-3).

    \b
    Examples:
        pkgversions compare 1.0.0-alpha 1.0.0
        pkgversions sort 1.10 1.9 1.9rc1
        pkgversions latest 1:0.9 2.0
        pkgversions parse 2:1.4.7rc1-3
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import compare, sort, latest, parse

cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(latest.latest)
cli.add_command(parse.parse)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
