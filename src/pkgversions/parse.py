# SPDX-License-Identifier: MIT
"""Parsing version strings into SemVer and Version values.

Every unit, chunk and version handed to the comparison functions is built
here, so malformed input is rejected before anything is compared.
"""

from __future__ import annotations

import re
from typing import Any, Union

from .chunks import Chunk, Digits, Text, VersionUnit
from .semver import SemVer
from .version import Version

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)

# [EPOCH:]CHUNK(.CHUNK)*[-CHUNK([.-]CHUNK)*]
VERSION_PATTERN = re.compile(
    r"^(?:(?P<epoch>\d+):)?"
    r"(?P<chunks>[^.\-:\s]+(?:\.[^.\-:\s]+)*)"
    r"(?:-(?P<release>[^.\-:\s]+(?:[.\-][^.\-:\s]+)*))?$"
)

_UNIT_PATTERN = re.compile(r"(?P<digits>\d+)|(?P<text>\D+)")


class VersionError(Exception):
    """Base class for all pkgversions errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidVersionError(VersionError):
    """Raised when a string cannot be parsed as a version."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        super().__init__(message or f"Invalid version: {version}")


def _clean(version_string: Any) -> str:
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")
    return version_string


def parse_chunk(text: str) -> Chunk:
    """Split a chunk into maximal digit and non-digit runs.

    Examples:
        >>> parse_chunk("rc1")
        (Text(value='rc'), Digits(value=1))
    """
    if not text:
        raise InvalidVersionError(text, "Version chunk cannot be empty")

    units: list[VersionUnit] = []
    for match in _UNIT_PATTERN.finditer(text):
        digits = match.group("digits")
        units.append(Digits(int(digits)) if digits is not None else Text(match.group("text")))
    return tuple(units)


def _parse_chunks(text: str, separators: str) -> tuple[Chunk, ...]:
    return tuple(parse_chunk(part) for part in re.split(f"[{re.escape(separators)}]", text))


def parse_semver(version_string: str) -> SemVer:
    """Parse a semantic version string into a SemVer object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A SemVer object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> str(parse_semver("2.0.0-rc.1+build.456"))
        '2.0.0-rc.1+build.456'
    """
    version_string = _clean(version_string)

    match = SEMVER_PATTERN.match(version_string)
    if not match:
        raise InvalidVersionError(version_string, f"Invalid semantic version: {version_string}")

    prerelease = match.group("prerelease")
    build = match.group("buildmetadata")
    return SemVer(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerel=_parse_chunks(prerelease, ".") if prerelease else (),
        meta=_parse_chunks(build, ".") if build else (),
    )


def parse_version(version_string: str) -> Version:
    """Parse a generic version string into a Version object.

    Accepts an optional ``EPOCH:`` prefix, dot-separated chunks, and an
    optional release part after the first ``-`` whose chunks may be separated
    by ``.`` or ``-``.

    Raises:
        InvalidVersionError: If the string is empty or contains empty chunks

    Examples:
        >>> v = parse_version("2:1.4.7rc1-3")
        >>> v.epoch, len(v.chunks), len(v.release)
        (2, 3, 1)
    """
    version_string = _clean(version_string)

    match = VERSION_PATTERN.match(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    epoch = match.group("epoch")
    release = match.group("release")
    return Version(
        epoch=int(epoch) if epoch is not None else None,
        chunks=_parse_chunks(match.group("chunks"), "."),
        release=_parse_chunks(release, ".-") if release else (),
    )


def parse(version_string: str) -> Union[SemVer, Version]:
    """Parse as a SemVer when possible, falling back to a generic Version."""
    if is_valid_semver(version_string):
        return parse_semver(version_string)
    return parse_version(version_string)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.match(version_string.strip()) is not None


def is_valid_version(version_string: str) -> bool:
    """Check if a string can be parsed as a generic version."""
    if not isinstance(version_string, str):
        return False
    return VERSION_PATTERN.match(version_string.strip()) is not None
