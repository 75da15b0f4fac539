# SPDX-License-Identifier: MIT
"""Comparing and sorting version strings under a chosen scheme.

Schemes:
- ``semver``: every value must be a valid semantic version
- ``generic``: every value is parsed as a generic version
- ``auto``: semantic versions when every value is one, generic otherwise
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable, Union

from .parse import parse_semver, parse_version, is_valid_semver
from .semver import SemVer, compare_semver
from .version import Version, compare_versions

SCHEMES = ("auto", "semver", "generic")

Parsed = Union[SemVer, Version]
VersionLike = Union[str, SemVer, Version]


def parse_with_scheme(version: VersionLike, scheme: str = "auto") -> Parsed:
    """Parse a version string under ``scheme``; parsed values pass through.

    Raises:
        InvalidVersionError: If the string is not valid under the scheme
        ValueError: If the scheme is unknown
    """
    if scheme not in SCHEMES:
        raise ValueError(f"Unknown version scheme: {scheme!r} (expected one of {', '.join(SCHEMES)})")
    if isinstance(version, (SemVer, Version)):
        return version
    if scheme == "semver":
        return parse_semver(version)
    if scheme == "generic":
        return parse_version(version)
    if is_valid_semver(version):
        return parse_semver(version)
    return parse_version(version)


def resolve_scheme(values: Iterable[VersionLike], scheme: str) -> str:
    """Pin ``auto`` to a single scheme for a whole group of values.

    Returns ``semver`` only if every value is a SemVer or a valid semantic
    version string, ``generic`` otherwise. Other schemes pass through.
    """
    if scheme != "auto":
        return scheme
    for value in values:
        if isinstance(value, Version):
            return "generic"
        if isinstance(value, str) and not is_valid_semver(value):
            return "generic"
    return "semver"


def _comparator(parsed: Parsed) -> Callable[[Parsed, Parsed], int]:
    return compare_semver if isinstance(parsed, SemVer) else compare_versions


def compare(version1: VersionLike, version2: VersionLike, scheme: str = "auto") -> int:
    """Compare two versions.

    Args:
        version1: First version (string or parsed value)
        version2: Second version (string or parsed value)
        scheme: One of ``auto``, ``semver`` or ``generic``

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have equal precedence
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid
        TypeError: If a SemVer is compared with a generic Version

    Note:
        Under ``auto`` the scheme is chosen for this pair alone, so results
        for different pairs must not be chained: ``1.0.0-rc.1 < 1.0.0``
        as semvers, yet ``1.0.0-rc.1`` beats ``1.0.0-r_`` generically.
        Use ``sort_versions``, ``latest`` or an explicit scheme to order
        more than two values.

    Examples:
        >>> compare("1.0.0-alpha", "1.0.0")
        -1
        >>> compare("2:1.0", "1.0")
        1
    """
    scheme = resolve_scheme((version1, version2), scheme)
    v1 = parse_with_scheme(version1, scheme)
    v2 = parse_with_scheme(version2, scheme)

    if type(v1) is not type(v2):
        raise TypeError(
            f"Cannot compare {type(v1).__name__} with {type(v2).__name__}: {v1} vs {v2}"
        )
    return _comparator(v1)(v1, v2)


def version_key(scheme: str = "generic") -> Callable[[VersionLike], object]:
    """Return a sort key function for versions under ``scheme``.

    A sort key needs one ordering for every pair, so ``auto`` is rejected;
    use ``sort_versions`` to pick the scheme from the whole list.

    Raises:
        ValueError: If ``scheme`` is ``auto`` or unknown

    Examples:
        >>> sorted(["1.0.0", "1.0.0-alpha"], key=version_key("semver"))
        ['1.0.0-alpha', '1.0.0']
    """
    if scheme == "auto":
        raise ValueError("version_key() needs a fixed scheme; use sort_versions() to resolve 'auto'")
    if scheme not in SCHEMES:
        raise ValueError(f"Unknown version scheme: {scheme!r} (expected one of {', '.join(SCHEMES)})")
    return cmp_to_key(lambda a, b: compare(a, b, scheme))


def sort_versions(
    versions: Iterable[VersionLike], scheme: str = "auto", reverse: bool = False
) -> list[VersionLike]:
    """Sort versions from oldest to newest (newest first if ``reverse``)."""
    versions = list(versions)
    key = version_key(resolve_scheme(versions, scheme))
    return sorted(versions, key=key, reverse=reverse)


def latest(versions: Iterable[VersionLike], scheme: str = "auto") -> VersionLike:
    """Return the newest of ``versions``.

    Raises:
        ValueError: If ``versions`` is empty
    """
    versions = list(versions)
    if not versions:
        raise ValueError("latest() requires at least one version")
    return max(versions, key=version_key(resolve_scheme(versions, scheme)))
