# SPDX-License-Identifier: MIT
"""Semantic versions.

Legal semvers are of the form MAJOR.MINOR.PATCH-PREREL+META, for example
``1.2.3-r1+commithash``. Pre-release versions have lower precedence than the
matching release, and build metadata never affects precedence or equality.
See https://semver.org.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable

from .chunks import Chunk, _Ordered, compare_chunk_lists, render_chunk


@dataclass(frozen=True, slots=True)
class SemVer(_Ordered):
    """A parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerel: Pre-release chunks, one per dot-separated identifier
        meta: Build metadata chunks, ignored by equality, hashing and ordering
    """

    major: int
    minor: int
    patch: int
    prerel: tuple[Chunk, ...] = ()
    meta: tuple[Chunk, ...] = field(default=(), compare=False)

    def __str__(self) -> str:
        """Return the canonical string representation of the version.

        Digit runs lose leading zeros, so ``1.0.0+001`` renders as ``1.0.0+1``.
        """
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerel:
            version += "-" + ".".join(render_chunk(c) for c in self.prerel)
        if self.meta:
            version += "+" + ".".join(render_chunk(c) for c in self.meta)
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerel)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def _compare(self, other):
        if not isinstance(other, SemVer):
            return NotImplemented
        return compare_semver(self, other)


SEMVER_IDENTITY = SemVer(0, 0, 0)


def compare_semver(a: SemVer, b: SemVer) -> int:
    """Compare two semantic versions by precedence.

    Returns:
        -1 if a < b
        0 if a and b have equal precedence
        1 if a > b

    Examples:
        1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-beta < 1.0.0
    """
    core1 = (a.major, a.minor, a.patch)
    core2 = (b.major, b.minor, b.patch)
    if core1 != core2:
        return -1 if core1 < core2 else 1

    # No pre-release > any pre-release
    if not a.prerel and not b.prerel:
        return 0
    if not a.prerel:
        return 1
    if not b.prerel:
        return -1

    # Fewer identifiers is lower precedence once the shared ones are equal
    return compare_chunk_lists(a.prerel, b.prerel)


def combine(a: SemVer, b: SemVer) -> SemVer:
    """Add two versions component-wise, concatenating prerel and meta.

    ``SEMVER_IDENTITY`` is the identity: ``combine(SEMVER_IDENTITY, v) == v``.
    """
    return SemVer(
        major=a.major + b.major,
        minor=a.minor + b.minor,
        patch=a.patch + b.patch,
        prerel=a.prerel + b.prerel,
        meta=a.meta + b.meta,
    )


def combine_all(versions: Iterable[SemVer]) -> SemVer:
    """Fold ``combine`` over ``versions``, starting from the identity."""
    return reduce(combine, versions, SEMVER_IDENTITY)
