# SPDX-License-Identifier: MIT
"""Generic versions, as used by distribution packages.

A generic version is an optional epoch, the main dot-separated chunks, and the
release chunks that follow a revision separator::

    2:1.4.7rc1-3
    ^ ^^^^^^^^ ^
    | chunks   release
    epoch
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .chunks import Chunk, _Ordered, compare_chunk_lists, render_chunk


@dataclass(frozen=True, slots=True)
class Version(_Ordered):
    """A parsed generic version.

    Equality is structural, so ``Version(None, c, r) != Version(0, c, r)``
    even though the two have equal precedence. Use ``compare_versions`` when
    precedence is what matters.

    Attributes:
        epoch: Optional epoch; ``None`` orders like ``0`` but renders as nothing
        chunks: Main version chunks
        release: Chunks after the release separator (e.g. a package revision)
    """

    epoch: Optional[int] = None
    chunks: tuple[Chunk, ...] = ()
    release: tuple[Chunk, ...] = ()

    def __str__(self) -> str:
        """Return the canonical form, joining release chunks with dots.

        Separators and leading zeros are normalised, so ``1.0-1-2`` renders
        as ``1.0-1.2``; parsing the result gives an equal Version.
        """
        version = ".".join(render_chunk(c) for c in self.chunks)
        if self.epoch is not None:
            version = f"{self.epoch}:{version}"
        if self.release:
            version += "-" + ".".join(render_chunk(c) for c in self.release)
        return version

    def without_epoch(self) -> Version:
        """Return a copy of this version with the epoch removed."""
        return Version(None, self.chunks, self.release)

    def _compare(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other)


def compare_versions(v1: Version, v2: Version) -> int:
    """Compare two generic versions by precedence.

    Epochs are compared first, with a missing epoch counting as 0, so a
    version with a positive epoch beats any version without one. Then the
    main chunks are compared, then the release chunks. At both levels a
    list with chunks left over beats a list that ran out (``1.2.1`` >
    ``1.2``), while inside a single chunk the shorter one wins
    (``1.2`` > ``1.2rc1``).

    Returns:
        -1 if v1 < v2
        0 if v1 and v2 have equal precedence
        1 if v1 > v2

    Examples:
        1.2.3 == 1.2.3, 1.2.3 < 1.2.4, 2:1.0 > 1.0
    """
    epoch1 = v1.epoch or 0
    epoch2 = v2.epoch or 0
    if epoch1 != epoch2:
        return -1 if epoch1 < epoch2 else 1

    return compare_chunk_lists(v1.chunks, v2.chunks) or compare_chunk_lists(
        v1.release, v2.release
    )
