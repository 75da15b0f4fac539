# SPDX-License-Identifier: MIT
"""Version units and chunks, the atoms of every version comparison.

A unit is a maximal run of digits or of non-digit characters. A chunk is the
ordered run of units found between two separators, so ``"rc1"`` becomes
``(Text("rc"), Digits(1))``.

Two length rules live here and must stay separate:

- Within a chunk the *shorter* run wins (``1`` > ``1rc1``), because extra
  units after an identical prefix are a qualifier such as ``rc1``.
- Across a list of chunks the *longer* list wins (``1.1.3`` > ``1.1``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union


class _Ordered:
    """Rich comparisons delegating to a ``_compare`` method."""

    __slots__ = ()

    def _compare(self, other):
        raise NotImplementedError

    def __lt__(self, other):
        result = self._compare(other)
        return result if result is NotImplemented else result < 0

    def __le__(self, other):
        result = self._compare(other)
        return result if result is NotImplemented else result <= 0

    def __gt__(self, other):
        result = self._compare(other)
        return result if result is NotImplemented else result > 0

    def __ge__(self, other):
        result = self._compare(other)
        return result if result is NotImplemented else result >= 0


@dataclass(frozen=True, slots=True)
class Digits(_Ordered):
    """A run of decimal digits."""

    value: int

    def __str__(self) -> str:
        return str(self.value)

    def _compare(self, other):
        if not isinstance(other, (Digits, Text)):
            return NotImplemented
        return compare_units(self, other)


@dataclass(frozen=True, slots=True)
class Text(_Ordered):
    """A run of non-digit characters."""

    value: str

    def __str__(self) -> str:
        return self.value

    def _compare(self, other):
        if not isinstance(other, (Digits, Text)):
            return NotImplemented
        return compare_units(self, other)


VersionUnit = Union[Digits, Text]
Chunk = tuple[VersionUnit, ...]


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_units(a: VersionUnit, b: VersionUnit) -> int:
    """Compare two units.

    Digits compare numerically and text compares lexicographically. When the
    kinds differ the digits are always greater.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if isinstance(a, Digits):
        if isinstance(b, Digits):
            return _cmp(a.value, b.value)
        return 1
    if isinstance(b, Digits):
        return -1
    return _cmp(a.value, b.value)


def units_equal(a: VersionUnit, b: VersionUnit) -> bool:
    """Return True if both units are the same kind with the same content."""
    return a == b


def compare_chunks(a: Sequence[VersionUnit], b: Sequence[VersionUnit]) -> int:
    """Compare two chunks unit by unit.

    The first differing unit decides. If one chunk runs out first it is the
    greater one: ``1`` > ``1rc1``.
    """
    for left, right in zip(a, b):
        result = compare_units(left, right)
        if result:
            return result
    if len(a) == len(b):
        return 0
    return 1 if len(a) < len(b) else -1


def compare_chunk_lists(
    a: Sequence[Sequence[VersionUnit]], b: Sequence[Sequence[VersionUnit]]
) -> int:
    """Compare two lists of chunks.

    The first differing chunk decides. If one list runs out first, the list
    with chunks remaining is the greater one: ``1.1.3.4`` > ``1.1``.
    """
    for left, right in zip(a, b):
        result = compare_chunks(left, right)
        if result:
            return result
    if len(a) == len(b):
        return 0
    return 1 if len(a) > len(b) else -1


def render_chunk(chunk: Sequence[VersionUnit]) -> str:
    """Render a chunk back to its textual form."""
    return "".join(str(unit) for unit in chunk)
