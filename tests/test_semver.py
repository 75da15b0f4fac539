# SPDX-License-Identifier: MIT
"""Unit tests for semantic version ordering, equality and combination."""

import pytest

from pkgversions import (
    SemVer,
    SEMVER_IDENTITY,
    Digits,
    Text,
    compare_semver,
    combine,
    combine_all,
    parse_semver,
)


class TestCompareSemver:
    """Tests for compare_semver function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_semver(parse_semver("1.2.3"), parse_semver("1.2.3")) == 0

    @pytest.mark.parametrize(
        "lower,higher",
        [
            ("1.0.0", "2.0.0"),
            ("1.0.0", "1.1.0"),
            ("1.0.0", "1.0.1"),
            ("1.9.0", "1.10.0"),
            ("1.99.99", "2.0.0"),
        ],
    )
    def test_numeric_core(self, lower, higher):
        """Test comparison of major, minor and patch numbers."""
        assert compare_semver(parse_semver(lower), parse_semver(higher)) == -1
        assert compare_semver(parse_semver(higher), parse_semver(lower)) == 1

    def test_release_beats_prerelease(self):
        """Test that a release outranks any pre-release of the same core."""
        assert compare_semver(parse_semver("1.0.0"), parse_semver("1.0.0-rc.99")) == 1
        assert compare_semver(parse_semver("1.0.0-alpha"), parse_semver("1.0.0")) == -1

    def test_prerelease_of_higher_core_wins(self):
        """Test that the numeric core is compared before the pre-release."""
        assert compare_semver(parse_semver("1.0.1-alpha"), parse_semver("1.0.0")) == 1

    def test_precedence_chain(self):
        """Test the precedence example from semver.org."""
        versions = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for i in range(len(versions) - 1):
            assert (
                compare_semver(parse_semver(versions[i]), parse_semver(versions[i + 1])) == -1
            ), f"{versions[i]} should be < {versions[i + 1]}"

    def test_fewer_prerelease_fields_is_lower(self):
        """Test that 1.0.0-alpha < 1.0.0-alpha.1."""
        short = SemVer(1, 0, 0, prerel=((Text("alpha"),),))
        long = SemVer(1, 0, 0, prerel=((Text("alpha"),), (Digits(1),)))
        assert compare_semver(short, long) == -1
        assert compare_semver(long, short) == 1

    def test_metadata_ignored(self):
        """Test that build metadata never affects precedence."""
        assert compare_semver(parse_semver("1.0.0+build1"), parse_semver("1.0.0+build2")) == 0
        assert compare_semver(parse_semver("1.0.0-rc.1+x"), parse_semver("1.0.0-rc.1")) == 0

    def test_operators(self):
        """Test Python comparison operators."""
        assert parse_semver("1.0.0-alpha") < parse_semver("1.0.0")
        assert parse_semver("2.0.0") > parse_semver("1.9.9")
        assert parse_semver("1.0.0+a") <= parse_semver("1.0.0+b")
        assert max(parse_semver("0.9.0"), parse_semver("0.10.0")) == parse_semver("0.10.0")


class TestSemverEquality:
    """Tests for SemVer equality and hashing."""

    def test_metadata_ignored_in_equality(self):
        """Test that versions differing only in metadata are equal."""
        assert parse_semver("1.0.0+abc") == parse_semver("1.0.0+def")
        assert hash(parse_semver("1.0.0+abc")) == hash(parse_semver("1.0.0"))

    def test_prerelease_affects_equality(self):
        """Test that pre-release identifiers are part of equality."""
        assert parse_semver("1.0.0-rc.1") != parse_semver("1.0.0-rc.2")
        assert parse_semver("1.0.0-rc.1") != parse_semver("1.0.0")

    def test_not_equal_to_string(self):
        """Test that a SemVer is never equal to its string form."""
        assert parse_semver("1.0.0") != "1.0.0"


class TestSemverProperties:
    """Tests for SemVer helpers."""

    def test_str(self):
        """Test rendering back to text."""
        assert str(parse_semver("1.2.3-rc.1+build.456")) == "1.2.3-rc.1+build.456"
        assert str(SemVer(1, 2, 3)) == "1.2.3"

    def test_str_is_canonical(self):
        """Test that metadata digits render without leading zeros."""
        v = parse_semver("1.0.0-rc.1+001.build07")
        assert str(v) == "1.0.0-rc.1+1.build7"
        reparsed = parse_semver(str(v))
        assert reparsed == v
        assert reparsed.meta == v.meta

    def test_is_prerelease(self):
        """Test is_prerelease property."""
        assert parse_semver("1.0.0-beta").is_prerelease is True
        assert parse_semver("1.0.0+build").is_prerelease is False

    def test_base_version(self):
        """Test base_version property."""
        assert parse_semver("3.2.1-rc.1+exp").base_version == "3.2.1"


class TestCombine:
    """Tests for combine and combine_all."""

    def test_identity(self):
        """Test that the identity leaves a version unchanged on either side."""
        v = parse_semver("1.2.3-rc.1+build.7")
        assert combine(SEMVER_IDENTITY, v) == v
        assert combine(v, SEMVER_IDENTITY) == v
        assert combine(SEMVER_IDENTITY, v).meta == v.meta

    def test_componentwise_addition(self):
        """Test that numbers add and identifiers concatenate."""
        a = parse_semver("1.2.3-alpha+x")
        b = parse_semver("0.1.2-1+y")
        result = combine(a, b)
        assert (result.major, result.minor, result.patch) == (1, 3, 5)
        assert result.prerel == ((Text("alpha"),), (Digits(1),))
        assert result.meta == ((Text("x"),), (Text("y"),))

    def test_associative(self):
        """Test that combine is associative."""
        a, b, c = parse_semver("1.0.0-a"), parse_semver("0.2.0-b"), parse_semver("0.0.3+c")
        assert combine(combine(a, b), c) == combine(a, combine(b, c))

    def test_combine_all(self):
        """Test folding a sequence of versions."""
        versions = [parse_semver("1.0.0"), parse_semver("0.1.0"), parse_semver("0.0.1")]
        assert combine_all(versions) == SemVer(1, 1, 1)
        assert combine_all([]) == SEMVER_IDENTITY
