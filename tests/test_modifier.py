# SPDX-License-Identifier: MIT
"""Unit tests for version derivations and diffs."""

import pytest

from semver_ranges import Semver, VersionDiff


class TestNextVersion:
    """Tests for next_major, next_minor and next_patch."""

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("1.0.0", Semver(2, 0, 0)),
            ("1.1.0-1", Semver(2, 0, 0)),
            ("1.0.1-1", Semver(2, 0, 0)),
            ("1.0.0-1", Semver(1, 0, 0)),
        ],
    )
    def test_next_major(self, version, expected):
        """Test that a major pre-release bumps to its release."""
        assert Semver.of(version).next_major() == expected

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("1.0.0", Semver(1, 1, 0)),
            ("1.0.1-1", Semver(1, 1, 0)),
            ("1.0.0-1", Semver(1, 0, 0)),
        ],
    )
    def test_next_minor(self, version, expected):
        """Test that a minor pre-release bumps to its release."""
        assert Semver.of(version).next_minor() == expected

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("1.0.0", Semver(1, 0, 1)),
            ("1.0.0-1", Semver(1, 0, 0)),
        ],
    )
    def test_next_patch(self, version, expected):
        """Test that a pre-release bumps to its own release."""
        assert Semver.of(version).next_patch() == expected

    def test_next_keeps_build(self):
        """Test that next_* keep build metadata."""
        v = Semver.of("1.2.3-rc.1+b5")
        assert v.next_major() == Semver.of("2.0.0+b5")
        assert v.next_minor() == Semver.of("1.3.0+b5")
        assert v.next_patch() == Semver.of("1.2.3+b5")


class TestIncrement:
    """Tests for with_inc_major, with_inc_minor and with_inc_patch."""

    def test_default_increment(self):
        """Test incrementing by one."""
        v = Semver.of("1.0.0")
        assert v.with_inc_major() == Semver(2, 0, 0)
        assert v.with_inc_minor() == Semver(1, 1, 0)
        assert v.with_inc_patch() == Semver(1, 0, 1)

    def test_specified_increment(self):
        """Test incrementing by a given number."""
        v = Semver.of("1.0.0")
        assert v.with_inc_major(2) == Semver(3, 0, 0)
        assert v.with_inc_minor(2) == Semver(1, 2, 0)
        assert v.with_inc_patch(2) == Semver(1, 0, 2)

    def test_increment_keeps_other_fields(self):
        """Test that increments keep pre-release and build unchanged."""
        v = Semver.of("1.2.3-alpha+b1")
        assert v.with_inc_major() == Semver.of("2.2.3-alpha+b1")
        assert v.with_inc_minor(3) == Semver.of("1.5.3-alpha+b1")
        assert v.with_inc_patch() == Semver.of("1.2.4-alpha+b1")

    def test_receiver_unchanged(self):
        """Test that derivations return new instances."""
        v = Semver.of("1.0.0")
        v.with_inc_major()
        assert v == Semver(1, 0, 0)


class TestReplaceIdentifiers:
    """Tests for the with_* and with_cleared_* derivations."""

    @pytest.mark.parametrize("pre_release", ["alpha.beta", ["alpha", "beta"]])
    def test_with_pre_release(self, pre_release):
        """Test replacing pre-release from a string or a list."""
        v = Semver.of("1.0.0").with_pre_release(pre_release)
        assert v == Semver(1, 0, 0, pre_release=["alpha", "beta"])

    @pytest.mark.parametrize("build", ["alpha.beta", ["alpha", "beta"]])
    def test_with_build(self, build):
        """Test replacing build from a string or a list."""
        v = Semver.of("1.0.0").with_build(build)
        assert v == Semver(1, 0, 0, build=["alpha", "beta"])

    def test_with_cleared_pre_release(self):
        """Test clearing pre-release."""
        assert Semver.of("1.0.0-alpha.beta").with_cleared_pre_release() == Semver(1, 0, 0)

    def test_with_cleared_build(self):
        """Test clearing build."""
        assert Semver.of("1.0.0+alpha.beta").with_cleared_build() == Semver(1, 0, 0)

    def test_with_cleared_pre_release_and_build(self):
        """Test clearing both."""
        v = Semver.of("1.0.0-alpha.beta+alpha.beta")
        assert v.with_cleared_pre_release_and_build() == Semver(1, 0, 0)


BASE = Semver(1, 2, 3, pre_release=["PreRelease"], build=["Build"])


class TestDiff:
    """Tests for diff and is_api_compatible."""

    @pytest.mark.parametrize(
        "other,expected",
        [
            (Semver(0, 2, 3, ["PreRelease"], ["Build"]), VersionDiff.MAJOR),
            (Semver(1, 0, 3, ["PreRelease"], ["Build"]), VersionDiff.MINOR),
            (Semver(1, 2, 0, ["PreRelease"], ["Build"]), VersionDiff.PATCH),
            (Semver(1, 2, 3, [], ["Build"]), VersionDiff.PRE_RELEASE),
            (Semver(1, 2, 3, ["PreRelease"], []), VersionDiff.BUILD),
            (Semver(1, 2, 3, ["PreRelease"], ["Build"]), VersionDiff.NONE),
        ],
    )
    def test_diff(self, other, expected):
        """Test that the most significant difference is reported."""
        assert BASE.diff(other) is expected

    def test_diff_string(self):
        """Test diff against a version string."""
        assert BASE.diff("2.2.3") is VersionDiff.MAJOR

    def test_severity_order(self):
        """Test that diffs are ranked by severity."""
        assert (
            VersionDiff.MAJOR
            > VersionDiff.MINOR
            > VersionDiff.PATCH
            > VersionDiff.PRE_RELEASE
            > VersionDiff.BUILD
            > VersionDiff.NONE
        )

    @pytest.mark.parametrize(
        "other,expected",
        [
            (Semver(0, 2, 3, ["PreRelease"], ["Build"]), False),
            (Semver(1, 0, 3, ["PreRelease"], ["Build"]), True),
            (Semver(1, 2, 0, ["PreRelease"], ["Build"]), True),
            (Semver(1, 2, 3, [], ["Build"]), True),
            (Semver(1, 2, 3, ["PreRelease"], []), True),
            ("2.2.3", False),
        ],
    )
    def test_is_api_compatible(self, other, expected):
        """Test that only a major difference breaks compatibility."""
        assert BASE.is_api_compatible(other) is expected
