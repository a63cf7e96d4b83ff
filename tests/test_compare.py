# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from semverkit import (
    ComparisonMode,
    InvalidVersionError,
    Version,
    compare_versions,
    sort_versions,
    version_key,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_alpha_vs_beta(self):
        """Test that alpha < beta."""
        assert compare_versions("1.0.0-alpha", "1.0.0-beta") == -1
        assert compare_versions("1.0.0-beta", "1.0.0-alpha") == 1

    def test_numbered_prerelease(self):
        """Test comparison of numbered pre-releases."""
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.2") == -1
        assert compare_versions("1.0.0-alpha.2", "1.0.0-alpha.1") == 1
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.1") == 0

    def test_numeric_identifiers_compare_numerically(self):
        """Test that 11 > 2 for numeric identifiers."""
        assert compare_versions("1.0.0-beta.11", "1.0.0-beta.2") == 1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+build.1", "1.0.0+build.2") == 0
        assert compare_versions("1.0.0-alpha+1", "1.0.0-alpha+exp.sha.5114f85") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        assert compare_versions(Version(1, 0, 0), Version(2, 0, 0)) == -1
        assert compare_versions(Version(1, 0, 0), "1.0.0") == 0

    def test_natural_mode(self):
        """Test that natural mode orders embedded numbers numerically."""
        assert compare_versions("1.0.0-rc9", "1.0.0-rc10") == 1
        assert compare_versions("1.0.0-rc9", "1.0.0-rc10", ComparisonMode.NATURAL) == -1

    def test_invalid_version_string(self):
        """Test that invalid version strings raise."""
        with pytest.raises(InvalidVersionError):
            compare_versions("1.2.3.4", "1.0.0")
        with pytest.raises(InvalidVersionError):
            compare_versions("1.0.0", "not-a-version")


class TestVersionKey:
    """Tests for version_key function."""

    def test_sort_order(self):
        """Test sorting with version_key."""
        versions = [
            "1.0.0",
            "1.0.0-rc.1",
            "1.0.0-beta.11",
            "1.0.0-beta.2",
            "1.0.0-beta",
            "1.0.0-alpha.beta",
            "1.0.0-alpha.1",
            "1.0.0-alpha",
        ]
        assert sorted(versions, key=version_key) == list(reversed(versions))

    def test_mixed_majors(self):
        versions = ["2.0.0", "1.0.0", "1.0.0-alpha", "0.1.0"]
        assert sorted(versions, key=version_key) == ["0.1.0", "1.0.0-alpha", "1.0.0", "2.0.0"]

    def test_build_metadata_same_key(self):
        assert version_key("1.0.0+a") == version_key("1.0.0+b")

    def test_natural_mode_key(self):
        versions = ["1.0.0-rc10", "1.0.0-rc9", "1.0.0-rc1"]
        assert sorted(versions, key=version_key) == ["1.0.0-rc1", "1.0.0-rc10", "1.0.0-rc9"]
        assert sorted(versions, key=lambda v: version_key(v, ComparisonMode.NATURAL)) == [
            "1.0.0-rc1",
            "1.0.0-rc9",
            "1.0.0-rc10",
        ]


class TestSortVersions:
    """Tests for sort_versions function."""

    def test_sorts_strings_and_versions(self):
        result = sort_versions(["1.2.3", Version(0, 9, 99), "1.0.0-rc.1"])
        assert [str(v) for v in result] == ["0.9.99", "1.0.0-rc.1", "1.2.3"]

    def test_reverse(self):
        result = sort_versions(["1.0.0", "2.0.0", "1.5.0"], reverse=True)
        assert [str(v) for v in result] == ["2.0.0", "1.5.0", "1.0.0"]

    def test_stable_for_equal_precedence(self):
        result = sort_versions(["1.0.0+b", "1.0.0+a"])
        assert [str(v) for v in result] == ["1.0.0+b", "1.0.0+a"]

    def test_invalid_entry(self):
        with pytest.raises(InvalidVersionError):
            sort_versions(["1.0.0", "1..0"])


class TestLongNumericIdentifiers:
    """Tests for sort keys of very long numeric identifiers."""

    def test_version_key(self):
        huge = Version(1, 0, 0, ["1" * 5000])
        small = Version(1, 0, 0, ["2"])
        assert version_key(small) < version_key(huge)
        assert version_key(small, ComparisonMode.NATURAL) < version_key(huge, ComparisonMode.NATURAL)

    def test_sort_versions(self):
        huge = Version(1, 0, 0, ["1" * 5000])
        result = sort_versions([huge, "1.0.0-2", "1.0.0"])
        assert [v.pre_release for v in result] == [("2",), ("1" * 5000,), None]
