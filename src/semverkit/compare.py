# SPDX-License-Identifier: MIT
"""Version comparison helpers accepting strings or Version objects.

Release ordering: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-beta < 1.0.0-rc.1 < 1.0.0
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from .identifiers import is_numeric_identifier
from .precedence import ComparisonMode, compare_precedence, natural_key, numeric_key
from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _as_version(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(
    version1: VersionLike,
    version2: VersionLike,
    mode: ComparisonMode = ComparisonMode.STRICT,
) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        mode: Ordering used for alphanumeric pre-release identifiers

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0-rc10", "1.0.0-rc9")
        -1
        >>> compare_versions("1.0.0-rc10", "1.0.0-rc9", ComparisonMode.NATURAL)
        1
    """
    return compare_precedence(_as_version(version1), _as_version(version2), mode)


def _identifier_key(token: str, mode: ComparisonMode) -> tuple:
    # Numeric identifiers sort before alphanumeric ones
    if is_numeric_identifier(token):
        return (0, numeric_key(token))
    if mode is ComparisonMode.NATURAL:
        return (1, natural_key(token), token)
    return (1, token)


def version_key(version: VersionLike, mode: ComparisonMode = ComparisonMode.STRICT) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object
        mode: Ordering used for alphanumeric pre-release identifiers

    Returns:
        A tuple that orders exactly like compare_versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _as_version(version)

    # No pre-release becomes (1,) to sort after every pre-release; a shorter
    # identifier tuple sorts first when it is a prefix of a longer one.
    if v.pre_release is None:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, tuple(_identifier_key(part, mode) for part in v.pre_release))

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(
    versions: Iterable[VersionLike],
    mode: ComparisonMode = ComparisonMode.STRICT,
    reverse: bool = False,
) -> list[Version]:
    """Sort versions by precedence, parsing strings as needed.

    Versions of equal precedence keep their input order.

    Raises:
        InvalidVersionError: If any version string is invalid
    """
    parsed = [_as_version(version) for version in versions]
    return sorted(parsed, key=lambda v: version_key(v, mode), reverse=reverse)
