# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0 rule 11.

Precedence is decided by major, minor and patch, then by the pre-release
identifiers. A version without pre-release identifiers has higher precedence
than one with them (1.0.0-alpha < 1.0.0). Build metadata is ignored.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

from .identifiers import is_numeric_identifier

if TYPE_CHECKING:
    from .semver import Version

_DIGIT_RUN = re.compile(r"(\d+)")


class ComparisonMode(Enum):
    """How alphanumeric identifiers are ordered against each other.

    STRICT compares them lexically in ASCII sort order as SemVer requires,
    so "rc10" < "rc9". NATURAL compares embedded digit runs numerically, so
    "rc9" < "rc10".
    """

    STRICT = "strict"
    NATURAL = "natural"

    @classmethod
    def from_name(cls, name: str) -> "ComparisonMode":
        """Look up a mode by its (case-insensitive) name.

        Raises:
            ValueError: If the name does not match a mode
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown comparison mode '{name}' (expected one of: {choices})") from None


def _sign(value1, value2) -> int:
    if value1 == value2:
        return 0
    return -1 if value1 < value2 else 1


def numeric_key(digits: str) -> tuple[int, str]:
    """Order a string of ASCII digits by its numeric value.

    Comparing length then text avoids int(), which refuses very long
    strings. Leading zeros are ignored.

    >>> numeric_key("10") > numeric_key("9")
    True
    """
    significant = digits.lstrip("0")
    return (len(significant), significant)


def natural_key(token: str) -> tuple:
    """Split a token into alternating text and numeric parts.

    re.split with a capture group always yields text at even positions and
    digit runs at odd positions, so two keys never compare str against a
    numeric part.

    >>> natural_key("rc10")
    ('rc', (2, '10'), '')
    """
    parts = _DIGIT_RUN.split(token)
    return tuple(numeric_key(part) if index % 2 else part for index, part in enumerate(parts))


def compare_identifiers(
    left: str, right: str, mode: ComparisonMode = ComparisonMode.STRICT
) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1, 0 or 1

    Numeric identifiers compare numerically and always have lower precedence
    than alphanumeric ones.
    """
    left_numeric = is_numeric_identifier(left)
    right_numeric = is_numeric_identifier(right)

    if left_numeric and right_numeric:
        return _sign(numeric_key(left), numeric_key(right))
    if left_numeric:
        return -1
    if right_numeric:
        return 1

    if mode is ComparisonMode.NATURAL:
        result = _sign(natural_key(left), natural_key(right))
        if result:
            return result
        # "rc01" and "rc1" tie naturally; fall back to ASCII to stay total

    return _sign(left, right)


def compare_identifier_lists(
    left: Sequence[str],
    right: Sequence[str],
    mode: ComparisonMode = ComparisonMode.STRICT,
) -> int:
    """Compare two pre-release identifier lists position by position.

    The first differing identifier decides. If all shared positions are
    equal, the longer list has higher precedence.
    """
    for left_token, right_token in zip(left, right):
        result = compare_identifiers(left_token, right_token, mode)
        if result:
            return result
    return _sign(len(left), len(right))


def compare_precedence(
    version1: "Version",
    version2: "Version",
    mode: ComparisonMode = ComparisonMode.STRICT,
) -> int:
    """Compare the precedence of two versions.

    Args:
        version1: First version
        version2: Second version
        mode: Ordering used for alphanumeric pre-release identifiers

    Returns:
        -1 if version1 < version2
        0 if both have the same precedence
        1 if version1 > version2
    """
    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(version1, attr), getattr(version2, attr))
        if result:
            return result

    pre1 = version1.pre_release
    pre2 = version2.pre_release
    if pre1 is None and pre2 is None:
        return 0
    if pre1 is None:
        return 1  # Release > pre-release
    if pre2 is None:
        return -1  # Pre-release < release

    return compare_identifier_lists(pre1, pre2, mode)


def less_than(
    version1: "Version",
    version2: "Version",
    mode: ComparisonMode = ComparisonMode.STRICT,
) -> bool:
    """Return True if version1 has strictly lower precedence than version2."""
    return compare_precedence(version1, version2, mode) < 0
