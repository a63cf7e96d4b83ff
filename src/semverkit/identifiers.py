# SPDX-License-Identifier: MIT
"""Validation of pre-release and build metadata identifiers.

Identifiers MUST comprise only ASCII alphanumerics and hyphen ``[0-9A-Za-z-]``
and MUST NOT be empty. Numeric pre-release identifiers MUST NOT include
leading zeroes; build metadata identifiers are exempt from that rule.
"""

from __future__ import annotations

import string
from collections.abc import Iterable
from enum import Enum
from typing import Optional

# Valid characters for pre-release and build metadata identifiers
VALID_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-")

_DIGITS = frozenset(string.digits)


class IdentifierKind(Enum):
    """Which version segment an identifier list belongs to."""

    PRE_RELEASE = "pre_release"
    BUILD_METADATA = "build_metadata"


def is_numeric_identifier(token: str) -> bool:
    """Return True if the token consists only of ASCII digits."""
    return bool(token) and all(char in _DIGITS for char in token)


def is_valid_identifier(token: str, kind: IdentifierKind) -> bool:
    """Check a single identifier against the SemVer character rules.

    Args:
        token: The identifier to check
        kind: Segment the identifier belongs to

    Returns:
        True if the identifier is allowed in the given segment

    Examples:
        >>> is_valid_identifier("rc", IdentifierKind.PRE_RELEASE)
        True
        >>> is_valid_identifier("01", IdentifierKind.PRE_RELEASE)
        False
        >>> is_valid_identifier("01", IdentifierKind.BUILD_METADATA)
        True
    """
    if not isinstance(token, str) or not token:
        return False
    if not all(char in VALID_IDENTIFIER_CHARS for char in token):
        return False
    if kind is IdentifierKind.PRE_RELEASE and is_numeric_identifier(token):
        # "0" is fine, "00" and "01" are not
        return len(token) == 1 or token[0] != "0"
    return True


def validate_identifiers(
    identifiers: Optional[Iterable[str]], kind: IdentifierKind
) -> bool:
    """Validate a whole identifier list.

    ``None`` and an empty list are both valid. Any invalid token invalidates
    the list as a whole.

    Args:
        identifiers: Identifier tokens, or None when the segment is absent
        kind: Segment the identifiers belong to

    Returns:
        True if every identifier is valid for the segment
    """
    if identifiers is None:
        return True
    # A bare string would otherwise be iterated character by character
    if isinstance(identifiers, (str, bytes)) or not isinstance(identifiers, Iterable):
        return False
    return all(is_valid_identifier(token, kind) for token in identifiers)
