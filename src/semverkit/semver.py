# SPDX-License-Identifier: MIT
"""Semantic version value object and string parsing.

Supports MAJOR[.MINOR[.PATCH]] with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +20240101

Missing minor and patch components default to 0, so "1-alpha" reads as
1.0.0-alpha. The empty string reads as 0.0.0.
"""

from __future__ import annotations

import logging
import math
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from .identifiers import IdentifierKind, validate_identifiers
from .precedence import ComparisonMode, compare_precedence

logger = logging.getLogger(__name__)

# Longest prefix made of digits and dots, e.g. "1.2.3" in "1.2.3-rc.1+abc"
_NUMERIC_CORE = re.compile(r"[0-9.]*")

_DELIMITER = re.compile(r"[-+]")

_MAX_CORE_COMPONENTS = 3

_LOG10_2 = math.log10(2)

Identifiers = Optional[tuple[str, ...]]


class InvalidVersionError(Exception):
    """Raised when a version does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


def _normalize_identifiers(identifiers: Any) -> Any:
    """Turn a list of identifiers into a tuple, leaving anything odd as is."""
    if identifiers is None or isinstance(identifiers, (str, bytes)):
        return identifiers
    try:
        return tuple(identifiers)
    except TypeError:
        return identifiers


def _fits_decimal_string(value: int) -> bool:
    """Return True if str(value) stays within the interpreter's digit limit."""
    limit = sys.get_int_max_str_digits() if hasattr(sys, "get_int_max_str_digits") else 0
    # value < 2**bits, so it has at most ceil(bits * log10(2)) digits
    return not limit or value.bit_length() * _LOG10_2 < limit


def _validation_error(
    major: Any, minor: Any, patch: Any, pre_release: Any, build_metadata: Any
) -> Optional[str]:
    """Return why the fields do not form a valid version, or None if they do."""
    for name, value in (("major", major), ("minor", minor), ("patch", patch)):
        if not isinstance(value, int) or isinstance(value, bool):
            return f"{name} must be an integer, got {type(value).__name__}"
        if value < 0:
            return f"{name} must be non-negative"
        if not _fits_decimal_string(value):
            return f"{name} has too many digits"
    if not validate_identifiers(pre_release, IdentifierKind.PRE_RELEASE):
        return f"invalid pre-release identifiers {pre_release!r}"
    if not validate_identifiers(build_metadata, IdentifierKind.BUILD_METADATA):
        return f"invalid build metadata identifiers {build_metadata!r}"
    return None


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """An immutable semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre_release: Pre-release identifiers (e.g. ("alpha", "1")), None when absent
        build_metadata: Build metadata identifiers (e.g. ("build", "123")), None when absent

    ``None`` and an empty tuple are kept apart for both identifier fields even
    though they render identically.

    Comparison operators compare *precedence*: build metadata is ignored, so
    ``Version(1, 0, 0, None, ["a"]) == Version(1, 0, 0, None, ["b"])``. Use
    :meth:`identical` to compare every field.

    Constructing a Version directly raises InvalidVersionError on bad input.
    :meth:`create`, :meth:`parse` and :func:`semverkit.models.decode_version`
    return None instead.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    pre_release: Identifiers = None
    build_metadata: Identifiers = None

    def __post_init__(self) -> None:
        pre_release = _normalize_identifiers(self.pre_release)
        build_metadata = _normalize_identifiers(self.build_metadata)
        error = _validation_error(self.major, self.minor, self.patch, pre_release, build_metadata)
        if error is not None:
            try:
                described = _describe(self.major, self.minor, self.patch)
            except ValueError:
                described = "<version with oversized numbers>"
            raise InvalidVersionError(described, error)
        object.__setattr__(self, "pre_release", pre_release)
        object.__setattr__(self, "build_metadata", build_metadata)

    @classmethod
    def create(
        cls,
        major: int,
        minor: int,
        patch: int,
        pre_release: Optional[Iterable[str]] = None,
        build_metadata: Optional[Iterable[str]] = None,
    ) -> Optional["Version"]:
        """Build a version from its fields, or return None if they are invalid.

        Examples:
            >>> Version.create(1, 0, 0, ["rc", "1"])
            Version(major=1, minor=0, patch=0, pre_release=('rc', '1'), build_metadata=None)
            >>> Version.create(1, 0, 0, ["01"]) is None
            True
        """
        pre_release = _normalize_identifiers(pre_release)
        build_metadata = _normalize_identifiers(build_metadata)
        error = _validation_error(major, minor, patch, pre_release, build_metadata)
        if error is not None:
            logger.debug("Rejected version fields: %s", error)
            return None
        return cls(major, minor, patch, pre_release, build_metadata)

    @classmethod
    def parse(cls, text: str) -> Optional["Version"]:
        """Parse a version string, or return None if it is not a version.

        Examples:
            >>> str(Version.parse("1.2-beta+exp.sha.5114f85"))
            '1.2.0-beta+exp.sha.5114f85'
            >>> Version.parse("1.2.3.4") is None
            True
        """
        if not isinstance(text, str):
            logger.debug("Rejected version %r: not a string", text)
            return None

        if not text:
            return cls()

        core = _NUMERIC_CORE.match(text).group()

        # Re-joining the parsed numbers must reproduce the core exactly. This
        # rejects "1..0", "1.2.3.", ".1.1", "1.2.3.4" and "01.0.0".
        try:
            components = [int(piece) for piece in core.split(".") if piece][:_MAX_CORE_COMPONENTS]
            canonical = ".".join(str(number) for number in components)
        except ValueError:
            # Exceeds the interpreter's integer string conversion limit
            logger.debug("Rejected version %r: numeric component too long", text)
            return None
        if canonical != core:
            logger.debug("Rejected version %r: malformed numeric core %r", text, core)
            return None
        if not components:
            logger.debug("Rejected version %r: missing numeric core", text)
            return None

        # Text between the numeric core and the first "-" or "+" is skipped,
        # so "1.2.3abc" reads as 1.2.3
        delimiter = _DELIMITER.search(text)
        if delimiter is not None and delimiter.group() == "-":
            pre_segment = text[delimiter.end():].split("+", 1)[0]
        else:
            pre_segment = ""
        build_segment = text.partition("+")[2]

        pre_release = tuple(pre_segment.split(".")) if pre_segment else None
        build_metadata = tuple(build_segment.split(".")) if build_segment else None

        major, minor, patch = (components + [0, 0])[:_MAX_CORE_COMPONENTS]
        return cls.create(major, minor, patch, pre_release, build_metadata)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.pre_release:
            version += "-" + ".".join(self.pre_release)
        if self.build_metadata:
            version += "+" + ".".join(self.build_metadata)
        return version

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return _describe(self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this version carries pre-release identifiers."""
        return bool(self.pre_release)

    @property
    def is_stable(self) -> bool:
        """Return True if the public API is considered stable.

        Versions below 1.0.0 and pre-releases are unstable. An empty
        pre-release tuple counts as no pre-release here.
        """
        return self.major != 0 and not self.pre_release

    # Precedence

    def compare(self, other: "Version", mode: ComparisonMode = ComparisonMode.STRICT) -> int:
        """Compare precedence with another version (-1, 0 or 1)."""
        return compare_precedence(self, other, mode)

    def precedes(self, other: "Version", mode: ComparisonMode = ComparisonMode.STRICT) -> bool:
        """Return True if this version has lower precedence than ``other``."""
        return compare_precedence(self, other, mode) < 0

    def identical(self, other: object) -> bool:
        """Compare every field, build metadata included.

        Unlike ``==`` this tells ``1.0.0+a`` from ``1.0.0+b`` and an empty
        identifier tuple from a missing one.
        """
        if not isinstance(other, Version):
            return False
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.patch == other.patch
            and self.pre_release == other.pre_release
            and self.build_metadata == other.build_metadata
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) != 0

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) >= 0

    def __hash__(self) -> int:
        # Build metadata is left out to agree with precedence equality
        return hash((self.major, self.minor, self.patch, self.pre_release))


def _describe(major: Any, minor: Any, patch: Any) -> str:
    return f"{major}.{minor}.{patch}"


@runtime_checkable
class Versionable(Protocol):
    """Anything that exposes a semantic version."""

    @property
    def version(self) -> Version: ...


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR[.MINOR[.PATCH]][-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, pre_release=('alpha', '1'), build_metadata=None)

        >>> parse_version("2.0.0-rc.1+build.456").build_metadata
        ('build', '456')
    """
    version = Version.parse(version_string)
    if version is None:
        if not isinstance(version_string, str):
            raise InvalidVersionError(
                str(version_string), f"Version must be a string, got {type(version_string).__name__}"
            )
        raise InvalidVersionError(version_string)
    return version


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0-alpha")
        True
        >>> is_valid_semver("1.0.0-01")
        False
    """
    return Version.parse(version_string) is not None
