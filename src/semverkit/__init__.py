# SPDX-License-Identifier: MIT
"""Semantic version parsing, validation and precedence.

This package models version identifiers following the SemVer 2.0.0
specification: a numeric core, optional pre-release identifiers and optional
build metadata, with a precedence ordering that ignores build metadata.

Example:
    >>> from semverkit import Version, compare_versions
    >>>
    >>> version = Version.parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.pre_release
    ('alpha', '1')
    >>>
    >>> Version.parse("1.2.3-01") is None
    True
    >>>
    >>> Version.parse("1.0.0+a") == Version.parse("1.0.0+b")
    True
    >>> Version.parse("1.0.0+a").identical(Version.parse("1.0.0+b"))
    False
    >>>
    >>> compare_versions("1.0.0-rc.1", "1.0.0")
    -1
"""

__version__ = "0.1.0"

from .identifiers import (
    IdentifierKind,
    VALID_IDENTIFIER_CHARS,
    is_numeric_identifier,
    is_valid_identifier,
    validate_identifiers,
)
from .precedence import (
    ComparisonMode,
    compare_identifiers,
    compare_identifier_lists,
    compare_precedence,
    less_than,
)
from .semver import (
    Version,
    Versionable,
    parse_version,
    is_valid_semver,
    InvalidVersionError,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
)
from .models import (
    VersionModel,
    encode_version,
    decode_version,
    version_to_json,
    version_from_json,
)

__all__ = [
    # Identifier validation
    "IdentifierKind",
    "VALID_IDENTIFIER_CHARS",
    "is_numeric_identifier",
    "is_valid_identifier",
    "validate_identifiers",
    # Precedence
    "ComparisonMode",
    "compare_identifiers",
    "compare_identifier_lists",
    "compare_precedence",
    "less_than",
    # Version parsing
    "Version",
    "Versionable",
    "parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    # Structured data
    "VersionModel",
    "encode_version",
    "decode_version",
    "version_to_json",
    "version_from_json",
]
