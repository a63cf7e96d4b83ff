# SPDX-License-Identifier: MIT
"""Pydantic models for encoding versions as structured data."""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictStr, ValidationError

from .semver import Version

logger = logging.getLogger(__name__)


class VersionModel(BaseModel):
    """The raw fields of a version.

    Only the shape is checked here; identifier rules are enforced by
    Version.create when decoding.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    major: int = Field(ge=0, strict=True)
    minor: int = Field(ge=0, strict=True)
    patch: int = Field(ge=0, strict=True)
    pre_release: Optional[list[StrictStr]] = Field(
        default=None,
        validation_alias=AliasChoices("pre_release", "preReleaseIdentifiers"),
    )
    build_metadata: Optional[list[StrictStr]] = Field(
        default=None,
        validation_alias=AliasChoices("build_metadata", "buildMetadataIdentifiers"),
    )

    @classmethod
    def from_version(cls, version: Version) -> "VersionModel":
        """Create a model holding the fields of a version."""
        return cls(
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            pre_release=None if version.pre_release is None else list(version.pre_release),
            build_metadata=None if version.build_metadata is None else list(version.build_metadata),
        )

    def to_version(self) -> Optional[Version]:
        """Build the version, or return None if an identifier is invalid."""
        return Version.create(
            self.major, self.minor, self.patch, self.pre_release, self.build_metadata
        )


def encode_version(version: Version) -> dict[str, Any]:
    """Encode a version as a plain dictionary of its five fields.

    Example:
        >>> encode_version(Version(1, 2, 3, ["rc", "1"]))
        {'major': 1, 'minor': 2, 'patch': 3, 'pre_release': ['rc', '1'], 'build_metadata': None}
    """
    return VersionModel.from_version(version).model_dump()


def decode_version(data: Any) -> Optional[Version]:
    """Decode a version from a mapping of its fields.

    Returns:
        The version, or None if the data does not describe a valid version
    """
    try:
        model = VersionModel.model_validate(data)
    except ValidationError as e:
        logger.debug("Rejected version data %r: %s", data, e)
        return None
    return model.to_version()


def version_to_json(version: Version) -> str:
    """Encode a version as a JSON object."""
    return VersionModel.from_version(version).model_dump_json()


def version_from_json(text: str | bytes) -> Optional[Version]:
    """Decode a version from a JSON object, or return None if it is invalid."""
    try:
        model = VersionModel.model_validate_json(text)
    except ValidationError as e:
        logger.debug("Rejected version JSON %r: %s", text, e)
        return None
    return model.to_version()
