# SPDX-License-Identifier: MIT
"""Semantic version value type.

A Version holds five fields: Major.Minor.Patch-BuildType+Build. The numeric
fields are clamped to zero on every write, the string fields are stored
as given. Equality is structural over all five fields; no precedence
ordering is defined.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Union


class BuildTypes:
    """Preset build type labels."""

    ALPHA = "alpha"
    BETA = "beta"
    DEV = "dev"
    DEVELOPMENT = "development"
    PRE = "pre"
    PRE_RELEASE = "pre-release"
    RELEASE = "release"
    RELEASE_CANDIDATE = "rc"
    STABLE = "stable"
    UNSTABLE = "unstable"
    TEST = "test"
    TESTING = "testing"


class LegacyVersion(NamedTuple):
    """Four-component numeric version (major, minor, patch, revision)."""

    major: int
    minor: int
    patch: int
    revision: int


def _clamp(value: int) -> int:
    return value if value >= 0 else 0


class Version:
    """A semantic version.

    Attributes:
        major: Major version number, never negative
        minor: Minor version number, never negative
        patch: Patch version number, never negative
        build_type: Pre-release label such as "alpha" or "rc.1" ("" if absent)
        prerelease: Alias of build_type
        build: Build metadata such as "build.123" ("" if absent)

    Example:
        >>> v = Version(1, 2, 3, "beta", "007")
        >>> v.to_display_string()
        '1.2.3-beta+007'
        >>> Version(-4, 1).major
        0
    """

    __slots__ = ("_major", "_minor", "_patch", "build_type", "build")

    def __init__(
        self,
        major: int = 0,
        minor: int = 0,
        patch: int = 0,
        build_type: Optional[str] = "",
        build: Optional[str] = "",
    ):
        self.major = major
        self.minor = minor
        self.patch = patch
        self.build_type = build_type
        self.build = build

    @property
    def major(self) -> int:
        return self._major

    @major.setter
    def major(self, value: int) -> None:
        self._major = _clamp(value)

    @property
    def minor(self) -> int:
        return self._minor

    @minor.setter
    def minor(self, value: int) -> None:
        self._minor = _clamp(value)

    @property
    def patch(self) -> int:
        return self._patch

    @patch.setter
    def patch(self, value: int) -> None:
        self._patch = _clamp(value)

    @property
    def prerelease(self) -> Optional[str]:
        return self.build_type

    @prerelease.setter
    def prerelease(self, value: Optional[str]) -> None:
        self.build_type = value

    @classmethod
    def from_tuple(cls, parts: Sequence[Union[int, str]]) -> Version:
        """Build a Version from ``(major[, minor[, patch[, build_type]]])``.

        Missing trailing components default to 0 or an empty build type.

        Raises:
            ValueError: If more than four components are given
        """
        if len(parts) > 4:
            raise ValueError(f"Expected at most 4 version components, got {len(parts)}")
        return cls(*parts)

    @property
    def base_version(self) -> str:
        """Return the version without build type or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def is_prerelease(self) -> bool:
        """Return True if a build type is set."""
        return bool(self.build_type)

    def to_display_string(self) -> str:
        """Return the canonical ``Major.Minor.Patch[-BuildType][+Build]`` form.

        Empty or absent build type and build metadata are omitted.
        """
        version = self.base_version
        if self.build_type:
            version += f"-{self.build_type}"
        if self.build:
            version += f"+{self.build}"
        return version

    def to_legacy_version(self) -> LegacyVersion:
        """Convert to a numeric four-component version.

        Warning:
            This conversion is lossy. Build type and build metadata are
            dropped, and the revision component is always 0 since a
            semantic version has no revision.
        """
        return LegacyVersion(self.major, self.minor, self.patch, 0)

    def copy(self) -> Version:
        return Version(self.major, self.minor, self.patch, self.build_type, self.build)

    def _fields(self) -> tuple:
        return (self.major, self.minor, self.patch, self.build_type, self.build)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return (
            f"Version(major={self.major}, minor={self.minor}, patch={self.patch}, "
            f"build_type={self.build_type!r}, build={self.build!r})"
        )
