# SPDX-License-Identifier: MIT
"""Lenient semantic version parsing.

The parser makes a single left-to-right pass over the input. The numeric
triplet only accepts digits separated by dots; the first other character
ends the triplet and the rest is read as ``-build_type`` and ``+build``.
Malformed input never fails unless strict mode is requested; fields that
could not be read keep their defaults.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Union

from .errors import InvalidFormatError
from .grammar import is_build_char, is_digit, is_semantic
from .version import Version

logger = logging.getLogger(__name__)


class VersionPart(IntEnum):
    """Position of a field in Major.Minor.Patch-BuildType+Build."""

    MAJOR = 0
    MINOR = 1
    PATCH = 2
    BUILD_TYPE = 3
    BUILD = 4


class _Tokenizer:
    """Scan state for a single parse call."""

    def __init__(self, text: str):
        self.text = text
        self.part: int = VersionPart.MAJOR
        self.buffer: list[str] = []
        self.version = Version()

    @property
    def in_triplet(self) -> bool:
        return self.part <= VersionPart.PATCH

    @property
    def done(self) -> bool:
        return self.part > VersionPart.BUILD

    def close(self) -> None:
        """Write the buffered characters into the current field and advance."""
        value = "".join(self.buffer)
        if value:
            self._write(value)
        self.buffer = []
        self.part += 1

    def _write(self, value: str) -> None:
        part = self.part
        if part == VersionPart.MAJOR:
            self.version.major = _to_int(value)
        elif part == VersionPart.MINOR:
            self.version.minor = _to_int(value)
        elif part == VersionPart.PATCH:
            self.version.patch = _to_int(value)
        elif part == VersionPart.BUILD_TYPE:
            self.version.build_type = value
        elif part == VersionPart.BUILD:
            self.version.build = value

    def run(self) -> Version:
        for char in self.text:
            if self.done:
                break

            if char == " ":
                logger.debug("Stopped parsing %r at a space", self.text)
                self.close()
                return self.version

            if self.in_triplet:
                if is_digit(char):
                    self.buffer.append(char)
                elif char == ".":
                    self.close()
                else:
                    self.close()
                    if char == "+":
                        self.part = VersionPart.BUILD
                    else:
                        self.part = VersionPart.BUILD_TYPE
                        if char != "-":
                            logger.debug(
                                "Unexpected %r in numeric part of %r, reading it as build type",
                                char,
                                self.text,
                            )
                            self.buffer.append(char)
                continue

            if char == "+" and self.part < VersionPart.BUILD:
                self.close()
            elif not is_build_char(char):
                logger.debug("Stopped parsing %r at invalid character %r", self.text, char)
                self.close()
                return self.version
            else:
                self.buffer.append(char)

        if not self.done:
            self.close()
        return self.version


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def parse_version(version_string: str, strict: bool = False) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string shaped like MAJOR.MINOR.PATCH[-build_type][+build]
        strict: Reject input that does not match the full grammar instead of
            parsing it best-effort

    Returns:
        A Version with every field that could be read; missing numeric
        fields are 0 and missing string fields are empty

    Raises:
        InvalidFormatError: If ``version_string`` is not a string, or if
            ``strict`` is set and it is not a semantic version

    Examples:
        >>> parse_version("1.2")
        Version(major=1, minor=2, patch=0, build_type='', build='')

        >>> parse_version("1.2.3-beta+007")
        Version(major=1, minor=2, patch=3, build_type='beta', build='007')

        >>> parse_version("1.2x.3")
        Version(major=1, minor=2, patch=0, build_type='x.3', build='')
    """
    if not isinstance(version_string, str):
        raise InvalidFormatError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if strict and not is_semantic(version_string):
        logger.debug("Rejected non-semantic version %r", version_string)
        raise InvalidFormatError(
            version_string,
            f"Version does not follow the semantic version guidelines: {version_string}",
        )

    return _Tokenizer(version_string.strip()).run()


def as_version(value: Union[str, Version, tuple]) -> Version:
    """Convert a string, tuple or Version into a Version.

    Strings are parsed leniently and tuples go through
    :meth:`Version.from_tuple`. Version objects are returned unchanged.

    Raises:
        TypeError: For any other input type
    """
    if isinstance(value, Version):
        return value
    if isinstance(value, str):
        return parse_version(value)
    if isinstance(value, tuple):
        return Version.from_tuple(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to Version")
