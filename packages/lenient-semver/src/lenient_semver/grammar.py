# SPDX-License-Identifier: MIT
"""Semantic version grammar.

The same character classes back both the strict whole-string check and the
per-character classification done by the lenient tokenizer:

    version    := X.Y.Z (-build_type)? (+build)?
    build_type := [0-9A-Za-z-]+ ("." [0-9A-Za-z-.]+)*
    build      := [0-9A-Za-z-.]+
"""

from __future__ import annotations

import re

NUMBER = r"[0-9]"
ALPHANUMERIC_DASH = r"[0-9A-Za-z-]"
ALPHANUMERIC_DASH_DOT = r"[0-9A-Za-z-.]"

# (X.Y.Z)-BuildType+Build
XYZ = rf"(?P<major>{NUMBER}+)\.(?P<minor>{NUMBER}+)\.(?P<patch>{NUMBER}+)"
# X.Y.Z-(BuildType)+Build
BUILD_TYPE = rf"(?:-(?P<build_type>{ALPHANUMERIC_DASH}+(?:\.{ALPHANUMERIC_DASH_DOT}+)*))?"
# X.Y.Z-BuildType+(Build)
BUILD = rf"(?:\+(?P<build>{ALPHANUMERIC_DASH_DOT}+))?"

COMPLETE = XYZ + BUILD_TYPE + BUILD

SEMVER_PATTERN = re.compile(COMPLETE)

_DIGIT = re.compile(NUMBER)
_BUILD_CHAR = re.compile(ALPHANUMERIC_DASH_DOT)


def is_semantic(version_string: str) -> bool:
    """Check whether a string follows the semantic version grammar.

    Leading and trailing whitespace is ignored. The whole remaining string
    must match; partial matches such as ``"1.0.0 beta"`` are rejected.

    Examples:
        >>> is_semantic("1.0.0-rc.1+build.5")
        True
        >>> is_semantic("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string.strip()) is not None


def is_digit(char: str) -> bool:
    """Return True if ``char`` is an ASCII digit."""
    return _DIGIT.fullmatch(char) is not None


def is_build_char(char: str) -> bool:
    """Return True if ``char`` may appear in a build type or build metadata."""
    return _BUILD_CHAR.fullmatch(char) is not None
