# SPDX-License-Identifier: MIT
"""Lenient semantic version parsing.

Parses ``Major.Minor.Patch[-BuildType][+Build]`` strings, tolerating
incomplete or malformed input unless strict validation is requested.

Example:
    >>> from lenient_semver import Version, parse_version, is_semantic
    >>>
    >>> version = parse_version("1.2")
    >>> version.to_display_string()
    '1.2.0'
    >>> parse_version("1.2.3-beta+007") == Version(1, 2, 3, "beta", "007")
    True
    >>> is_semantic("1.0")
    False
"""

__version__ = "0.1.0"

from .errors import InvalidFormatError
from .grammar import (
    SEMVER_PATTERN,
    is_semantic,
)
from .version import (
    BuildTypes,
    LegacyVersion,
    Version,
)
from .parser import (
    VersionPart,
    as_version,
    parse_version,
)
from .config import (
    ConfigError,
    ParserConfig,
    load_config,
)

__all__ = [
    # Values
    "Version",
    "LegacyVersion",
    "BuildTypes",
    # Parsing
    "parse_version",
    "as_version",
    "is_semantic",
    "VersionPart",
    "SEMVER_PATTERN",
    "InvalidFormatError",
    # Configuration
    "ParserConfig",
    "load_config",
    "ConfigError",
]
