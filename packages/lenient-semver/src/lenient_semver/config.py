# SPDX-License-Identifier: MIT
"""Parser configuration.

Projects can pin the parsing mode in their pyproject.toml:

    [tool.lenient-semver]
    strict = true
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .parser import parse_version
from .version import Version

TOOL_SECTION = "lenient-semver"


class ConfigError(Exception):
    """Raised when parser configuration is invalid."""

    pass


@dataclass
class ParserConfig:
    """Options applied when parsing version strings.

    Attributes:
        strict: Reject strings that do not follow the full semantic version
            grammar instead of parsing them best-effort
    """

    strict: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParserConfig:
        """Build a config from a ``[tool.lenient-semver]`` table."""
        strict = data.get("strict", False)
        if not isinstance(strict, bool):
            raise ConfigError(f"'strict' must be a boolean, got {type(strict).__name__}")
        return cls(strict=strict)

    def parse(self, version_string: str) -> Version:
        """Parse ``version_string`` using this configuration."""
        return parse_version(version_string, strict=self.strict)


def load_config(pyproject_path: Union[str, Path]) -> ParserConfig:
    """Load parser configuration from a pyproject.toml file.

    A missing file or a missing ``[tool.lenient-semver]`` table yields the
    default configuration.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values
    """
    path = Path(pyproject_path)
    if not path.exists():
        return ParserConfig()

    try:
        with open(path, "rb") as f:
            pyproject = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    section = pyproject.get("tool", {}).get(TOOL_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.{TOOL_SECTION}] must be a table")
    return ParserConfig.from_dict(section)
