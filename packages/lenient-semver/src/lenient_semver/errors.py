# SPDX-License-Identifier: MIT
"""Exceptions raised by lenient_semver."""

from __future__ import annotations


class InvalidFormatError(Exception):
    """Raised when a version string does not follow the semantic version grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)
