# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Custom exceptions for the configuration system.

We keep these separate so that the CLI can catch config-specific failures
without importing the loaders. Every one of them is fatal: a build that hits
any of these must stop before it signs or packages anything.
"""

from pathlib import Path


class ConfigError(Exception):
    """Base for all configuration errors."""


class ConfigMissing(ConfigError):
    """Raised when a config or property file does not exist on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Config file not found: {path}")


class FieldMissing(ConfigError):
    """Raised when a required key is absent (or blank) in a property file."""

    def __init__(self, field_name: str, path: Path) -> None:
        self.field_name = field_name
        self.path = path
        super().__init__(f"Required field '{field_name}' is missing in {path}")


class PathInvalid(ConfigError):
    """Raised when a path referenced by the config does not point at a file."""

    def __init__(self, path: Path, reason: str = "does not exist") -> None:
        self.path = path
        super().__init__(f"Keystore file {reason}: {path}")


class ConfigLoadError(ConfigError):
    """Raised when a file exists but cannot be read or parsed."""


class ConfigValidationError(ConfigError):
    """
    Raised when a YAML config parses fine but fails schema validation.
    This covers missing required fields, type mismatches, out-of-range values,
    and unknown keys.
    """


class UnknownVariant(ConfigError):
    """Raised when a build type other than debug/release is requested."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Unknown build variant '{name}'. Expected one of: debug, release"
        )
