# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Project config loader: reads YAML from disk and produces a frozen BuildSignConfig.

The pipeline is linear:
  1. Read the file
  2. Parse as YAML into a plain dict
  3. Validate with pydantic
  4. Return the frozen config object

Any failure stops here with a ConfigError. There are no fallback defaults for
a broken file.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from buildsign.config.exceptions import ConfigLoadError, ConfigMissing, ConfigValidationError
from buildsign.config.schema import BuildSignConfig


def _read_yaml_file(config_path: Path) -> dict[str, Any]:
    """
    Read a YAML file and return the parsed mapping.

    Raises:
        ConfigMissing: If the file doesn't exist or isn't a regular file.
        ConfigLoadError: If the file isn't readable or isn't a YAML mapping.
    """
    if not config_path.is_file():
        raise ConfigMissing(config_path)

    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {err}") from err

    try:
        parsed = yaml.safe_load(raw_text)
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {err}") from err

    if not isinstance(parsed, dict):
        raise ConfigLoadError(
            f"Config file must contain a YAML mapping (dict), got {type(parsed).__name__}"
        )

    return parsed


def load_config(config_path: Path) -> BuildSignConfig:
    """
    Load and validate a buildsign.yaml file.

    Args:
        config_path: Path to a YAML config file.

    Returns:
        A fully validated, frozen BuildSignConfig instance.

    Raises:
        ConfigMissing: The file doesn't exist.
        ConfigLoadError: File I/O or YAML parse failures.
        ConfigValidationError: Schema violations (missing fields, wrong types, unknown keys).
    """
    raw_data = _read_yaml_file(config_path)

    try:
        return BuildSignConfig.model_validate(raw_data)
    except ValidationError as err:
        raise ConfigValidationError(
            f"Config validation failed for {config_path}:\n{err}"
        ) from err
