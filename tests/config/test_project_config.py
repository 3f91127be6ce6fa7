# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the YAML project config loader.

  1. Valid YAML loads into a frozen, correct config object
  2. Schema violations raise ConfigValidationError
  3. Broken or non-mapping YAML raises ConfigLoadError
  4. A missing file raises ConfigMissing
"""

import textwrap
from pathlib import Path

import pytest

from buildsign.config.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigMissing,
    ConfigValidationError,
)
from buildsign.config.loader import load_config


def _write(tmp_path: Path, content: str) -> Path:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_file


class TestLoadValidConfig:
    def test_loads_minimal_config(self, tmp_config_file: Path) -> None:
        config = load_config(tmp_config_file)
        assert config.global_config.project_name == "flutter_radio"
        assert config.global_config.log_level == "DEBUG"
        assert config.android is None
        assert config.signing is None

    def test_loads_full_config(self, full_config_file: Path) -> None:
        config = load_config(full_config_file)
        android = config.android
        assert android is not None
        assert android.namespace == "com.example.flutter_radio"
        assert android.compile_sdk == 36
        assert android.target_sdk == 36
        assert android.version_code == 12000
        assert android.version_name == "1.2.0"
        assert android.effective_jvm_target == "17"
        assert config.signing is not None
        assert config.signing.properties_file == "key.properties"
        assert config.signing.store_base_dir is None


class TestLoadInvalidConfig:
    def test_missing_global_section(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path, """\
            android:
              namespace: "com.example.app"
        """)
        with pytest.raises(ConfigValidationError):
            load_config(config_file)

    def test_unknown_key_is_rejected(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path, """\
            global:
              config_version: "1.0.0"
              colour: "blue"
        """)
        with pytest.raises(ConfigValidationError):
            load_config(config_file)

    def test_target_below_min_sdk_is_rejected(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path, """\
            global:
              config_version: "1.0.0"
            android:
              namespace: "com.example.app"
              application_id: "com.example.app"
              compile_sdk: 36
              min_sdk: 30
              target_sdk: 29
              version_code: 1
              version_name: "1.0"
        """)
        with pytest.raises(ConfigValidationError, match="min_sdk"):
            load_config(config_file)

    def test_broken_yaml_raises_load_error(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path, "{{not: yaml: at: all:::")
        with pytest.raises(ConfigLoadError):
            load_config(config_file)

    def test_list_document_raises_load_error(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path, "- a\n- b\n")
        with pytest.raises(ConfigLoadError, match="mapping"):
            load_config(config_file)

    def test_nonexistent_file_raises_config_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigMissing):
            load_config(tmp_path / "does_not_exist.yaml")

    def test_every_failure_is_a_config_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestConfigImmutability:
    def test_cannot_mutate_frozen_config(self, full_config_file: Path) -> None:
        config = load_config(full_config_file)
        with pytest.raises(Exception):
            config.android.version_code = 1  # type: ignore[misc, union-attr]
