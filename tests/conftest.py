# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for buildsign tests.

Everything is written under tmp_path so tests never depend on a real Android
project or a real keystore.
"""

import textwrap
from pathlib import Path

import pytest


@pytest.fixture()
def keystore_file(tmp_path: Path) -> Path:
    """A stand-in keystore. Contents don't matter, only that the file exists."""
    keystore = tmp_path / "upload-keystore.jks"
    keystore.write_bytes(b"\xfe\xed\xfe\xed fake keystore")
    return keystore


@pytest.fixture()
def key_properties(tmp_path: Path, keystore_file: Path) -> Path:
    """A complete key.properties pointing at keystore_file by relative path."""
    content = textwrap.dedent("""\
        # release signing
        storeFile=upload-keystore.jks
        storePassword=store-secret
        keyAlias=upload
        keyPassword=key-secret
    """)
    properties = tmp_path / "key.properties"
    properties.write_text(content, encoding="utf-8")
    return properties


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """Smallest buildsign.yaml that passes schema validation."""
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          project_name: "flutter_radio"
          log_level: "DEBUG"
    """)
    config_file = tmp_path / "buildsign.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def full_config_file(tmp_path: Path) -> Path:
    """buildsign.yaml with every section, mirroring a stock Flutter app."""
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          project_name: "flutter_radio"
        android:
          namespace: "com.example.flutter_radio"
          application_id: "com.example.flutter_radio"
          compile_sdk: 36
          min_sdk: 21
          target_sdk: 36
          version_code: 12000
          version_name: "1.2.0"
        signing:
          properties_file: "key.properties"
    """)
    config_file = tmp_path / "buildsign.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file
