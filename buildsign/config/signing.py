# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Signing-config loader.

Turns a key.properties file into a SigningCredentials record:

    storeFile=upload-keystore.jks
    storePassword=...
    keyAlias=upload
    keyPassword=...

All four keys are mandatory. A relative storeFile is resolved against
`base_dir`, which defaults to the directory holding the property file. The
keystore must exist. Any problem raises a ConfigError subclass and the build
is expected to stop.
"""

from pathlib import Path
from typing import Optional

from buildsign.config.exceptions import FieldMissing, PathInvalid
from buildsign.config.properties import read_properties
from buildsign.config.schema import SigningCredentials
from buildsign.logging.logger import get_logger
from buildsign.utils.paths import resolve_against

logger = get_logger(__name__)

# Property key -> SigningCredentials field, in the order they're checked.
REQUIRED_KEYS = {
    "storeFile": "store_file",
    "storePassword": "store_password",
    "keyAlias": "key_alias",
    "keyPassword": "key_password",
}


def _require(properties: dict[str, str], key: str, source: Path) -> str:
    value = properties.get(key)
    if value is None or not value.strip():
        raise FieldMissing(key, source)
    return value


def _resolve_keystore(raw_path: str, base_dir: Path) -> Path:
    store_file = resolve_against(Path(raw_path.strip()), base_dir)
    if not store_file.exists():
        raise PathInvalid(store_file)
    if not store_file.is_file():
        raise PathInvalid(store_file, reason="is not a regular file")
    return store_file.resolve()


def load_signing_credentials(
    properties_path: Path,
    base_dir: Optional[Path] = None,
) -> SigningCredentials:
    """
    Load and validate signing credentials from a property file.

    Args:
        properties_path: Path to key.properties.
        base_dir: Directory a relative storeFile is resolved against. Defaults
                  to the property file's own directory.

    Returns:
        Frozen SigningCredentials whose values equal the file's.

    Raises:
        ConfigMissing: The property file doesn't exist.
        ConfigLoadError: The property file can't be read or decoded.
        FieldMissing: One of the required keys is absent or blank.
        PathInvalid: storeFile doesn't point at an existing file.
    """
    properties = read_properties(properties_path)

    values = {
        field: _require(properties, key, properties_path)
        for key, field in REQUIRED_KEYS.items()
    }

    if base_dir is None:
        base_dir = properties_path.parent
    values["store_file"] = _resolve_keystore(values["store_file"], base_dir)

    credentials = SigningCredentials(**values)
    logger.debug(
        "Loaded signing credentials",
        extra={
            "properties_file": str(properties_path),
            "store_file": str(credentials.store_file),
            "key_alias": credentials.key_alias,
        },
    )
    return credentials
