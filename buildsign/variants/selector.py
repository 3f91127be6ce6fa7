# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Variant selector: maps a build-type name onto a fully resolved BuildVariant.

Only two variants exist. Debug never touches signing material. Release calls
the signing loader exactly once and attaches the result. Neither variant
enables minification or resource shrinking.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from buildsign.config.exceptions import UnknownVariant
from buildsign.config.schema import BuildVariant, SigningCredentials, VariantName
from buildsign.config.signing import load_signing_credentials
from buildsign.logging.logger import get_logger

logger: logging.Logger = get_logger(__name__)

SigningLoader = Callable[[Path, Optional[Path]], SigningCredentials]

# variant -> (minify, shrink_resources)
VARIANT_FLAGS: dict[VariantName, tuple[bool, bool]] = {
    VariantName.DEBUG: (False, False),
    VariantName.RELEASE: (False, False),
}


def parse_variant_name(name: str) -> VariantName:
    """Case-sensitive lookup; Gradle build type names are case-sensitive too."""
    try:
        return VariantName(name)
    except ValueError as err:
        raise UnknownVariant(name) from err


def select_variant(
    name: str,
    properties_path: Path,
    base_dir: Optional[Path] = None,
    loader: SigningLoader = load_signing_credentials,
) -> BuildVariant:
    """
    Resolve a build type into a BuildVariant.

    Args:
        name: "debug" or "release".
        properties_path: key.properties location, only read for release.
        base_dir: Passed through to the loader for relative storeFile paths.
        loader: Signing loader, swappable for tests.

    Returns:
        The frozen BuildVariant.

    Raises:
        UnknownVariant: If `name` isn't a known build type.
        ConfigError: Whatever the loader raises for release builds.
    """
    variant_name = parse_variant_name(name)
    minify, shrink_resources = VARIANT_FLAGS[variant_name]

    signing = None
    if variant_name is VariantName.RELEASE:
        signing = loader(properties_path, base_dir)

    variant = BuildVariant(
        name=variant_name,
        minify=minify,
        shrink_resources=shrink_resources,
        signing=signing,
    )
    logger.debug(
        "Selected build variant",
        extra={"variant": variant_name.value, "signed": signing is not None},
    )
    return variant
