# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe models for build configuration.

Two kinds of data live here:
  - the signing/variant records handed to the build pipeline
    (SigningCredentials, BuildVariant)
  - the project config read from YAML (GlobalConfig, AndroidConfig,
    SigningSection, BuildSignConfig)

Every model is frozen. A build reads its configuration once and never changes
it afterwards, so mutation after construction is a bug.

The models use pydantic v2's ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked
"""

import enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_PACKAGE_PATTERN = r"^[A-Za-z][A-Za-z0-9_]*(\.[A-Za-z][A-Za-z0-9_]*)+$"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class VariantName(str, enum.Enum):
    """The two build types an Android app module ships with."""

    DEBUG = "debug"
    RELEASE = "release"


class SigningCredentials(BaseModel):
    """
    Everything needed to sign a release artifact.

    Built once per invocation from key.properties. Passwords are excluded from
    repr so they don't leak into logs or tracebacks.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    store_file: Path = Field(description="Absolute path to the keystore file")
    store_password: str = Field(min_length=1, repr=False, description="Keystore password")
    key_alias: str = Field(min_length=1, description="Alias of the signing key in the store")
    key_password: str = Field(min_length=1, repr=False, description="Password for the key")


class BuildVariant(BaseModel):
    """
    One resolved build type with its optimization flags.

    Release variants always carry signing credentials, debug variants never do.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    name: VariantName
    minify: bool = Field(default=False, description="Run code shrinking/obfuscation")
    shrink_resources: bool = Field(default=False, description="Strip unused resources")
    signing: Optional[SigningCredentials] = Field(default=None)

    @model_validator(mode="after")
    def check_signing_matches_variant(self) -> "BuildVariant":
        if self.name is VariantName.RELEASE and self.signing is None:
            raise ValueError("release variant requires signing credentials")
        if self.name is VariantName.DEBUG and self.signing is not None:
            raise ValueError("debug variant must not carry signing credentials")
        return self


class GlobalConfig(BaseModel):
    """Cross-cutting settings: config identity and logging."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    project_name: str = Field(
        default="app", description="Human-readable project identifier"
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return upper


class AndroidConfig(BaseModel):
    """
    The declarative part of the app module's `android { ... }` block.

    SDK levels follow the usual Gradle rules: the target can't be lower than
    the minimum, and versionCode must be a positive integer.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    namespace: str = Field(pattern=_PACKAGE_PATTERN, description="Java package of R class")
    application_id: str = Field(
        pattern=_PACKAGE_PATTERN, description="Play Store identifier of the app"
    )
    compile_sdk: int = Field(ge=1, description="API level the app compiles against")
    min_sdk: int = Field(default=21, ge=1, description="Lowest supported API level")
    target_sdk: int = Field(ge=1, description="API level the app targets")
    version_code: int = Field(ge=1, description="Monotonic integer version")
    version_name: str = Field(min_length=1, description="User-visible version string")
    java_version: str = Field(default="17", description="source/targetCompatibility")
    jvm_target: Optional[str] = Field(
        default=None, description="Kotlin jvmTarget, defaults to java_version"
    )

    @model_validator(mode="after")
    def check_sdk_levels(self) -> "AndroidConfig":
        if self.target_sdk < self.min_sdk:
            raise ValueError(
                f"target_sdk ({self.target_sdk}) must be >= min_sdk ({self.min_sdk})"
            )
        if self.compile_sdk < self.target_sdk:
            raise ValueError(
                f"compile_sdk ({self.compile_sdk}) must be >= target_sdk ({self.target_sdk})"
            )
        return self

    @property
    def effective_jvm_target(self) -> str:
        return self.jvm_target if self.jvm_target is not None else self.java_version


class SigningSection(BaseModel):
    """
    Where to find signing material, relative to the project root.

    Flutter keeps key.properties next to settings.gradle but resolves storeFile
    from the app module, hence `store_base_dir: app` in most real projects.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    properties_file: str = Field(
        default="key.properties",
        description="Path to the key.properties file, relative to project root",
    )
    store_base_dir: Optional[str] = Field(
        default=None,
        description="Directory a relative storeFile resolves against; "
        "defaults to the property file's directory",
    )


class BuildSignConfig(BaseModel):
    """
    Top-level config container.

    Only `global:` is required. Commands that need the android or signing
    sections check for them and fall back to defaults where that makes sense.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    android: Optional[AndroidConfig] = Field(default=None)
    signing: Optional[SigningSection] = Field(default=None)
