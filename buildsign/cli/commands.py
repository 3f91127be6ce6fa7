# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the buildsign CLI.

Each function corresponds to one subcommand and returns an exit code. Results
are reported through the structured logger, never print(), so the calling
build pipeline can parse every line of output.
"""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from buildsign.cli.exit_codes import CONFIG_ERROR, RUNTIME_ERROR, SUCCESS
from buildsign.config.exceptions import ConfigError
from buildsign.config.loader import load_config
from buildsign.config.schema import BuildSignConfig
from buildsign.config.signing import load_signing_credentials
from buildsign.logging.logger import get_logger
from buildsign.runtime.bootstrap import bootstrap
from buildsign.utils.hashing import compute_sha256
from buildsign.utils.paths import find_root_project, resolve_against
from buildsign.variants.selector import select_variant

# Library loggers whose level follows --log-level.
_PACKAGE_LOGGERS = ("buildsign.config.signing", "buildsign.variants.selector")


@dataclass(frozen=True)
class CommandContext:
    """What every handler needs after setup succeeded."""

    logger: logging.Logger
    config: Optional[BuildSignConfig]
    project_root: Path


def _resolve_project_root(args: argparse.Namespace, logger: logging.Logger) -> Path:
    if args.root is not None:
        return Path(args.root).resolve()
    cwd = Path.cwd()
    try:
        return find_root_project(cwd)
    except RuntimeError:
        logger.debug("No Gradle root found, using working directory", extra={"cwd": str(cwd)})
        return cwd


def _setup(args: argparse.Namespace, command_name: str) -> tuple[int, Optional[CommandContext]]:
    """
    Shared setup: configure logging, load the optional project config, bootstrap.

    Returns (exit_code, context). Context is None when setup failed and the
    caller should return exit_code right away.
    """
    logger = get_logger(f"buildsign.cli.{command_name}", log_level=args.log_level)
    for name in _PACKAGE_LOGGERS:
        get_logger(name, log_level=args.log_level)

    project_root = _resolve_project_root(args, logger)

    config = None
    if args.config is not None:
        try:
            config = load_config(Path(args.config))
        except ConfigError as err:
            logger.error(
                "Configuration error",
                extra={"command": command_name, "error": str(err)},
            )
            return CONFIG_ERROR, None

        try:
            bootstrap(
                config.global_config,
                project_root,
                loggers=(logger.name, *_PACKAGE_LOGGERS),
            )
        except (ValueError, OSError) as err:
            logger.error(
                "Cannot apply logging configuration",
                extra={
                    "command": command_name,
                    "log_file": config.global_config.log_file,
                    "error": str(err),
                },
            )
            return CONFIG_ERROR, None

    return SUCCESS, CommandContext(logger=logger, config=config, project_root=project_root)


def _signing_paths(args: argparse.Namespace, ctx: CommandContext) -> tuple[Path, Optional[Path]]:
    """
    Work out (properties_path, store_base_dir).

    Precedence for the property file: --properties, then the config's
    signing.properties_file, then <root>/key.properties.
    """
    section = ctx.config.signing if ctx.config is not None else None

    if args.properties is not None:
        properties_path = Path(args.properties)
    elif section is not None:
        properties_path = resolve_against(Path(section.properties_file), ctx.project_root)
    else:
        properties_path = ctx.project_root / "key.properties"

    base_dir = None
    if section is not None and section.store_base_dir is not None:
        base_dir = resolve_against(Path(section.store_base_dir), ctx.project_root)

    return properties_path, base_dir


def handle_validate(args: argparse.Namespace) -> int:
    """Load signing credentials and report which keystore they point at."""
    exit_code, ctx = _setup(args, "validate")
    if ctx is None:
        return exit_code

    properties_path, base_dir = _signing_paths(args, ctx)
    try:
        credentials = load_signing_credentials(properties_path, base_dir)
    except ConfigError as err:
        ctx.logger.error(
            "Signing configuration invalid",
            extra={"properties_file": str(properties_path), "error": str(err)},
        )
        return CONFIG_ERROR

    try:
        fingerprint = compute_sha256(credentials.store_file)
    except OSError as err:
        ctx.logger.error(
            "Cannot read keystore",
            extra={"store_file": str(credentials.store_file), "error": str(err)},
        )
        return RUNTIME_ERROR

    ctx.logger.info(
        "Signing configuration valid",
        extra={
            "properties_file": str(properties_path),
            "store_file": str(credentials.store_file),
            "store_sha256": fingerprint,
            "key_alias": credentials.key_alias,
        },
    )
    return SUCCESS


def handle_variant(args: argparse.Namespace) -> int:
    """Resolve a build variant and report its flags."""
    exit_code, ctx = _setup(args, "variant")
    if ctx is None:
        return exit_code

    properties_path, base_dir = _signing_paths(args, ctx)
    try:
        variant = select_variant(args.name, properties_path, base_dir)
    except ConfigError as err:
        ctx.logger.error(
            "Cannot resolve build variant",
            extra={"variant": args.name, "error": str(err)},
        )
        return CONFIG_ERROR

    ctx.logger.info(
        "Build variant resolved",
        extra={
            "variant": variant.name.value,
            "minify": variant.minify,
            "shrink_resources": variant.shrink_resources,
            "signed": variant.signing is not None,
            "key_alias": variant.signing.key_alias if variant.signing else None,
        },
    )
    return SUCCESS


def handle_info(args: argparse.Namespace) -> int:
    """Display environment info and, with --config, the android settings."""
    exit_code, ctx = _setup(args, "info")
    if ctx is None:
        return exit_code

    from buildsign import __version__
    from buildsign.runtime.environment import get_system_info

    system_info = get_system_info()
    ctx.logger.info(
        "System information",
        extra={
            "buildsign_version": __version__,
            "python_version": system_info.python_version,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
            "project_root": str(ctx.project_root),
            "config": args.config,
        },
    )

    android = ctx.config.android if ctx.config is not None else None
    if android is not None:
        ctx.logger.info(
            "Android configuration",
            extra={
                "namespace": android.namespace,
                "application_id": android.application_id,
                "compile_sdk": android.compile_sdk,
                "min_sdk": android.min_sdk,
                "target_sdk": android.target_sdk,
                "version_code": android.version_code,
                "version_name": android.version_name,
                "java_version": android.java_version,
                "jvm_target": android.effective_jvm_target,
            },
        )
    return SUCCESS
