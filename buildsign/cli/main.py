# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for buildsign.

Every operation is a subcommand of `buildsign`. Global options are inherited
by each subcommand through argparse's parent parser mechanism.

Usage:
    buildsign validate --properties android/key.properties
    buildsign variant release --config buildsign.yaml
    buildsign info --config buildsign.yaml
"""

import argparse
import sys
from typing import Optional, Sequence

from buildsign.cli.commands import handle_info, handle_validate, handle_variant
from buildsign.cli.exit_codes import USER_ERROR


def _build_global_parser() -> argparse.ArgumentParser:
    """Parent parser with options shared by every subcommand (add_help=False)."""
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to buildsign YAML configuration file.",
    )
    parent.add_argument(
        "--properties",
        type=str,
        default=None,
        help="Path to key.properties (overrides the config's signing section).",
    )
    parent.add_argument(
        "--root",
        type=str,
        default=None,
        help="Project root; defaults to the nearest directory with settings.gradle(.kts).",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level.",
    )
    return parent


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    commands = [
        ("validate", "Check key.properties and the keystore it references.", handle_validate),
        ("variant", "Resolve a build variant (debug or release).", handle_variant),
        ("info", "Display environment and android config info.", handle_info),
    ]

    for name, help_text, handler in commands:
        parser = subparsers.add_parser(name, parents=[parent], help=help_text)
        parser.set_defaults(func=handler)

    subparsers.choices["variant"].add_argument(
        "name",
        help="Build type name: debug or release.",
    )


def build_parser() -> argparse.ArgumentParser:
    parent = _build_global_parser()
    root_parser = argparse.ArgumentParser(
        prog="buildsign",
        description="buildsign: signing and build-variant configuration for Android builds.",
        parents=[parent],
    )
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, parent)
    return root_parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Parse the command line, dispatch to the handler, exit with its code.

    If no subcommand is given, show help and exit with USER_ERROR.
    """
    root_parser = build_parser()
    args = root_parser.parse_args(argv)

    if getattr(args, "func", None) is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
