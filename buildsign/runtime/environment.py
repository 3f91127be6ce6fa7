# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Environment checks for buildsign.

Runs before any config is touched so an outdated interpreter fails with a
clear message instead of a syntax error deep inside the loader.
"""

import platform
import sys
from typing import NamedTuple

MINIMUM_PYTHON = (3, 11)


class SystemInfo(NamedTuple):
    """Snapshot of the machine the build runs on."""

    python_version: str
    platform: str
    architecture: str
    hostname: str


def check_minimum_python() -> None:
    """
    Verify we're running on a supported interpreter.

    Raises:
        RuntimeError: If Python version is below MINIMUM_PYTHON.
    """
    current = tuple(sys.version_info[:2])
    if current < MINIMUM_PYTHON:
        required = ".".join(str(part) for part in MINIMUM_PYTHON)
        raise RuntimeError(
            f"buildsign requires Python >= {required}, "
            f"but you're running {current[0]}.{current[1]}."
        )


def get_system_info() -> SystemInfo:
    return SystemInfo(
        python_version=platform.python_version(),
        platform=platform.system(),
        architecture=platform.machine(),
        hostname=platform.node(),
    )
