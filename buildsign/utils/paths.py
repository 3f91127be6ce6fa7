# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Path utilities for buildsign.

Gradle resolves `rootProject.file(...)` against the directory holding the
settings script, and `file(...)` against the module. We mirror that here so
the same relative paths in key.properties keep working.
"""

from pathlib import Path

ROOT_MARKERS = ("settings.gradle", "settings.gradle.kts", "buildsign.yaml")


def find_root_project(start: Path) -> Path:
    """
    Walk up from `start` to find the root of the Gradle project.

    The root is the first directory that contains one of ROOT_MARKERS.

    Args:
        start: Directory (or file) to start searching from.

    Returns:
        Absolute path to the project root directory.

    Raises:
        RuntimeError: If no marker is found in any ancestor directory.
    """
    current = start.resolve()
    if not current.is_dir():
        current = current.parent
    while True:
        if any((current / marker).exists() for marker in ROOT_MARKERS):
            return current
        if current == current.parent:
            break
        current = current.parent
    raise RuntimeError(
        f"Cannot find project root from {start}. "
        f"None of {', '.join(ROOT_MARKERS)} found in any ancestor directory."
    )


def resolve_against(path: Path, base: Path) -> Path:
    """Return `path` unchanged if absolute, otherwise joined onto `base`."""
    if path.is_absolute():
        return path
    return base / path
