# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Reader for Java-style .properties files.

Signing material for Android builds lives in a `key.properties` file that the
Gradle script feeds to java.util.Properties. We accept the same syntax so an
existing file works unchanged:

  - `#` and `!` start a comment line, blank lines are skipped
  - the key ends at the first unescaped `=`, `:` or whitespace
  - a line ending in an odd number of backslashes continues on the next one
  - \\t, \\n, \\r, \\f and \\uXXXX escapes are decoded, any other escaped
    character stands for itself

Later duplicates win. Values keep their trailing whitespace, like Java does.
"""

import re
from pathlib import Path

from buildsign.config.exceptions import ConfigLoadError, ConfigMissing

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _ends_with_continuation(line: str) -> bool:
    """True when the line ends in an odd run of backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str):
    """Join continuation lines and drop comments and blanks."""
    pending = None
    for natural_line in _LINE_BREAK.split(text):
        line = natural_line.lstrip(_WHITESPACE)

        # Comment markers only count at the start of a logical line.
        if pending is None and (not line or line[0] in _COMMENT_MARKERS):
            continue

        if _ends_with_continuation(line):
            pending = (pending or "") + line[:-1]
            continue

        yield (pending or "") + line
        pending = None

    if pending is not None:
        yield pending


def _join_surrogates(chars: list[str]) -> str:
    """
    Merge \\uXXXX high/low surrogate pairs into one character.

    Characters outside the BMP arrive as two escaped halves. A half without
    its partner is kept as is, the same as Java does.
    """
    merged: list[str] = []
    index = 0
    while index < len(chars):
        char = chars[index]
        following = chars[index + 1] if index + 1 < len(chars) else ""
        if "\ud800" <= char <= "\udbff" and "\udc00" <= following <= "\udfff":
            merged.append(
                chr(0x10000 + ((ord(char) - 0xD800) << 10) + (ord(following) - 0xDC00))
            )
            index += 2
        else:
            merged.append(char)
            index += 1
    return "".join(merged)


def _unescape(raw: str) -> str:
    chars: list[str] = []
    index = 0
    length = len(raw)
    while index < length:
        char = raw[index]
        index += 1
        if char != "\\":
            chars.append(char)
            continue
        if index >= length:
            break

        escaped = raw[index]
        index += 1
        if escaped == "u":
            digits = raw[index:index + 4]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{digits}")
            chars.append(chr(int(digits, 16)))
            index += 4
        else:
            chars.append(_ESCAPES.get(escaped, escaped))

    return _join_surrogates(chars)


def _split_entry(line: str) -> tuple[str, str]:
    """Split one logical line into its raw key and raw value."""
    length = len(line)
    index = 0
    escaped = False
    has_separator = False

    while index < length:
        char = line[index]
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _SEPARATORS:
            has_separator = True
            break
        elif char in _WHITESPACE:
            break
        index += 1

    key_end = index
    value_start = min(index + 1, length)

    # Whitespace around the separator is dropped; a key followed by
    # whitespace may still use one `=` or `:` after it.
    while value_start < length:
        char = line[value_start]
        if char not in _WHITESPACE:
            if not has_separator and char in _SEPARATORS:
                has_separator = True
            else:
                break
        value_start += 1

    return line[:key_end], line[value_start:]


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse the contents of a .properties file into a plain dict.

    Raises:
        ValueError: If a \\uXXXX escape is malformed.
    """
    entries: dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        entries[_unescape(raw_key)] = _unescape(raw_value)
    return entries


def read_properties(path: Path) -> dict[str, str]:
    """
    Read and parse a .properties file from disk.

    Args:
        path: Location of the file.

    Returns:
        Mapping of keys to decoded values.

    Raises:
        ConfigMissing: If the file doesn't exist or isn't a regular file.
        ConfigLoadError: If the file can't be read or decoded.
    """
    if not path.is_file():
        raise ConfigMissing(path)

    try:
        # utf-8-sig so a BOM written by some editors doesn't end up in the first key.
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigLoadError(f"Cannot read property file {path}: {err}") from err

    try:
        return parse_properties(text)
    except ValueError as err:
        raise ConfigLoadError(f"Invalid property file {path}: {err}") from err
