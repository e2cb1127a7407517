"""Parsing helpers for interpreter names, version specifiers and hint lines.

Responsibilities:
- Parse `python<major>.<minor>` executable names into `VersionTag` values.
- Recognize `-X` / `-X.Y` command-line specifiers and `PY_PYTHON` values.
- Extract the version carried by an interpreter hint (shebang) line.
"""

from __future__ import annotations

import os
import re
from typing import Sequence

from .errors import MalformedConfigurationError, MalformedVersionError
from .models.datatypes import Interpreter, VersionConstraint, VersionTag

INTERPRETER_PREFIX = "python"

_NUMBER = re.compile(r"[0-9]+")
_MAJOR_SPECIFIER = re.compile(r"-([0-9])")
_EXACT_SPECIFIER = re.compile(r"-([0-9]+)\.([0-9]+)")
_EXACT_VERSION = re.compile(r"([0-9]+)\.([0-9]+)")
_MAJOR_VERSION = re.compile(r"([0-9]+)")

_HINT_MARKER = "#!"
_HINT_PREFIXES = (
    "python",
    "/usr/bin/python",
    "/usr/local/bin/python",
    "/usr/bin/env python",
)


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_interpreter_name(name: str) -> VersionTag:
    """Parse an executable base name such as `python3.10` into a version tag.

    Only fully versioned names are accepted. A bare `python` or a major-only
    `python3` usually refers to a system install and is rejected, as is
    anything with whitespace, signs, extra dots or trailing text.

    Raises:
        MalformedVersionError: If `name` is not exactly `python<digits>.<digits>`.
    """

    if not name.startswith(INTERPRETER_PREFIX):
        raise MalformedVersionError(name, f"missing `{INTERPRETER_PREFIX}` prefix")

    parts = name[len(INTERPRETER_PREFIX):].split(".")
    if len(parts) != 2:
        raise MalformedVersionError(name, "expected exactly one `.` separator")

    major, minor = parts
    if not _NUMBER.fullmatch(major):
        raise MalformedVersionError(name, f"major component `{major}` is not an integer")
    if not _NUMBER.fullmatch(minor):
        raise MalformedVersionError(name, f"minor component `{minor}` is not an integer")

    return VersionTag(major=int(major), minor=int(minor))


def parse_interpreter_path(path: str) -> Interpreter:
    """Parse an executable path and return an `Interpreter` with an absolute path."""

    version = parse_interpreter_name(os.path.basename(path))
    return Interpreter(version=version, path=os.path.abspath(path))


def parse_version_specifier(arg: str) -> VersionConstraint | None:
    """Parse a `-X` or `-X.Y` command-line specifier.

    The major-only form takes exactly one digit, so `-10` is not a specifier.
    Returns `None` for anything that is not a specifier.
    """

    match = _MAJOR_SPECIFIER.fullmatch(arg)
    if match is not None:
        return VersionConstraint(major=int(match.group(1)))

    match = _EXACT_SPECIFIER.fullmatch(arg)
    if match is not None:
        return VersionConstraint(major=int(match.group(1)), minor=int(match.group(2)))

    return None


def split_version_request(
    arguments: Sequence[str],
) -> tuple[VersionConstraint | None, list[str]]:
    """Split a leading version specifier off the argument list.

    Returns:
        The parsed constraint (or `None`) and the arguments left to forward.
    """

    if not arguments:
        return None, []
    constraint = parse_version_specifier(arguments[0])
    if constraint is None:
        return None, list(arguments)
    return constraint, list(arguments[1:])


def parse_default_version(value: str) -> VersionConstraint:
    """Parse a `PY_PYTHON` value, which must be an exact `X.Y` version.

    Raises:
        MalformedConfigurationError: If the value is not `<digits>.<digits>`.
    """

    parts = value.split(".")
    if len(parts) != 2:
        raise MalformedConfigurationError(value, "not X.Y format")

    major, minor = parts
    if not _NUMBER.fullmatch(major):
        raise MalformedConfigurationError(value, "major component not an integer")
    if not _NUMBER.fullmatch(minor):
        raise MalformedConfigurationError(value, "minor component not an integer")

    return VersionConstraint(major=int(major), minor=int(minor))


def parse_hint_line(line: str) -> str | None:
    """Return the version text following a recognized interpreter hint prefix.

    Example:
        `#!/usr/local/bin/python3.9` gives `"3.9"`, `#!/usr/bin/env python`
        gives `""`, and `#!/bin/sh` gives `None`.
    """

    text = line
    if text.startswith(_HINT_MARKER):
        text = text[len(_HINT_MARKER):]
    text = text.strip()

    for prefix in _HINT_PREFIXES:
        if text.startswith(prefix):
            return text[len(prefix):]
    return None


def parse_hint_version(line: str) -> VersionConstraint | None:
    """Parse the version constraint carried by a hint line, if any.

    `python3` style hints give a major-only constraint and `python3.9` style
    hints an exact one. Unrecognized lines and hints without a parseable
    version give `None`.
    """

    version = parse_hint_line(line)
    if version is None:
        return None

    match = _MAJOR_VERSION.fullmatch(version)
    if match is not None:
        return VersionConstraint(major=int(match.group(1)))

    match = _EXACT_VERSION.fullmatch(version)
    if match is not None:
        return VersionConstraint(major=int(match.group(1)), minor=int(match.group(2)))

    return None
