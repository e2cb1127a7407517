"""Interpreter discovery across search-path directories.

Responsibilities:
- List each directory (non-recursively) and keep entries named `python<X>.<Y>`.
- Resolve candidate paths to absolute form against the injected working directory.
- Surface unreadable directories as `DirectoryUnreadableError`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from ..errors import DirectoryUnreadableError, MalformedVersionError
from ..io.filesystem import Filesystem
from ..models.datatypes import Interpreter
from ..parsing import INTERPRETER_PREFIX, parse_interpreter_path
from ..telemetry.logger import LaunchLogger


def absolute_directory(directory: str, cwd: Path) -> str:
    """Return `directory` as an absolute, normalized path relative to `cwd`."""

    if os.path.isabs(directory):
        return os.path.normpath(directory)
    return os.path.normpath(os.path.join(str(cwd), directory))


def scan_directory(
    directory: str,
    filesystem: Filesystem,
    cwd: Path,
    logger: LaunchLogger | None = None,
) -> list[Interpreter]:
    """Return versioned interpreters directly under `directory` in listing order.

    Entries whose names do not parse are skipped.

    Raises:
        DirectoryUnreadableError: If the directory cannot be listed.
    """

    resolved = absolute_directory(directory, cwd)
    try:
        names = filesystem.list_dir(resolved)
    except OSError as exc:
        raise DirectoryUnreadableError(directory, exc.strerror or str(exc)) from exc

    interpreters: list[Interpreter] = []
    for name in names:
        try:
            interpreter = parse_interpreter_path(os.path.join(resolved, name))
        except MalformedVersionError:
            if logger is not None and name.startswith(INTERPRETER_PREFIX):
                logger.debug("discovery", "ignored", directory=resolved, entry=name)
            continue
        interpreters.append(interpreter)
    return interpreters


def discover_interpreters(
    directories: Sequence[str],
    filesystem: Filesystem,
    cwd: Path,
    logger: LaunchLogger | None = None,
) -> list[Interpreter]:
    """Scan every directory in order and accumulate the interpreters found.

    Interpreters found in several directories are all kept. Any unreadable
    directory aborts the whole scan.
    """

    interpreters: list[Interpreter] = []
    for directory in directories:
        found = scan_directory(directory, filesystem, cwd, logger)
        if logger is not None:
            logger.debug("discovery", "scanned", directory=directory, found=len(found))
        interpreters.extend(found)
    return interpreters
