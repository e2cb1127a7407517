"""Filesystem access used by interpreter discovery and resolution.

Responsibilities:
- Define the small set of filesystem queries the resolver depends on.
- Provide the local-disk implementation used by the CLI.
"""

from __future__ import annotations

import os
from typing import Protocol


class Filesystem(Protocol):
    """Protocol for filesystem queries used during resolution."""

    def exists(self, path: str) -> bool:
        """Return whether `path` exists."""

    def is_file(self, path: str) -> bool:
        """Return whether `path` exists and is a regular file."""

    def list_dir(self, directory: str) -> list[str]:
        """Return entry names directly under `directory`.

        Raises:
            OSError: If the directory cannot be read.
        """

    def read_first_line(self, path: str) -> str:
        """Return the first line of `path` without its line terminator."""


class LocalFilesystem:
    """Filesystem implementation backed by the local disk."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def list_dir(self, directory: str) -> list[str]:
        return os.listdir(directory)

    def read_first_line(self, path: str) -> str:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.readline().rstrip("\r\n")
