"""Search-path splitting and de-duplication.

Responsibilities:
- Split a `$PATH` style string into directory entries with Unix shell semantics.
- Drop repeated entries while keeping first-occurrence order.
"""

from __future__ import annotations

import os
from typing import Iterable

CURRENT_DIRECTORY = "."


def split_search_path(value: str | None, separator: str = os.pathsep) -> list[str]:
    """Split a search-path string into entries.

    An empty element means the current directory, so it becomes `.`.
    An unset or empty string yields no entries at all.
    """

    if not value:
        return []
    return [entry or CURRENT_DIRECTORY for entry in value.split(separator)]


def dedupe_paths(paths: Iterable[str]) -> list[str]:
    """Return `paths` without repeats, keeping each entry's first position."""

    seen: set[str] = set()
    deduped: list[str] = []
    for path in paths:
        if path in seen:
            continue
        seen.add(path)
        deduped.append(path)
    return deduped


def search_path_entries(value: str | None, separator: str = os.pathsep) -> list[str]:
    """Split and de-duplicate a search-path string.

    Empty elements are replaced by `.` before de-duplication, so several empty
    elements collapse to a single `.` at the position of the first one.
    """

    return dedupe_paths(split_search_path(value, separator))
