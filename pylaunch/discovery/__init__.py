"""Interpreter discovery package.

This package contains search-path handling, directory scanning, and the
version ordering and filtering applied to discovered interpreters.
"""

from .ranking import (
    filter_constraint,
    filter_exact,
    filter_major,
    rank_interpreters,
    select_latest,
)
from .registry import discover_interpreters, scan_directory
from .search_path import dedupe_paths, search_path_entries, split_search_path

__all__ = [
    "dedupe_paths",
    "discover_interpreters",
    "filter_constraint",
    "filter_exact",
    "filter_major",
    "rank_interpreters",
    "scan_directory",
    "search_path_entries",
    "select_latest",
    "split_search_path",
]
