"""Configuration model and loaders for the launcher.

Responsibilities:
- Define the resolution inputs as a typed, immutable dataclass.
- Provide a loader that reads them from environment variables and the cwd.

Key types:
- `LauncherConfig`: environment signals consulted by one resolution.
- `ConfigLoader`: static construction helpers for `LauncherConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

from .parsing import normalize_optional_string

SEARCH_PATH_ENV_KEY = "PATH"
VIRTUAL_ENV_ENV_KEY = "VIRTUAL_ENV"
DEFAULT_VERSION_ENV_KEY = "PY_PYTHON"
DEBUG_ENV_KEY = "PYLAUNCH_DEBUG"


@dataclass(frozen=True, slots=True)
class LauncherConfig:
    """Inputs for one interpreter resolution.

    Attributes:
        search_path: Raw `os.pathsep` separated directory list (usually `$PATH`).
        virtual_env: Activated virtual environment directory, if any.
        default_version: Raw `PY_PYTHON` value, validated only when consulted.
        cwd: Absolute working directory used for local environments and
            relative search-path entries.
        debug: Whether step-level debug logging is enabled.
    """

    search_path: str = ""
    virtual_env: str | None = None
    default_version: str | None = None
    cwd: Path = Path("/")
    debug: bool = False


class ConfigLoader:
    """Factory methods for creating `LauncherConfig` from external sources."""

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> LauncherConfig:
        """Create a config from environment variables and the working directory.

        Blank `VIRTUAL_ENV` and `PYLAUNCH_DEBUG` values count as unset. An empty
        `PY_PYTHON` is unset too, but any other value is kept verbatim so that
        malformed values are reported rather than silently repaired.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env
        resolved_cwd = cwd if cwd is not None else Path.cwd()

        return LauncherConfig(
            search_path=env_map.get(SEARCH_PATH_ENV_KEY, ""),
            virtual_env=normalize_optional_string(env_map.get(VIRTUAL_ENV_ENV_KEY)),
            default_version=env_map.get(DEFAULT_VERSION_ENV_KEY) or None,
            cwd=resolved_cwd.absolute(),
            debug=normalize_optional_string(env_map.get(DEBUG_ENV_KEY)) is not None,
        )
