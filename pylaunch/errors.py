"""Domain exceptions for interpreter discovery, resolution and launch diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.datatypes import VersionConstraint


class LauncherError(RuntimeError):
    """Base error carrying the launcher stage that failed and an optional user hint."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped launcher error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class MalformedVersionError(LauncherError):
    """Raised when a filename is not a versioned interpreter name like `python3.10`."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(
            stage="parse",
            detail=f"`{name}` is not a versioned python interpreter: {reason}.",
        )
        self.name = name


class DirectoryUnreadableError(LauncherError):
    """Raised when a search-path directory cannot be listed."""

    def __init__(self, directory: str, reason: str) -> None:
        super().__init__(
            stage="discovery",
            detail=f"Could not read search path directory `{directory}`: {reason}",
            hint="Check $PATH for missing or inaccessible directories.",
        )
        self.directory = directory


class NoMatchingVersionError(LauncherError):
    """Raised when no discovered interpreter satisfies a requested version."""

    def __init__(self, constraint: VersionConstraint) -> None:
        kind = "major version" if constraint.minor is None else "exact version"
        super().__init__(
            stage="resolution",
            detail=f"No python interpreters found supporting {kind} {constraint}.",
            hint="Run `py --list` to see the interpreters available on $PATH.",
        )
        self.constraint = constraint


class NoInterpretersFoundError(LauncherError):
    """Raised when the search path contains no versioned interpreters at all."""

    def __init__(self) -> None:
        super().__init__(
            stage="resolution",
            detail="No python interpreters found on $PATH.",
            hint="Install python or add its `bin` directory to $PATH.",
        )


class MalformedConfigurationError(LauncherError):
    """Raised when `PY_PYTHON` is set to something other than `X.Y`."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(
            stage="config",
            detail=f"Malformed PY_PYTHON `{value}`: {reason}.",
            hint="Set PY_PYTHON to an exact version such as `3.10`, or unset it.",
        )
        self.value = value


class ExhaustedControlFlowError(LauncherError):
    """Raised when every resolution step declined to choose an interpreter."""

    def __init__(self) -> None:
        super().__init__(
            stage="resolution",
            detail="No python interpreter found after executing the control flow.",
        )


class ExecutionFailureError(LauncherError):
    """Raised when replacing the current process with the interpreter fails."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            stage="launch",
            detail=f"Error launching `{path}`: {reason}",
            hint="Verify the interpreter exists and is executable.",
        )
        self.path = path


class UsageError(LauncherError):
    """Raised when command-line flags are combined in an unsupported way."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            stage="cli",
            detail=detail,
            hint="Run `py --help` for usage.",
        )
