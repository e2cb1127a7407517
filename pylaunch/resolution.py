"""Interpreter resolution for the launcher.

Responsibilities:
- Define the fixed precedence in which environment signals are consulted.
- Turn those signals into exactly one interpreter path and argument list.

Resolution order:
1. Explicit version request (`py -3`, `py -3.10`).
2. Activated virtual environment (`$VIRTUAL_ENV`).
3. `.venv` then `venv` in the working directory.
4. Interpreter hint on the first line of a single file argument.
5. `PY_PYTHON` default version.
6. Newest interpreter on `$PATH`.

Key types:
- `Resolver`: runs the chain against a `LauncherConfig`.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from functools import partial
from typing import Sequence

from .config import LauncherConfig
from .discovery.ranking import rank_interpreters, select_latest
from .discovery.registry import discover_interpreters
from .discovery.search_path import search_path_entries
from .errors import (
    ExhaustedControlFlowError,
    LauncherError,
    NoInterpretersFoundError,
)
from .io.filesystem import Filesystem, LocalFilesystem
from .models.datatypes import Interpreter, Resolution, VersionConstraint
from .parsing import parse_default_version, parse_hint_version
from .telemetry.logger import LaunchLogger

LOCAL_ENVIRONMENT_DIRS = (".venv", "venv")
_ENVIRONMENT_INTERPRETER = ("bin", "python")

_Step = Callable[[tuple[str, ...]], "Resolution | None"]


def environment_interpreter(environment_dir: str) -> str:
    """Return the interpreter path inside a virtual environment directory."""

    return os.path.join(environment_dir, *_ENVIRONMENT_INTERPRETER)


class Resolver:
    """Choose the interpreter to launch for one invocation.

    Each step either returns a `Resolution`, returns `None` to fall through
    to the next step, or raises a `LauncherError`.
    """

    def __init__(
        self,
        config: LauncherConfig,
        filesystem: Filesystem | None = None,
        logger: LaunchLogger | None = None,
    ) -> None:
        self._config = config
        self._filesystem = filesystem if filesystem is not None else LocalFilesystem()
        self._logger = logger

    def resolve(
        self,
        arguments: Sequence[str] = (),
        constraint: VersionConstraint | None = None,
    ) -> Resolution:
        """Resolve the interpreter to launch and the arguments to forward.

        Args:
            arguments: Arguments to forward to the interpreter.
            constraint: Explicit version request parsed from the command line.

        Raises:
            LauncherError: If resolution fails at any step.
        """

        forwarded = tuple(arguments)
        if constraint is not None:
            explicit = partial(self._explicit_version, constraint)
            resolution = self._run_step("explicit-version", explicit, forwarded)
            if resolution is not None:
                return resolution
            raise ExhaustedControlFlowError()

        steps: tuple[tuple[str, _Step], ...] = (
            ("active-environment", self._active_environment),
            ("local-environment", self._local_environment),
            ("interpreter-hint", self._interpreter_hint),
            ("default-version", self._default_version),
            ("latest-on-path", self._latest_on_path),
        )
        for name, step in steps:
            resolution = self._run_step(name, step, forwarded)
            if resolution is not None:
                return resolution

        raise ExhaustedControlFlowError()

    def list_interpreters(self) -> list[Interpreter]:
        """Return every interpreter on the search path, newest first.

        Raises:
            NoInterpretersFoundError: If the search path holds no interpreters.
        """

        interpreters = rank_interpreters(self._discover())
        if not interpreters:
            raise NoInterpretersFoundError()
        return interpreters

    def _run_step(
        self, name: str, step: _Step, arguments: tuple[str, ...]
    ) -> Resolution | None:
        """Run one step with start/skip/resolve/failure logging."""

        self._log_step_start(name)
        try:
            resolution = step(arguments)
        except LauncherError as exc:
            if self._logger is not None:
                self._logger.log_step_failure(name, type(exc).__name__)
            raise
        if resolution is None:
            return None
        if self._logger is not None:
            self._logger.log_resolved(name, resolution.path, resolution.arguments)
        return resolution

    def _explicit_version(
        self, constraint: VersionConstraint, arguments: tuple[str, ...]
    ) -> Resolution:
        interpreter = select_latest(self._discover(), constraint)
        return Resolution(path=interpreter.path, arguments=arguments, source="explicit-version")

    def _active_environment(self, arguments: tuple[str, ...]) -> Resolution | None:
        """Use `$VIRTUAL_ENV/bin/python` when an environment is activated and present."""

        virtual_env = self._config.virtual_env
        if virtual_env is None:
            self._log_skipped("active-environment", "unset")
            return None

        interpreter = environment_interpreter(virtual_env)
        if not self._filesystem.exists(interpreter):
            self._log_skipped("active-environment", "missing-interpreter")
            return None
        return Resolution(path=interpreter, arguments=arguments, source="active-environment")

    def _local_environment(self, arguments: tuple[str, ...]) -> Resolution | None:
        """Use `.venv` in the working directory, then `venv`."""

        for directory in LOCAL_ENVIRONMENT_DIRS:
            interpreter = environment_interpreter(os.path.join(str(self._config.cwd), directory))
            if self._filesystem.exists(interpreter):
                return Resolution(
                    path=interpreter, arguments=arguments, source="local-environment"
                )
        self._log_skipped("local-environment", "not-found")
        return None

    def _interpreter_hint(self, arguments: tuple[str, ...]) -> Resolution | None:
        """Use the version named on the first line of a single file argument.

        Only applies when exactly one argument names an existing file. A hint
        without a version (e.g. `#!/usr/bin/env python`) falls through.
        """

        if len(arguments) != 1:
            self._log_skipped("interpreter-hint", "not-single-argument")
            return None

        target = arguments[0]
        if not os.path.isabs(target):
            target = os.path.join(str(self._config.cwd), target)
        if not self._filesystem.is_file(target):
            self._log_skipped("interpreter-hint", "not-a-file")
            return None

        try:
            line = self._filesystem.read_first_line(target)
        except OSError:
            self._log_skipped("interpreter-hint", "unreadable")
            return None

        constraint = parse_hint_version(line)
        if constraint is None:
            self._log_skipped("interpreter-hint", "no-version")
            return None

        if self._logger is not None:
            self._logger.debug("interpreter-hint", "found", version=constraint)
        interpreter = select_latest(self._discover(), constraint)
        return Resolution(path=interpreter.path, arguments=arguments, source="interpreter-hint")

    def _default_version(self, arguments: tuple[str, ...]) -> Resolution | None:
        """Use the exact version named by `PY_PYTHON`, failing on malformed values."""

        value = self._config.default_version
        if value is None:
            self._log_skipped("default-version", "unset")
            return None

        constraint = parse_default_version(value)
        interpreter = select_latest(self._discover(), constraint)
        return Resolution(path=interpreter.path, arguments=arguments, source="default-version")

    def _latest_on_path(self, arguments: tuple[str, ...]) -> Resolution | None:
        latest = self.list_interpreters()[0]
        return Resolution(path=latest.path, arguments=arguments, source="latest-on-path")

    def _discover(self) -> list[Interpreter]:
        """Scan every de-duplicated search-path directory."""

        directories = search_path_entries(self._config.search_path)
        if self._logger is not None:
            self._logger.debug("discovery", "search-path", directories=len(directories))
        return discover_interpreters(
            directories, self._filesystem, self._config.cwd, self._logger
        )

    def _log_step_start(self, step: str) -> None:
        if self._logger is not None:
            self._logger.log_step_start(step)

    def _log_skipped(self, step: str, reason: str) -> None:
        if self._logger is not None:
            self._logger.log_step_skipped(step, reason)
