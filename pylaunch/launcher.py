"""Process hand-off to the resolved interpreter.

Responsibilities:
- Build the argv handed to the interpreter (`argv[0]` is the executable name).
- Replace the current process image, reporting failures as launcher errors.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import NoReturn, Sequence

from .errors import ExecutionFailureError
from .models.datatypes import Resolution

ExecFunction = Callable[[str, Sequence[str]], object]


def build_argv(resolution: Resolution) -> list[str]:
    """Return `[basename(path), *arguments]` for the exec call."""

    return [os.path.basename(resolution.path), *resolution.arguments]


def launch(resolution: Resolution, execv: ExecFunction = os.execv) -> NoReturn:
    """Replace the current process with the resolved interpreter.

    The current environment is inherited. On success this never returns;
    `execv` is injectable so callers can observe the hand-off in tests.

    Raises:
        ExecutionFailureError: If the exec call fails.
    """

    argv = build_argv(resolution)
    try:
        execv(resolution.path, argv)
    except OSError as exc:
        raise ExecutionFailureError(resolution.path, exc.strerror or str(exc)) from exc
    raise ExecutionFailureError(resolution.path, "exec returned without replacing the process")
