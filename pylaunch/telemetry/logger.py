"""Structured launcher logging utilities.

Responsibilities:
- Emit concise, deterministic step-level resolution logs.
- Route output through `loguru` to stderr so launched programs keep stdout.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class LaunchLogger:
    """Emit deterministic step logs for interpreter resolution.

    Debug lines are only written when `debug` is enabled, which the CLI
    switches on through `PYLAUNCH_DEBUG`.
    """

    def __init__(self, sink: TextIO | None = None, debug: bool = False) -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        self.debug_enabled = debug
        _loguru_logger.remove()
        _loguru_logger.add(
            self._sink,
            format="{message}",
            level="DEBUG" if debug else "WARNING",
            colorize=False,
        )

    def _emit(self, level: str, event: str, step: str, **context: object) -> None:
        """Emit one structured launcher log line."""

        line = f"[py] level={level} step={step} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def debug(self, step: str, event: str, **context: object) -> None:
        """Emit a debug-level event for one resolution step."""

        self._emit("DEBUG", event, step, **context)

    def log_step_start(self, step: str) -> None:
        self._emit("DEBUG", "start", step)

    def log_step_skipped(self, step: str, reason: str) -> None:
        """Emit a fall-through event for a step that did not apply."""

        self._emit("DEBUG", "skipped", step, reason=reason)

    def log_resolved(self, step: str, path: str, arguments: tuple[str, ...]) -> None:
        self._emit("DEBUG", "resolved", step, interpreter=path, arguments=len(arguments))

    def log_step_failure(self, step: str, error_type: str) -> None:
        """Emit a step-failure event without echoing user arguments."""

        self._emit("DEBUG", "failure", step, error_type=error_type)
