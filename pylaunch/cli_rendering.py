"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for help text, version
info, interpreter listings and command diagnostics.
"""

from __future__ import annotations

from typing import NoReturn, Sequence

import typer

from .errors import LauncherError
from .models.datatypes import Interpreter

HELP_TEXT = """
Python launcher for Unix.

Launch your python interpreter the lazy/smart way.

py tries to find the python interpreter you most likely want to use by
looking in a few different places, in order:

1) Passed version as an argument
2) An activated virtual environment
3) A virtual environment (.venv or venv) in the current directory
4) The shebang of the target file (if relevant)
5) The PY_PYTHON environment variable
6) The latest version of python on $PATH

If py reaches the end of the list without finding a valid interpreter,
it will exit with an error message.

Usage:

  py [args] [flags]

Examples:

# Follow the control flow and launch the python it finds
$ py

# Launch the latest python3 on $PATH
$ py -3

# Launch a specific version on $PATH
$ py -3.10

# Can use normal python flags
$ py -m venv .venv

# List all found interpreters
$ py --list

Flags:
  --help      Help for py
  --list      List all found python interpreters on $PATH
  --version   Show py's version info

Environment Variables:
  PY_PYTHON        The version of python you wish to be the default (e.g. "3.10")
  PYLAUNCH_DEBUG   If set to anything will print debug information to stderr
"""


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, LauncherError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_help() -> None:
    typer.echo(HELP_TEXT)


def echo_version(version: str) -> None:
    typer.echo(f"py version: {version}")


def echo_interpreter_list(interpreters: Sequence[Interpreter]) -> None:
    """Print one `major.minor | path` row per interpreter, in the given order."""

    for interpreter in interpreters:
        typer.echo(interpreter.listing_line())
