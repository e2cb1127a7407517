"""Command-line interface for the python launcher.

Responsibilities:
- Capture every command-line token verbatim, `--` included; `-3.10` style
  specifiers would confuse a regular option parser, so flags are dispatched
  by hand.
- Resolve the interpreter through `Resolver` and hand the process over to it.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from typing import Annotated, Sequence

import click
import typer
from typer.core import TyperCommand

from . import __version__
from .cli_rendering import (
    echo_help,
    echo_interpreter_list,
    echo_version,
    exit_with_command_error,
)
from .config import ConfigLoader
from .errors import UsageError
from .launcher import launch
from .models.datatypes import Resolution
from .parsing import split_version_request
from .resolution import Resolver
from .telemetry.logger import LaunchLogger

HELP_FLAG = "--help"
LIST_FLAG = "--list"
VERSION_FLAG = "--version"
_LAUNCHER_FLAGS = frozenset({HELP_FLAG, LIST_FLAG, VERSION_FLAG})
RAW_ARGUMENTS_KEY = "pylaunch.raw_arguments"


class RawArgumentsCommand(TyperCommand):
    """Typer command that records the unparsed token list in `ctx.meta`.

    Click drops the first `--` it sees, while python must receive it.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGUMENTS_KEY] = list(args)
        return super().parse_args(ctx, args)


app = typer.Typer(
    name="py",
    add_completion=False,
    help="Python launcher for Unix.",
)


def _handle_launcher_flag(resolver: Resolver, flag: str) -> None:
    """Run one of py's own flags (`--help`, `--list`, `--version`)."""

    if flag == HELP_FLAG:
        echo_help()
    elif flag == VERSION_FLAG:
        echo_version(__version__)
    else:
        echo_interpreter_list(resolver.list_interpreters())


def dispatch(resolver: Resolver, arguments: Sequence[str]) -> Resolution | None:
    """Interpret raw command-line arguments.

    Returns:
        The resolution to launch, or `None` when a launcher flag was handled.

    Raises:
        UsageError: If a launcher flag is combined with other arguments.
        LauncherError: If resolution fails.
    """

    if arguments and arguments[0] in _LAUNCHER_FLAGS:
        if len(arguments) > 1:
            raise UsageError(f"cannot use {arguments[0]} with any other arguments")
        _handle_launcher_flag(resolver, arguments[0])
        return None

    constraint, forwarded = split_version_request(arguments)
    return resolver.resolve(forwarded, constraint=constraint)


@app.command(
    cls=RawArgumentsCommand,
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    }
)
def py_command(
    ctx: typer.Context,
    arguments: Annotated[
        list[str] | None,
        typer.Argument(
            help="Version specifier (`-3`, `-3.10`), launcher flag, or arguments for python.",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Launch the most appropriate python interpreter."""

    raw_arguments = ctx.meta.get(RAW_ARGUMENTS_KEY, list(arguments or []))
    try:
        config = ConfigLoader.from_env()
        resolver = Resolver(config, logger=LaunchLogger(debug=config.debug))
        resolution = dispatch(resolver, raw_arguments)
        if resolution is not None:
            launch(resolution)
    except Exception as exc:
        exit_with_command_error("py", exc)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
