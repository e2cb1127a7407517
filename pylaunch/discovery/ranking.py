"""Version ordering and constraint filtering for discovered interpreters.

Responsibilities:
- Rank interpreters newest first, independent of directory listing order.
- Filter interpreters by major-only or exact version constraints.
- Pick the newest interpreter satisfying a constraint.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Iterable

from ..errors import NoMatchingVersionError
from ..models.datatypes import Interpreter, VersionConstraint


def rank_interpreters(interpreters: Iterable[Interpreter]) -> list[Interpreter]:
    """Return interpreters sorted by their `VersionTag`, newest first.

    The sort is stable: interpreters with the same version keep their
    relative order (search-path order, then listing order).
    """

    return sorted(interpreters, key=attrgetter("version"), reverse=True)


def filter_major(interpreters: Iterable[Interpreter], major: int) -> list[Interpreter]:
    """Keep interpreters whose major version equals `major`."""

    return [interpreter for interpreter in interpreters if interpreter.major == major]


def filter_exact(
    interpreters: Iterable[Interpreter], major: int, minor: int
) -> list[Interpreter]:
    """Keep interpreters whose version is exactly `major.minor`."""

    return [
        interpreter
        for interpreter in interpreters
        if interpreter.major == major and interpreter.minor == minor
    ]


def filter_constraint(
    interpreters: Iterable[Interpreter], constraint: VersionConstraint
) -> list[Interpreter]:
    """Keep interpreters satisfying `constraint`, preserving input order."""

    if constraint.minor is None:
        return filter_major(interpreters, constraint.major)
    return filter_exact(interpreters, constraint.major, constraint.minor)


def select_latest(
    interpreters: Iterable[Interpreter], constraint: VersionConstraint
) -> Interpreter:
    """Return the newest interpreter satisfying `constraint`.

    Raises:
        NoMatchingVersionError: If no interpreter satisfies the constraint.
    """

    matching = rank_interpreters(filter_constraint(interpreters, constraint))
    if not matching:
        raise NoMatchingVersionError(constraint)
    return matching[0]
