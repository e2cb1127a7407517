"""Core datatypes shared across launcher modules.

Responsibilities:
- Represent immutable records exchanged between discovery and resolution.
- Provide explicit typing for version ordering and constraint matching.

Key types:
- `VersionTag`, `Interpreter`, `VersionConstraint`, and `Resolution`.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, order=True)
class VersionTag:
    """A `(major, minor)` interpreter version parsed from an executable name.

    Instances order numerically by major, then minor, so `3.10` sorts after
    `3.9`. Ranking interpreters uses this order.

    Attributes:
        major: Major version component, e.g. `3`.
        minor: Minor version component, e.g. `10` (an integer, not a fraction).
    """

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True, slots=True)
class Interpreter:
    """A versioned python executable discovered on the search path.

    Attributes:
        version: Version parsed from the executable's base name.
        path: Absolute path to the executable.
    """

    version: VersionTag
    path: str

    @property
    def major(self) -> int:
        return self.version.major

    @property
    def minor(self) -> int:
        return self.version.minor

    def listing_line(self) -> str:
        """Return the human-readable `--list` row for this interpreter."""

        return f"{self.version}\t| {self.path}"


@dataclass(frozen=True, slots=True)
class VersionConstraint:
    """A requested version: major-only when `minor` is `None`, exact otherwise."""

    major: int
    minor: int | None = None

    @property
    def is_exact(self) -> bool:
        return self.minor is not None

    def is_satisfied_by(self, version: VersionTag) -> bool:
        """Return whether `version` matches this constraint."""

        if version.major != self.major:
            return False
        return self.minor is None or version.minor == self.minor

    def __str__(self) -> str:
        if self.minor is None:
            return str(self.major)
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True, slots=True)
class Resolution:
    """The interpreter chosen by the resolver and the arguments to hand it.

    Attributes:
        path: Absolute path of the executable to launch.
        source: Name of the resolution step that chose the interpreter.
        arguments: Arguments forwarded after `argv[0]`.
    """

    path: str
    source: str
    arguments: tuple[str, ...] = field(default_factory=tuple)
