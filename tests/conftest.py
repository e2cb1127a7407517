"""Shared pytest fixtures for the full launcher test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixture_factories import EnvironmentFactory, InterpreterDirFactory


@pytest.fixture
def make_interpreter_dir(tmp_path: Path) -> InterpreterDirFactory:
    """Provide a factory that creates a directory of fake interpreter executables."""

    def _make(name: str, *executables: str) -> Path:
        """Create `tmp_path/name` holding one empty file per executable name."""

        directory = tmp_path / name
        directory.mkdir(parents=True, exist_ok=True)
        for executable in executables:
            path = directory / executable
            path.write_text("", encoding="utf-8")
            path.chmod(0o755)
        return directory

    return _make


@pytest.fixture
def make_environment() -> EnvironmentFactory:
    """Provide a factory that creates a virtual environment layout with `bin/python`."""

    def _make(root: Path) -> Path:
        """Create `root/bin/python` and return the interpreter path."""

        interpreter = root / "bin" / "python"
        interpreter.parent.mkdir(parents=True, exist_ok=True)
        interpreter.write_text("", encoding="utf-8")
        interpreter.chmod(0o755)
        return interpreter

    return _make
