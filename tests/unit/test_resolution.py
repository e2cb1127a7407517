"""Unit tests for the interpreter resolution control flow."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pytest import MonkeyPatch

from pylaunch.config import LauncherConfig
from pylaunch.errors import (
    DirectoryUnreadableError,
    ExhaustedControlFlowError,
    MalformedConfigurationError,
    NoInterpretersFoundError,
    NoMatchingVersionError,
)
from pylaunch.models.datatypes import VersionConstraint
from pylaunch.resolution import Resolver, environment_interpreter
from tests.fixture_factories import EnvironmentFactory, InterpreterDirFactory


def _config(tmp_path: Path, *directories: Path, **overrides: object) -> LauncherConfig:
    """Build a config whose search path holds `directories` and cwd is `tmp_path/project`."""

    project = tmp_path / "project"
    project.mkdir(exist_ok=True)
    values: dict[str, object] = {
        "search_path": os.pathsep.join(str(directory) for directory in directories),
        "cwd": project,
    }
    values.update(overrides)
    return LauncherConfig(**values)  # type: ignore[arg-type]


@pytest.fixture
def bin_dirs(make_interpreter_dir: InterpreterDirFactory) -> tuple[Path, Path]:
    """Two search-path directories holding a spread of interpreter versions."""

    return (
        make_interpreter_dir("usr-local-bin", "python3.10", "python3.9", "python3"),
        make_interpreter_dir("usr-bin", "python3.8", "python2.7", "python3.11", "python"),
    )


def test_explicit_major_request_picks_newest_matching(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    resolver = Resolver(_config(tmp_path, *bin_dirs))

    resolution = resolver.resolve(["-c", "pass"], constraint=VersionConstraint(3))

    assert resolution.path == str(bin_dirs[1] / "python3.11")
    assert resolution.arguments == ("-c", "pass")
    assert resolution.source == "explicit-version"


def test_explicit_exact_request_picks_exact_version(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    resolution = Resolver(_config(tmp_path, *bin_dirs)).resolve(
        constraint=VersionConstraint(3, 9)
    )

    assert resolution.path == str(bin_dirs[0] / "python3.9")
    assert resolution.arguments == ()


def test_explicit_request_bypasses_environments(
    tmp_path: Path,
    bin_dirs: tuple[Path, Path],
    make_environment: EnvironmentFactory,
) -> None:
    """An explicit version wins over an activated or local environment."""

    active = tmp_path / "active-env"
    make_environment(active)
    config = _config(tmp_path, *bin_dirs, virtual_env=str(active))
    make_environment(config.cwd / ".venv")

    resolution = Resolver(config).resolve(constraint=VersionConstraint(2))

    assert resolution.path == str(bin_dirs[1] / "python2.7")


def test_explicit_request_without_match_raises(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    with pytest.raises(NoMatchingVersionError) as excinfo:
        Resolver(_config(tmp_path, *bin_dirs)).resolve(constraint=VersionConstraint(3, 4))

    assert excinfo.value.constraint == VersionConstraint(3, 4)


def test_active_environment_is_preferred_over_local_environment(
    tmp_path: Path,
    bin_dirs: tuple[Path, Path],
    make_environment: EnvironmentFactory,
) -> None:
    active = make_environment(tmp_path / "active-env")
    config = _config(tmp_path, *bin_dirs, virtual_env=str(tmp_path / "active-env"))
    make_environment(config.cwd / ".venv")

    resolution = Resolver(config).resolve(["script.py"])

    assert resolution.path == str(active)
    assert resolution.arguments == ("script.py",)
    assert resolution.source == "active-environment"


def test_active_environment_without_interpreter_falls_through(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    """A stale `VIRTUAL_ENV` should not stop resolution."""

    config = _config(tmp_path, *bin_dirs, virtual_env=str(tmp_path / "deleted-env"))

    resolution = Resolver(config).resolve()

    assert resolution.source == "latest-on-path"
    assert resolution.path == str(bin_dirs[1] / "python3.11")


def test_active_environment_does_not_scan_search_path(
    tmp_path: Path, make_environment: EnvironmentFactory
) -> None:
    """Resolving via `VIRTUAL_ENV` should succeed even with a broken search path."""

    active = make_environment(tmp_path / "active-env")
    config = _config(
        tmp_path, tmp_path / "missing-dir", virtual_env=str(tmp_path / "active-env")
    )

    assert Resolver(config).resolve().path == str(active)


@pytest.mark.parametrize("env_dir", [".venv", "venv"])
def test_local_environment_is_used(
    tmp_path: Path,
    bin_dirs: tuple[Path, Path],
    make_environment: EnvironmentFactory,
    env_dir: str,
) -> None:
    config = _config(tmp_path, *bin_dirs)
    interpreter = make_environment(config.cwd / env_dir)

    resolution = Resolver(config).resolve(["-m", "pytest"])

    assert resolution.path == str(interpreter)
    assert resolution.arguments == ("-m", "pytest")
    assert resolution.source == "local-environment"


def test_dot_venv_is_preferred_over_venv(
    tmp_path: Path,
    bin_dirs: tuple[Path, Path],
    make_environment: EnvironmentFactory,
) -> None:
    config = _config(tmp_path, *bin_dirs)
    dot_venv = make_environment(config.cwd / ".venv")
    make_environment(config.cwd / "venv")

    assert Resolver(config).resolve().path == str(dot_venv)


def test_local_environment_in_parent_directory_is_ignored(
    tmp_path: Path,
    bin_dirs: tuple[Path, Path],
    make_environment: EnvironmentFactory,
) -> None:
    """Only the working directory itself is checked for environments."""

    make_environment(tmp_path / ".venv")
    config = _config(tmp_path, *bin_dirs)

    assert Resolver(config).resolve().source == "latest-on-path"


def test_local_environment_wins_over_interpreter_hint(
    tmp_path: Path,
    bin_dirs: tuple[Path, Path],
    make_environment: EnvironmentFactory,
) -> None:
    config = _config(tmp_path, *bin_dirs)
    interpreter = make_environment(config.cwd / ".venv")
    script = config.cwd / "script.py"
    script.write_text("#!/usr/bin/env python3.9\n", encoding="utf-8")

    assert Resolver(config).resolve([str(script)]).path == str(interpreter)


@pytest.mark.parametrize(
    ("hint", "expected"),
    [
        ("#!/usr/bin/env python3.9", "python3.9"),
        ("#!/usr/bin/python3", "python3.11"),
        ("#! /usr/local/bin/python2.7", "python2.7"),
    ],
)
def test_interpreter_hint_selects_version(
    tmp_path: Path, bin_dirs: tuple[Path, Path], hint: str, expected: str
) -> None:
    config = _config(tmp_path, *bin_dirs, default_version="3.8")
    script = config.cwd / "script.py"
    script.write_text(f"{hint}\nprint('hello')\n", encoding="utf-8")

    resolution = Resolver(config).resolve([str(script)])

    assert os.path.basename(resolution.path) == expected
    assert resolution.arguments == (str(script),)
    assert resolution.source == "interpreter-hint"


def test_interpreter_hint_resolves_relative_file_against_cwd(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    config = _config(tmp_path, *bin_dirs)
    (config.cwd / "tool.py").write_text("#!/usr/bin/python3.10\n", encoding="utf-8")

    resolution = Resolver(config).resolve(["tool.py"])

    assert resolution.path == str(bin_dirs[0] / "python3.10")
    assert resolution.arguments == ("tool.py",)


@pytest.mark.parametrize(
    "first_line",
    ["#!/usr/bin/env python", "#!/bin/sh", "import sys", "#!/usr/bin/env python3 -u", ""],
)
def test_interpreter_hint_without_version_falls_through(
    tmp_path: Path, bin_dirs: tuple[Path, Path], first_line: str
) -> None:
    config = _config(tmp_path, *bin_dirs, default_version="3.8")
    script = config.cwd / "script.py"
    script.write_text(f"{first_line}\n", encoding="utf-8")

    resolution = Resolver(config).resolve([str(script)])

    assert resolution.source == "default-version"
    assert resolution.path == str(bin_dirs[1] / "python3.8")


def test_interpreter_hint_requires_single_argument(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    """A hinted file followed by more arguments does not consult the hint."""

    config = _config(tmp_path, *bin_dirs)
    script = config.cwd / "script.py"
    script.write_text("#!/usr/bin/python2.7\n", encoding="utf-8")

    resolution = Resolver(config).resolve([str(script), "--verbose"])

    assert resolution.source == "latest-on-path"


def test_interpreter_hint_ignores_missing_files_and_directories(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    config = _config(tmp_path, *bin_dirs)
    (config.cwd / "package").mkdir()

    assert Resolver(config).resolve(["missing.py"]).source == "latest-on-path"
    assert Resolver(config).resolve(["package"]).source == "latest-on-path"


def test_interpreter_hint_for_missing_version_raises(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    config = _config(tmp_path, *bin_dirs)
    script = config.cwd / "script.py"
    script.write_text("#!/usr/bin/env python3.2\n", encoding="utf-8")

    with pytest.raises(NoMatchingVersionError):
        Resolver(config).resolve([str(script)])


def test_default_version_selects_exact_interpreter(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    resolution = Resolver(_config(tmp_path, *bin_dirs, default_version="3.10")).resolve(
        ["-V"]
    )

    assert resolution.path == str(bin_dirs[0] / "python3.10")
    assert resolution.arguments == ("-V",)
    assert resolution.source == "default-version"


@pytest.mark.parametrize("value", ["3", "three.ten", "3.10.1", " "])
def test_malformed_default_version_is_fatal(
    tmp_path: Path, bin_dirs: tuple[Path, Path], value: str
) -> None:
    with pytest.raises(MalformedConfigurationError):
        Resolver(_config(tmp_path, *bin_dirs, default_version=value)).resolve()


def test_default_version_not_installed_raises(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    with pytest.raises(NoMatchingVersionError):
        Resolver(_config(tmp_path, *bin_dirs, default_version="3.12")).resolve()


def test_falls_back_to_latest_on_search_path(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    resolution = Resolver(_config(tmp_path, *bin_dirs)).resolve(["script.py", "-x"])

    assert resolution.path == str(bin_dirs[1] / "python3.11")
    assert resolution.arguments == ("script.py", "-x")
    assert resolution.source == "latest-on-path"


def test_latest_prefers_first_directory_for_equal_versions(
    tmp_path: Path, make_interpreter_dir: InterpreterDirFactory
) -> None:
    first = make_interpreter_dir("first", "python3.12")
    second = make_interpreter_dir("second", "python3.12")

    resolution = Resolver(_config(tmp_path, first, second, first)).resolve()

    assert resolution.path == str(first / "python3.12")


def test_no_interpreters_on_search_path_raises(
    tmp_path: Path, make_interpreter_dir: InterpreterDirFactory
) -> None:
    empty = make_interpreter_dir("empty", "python", "python3", "ruby3.2")

    with pytest.raises(NoInterpretersFoundError):
        Resolver(_config(tmp_path, empty)).resolve()


def test_empty_search_path_raises_no_interpreters(tmp_path: Path) -> None:
    with pytest.raises(NoInterpretersFoundError):
        Resolver(_config(tmp_path)).resolve()


def test_unreadable_search_path_directory_is_fatal(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    config = _config(tmp_path, bin_dirs[0], tmp_path / "missing")

    with pytest.raises(DirectoryUnreadableError):
        Resolver(config).resolve()


def test_empty_search_path_segment_scans_working_directory(tmp_path: Path) -> None:
    """An empty `$PATH` element means the working directory."""

    config = _config(tmp_path)
    (config.cwd / "python3.13").write_text("", encoding="utf-8")
    config = LauncherConfig(search_path=os.pathsep, cwd=config.cwd)

    assert Resolver(config).resolve().path == str(config.cwd / "python3.13")


def test_exhausted_control_flow_is_reported(
    tmp_path: Path, bin_dirs: tuple[Path, Path], monkeypatch: MonkeyPatch
) -> None:
    """If every step declines, resolution fails with a dedicated error."""

    monkeypatch.setattr(Resolver, "_latest_on_path", lambda self, arguments: None)

    with pytest.raises(ExhaustedControlFlowError):
        Resolver(_config(tmp_path, *bin_dirs)).resolve()


def test_list_interpreters_returns_ranked_interpreters(
    tmp_path: Path, bin_dirs: tuple[Path, Path]
) -> None:
    listed = Resolver(_config(tmp_path, *bin_dirs)).list_interpreters()

    assert [str(interpreter.version) for interpreter in listed] == [
        "3.11",
        "3.10",
        "3.9",
        "3.8",
        "2.7",
    ]


def test_environment_interpreter_layout() -> None:
    assert environment_interpreter("/work/.venv") == os.path.join("/work/.venv", "bin", "python")
