"""Integration-test fixtures that capture process hand-off instead of exec'ing."""

from __future__ import annotations

import pytest

from pylaunch.models.datatypes import Resolution


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[Resolution]:
    """Record resolutions handed to `launch` by the CLI rather than replacing the process."""

    calls: list[Resolution] = []

    def _record_launch(resolution: Resolution) -> None:
        """Capture the resolution the CLI would have exec'd."""

        calls.append(resolution)

    monkeypatch.setattr("pylaunch.cli.launch", _record_launch)
    return calls
