"""Module entrypoint for running the launcher as ``python -m pylaunch``."""

from __future__ import annotations

from pylaunch.cli import main


if __name__ == "__main__":
    main()
