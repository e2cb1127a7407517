"""Shared typed data models for the launcher.

This package contains dataclasses used across discovery and resolution
modules to avoid cross-module coupling and circular imports.
"""

from .datatypes import Interpreter, Resolution, VersionConstraint, VersionTag

__all__ = [
    "Interpreter",
    "Resolution",
    "VersionConstraint",
    "VersionTag",
]
