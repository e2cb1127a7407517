"""Filesystem collaborators for interpreter discovery."""

from .filesystem import Filesystem, LocalFilesystem

__all__ = ["Filesystem", "LocalFilesystem"]
