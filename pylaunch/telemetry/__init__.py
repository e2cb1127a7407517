"""Logging scaffolds.

This package emits resolution step events for debugging interpreter choice.
"""

from .logger import LaunchLogger

__all__ = ["LaunchLogger"]
