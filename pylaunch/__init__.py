"""Top-level package for pylaunch.

This package provides the `py` command, a launcher that picks the python
interpreter you most likely want and replaces itself with it. The main
resolution entry point is `Resolver`.
"""

__version__ = "0.1.0"

from .resolution import Resolver

__all__ = ["Resolver", "__version__"]
