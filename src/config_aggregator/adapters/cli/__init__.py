"""CLI adapter - Click command line interface.

Contents:
    * :mod:`.root` - Root command group with global options
    * :mod:`.commands` - ``aggregate``, ``cache-clear``, ``config``, ``info``
    * :mod:`.main` - Entry point wrapper with traceback handling
"""

from __future__ import annotations

from .main import main
from .root import cli

__all__ = ["cli", "main"]
