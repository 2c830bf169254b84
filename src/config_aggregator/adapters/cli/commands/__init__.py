"""CLI command implementations.

Contents:
    * Aggregation commands from :mod:`.aggregate`
    * Settings display from :mod:`.config`
    * Package metadata from :mod:`.info`
"""

from __future__ import annotations

from .aggregate import cli_aggregate, cli_cache_clear
from .config import cli_config
from .info import cli_info

__all__ = [
    "cli_aggregate",
    "cli_cache_clear",
    "cli_config",
    "cli_info",
]
