"""Cache artifact adapter - literal rendering, parsing, and atomic writes.

Contents:
    * :mod:`.artifact` - Artifact format (header + Python literal)
    * :mod:`.writer` - Atomic file writes and removal
"""

from __future__ import annotations

from .artifact import CACHE_TEMPLATE, export_literal, parse_cache_artifact, read_cache_artifact, render_cache_artifact
from .writer import parse_mode, remove_cache_file, write_cache_file

__all__ = [
    "CACHE_TEMPLATE",
    "export_literal",
    "parse_cache_artifact",
    "parse_mode",
    "read_cache_artifact",
    "remove_cache_file",
    "render_cache_artifact",
    "write_cache_file",
]
