"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.providers` - Bundled mapping, file, and override providers
    * :mod:`.cache` - Cache artifact rendering, parsing, and atomic writes
    * :mod:`.plugins` - Entry point discovery of named components
    * :mod:`.config` - Tool settings loading and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
