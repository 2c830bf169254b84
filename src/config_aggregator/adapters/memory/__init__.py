"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that operate entirely in
memory -- no filesystem, no entry points, no logging framework.

Contents:
    * :mod:`.cache` - Dict-backed cache artifact store (InMemoryCacheStore)
    * :mod:`.config` - In-memory configuration and registry adapters
    * :mod:`.logging` - No-op logging initializer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .cache import InMemoryCacheStore
from .config import display_config_in_memory, get_config_in_memory, load_component_registry_in_memory
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from config_aggregator.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadComponentRegistry,
        ReadCacheArtifact,
        RemoveCacheArtifact,
        WriteCacheArtifact,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_load_registry: LoadComponentRegistry = load_component_registry_in_memory
    _assert_read: ReadCacheArtifact = InMemoryCacheStore().read
    _assert_write: WriteCacheArtifact = InMemoryCacheStore().write
    _assert_remove: RemoveCacheArtifact = InMemoryCacheStore().remove

__all__ = [
    "InMemoryCacheStore",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_component_registry_in_memory",
]
