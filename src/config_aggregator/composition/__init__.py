"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Cache artifact services
from ..adapters.cache.artifact import read_cache_artifact, render_cache_artifact
from ..adapters.cache.writer import remove_cache_file, write_cache_file

# Tool settings services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Component discovery
from ..adapters.plugins import load_component_registry

# Static conformance assertions: each adapter structurally satisfies its Protocol.
if TYPE_CHECKING:
    from ..adapters.memory.cache import InMemoryCacheStore
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadComponentRegistry,
        ReadCacheArtifact,
        RemoveCacheArtifact,
        RenderCacheArtifact,
        WriteCacheArtifact,
    )
    from ..application.resolver import ComponentRegistry

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_component_registry: LoadComponentRegistry = load_component_registry
    _assert_read_cache_artifact: ReadCacheArtifact = read_cache_artifact
    _assert_render_cache_artifact: RenderCacheArtifact = render_cache_artifact
    _assert_write_cache_artifact: WriteCacheArtifact = write_cache_file
    _assert_remove_cache_artifact: RemoveCacheArtifact = remove_cache_file


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    load_component_registry: LoadComponentRegistry
    read_cache_artifact: ReadCacheArtifact
    render_cache_artifact: RenderCacheArtifact
    write_cache_artifact: WriteCacheArtifact
    remove_cache_artifact: RemoveCacheArtifact


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        load_component_registry=load_component_registry,
        read_cache_artifact=read_cache_artifact,
        render_cache_artifact=render_cache_artifact,
        write_cache_artifact=write_cache_file,
        remove_cache_artifact=remove_cache_file,
    )


def build_testing(
    *,
    cache_store: InMemoryCacheStore | None = None,
    registry: ComponentRegistry | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        cache_store: Store backing the cache ports. Pass your own to assert on
            written artifacts; a fresh one is created otherwise.
        registry: Registry returned by ``load_component_registry``. Defaults
            to an empty registry per call.
    """
    from ..adapters.memory import (
        InMemoryCacheStore,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_component_registry_in_memory,
    )

    store = cache_store if cache_store is not None else InMemoryCacheStore()
    load_registry: LoadComponentRegistry = (
        load_component_registry_in_memory if registry is None else (lambda: registry)
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        load_component_registry=load_registry,
        read_cache_artifact=store.read,
        render_cache_artifact=render_cache_artifact,
        write_cache_artifact=store.write,
        remove_cache_artifact=store.remove,
    )


__all__ = [
    # Tool settings
    "display_config",
    "get_config",
    # Cache artifacts
    "read_cache_artifact",
    "remove_cache_file",
    "render_cache_artifact",
    "write_cache_file",
    # Discovery and logging
    "init_logging",
    "load_component_registry",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
