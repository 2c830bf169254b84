"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for collaborators and adapters
    * :mod:`.resolver` - Provider/processor reference resolution and registry
    * :mod:`.pipeline` - Pre-process, merge-fold, post-process
    * :mod:`.cache` - Cache load/persist lifecycle
"""

from __future__ import annotations

from .cache import CACHE_FILEMODE, ENABLE_CACHE, cache_config, load_config_from_cache
from .pipeline import load_config_from_providers, post_process_config, pre_process_providers, run_pipeline
from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadComponentRegistry,
    PostProcessor,
    PreProcessor,
    ProcessorReference,
    Provider,
    ProviderReference,
    ReadCacheArtifact,
    RemoveCacheArtifact,
    RenderCacheArtifact,
    WriteCacheArtifact,
)
from .resolver import ComponentRegistry, describe_type, resolve_processor, resolve_provider

__all__ = [
    # Cache
    "CACHE_FILEMODE",
    "ENABLE_CACHE",
    "cache_config",
    "load_config_from_cache",
    # Pipeline
    "load_config_from_providers",
    "post_process_config",
    "pre_process_providers",
    "run_pipeline",
    # Resolver
    "ComponentRegistry",
    "describe_type",
    "resolve_processor",
    "resolve_provider",
    # Ports
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadComponentRegistry",
    "PostProcessor",
    "PreProcessor",
    "ProcessorReference",
    "Provider",
    "ProviderReference",
    "ReadCacheArtifact",
    "RemoveCacheArtifact",
    "RenderCacheArtifact",
    "WriteCacheArtifact",
]
