"""Public package surface for configuration aggregation.

Imports are routed through the architectural layers:
- Domain exports: merge function and directives
- Application exports: component registry
- Adapter exports: bundled providers
- Facade: :class:`ConfigAggregator`
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Bundled providers
from .adapters.providers import FileProvider, MappingProvider, OverrideProvider

# Facade
from .aggregator import ConfigAggregator

# Application exports
from .application.resolver import ComponentRegistry

# Domain exports
from .domain.directives import REMOVE, MergeRemoveKey, MergeReplaceKey
from .domain.errors import (
    AggregatorError,
    ConfigCannotBeCachedError,
    InvalidCacheArtifactError,
    InvalidConfigFileError,
    InvalidConfigProcessorError,
    InvalidConfigProviderError,
)
from .domain.merge import merge_all, merge_config

__all__ = [
    "REMOVE",
    "AggregatorError",
    "ComponentRegistry",
    "ConfigAggregator",
    "ConfigCannotBeCachedError",
    "FileProvider",
    "InvalidCacheArtifactError",
    "InvalidConfigFileError",
    "InvalidConfigProcessorError",
    "InvalidConfigProviderError",
    "MappingProvider",
    "MergeRemoveKey",
    "MergeReplaceKey",
    "OverrideProvider",
    "merge_all",
    "merge_config",
    "print_info",
]
