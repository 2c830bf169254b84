"""Domain layer - pure merge logic with no I/O or framework dependencies.

Contents:
    * :mod:`.directives` - Replace/Remove merge directives
    * :mod:`.merge` - Deep merge of configuration mappings
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .directives import REMOVE, MergeDirective, MergeRemoveKey, MergeReplaceKey, is_directive
from .enums import OutputFormat
from .errors import (
    AggregatorError,
    CacheWriteError,
    ConfigCannotBeCachedError,
    InvalidCacheArtifactError,
    InvalidConfigFileError,
    InvalidConfigProcessorError,
    InvalidConfigProviderError,
    InvalidProviderReturnTypeError,
    LiteralExportError,
    UnknownProcessorTypeError,
    UnknownProviderTypeError,
    UnsupportedConfigFormatError,
    UnsupportedProcessorTypeError,
    UnsupportedProviderTypeError,
)
from .merge import ConfigData, merge_all, merge_config

__all__ = [
    # Directives
    "REMOVE",
    "MergeDirective",
    "MergeRemoveKey",
    "MergeReplaceKey",
    "is_directive",
    # Merge
    "ConfigData",
    "merge_all",
    "merge_config",
    # Enums
    "OutputFormat",
    # Errors
    "AggregatorError",
    "CacheWriteError",
    "ConfigCannotBeCachedError",
    "InvalidCacheArtifactError",
    "InvalidConfigFileError",
    "InvalidConfigProcessorError",
    "InvalidConfigProviderError",
    "InvalidProviderReturnTypeError",
    "LiteralExportError",
    "UnknownProcessorTypeError",
    "UnknownProviderTypeError",
    "UnsupportedConfigFormatError",
    "UnsupportedProcessorTypeError",
    "UnsupportedProviderTypeError",
]
