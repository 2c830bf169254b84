"""Bundled configuration providers.

Contents:
    * :mod:`.mapping` - Fixed in-code mapping
    * :mod:`.files` - TOML/JSON/YAML files matched by glob patterns
    * :mod:`.overrides` - ``dotted.key=VALUE`` override strings
"""

from __future__ import annotations

from .files import FileProvider, expand_braces, iter_config_files, load_config_file
from .mapping import MappingProvider
from .overrides import OverrideProvider, build_override_mapping, coerce_value, parse_override

__all__ = [
    "FileProvider",
    "MappingProvider",
    "OverrideProvider",
    "build_override_mapping",
    "coerce_value",
    "expand_braces",
    "iter_config_files",
    "load_config_file",
    "parse_override",
]
