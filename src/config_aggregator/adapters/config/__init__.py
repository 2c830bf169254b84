"""Tool settings adapter - loading, display, and typed settings.

Contents:
    * :mod:`.loader` - Layered settings loading with caching
    * :mod:`.display` - Settings display in human/JSON formats
    * :mod:`.settings` - Pydantic model of the ``[config_aggregator]`` section
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .settings import AggregateSettingsModel, load_aggregate_settings

__all__ = [
    "AggregateSettingsModel",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_aggregate_settings",
]
