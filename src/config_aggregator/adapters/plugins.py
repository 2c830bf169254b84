"""Populate a component registry from installed entry points.

Third-party packages expose providers and processors under these groups::

    [project.entry-points."config_aggregator.providers"]
    database = "my_app.config:DatabaseConfigProvider"

    [project.entry-points."config_aggregator.processors"]
    expand-env = "my_app.config:ExpandEnvironment"

Each entry point must reference a zero-argument factory, typically the class
itself. Targets are imported once, when the registry is built at startup.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from importlib.metadata import entry_points
from typing import Final

from ..application.resolver import ComponentRegistry

logger = logging.getLogger(__name__)

PROVIDER_GROUP: Final[str] = "config_aggregator.providers"
PROCESSOR_GROUP: Final[str] = "config_aggregator.processors"


def load_component_registry(groups: Sequence[str] = (PROVIDER_GROUP, PROCESSOR_GROUP)) -> ComponentRegistry:
    """Build a registry from the entry points in *groups*.

    Raises:
        ValueError: If two entry points share a name.
        ImportError: If an entry point target cannot be imported.
    """
    registry = ComponentRegistry()
    for group in groups:
        for entry_point in entry_points(group=group):
            factory = entry_point.load()
            registry.register(entry_point.name, factory)
            logger.debug("Registered component", extra={"group": group, "component": entry_point.name})
    return registry


__all__ = [
    "PROCESSOR_GROUP",
    "PROVIDER_GROUP",
    "load_component_registry",
]
