"""In-memory configuration adapters for testing.

Satisfy the same Protocols as production adapters but operate entirely in
memory -- no filesystem, no layered file discovery, no entry points.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...application.resolver import ComponentRegistry
from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


def load_component_registry_in_memory() -> ComponentRegistry:
    """Return an empty registry; tests register what they need."""
    return ComponentRegistry()


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "load_component_registry_in_memory",
]
