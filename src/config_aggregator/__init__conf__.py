"""Static package metadata surfaced by the CLI ``info`` command.

Kept in sync with ``pyproject.toml``; the layered-config identifiers decide
where tool settings are discovered on each platform.
"""

from __future__ import annotations

name = "config_aggregator"
title = "Merge configuration from ordered providers with replace/remove directives and file caching"
version = "1.0.0"
homepage = "https://github.com/config-aggregator/config_aggregator"
author = "config_aggregator contributors"
shell_command = "config-aggregator"

# lib_layered_config discovery identifiers
LAYEREDCONF_VENDOR = "config-aggregator"
LAYEREDCONF_APP = "Config Aggregator"
LAYEREDCONF_SLUG = "config-aggregator"


def print_info() -> None:
    """Print the summarised metadata block."""
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
