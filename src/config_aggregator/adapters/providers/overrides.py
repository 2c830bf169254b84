"""Provider built from ``dotted.key=VALUE`` override strings.

Used by the CLI ``aggregate --set`` option: the overrides are merged after every
other provider, so they win over file and registry values.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, cast

import orjson

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Coerce a raw string value using JSON parsing with string fallback.

    Examples:
        >>> coerce_value("true")
        True
        >>> coerce_value("5432")
        5432
        >>> coerce_value('["a","b"]')
        ['a', 'b']
        >>> coerce_value("localhost")
        'localhost'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Split a ``KEY[.SUBKEY...]=VALUE`` string into a ConfigOverride.

    The first ``=`` separates the dotted path from the value.

    Raises:
        ValueError: If the string lacks ``=`` or the path has an empty component.

    Examples:
        >>> parse_override("db.port=5432")
        ConfigOverride(key_path=('db', 'port'), value=5432)
        >>> parse_override("debug=true")
        ConfigOverride(key_path=('debug',), value=True)
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)
    key_path = tuple(path_part.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(key_path=key_path, value=coerce_value(value_str))


def _nest_override(target: dict[str, object], override: ConfigOverride) -> None:
    """Insert *override* into *target*, creating intermediate dicts as needed."""
    node = target
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise ValueError(
                f"Invalid override for {'.'.join(override.key_path)!r}: {part!r} is already set to a scalar"
            )
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def build_override_mapping(raw_overrides: Iterable[str]) -> dict[str, object]:
    """Build one nested mapping from *raw_overrides*; later entries win.

    Example:
        >>> build_override_mapping(["db.host=localhost", "db.port=5432"])
        {'db': {'host': 'localhost', 'port': 5432}}
    """
    overrides: dict[str, object] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))
    return overrides


class OverrideProvider:
    """Provide the mapping described by ``dotted.key=VALUE`` strings.

    Overrides are validated when the provider is created.

    Example:
        >>> OverrideProvider(["cache.enabled=false"])()
        {'cache': {'enabled': False}}
    """

    __slots__ = ("_config",)

    def __init__(self, raw_overrides: Iterable[str]) -> None:
        self._config = build_override_mapping(raw_overrides)

    def __call__(self) -> dict[str, Any]:
        return copy.deepcopy(self._config)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "OverrideProvider",
    "build_override_mapping",
    "coerce_value",
    "parse_override",
]
