"""Provider returning a fixed, in-code configuration mapping."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


class MappingProvider:
    """Provide a copy of the mapping given at construction.

    Each call returns an independent deep copy, so post-processors that mutate
    their input never leak changes back into the provider.

    Example:
        >>> provider = MappingProvider({"debug": True})
        >>> provider()
        {'debug': True}
        >>> provider() is provider()
        False
    """

    __slots__ = ("_config",)

    def __init__(self, config: Mapping[Any, Any]) -> None:
        self._config = dict(config)

    def __call__(self) -> dict[Any, Any]:
        return copy.deepcopy(self._config)

    def __repr__(self) -> str:
        return f"MappingProvider({self._config!r})"


__all__ = ["MappingProvider"]
