"""Deep merge of nested configuration mappings.

Pure functions with no I/O. Both arguments are treated as read-only: every
level that changes is rebuilt as a new ``dict`` (or ``list``), so values shared
with a provider's output are never mutated by later merges.

Rules, evaluated per key of ``incoming``:

1. ``MergeReplaceKey`` - the key becomes the wrapped data, unconditionally.
2. Key already present in the accumulator (even when its value is falsy):

   a. ``REMOVE`` - the key is deleted.
   b. Integer key - the value is appended at the next free integer index.
   c. Both values are mappings - merged recursively. Both values are lists -
      positions merged with the integer-key rules, then compacted.
   d. Otherwise the incoming value wins.

3. Key absent: ``REMOVE`` is a no-op, anything else is inserted verbatim.

Contents:
    * :func:`merge_config` - merge one mapping into another.
    * :func:`merge_all` - left-fold a sequence of fragments from ``{}``.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from .directives import MergeRemoveKey, MergeReplaceKey

ConfigKey = Hashable
ConfigData = dict[Any, Any]


def _is_index(key: object) -> bool:
    """Integer keys carry list semantics; ``bool`` is excluded on purpose."""
    return isinstance(key, int) and not isinstance(key, bool)


def _next_index(target: Mapping[Any, Any]) -> int:
    """Return the next free integer key, one past the largest present."""
    return max((key for key in target if _is_index(key)), default=-1) + 1


def _merge_lists(base: list[Any], incoming: list[Any]) -> list[Any]:
    """Merge two lists by treating their positions as integer keys."""
    merged = merge_config(dict(enumerate(base)), dict(enumerate(incoming)))
    return list(merged.values())


def merge_config(base: Mapping[Any, Any], incoming: Mapping[Any, Any]) -> ConfigData:
    """Merge *incoming* into *base* and return the result as a new dict.

    ``base`` is the accumulator built so far; ``incoming`` is the next fragment
    to fold in. Scalars are right-biased (last write wins), integer-keyed and
    list entries accumulate, mappings merge recursively.

    Args:
        base: Accumulated configuration. Not mutated.
        incoming: Configuration fragment to fold in. Not mutated.

    Returns:
        Newly built merged mapping.

    Examples:
        >>> merge_config({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}})
        {'a': {'x': 1, 'y': 3}}
        >>> merge_config({0: "x"}, {0: "y"})
        {0: 'x', 1: 'y'}
        >>> merge_config({"plugins": ["a"]}, {"plugins": ["b", "c"]})
        {'plugins': ['a', 'b', 'c']}
    """
    result: ConfigData = dict(base)
    for key, value in incoming.items():
        if isinstance(value, MergeReplaceKey):
            result[key] = value.data
        elif key in result:
            if isinstance(value, MergeRemoveKey):
                del result[key]
            elif _is_index(key):
                result[_next_index(result)] = value
            else:
                result[key] = _combine(result[key], value)
        elif not isinstance(value, MergeRemoveKey):
            result[key] = value
    return result


def _combine(existing: object, value: object) -> object:
    """Resolve a string-keyed collision between two present values."""
    if isinstance(existing, Mapping) and isinstance(value, Mapping):
        return merge_config(existing, value)
    if isinstance(existing, list) and isinstance(value, list):
        return _merge_lists(existing, value)
    return value


def merge_all(fragments: Iterable[Mapping[Any, Any]]) -> ConfigData:
    """Left-fold *fragments* with :func:`merge_config`, starting from ``{}``.

    Example:
        >>> merge_all([{"a": 1}, {"a": 2, "b": 1}, {"b": 3}])
        {'a': 2, 'b': 3}
    """
    merged: ConfigData = {}
    for fragment in fragments:
        merged = merge_config(merged, fragment)
    return merged


__all__ = [
    "ConfigData",
    "ConfigKey",
    "merge_all",
    "merge_config",
]
