"""Merge directives that alter the default deep-merge behaviour for one key.

Providers embed these values into otherwise plain configuration data. The
merge engine recognises them and never copies them into the accumulator as
ordinary values (except when a directive is inserted verbatim under a new key,
see :func:`config_aggregator.domain.merge.merge_config`).

Contents:
    * :class:`MergeReplaceKey` - substitute a value without recursive merging.
    * :class:`MergeRemoveKey` - delete a key set by an earlier provider.
    * :data:`REMOVE` - shared :class:`MergeRemoveKey` instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class MergeReplaceKey:
    """Replace whatever occupies the key with ``data``, unconditionally.

    Used to opt a subtree out of recursive merging.

    Attributes:
        data: Value stored verbatim under the key.

    Example:
        >>> from config_aggregator.domain.merge import merge_config
        >>> merge_config({"db": {"host": "a", "port": 1}}, {"db": MergeReplaceKey({"host": "b"})})
        {'db': {'host': 'b'}}
    """

    data: object


class MergeRemoveKey:
    """Remove the key from the accumulator; a no-op when the key is absent.

    Instances carry no state; use the shared :data:`REMOVE` constant.

    Example:
        >>> from config_aggregator.domain.merge import merge_config
        >>> merge_config({"a": 1, "b": 2}, {"a": REMOVE})
        {'b': 2}
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "REMOVE"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MergeRemoveKey)

    def __hash__(self) -> int:
        return hash(MergeRemoveKey)


REMOVE: Final[MergeRemoveKey] = MergeRemoveKey()

MergeDirective = MergeReplaceKey | MergeRemoveKey
"""Union of all directive types recognised by the merge engine."""


def is_directive(value: object) -> bool:
    """Return True when *value* is a merge directive.

    Example:
        >>> is_directive(REMOVE), is_directive(MergeReplaceKey(1)), is_directive(1)
        (True, True, False)
    """
    return isinstance(value, (MergeReplaceKey, MergeRemoveKey))


__all__ = [
    "REMOVE",
    "MergeDirective",
    "MergeRemoveKey",
    "MergeReplaceKey",
    "is_directive",
]
