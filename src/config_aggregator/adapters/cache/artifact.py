"""Cache artifact format: a header comment followed by one Python literal.

The artifact is loaded with :func:`ast.literal_eval`, never executed, so only
literal data (dicts, lists, tuples, sets, strings, bytes, numbers, booleans,
None) can be cached. Anything else is rejected at export time with a message
naming its location inside the configuration.

Example artifact::

    # This configuration cache file was generated by config_aggregator.aggregator.ConfigAggregator
    # at 2026-10-18T09:15:02+02:00
    {'config_cache_enabled': True, 'db': {'host': 'localhost', 'port': 5432}}

Contents:
    * :func:`export_literal` - render a value as a re-loadable literal.
    * :func:`render_cache_artifact` - header plus literal.
    * :func:`parse_cache_artifact` - text back to a configuration dict.
    * :func:`read_cache_artifact` - read and parse a file, None when absent.
"""

from __future__ import annotations

import ast
import math
import pprint
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from ...domain.errors import InvalidCacheArtifactError, LiteralExportError

CACHE_TEMPLATE: Final[str] = """\
# This configuration cache file was generated by {generator}
# at {generated_at}
{literal}
"""

_SCALAR_TYPES: Final[frozenset[type]] = frozenset({str, bytes, bool, int, type(None)})
_PFORMAT_WIDTH: Final[int] = 100


def _to_literal(value: object, location: str, active: set[int]) -> object:
    """Return a literal-safe copy of *value*, raising LiteralExportError otherwise.

    Mapping subclasses are normalised to ``dict``; scalars must match their
    builtin type exactly so that their ``repr`` is a literal.
    """
    value_type = type(value)
    if value_type in _SCALAR_TYPES:
        return value
    if value_type is float:
        if not math.isfinite(value):  # type: ignore[arg-type]
            raise LiteralExportError(f"{location}: non-finite float {value!r} has no literal form")
        return value

    if not isinstance(value, (Mapping, list, tuple, set)):
        raise LiteralExportError(f"{location}: {value_type.__qualname__} is not a literal value")
    if id(value) in active:
        raise LiteralExportError(f"{location}: cyclic reference")

    active.add(id(value))
    try:
        if isinstance(value, Mapping):
            return {
                _to_literal(key, f"{location} key {key!r}", active): _to_literal(item, f"{location}[{key!r}]", active)
                for key, item in value.items()
            }
        if value_type is list:
            return [_to_literal(item, f"{location}[{index}]", active) for index, item in enumerate(value)]
        if value_type is tuple:
            return tuple(_to_literal(item, f"{location}[{index}]", active) for index, item in enumerate(value))
        if value_type is set:
            return {_to_literal(item, f"{location} member", active) for item in value}
        raise LiteralExportError(f"{location}: {value_type.__qualname__} is not a literal value")
    finally:
        active.discard(id(value))


def export_literal(value: object) -> str:
    """Render *value* as Python literal source.

    Raises:
        LiteralExportError: If *value* (or anything nested in it) has no
            literal representation.

    Examples:
        >>> export_literal({"a": [1, 2.5, None], 0: (True, b"x")})
        "{'a': [1, 2.5, None], 0: (True, b'x')}"
        >>> export_literal({"handler": print})
        Traceback (most recent call last):
        ...
        config_aggregator.domain.errors.LiteralExportError: config['handler']: builtin_function_or_method is not a literal value
    """
    literal = _to_literal(value, "config", set())
    return pprint.pformat(literal, width=_PFORMAT_WIDTH, sort_dicts=False)


def render_cache_artifact(config: Mapping[Any, Any], *, generator: str, generated_at: str) -> str:
    """Render the full artifact text for *config*.

    Args:
        config: Merged configuration to persist.
        generator: Identity recorded in the header (usually a dotted class path).
        generated_at: ISO-8601 generation timestamp.

    Raises:
        LiteralExportError: If *config* holds non-literal values.
    """
    return CACHE_TEMPLATE.format(generator=generator, generated_at=generated_at, literal=export_literal(config))


def parse_cache_artifact(text: str, *, source: str = "<cache>") -> dict[Any, Any]:
    """Parse artifact *text* back into a configuration dict.

    Raises:
        InvalidCacheArtifactError: If *text* is not a single literal or its value
            is not a dict.

    Example:
        >>> parse_cache_artifact("# header\\n{'a': 1}\\n")
        {'a': 1}
    """
    try:
        value = ast.literal_eval(text)
    except (SyntaxError, ValueError, TypeError, MemoryError, RecursionError) as exc:
        raise InvalidCacheArtifactError(f"Cache artifact {source} is not a configuration literal: {exc}") from exc
    if not isinstance(value, dict):
        raise InvalidCacheArtifactError(
            f"Cache artifact {source} must hold a mapping, got {type(value).__name__}"
        )
    return value


def read_cache_artifact(path: Path) -> dict[Any, Any] | None:
    """Read and parse the artifact at *path*; None when nothing exists there.

    Raises:
        InvalidCacheArtifactError: If the artifact exists but cannot be read or parsed.
    """
    if not path.exists():
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidCacheArtifactError(f"Cache artifact {path} cannot be read: {exc}") from exc
    return parse_cache_artifact(text, source=str(path))


__all__ = [
    "CACHE_TEMPLATE",
    "export_literal",
    "parse_cache_artifact",
    "read_cache_artifact",
    "render_cache_artifact",
]
