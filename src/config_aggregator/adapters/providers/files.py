"""Provider reading configuration files matched by a glob pattern.

Patterns support ``**`` recursive globs and ``{a,b}`` brace alternatives. Each
alternative is globbed in turn and its matches are sorted, so
``config/{defaults,local}.toml`` always merges ``defaults`` before ``local``.

Supported formats:
    * ``.toml`` - parsed with rtoml
    * ``.json`` - parsed with orjson
    * ``.yaml`` / ``.yml`` - parsed with PyYAML (``safe_load``)
"""

from __future__ import annotations

import glob
import logging
import re
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, Final

import orjson
import rtoml
import yaml

from ...domain.errors import InvalidConfigFileError, UnsupportedConfigFormatError

logger = logging.getLogger(__name__)

_BRACE_GROUP: Final[re.Pattern[str]] = re.compile(r"\{([^{}]*)\}")


def _parse_toml(raw: bytes) -> object:
    return rtoml.loads(raw.decode("utf-8"))


def _parse_json(raw: bytes) -> object:
    return orjson.loads(raw)


def _parse_yaml(raw: bytes) -> object:
    return yaml.safe_load(raw)


_PARSERS: Final[dict[str, Callable[[bytes], object]]] = {
    ".toml": _parse_toml,
    ".json": _parse_json,
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
}


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives in *pattern*, innermost group first.

    Examples:
        >>> expand_braces("conf/{global,local}.toml")
        ['conf/global.toml', 'conf/local.toml']
        >>> expand_braces("*.{json,y{a,}ml}")
        ['*.json', '*.yaml', '*.yml']
        >>> expand_braces("plain.toml")
        ['plain.toml']
    """
    match = _BRACE_GROUP.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        for candidate in expand_braces(head + option + tail):
            if candidate not in expanded:
                expanded.append(candidate)
    return expanded


def iter_config_files(pattern: str) -> Iterator[Path]:
    """Yield files matching *pattern*, in brace order, sorted within each alternative."""
    seen: set[str] = set()
    for alternative in expand_braces(pattern):
        for name in sorted(glob.glob(alternative, recursive=True)):
            if name in seen or not Path(name).is_file():
                continue
            seen.add(name)
            yield Path(name)


def load_config_file(path: Path) -> dict[Any, Any]:
    """Parse one configuration file into a mapping.

    Empty documents (for example an empty YAML file) produce ``{}``.

    Raises:
        UnsupportedConfigFormatError: If the suffix has no registered parser.
        InvalidConfigFileError: If the file cannot be read or parsed, or its root
            is not a mapping.
    """
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(f"Unsupported configuration file format: {path}")
    try:
        data = parser(path.read_bytes())
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise InvalidConfigFileError(f"Cannot parse configuration file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigFileError(f"Configuration root in {path} must be a mapping, got {type(data).__name__}")
    return data


class FileProvider:
    """Yield one configuration mapping per file matching a glob pattern.

    Files are read lazily when the provider is invoked; the aggregator merges
    each mapping in yield order.

    Example:
        >>> provider = FileProvider("config/autoload/{global,local}.toml")
        >>> provider.pattern
        'config/autoload/{global,local}.toml'
    """

    __slots__ = ("_pattern",)

    def __init__(self, pattern: str | Path) -> None:
        self._pattern = str(pattern)

    @property
    def pattern(self) -> str:
        return self._pattern

    def __call__(self) -> Iterator[dict[Any, Any]]:
        for path in iter_config_files(self._pattern):
            logger.debug("Reading configuration file", extra={"path": str(path)})
            yield load_config_file(path)

    def __repr__(self) -> str:
        return f"FileProvider({self._pattern!r})"


__all__ = [
    "FileProvider",
    "expand_braces",
    "iter_config_files",
    "load_config_file",
]
