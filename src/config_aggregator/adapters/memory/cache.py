"""In-memory cache artifact store for testing.

Artifacts are kept as rendered text keyed by path and parsed with the real
artifact parser, so tests exercise the same format as production.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...domain.errors import CacheWriteError
from ..cache.artifact import parse_cache_artifact
from ..cache.writer import parse_mode


def _empty_artifacts() -> dict[str, str]:
    return {}


def _empty_modes() -> dict[str, int | None]:
    return {}


@dataclass
class InMemoryCacheStore:
    """Dict-backed stand-in for the cache file adapters.

    Attributes:
        artifacts: Rendered artifact text keyed by path string.
        modes: Parsed permission mode recorded for each written path.
        fail_writes: When True, writes raise CacheWriteError.

    Example:
        >>> store = InMemoryCacheStore()
        >>> store.write(Path("cache.py"), "{'a': 1}", mode="0o600")
        >>> store.read(Path("cache.py"))
        {'a': 1}
        >>> store.modes["cache.py"] == 0o600
        True
    """

    artifacts: dict[str, str] = field(default_factory=_empty_artifacts)
    modes: dict[str, int | None] = field(default_factory=_empty_modes)
    fail_writes: bool = False

    def read(self, path: Path) -> dict[Any, Any] | None:
        text = self.artifacts.get(str(path))
        if text is None:
            return None
        return parse_cache_artifact(text, source=str(path))

    def write(self, path: Path, contents: str, *, mode: int | str | None = None) -> None:
        if self.fail_writes:
            raise CacheWriteError(f"Simulated write failure for {path}")
        self.artifacts[str(path)] = contents
        self.modes[str(path)] = parse_mode(mode)

    def remove(self, path: Path) -> bool:
        self.modes.pop(str(path), None)
        return self.artifacts.pop(str(path), None) is not None

    def clear(self) -> None:
        """Reset stored artifacts for the next test."""
        self.artifacts.clear()
        self.modes.clear()
        self.fail_writes = False


__all__ = ["InMemoryCacheStore"]
