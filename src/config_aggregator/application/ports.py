"""Application ports: callable Protocol definitions.

Two groups live here:

* Collaborator contracts (:class:`Provider`, :class:`PreProcessor`,
  :class:`PostProcessor`) that user code implements. Plain functions and
  objects with ``__call__`` satisfy them via structural subtyping (PEP 544).
* Adapter contracts for cache artifacts, tool configuration, display, and
  logging. Each Protocol's ``__call__`` matches the corresponding adapter
  function exactly.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``ComponentRegistry``) are imported under ``TYPE_CHECKING`` only so that
    layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from .resolver import ComponentRegistry


class Provider(Protocol):
    """Produce one configuration fragment, or a one-shot stream of fragments."""

    def __call__(self) -> Mapping[Any, Any] | Iterator[Mapping[Any, Any]]: ...


ProviderReference: TypeAlias = "Provider | type[Provider] | str"
"""A ready provider, a provider class, or a registered provider name."""


class PreProcessor(Protocol):
    """Transform the ordered provider sequence before any provider runs."""

    def __call__(self, providers: Iterable[ProviderReference]) -> Iterable[ProviderReference]: ...


class PostProcessor(Protocol):
    """Transform the fully merged configuration after all providers ran."""

    def __call__(self, config: dict[Any, Any]) -> dict[Any, Any]: ...


ProcessorReference: TypeAlias = "PreProcessor | PostProcessor | type | str"
"""A ready processor, a processor class, or a registered processor name."""


class ReadCacheArtifact(Protocol):
    """Load a cache artifact, returning None when none exists at *path*."""

    def __call__(self, path: Path) -> dict[Any, Any] | None: ...


class RenderCacheArtifact(Protocol):
    """Render a configuration mapping into cache artifact text."""

    def __call__(self, config: Mapping[Any, Any], *, generator: str, generated_at: str) -> str: ...


class WriteCacheArtifact(Protocol):
    """Persist rendered artifact text, raising CacheWriteError on failure."""

    def __call__(self, path: Path, contents: str, *, mode: int | str | None = ...) -> None: ...


class RemoveCacheArtifact(Protocol):
    """Delete a cache artifact, returning whether one was removed."""

    def __call__(self, path: Path) -> bool: ...


class LoadComponentRegistry(Protocol):
    """Build the registry of named providers and processors."""

    def __call__(self) -> ComponentRegistry: ...


class GetConfig(Protocol):
    """Load the tool's layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the tool's configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadComponentRegistry",
    "PostProcessor",
    "PreProcessor",
    "ProcessorReference",
    "Provider",
    "ProviderReference",
    "ReadCacheArtifact",
    "RemoveCacheArtifact",
    "RenderCacheArtifact",
    "WriteCacheArtifact",
]
