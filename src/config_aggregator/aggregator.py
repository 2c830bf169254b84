"""The :class:`ConfigAggregator` facade.

Ties together reference resolution, the merge pipeline, and the cache
lifecycle. All work happens in the constructor; afterwards the instance is
a read-only holder of the merged configuration.

Example:
    >>> from config_aggregator import ConfigAggregator, MappingProvider
    >>> aggregator = ConfigAggregator([
    ...     MappingProvider({"db": {"host": "localhost", "port": 5432}}),
    ...     lambda: {"db": {"host": "db.internal"}},
    ... ])
    >>> aggregator.get_merged_config()["db"]["host"]
    'db.internal'
    >>> aggregator.as_dict()["db"]["port"]
    5432
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from .application.cache import CACHE_FILEMODE, ENABLE_CACHE, cache_config, load_config_from_cache
from .application.pipeline import run_pipeline
from .application.resolver import ComponentRegistry

if TYPE_CHECKING:
    from .application.ports import ProcessorReference, ProviderReference
    from .composition import AppServices

logger = logging.getLogger(__name__)


def _copy_containers(value: object) -> Any:
    """Rebuild dicts and lists recursively; leaf objects are shared."""
    if isinstance(value, Mapping):
        return {key: _copy_containers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy_containers(item) for item in value]
    return value


def _freeze(value: object) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


class ConfigAggregator:
    """Aggregate configuration from an ordered sequence of providers.

    Args:
        providers: Provider references merged in order; later values win.
        cached_config_file: Path of the cache artifact. When the artifact
            exists it is loaded and no provider or processor runs. When it is
            missing, the merged result is written there if the configuration
            sets ``config_cache_enabled`` to a truthy value.
        post_processors: Processor references applied to the merged config.
        pre_processors: Processor references applied to the provider sequence.
        registry: Registry used to resolve string references.
        services: Adapter wiring; defaults to the production composition.

    Raises:
        InvalidConfigProviderError: If a provider cannot be resolved or returns
            something other than a mapping.
        InvalidConfigProcessorError: If a processor cannot be resolved.
        ConfigCannotBeCachedError: If caching is enabled but the configuration
            holds values that cannot be written to the artifact.
        InvalidCacheArtifactError: If an existing artifact cannot be parsed.
    """

    ENABLE_CACHE: Final[str] = ENABLE_CACHE
    CACHE_FILEMODE: Final[str] = CACHE_FILEMODE

    def __init__(
        self,
        providers: Iterable[ProviderReference] = (),
        cached_config_file: str | Path | None = None,
        post_processors: Sequence[ProcessorReference] = (),
        pre_processors: Sequence[ProcessorReference] = (),
        *,
        registry: ComponentRegistry | None = None,
        services: AppServices | None = None,
    ) -> None:
        if services is None:
            from .composition import build_production

            services = build_production()

        self._cached_config_file = cached_config_file or None
        cached = load_config_from_cache(cached_config_file, read_artifact=services.read_cache_artifact)
        self._loaded_from_cache = cached is not None

        if cached is not None:
            config = cached
        else:
            config = run_pipeline(providers, pre_processors, post_processors, registry)
            cache_config(
                config,
                cached_config_file,
                generator=self.generator,
                render_artifact=services.render_cache_artifact,
                write_artifact=services.write_cache_artifact,
            )

        self._config: dict[Any, Any] = _copy_containers(config)
        self._view: MappingProxyType[Any, Any] = _freeze(self._config)
        logger.debug(
            "Configuration aggregated",
            extra={"keys": len(self._config), "from_cache": self._loaded_from_cache},
        )

    @property
    def generator(self) -> str:
        """Identity recorded in cache artifact headers."""
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    @property
    def loaded_from_cache(self) -> bool:
        """True when the configuration came from an existing cache artifact."""
        return self._loaded_from_cache

    @property
    def cached_config_file(self) -> str | Path | None:
        return self._cached_config_file

    def get_merged_config(self) -> Mapping[Any, Any]:
        """Return a read-only view of the merged configuration.

        Nested mappings are ``MappingProxyType`` and lists become tuples, so the
        view cannot be used to alter the aggregated state.
        """
        return self._view

    def as_dict(self) -> dict[Any, Any]:
        """Return a mutable copy of the merged configuration.

        Containers are rebuilt on every call; leaf values are shared.
        """
        return _copy_containers(self._config)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(keys={len(self._config)}, "
            f"cached_config_file={self._cached_config_file!r}, loaded_from_cache={self._loaded_from_cache})"
        )


__all__ = ["ConfigAggregator"]
