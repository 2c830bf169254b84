"""Cache lifecycle: load an existing artifact, or persist a freshly merged config.

The reserved keys live inside the computed configuration itself, so a provider
can switch caching on or off for its own output:

* :data:`ENABLE_CACHE` - truthy value enables writing the artifact.
* :data:`CACHE_FILEMODE` - optional permission mode for the artifact.

Contents:
    * :func:`load_config_from_cache` - read side; corrupt artifacts propagate.
    * :func:`cache_config` - write side; export failures raise, write failures
      are logged and swallowed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any, Final

from ..domain.errors import CacheWriteError, ConfigCannotBeCachedError, LiteralExportError
from .ports import ReadCacheArtifact, RenderCacheArtifact, WriteCacheArtifact

logger = logging.getLogger(__name__)

ENABLE_CACHE: Final[str] = "config_cache_enabled"
CACHE_FILEMODE: Final[str] = "config_cache_filemode"


def _generation_timestamp() -> str:
    """Local time with UTC offset, ISO-8601, second precision."""
    return datetime.now().astimezone().isoformat(timespec="seconds")


def load_config_from_cache(
    cached_config_file: str | Path | None,
    *,
    read_artifact: ReadCacheArtifact,
) -> dict[Any, Any] | None:
    """Return the cached configuration, or None when caching cannot satisfy the load.

    Args:
        cached_config_file: Artifact path; None or empty disables caching.
        read_artifact: Adapter returning the parsed artifact or None when absent.

    Raises:
        InvalidCacheArtifactError: If an artifact exists but cannot be parsed.
    """
    if not cached_config_file:
        return None
    config = read_artifact(Path(cached_config_file))
    if config is not None:
        logger.debug("Loaded configuration from cache", extra={"path": str(cached_config_file)})
    return config


def cache_config(
    config: Mapping[Any, Any],
    cached_config_file: str | Path | None,
    *,
    generator: str,
    render_artifact: RenderCacheArtifact,
    write_artifact: WriteCacheArtifact,
) -> bool:
    """Persist *config* when a path is configured and the config enables caching.

    Args:
        config: Fully merged and post-processed configuration.
        cached_config_file: Artifact path; None or empty disables caching.
        generator: Identity recorded in the artifact header.
        render_artifact: Adapter turning the config into artifact text.
        write_artifact: Adapter writing the text atomically.

    Returns:
        True when the artifact was written.

    Raises:
        ConfigCannotBeCachedError: If the configuration holds values that cannot
            be exported as literals, or is not a mapping at all.
    """
    if not cached_config_file:
        return False
    if not isinstance(config, Mapping):
        raise ConfigCannotBeCachedError.from_non_mapping(type(config).__name__)
    if not config.get(ENABLE_CACHE):
        return False

    try:
        contents = render_artifact(config, generator=generator, generated_at=_generation_timestamp())
    except LiteralExportError as exc:
        raise ConfigCannotBeCachedError.from_export_error(exc) from exc

    path = Path(cached_config_file)
    try:
        write_artifact(path, contents, mode=config.get(CACHE_FILEMODE))
    except CacheWriteError as exc:
        logger.warning("Failed to write configuration cache", extra={"path": str(path), "error": str(exc)})
        return False
    logger.info("Wrote configuration cache", extra={"path": str(path)})
    return True


__all__ = [
    "CACHE_FILEMODE",
    "ENABLE_CACHE",
    "cache_config",
    "load_config_from_cache",
]
