"""Provider pipeline: pre-process, run providers with merge-fold, post-process.

Everything runs strictly in sequence. Provider order decides merge precedence
(later wins); processor order decides transformation precedence (each sees its
predecessor's output).

Contents:
    * :func:`pre_process_providers` - fold the provider list through pre-processors.
    * :func:`load_config_from_providers` - invoke providers and merge their output.
    * :func:`post_process_config` - fold the merged config through post-processors.
    * :func:`run_pipeline` - all three steps in order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence

from ..domain.errors import InvalidConfigProviderError
from ..domain.merge import ConfigData, merge_config
from .ports import ProcessorReference, Provider, ProviderReference
from .resolver import ComponentRegistry, describe_type, resolve_processor, resolve_provider

logger = logging.getLogger(__name__)


def pre_process_providers(
    processors: Sequence[ProcessorReference],
    providers: Iterable[ProviderReference],
    registry: ComponentRegistry | None = None,
) -> Iterable[ProviderReference]:
    """Fold *providers* through each resolved pre-processor in list order.

    Each pre-processor receives the current provider sequence and returns a
    (possibly reordered, filtered, or extended) sequence.

    Example:
        >>> def add_defaults(providers):
        ...     return [lambda: {"debug": False}, *providers]
        >>> providers = pre_process_providers([add_defaults], [lambda: {"debug": True}])
        >>> load_config_from_providers(providers)
        {'debug': True}
    """
    for processor in processors:
        callback = resolve_processor(processor, registry)
        logger.debug("Running pre-processor", extra={"processor": describe_type(callback)})
        providers = callback(providers)
    return providers


def _merge_fragment(merged: ConfigData, fragment: object, provider: Provider) -> ConfigData:
    """Validate one provider fragment and fold it into *merged*."""
    if not isinstance(fragment, Mapping):
        raise InvalidConfigProviderError.from_invalid_return(describe_type(provider), describe_type(type(fragment)))
    return merge_config(merged, fragment)


def load_config_from_providers(
    providers: Iterable[ProviderReference],
    registry: ComponentRegistry | None = None,
) -> ConfigData:
    """Invoke each provider in order and merge-fold its output.

    A provider returning an iterator (for example a generator) is consumed to
    completion, each yielded mapping merged in yield order, before the next
    provider runs.

    Raises:
        InvalidProviderReturnTypeError: If a provider, or one stream element,
            does not produce a mapping.
        UnknownProviderTypeError: If a named provider is not registered.
        UnsupportedProviderTypeError: If a reference is not callable.

    Example:
        >>> def stream():
        ...     yield {"a": 1}
        ...     yield {"a": 2, "b": 1}
        >>> load_config_from_providers([lambda: {"a": 0, "c": 1}, stream])
        {'a': 2, 'c': 1, 'b': 1}
    """
    merged: ConfigData = {}
    for reference in providers:
        provider = resolve_provider(reference, registry)
        logger.debug("Loading configuration from provider", extra={"provider": describe_type(provider)})
        config = provider()
        if isinstance(config, Iterator):
            for fragment in config:
                merged = _merge_fragment(merged, fragment, provider)
            continue
        merged = _merge_fragment(merged, config, provider)
    return merged


def post_process_config(
    processors: Sequence[ProcessorReference],
    config: ConfigData,
    registry: ComponentRegistry | None = None,
) -> ConfigData:
    """Fold *config* through each resolved post-processor in list order."""
    for processor in processors:
        callback = resolve_processor(processor, registry)
        logger.debug("Running post-processor", extra={"processor": describe_type(callback)})
        config = callback(config)
    return config


def run_pipeline(
    providers: Iterable[ProviderReference],
    pre_processors: Sequence[ProcessorReference] = (),
    post_processors: Sequence[ProcessorReference] = (),
    registry: ComponentRegistry | None = None,
) -> ConfigData:
    """Pre-process *providers*, merge their output, then post-process the result."""
    resolved_providers = pre_process_providers(pre_processors, providers, registry)
    config = load_config_from_providers(resolved_providers, registry)
    return post_process_config(post_processors, config, registry)


__all__ = [
    "load_config_from_providers",
    "post_process_config",
    "pre_process_providers",
    "run_pipeline",
]
