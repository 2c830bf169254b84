"""Domain-specific exceptions for typed error handling at boundaries.

Every failure that aborts an aggregation derives from :class:`AggregatorError`
so callers can catch the whole family at one boundary. Two adapter-level
signals (:class:`LiteralExportError`, :class:`CacheWriteError`) sit outside that
family: the cache manager translates or swallows them.
"""

from __future__ import annotations


class AggregatorError(Exception):
    """Base class for failures that abort a configuration aggregation.

    Example:
        >>> issubclass(ConfigCannotBeCachedError, AggregatorError)
        True
    """


class InvalidConfigProviderError(AggregatorError):
    """A provider could not be resolved, invoked, or returned unusable data.

    Use the ``from_*`` constructors; each returns the matching subclass.

    Example:
        >>> err = InvalidConfigProviderError.from_named_provider("app.settings")
        >>> type(err).__name__
        'UnknownProviderTypeError'
        >>> str(err)
        "Cannot read config from 'app.settings' - no provider is registered under that name"
    """

    @classmethod
    def from_named_provider(cls, name: str) -> UnknownProviderTypeError:
        return UnknownProviderTypeError(
            f"Cannot read config from {name!r} - no provider is registered under that name"
        )

    @classmethod
    def from_unsupported_type(cls, type_name: str) -> UnsupportedProviderTypeError:
        return UnsupportedProviderTypeError(
            f"Cannot read config from {type_name} - config provider must be callable"
        )

    @classmethod
    def from_invalid_return(cls, provider_name: str, returned_type: str) -> InvalidProviderReturnTypeError:
        return InvalidProviderReturnTypeError(
            f"Cannot read config from {provider_name}; does not return a mapping (got {returned_type})"
        )


class UnknownProviderTypeError(InvalidConfigProviderError):
    """A provider was referenced by a name that no registry entry matches."""


class UnsupportedProviderTypeError(InvalidConfigProviderError):
    """A provider reference resolved to something that is not callable."""


class InvalidProviderReturnTypeError(InvalidConfigProviderError):
    """A provider (or one element of its stream) did not produce a mapping."""


class InvalidConfigProcessorError(AggregatorError):
    """A pre- or post-processor could not be resolved.

    Example:
        >>> str(InvalidConfigProcessorError.from_unsupported_type("int"))
        'Cannot use int as processor - processor must be callable'
    """

    @classmethod
    def from_named_processor(cls, name: str) -> UnknownProcessorTypeError:
        return UnknownProcessorTypeError(
            f"Cannot use {name!r} as processor - no processor is registered under that name"
        )

    @classmethod
    def from_unsupported_type(cls, type_name: str) -> UnsupportedProcessorTypeError:
        return UnsupportedProcessorTypeError(f"Cannot use {type_name} as processor - processor must be callable")


class UnknownProcessorTypeError(InvalidConfigProcessorError):
    """A processor was referenced by a name that no registry entry matches."""


class UnsupportedProcessorTypeError(InvalidConfigProcessorError):
    """A processor reference resolved to something that is not callable."""


class ConfigCannotBeCachedError(AggregatorError):
    """The merged configuration contains values that cannot be written as literals.

    Raised only when caching is enabled. The underlying export failure is kept
    as ``__cause__``.
    """

    @classmethod
    def from_export_error(cls, error: LiteralExportError) -> ConfigCannotBeCachedError:
        return cls(f"Cannot export config into a cache file. Config contains uncacheable entries: {error}")

    @classmethod
    def from_non_mapping(cls, type_name: str) -> ConfigCannotBeCachedError:
        return cls(f"Cannot export config into a cache file. Config must be a mapping, got {type_name}")


class InvalidCacheArtifactError(AggregatorError):
    """A cache artifact exists but does not hold a readable configuration literal."""


class UnsupportedConfigFormatError(AggregatorError):
    """A configuration file has a suffix no parser is registered for."""


class InvalidConfigFileError(AggregatorError):
    """A configuration file could not be parsed or its root is not a mapping."""


class LiteralExportError(ValueError):
    """A value cannot be rendered as a re-loadable Python literal.

    Example:
        >>> str(LiteralExportError("config['handler']: function is not a literal"))
        "config['handler']: function is not a literal"
    """


class CacheWriteError(OSError):
    """Writing a cache artifact failed at the filesystem level."""


__all__ = [
    "AggregatorError",
    "CacheWriteError",
    "ConfigCannotBeCachedError",
    "InvalidCacheArtifactError",
    "InvalidConfigFileError",
    "InvalidConfigProcessorError",
    "InvalidConfigProviderError",
    "InvalidProviderReturnTypeError",
    "LiteralExportError",
    "UnknownProcessorTypeError",
    "UnknownProviderTypeError",
    "UnsupportedConfigFormatError",
    "UnsupportedProcessorTypeError",
    "UnsupportedProviderTypeError",
]
