"""Typed view of the ``[config_aggregator]`` settings section."""

from __future__ import annotations

from collections.abc import Sequence
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field

SETTINGS_SECTION = "config_aggregator"


def _empty_list() -> list[str]:
    return []


class AggregateSettingsModel(BaseModel):
    """Defaults for the ``aggregate`` and ``cache-clear`` commands.

    Example:
        >>> settings = AggregateSettingsModel(file_patterns=["conf/*.toml"])
        >>> settings.file_patterns
        ['conf/*.toml']
        >>> settings.cache_file is None
        True
    """

    file_patterns: list[str] = Field(default_factory=_empty_list)
    providers: list[str] = Field(default_factory=_empty_list)
    pre_processors: list[str] = Field(default_factory=_empty_list)
    post_processors: list[str] = Field(default_factory=_empty_list)
    cache_file: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    def merged_with(
        self,
        *,
        file_patterns: Sequence[str] = (),
        providers: Sequence[str] = (),
        pre_processors: Sequence[str] = (),
        post_processors: Sequence[str] = (),
        cache_file: str | None = None,
    ) -> AggregateSettingsModel:
        """Return a copy where every non-empty argument replaces the stored value.

        Example:
            >>> base = AggregateSettingsModel(providers=["db"], cache_file="a.py")
            >>> merged = base.merged_with(cache_file="b.py")
            >>> merged.providers, merged.cache_file
            (['db'], 'b.py')
        """
        return self.model_copy(
            update={
                "file_patterns": list(file_patterns) or self.file_patterns,
                "providers": list(providers) or self.providers,
                "pre_processors": list(pre_processors) or self.pre_processors,
                "post_processors": list(post_processors) or self.post_processors,
                "cache_file": cache_file or self.cache_file,
            }
        )


def load_aggregate_settings(config: Config) -> AggregateSettingsModel:
    """Parse the settings section of *config*.

    Raises:
        pydantic.ValidationError: If the section holds values of the wrong type.
    """
    raw: object = config.get(SETTINGS_SECTION, default={})
    return AggregateSettingsModel.model_validate(cast("dict[str, object]", raw) if raw else {})


__all__ = [
    "SETTINGS_SECTION",
    "AggregateSettingsModel",
    "load_aggregate_settings",
]
