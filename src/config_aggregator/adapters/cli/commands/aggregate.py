"""Aggregation and cache maintenance commands.

Contents:
    * :func:`cli_aggregate` - Merge files, registered providers and ``--set``
      overrides, then print the result.
    * :func:`cli_cache_clear` - Delete the cache artifact.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import lib_log_rich.runtime
import orjson
import rich_click as click
from pydantic import ValidationError
from rich.pretty import pretty_repr

from config_aggregator.adapters.config.settings import AggregateSettingsModel, load_aggregate_settings
from config_aggregator.adapters.providers import FileProvider, OverrideProvider
from config_aggregator.aggregator import ConfigAggregator
from config_aggregator.application.ports import ProviderReference
from config_aggregator.domain.enums import OutputFormat
from config_aggregator.domain.errors import (
    AggregatorError,
    UnknownProcessorTypeError,
    UnknownProviderTypeError,
)

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _json_default(value: object) -> object:
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return repr(value)


def render_config(config: Mapping[Any, Any], output_format: OutputFormat) -> str:
    """Render an aggregated configuration for terminal output.

    Example:
        >>> print(render_config({"db": {"port": 5432}}, OutputFormat.JSON))
        {
          "db": {
            "port": 5432
          }
        }
    """
    if output_format is OutputFormat.JSON:
        option = orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS
        return orjson.dumps(config, default=_json_default, option=option).decode("utf-8")
    return pretty_repr(dict(config))


def _load_settings(cli_ctx: CLIContext) -> AggregateSettingsModel:
    try:
        return load_aggregate_settings(cli_ctx.config)
    except ValidationError as exc:
        click.echo(f"\nError: invalid [config_aggregator] settings: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _build_providers(settings: AggregateSettingsModel, set_overrides: tuple[str, ...]) -> list[ProviderReference]:
    providers: list[ProviderReference] = [FileProvider(pattern) for pattern in settings.file_patterns]
    providers.extend(settings.providers)
    if set_overrides:
        try:
            providers.append(OverrideProvider(set_overrides))
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="--set") from exc
    return providers


@click.command("aggregate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--file",
    "file_patterns",
    multiple=True,
    metavar="PATTERN",
    help="Glob pattern of TOML/JSON/YAML files to merge (repeatable, brace alternatives allowed)",
)
@click.option(
    "--provider",
    "providers",
    multiple=True,
    metavar="NAME",
    help="Registered provider to merge after the files (repeatable)",
)
@click.option("--pre", "pre_processors", multiple=True, metavar="NAME", help="Registered pre-processor (repeatable)")
@click.option("--post", "post_processors", multiple=True, metavar="NAME", help="Registered post-processor (repeatable)")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="KEY.PATH=VALUE",
    help="Override a merged value; applied last (repeatable)",
)
@click.option(
    "--cache",
    "cache_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Cache artifact path (read when present, written when caching is enabled)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_aggregate(
    ctx: click.Context,
    file_patterns: tuple[str, ...],
    providers: tuple[str, ...],
    pre_processors: tuple[str, ...],
    post_processors: tuple[str, ...],
    set_overrides: tuple[str, ...],
    cache_file: str | None,
    output_format: str,
) -> None:
    """Merge configuration from files and registered providers and print it.

    Options left empty fall back to the ``[config_aggregator]`` settings.
    """
    cli_ctx = get_cli_context(ctx)
    settings = _load_settings(cli_ctx).merged_with(
        file_patterns=file_patterns,
        providers=providers,
        pre_processors=pre_processors,
        post_processors=post_processors,
        cache_file=cache_file,
    )
    fmt = OutputFormat(output_format.lower())
    provider_refs = _build_providers(settings, set_overrides)
    registry = cli_ctx.services.load_component_registry()

    extra = {"command": "aggregate", "profile": cli_ctx.profile, "cache_file": settings.cache_file}
    with lib_log_rich.runtime.bind(job_id="cli-aggregate", extra=extra):
        logger.info("Aggregating configuration", extra={"providers": len(provider_refs)})
        try:
            aggregator = ConfigAggregator(
                provider_refs,
                settings.cache_file,
                settings.post_processors,
                settings.pre_processors,
                registry=registry,
                services=cli_ctx.services,
            )
        except (UnknownProviderTypeError, UnknownProcessorTypeError) as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        except AggregatorError as exc:
            logger.error("Aggregation failed", extra={"error": str(exc)})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc

        if aggregator.loaded_from_cache:
            logger.info("Served configuration from cache")
        click.echo(render_config(aggregator.as_dict(), fmt))


@click.command("cache-clear", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--cache",
    "cache_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Cache artifact path; defaults to the configured cache_file",
)
@click.pass_context
def cli_cache_clear(ctx: click.Context, cache_file: str | None) -> None:
    """Delete the cache artifact so the next run re-aggregates."""
    cli_ctx = get_cli_context(ctx)
    path = cache_file or _load_settings(cli_ctx).cache_file
    if not path:
        click.echo("\nError: no cache file given and none configured", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT)

    with lib_log_rich.runtime.bind(job_id="cli-cache-clear", extra={"command": "cache-clear", "cache_file": path}):
        if cli_ctx.services.remove_cache_artifact(Path(path)):
            logger.info("Removed configuration cache", extra={"path": path})
            click.echo(f"Removed {path}")
        else:
            click.echo(f"No cache file at {path}")


__all__ = ["cli_aggregate", "cli_cache_clear", "render_config"]
