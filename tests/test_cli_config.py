"""CLI config stories: display, JSON format, sections, profiles."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from config_aggregator.adapters import cli as cli_mod
from config_aggregator.composition import build_production


def _factory_with_profile_capture(settings: dict[str, Any], captured: list[str | None]) -> Callable[[], Any]:
    config = Config(settings, {})

    def _get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
        captured.append(profile)
        return config

    services = dataclasses.replace(build_production(), get_config=_get_config)
    return lambda: services


@pytest.mark.os_agnostic
def test_when_config_is_invoked_it_displays_configuration(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=production_factory)

    assert result.exit_code == 0


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_it_outputs_json(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    assert "{" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_settings_it_displays_the_section(
    cli_runner: CliRunner,
    cli_harness: Callable[[dict[str, Any]], Any],
) -> None:
    harness = cli_harness({"config_aggregator": {"file_patterns": ["conf/*.toml"], "cache_file": "cache.py"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=harness.factory)

    assert result.exit_code == 0
    assert "config_aggregator" in result.output
    assert "conf/*.toml" in result.output


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_and_section_it_shows_section(
    cli_runner: CliRunner,
    cli_harness: Callable[[dict[str, Any]], Any],
) -> None:
    harness = cli_harness({"config_aggregator": {"providers": ["defaults"]}, "other": {"key": "value"}})

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", "json", "--section", "config_aggregator"], obj=harness.factory
    )

    assert result.exit_code == 0
    assert "defaults" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_nonexistent_section_it_fails(
    cli_runner: CliRunner,
    cli_harness: Callable[[dict[str, Any]], Any],
) -> None:
    harness = cli_harness({"config_aggregator": {}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "nonexistent"], obj=harness.factory)

    assert result.exit_code != 0
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_profile_it_passes_profile_to_get_config(cli_runner: CliRunner) -> None:
    captured: list[str | None] = []
    factory = _factory_with_profile_capture({"config_aggregator": {}}, captured)

    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "staging", "config"], obj=factory)

    assert result.exit_code == 0
    assert captured == ["staging"]


@pytest.mark.os_agnostic
def test_when_config_is_invoked_without_profile_it_passes_none(cli_runner: CliRunner) -> None:
    captured: list[str | None] = []
    factory = _factory_with_profile_capture({"config_aggregator": {}}, captured)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert captured == [None]


@pytest.mark.os_agnostic
def test_invalid_profile_name_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "../escape", "config"], obj=production_factory)

    assert result.exit_code == 2
    assert "--profile" in result.output
