"""Tool settings: bundled defaults and the typed ``[config_aggregator]`` section."""

from __future__ import annotations

import pytest
import rtoml
from lib_layered_config import Config
from pydantic import ValidationError

from config_aggregator.adapters.config import AggregateSettingsModel, get_default_config_path, load_aggregate_settings


@pytest.mark.os_agnostic
def test_bundled_defaults_parse_into_the_settings_model() -> None:
    defaults = rtoml.load(get_default_config_path())

    settings = AggregateSettingsModel.model_validate(defaults["config_aggregator"])

    assert settings.file_patterns == []
    assert settings.providers == []
    assert settings.cache_file == ""


@pytest.mark.os_agnostic
def test_bundled_defaults_carry_a_logging_section() -> None:
    defaults = rtoml.load(get_default_config_path())

    assert defaults["lib_log_rich"]["environment"] == "prod"


@pytest.mark.os_agnostic
def test_missing_section_yields_defaults() -> None:
    settings = load_aggregate_settings(Config({}, {}))

    assert settings == AggregateSettingsModel()
    assert settings.cache_file is None


@pytest.mark.os_agnostic
def test_section_values_are_loaded() -> None:
    config = Config(
        {"config_aggregator": {"file_patterns": ["conf/*.toml"], "post_processors": ["expand"], "cache_file": "c.py"}},
        {},
    )

    settings = load_aggregate_settings(config)

    assert settings.file_patterns == ["conf/*.toml"]
    assert settings.post_processors == ["expand"]
    assert settings.cache_file == "c.py"


@pytest.mark.os_agnostic
def test_unknown_keys_are_ignored() -> None:
    settings = load_aggregate_settings(Config({"config_aggregator": {"colour": "blue"}}, {}))

    assert settings == AggregateSettingsModel()


@pytest.mark.os_agnostic
def test_wrong_types_are_rejected() -> None:
    with pytest.raises(ValidationError):
        load_aggregate_settings(Config({"config_aggregator": {"providers": 5}}, {}))


@pytest.mark.os_agnostic
def test_cli_values_replace_settings_only_when_given() -> None:
    base = AggregateSettingsModel(file_patterns=["a.toml"], providers=["db"], cache_file="a.py")

    merged = base.merged_with(file_patterns=["b.toml"], providers=())

    assert merged.file_patterns == ["b.toml"]
    assert merged.providers == ["db"]
    assert merged.cache_file == "a.py"
