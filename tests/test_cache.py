"""Cache lifecycle stories: enable flag, file mode, export and write failures."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

import pytest

from config_aggregator.adapters.cache import render_cache_artifact
from config_aggregator.adapters.memory import InMemoryCacheStore
from config_aggregator.application.cache import (
    CACHE_FILEMODE,
    ENABLE_CACHE,
    cache_config,
    load_config_from_cache,
)
from config_aggregator.domain.errors import ConfigCannotBeCachedError, InvalidCacheArtifactError

CACHE_PATH = Path("var/cache/config.py")


def _cache(store: InMemoryCacheStore, config: dict[str, Any], path: Path | str | None = CACHE_PATH) -> bool:
    return cache_config(
        config,
        path,
        generator="tests.Generator",
        render_artifact=render_cache_artifact,
        write_artifact=store.write,
    )


# ======================== cache_config ========================


@pytest.mark.os_agnostic
def test_reserved_key_names() -> None:
    assert ENABLE_CACHE == "config_cache_enabled"
    assert CACHE_FILEMODE == "config_cache_filemode"


@pytest.mark.os_agnostic
def test_config_is_cached_when_enabled(cache_store: InMemoryCacheStore) -> None:
    assert _cache(cache_store, {ENABLE_CACHE: True, "db": {"port": 5432}}) is True

    assert cache_store.read(CACHE_PATH) == {ENABLE_CACHE: True, "db": {"port": 5432}}


@pytest.mark.os_agnostic
def test_artifact_header_names_the_generator(cache_store: InMemoryCacheStore) -> None:
    _cache(cache_store, {ENABLE_CACHE: True})

    header = cache_store.artifacts[str(CACHE_PATH)].splitlines()[0]
    assert header == "# This configuration cache file was generated by tests.Generator"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("flag", [False, 0, None, ""])
def test_config_is_not_cached_when_the_flag_is_falsy(cache_store: InMemoryCacheStore, flag: object) -> None:
    assert _cache(cache_store, {ENABLE_CACHE: flag}) is False

    assert cache_store.artifacts == {}


@pytest.mark.os_agnostic
def test_config_is_not_cached_when_the_flag_is_missing(cache_store: InMemoryCacheStore) -> None:
    assert _cache(cache_store, {"db": {}}) is False


@pytest.mark.os_agnostic
@pytest.mark.parametrize("path", [None, ""])
def test_config_is_not_cached_without_a_path(cache_store: InMemoryCacheStore, path: str | None) -> None:
    assert _cache(cache_store, {ENABLE_CACHE: True}, path) is False

    assert cache_store.artifacts == {}


@pytest.mark.os_agnostic
def test_file_mode_from_the_config_reaches_the_writer(cache_store: InMemoryCacheStore) -> None:
    _cache(cache_store, {ENABLE_CACHE: True, CACHE_FILEMODE: 0o600})

    assert cache_store.modes[str(CACHE_PATH)] == 0o600


@pytest.mark.os_agnostic
def test_octal_string_file_mode_is_parsed(cache_store: InMemoryCacheStore) -> None:
    _cache(cache_store, {ENABLE_CACHE: True, CACHE_FILEMODE: "0o640"})

    assert cache_store.modes[str(CACHE_PATH)] == 0o640


@pytest.mark.os_agnostic
def test_missing_file_mode_means_default(cache_store: InMemoryCacheStore) -> None:
    _cache(cache_store, {ENABLE_CACHE: True})

    assert cache_store.modes[str(CACHE_PATH)] is None


@pytest.mark.os_agnostic
def test_uncacheable_values_raise_config_cannot_be_cached(cache_store: InMemoryCacheStore) -> None:
    config = {ENABLE_CACHE: True, "lock": threading.Lock()}

    with pytest.raises(ConfigCannotBeCachedError, match="Cannot export config into a cache file") as exc:
        _cache(cache_store, config)

    assert "config['lock']" in str(exc.value)
    assert cache_store.artifacts == {}


@pytest.mark.os_agnostic
def test_non_mapping_config_raises_config_cannot_be_cached(cache_store: InMemoryCacheStore) -> None:
    with pytest.raises(ConfigCannotBeCachedError, match="must be a mapping, got list"):
        _cache(cache_store, [{ENABLE_CACHE: True}])  # type: ignore[arg-type]

    assert cache_store.artifacts == {}


@pytest.mark.os_agnostic
def test_uncacheable_values_are_ignored_when_caching_is_disabled(cache_store: InMemoryCacheStore) -> None:
    assert _cache(cache_store, {"lock": threading.Lock()}) is False


@pytest.mark.os_agnostic
def test_non_mapping_config_is_ignored_without_a_path(cache_store: InMemoryCacheStore) -> None:
    assert _cache(cache_store, ["not", "a", "mapping"], None) is False  # type: ignore[arg-type]


@pytest.mark.os_agnostic
def test_write_failures_are_logged_and_reported_as_not_cached(
    cache_store: InMemoryCacheStore,
    caplog: pytest.LogCaptureFixture,
) -> None:
    cache_store.fail_writes = True

    with caplog.at_level(logging.WARNING, logger="config_aggregator.application.cache"):
        assert _cache(cache_store, {ENABLE_CACHE: True}) is False

    assert "Failed to write configuration cache" in caplog.text


# ======================== load_config_from_cache ========================


@pytest.mark.os_agnostic
def test_missing_artifact_loads_nothing(cache_store: InMemoryCacheStore) -> None:
    assert load_config_from_cache(CACHE_PATH, read_artifact=cache_store.read) is None


@pytest.mark.os_agnostic
def test_no_path_never_touches_the_reader() -> None:
    def exploding_reader(path: Path) -> dict[str, Any] | None:
        raise AssertionError("reader must not be called")

    assert load_config_from_cache(None, read_artifact=exploding_reader) is None
    assert load_config_from_cache("", read_artifact=exploding_reader) is None


@pytest.mark.os_agnostic
def test_existing_artifact_is_loaded(cache_store: InMemoryCacheStore) -> None:
    _cache(cache_store, {ENABLE_CACHE: True, 0: "first", "nested": {"list": [1, 2]}})

    loaded = load_config_from_cache(str(CACHE_PATH), read_artifact=cache_store.read)

    assert loaded == {ENABLE_CACHE: True, 0: "first", "nested": {"list": [1, 2]}}


@pytest.mark.os_agnostic
def test_corrupt_artifact_raises(cache_store: InMemoryCacheStore) -> None:
    cache_store.artifacts[str(CACHE_PATH)] = "import os\nos.system('echo nope')\n"

    with pytest.raises(InvalidCacheArtifactError):
        load_config_from_cache(CACHE_PATH, read_artifact=cache_store.read)
