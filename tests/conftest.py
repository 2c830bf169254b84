"""Shared pytest fixtures for aggregation, cache and CLI tests.

Fixtures use descriptive names that read as plain English; tests receive
them implicitly through conftest discovery.
"""

from __future__ import annotations

import contextlib
import dataclasses
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
import rtoml
from click.testing import CliRunner
from lib_layered_config import Config

from config_aggregator.adapters.memory import InMemoryCacheStore
from config_aggregator.application.resolver import ComponentRegistry

if TYPE_CHECKING:
    from config_aggregator.composition import AppServices

_COVERAGE_BASENAME = ".coverage.config_aggregator"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    Runs before pytest-cov creates its ``Coverage()`` object so the
    ``COVERAGE_FILE`` value is honoured however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when asserting on rendered configuration so log
    records written to stderr cannot interfere.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from config_aggregator.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test."""
    from config_aggregator.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def cache_store() -> InMemoryCacheStore:
    """Provide an empty in-memory cache artifact store."""
    return InMemoryCacheStore()


@pytest.fixture
def registry() -> ComponentRegistry:
    """Provide an empty component registry for tests to populate."""
    return ComponentRegistry()


@pytest.fixture
def testing_services(cache_store: InMemoryCacheStore) -> AppServices:
    """In-memory services whose cache ports are backed by ``cache_store``."""
    from config_aggregator.composition import build_testing

    return build_testing(cache_store=cache_store)


@pytest.fixture
def write_toml(tmp_path: Path) -> Callable[[str, dict[str, Any]], Path]:
    """Return a helper that writes a TOML file below ``tmp_path``.

    Example:
        def test_files(write_toml: Callable[[str, dict[str, Any]], Path]) -> None:
            path = write_toml("conf/global.toml", {"db": {"host": "localhost"}})
    """

    def _write(relative: str, data: dict[str, Any]) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(rtoml.dumps(data), encoding="utf-8")
        return path

    return _write


@dataclass
class CliHarness:
    """Services factory plus the fakes behind it.

    Attributes:
        factory: Callable passed as ``obj`` to the CLI.
        cache_store: Store backing the cache ports.
        registry: Registry returned by ``load_component_registry``.
    """

    factory: Callable[[], Any]
    cache_store: InMemoryCacheStore
    registry: ComponentRegistry


@pytest.fixture
def cli_harness(
    clear_config_cache: None,
    cache_store: InMemoryCacheStore,
    registry: ComponentRegistry,
) -> Callable[[dict[str, Any]], CliHarness]:
    """Build CLI services from a tool settings dict.

    Settings and cache ports are in memory; logging and display stay real so
    commands run exactly as in production.

    Example:
        def test_aggregate(cli_runner: CliRunner, cli_harness: Callable[..., CliHarness]) -> None:
            harness = cli_harness({"config_aggregator": {"providers": ["defaults"]}})
            harness.registry.register("defaults", lambda: (lambda: {"a": 1}))
            result = cli_runner.invoke(cli, ["aggregate"], obj=harness.factory)
    """
    from config_aggregator.composition import build_production, build_testing

    def _create(settings: dict[str, Any]) -> CliHarness:
        config = Config(settings, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        services = dataclasses.replace(
            build_testing(cache_store=cache_store, registry=registry),
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
        )
        return CliHarness(factory=lambda: services, cache_store=cache_store, registry=registry)

    return _create
