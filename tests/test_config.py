"""Tests for configuration adapter."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mvg_quick_departures.adapters.config import AppConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings from the developer's environment out of these tests."""
    for name in (
        "TRANSPORT_TYPES",
        "REFRESH_INTERVAL_SECONDS",
        "SEARCH_DEBOUNCE_MS",
        "TIMEZONE",
        "LOG_LEVEL",
        "PINNED_STATIONS_FILE",
        "DEPARTURES_LIMIT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig.for_testing()

    assert config.mvg_api_base_url == "https://www.mvg.de/api/bgw-pt/v3"
    assert config.departures_limit == 20
    assert config.departures_offset_minutes == 5
    assert config.transport_types == ["UBAHN", "SBAHN", "BUS", "TRAM"]
    assert config.refresh_interval_seconds == 30
    assert config.search_debounce_seconds == 0.3
    assert config.search_panel_limit == 10
    assert config.station_dropdown_limit == 20
    assert config.timezone == "Europe/Berlin"
    assert config.log_level == "INFO"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("DEPARTURES_LIMIT", "8")
    monkeypatch.setenv("REFRESH_INTERVAL_SECONDS", "15")
    monkeypatch.setenv("TIMEZONE", "UTC")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig.for_testing()

    assert config.departures_limit == 8
    assert config.refresh_interval_seconds == 15
    assert config.timezone == "UTC"
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["ubahn, bus", '["UBAHN", "bus"]'])
def test_transport_types_accept_comma_list_and_json(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    """Given a comma separated or JSON list, when loading config, then types are normalized."""
    monkeypatch.setenv("TRANSPORT_TYPES", raw)

    config = AppConfig.for_testing()

    assert config.transport_types == ["UBAHN", "BUS"]


def test_config_validates_transport_types() -> None:
    """Given an unknown transport type, when loading config, then validation fails."""
    with pytest.raises(ValidationError, match="Unknown transport types: FERRY"):
        AppConfig.for_testing(transport_types=["UBAHN", "FERRY"])


def test_config_rejects_empty_transport_types() -> None:
    """Given no transport types, when loading config, then validation fails."""
    with pytest.raises(ValidationError, match="must not be empty"):
        AppConfig.for_testing(transport_types=[])


@pytest.mark.parametrize("field", ["refresh_interval_seconds", "search_debounce_ms"])
def test_config_rejects_non_positive_intervals(field: str) -> None:
    """Given a zero interval, when loading config, then validation fails."""
    with pytest.raises(ValidationError, match="intervals must be positive"):
        AppConfig.for_testing(**{field: 0})


def test_config_validates_timezone() -> None:
    """Given an unknown timezone, when loading config, then validation fails."""
    with pytest.raises(ValidationError, match="Unknown timezone"):
        AppConfig.for_testing(timezone="Mars/Olympus_Mons")


def test_config_validates_log_level() -> None:
    """Given an unknown log level, when loading config, then validation fails."""
    with pytest.raises(ValidationError, match="log_level must be"):
        AppConfig.for_testing(log_level="chatty")


def test_pinned_stations_path_expands_home() -> None:
    """Given a path below ~, then the property expands it."""
    config = AppConfig.for_testing(pinned_stations_file="~/pins.json")

    assert config.pinned_stations_path == Path.home() / "pins.json"
