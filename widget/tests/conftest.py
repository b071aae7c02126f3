"""Shared test fixtures."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from widget.config.schema import WidgetConfig
from widget.controller import WeatherController
from widget.ingest.weather_fetcher import WeatherFetcher, WeatherPayloads

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture(autouse=True)
def no_env_app_id(monkeypatch):
    """Keep a developer's real API key out of the tests."""
    monkeypatch.delenv("OPENWEATHER_APP_ID", raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def current_london() -> dict:
    return load_fixture("owm_current_london.json")


@pytest.fixture
def forecast_london() -> dict:
    return load_fixture("owm_forecast_london.json")


@pytest.fixture
def default_config() -> WidgetConfig:
    return WidgetConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"app_id": "test-key", "base_url": "https://test-owm.example.com"},
        "display": {"default_city": "Paris", "unit": "imperial"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def mock_fetcher(current_london: dict, forecast_london: dict) -> MagicMock:
    """WeatherFetcher double that always returns the London payloads."""
    fetcher = MagicMock(spec=WeatherFetcher)
    fetcher.fetch.return_value = WeatherPayloads(
        current=current_london, forecast=forecast_london
    )
    return fetcher


@pytest.fixture
def alerts() -> list[str]:
    return []


@pytest.fixture
def controller(mock_fetcher: MagicMock, alerts: list[str]) -> WeatherController:
    return WeatherController(mock_fetcher, alert=alerts.append)
