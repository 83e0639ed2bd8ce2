"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weathercli.ingest.owm_client import WeatherClient
from weathercli.models.current import CurrentWeather
from weathercli.models.forecast import WeatherForecast

TEST_BASE_URL = "https://test-owm.example.com/data/2.5"
TEST_API_KEY = "test-key-1234"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path):
    def _load(name: str) -> dict:
        with open(fixtures_dir / name) as f:
            return json.load(f)

    return _load


@pytest.fixture
def current_payload(load_fixture) -> dict:
    return load_fixture("owm_current_montreal.json")


@pytest.fixture
def forecast_payload(load_fixture) -> dict:
    return load_fixture("owm_forecast_madrid.json")


@pytest.fixture
def current_weather(current_payload: dict) -> CurrentWeather:
    return CurrentWeather.model_validate(current_payload)


@pytest.fixture
def weather_forecast(forecast_payload: dict) -> WeatherForecast:
    return WeatherForecast.model_validate(forecast_payload)


@pytest.fixture
def base_url() -> str:
    return TEST_BASE_URL


@pytest.fixture
def client() -> WeatherClient:
    return WeatherClient(TEST_API_KEY, base_url=TEST_BASE_URL)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("OPEN_WEATHER_MAP_API_KEY", raising=False)
    monkeypatch.delenv("OWM_BASE_URL", raising=False)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML pointing at the test API and return its path."""
    data = {
        "open_weather_map_api_key": TEST_API_KEY,
        "owm_base_url": TEST_BASE_URL,
    }
    path = tmp_path / "config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
