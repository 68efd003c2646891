"""Shared test fixtures."""

import gzip
import json
from pathlib import Path

import pytest
import yaml

from weathermap.ingest.owm_client import OpenWeatherMapClient

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def london_weather() -> dict:
    with open(FIXTURE_DIR / "owm_weather_london.json") as f:
        return json.load(f)


@pytest.fixture
def city_list_entries() -> list[dict]:
    with open(FIXTURE_DIR / "owm_city_list_sample.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def city_list_gz(city_list_entries: list[dict]) -> bytes:
    """The sample city list encoded the way the bulk endpoint serves it."""
    return gzip.compress(json.dumps(city_list_entries).encode("utf-8"))


@pytest.fixture
def owm() -> OpenWeatherMapClient:
    return OpenWeatherMapClient(
        base_url="https://test-owm.example.com",
        city_list_url="https://test-bulk.example.com/sample/city.list.json.gz",
        timeout=5.0,
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {"base_url": "https://test-owm.example.com", "timeout": 12.5}
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
