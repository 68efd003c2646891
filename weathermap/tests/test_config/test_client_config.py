"""Tests for client config schema and YAML loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from weathermap.config.loader import load_config
from weathermap.config.schema import OWM_BASE_URL, OWM_CITY_LIST_URL, ClientConfig


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url == OWM_BASE_URL
        assert config.city_list_url == OWM_CITY_LIST_URL
        assert config.timeout == 30.0

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError):
            ClientConfig(api_key="secret")

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0)


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.base_url == "https://test-owm.example.com"
        assert config.timeout == 12.5
        assert config.city_list_url == OWM_CITY_LIST_URL

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config == ClientConfig()

    def test_fixtures_config(self, fixtures_dir: Path):
        config = load_config(fixtures_dir / "client_config.yaml")
        assert config.timeout == 5.0
        assert config.city_list_url.startswith("https://test-bulk.example.com")
