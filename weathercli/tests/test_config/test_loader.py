"""Tests for config loading and API key resolution."""

from pathlib import Path

import pytest
import yaml

from weathercli.config.defaults import API_KEY_ENV, OWM_BASE_URL
from weathercli.config.loader import load_config, require_api_key
from weathercli.config.schema import AppConfig
from weathercli.errors import ConfigError


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.open_weather_map_api_key == "test-key-1234"
        assert config.owm_base_url == "https://test-owm.example.com/data/2.5"

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "absent.yaml")
        assert config.open_weather_map_api_key == ""
        assert config.owm_base_url == OWM_BASE_URL

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.owm_base_url == OWM_BASE_URL

    def test_uppercase_key(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        with open(path, "w") as f:
            yaml.dump({"OPEN_WEATHER_MAP_API_KEY": "from-file"}, f)
        config = load_config(path)
        assert config.open_weather_map_api_key == "from-file"

    def test_env_overrides_file(self, config_yaml_path: Path, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "from-env")
        config = load_config(config_yaml_path)
        assert config.open_weather_map_api_key == "from-env"

    def test_env_without_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "from-env")
        config = load_config(tmp_path / "absent.yaml")
        assert config.open_weather_map_api_key == "from-env"

    def test_env_overrides_base_url(self, config_yaml_path: Path, monkeypatch):
        monkeypatch.setenv("OWM_BASE_URL", "https://owm.internal/data/2.5")
        config = load_config(config_yaml_path)
        assert config.owm_base_url == "https://owm.internal/data/2.5"
        assert config.open_weather_map_api_key == "test-key-1234"

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("bogus: 1\n")
        with pytest.raises(ConfigError, match="invalid config"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("key: [unclosed\n")
        with pytest.raises(ConfigError, match="could not read"):
            load_config(path)

    def test_non_mapping(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)


class TestRequireApiKey:
    def test_returns_key(self):
        assert require_api_key(AppConfig(open_weather_map_api_key=" abc ")) == "abc"

    def test_missing_key_fails(self):
        with pytest.raises(ConfigError, match=API_KEY_ENV):
            require_api_key(AppConfig())


class TestMasked:
    def test_masks_all_but_prefix(self):
        config = AppConfig(open_weather_map_api_key="abcdef123456")
        assert config.masked().open_weather_map_api_key == "abcd********"
        assert config.open_weather_map_api_key == "abcdef123456"

    def test_short_key_fully_masked(self):
        assert AppConfig(open_weather_map_api_key="abc").masked().open_weather_map_api_key == "***"


class TestAppConfigSettings:
    def test_reads_environment_directly(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "from-env")
        assert AppConfig().open_weather_map_api_key == "from-env"

    def test_environment_beats_init_values(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "from-env")
        config = AppConfig(open_weather_map_api_key="from-file")
        assert config.open_weather_map_api_key == "from-env"

    def test_env_name_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV.lower(), "lower-env")
        assert AppConfig().open_weather_map_api_key == "lower-env"
