from __future__ import annotations

import importlib

import pytest

import football_api.core.config as config_module
from football_api.core.config import DEFAULT_SERVICE_URL, ClientConfig, Settings
from football_api.core.errors import ConfigError
from football_api.enums import OutputFormat


def test_defaults() -> None:
    cfg = ClientConfig(api_key="k1")

    assert cfg.service_url == DEFAULT_SERVICE_URL
    assert cfg.output_format is OutputFormat.JSON
    assert cfg.cache is None
    assert cfg.cache_time == 0
    assert cfg.generate_hash is False
    assert cfg.timeout_s == 30.0


@pytest.mark.parametrize("api_key", ["", "   ", None])
def test_empty_api_key_rejected(api_key) -> None:
    with pytest.raises(ConfigError):
        ClientConfig(api_key=api_key)


def test_empty_service_url_rejected() -> None:
    with pytest.raises(ConfigError):
        ClientConfig(api_key="k1", service_url="")


def test_output_type_parsed_from_string() -> None:
    assert ClientConfig(api_key="k1", output_format="xml").output_format is OutputFormat.XML
    assert ClientConfig(api_key="k1", output_format="PHP").output_format is OutputFormat.ARRAY


def test_unknown_output_type_rejected() -> None:
    with pytest.raises(ConfigError):
        ClientConfig(api_key="k1", output_format="YAML")


def test_negative_cache_time_rejected() -> None:
    with pytest.raises(ConfigError):
        ClientConfig(api_key="k1", cache_time=-1)


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("FOOTBALL_API_API_KEY", "env-key")
    monkeypatch.setenv("FOOTBALL_API_OUTPUT_TYPE", "OBJECT")
    monkeypatch.setenv("FOOTBALL_API_CACHE_TIME", "300")
    monkeypatch.setenv("FOOTBALL_API_GENERATE_HASH", "true")

    cfg = ClientConfig.from_settings(Settings(_env_file=None))

    assert cfg.api_key == "env-key"
    assert cfg.output_format is OutputFormat.OBJECT
    assert cfg.cache_time == 300
    assert cfg.generate_hash is True


def test_settings_require_api_key(monkeypatch) -> None:
    monkeypatch.delenv("FOOTBALL_API_API_KEY", raising=False)

    with pytest.raises(ConfigError):
        Settings(_env_file=None).require_api_key()


def test_api_key_hidden_from_repr(monkeypatch) -> None:
    monkeypatch.setenv("FOOTBALL_API_API_KEY", "very-secret")

    assert "very-secret" not in repr(Settings(_env_file=None))


@pytest.mark.parametrize("cache_time", ["abc", None, [60]])
def test_non_integer_cache_time_rejected(cache_time) -> None:
    with pytest.raises(ConfigError):
        ClientConfig(api_key="k1", cache_time=cache_time)


def test_import_does_not_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("FOOTBALL_API_CACHE_TIME", "not-a-number")

    importlib.reload(config_module)

    assert not hasattr(config_module, "settings")
