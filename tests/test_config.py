import pytest

from indexer_cli.config import (
    IndexerCliConfig,
    config_path,
    load_config,
    load_validated_config,
    save_config,
    validate_api_url,
)
from indexer_cli.errors import ConfigError


def test_config_path_honours_env(isolated_config):
    assert config_path() == isolated_config


def test_load_config_missing_file_is_empty(isolated_config):
    assert not isolated_config.exists()
    assert load_config() == {}


def test_save_config_merges_existing_values(isolated_config):
    save_config({"api": "http://indexer.local:18000/"})
    save_config({"timeout": 5})
    assert load_config() == {"api": "http://indexer.local:18000/", "timeout": 5}


def test_load_config_rejects_non_mapping(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_config()


def test_load_config_rejects_broken_yaml(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text("api: [unterminated\n")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config()


def test_load_validated_config_from_file(isolated_config):
    save_config({"api": "http://indexer.local:18000/", "timeout": 12})
    config = load_validated_config()
    assert config.api == "http://indexer.local:18000/"
    assert config.timeout == 12
    assert config.config_file == isolated_config


def test_environment_overrides_file(isolated_config, monkeypatch):
    save_config({"api": "http://from-file:18000/"})
    monkeypatch.setenv("GRAPH_INDEXER_API", "https://from-env:18000/")
    assert load_validated_config().api == "https://from-env:18000/"


def test_load_validated_config_requires_api():
    with pytest.raises(ConfigError, match="graph indexer connect"):
        load_validated_config()


def test_load_validated_config_rejects_invalid_api(monkeypatch):
    monkeypatch.setenv("GRAPH_INDEXER_API", "localhost")
    with pytest.raises(ConfigError, match="Invalid indexer management API URL"):
        load_validated_config()


def test_defaults():
    config = IndexerCliConfig()
    assert config.api is None
    assert config.timeout == 30.0


def test_validate_api_url_accepts_http_and_https():
    assert validate_api_url("http://127.0.0.1:18000") == "http://127.0.0.1:18000"
    assert validate_api_url("https://indexer.example.com/graphql") == "https://indexer.example.com/graphql"
