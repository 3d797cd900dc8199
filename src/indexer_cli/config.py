"""Configuration for the indexer CLI.

Values come from the YAML file written by ``graph indexer connect`` and from
``GRAPH_INDEXER_*`` environment variables. Environment variables win.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Type

import httpx
import yaml
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from indexer_cli.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "GRAPH_INDEXER_"
DEFAULT_CONFIG_FILE = Path.home() / ".config" / "graph-cli" / "indexer.yml"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def config_path() -> Path:
    """Location of the config file, honouring GRAPH_INDEXER_CONFIG_FILE."""
    override = os.environ.get(f"{ENV_PREFIX}CONFIG_FILE")
    return Path(override).expanduser() if override else DEFAULT_CONFIG_FILE


class IndexerCliConfig(BaseSettings):
    """Configuration settings for the indexer CLI."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    api: Optional[str] = Field(default=None, description="Indexer management API URL")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    config_file: Path = Field(default_factory=config_path, description="Config file location")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=config_path()),
        )


def validate_api_url(url: str) -> str:
    """Return ``url`` if it is an absolute HTTP(S) URL, raise ConfigError otherwise."""
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigError(f'Invalid indexer management API URL "{url}": {e}') from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigError(f'Invalid indexer management API URL "{url}", must be an http(s) URL')
    return url


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read the raw config file. A missing file is an empty config."""
    path = path or config_path()
    if not path.exists():
        logger.debug(f"No config file at {path}")
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def save_config(values: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Merge ``values`` into the config file and write it back."""
    path = path or config_path()
    config = load_config(path)
    config.update(values)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config, f, default_flow_style=False)
    logger.debug(f"Wrote config file {path}")
    return path


def load_validated_config() -> IndexerCliConfig:
    """Load the config and make sure a usable API URL is set."""
    # Parse errors in the file surface here rather than as a settings failure.
    load_config()
    config = IndexerCliConfig()
    if not config.api:
        raise ConfigError(
            "No indexer management API URL configured. Run `graph indexer connect <url>` first "
            f"or set {ENV_PREFIX}API"
        )
    validate_api_url(config.api)
    logger.debug(f"Using indexer management API at {config.api}")
    return config
