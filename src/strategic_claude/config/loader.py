"""Configuration file loading and merging."""

import logging
import os
from pathlib import Path

import yaml

from strategic_claude.config.schema import DEFAULT_CONFIG, CliConfig

logger = logging.getLogger(__name__)

CONFIG_DIRNAME = ".strategic-claude"
CONFIG_FILENAME = "config.yaml"

ENV_TEMPLATE = "STRATEGIC_CLAUDE_TEMPLATE"
ENV_LANGUAGE = "STRATEGIC_CLAUDE_LANGUAGE"


def get_home_config_path() -> Path:
    """Get path to global config: ~/.strategic-claude/config.yaml."""
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def get_local_config_path() -> Path:
    """Get path to local config: ./.strategic-claude/config.yaml."""
    return Path.cwd() / CONFIG_DIRNAME / CONFIG_FILENAME


def home_config_exists() -> bool:
    """Check if the global home config exists."""
    return get_home_config_path().exists()


def local_config_exists() -> bool:
    """Check if the local project config exists."""
    return get_local_config_path().exists()


def load_yaml_config(path: Path) -> dict[str, object] | None:
    """Load a YAML config file, return None if not found, empty or invalid."""
    if not path.exists():
        return None
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError:
        logger.warning("Ignoring invalid config file: %s", path, exc_info=True)
        return None
    if not isinstance(data, dict):
        return None
    result: dict[str, object] = data
    return result


def config_from_env() -> CliConfig:
    """Build a config from STRATEGIC_CLAUDE_* environment variables."""
    return CliConfig(
        default_template=os.environ.get(ENV_TEMPLATE) or None,
        language=os.environ.get(ENV_LANGUAGE) or None,
    )


def load_config() -> CliConfig:
    """Load merged configuration.

    Precedence (lowest to highest):
    1. Built-in defaults
    2. Global config (~/.strategic-claude/config.yaml)
    3. Local config (./.strategic-claude/config.yaml)
    4. Environment variables
    """
    config = DEFAULT_CONFIG

    for path in (get_home_config_path(), get_local_config_path()):
        data = load_yaml_config(path)
        if data:
            logger.debug("Loaded config from %s", path)
            config = config.merge(CliConfig.from_dict(data))

    return config.merge(config_from_env())


def save_config(config: CliConfig, path: Path) -> None:
    """Save config to a YAML file.

    Creates parent directories if needed. Only saves non-None values.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
