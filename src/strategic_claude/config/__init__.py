"""CLI configuration."""

from strategic_claude.config.loader import (
    home_config_exists,
    load_config,
    local_config_exists,
    save_config,
)
from strategic_claude.config.schema import DEFAULT_CONFIG, CliConfig

__all__ = [
    "DEFAULT_CONFIG",
    "CliConfig",
    "home_config_exists",
    "load_config",
    "local_config_exists",
    "save_config",
]
