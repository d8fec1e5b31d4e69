"""Configuration loading, validation, and defaults."""

from flowdock.config.defaults import (
    get_default_config,
    layer,
    load_config,
    load_dotenv_config,
    load_env_config,
    validate_config,
)
from flowdock.config.loader import build_cli_config, load_global_config, load_project_config

__all__ = [
    "build_cli_config",
    "get_default_config",
    "layer",
    "load_config",
    "load_dotenv_config",
    "load_env_config",
    "load_global_config",
    "load_project_config",
    "validate_config",
]
