"""Configuration defaults and layered loading for Flowdock.

Layers, lowest first: built-in defaults, global YAML, project YAML, ``.env``,
process environment, CLI flags.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import dotenv_values

from flowdock.config.loader import load_global_config, load_project_config

__all__ = [
    "get_default_config",
    "layer",
    "load_config",
    "load_dotenv_config",
    "load_env_config",
    "validate_config",
]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_ENV_TO_CONFIG_PATH = {
    "FLOWDOCK_ACTION_KEYWORD": ("action_keyword",),
    "FLOWDOCK_ICON_PATH": ("icon_path",),
    "FLOWDOCK_API_TIMEOUT": ("engine", "api_timeout"),
    "FLOWDOCK_CLI_BINARY": ("engine", "cli_binary"),
    "FLOWDOCK_LOG_LEVEL": ("logging", "level"),
    "FLOWDOCK_LOGS_DIR": ("logging", "logs_dir"),
}


def layer(*sources: Dict[str, Any]) -> Dict[str, Any]:
    """Stack config dicts; later sources win, nested sections merge key by key."""
    result: Dict[str, Any] = {}
    for source in sources:
        for key, value in source.items():
            if value is None:
                continue
            current = result.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                result[key] = layer(current, value)
            elif isinstance(value, dict):
                result[key] = layer(value)
            else:
                result[key] = value
    return result


def _from_variables(values: Dict[str, Optional[str]]) -> Dict[str, Any]:
    config: Dict[str, Any] = {}
    for env_key, config_path in _ENV_TO_CONFIG_PATH.items():
        if values.get(env_key) is not None:
            _set_path(config, config_path, values[env_key])
    return config


def load_dotenv_config(dotenv_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load ``FLOWDOCK_*`` settings from a ``.env`` file."""
    path = dotenv_path or Path(".env")
    if not path.exists():
        return {}
    return _from_variables(dotenv_values(path))


def load_env_config() -> Dict[str, Any]:
    """Load ``FLOWDOCK_*`` settings from the current environment."""
    return _from_variables(dict(os.environ))


def get_default_config() -> Dict[str, Any]:
    """Return a fresh copy of Flowdock's default configuration."""
    return {
        "action_keyword": "docker",
        "icon_path": "Images/docker.png",
        "engine": {
            "api_timeout": 20,
            "cli_binary": "docker",
        },
        "logging": {
            "level": "INFO",
            "logs_dir": Path("./logs"),
        },
    }


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Coerce and check values that arrive as strings from files or env."""
    engine = config.setdefault("engine", {})
    try:
        timeout = int(engine.get("api_timeout", 20))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"engine.api_timeout must be an integer: {engine.get('api_timeout')!r}") from exc
    if timeout <= 0:
        raise ValueError(f"engine.api_timeout must be positive: {timeout}")
    engine["api_timeout"] = timeout
    if not str(engine.get("cli_binary") or "").strip():
        raise ValueError("engine.cli_binary must not be empty")

    log_config = config.setdefault("logging", {})
    level = str(log_config.get("level", "INFO")).upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}: {level}")
    log_config["level"] = level
    log_config["logs_dir"] = Path(log_config.get("logs_dir") or "./logs")

    config["action_keyword"] = str(config.get("action_keyword") or "").strip()
    config["icon_path"] = str(config.get("icon_path") or "")
    return config


def load_config(
    cli_args: Optional[Dict[str, Any]] = None,
    config_path: Optional[Path] = None,
    dotenv_path: Optional[Path] = None,
) -> Dict[str, Any]:
    """Load configuration from defaults, files, environment, and CLI.

    ``config_path`` names the project YAML explicitly; without it the
    working directory's ``flowdock.yaml`` is used when present.
    """
    config = layer(
        get_default_config(),
        load_global_config(),
        load_project_config(config_path),
        load_dotenv_config(dotenv_path),
        load_env_config(),
        cli_args or {},
    )
    return validate_config(config)


def _set_path(config: Dict[str, Any], path: tuple, value: Any) -> None:
    target = config
    for key in path[:-1]:
        target = target.setdefault(key, {})
    target[path[-1]] = value
