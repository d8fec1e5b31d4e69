"""YAML config files and CLI config assembly.

Two file layers feed :func:`flowdock.config.defaults.load_config`: the user's
global config and the project ``flowdock.yaml``. A file named explicitly with
``--config`` must exist and hold a mapping, otherwise ``ValueError`` is raised
so the CLI can stop early. Files found implicitly are best effort: a broken one
is logged and skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

__all__ = ["PROJECT_CONFIG_NAME", "build_cli_config", "load_global_config", "load_project_config"]

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = "flowdock.yaml"


def _read_mapping(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as exc:
        raise ValueError(f"failed to read config {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"invalid config format (expected mapping): {path}")
    return data


def _read_optional(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        return _read_mapping(path)
    except ValueError as exc:
        logger.warning("Skipping config file: %s", exc)
        return {}


def load_project_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the project YAML layer.

    With no path, ``./flowdock.yaml`` is used if present.
    """
    if config_path is None:
        return _read_optional(Path(PROJECT_CONFIG_NAME))
    if not config_path.exists():
        raise ValueError(f"config file not found: {config_path}")
    return _read_mapping(config_path)


def load_global_config() -> Dict[str, Any]:
    """Load the first user-level config found under the home directory."""
    try:
        home = Path.home()
    except (OSError, RuntimeError):
        return {}
    for candidate in (home / ".flowdock" / "config.yaml", home / ".config" / "flowdock" / "config.yaml"):
        if candidate.exists():
            return _read_optional(candidate)
    return {}


def build_cli_config(args) -> Dict[str, Any]:
    """Translate argparse args into a hierarchical config dict."""
    cfg: Dict[str, Any] = {}
    if getattr(args, "action_keyword", None) is not None:
        cfg["action_keyword"] = args.action_keyword
    if getattr(args, "timeout", None):
        cfg.setdefault("engine", {})["api_timeout"] = args.timeout
    if getattr(args, "logs_dir", None):
        cfg.setdefault("logging", {})["logs_dir"] = args.logs_dir
    if getattr(args, "debug", False):
        cfg.setdefault("logging", {})["level"] = "DEBUG"
    return cfg
