"""Configuration hierarchy — layers merged from lowest to highest priority.

  1. Package defaults
  2. Global file      ~/.fragcache/config.yaml
  3. Project file     fragcache.yaml, nearest one from cwd upward
  4. Environment      FRAGCACHE_USE_CACHE, FRAGCACHE_PREWARM, ...
  5. Runtime keyword arguments (None means "not given")
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import yaml

from fragcache.config.defaults import get_defaults

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".fragcache" / "config.yaml"
_PROJECT_CONFIG_NAME = "fragcache.yaml"

_ENV_PREFIX = "FRAGCACHE_"
_ENV_MAP: dict[str, str] = {
    f"{_ENV_PREFIX}{key.upper()}": key
    for key in ("use_cache", "prewarm", "max_iterations", "page_title", "log_level")
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


_PARSERS: dict[str, Callable[[str], Any]] = {
    "use_cache": _parse_bool,
    "prewarm": _parse_bool,
    "max_iterations": int,
}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Resolve the effective configuration as a flat dict."""
    config: dict[str, Any] = {}
    for name, layer in _layers(runtime_overrides):
        if layer:
            logger.debug("Config layer %s sets: %s", name, ", ".join(sorted(layer)))
            config.update(layer)
    return config


def _layers(runtime_overrides: dict[str, Any]) -> Iterator[tuple[str, dict[str, Any] | None]]:
    yield "defaults", get_defaults()
    yield "global", _load_yaml_config(_GLOBAL_CONFIG_PATH)
    project_path = _find_project_config()
    yield "project", _load_yaml_config(project_path) if project_path else None
    yield "env", _load_env_vars()
    yield "runtime", {k: v for k, v in runtime_overrides.items() if v is not None}


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Parse a YAML mapping; missing, unreadable or non-mapping files yield None."""
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, ignoring", path)
        return None
    return data


def _find_project_config() -> Path | None:
    cwd = Path.cwd()
    return next(
        (d / _PROJECT_CONFIG_NAME for d in (cwd, *cwd.parents) if (d / _PROJECT_CONFIG_NAME).is_file()),
        None,
    )


def _load_env_vars() -> dict[str, Any]:
    return {
        key: _coerce_env_value(key, os.environ[env_key])
        for env_key, key in _ENV_MAP.items()
        if env_key in os.environ
    }


def _coerce_env_value(key: str, value: str) -> Any:
    """Parse an env string for a typed key; unparseable values pass through."""
    parser = _PARSERS.get(key)
    if parser is None:
        return value
    try:
        return parser(value)
    except ValueError:
        logger.warning("Cannot parse %s%s=%r, keeping it as a string", _ENV_PREFIX, key.upper(), value)
        return value
