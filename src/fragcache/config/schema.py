"""Pydantic model for the resolved dashboard configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from fragcache.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PREWARM,
    DEFAULT_USE_CACHE,
)
from fragcache.errors.exceptions import ConfigError
from fragcache.fragments.registry import DEFAULT_PAGE_TITLE


class DashboardConfig(BaseModel):
    """Typed view of the merged config hierarchy.

    Strings from YAML or the environment are parsed the pydantic way:
    "no"/"off"/"false" become False, "12" becomes 12. Unknown keys are ignored.
    """

    use_cache: bool = DEFAULT_USE_CACHE
    prewarm: bool = DEFAULT_PREWARM
    max_iterations: int = Field(default=DEFAULT_MAX_ITERATIONS, ge=0)
    page_title: str = DEFAULT_PAGE_TITLE
    log_level: str = DEFAULT_LOG_LEVEL


def validate_config(config: dict[str, Any]) -> DashboardConfig:
    """Validate a merged config dict, raising ConfigError on bad values."""
    try:
        return DashboardConfig.model_validate(config)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']} (got {err['input']!r})"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
