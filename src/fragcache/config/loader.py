"""YAML loading for dashboard task lists."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from fragcache.types import Task


def load_tasks_yaml(path: str | Path) -> list[Task]:
    """Load a YAML file with a top-level 'tasks' list and return validated Tasks."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Tasks YAML not found: {path}")

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid tasks YAML in {path}: {e}") from e

    if not isinstance(raw, dict) or "tasks" not in raw:
        raise ValueError(f"Invalid tasks YAML: missing top-level 'tasks' key in {path}")

    items = raw["tasks"] or []
    if not isinstance(items, list):
        raise ValueError(f"Expected 'tasks' to be a list in {path}")

    try:
        return [Task(**item) for item in items]
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Invalid task entry in {path}: {e}") from e
