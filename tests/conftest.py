from collections import Counter

import pytest

from fragcache.cache.store import FragmentCache
from fragcache.fragments.registry import GeneratorTable
from fragcache.types import ALL_FRAGMENT_KEYS, FragmentKey


class CountingGenerators:
    """Generator table whose functions record how often they run."""

    def __init__(self) -> None:
        self.calls: Counter[FragmentKey] = Counter()
        self.table = GeneratorTable({key: self._make(key) for key in ALL_FRAGMENT_KEYS})

    def _make(self, key: FragmentKey):
        def generate() -> str:
            self.calls[key] += 1
            return f"<div data-fragment=\"{key.value}\"></div>"

        return generate


@pytest.fixture
def counting():
    return CountingGenerators()


@pytest.fixture
def cache(counting):
    """FragmentCache over counting generators and a fixed clock."""
    return FragmentCache(counting.table, clock=lambda: 1_700_000_000_000)


@pytest.fixture
def sample_tasks_yaml(tmp_path):
    """Write a small tasks YAML and return its path."""
    content = """
tasks:
  - id: task-1
    description: Set up project skeleton
    status: COMPLETE
  - id: task-2
    description: Add login form
    status: PENDING
    acceptance_criteria:
      - Form validates email
  - id: task-3
    description: Wire up API client
    dependencies: [task-2]
"""
    path = tmp_path / "tasks.yaml"
    path.write_text(content)
    return path
