"""Tests for task list YAML loading."""

import pytest

from fragcache.config.loader import load_tasks_yaml
from fragcache.types import Task, TaskStatus


class TestLoadTasksYaml:
    def test_loads_tasks(self, sample_tasks_yaml):
        tasks = load_tasks_yaml(sample_tasks_yaml)
        assert [t.id for t in tasks] == ["task-1", "task-2", "task-3"]
        assert all(isinstance(t, Task) for t in tasks)

    def test_fields(self, sample_tasks_yaml):
        tasks = load_tasks_yaml(str(sample_tasks_yaml))
        assert tasks[0].status == TaskStatus.COMPLETE
        assert tasks[1].acceptance_criteria == ["Form validates email"]
        assert tasks[2].status == TaskStatus.PENDING
        assert tasks[2].dependencies == ["task-2"]

    def test_open_tasks(self, sample_tasks_yaml):
        tasks = load_tasks_yaml(sample_tasks_yaml)
        assert [t.id for t in tasks if t.is_open] == ["task-2", "task-3"]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_tasks_yaml(tmp_path / "nonexistent.yaml")

    def test_missing_tasks_key(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("foo: bar\n")
        with pytest.raises(ValueError, match="missing top-level 'tasks' key"):
            load_tasks_yaml(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("tasks: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid tasks YAML in"):
            load_tasks_yaml(path)

    def test_empty_tasks(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("tasks:\n")
        assert load_tasks_yaml(path) == []

    def test_tasks_not_a_list(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("tasks:\n  id: x\n")
        with pytest.raises(ValueError, match="to be a list"):
            load_tasks_yaml(path)

    def test_invalid_entry(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("tasks:\n  - id: x\n    status: DONE\n")
        with pytest.raises(ValueError, match="Invalid task entry"):
            load_tasks_yaml(path)
