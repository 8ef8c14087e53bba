# tests/test_domain_models.py
from datetime import timezone

import pytest

from core.domain.models import Task, TaskListItemViewModel, WorkUnit
from tests.conftest import T0, at, task_record, work_unit


class TestWorkUnit:

    def test_parses_wire_aliases(self):
        unit = WorkUnit.model_validate(work_unit(0, 60))
        assert unit.started_at == T0
        assert unit.finished_at == at(60)
        assert unit.is_open is False

    def test_null_finished_at_is_open(self):
        unit = WorkUnit.model_validate({"startedAt": "2024-05-01T09:00:00Z", "finishedAt": None})
        assert unit.is_open is True

    def test_missing_finished_at_is_open(self):
        unit = WorkUnit.model_validate({"startedAt": "2024-05-01T09:00:00Z"})
        assert unit.finished_at is None

    def test_naive_timestamp_is_treated_as_utc(self):
        unit = WorkUnit.model_validate({"startedAt": "2024-05-01T09:00:00", "finishedAt": None})
        assert unit.started_at.tzinfo == timezone.utc
        assert unit.started_at == T0

    def test_offsets_are_preserved_as_instants(self):
        unit = WorkUnit.model_validate({"startedAt": "2024-05-01T11:00:00+02:00", "finishedAt": None})
        assert unit.started_at == T0


class TestTask:

    def test_parses_full_record(self):
        task = Task.model_validate(task_record(units=[work_unit(0, 10), work_unit(20, None)]))
        assert task.id == "task-1"
        assert task.time_allowance_in_seconds == 7200
        assert task.is_current is True
        assert len(task.work_units) == 2
        assert len(task.open_work_units) == 1

    def test_is_immutable(self):
        task = Task.model_validate(task_record())
        with pytest.raises(Exception):
            task.title = "changed"

    def test_rejects_empty_title(self):
        with pytest.raises(Exception):
            Task.model_validate(task_record(title=""))


class TestTaskListItemViewModel:

    def test_dumps_left_port_shape(self):
        item = TaskListItemViewModel(
            id="t",
            title="T",
            elapsed_display="00:01:00",
            remaining_display="-00:00:30",
            is_overtime=True,
        )
        assert item.model_dump(by_alias=True) == {
            "id": "t",
            "title": "T",
            "elapsedDisplay": "00:01:00",
            "remainingDisplay": "-00:00:30",
            "isOvertime": True,
        }
