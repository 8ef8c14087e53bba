# tests/test_cli.py
import asyncio
import json

import pytest
from rich.table import Table
from rich.text import Text
from typer.testing import CliRunner

from cli.main import _watch_frame, app, build_repository, build_service
from adapters.clock import FixedClock
from adapters.task_sources import HttpTaskRepository, InMemoryTaskRepository, JsonFileTaskRepository
from tests.conftest import at, task_record, work_unit

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("TASKTIMER_TASKS_FILE", raising=False)
    monkeypatch.delenv("TASKTIMER_TASKS_API_URL", raising=False)
    monkeypatch.setenv("TASKTIMER_ANALYTICS_ENABLED", "false")


@pytest.fixture
def tasks_file(tmp_path):
    path = tmp_path / "tasks.json"
    records = [
        task_record("on-time", title="On time", allowance=7200, units=[work_unit(0, 3600)]),
        task_record("late", title="Late", allowance=600, units=[work_unit(0, 900)]),
    ]
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def test_list_json_output(tasks_file):
    result = runner.invoke(app, ["list", "--file", str(tasks_file), "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data == [
        {
            "id": "on-time",
            "title": "On time",
            "elapsedDisplay": "01:00:00",
            "remainingDisplay": "01:00:00",
            "isOvertime": False,
        },
        {
            "id": "late",
            "title": "Late",
            "elapsedDisplay": "00:15:00",
            "remainingDisplay": "-00:05:00",
            "isOvertime": True,
        },
    ]


def test_list_table_output(tasks_file, tmp_path):
    output = tmp_path / "export" / "tasks.json"
    result = runner.invoke(app, ["list", "--file", str(tasks_file), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert "On time" in result.stdout
    assert "-00:05:00" in result.stdout
    assert "OVERTIME" in result.stdout
    assert json.loads(output.read_text(encoding="utf-8"))[1]["id"] == "late"


def test_list_shows_skipped_tasks(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(
        json.dumps([task_record("good"), task_record("broken", allowance=-1)]),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["list", "--file", str(path)])

    assert result.exit_code == 0, result.output
    assert "Skipped tasks" in result.stdout
    assert "broken" in result.stdout


def test_list_strict_fails_on_invalid_task(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps([task_record("broken", allowance=-1)]), encoding="utf-8")

    result = runner.invoke(app, ["list", "--file", str(path), "--strict"])

    assert result.exit_code == 1


def test_list_fetch_error_exits_with_code_1(tmp_path):
    result = runner.invoke(app, ["list", "--file", str(tmp_path / "missing.json")])

    assert result.exit_code == 1


def test_list_without_source_is_usage_error():
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 2


def test_build_repository_precedence(settings, tmp_path):
    path = tmp_path / "tasks.json"
    assert isinstance(build_repository(settings, tasks_file=path, api_url="http://x"), JsonFileTaskRepository)
    assert isinstance(build_repository(settings, api_url="http://x"), HttpTaskRepository)

    from_settings = settings.model_copy(update={"tasks_api_url": "http://tasks.local"})
    repository = build_repository(from_settings)
    assert isinstance(repository, HttpTaskRepository)
    assert repository.url == "http://tasks.local/tasks"


def test_doctor_setup_backend_writes_user_env(tmp_path):
    result = runner.invoke(app, ["doctor", "setup-backend"], input="http://tasks.local\nstrict\n")

    assert result.exit_code == 0, result.output
    env_text = (tmp_path / "config" / "tasktimer" / ".env").read_text(encoding="utf-8")
    assert "TASKTIMER_TASKS_API_URL=http://tasks.local" in env_text
    assert "TASKTIMER_INVALID_TASK_POLICY=strict" in env_text


def test_doctor_run_with_tasks_file(tasks_file, monkeypatch):
    monkeypatch.setenv("TASKTIMER_TASKS_FILE", str(tasks_file))

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "2 tasks, 0 rejected" in result.stdout


@pytest.mark.parametrize("extra", [["--json"], ["--output", "out.json"]])
def test_watch_rejects_one_shot_output_flags(tasks_file, extra):
    result = runner.invoke(app, ["list", "--file", str(tasks_file), "--watch", *extra])

    assert result.exit_code == 2


def test_watch_frame_keeps_going_after_a_failed_refresh(settings):
    failing = build_service(
        settings,
        InMemoryTaskRepository(error=ConnectionError("backend down")),
        clock=FixedClock(at(0)),
    )
    frame = asyncio.run(_watch_frame(failing))

    assert isinstance(frame, Text)
    assert "backend down" in frame.plain
    assert "retrying" in frame.plain


def test_watch_frame_renders_the_task_table(settings):
    service = build_service(
        settings,
        InMemoryTaskRepository([task_record("a", units=[work_unit(0, 60)])]),
        clock=FixedClock(at(120)),
    )
    frame = asyncio.run(_watch_frame(service))

    assert isinstance(frame, Table)
    assert frame.row_count == 1


def test_checkout_entrypoint_runs_the_cli(monkeypatch):
    import main as checkout_main

    calls = []
    monkeypatch.setattr("cli.main.run", lambda: calls.append("run"))

    checkout_main.main()

    assert calls == ["run"]
