"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.clock import SystemClock
from adapters.task_sources import HttpTaskRepository, JsonFileTaskRepository
from core.config import AppSettings, write_user_env_vars
from core.domain.errors import FetchError, ValidationError
from core.interfaces.task_repository import TaskRepository
from core.logging_config import configure_logging
from core.services.time_tracking import TimeTrackingService

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_source(repository: TaskRepository, settings: AppSettings) -> tuple[bool, str]:
    service = TimeTrackingService(repository=repository, clock=SystemClock(), settings=settings)
    try:
        report = await service.get_task_report()
    except (FetchError, ValidationError) as exc:
        return False, exc.message
    return True, f"{len(report.items)} tasks, {len(report.rejected)} rejected"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    configure_logging(settings)

    table = Table(title="tasktimer Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Invalid task policy", "OK", settings.invalid_task_policy.value)
    table.add_row("Log level", "OK", f"{settings.log_level} ({settings.log_format})")

    ok_any = False
    if settings.tasks_file is not None:
        ok, detail = asyncio.run(_check_source(JsonFileTaskRepository(settings.tasks_file), settings))
        table.add_row("Tasks file", "OK" if ok else "FAIL", detail)
        ok_any = ok_any or ok
    else:
        table.add_row("Tasks file", "OPTIONAL", "TASKTIMER_TASKS_FILE not set")

    if settings.tasks_api_url:
        repository = HttpTaskRepository(settings.tasks_api_url, settings)
        ok, detail = asyncio.run(_check_source(repository, settings))
        table.add_row("Backend", "OK" if ok else "FAIL", f"{repository.url}: {detail}")
        ok_any = ok_any or ok
    else:
        table.add_row("Backend", "OPTIONAL", "TASKTIMER_TASKS_API_URL not set")

    _console.print(table)

    if not ok_any:
        _console.print(
            "\n[yellow]Note:[/yellow] No working task source. Run `tasktimer doctor setup-backend` "
            "or pass `--file` to `tasktimer list`."
        )


@app.command(name="setup-backend")
def setup_backend() -> None:
    """Interactive backend setup (stores config in the user config .env)."""

    url = typer.prompt("Tasks API base URL", default="http://localhost:8000", show_default=True).strip()
    policy = typer.prompt(
        "Invalid task policy (skip/strict)",
        default="skip",
        show_default=True,
    ).strip().lower()

    if not url:
        raise typer.BadParameter("base URL is required")
    if policy not in ("skip", "strict"):
        raise typer.BadParameter("policy must be 'skip' or 'strict'")

    env_path = write_user_env_vars(
        {
            "TASKTIMER_TASKS_API_URL": url,
            "TASKTIMER_INVALID_TASK_POLICY": policy,
        }
    )

    _console.print(f"[green]Saved backend config to:[/green] {env_path}")
