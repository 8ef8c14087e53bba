"""CLI de tasktimer (Typer + Rich).

Esta es la capa de render del lado izquierdo: construye los adaptadores
(composition root), llama al Left Port y pinta los view models.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.live import Live
from rich.text import Text

from adapters.analytics import LoggingAnalytics, NullAnalytics
from adapters.clock import SystemClock
from adapters.json_exporter import dumps_task_list, export_task_list_json
from adapters.task_sources import HttpTaskRepository, JsonFileTaskRepository
from cli import doctor
from cli.ui_components import build_rejected_panel, build_task_table, print_banner
from core.config import AppSettings, InvalidTaskPolicy
from core.domain.errors import FetchError, ValidationError
from core.interfaces.clock import Clock
from core.interfaces.task_repository import TaskRepository
from core.logging_config import configure_logging
from core.services.time_tracking import TaskListReport, TimeTrackingService

app = typer.Typer(no_args_is_help=True, help="Track elapsed time against task allowances.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def build_repository(
    settings: AppSettings,
    *,
    tasks_file: Path | None = None,
    api_url: str | None = None,
) -> TaskRepository:
    """Elige el adaptador del Right Port: flag de fichero > flag de URL > settings."""

    if tasks_file is not None:
        return JsonFileTaskRepository(tasks_file)
    if api_url:
        return HttpTaskRepository(api_url, settings)
    if settings.tasks_file is not None:
        return JsonFileTaskRepository(settings.tasks_file)
    if settings.tasks_api_url:
        return HttpTaskRepository(settings.tasks_api_url, settings)
    raise typer.BadParameter(
        "No task source configured. Use --file/--url or set TASKTIMER_TASKS_FILE / TASKTIMER_TASKS_API_URL."
    )


def build_service(
    settings: AppSettings,
    repository: TaskRepository,
    *,
    clock: Clock | None = None,
    strict: bool = False,
) -> TimeTrackingService:
    analytics = LoggingAnalytics() if settings.analytics_enabled else NullAnalytics()
    return TimeTrackingService(
        repository=repository,
        clock=clock or SystemClock(),
        settings=settings,
        analytics=analytics,
        policy=InvalidTaskPolicy.STRICT if strict else None,
    )


def _render(report: TaskListReport):
    caption = f"as of {report.now.strftime('%Y-%m-%d %H:%M:%S %Z')}"
    return build_task_table(report.items, caption=caption)


async def _watch_frame(service: TimeTrackingService):
    """One refresh of `--watch`: the task table, or a red line if the call failed."""

    try:
        report = await service.get_task_report()
    except (FetchError, ValidationError) as exc:
        return Text(f"Error: {exc} (retrying)", style="red")
    return _render(report)


async def _watch(service: TimeTrackingService, interval: float) -> None:
    # Re-invoca el Left Port en cada tick; el Core no mantiene timers.
    with Live(await _watch_frame(service), console=_console, refresh_per_second=4) as live:
        while True:
            await asyncio.sleep(interval)
            live.update(await _watch_frame(service))


@app.command("list")
def list_tasks(
    tasks_file: Path | None = typer.Option(None, "--file", "-f", help="Local JSON file with tasks."),
    api_url: str | None = typer.Option(None, "--url", "-u", help="Backend base URL (GET <url>/tasks)."),
    strict: bool = typer.Option(False, "--strict", help="Fail the whole call if any task is invalid."),
    as_json: bool = typer.Option(False, "--json", help="Print the task list as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the JSON list to this path."),
    watch: bool = typer.Option(False, "--watch", "-w", help="Refresh the table until Ctrl+C."),
) -> None:
    """Show elapsed and remaining time for every task."""

    if watch and (as_json or output is not None):
        raise typer.BadParameter("--watch cannot be combined with --json or --output")

    settings = AppSettings()
    configure_logging(settings)
    repository = build_repository(settings, tasks_file=tasks_file, api_url=api_url)
    service = build_service(settings, repository, strict=strict)

    if watch:
        try:
            asyncio.run(_watch(service, settings.refresh_interval_seconds))
        except KeyboardInterrupt:
            pass
        return

    try:
        report = asyncio.run(service.get_task_report())
    except (FetchError, ValidationError) as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if output is not None:
        export_task_list_json(items=report.items, output_path=output)

    if as_json:
        typer.echo(dumps_task_list(report.items), nl=False)
        return

    print_banner(_console)
    _console.print(_render(report))
    if report.rejected:
        _console.print(build_rejected_panel(report.rejected))
    if output is not None:
        _console.print(f"[green]Saved task list to:[/green] {output}")


def run() -> None:
    app()
