"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Esta capa solo lee campos del view model: nada de aritmética de duraciones.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import ValidationError
from core.domain.models import TaskListItemViewModel


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (se omite en modo JSON)."""

    title = Text("tasktimer", style="bold cyan")
    subtitle = Text("Elapsed time • Remaining allowance • Overtime", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_task_table(items: Sequence[TaskListItemViewModel], *, caption: str | None = None) -> Table:
    """Tabla Rich con una fila por view model, en el orden recibido."""

    table = Table(title="Tasks", caption=caption)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Elapsed", style="cyan", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_column("Status")

    for item in items:
        if item.is_overtime:
            table.add_row(
                item.id,
                item.title,
                item.elapsed_display,
                Text(item.remaining_display, style="bold red"),
                Text("OVERTIME", style="bold red"),
            )
        else:
            table.add_row(
                item.id,
                item.title,
                item.elapsed_display,
                Text(item.remaining_display, style="green"),
                Text("ok", style="green"),
            )
    return table


def build_rejected_panel(rejected: Sequence[ValidationError]) -> Panel:
    """Panel de tareas excluidas por no pasar la validación."""

    body = Text()
    for err in rejected:
        body.append(f"- {err.task_id or '<unknown>'}: ", style="bold")
        body.append(f"{err.reason}\n")
    return Panel(body, title=Text("Skipped tasks", style="bold yellow"), border_style="yellow")
