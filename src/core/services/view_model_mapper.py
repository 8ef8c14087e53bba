"""Mapping from domain results to display-ready view models.

Only formatting happens here; duration arithmetic stays in
`core.domain.accounting`.
"""

from __future__ import annotations

from core.domain.models import AccountingResult, Task, TaskListItemViewModel


def format_duration(seconds: int) -> str:
    """Format the absolute value of `seconds` as `HH:MM:SS`.

    Hours are zero-padded to two digits and are never truncated, so 100 hours
    render as `100:00:00`.
    """

    total = abs(int(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_remaining(seconds: int) -> str:
    sign = "-" if seconds < 0 else ""
    return sign + format_duration(seconds)


def to_view_model(task: Task, result: AccountingResult) -> TaskListItemViewModel:
    return TaskListItemViewModel(
        id=task.id,
        title=task.title,
        elapsed_display=format_duration(result.elapsed_seconds),
        remaining_display=format_remaining(result.remaining_seconds),
        is_overtime=result.is_overtime,
    )
