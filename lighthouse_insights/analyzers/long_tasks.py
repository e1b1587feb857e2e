"""Long-task analyzer — main-thread RunTask events over 50ms in the trace."""

from ..models import LongTask, LongTaskSummary
from ._values import as_number, int_or_none


TIMELINE_CATEGORY = "devtools.timeline"
TASK_EVENT_NAME = "RunTask"
LONG_TASK_THRESHOLD_US = 50_000
TOP_TASKS = 5


def _is_long_task(event: dict) -> bool:
    category = event.get("cat")
    if not isinstance(category, str) or TIMELINE_CATEGORY not in category:
        return False
    if event.get("name") != TASK_EVENT_NAME:
        return False
    return as_number(event.get("dur")) > LONG_TASK_THRESHOLD_US


def summarize_long_tasks(trace_events: list[dict] | None) -> LongTaskSummary | None:
    """Summarize long tasks; None when no trace was loaded.

    Trace timings are microseconds, the summary is in milliseconds.
    """
    if trace_events is None:
        return None

    tasks = sorted(
        (
            LongTask(
                duration_ms=as_number(event.get("dur")) / 1000,
                start_time_ms=as_number(event.get("ts")) / 1000,
                thread=int_or_none(event.get("tid")),
            )
            for event in trace_events
            if _is_long_task(event)
        ),
        key=lambda task: -task.duration_ms,
    )

    return LongTaskSummary(
        count=len(tasks),
        total_duration_ms=sum(task.duration_ms for task in tasks),
        longest_ms=tasks[0].duration_ms if tasks else 0,
        top_tasks=tasks[:TOP_TASKS],
    )
