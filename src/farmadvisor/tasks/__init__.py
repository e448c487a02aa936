"""Celery tasks for background job processing."""

from farmadvisor.tasks.schedules import (
    backfill_livestock_schedules_task,
    regenerate_entry_schedules_task,
)

__all__ = [
    "backfill_livestock_schedules_task",
    "regenerate_entry_schedules_task",
]
