"""Deadline-based priority escalation rules."""

from __future__ import annotations

from datetime import datetime

from moodo_engine.schema import Priority, Task

_SECONDS_PER_DAY = 24 * 60 * 60


def days_until_due(task: Task, now: datetime) -> int | None:
    """Whole days until the task's reminder, falling back to its deadline."""

    due = task.reminder_at or task.deadline_at
    if due is None:
        return None
    return int((due - now).total_seconds() / _SECONDS_PER_DAY)


def dynamic_priority(task: Task, now: datetime) -> Priority:
    """Return the priority escalated by how close the task is to being due."""

    if task.is_completed:
        return task.priority

    days = days_until_due(task, now)
    if days is None:
        return task.priority
    if days <= 1:
        return Priority.HIGH
    if 2 <= days <= 3:
        return Priority.MEDIUM if task.priority == Priority.LOW else Priority.HIGH
    if 4 <= days <= 7:
        return Priority.MEDIUM if task.priority == Priority.LOW else task.priority
    return task.priority


def is_escalated(task: Task, now: datetime) -> bool:
    return dynamic_priority(task, now) != task.priority


def priority_description(task: Task, now: datetime) -> str:
    current = dynamic_priority(task, now)
    if current == task.priority:
        return current.name.title()
    if current == Priority.HIGH:
        return "High (Due Soon)"
    return "Medium (This Week)"
