"""Mood-aware reminder scheduling."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timedelta
from types import MappingProxyType

from moodo_engine.compatibility import is_compatible
from moodo_engine.schema import Emotion, Mood, Priority, Task

logger = logging.getLogger(__name__)

# Checked in insertion order; the first keyword found wins.
TASK_COMPLEXITY_HOURS = MappingProxyType(
    {
        "brainstorm": 2.0,
        "creative": 1.5,
        "presentation": 4.0,
        "project": 8.0,
        "meeting": 1.0,
        "call": 0.5,
        "email": 0.25,
        "review": 1.0,
        "plan": 2.0,
        "research": 3.0,
    }
)

PRIORITY_DEFAULT_HOURS = MappingProxyType(
    {
        Priority.HIGH: 2.0,
        Priority.MEDIUM: 1.0,
        Priority.LOW: 0.5,
    }
)


def estimate_duration_hours(task: Task) -> float:
    """Estimate how long ``task`` takes from its wording, else from its priority."""

    text = f"{task.title.lower()} {(task.description or '').lower()}"
    for keyword, hours in TASK_COMPLEXITY_HOURS.items():
        if keyword in text:
            return hours
    return PRIORITY_DEFAULT_HOURS[task.priority]


def optimal_time(task: Task, mood: Mood, now: datetime) -> datetime:
    """Mood-driven reminder slot for a task that has none."""

    emotion = task.emotion
    if mood in (Mood.STRESSED, Mood.ANXIOUS):
        if emotion in (Emotion.CALMING, Emotion.ENERGIZING):
            return now + timedelta(hours=1)
        return now + timedelta(days=1)
    if mood == Mood.TIRED:
        if emotion == Emotion.CALMING:
            return now + timedelta(hours=1)
        return now + timedelta(days=1)
    if mood == Mood.CREATIVE:
        if emotion == Emotion.CREATIVE:
            return now + timedelta(hours=2)
        return now + timedelta(hours=6)
    if mood == Mood.FOCUSED:
        return now + timedelta(hours=3)
    if mood == Mood.ENERGIZED:
        return now + timedelta(hours=2)
    if mood == Mood.CALM:
        if emotion in (Emotion.CREATIVE, Emotion.CALMING):
            return now + timedelta(hours=1)
        return now + timedelta(hours=4)
    return now


def reschedule_task(task: Task, mood: Mood, now: datetime) -> Task:
    """Return a copy of an incompatible task with an adjusted reminder."""

    if task.reminder_at is None:
        reminder = optimal_time(task, mood, now)
        logger.debug("Task %s has no reminder, scheduling for %s", task.task_id, reminder.isoformat())
        return replace(task, reminder_at=reminder)

    required = timedelta(hours=estimate_duration_hours(task))
    if task.reminder_at - now < required:
        reminder = now + required
        logger.debug("Task %s needs %s, pushing reminder to %s", task.task_id, required, reminder.isoformat())
        return replace(task, reminder_at=reminder)
    return task


def ensure_deadlines_met(tasks: list[Task], now: datetime) -> list[Task]:
    """Earliest-reminder-first sweep pulling tight reminders behind a running clock."""

    result = list(tasks)
    timed = sorted(
        (index for index, task in enumerate(result) if task.reminder_at is not None),
        key=lambda index: result[index].reminder_at,
    )

    running = now
    for index in timed:
        task = result[index]
        required = timedelta(hours=estimate_duration_hours(task))
        if task.reminder_at - now < required:
            running = running + required
            logger.debug("Task %s too close to its reminder, moved to %s", task.task_id, running.isoformat())
            result[index] = replace(task, reminder_at=running)
        else:
            running = task.reminder_at
    return result


def optimize(tasks: list[Task], mood: Mood, now: datetime | None = None) -> list[Task]:
    """Retime ``tasks`` for ``mood``; order, length and all other fields are kept."""

    now = now or datetime.now()
    optimized = [
        task if is_compatible(task.emotion, mood) else reschedule_task(task, mood, now)
        for task in tasks
    ]
    rescheduled = sum(1 for before, after in zip(tasks, optimized) if before is not after)
    logger.debug("Rescheduled %d of %d tasks for mood %s", rescheduled, len(tasks), mood.value)
    return ensure_deadlines_met(optimized, now)
