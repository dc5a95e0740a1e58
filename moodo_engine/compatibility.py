"""Mood/emotion compatibility and mood-fit ranking of existing tasks."""

from __future__ import annotations

from datetime import datetime, timedelta
from types import MappingProxyType

from moodo_engine.escalation import dynamic_priority
from moodo_engine.schema import Emotion, Mood, Priority, Task

COMPATIBLE_EMOTIONS = MappingProxyType(
    {
        Mood.ENERGIZED: frozenset({Emotion.ENERGIZING, Emotion.FOCUSED, Emotion.CREATIVE}),
        Mood.FOCUSED: frozenset({Emotion.FOCUSED, Emotion.ROUTINE, Emotion.CREATIVE}),
        Mood.CALM: frozenset({Emotion.CALMING, Emotion.ROUTINE}),
        Mood.CREATIVE: frozenset({Emotion.CREATIVE, Emotion.CALMING}),
        Mood.STRESSED: frozenset({Emotion.CALMING, Emotion.ROUTINE}),
        Mood.TIRED: frozenset({Emotion.CALMING}),
        Mood.ANXIOUS: frozenset({Emotion.CALMING, Emotion.ROUTINE}),
    }
)

_PRIORITY_BONUS = {Priority.HIGH: 0.2, Priority.MEDIUM: 0.1, Priority.LOW: 0.0}


def is_compatible(emotion: Emotion, mood: Mood) -> bool:
    """True when a task of ``emotion`` suits ``mood``; unknown moods allow everything."""

    compatible = COMPATIBLE_EMOTIONS.get(mood)
    if compatible is None:
        return True
    return emotion in compatible


def _due_at(task: Task) -> datetime | None:
    return task.reminder_at or task.deadline_at


def is_due_today(task: Task, now: datetime) -> bool:
    due = _due_at(task)
    if due is None:
        return False
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return start <= due < start + timedelta(days=1)


def is_due_soon(task: Task, now: datetime) -> bool:
    due = _due_at(task)
    if due is None:
        return False
    return now <= due <= now + timedelta(days=3)


def mood_fit_score(task: Task, mood: Mood, now: datetime) -> float:
    """Score in [0, 1] of how well ``task`` fits the user's current mood."""

    score = 0.5
    if is_compatible(task.emotion, mood):
        score += 0.6
    elif task.emotion == Emotion.STRESSFUL and mood == Mood.STRESSED:
        score -= 0.4

    score += _PRIORITY_BONUS[dynamic_priority(task, now)]

    if is_due_today(task, now):
        score += 0.2
    elif is_due_soon(task, now):
        score += 0.1

    return max(0.0, min(1.0, score))


def _select_diverse(tasks: list[Task], limit: int) -> list[Task]:
    selected: list[Task] = []
    used: set[Emotion] = set()
    for task in tasks:
        if task.emotion not in used:
            selected.append(task)
            used.add(task.emotion)

    picked = {id(task) for task in selected}
    selected.extend(task for task in tasks if id(task) not in picked)
    return selected[:limit]


def rank_tasks_for_mood(tasks: list[Task], mood: Mood, now: datetime | None = None, limit: int = 2) -> list[Task]:
    """Pick up to ``limit`` open tasks best suited to ``mood``, spreading emotions."""

    now = now or datetime.now()
    open_tasks = [task for task in tasks if not task.is_completed]

    def rank_key(task: Task) -> float:
        boost = 0.3 if dynamic_priority(task, now) == Priority.HIGH else 0.0
        if is_due_today(task, now):
            boost += 0.2
        return mood_fit_score(task, mood, now) + boost

    ranked = sorted(open_tasks, key=rank_key, reverse=True)
    return _select_diverse(ranked, limit)
