from datetime import datetime, timedelta

import pytest

from moodo_engine.compatibility import (
    COMPATIBLE_EMOTIONS,
    is_compatible,
    is_due_soon,
    is_due_today,
    mood_fit_score,
    rank_tasks_for_mood,
)
from moodo_engine.schema import Emotion, Mood, Priority, Task

NOW = datetime.fromisoformat("2025-01-06T08:00:00")


def make_task(task_id, emotion, priority=Priority.MEDIUM, **overrides):
    return Task(task_id=task_id, title=f"Task {task_id}", created_at=NOW, emotion=emotion, priority=priority, **overrides)


def test_every_mood_has_a_compatibility_entry():
    assert set(COMPATIBLE_EMOTIONS) == set(Mood)


def test_is_compatible():
    assert is_compatible(Emotion.CALMING, Mood.STRESSED)
    assert not is_compatible(Emotion.CREATIVE, Mood.STRESSED)
    assert is_compatible(Emotion.ENERGIZING, Mood.ENERGIZED)
    assert not is_compatible(Emotion.ROUTINE, Mood.TIRED)


def test_unknown_mood_is_permissive():
    assert is_compatible(Emotion.STRESSFUL, "unknown")


def test_due_windows():
    assert is_due_today(make_task("1", Emotion.ROUTINE, reminder_at=NOW + timedelta(hours=3)), NOW)
    assert not is_due_today(make_task("2", Emotion.ROUTINE, reminder_at=NOW + timedelta(days=1)), NOW)
    assert is_due_soon(make_task("3", Emotion.ROUTINE, deadline_at=NOW + timedelta(days=2)), NOW)
    assert not is_due_soon(make_task("4", Emotion.ROUTINE, deadline_at=NOW + timedelta(days=4)), NOW)


def test_mood_fit_score():
    assert mood_fit_score(make_task("1", Emotion.CALMING), Mood.CALM, NOW) == pytest.approx(1.0)
    assert mood_fit_score(make_task("2", Emotion.STRESSFUL, Priority.LOW), Mood.STRESSED, NOW) == pytest.approx(0.1)
    assert mood_fit_score(make_task("3", Emotion.CREATIVE, Priority.LOW), Mood.CALM, NOW) == pytest.approx(0.5)


def test_rank_tasks_prefers_fit_and_spreads_emotions():
    tasks = [
        make_task("a", Emotion.CALMING),
        make_task("b", Emotion.CALMING, Priority.HIGH),
        make_task("c", Emotion.STRESSFUL, Priority.LOW),
        make_task("d", Emotion.ROUTINE, Priority.LOW, is_completed=True),
    ]
    ranked = rank_tasks_for_mood(tasks, Mood.CALM, NOW)
    assert [task.task_id for task in ranked] == ["b", "c"]


def test_rank_tasks_fills_up_with_same_emotion():
    tasks = [make_task("a", Emotion.CALMING), make_task("b", Emotion.CALMING, Priority.HIGH)]
    ranked = rank_tasks_for_mood(tasks, Mood.CALM, NOW, limit=5)
    assert [task.task_id for task in ranked] == ["b", "a"]
