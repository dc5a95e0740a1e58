from datetime import datetime, timedelta

from moodo_engine.insights import (
    completion_insight,
    emotion_pattern_insight,
    generate_insights,
    mood_pattern_insight,
    wellness_insight,
)
from moodo_engine.schema import Emotion, Mood, MoodEntry, Priority, Task

NOW = datetime.fromisoformat("2025-01-06T08:00:00")


def entries(*moods):
    return [MoodEntry(mood, NOW + timedelta(hours=i)) for i, mood in enumerate(moods)]


def tasks(done, pending, emotion=Emotion.ROUTINE, priority=Priority.MEDIUM):
    result = []
    for i in range(done + pending):
        result.append(
            Task(task_id=str(i), title=f"Task {i}", created_at=NOW, is_completed=i < done, emotion=emotion, priority=priority)
        )
    return result


def test_mood_pattern_needs_three_entries():
    assert mood_pattern_insight(entries(Mood.CALM, Mood.CALM)) is None


def test_mood_pattern_reports_dominant_mood():
    insight = mood_pattern_insight(entries(Mood.CALM, Mood.CALM, Mood.STRESSED, Mood.CALM, Mood.CALM))
    assert insight.kind == "mood"
    assert insight.description == "You've been feeling calm 80% of the time this week."


def test_mood_pattern_ignores_mixed_week():
    assert mood_pattern_insight(entries(Mood.CALM, Mood.TIRED, Mood.FOCUSED, Mood.CALM)) is None


def test_completion_insight_thresholds():
    assert completion_insight(tasks(4, 1)).title == "Excellent Progress!"
    assert completion_insight(tasks(1, 4)).title == "Need a Boost?"
    assert completion_insight(tasks(1, 1)) is None
    assert completion_insight([]) is None


def test_emotion_pattern_insight():
    insight = emotion_pattern_insight(tasks(0, 2, emotion=Emotion.CREATIVE))
    assert insight.description == "Most of your tasks are creative."


def test_wellness_stress_alert_before_overload():
    stressed = entries(Mood.CALM, Mood.STRESSED, Mood.STRESSED)
    assert wellness_insight(stressed, tasks(0, 3, priority=Priority.HIGH)).title == "Stress Alert"
    overload = wellness_insight(entries(Mood.CALM), tasks(1, 3, priority=Priority.HIGH))
    assert overload.title == "High Priority Overload"
    assert wellness_insight(entries(Mood.CALM), tasks(0, 2, priority=Priority.HIGH)) is None


def test_generate_insights_collects_applicable_ones():
    result = generate_insights(entries(Mood.STRESSED, Mood.STRESSED, Mood.STRESSED), tasks(0, 2))
    assert [insight.title for insight in result] == [
        "Mood Pattern Detected",
        "Need a Boost?",
        "Task Energy Pattern",
        "Stress Alert",
    ]
    assert generate_insights([], []) == []
