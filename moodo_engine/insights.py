"""Heuristic insights over mood history and the task list."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from moodo_engine.schema import Mood, MoodEntry, Priority, Task

_MOOD_TIPS = {
    Mood.ENERGIZED: "Great energy! Perfect time to tackle challenging tasks.",
    Mood.FOCUSED: "Sharp focus detected. Use this energy for complex projects.",
    Mood.CALM: "Peaceful state. Ideal for focused, detailed work.",
    Mood.CREATIVE: "Creative flow! Great time for brainstorming and ideation.",
    Mood.STRESSED: "Feeling overwhelmed? Try breaking tasks into smaller steps.",
    Mood.TIRED: "Low energy. Favour short, easy wins and some rest.",
    Mood.ANXIOUS: "Try a grounding exercise before picking up familiar tasks.",
}


@dataclass(frozen=True)
class Insight:
    kind: str
    title: str
    description: str
    recommendation: str


def mood_pattern_insight(entries: list[MoodEntry]) -> Insight | None:
    """Report a dominant mood over the last week of check-ins."""

    if len(entries) < 3:
        return None

    recent = entries[-7:]
    mood, count = Counter(entry.mood for entry in recent).most_common(1)[0]
    percentage = count / len(recent) * 100
    if percentage < 60:
        return None

    return Insight(
        kind="mood",
        title="Mood Pattern Detected",
        description=f"You've been feeling {mood.value} {int(percentage)}% of the time this week.",
        recommendation=_MOOD_TIPS[mood],
    )


def completion_insight(tasks: list[Task]) -> Insight | None:
    if not tasks:
        return None

    rate = sum(1 for task in tasks if task.is_completed) / len(tasks) * 100
    if rate >= 80:
        return Insight(
            kind="productivity",
            title="Excellent Progress!",
            description=f"You've completed {int(rate)}% of your tasks. Keep up the great work!",
            recommendation="Consider setting more challenging goals for tomorrow.",
        )
    if rate <= 30:
        return Insight(
            kind="productivity",
            title="Need a Boost?",
            description=f"You've completed {int(rate)}% of your tasks. Let's get back on track!",
            recommendation="Try breaking down larger tasks into smaller, manageable steps.",
        )
    return None


def emotion_pattern_insight(tasks: list[Task]) -> Insight | None:
    if not tasks:
        return None

    emotion, _ = Counter(task.emotion for task in tasks).most_common(1)[0]
    return Insight(
        kind="productivity",
        title="Task Energy Pattern",
        description=f"Most of your tasks are {emotion.value}.",
        recommendation="Consider balancing your task types for better energy management.",
    )


def wellness_insight(entries: list[MoodEntry], tasks: list[Task]) -> Insight | None:
    stressed = sum(1 for entry in entries[-3:] if entry.mood == Mood.STRESSED)
    if stressed >= 2:
        return Insight(
            kind="wellness",
            title="Stress Alert",
            description="You've been feeling stressed recently. Time for some self-care!",
            recommendation="Try a 5-minute meditation or take a short walk to clear your mind.",
        )

    pending_high = [task for task in tasks if not task.is_completed and task.priority == Priority.HIGH]
    if len(pending_high) >= 3:
        return Insight(
            kind="wellness",
            title="High Priority Overload",
            description=f"You have {len(pending_high)} high-priority tasks pending.",
            recommendation="Consider delegating or rescheduling some tasks to reduce stress.",
        )
    return None


def generate_insights(entries: list[MoodEntry], tasks: list[Task]) -> list[Insight]:
    """Collect every insight that applies, in a fixed order."""

    candidates = (
        mood_pattern_insight(entries),
        completion_insight(tasks),
        emotion_pattern_insight(tasks),
        wellness_insight(entries, tasks),
    )
    return [insight for insight in candidates if insight is not None]
