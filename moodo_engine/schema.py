"""Core data schema for tasks, moods and recommendations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Mood(Enum):
    """Current self-reported mood of the user."""

    ENERGIZED = "energized"
    FOCUSED = "focused"
    CALM = "calm"
    CREATIVE = "creative"
    STRESSED = "stressed"
    TIRED = "tired"
    ANXIOUS = "anxious"


class Emotion(Enum):
    """Emotional demand a task places on the user."""

    ENERGIZING = "energizing"
    FOCUSED = "focused"
    CALMING = "calming"
    CREATIVE = "creative"
    ROUTINE = "routine"
    STRESSFUL = "stressful"
    ANXIOUS = "anxious"


class Priority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Category(Enum):
    WORK = "work"
    PERSONAL = "personal"
    HEALTH = "health"
    SHOPPING = "shopping"
    LEARNING = "learning"
    FINANCE = "finance"
    TRAVEL = "travel"
    CREATIVE = "creative"


@dataclass(frozen=True)
class Task:
    """Immutable task record; the scheduler returns copies with new reminders."""

    task_id: str
    title: str
    created_at: datetime
    description: Optional[str] = None
    is_completed: bool = False
    priority: Priority = Priority.MEDIUM
    emotion: Emotion = Emotion.FOCUSED
    category: Category = Category.PERSONAL
    estimated_minutes: Optional[int] = None
    reminder_at: Optional[datetime] = None
    deadline_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    tags: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MoodEntry:
    mood: Mood
    timestamp: datetime


@dataclass(frozen=True)
class UserContext:
    """Per-cycle context used to rank recommendations."""

    hour: int
    day_of_week: int
    mood: Mood
    energy_level: float
    stress_level: float


@dataclass(frozen=True)
class Recommendation:
    rec_id: str
    title: str
    description: str
    category: Category
    priority: Priority
    estimated_duration: int
    emotion: Emotion
    score: float = 0.0
