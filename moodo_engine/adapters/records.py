"""Conversion of raw task records into validated ``Task`` objects."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional, TypeVar

from moodo_engine.schema import Category, Emotion, Mood, MoodEntry, Priority, Task

_REQUIRED_FIELDS = ("task_id", "title", "created_at")
_TRUE_VALUES = {"true", "1", "yes", "y"}
_FALSE_VALUES = {"false", "0", "no", "n", ""}

E = TypeVar("E", bound=Enum)


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_enum(enum_cls: type[E], raw: Any, name: str, label: str, default: E) -> E:
    if _blank(raw):
        return default
    try:
        return enum_cls(str(raw).strip().lower())
    except ValueError as exc:
        raise ValueError(f"{label}: invalid {name} '{raw}'") from exc


def _parse_timestamp(raw: Any, name: str, label: str) -> Optional[datetime]:
    if _blank(raw):
        return None
    try:
        value = datetime.fromisoformat(str(raw).strip())
    except ValueError as exc:
        raise ValueError(f"{label}: malformed {name}") from exc
    if value.tzinfo is not None:
        raise ValueError(f"{label}: {name} must be a naive local timestamp")
    return value


def _parse_bool(raw: Any, label: str) -> bool:
    if isinstance(raw, bool):
        return raw
    text = "" if raw is None else str(raw).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"{label}: invalid is_completed '{raw}'")


def _parse_minutes(raw: Any, label: str) -> Optional[int]:
    if _blank(raw):
        return None
    if isinstance(raw, bool):
        raise ValueError(f"{label}: invalid estimated_minutes")
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label}: invalid estimated_minutes") from exc


def _parse_tags(raw: Any) -> tuple[str, ...]:
    if _blank(raw):
        return ()
    if isinstance(raw, (list, tuple)):
        return tuple(str(tag).strip() for tag in raw if str(tag).strip())
    return tuple(tag.strip() for tag in str(raw).split(";") if tag.strip())


def task_from_record(record: dict, label: str) -> Task:
    """Validate one raw record; ``label`` prefixes every error message."""

    missing = [name for name in _REQUIRED_FIELDS if _blank(record.get(name))]
    if missing:
        raise ValueError(f"{label}: missing required fields {missing}")

    created_at = _parse_timestamp(record["created_at"], "created_at", label)
    description = record.get("description")

    return Task(
        task_id=str(record["task_id"]).strip(),
        title=str(record["title"]).strip(),
        created_at=created_at,
        description=None if _blank(description) else str(description).strip(),
        is_completed=_parse_bool(record.get("is_completed"), label),
        priority=_parse_enum(Priority, record.get("priority"), "priority", label, Priority.MEDIUM),
        emotion=_parse_enum(Emotion, record.get("emotion"), "emotion", label, Emotion.FOCUSED),
        category=_parse_enum(Category, record.get("category"), "category", label, Category.PERSONAL),
        estimated_minutes=_parse_minutes(record.get("estimated_minutes"), label),
        reminder_at=_parse_timestamp(record.get("reminder_at"), "reminder_at", label),
        deadline_at=_parse_timestamp(record.get("deadline_at"), "deadline_at", label),
        completed_at=_parse_timestamp(record.get("completed_at"), "completed_at", label),
        tags=_parse_tags(record.get("tags")),
    )


def mood_entry_from_record(record: dict, label: str) -> MoodEntry:
    """Validate one mood-history record with ``mood`` and ``timestamp`` fields."""

    missing = [name for name in ("mood", "timestamp") if _blank(record.get(name))]
    if missing:
        raise ValueError(f"{label}: missing required fields {missing}")

    mood = _parse_enum(Mood, record["mood"], "mood", label, Mood.CALM)
    return MoodEntry(mood=mood, timestamp=_parse_timestamp(record["timestamp"], "timestamp", label))


def task_to_record(task: Task) -> dict:
    """Plain JSON-friendly mapping of a task."""

    def stamp(value: Optional[datetime]) -> Optional[str]:
        return value.isoformat() if value else None

    return {
        "task_id": task.task_id,
        "title": task.title,
        "description": task.description,
        "is_completed": task.is_completed,
        "priority": task.priority.value,
        "emotion": task.emotion.value,
        "category": task.category.value,
        "estimated_minutes": task.estimated_minutes,
        "reminder_at": stamp(task.reminder_at),
        "deadline_at": stamp(task.deadline_at),
        "created_at": stamp(task.created_at),
        "completed_at": stamp(task.completed_at),
        "tags": list(task.tags),
    }
