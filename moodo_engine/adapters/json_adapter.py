"""JSON adapter for task lists and engine output."""

from __future__ import annotations

import json
import logging

from moodo_engine.adapters.records import mood_entry_from_record, task_from_record, task_to_record
from moodo_engine.schema import MoodEntry, Recommendation, Task

logger = logging.getLogger(__name__)


def parse(file_path: str) -> list[Task]:
    """Parse a JSON list of task objects."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    tasks = []
    for index, item in enumerate(payload, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"Item {index}: expected an object")
        tasks.append(task_from_record(item, f"Item {index}"))

    logger.debug("Loaded %d tasks from %s", len(tasks), file_path)
    return tasks


def parse_moods(file_path: str) -> list[MoodEntry]:
    """Parse a JSON list of ``{"mood", "timestamp"}`` objects, oldest first."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    entries = []
    for index, item in enumerate(payload, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"Item {index}: expected an object")
        entries.append(mood_entry_from_record(item, f"Item {index}"))

    entries.sort(key=lambda entry: entry.timestamp)
    logger.debug("Loaded %d mood entries from %s", len(entries), file_path)
    return entries


def dump_tasks(tasks: list[Task]) -> list[dict]:
    return [task_to_record(task) for task in tasks]


def dump_recommendations(recommendations: list[Recommendation]) -> list[dict]:
    return [
        {
            "rec_id": rec.rec_id,
            "title": rec.title,
            "description": rec.description,
            "category": rec.category.value,
            "priority": rec.priority.value,
            "estimated_duration": rec.estimated_duration,
            "emotion": rec.emotion.value,
            "score": round(rec.score, 4),
        }
        for rec in recommendations
    ]
