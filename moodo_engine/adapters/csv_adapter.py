"""CSV adapter for task lists."""

from __future__ import annotations

import csv
import logging

from moodo_engine.adapters.records import mood_entry_from_record, task_from_record
from moodo_engine.schema import MoodEntry, Task

logger = logging.getLogger(__name__)


def parse(file_path: str) -> list[Task]:
    """Parse a CSV file into tasks; ``tags`` are ``;``-separated."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        tasks: list[Task] = []
        for row_number, row in enumerate(reader, start=2):
            tasks.append(task_from_record(row, f"Row {row_number}"))

    logger.debug("Loaded %d tasks from %s", len(tasks), file_path)
    return tasks


def parse_moods(file_path: str) -> list[MoodEntry]:
    """Parse a ``mood,timestamp`` CSV into a mood history, oldest first."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []
        entries = [mood_entry_from_record(row, f"Row {n}") for n, row in enumerate(reader, start=2)]

    entries.sort(key=lambda entry: entry.timestamp)
    logger.debug("Loaded %d mood entries from %s", len(entries), file_path)
    return entries
