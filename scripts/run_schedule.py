"""Run one scheduling/recommendation cycle over a CSV/JSON task list."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from moodo_engine.adapters import csv_adapter, json_adapter
from moodo_engine.compatibility import rank_tasks_for_mood
from moodo_engine.config import get_default_config, load_config
from moodo_engine.context import derive_context
from moodo_engine.insights import generate_insights
from moodo_engine.recommendations import recommend
from moodo_engine.schema import Mood
from moodo_engine.scheduling import optimize


def _load_tasks(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def _load_moods(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse_moods(str(path))
    if suffix == ".json":
        return json_adapter.parse_moods(str(path))
    raise ValueError("Unsupported mood history format, expected .csv or .json")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the moodo-engine scheduler and recommender")
    parser.add_argument("--tasks", required=True, help="Path to CSV/JSON task list")
    parser.add_argument("--mood", required=True, choices=[mood.value for mood in Mood], help="Current mood")
    parser.add_argument("--moods", help="Path to CSV/JSON mood history (mood,timestamp)")
    parser.add_argument("--now", help="ISO timestamp to use as the current time")
    parser.add_argument("--config", help="Path to YAML/JSON engine config")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    config = load_config(args.config) if args.config else get_default_config()
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=logging.DEBUG if args.debug else config.log_level.upper(),
    )

    mood = Mood(args.mood)
    now = datetime.fromisoformat(args.now) if args.now else datetime.now()
    tasks = _load_tasks(Path(args.tasks))
    entries = _load_moods(Path(args.moods)) if args.moods else []

    optimized = optimize(tasks, mood, now)
    context = derive_context(mood, now)
    report = {
        "mood": mood.value,
        "now": now.isoformat(),
        "tasks": json_adapter.dump_tasks(optimized),
        "focus": [task.task_id for task in rank_tasks_for_mood(optimized, mood, now, config.max_focus_tasks)],
        "recommendations": json_adapter.dump_recommendations(recommend(context, config.max_recommendations)),
        "insights": [asdict(insight) for insight in generate_insights(entries, optimized)],
    }
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
