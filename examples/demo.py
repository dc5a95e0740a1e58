"""Demo script for moodo-engine."""

import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from moodo_engine.adapters.csv_adapter import parse, parse_moods
from moodo_engine.context import derive_context
from moodo_engine.insights import generate_insights
from moodo_engine.recommendations import recommend
from moodo_engine.schema import Mood
from moodo_engine.scheduling import optimize


def main() -> None:
    tasks = parse("examples/sample_tasks.csv")
    now = datetime.fromisoformat("2025-01-06T08:00:00")
    for mood in (Mood.STRESSED, Mood.ENERGIZED):
        print(f"Mood: {mood.value}")
        for task in optimize(tasks, mood, now):
            print(f"  {task.title}: {task.reminder_at}")
        for rec in recommend(derive_context(mood, now)):
            print(f"  suggestion: {rec.title} ({rec.score:.2f})")
    for insight in generate_insights(parse_moods("examples/sample_moods.csv"), tasks):
        print(f"Insight: {insight.title}")


if __name__ == "__main__":
    main()
