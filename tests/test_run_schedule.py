import json
import sys
from pathlib import Path

from scripts import run_schedule

SAMPLE_TASKS = "examples/sample_tasks.csv"
SAMPLE_MOODS = "examples/sample_moods.csv"


def run_cli(monkeypatch, capsys, *args):
    monkeypatch.chdir(Path(__file__).resolve().parents[1])
    monkeypatch.setattr(sys, "argv", ["run_schedule.py", *args])
    run_schedule.main()
    return json.loads(capsys.readouterr().out)


def test_mood_history_feeds_insights(monkeypatch, capsys):
    report = run_cli(
        monkeypatch, capsys,
        "--tasks", SAMPLE_TASKS, "--mood", "stressed", "--now", "2025-01-06T08:00:00", "--moods", SAMPLE_MOODS,
    )
    titles = [insight["title"] for insight in report["insights"]]
    assert "Stress Alert" in titles


def test_without_mood_history_no_stress_alert(monkeypatch, capsys):
    report = run_cli(monkeypatch, capsys, "--tasks", SAMPLE_TASKS, "--mood", "stressed", "--now", "2025-01-06T08:00:00")
    assert "Stress Alert" not in [insight["title"] for insight in report["insights"]]
    assert report["mood"] == "stressed"
