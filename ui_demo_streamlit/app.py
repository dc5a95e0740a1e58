"""Streamlit demo UI for moodo-engine."""

from __future__ import annotations

import tempfile
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any

from moodo_engine.adapters import csv_adapter, json_adapter
from moodo_engine.compatibility import is_compatible, rank_tasks_for_mood
from moodo_engine.context import derive_context
from moodo_engine.escalation import priority_description
from moodo_engine.insights import generate_insights
from moodo_engine.recommendations import recommend
from moodo_engine.schema import Mood
from moodo_engine.scheduling import estimate_duration_hours, optimize


def _parse_tasks_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_moods_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse_moods(file_path)
    if suffix == ".json":
        return json_adapter.parse_moods(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file, parse_path=_parse_tasks_from_path) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = Path(handle.name)
    try:
        return parse_path(str(temp_path))
    finally:
        temp_path.unlink(missing_ok=True)


def _build_summary(tasks: list) -> dict[str, Any]:
    emotion_counts = Counter(task.emotion.value for task in tasks)
    total = len(tasks)
    done = sum(1 for task in tasks if task.is_completed)
    return {
        "total_tasks": total,
        "done_pct": (done / total * 100.0) if total else 0.0,
        "emotion_counts": dict(emotion_counts),
    }


def _fmt_time(value: datetime | None) -> str:
    return value.strftime("%a %H:%M") if value else "-"


def run_engine(
    tasks: list, mood: Mood, now: datetime, max_recommendations: int, entries: list | None = None
) -> dict[str, Any]:
    """Run one orchestration cycle and return a UI-friendly result payload."""

    optimized = optimize(tasks, mood, now)
    rows = []
    for before, after in zip(tasks, optimized):
        rows.append(
            {
                "task": after.title,
                "emotion": after.emotion.value,
                "fits mood": is_compatible(after.emotion, mood),
                "priority": priority_description(after, now),
                "est. hours": estimate_duration_hours(after),
                "reminder before": _fmt_time(before.reminder_at),
                "reminder after": _fmt_time(after.reminder_at),
            }
        )

    context = derive_context(mood, now)
    return {
        "summary": _build_summary(tasks),
        "schedule": rows,
        "focus": rank_tasks_for_mood(optimized, mood, now),
        "context": context,
        "recommendations": recommend(context, max_recommendations),
        "insights": generate_insights(entries or [], optimized),
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Moodo Engine Demo", layout="wide")
    st.title("Moodo Engine Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload task list", type=["csv", "json"])
        uploaded_moods = st.file_uploader("Upload mood history (optional)", type=["csv", "json"])
        use_demo = st.checkbox("Load demo tasks", value=True)
        mood = Mood(st.selectbox("Current mood", options=[m.value for m in Mood], index=0))
        now_date = st.date_input("Date", value=datetime(2025, 1, 6).date())
        now_hour = st.slider("Now hour", min_value=0, max_value=23, value=8)
        max_recommendations = st.number_input("Max suggestions", min_value=0, max_value=5, value=2, step=1)
        run = st.button("Run engine", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Run engine**.")
        return

    try:
        if use_demo:
            tasks = csv_adapter.parse("examples/sample_tasks.csv")
            entries = csv_adapter.parse_moods("examples/sample_moods.csv")
            data_source = "demo tasks (examples/sample_tasks.csv)"
        elif uploaded is not None:
            tasks = _parse_uploaded(uploaded)
            entries = _parse_uploaded(uploaded_moods, _parse_moods_from_path) if uploaded_moods is not None else []
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a CSV/JSON file or enable 'Load demo tasks'.")
            return

        if not tasks:
            st.error("No tasks were found in the selected input.")
            return

        now = datetime.combine(now_date, datetime.min.time()).replace(hour=int(now_hour))
        result = run_engine(tasks, mood, now, int(max_recommendations), entries)

        st.success(f"Loaded {len(tasks)} tasks from {data_source}.")

        st.subheader("A) Task Summary")
        summary = result["summary"]
        c1, c2 = st.columns(2)
        c1.metric("Total tasks", summary["total_tasks"])
        c2.metric("% done", f"{summary['done_pct']:.2f}%")
        st.table([summary["emotion_counts"]])

        st.subheader("B) Optimized Schedule")
        st.table(result["schedule"])

        st.subheader("C) Best Fit Right Now")
        st.write(", ".join(task.title for task in result["focus"]) or "Nothing open.")

        st.subheader("D) Suggestions")
        context = result["context"]
        st.caption(f"energy {context.energy_level:.1f} · stress {context.stress_level:.1f}")
        for rec in result["recommendations"]:
            st.write(f"**{rec.title}** ({rec.estimated_duration} min, score {rec.score:.2f}): {rec.description}")

        st.subheader("E) Insights")
        for insight in result["insights"]:
            st.write(f"**{insight.title}**: {insight.description} {insight.recommendation}")

    except ValueError as exc:
        st.error(f"Input error: {exc}")
    except Exception:
        st.error("Something went wrong while running the demo. Please verify the input format.")


if __name__ == "__main__":
    main()
