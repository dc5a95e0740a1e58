from pathlib import Path

import pytest

from ui_demo_streamlit.app import _parse_moods_from_path, _parse_uploaded

SAMPLE_TASKS = Path(__file__).resolve().parents[1] / "examples" / "sample_tasks.csv"
SAMPLE_MOODS = Path(__file__).resolve().parents[1] / "examples" / "sample_moods.csv"


class FakeUpload:
    def __init__(self, path: Path):
        self.name = path.name
        self._data = path.read_bytes()

    def getbuffer(self):
        return memoryview(self._data)


def test_uploaded_tasks_leave_no_temp_file():
    seen = []

    def parse_path(file_path):
        seen.append(Path(file_path))
        return ["parsed"]

    assert _parse_uploaded(FakeUpload(SAMPLE_TASKS), parse_path) == ["parsed"]
    assert seen[0].suffix == ".csv"
    assert not seen[0].exists()


def test_temp_file_removed_when_parsing_fails(tmp_path):
    bad = tmp_path / "tasks.csv"
    bad.write_text("task_id,title,created_at\na,,2025-01-01T09:00:00\n", encoding="utf-8")
    seen = []

    def parse_path(file_path):
        seen.append(Path(file_path))
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        _parse_uploaded(FakeUpload(bad), parse_path)
    assert seen and not seen[0].exists()


def test_uploaded_mood_history_parses():
    entries = _parse_uploaded(FakeUpload(SAMPLE_MOODS), _parse_moods_from_path)
    assert len(entries) == 5
