import json
import sys
from datetime import datetime
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "scripts" / "lib"))

from checklist.models import Task, tasks_to_json


def test_to_dict_formats_timestamps():
    task = Task(
        text="Renew passport ",
        done=True,
        deadline=datetime(2024, 1, 1),
        completed_at=datetime(2024, 1, 5, 8, 15, 30),
    )
    assert task.to_dict() == {
        "text": "Renew passport ",
        "done": True,
        "deadline": "2024-01-01T00:00:00",
        "completed_at": "2024-01-05T08:15:30",
    }


def test_to_dict_missing_timestamps_are_null():
    assert Task(text="Plain", done=False).to_dict() == {
        "text": "Plain",
        "done": False,
        "deadline": None,
        "completed_at": None,
    }


def test_from_dict_accepts_absent_timestamps():
    task = Task.from_dict({"text": "Loaded", "done": False})
    assert task == Task(text="Loaded", done=False)


def test_from_dict_reads_to_dict_output():
    data = {"text": "Ship", "done": False, "deadline": "2024-03-01T17:30:00", "completed_at": None}
    assert Task.from_dict(data).deadline == datetime(2024, 3, 1, 17, 30)


def test_from_dict_rejects_bad_timestamp():
    with pytest.raises(ValueError):
        Task.from_dict({"text": "Bad", "done": False, "deadline": "2024-13-01T00:00:00"})


def test_tasks_to_json_keeps_icons_unescaped():
    payload = tasks_to_json([Task(text="Bad date 📅2024-13-01", done=False)])
    assert "📅" in payload
    assert json.loads(payload) == [
        {"text": "Bad date 📅2024-13-01", "done": False, "deadline": None, "completed_at": None}
    ]


def test_tasks_are_immutable():
    task = Task(text="Frozen", done=False)
    with pytest.raises(AttributeError):
        task.done = True
