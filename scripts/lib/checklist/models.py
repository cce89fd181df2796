"""Task record extracted from a checklist item."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(DATETIME_FORMAT)


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.strptime(value, DATETIME_FORMAT)


@dataclass(frozen=True)
class Task:
    text: str
    done: bool
    deadline: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON output shape."""
        return {
            "text": self.text,
            "done": self.done,
            "deadline": _format_timestamp(self.deadline),
            "completed_at": _format_timestamp(self.completed_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Build a Task from a dict written by to_dict().

        Raises ValueError on malformed timestamps and KeyError when
        'text' or 'done' is missing.
        """
        return cls(
            text=str(data["text"]),
            done=bool(data["done"]),
            deadline=_parse_timestamp(data.get("deadline")),
            completed_at=_parse_timestamp(data.get("completed_at")),
        )


def tasks_to_json(tasks: list[Task]) -> str:
    return json.dumps([task.to_dict() for task in tasks], ensure_ascii=False, indent=2)
