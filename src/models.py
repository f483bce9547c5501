"""Data models for the todo tracker.

Currently only exposes the Task dataclass. On disk the description lives
under the key "task" and created_at is an ISO 8601 string; files written by
the earlier Go tool (nanosecond fractions, "Z" suffix) are still readable.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from email.utils import format_datetime
from typing import Any, Dict
import re

STATUS_COMPLETED = "Completed"
STATUS_INCOMPLETE = "Incomplete"

_FRACTION_RE = re.compile(r"\.(\d+)")


def now() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


def parse_timestamp(raw: str) -> datetime:
    """Parse a stored created_at value.

    Accepts anything datetime.fromisoformat does, plus a trailing "Z" and
    fractional seconds of any length (truncated or padded to microseconds).
    Naive values are taken as local time.
    """
    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return dt


def format_rfc1123(dt: datetime) -> str:
    """Render e.g. 'Mon, 02 Jan 2006 15:04:05 -0700'."""
    return format_datetime(dt)


@dataclass
class Task:
    """A single todo entry.

    Fields:
        id: Positive integer id, unique within the store, never renumbered.
        description: Non-empty text supplied by the user.
        completed: Flipped in place by toggle.
        created_at: Set once when the task is added.
    """
    id: int
    description: str
    completed: bool = False
    created_at: datetime = field(default_factory=now)

    @property
    def status(self) -> str:
        return STATUS_COMPLETED if self.completed else STATUS_INCOMPLETE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "task": self.description,
            "completed": self.completed,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Build a Task from a stored record.

        Raises ValueError when a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"task record must be an object, got {type(data).__name__}")
        tid = data.get("id")
        # bool is an int subclass; reject it explicitly
        if not isinstance(tid, int) or isinstance(tid, bool):
            raise ValueError(f"task id must be an integer, got {tid!r}")
        description = data.get("task")
        if not isinstance(description, str):
            raise ValueError(f"task {tid}: description must be a string")
        completed = data.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"task {tid}: completed must be a boolean")
        raw_created = data.get("created_at")
        if not isinstance(raw_created, str):
            raise ValueError(f"task {tid}: created_at must be a string")
        return cls(
            id=tid,
            description=description,
            completed=completed,
            created_at=parse_timestamp(raw_created),
        )

