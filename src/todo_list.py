"""Todo list logic: holds tasks, ID management, task mutation, and rendering.

Tasks are kept in insertion order. IDs are allocated from the highest ID
seen plus one, so removal leaves gaps instead of reusing numbers. Lookups
compare the formatted integer ID with the user's text verbatim: "01" does
not match task 1.
"""
import logging
from typing import Iterable, List, Optional

from errors import NotFoundError, UsageError
from models import Task, format_rfc1123, now
from theme import color, HEADER_COLOR, STATUS_COLOR, BOLD

logger = logging.getLogger(__name__)

ID_WIDTH = 3
TASK_WIDTH = 23
STATUS_WIDTH = 12
SEP = " | "


class TodoList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self.tasks: List[Task] = []
        self._next_id: int = 1
        if tasks:
            self.load(tasks)

    # -------------------- loading --------------------
    def load(self, tasks: Iterable[Task]) -> None:
        """Replace the in-memory list and reset allocation past the max ID."""
        self.tasks = list(tasks)
        self._next_id = max((t.id for t in self.tasks), default=0) + 1

    # -------------------- id management --------------------
    def next_id(self) -> int:
        """ID the next added task will get (previous max + 1, 1 when empty)."""
        return self._next_id

    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    # -------------------- queries --------------------
    def __len__(self) -> int:
        return len(self.tasks)

    def find(self, task_id: str) -> Task:
        """First task whose formatted ID equals task_id; NotFoundError otherwise."""
        for task in self.tasks:
            if str(task.id) == task_id:
                return task
        raise NotFoundError(task_id)

    # -------------------- task operations --------------------
    def add(self, description: str) -> Task:
        if not description.strip():
            raise UsageError("Task description must not be empty.")
        task = Task(id=self._allocate_id(), description=description, created_at=now())
        self.tasks.append(task)
        logger.debug("Added task %d", task.id)
        return task

    def toggle(self, task_id: str) -> Task:
        task = self.find(task_id)
        task.completed = not task.completed
        logger.debug("Task %d completed=%s", task.id, task.completed)
        return task

    def remove(self, task_id: str) -> Task:
        task = self.find(task_id)
        self.tasks.remove(task)
        logger.debug("Removed task %d", task.id)
        return task

    # -------------------- display --------------------
    def render_table(self) -> List[str]:
        """Fixed-width table lines: header, rule, one row per task."""
        header = SEP.join([
            f"{'ID':<{ID_WIDTH}}",
            f"{'Task':<{TASK_WIDTH}}",
            f"{'Status':<{STATUS_WIDTH}}",
            "Created At",
        ])
        lines = [color(header, HEADER_COLOR, BOLD), color('-' * len(header), HEADER_COLOR)]
        for task in self.tasks:
            status_cell = color(f"{task.status:<{STATUS_WIDTH}}", STATUS_COLOR[task.status])
            lines.append(SEP.join([
                f"{task.id:<{ID_WIDTH}d}",
                f"{task.description:<{TASK_WIDTH}}",
                status_cell,
                format_rfc1123(task.created_at),
            ]))
        return lines

