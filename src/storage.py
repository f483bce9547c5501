"""Persistence helpers (load/save) for the todo list.

The backing file holds a single JSON array of task records. Every save
rewrites the whole file in place. There is no temp-file-and-rename step and
no locking: a crash mid-write can leave a truncated file, and two concurrent
invocations race with the later write winning.
"""
import json
import logging
from pathlib import Path
from typing import List, Union

from errors import CorruptDataError, FileAccessError, PersistenceError
from models import Task

logger = logging.getLogger(__name__)


class Storage:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load_tasks(self) -> List[Task]:
        """Load the task list from disk, creating an empty file if missing.

        Empty (or whitespace-only) content and JSON null load as []. Only the
        first JSON value is read; anything after it is ignored.
        Raises FileAccessError when the file cannot be opened/created and
        CorruptDataError when the content is not a valid task list.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = f.read()
        except OSError as exc:
            raise FileAccessError(f"cannot open {self.path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise CorruptDataError(f"{self.path} is not UTF-8 text: {exc}") from exc

        if not raw.strip():
            logger.debug("Backing file %s is empty", self.path)
            return []
        text = raw.lstrip()
        try:
            data, end = json.JSONDecoder().raw_decode(text)
        except json.JSONDecodeError as exc:
            raise CorruptDataError(f"{self.path} is not valid JSON: {exc}") from exc
        if text[end:].strip():
            # older saves did not truncate, leaving the tail of a longer list
            logger.info("Ignoring %d trailing byte(s) in %s", len(text[end:].strip()), self.path)
        if data is None:
            return []
        if not isinstance(data, list):
            raise CorruptDataError(f"{self.path} must hold a JSON array of tasks")
        try:
            tasks = [Task.from_dict(record) for record in data]
        except ValueError as exc:
            raise CorruptDataError(f"{self.path}: {exc}") from exc
        logger.debug("Loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save_tasks(self, tasks: List[Task]) -> None:
        """Overwrite the backing file with the full task list.

        Raises PersistenceError if the file cannot be opened or written.
        """
        payload = json.dumps([task.to_dict() for task in tasks], indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                f.write(payload + "\n")
        except OSError as exc:
            raise PersistenceError(f"cannot write {self.path}: {exc}") from exc
        logger.debug("Saved %d task(s) to %s", len(tasks), self.path)
