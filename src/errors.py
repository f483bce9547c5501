"""Exception types raised by the todo store and command layer.

Load failures (FileAccessError, CorruptDataError) are reported at startup
and the program carries on with an empty list. PersistenceError is reported
after a mutating command; the in-memory change is kept.
"""
import click


class TodoError(Exception):
    """Base class for todo errors."""


class FileAccessError(TodoError):
    """The backing file could not be opened or created."""


class CorruptDataError(TodoError):
    """The backing file has content that is not a valid task list."""


class PersistenceError(TodoError):
    """Writing the backing file failed."""


class NotFoundError(TodoError):
    """No task matches the given identifier."""

    def __init__(self, task_id: str):
        super().__init__(f"Task ID {task_id} not found")
        self.task_id = task_id


class UsageError(TodoError, click.UsageError):
    """A command was given an argument of the wrong shape.

    Also a click.UsageError so click prints usage to stderr and exits 2.
    """

    def __init__(self, message: str):
        click.UsageError.__init__(self, message, ctx=click.get_current_context(silent=True))
