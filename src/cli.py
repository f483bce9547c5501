"""Command-line interface for the todo tracker.

One invocation runs exactly one command against the list loaded at startup:
add, list, toggle or remove. Mutating commands rewrite the backing file.
Result and error lines go to stdout; click reports usage errors on stderr.
"""
import logging
from pathlib import Path
from typing import Optional

import click

from config import load_settings
from errors import FileAccessError, CorruptDataError, NotFoundError, PersistenceError
from storage import Storage
from todo_list import TodoList
from models import format_rfc1123

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Task ID not found."
EMPTY_MESSAGE = "No tasks found."


class CLI:
    def __init__(self, todo_list: TodoList, storage: Storage):
        self.todo_list: TodoList = todo_list
        self.storage: Storage = storage

    @classmethod
    def open(cls, storage: Storage) -> "CLI":
        """Load the backing file; on failure report it and start empty."""
        todo_list = TodoList()
        try:
            todo_list.load(storage.load_tasks())
        except (FileAccessError, CorruptDataError) as exc:
            logger.info("Starting with an empty list: %s", exc)
            click.echo(f"Error loading todo list: {exc}")
        return cls(todo_list, storage)

    def _save(self) -> bool:
        try:
            self.storage.save_tasks(self.todo_list.tasks)
        except PersistenceError as exc:
            logger.error("Save failed, in-memory change kept: %s", exc)
            click.echo(f"Error saving todo list: {exc}")
            return False
        return True

    # -------------------- commands --------------------
    def add(self, description: str) -> None:
        task = self.todo_list.add(description)
        if self._save():
            click.echo(f"Task '{task.description}' added at {format_rfc1123(task.created_at)}")

    def list(self) -> None:
        if not self.todo_list.tasks:
            click.echo(EMPTY_MESSAGE)
            return
        for line in self.todo_list.render_table():
            click.echo(line)

    def toggle(self, task_id: str) -> None:
        try:
            task = self.todo_list.toggle(task_id)
        except NotFoundError:
            click.echo(NOT_FOUND_MESSAGE)
            return
        if self._save():
            click.echo(f"Task '{task.description}' marked as {task.status}.")

    def remove(self, task_id: str) -> None:
        try:
            self.todo_list.remove(task_id)
        except NotFoundError:
            click.echo(NOT_FOUND_MESSAGE)
            return
        if self._save():
            click.echo(f"Task ID {task_id} removed.")


# -------------------- click surface --------------------
@click.group(name="todo", help="A simple CLI Todo app")
@click.version_option(package_name="todo-cli", prog_name="todo")
@click.option(
    "--file", "data_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Backing JSON file (default: $TODO_FILE or ./todo.json).",
)
@click.pass_context
def cli(ctx: click.Context, data_file: Optional[Path]) -> None:
    settings = load_settings(data_file)
    logger.debug("Using backing file %s", settings.data_file)
    ctx.obj = CLI.open(Storage(settings.data_file))


@cli.command("add", short_help="Add a new task to the Todo list")
@click.argument("task")
@click.pass_obj
def add_command(app: CLI, task: str) -> None:
    """Add TASK with the current time as its creation timestamp."""
    app.add(task)


@cli.command("list", short_help="List all tasks")
@click.pass_obj
def list_command(app: CLI) -> None:
    app.list()


@cli.command("toggle", short_help="Toggle a task between Completed and Incomplete")
@click.argument("task_id")
@click.pass_obj
def toggle_command(app: CLI, task_id: str) -> None:
    app.toggle(task_id)


@cli.command("remove", short_help="Remove a task by ID")
@click.argument("task_id")
@click.pass_obj
def remove_command(app: CLI, task_id: str) -> None:
    app.remove(task_id)
