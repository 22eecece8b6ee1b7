"""Command-line interface loop for the tasklist.

One state only: waiting for an action word. Sub-prompts (task number,
field values) are local loops inside the handlers and always return
here. The store is saved once, on `end` or when input runs out.
"""
import logging
from datetime import date
from typing import Callable, Dict, Optional

import click

from models import Task, TaskField
from prompts import Echo, Prompter, Reader
from render import Swatch, render_table
from store import BlankTaskError, TaskStore
from theme import swatch as ansi_swatch

logger = logging.getLogger(__name__)

ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"
NO_TASKS = "No tasks have been input"
BLANK_TASK = "The task is blank"


class CLI:
    def __init__(self, store: TaskStore, read: Reader = input, echo: Echo = click.echo,
                 today: Optional[date] = None, swatch: Swatch = ansi_swatch):
        self.store: TaskStore = store
        self.echo: Echo = echo
        self.prompter = Prompter(read, echo)
        self.today: Optional[date] = today
        self.swatch: Swatch = swatch
        self._handlers: Dict[str, Callable[[], None]] = {
            'add': self._add,
            'print': self._print,
            'edit': self._edit,
            'delete': self._delete,
        }

    def run(self) -> int:
        """Main REPL loop; returns the process exit code."""
        try:
            while True:
                self.echo(ACTION_PROMPT)
                action = self.prompter.read().strip().lower()
                if action == 'end':
                    self.echo("Tasklist exiting!")
                    break
                handler = self._handlers.get(action)
                if handler is None:
                    logger.debug("Invalid action %r", action)
                    self.echo("The input action is invalid")
                    continue
                handler()
        except (KeyboardInterrupt, EOFError):
            logger.info("Input closed; saving and exiting")
        self.store.save()
        return 0

    # -------------------- command handlers --------------------
    def _no_tasks(self) -> bool:
        if self.store.is_empty():
            self.echo(NO_TASKS)
            return True
        return False

    def _print(self) -> None:
        if self._no_tasks():
            return
        self._show_table()

    def _show_table(self) -> None:
        for line in render_table(self.store.tasks(), self.today, self.swatch):
            self.echo(line)

    def _add(self) -> None:
        priority = self.prompter.priority()
        due_date = self.prompter.date()
        due_time = self.prompter.time()
        task = Task(priority, due_date, due_time)
        for line in self.prompter.body():
            task.add_line(line)
        try:
            self.store.add(task)
        except BlankTaskError:
            self.echo(BLANK_TASK)

    def _delete(self) -> None:
        if self._no_tasks():
            return
        self._show_table()
        index = self.prompter.task_number(len(self.store))
        self.store.delete(index)
        self.echo("The task is deleted")

    def _edit(self) -> None:
        if self._no_tasks():
            return
        self._show_table()
        index = self.prompter.task_number(len(self.store))
        field = self.prompter.field()
        if field is TaskField.PRIORITY:
            value = self.prompter.priority()
        elif field is TaskField.DATE:
            value = self.prompter.date()
        elif field is TaskField.TIME:
            value = self.prompter.time()
        else:
            value = self.prompter.body()
        try:
            self.store.edit_field(index, field, value)
        except BlankTaskError:
            self.echo(BLANK_TASK)
            return
        self.echo("The task is changed")
