"""Todo list operations on top of the store."""

from __future__ import annotations

from typing import List

import structlog

from .models import Todo
from .store import TodoStore

logger = structlog.get_logger(__name__)


class TodoIndexError(IndexError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Task {index} doesn't exist")
        self.index = index
        self.length = length


def format_todo(index: int, todo: Todo) -> str:
    return f"{index}: {todo.description} {todo.marker}"


class TodoList:
    """Loads the list once and persists it after each change.

    Out-of-range indices raise :class:`TodoIndexError` before anything is
    touched, so a failed ``remove`` or ``complete`` never saves.
    """

    def __init__(self, store: TodoStore) -> None:
        self.store = store
        self.tasks: List[Todo] = store.load()

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self.tasks):
            raise TodoIndexError(idx, len(self.tasks))

    def add(self, description: str) -> Todo:
        todo = Todo(description=description)
        self.tasks.append(todo)
        self.store.save(self.tasks)
        logger.debug("todo_added", index=len(self.tasks) - 1)
        return todo

    def remove(self, idx: int) -> Todo:
        self._check_index(idx)
        removed = self.tasks.pop(idx)
        self.store.save(self.tasks)
        logger.debug("todo_removed", index=idx)
        return removed

    def list(self) -> List[Todo]:
        return self.tasks

    def lines(self) -> List[str]:
        return [format_todo(i, t) for i, t in enumerate(self.tasks)]

    def complete(self, idx: int) -> Todo:
        self._check_index(idx)
        todo = self.tasks[idx]
        todo.completed = True
        self.store.save(self.tasks)
        logger.debug("todo_completed", index=idx)
        return todo
