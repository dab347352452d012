"""JSON file storage for the todo list."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence, Union

import structlog

from .config import DEFAULT_STORAGE_PATH
from .models import Todo
from .utils import atomic_write

logger = structlog.get_logger(__name__)


class StorageError(Exception):
    """Reading, writing or decoding the storage file failed."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class TodoStore:
    def __init__(self, path: Union[str, Path] = DEFAULT_STORAGE_PATH) -> None:
        self.path = Path(path)

    def load(self) -> List[Todo]:
        """Return the stored todos, initialising an empty file on first run."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._initialise()
            return []
        except OSError as e:
            raise StorageError(f"cannot read {self.path}: {e}", self.path) from e
        except UnicodeDecodeError as e:
            raise StorageError(f"invalid UTF-8 in {self.path}: {e}", self.path) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"invalid JSON in {self.path}: {e}", self.path) from e

        if not isinstance(data, list):
            raise StorageError(
                f"expected a JSON array in {self.path}, got {type(data).__name__}",
                self.path,
            )

        todos = []
        for i, item in enumerate(data):
            try:
                todos.append(Todo.from_dict(item))
            except ValueError as e:
                raise StorageError(
                    f"malformed entry {i} in {self.path}: {e}", self.path
                ) from e

        logger.debug("todos_loaded", path=str(self.path), count=len(todos))
        return todos

    def save(self, todos: Sequence[Todo]) -> None:
        """Overwrite the storage file with the full list."""
        payload = json.dumps(
            [todo.to_dict() for todo in todos], indent=2, ensure_ascii=False
        )
        try:
            atomic_write(self.path, payload)
        except OSError as e:
            raise StorageError(f"cannot write {self.path}: {e}", self.path) from e
        logger.debug("todos_saved", path=str(self.path), count=len(todos))

    def _initialise(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
        except OSError as e:
            raise StorageError(
                f"cannot initialise {self.path}: {e}", self.path
            ) from e
        logger.debug("storage_initialised", path=str(self.path))
