"""Todo record model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Todo:
    description: str
    completed: bool = False

    @property
    def marker(self) -> str:
        return "[x]" if self.completed else "[ ]"

    def to_dict(self) -> Dict[str, Any]:
        return {"description": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, data: Any) -> Todo:
        """Build a record from its JSON object, rejecting mismatched shapes."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        try:
            description = data["description"]
            completed = data["completed"]
        except KeyError as e:
            raise ValueError(f"missing field {e.args[0]!r}") from e
        if not isinstance(description, str):
            raise ValueError("'description' must be a string")
        # bool is a subclass of int, so 0/1 must be ruled out explicitly
        if not isinstance(completed, bool):
            raise ValueError("'completed' must be a boolean")
        return cls(description=description, completed=completed)
