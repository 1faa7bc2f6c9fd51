"""Domain models for tdr.

Unlike value objects elsewhere, tasks are **mutable** dataclasses: a
command loads the whole :class:`TaskList`, mutates it in place, and the
CLI writes it back.  The models carry zero I/O; conversion to and from
plain JSON-compatible dicts lives here so the storage layer only deals
with bytes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tdr.exceptions import MalformedTaskDataError


# ---------------------------------------------------------------------------
# Task
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Task:
    """A single to-do item, optionally holding subtasks."""

    id: int
    """Identifier assigned at creation.  Never rewritten afterwards."""

    text: str
    """Human-readable description."""

    completed: bool = False
    """Completion flag."""

    subtasks: list[Task] = field(default_factory=list)
    """Child tasks, in display order."""

    def complete(self) -> None:
        """Mark this task and every descendant as completed."""
        self.completed = True
        for subtask in self.subtasks:
            subtask.complete()

    def uncomplete(self) -> None:
        """Mark this task and every descendant as not completed."""
        self.completed = False
        for subtask in self.subtasks:
            subtask.uncomplete()

    def render(self) -> str:
        """Return the single-line ``[x] text`` / ``[ ] text`` rendering."""
        mark = "x" if self.completed else " "
        return f"[{mark}] {self.text}"

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "subtasks": [subtask.to_dict() for subtask in self.subtasks],
        }

    @classmethod
    def from_dict(cls, raw: object) -> Task:
        """Build a task from its JSON form.

        A missing ``subtasks`` key reads as an empty list; any other
        deviation raises :class:`MalformedTaskDataError`.
        """
        if not isinstance(raw, dict):
            raise MalformedTaskDataError(f"Task entry must be an object, got {type(raw).__name__}.")

        task_id = raw.get("id")
        text = raw.get("text")
        completed = raw.get("completed")
        subtasks = raw.get("subtasks", [])

        # bool is a subclass of int; reject it explicitly.
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise MalformedTaskDataError(f"Task id must be an integer, got {task_id!r}.")
        if not isinstance(text, str):
            raise MalformedTaskDataError(f"Task {task_id} text must be a string.")
        if not isinstance(completed, bool):
            raise MalformedTaskDataError(f"Task {task_id} completed flag must be a boolean.")
        if not isinstance(subtasks, list):
            raise MalformedTaskDataError(f"Task {task_id} subtasks must be a list.")

        return cls(
            id=task_id,
            text=text,
            completed=completed,
            subtasks=[cls.from_dict(child) for child in subtasks],
        )


# ---------------------------------------------------------------------------
# Root document
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class TaskList:
    """The root persisted document: an ordered collection of tasks."""

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def to_dict(self) -> dict[str, Any]:
        return {"tasks": [task.to_dict() for task in self.tasks]}

    @classmethod
    def from_dict(cls, raw: object) -> TaskList:
        if not isinstance(raw, dict):
            raise MalformedTaskDataError("Task document must be a JSON object.")
        tasks = raw.get("tasks")
        if not isinstance(tasks, list):
            raise MalformedTaskDataError("Task document must contain a 'tasks' list.")
        return cls(tasks=[Task.from_dict(entry) for entry in tasks])
