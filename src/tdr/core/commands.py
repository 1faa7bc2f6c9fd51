"""Core command operations — add, edit, complete, remove, list, clear.

Every operation acts on a :class:`TaskScope`, which wraps one ordered
list of tasks: either the top-level :class:`~tdr.core.models.TaskList`
or the subtasks of a single task.  The same code therefore serves both
``tdr <command>`` and ``tdr subtask <id> <command>``.

Addressing
----------
Commands address tasks by **1-based position**, the number shown by
``list``.  Removing a task shifts every later task down by one.  The
stored ``Task.id`` is assigned once at creation and never rewritten, so
removing a task does not renumber the ids of the others.  New ids are
one past the highest id still in the scope: removing the highest-id task
frees its id for the next ``add``.

Guarantees
----------
* No I/O, no ``print()`` — the CLI layer renders results.
* An out-of-range position raises
  :class:`~tdr.exceptions.TaskNotFoundError` before anything mutates.
"""

from __future__ import annotations

from tdr.core.models import Task, TaskList
from tdr.exceptions import TaskNotFoundError


class TaskScope:
    """Command operations over one ordered list of tasks.

    Parameters
    ----------
    tasks:
        The list to operate on.  It is mutated in place.
    kind:
        ``"task"`` or ``"subtask"``; used in error messages.
    parent:
        Position of the owning task when *kind* is ``"subtask"``.
    """

    def __init__(
        self,
        tasks: list[Task],
        *,
        kind: str = "task",
        parent: int | None = None,
    ) -> None:
        self._tasks: list[Task] = tasks
        self.kind: str = kind
        self.parent: int | None = parent

    def __len__(self) -> int:
        return len(self._tasks)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _index(self, position: int) -> int:
        """Translate a 1-based *position* to a list index, or raise."""
        if not 1 <= position <= len(self._tasks):
            raise TaskNotFoundError(self.kind, position, parent=self.parent)
        return position - 1

    def _next_id(self) -> int:
        """One past the highest id in the scope; 1 when empty."""
        return max((task.id for task in self._tasks), default=0) + 1

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, text: str) -> tuple[int, Task]:
        """Append a new, uncompleted task and return ``(position, task)``."""
        task = Task(id=self._next_id(), text=text)
        self._tasks.append(task)
        return len(self._tasks), task

    def get(self, position: int) -> Task:
        return self._tasks[self._index(position)]

    def edit(self, position: int, text: str) -> Task:
        task = self.get(position)
        task.text = text
        return task

    def complete(self, position: int) -> Task:
        """Complete the task at *position* and all of its subtasks."""
        task = self.get(position)
        task.complete()
        return task

    def uncomplete(self, position: int) -> Task:
        """Uncomplete the task at *position* and all of its subtasks."""
        task = self.get(position)
        task.uncomplete()
        return task

    def remove(self, position: int) -> Task:
        return self._tasks.pop(self._index(position))

    def entries(self) -> list[tuple[int, Task]]:
        """Return ``(position, task)`` pairs in display order."""
        return list(enumerate(self._tasks, start=1))

    def clear(self) -> int:
        """Remove every task in the scope; return how many were removed."""
        removed = len(self._tasks)
        self._tasks.clear()
        return removed


def task_scope(task_list: TaskList) -> TaskScope:
    """Scope covering the top-level tasks of *task_list*."""
    return TaskScope(task_list.tasks)


def subtask_scope(task_list: TaskList, position: int) -> TaskScope:
    """Scope covering the subtasks of the task at *position*.

    Raises
    ------
    TaskNotFoundError
        When no top-level task exists at *position*.
    """
    parent = task_scope(task_list).get(position)
    return TaskScope(parent.subtasks, kind="subtask", parent=position)
