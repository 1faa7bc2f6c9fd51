"""Core layer — task data model and command operations.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O.
* No imports from ``cli`` or ``infra``.
"""

from tdr.core.commands import TaskScope, subtask_scope, task_scope
from tdr.core.models import Task, TaskList
from tdr.core.protocols import TaskRepository

__all__: list[str] = [
    "Task",
    "TaskList",
    "TaskRepository",
    "TaskScope",
    "subtask_scope",
    "task_scope",
]
