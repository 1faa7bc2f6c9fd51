"""Protocols (interfaces) consumed by the CLI and core layers.

These define the contracts that infrastructure adapters must satisfy.
Callers depend ONLY on these protocols — never on concrete
implementations — so tests can substitute an in-memory repository.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from tdr.core.models import TaskList


class TaskRepository(Protocol):
    """Contract for task-list persistence backends.

    Any object implementing the three methods below satisfies this
    protocol structurally (no explicit inheritance required).
    """

    def open_or_create(self) -> Path:
        """Ensure the backing file exists and is usable; return its path.

        Raises
        ------
        StorageError
            On unrecoverable filesystem errors (permissions, disk full).
        """
        ...  # pragma: no cover

    def load(self) -> TaskList:
        """Return the persisted task list.

        Empty or malformed data yields an empty :class:`TaskList`
        rather than an error.
        """
        ...  # pragma: no cover

    def save(self, task_list: TaskList) -> None:
        """Replace the persisted document with *task_list*.

        Raises
        ------
        StorageError
            When the document cannot be written.
        """
        ...  # pragma: no cover
