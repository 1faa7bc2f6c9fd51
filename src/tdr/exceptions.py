"""Custom exception hierarchy for tdr.

All exceptions that cross layer boundaries must inherit from
:class:`TdrError`.  Raw ``OSError`` / ``json`` exceptions must NEVER
propagate beyond the infrastructure layer — they must be caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
TdrError
├── StorageError
├── MalformedTaskDataError
└── TaskNotFoundError
"""

from __future__ import annotations


class TdrError(Exception):
    """Base exception for all tdr errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Persistence -----------------------------------------------------------

class StorageError(TdrError):
    """Raised when the task file or its directory cannot be created, read or written."""


class MalformedTaskDataError(TdrError):
    """Raised when a persisted document does not have the task-list shape.

    The storage layer recovers from this by substituting an empty
    collection; it never reaches the CLI error boundary.
    """


# --- Task addressing -------------------------------------------------------

class TaskNotFoundError(TdrError):
    """Raised when a task or subtask position is out of range."""

    def __init__(self, kind: str, position: int, *, parent: int | None = None) -> None:
        if parent is None:
            message = f"{kind.capitalize()} {position} does not exist."
            hint = "Run 'tdr list' to see task numbers."
        else:
            message = f"{kind.capitalize()} {position} of task {parent} does not exist."
            hint = f"Run 'tdr subtask {parent} list' to see subtask numbers."
        super().__init__(message, hint=hint)
        self.kind: str = kind
        self.position: int = position
        self.parent: int | None = parent


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TdrError):
    """Raised when an optional runtime dependency is not available."""
