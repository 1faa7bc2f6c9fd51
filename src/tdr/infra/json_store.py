"""JSON-file implementation of :class:`~tdr.core.protocols.TaskRepository`.

This module is the **only** place in the codebase that reads or writes
the task document.  All ``OSError`` and serialisation failures are
caught here and re-raised as :class:`~tdr.exceptions.StorageError`.

Policies
--------
* Empty, undecodable or malformed documents load as an empty task
  list.  The discarded content is logged at DEBUG and never shown to
  the user.
* Saves are atomic: the document is written to a temporary file in
  the same directory and renamed over the target with
  :func:`os.replace`.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from tdr.core.models import TaskList
from tdr.exceptions import MalformedTaskDataError, StorageError
from tdr.infra.paths import StorageConfig

logger = logging.getLogger(__name__)

_PERMISSION_HINT = "Check that you can write to the tdr data directory."


class JsonTaskStore:
    """Concrete :class:`TaskRepository` backed by a single JSON file.

    This class satisfies the :class:`~tdr.core.protocols.TaskRepository`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, config: StorageConfig) -> None:
        self._config: StorageConfig = config

    @property
    def path(self) -> Path:
        return self._config.file_path

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def open_or_create(self) -> Path:
        """Create the data directory and an empty task file if missing.

        Raises
        ------
        StorageError
            When the directory or file cannot be created or opened for
            reading and writing.
        """
        path = self.path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if not path.exists():
                logger.debug("Creating empty task file at %s", path)
                path.touch()
            with path.open("r+", encoding="utf-8"):
                pass
        except OSError as exc:
            raise StorageError(
                f"Cannot open task file {path}: {exc.strerror or exc}",
                hint=_PERMISSION_HINT,
            ) from exc
        return path

    def load(self) -> TaskList:
        """Read the task document, substituting an empty list when unusable."""
        path = self.path
        try:
            raw_text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No task file at %s; starting empty", path)
            return TaskList()
        except UnicodeDecodeError as exc:
            logger.debug("Discarding undecodable task file %s: %s", path, exc)
            return TaskList()
        except OSError as exc:
            raise StorageError(
                f"Cannot read task file {path}: {exc.strerror or exc}",
                hint=_PERMISSION_HINT,
            ) from exc

        if not raw_text.strip():
            return TaskList()

        try:
            task_list = TaskList.from_dict(json.loads(raw_text))
        except (json.JSONDecodeError, MalformedTaskDataError, RecursionError) as exc:
            logger.debug("Discarding malformed task file %s: %s", path, exc)
            return TaskList()

        logger.debug("Loaded %d task(s) from %s", len(task_list), path)
        return task_list

    def save(self, task_list: TaskList) -> None:
        """Atomically replace the task document with *task_list*.

        Raises
        ------
        StorageError
            When serialisation, the temporary write, or the rename fails.
        """
        path = self.path
        try:
            payload = json.dumps(task_list.to_dict())
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Cannot serialise tasks: {exc}") from exc

        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(
                f"Cannot write task file {path}: {exc.strerror or exc}",
                hint=_PERMISSION_HINT,
            ) from exc

        logger.debug("Saved %d task(s) to %s", len(task_list), path)
