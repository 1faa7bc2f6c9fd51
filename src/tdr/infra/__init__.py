"""Infrastructure layer — filesystem integration.

This layer resolves the per-user data directory and reads/writes the
JSON task document.  Every raw ``OSError`` must be caught here and
re-raised as a :class:`~tdr.exceptions.TdrError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from tdr.infra.json_store import JsonTaskStore
from tdr.infra.paths import StorageConfig, base_dir_for, resolve_path

__all__: list[str] = [
    "JsonTaskStore",
    "StorageConfig",
    "base_dir_for",
    "resolve_path",
]
