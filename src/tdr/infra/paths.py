"""Infrastructure: per-OS data directory resolution and storage config.

The base directory is a pure function of the operating system and the
current username.  It is resolved once at startup into a
:class:`StorageConfig`, which is then passed explicitly to everything
that touches the filesystem.

Rules
-----
* No filesystem access here — resolution only.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import getpass
import os
import platform
from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

APP_DIR_NAME: str = "tdr"
"""Directory name used on every platform (dot-prefixed outside Windows)."""

TASKS_FILENAME: str = "tasks.json"


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def base_dir_for(system: str, username: str, user_profile: str | None = None) -> PurePath:
    """Return the data directory for *system* and *username*.

    * Windows — ``%UserProfile%\\AppData\\Local\\tdr``, falling back to
      ``C:\\Users\\<username>`` when ``USERPROFILE`` is unset.
    * Everything else — ``/home/<username>/.tdr``.
    """
    if system.lower() == "windows":
        profile = user_profile or f"C:\\Users\\{username}"
        return PureWindowsPath(profile, "AppData", "Local", APP_DIR_NAME)
    return PurePosixPath("/home", username, f".{APP_DIR_NAME}")


def resolve_path() -> Path:
    """Return the data directory for the current OS and user."""
    return Path(
        base_dir_for(
            platform.system(),
            getpass.getuser(),
            os.environ.get("USERPROFILE"),
        )
    )


# ---------------------------------------------------------------------------
# Configuration value
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Where the task document lives.

    Attributes
    ----------
    data_dir : Path
        Directory holding the task file; created on first use.
    filename : str
        Name of the JSON document inside *data_dir*.
    """

    data_dir: Path
    filename: str = TASKS_FILENAME

    @property
    def file_path(self) -> Path:
        return self.data_dir / self.filename

    @classmethod
    def default(cls) -> StorageConfig:
        """Build the configuration from :func:`resolve_path`."""
        return cls(data_dir=resolve_path())
