"""tdr — personal task tracker for the command line.

Tasks and one level of subtasks, persisted as a JSON document in a
per-user directory.
"""

from tdr.version import __version__

__all__: list[str] = ["__version__"]
