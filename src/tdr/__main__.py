"""Allow ``python -m tdr`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m tdr`` behaves identically to the ``tdr`` console
script.
"""

from __future__ import annotations

from tdr.cli.app import cli

if __name__ == "__main__":
    cli()
