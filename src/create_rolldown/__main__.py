"""Allow ``python -m create_rolldown`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m create_rolldown`` behaves identically to the
``create-rolldown`` console script.
"""

from __future__ import annotations

from create_rolldown.cli.app import cli

if __name__ == "__main__":
    cli()
