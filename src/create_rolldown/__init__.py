"""create-rolldown — scaffolding tool for Rolldown library projects.

Copies a bundled template tree into a new project directory and
rewrites its package name and page title.
"""

from create_rolldown.version import __version__

__all__: list[str] = ["__version__"]
