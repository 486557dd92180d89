"""Protocols (interfaces) consumed by the scaffolding flow.

These define the contracts that the interactive prompt layer and the
process runner must satisfy.  The orchestrator depends ONLY on these
protocols — never on questionary or subprocess directly — so tests can
substitute a scripted responder.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from create_rolldown.core.models import Framework, OverwriteChoice


class Prompter(Protocol):
    """Contract for the interaction layer.

    Each method issues one question and returns exactly one answer.
    Implementations signal a user abort by raising
    :class:`~create_rolldown.exceptions.UserCancelled`.
    """

    def project_name(self, default: str) -> str:
        """Ask for the project name, offering *default* as the initial answer."""
        ...  # pragma: no cover

    def overwrite(self, target_dir: str) -> OverwriteChoice:
        """Ask how to handle the non-empty *target_dir*."""
        ...  # pragma: no cover

    def package_name(self, default: str) -> str:
        """Ask for a valid npm package name, suggesting *default*."""
        ...  # pragma: no cover

    def framework(self, frameworks: Sequence[Framework]) -> Framework:
        """Ask the user to pick one of *frameworks*."""
        ...  # pragma: no cover

    def immediate(self, agent: str) -> bool:
        """Ask whether to install dependencies and start the dev server."""
        ...  # pragma: no cover


class CommandRunner(Protocol):
    """Contract for external process execution."""

    def run(self, command: Sequence[str], *, cwd: Path) -> None:
        """Run *command* in *cwd* and block until it exits.

        Raises
        ------
        CommandExecutionError
            When the process cannot be spawned or exits non-zero.
        """
        ...  # pragma: no cover
