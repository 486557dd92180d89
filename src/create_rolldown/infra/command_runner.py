"""Infrastructure: package-manager process execution.

This module is the **only** place in the codebase that spawns child
processes.  Spawn failures and non-zero exits are re-raised as
:class:`~create_rolldown.exceptions.CommandExecutionError`.

In test mode (see :mod:`create_rolldown.settings`) nothing is spawned.
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from create_rolldown.core.package_manager import get_install_command, get_run_command
from create_rolldown.core.protocols import CommandRunner
from create_rolldown.exceptions import CommandExecutionError

Reporter = Callable[[str], None]
"""Callback used to announce a step to the user."""


def _noop_report(_message: str) -> None:
    return None


class SubprocessRunner:
    """Concrete :class:`CommandRunner` backed by :func:`subprocess.run`.

    Child processes inherit stdin/stdout/stderr so package-manager
    output streams straight to the terminal.

    Parameters
    ----------
    dry_run:
        When ``True``, :meth:`run` returns without spawning anything.
    """

    def __init__(self, *, dry_run: bool = False) -> None:
        self._dry_run: bool = dry_run

    def run(self, command: Sequence[str], *, cwd: Path) -> None:
        """Run *command* in *cwd*, blocking until it exits.

        Raises
        ------
        CommandExecutionError
            When the executable cannot be started or exits non-zero.
        """
        if self._dry_run:
            return

        cmd, *args = command
        display = " ".join(command)
        # Resolve .cmd/.bat shims on Windows (npm.cmd, pnpm.cmd).
        executable = shutil.which(cmd) or cmd

        try:
            result = subprocess.run([executable, *args], cwd=cwd, check=False)
        except OSError as exc:
            raise CommandExecutionError(
                f"Failed to execute command: {display}\n{exc}",
                hint=f"Make sure {cmd} is installed and on your PATH.",
            ) from exc

        if result.returncode != 0:
            raise CommandExecutionError(
                f"Command failed with exit code {result.returncode}: {display}",
            )


def install(
    root: Path,
    agent: str,
    runner: CommandRunner,
    report: Reporter = _noop_report,
) -> None:
    """Install the project's dependencies with *agent*."""
    report(f"Installing dependencies with {agent}...")
    runner.run(get_install_command(agent), cwd=root)


def start(
    root: Path,
    agent: str,
    runner: CommandRunner,
    report: Reporter = _noop_report,
) -> None:
    """Start the project's ``dev`` script with *agent*."""
    report("Starting dev server...")
    runner.run(get_run_command(agent, "dev"), cwd=root)
