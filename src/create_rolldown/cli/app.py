"""CLI application entry point for create-rolldown.

This module is the **sole error boundary** for the entire application.
It catches :class:`~create_rolldown.exceptions.CreateRolldownError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — the flow lives in
  :mod:`create_rolldown.cli.scaffold`, decisions in ``core`` and side
  effects in ``infra``.
* This module is the only place that translates between the domain
  world and the OS process exit code.
* In test mode (``_ROLLDOWN_TEST_CLI``) the process is never exited.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from create_rolldown.cli import exit_codes
from create_rolldown.cli.args import (
    PROG,
    display_help,
    display_version,
    is_terminal,
    parse_arguments,
    should_use_interactive_mode,
)
from create_rolldown.cli.banner import print_banner
from create_rolldown.cli.console import console, escape
from create_rolldown.core.protocols import CommandRunner, Prompter
from create_rolldown.exceptions import CreateRolldownError, UserCancelled
from create_rolldown.settings import Settings


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    prompter: Prompter | None = None,
    runner: CommandRunner | None = None,
    cwd: Path | None = None,
) -> int:
    """Run the create-rolldown CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    settings:
        Environment snapshot; read from ``os.environ`` when ``None``.
    prompter, runner:
        Collaborators for prompts and child processes.  Default to the
        questionary prompter and a subprocess runner that is a no-op in
        test mode.
    cwd:
        Directory the project path is resolved against.

    Returns
    -------
    int
        OS process exit code.
    """
    env = Settings.from_env() if settings is None else settings

    print_banner(env)

    options = parse_arguments(argv)
    if options.help.resolve(default=False):
        display_help()
        return exit_codes.SUCCESS
    if options.version.resolve(default=False):
        display_version()
        return exit_codes.SUCCESS

    interactive = should_use_interactive_mode(options, settings=env)

    if not interactive and not is_terminal(sys.stdout):
        console.print("\n[yellow]Detected non-interactive environment (AI agent or CI/CD).[/yellow]")
        console.print(
            f"[yellow]For best results, use: {PROG} <project-name> "
            "--template <template> --no-interactive[/yellow]\n"
        )

    if prompter is None:
        from create_rolldown.cli.prompts import QuestionaryPrompter

        prompter = QuestionaryPrompter()
    if runner is None:
        from create_rolldown.infra.command_runner import SubprocessRunner

        runner = SubprocessRunner(dry_run=env.test_mode)

    from create_rolldown.cli.scaffold import run_scaffold

    try:
        return run_scaffold(
            options,
            interactive=interactive,
            prompter=prompter,
            runner=runner,
            settings=env,
            cwd=cwd,
        )
    except UserCancelled as exc:
        console.print(f"\n[red]{escape(str(exc))}[/red]")
        return exit_codes.CANCELLED


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _exit(code: int, settings: Settings) -> None:
    if settings.test_mode:
        return
    sys.exit(code)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    settings = Settings.from_env()
    try:
        code = main(settings=settings)
    except CreateRolldownError as exc:
        console.error(f"\n[bold red]✗ Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.error(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        code = exit_codes.GENERAL_ERROR
    except KeyboardInterrupt:
        console.print("\n[red]Operation cancelled[/red]")
        code = exit_codes.CANCELLED
    except Exception as exc:  # noqa: BLE001
        console.error(
            "\n[bold red]✗ An unexpected error occurred:[/bold red] "
            f"{escape(f'{type(exc).__name__}: {exc}')}"
        )
        code = exit_codes.UNEXPECTED_ERROR
    _exit(code, settings)
