"""End-to-end scaffolding flow.

Sequences argument resolution, conflict handling, template
materialization and the optional install/start step.  All decisions
are delegated to ``core`` and all side effects to ``infra``; this
module only orders them and reports progress.

Flow
----
1. Resolve the project name and the absolute target root (once).
2. Resolve a directory conflict, if any.
3. Resolve the package name, template and package manager.
4. Decide whether to install immediately.
5. Copy the template, then install and start, or print next steps.

Every failure is caught where it happens, reported, and turned into
:data:`~create_rolldown.cli.exit_codes.GENERAL_ERROR`.  Prompts may
raise :class:`~create_rolldown.exceptions.UserCancelled`, which is
left to the CLI boundary.
"""

from __future__ import annotations

import os
from pathlib import Path

from create_rolldown.cli import exit_codes
from create_rolldown.cli.console import console, escape
from create_rolldown.core.constants import (
    DEFAULT_PROJECT_NAME,
    DEFAULT_TEMPLATE,
    FRAMEWORKS,
    TEMPLATES,
)
from create_rolldown.core.models import CLIOptions, OverwriteChoice
from create_rolldown.core.package_manager import (
    detect_package_manager,
    get_install_command,
    get_run_command,
)
from create_rolldown.core.protocols import CommandRunner, Prompter
from create_rolldown.core.validation import (
    format_target_dir,
    is_valid_package_name,
    to_valid_package_name,
)
from create_rolldown.exceptions import CreateRolldownError, FilesystemError
from create_rolldown.infra.command_runner import install, start
from create_rolldown.infra.filesystem import empty_dir, is_empty
from create_rolldown.infra.template_copier import copy_template, template_dir_for
from create_rolldown.settings import Settings


# ---------------------------------------------------------------------------
# Reporting helpers
# ---------------------------------------------------------------------------

def _info(message: str) -> None:
    console.print(f"\n[cyan]{escape(message)}[/cyan]")


def _fail(headline: str, exc: BaseException) -> int:
    console.error(f"\n[red]✗ {headline}[/red]")
    console.error(f"[red]Error: {escape(str(exc))}[/red]")
    hint = getattr(exc, "hint", None)
    if hint:
        console.error(f"[yellow]Hint:[/yellow] {escape(hint)}")
    return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

def _resolve_project_name(
    options: CLIOptions,
    *,
    interactive: bool,
    prompter: Prompter,
) -> tuple[str, str]:
    """Return ``(project_name, target_dir)``."""
    target_dir = format_target_dir(options.positionals[0] if options.positionals else None)
    if interactive and not target_dir:
        project_name = prompter.project_name(DEFAULT_PROJECT_NAME)
        return project_name, format_target_dir(project_name)
    project_name = target_dir or DEFAULT_PROJECT_NAME
    return project_name, project_name


def _has_conflict(root: Path) -> bool:
    if not root.exists():
        return False
    if not root.is_dir():
        raise FilesystemError(
            f"Target path {root} exists and is not a directory.",
            hint="Choose a different project name.",
        )
    return not is_empty(root)


def _clear(root: Path, target_dir: str) -> int | None:
    """Empty *root*.  Returns an exit code on failure, else ``None``."""
    _info(f"Removing existing files in {target_dir}...")
    try:
        empty_dir(root)
    except FilesystemError as exc:
        return _fail("Failed to remove existing files", exc)
    return None


def _resolve_conflict(
    root: Path,
    target_dir: str,
    options: CLIOptions,
    *,
    interactive: bool,
    prompter: Prompter,
) -> int | None:
    """Handle a non-empty target.  Returns an exit code to stop, else ``None``."""
    if interactive:
        choice = prompter.overwrite(target_dir)
        if choice is OverwriteChoice.NO:
            console.print("\n[red]Operation cancelled[/red]")
            return exit_codes.CANCELLED
        if choice is OverwriteChoice.YES:
            return _clear(root, target_dir)
        return None

    if options.overwrite.resolve(default=False):
        return _clear(root, target_dir)

    console.print(f'\n[red]Target directory "{escape(target_dir)}" is not empty.[/red]')
    console.print(
        "[red]Use --overwrite flag to overwrite existing files, "
        "or choose a different directory.[/red]"
    )
    return exit_codes.GENERAL_ERROR


def _resolve_template(
    options: CLIOptions,
    *,
    interactive: bool,
    prompter: Prompter,
) -> str:
    template = options.template
    if interactive and not template:
        template = prompter.framework(FRAMEWORKS).name
    elif not template:
        template = DEFAULT_TEMPLATE

    if template not in TEMPLATES:
        if interactive:
            console.print(
                f'\n[yellow]"{escape(template)}" isn\'t a valid template. '
                "Please choose from below:[/yellow]\n"
            )
            template = prompter.framework(FRAMEWORKS).name
        else:
            console.print(
                f'\n[yellow]Template "{escape(template)}" not found. '
                f'Using default template "{DEFAULT_TEMPLATE}".[/yellow]\n'
            )
            template = DEFAULT_TEMPLATE
    return template


def _print_next_steps(root: Path, cwd: Path, agent: str) -> None:
    console.print("\n[cyan]Done. Now run:[/cyan]\n")
    try:
        cd_path = os.path.relpath(root, cwd)
    except ValueError:
        # Different drives on Windows.
        cd_path = str(root)
    if cd_path != ".":
        console.print(f"[cyan]  cd {escape(cd_path)}[/cyan]")
    console.print(f"[cyan]  {' '.join(get_install_command(agent))}[/cyan]")
    console.print(f"[cyan]  {' '.join(get_run_command(agent, 'dev'))}[/cyan]")
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_scaffold(
    options: CLIOptions,
    *,
    interactive: bool,
    prompter: Prompter,
    runner: CommandRunner,
    settings: Settings,
    cwd: Path | None = None,
    templates_root: Path | None = None,
) -> int:
    """Scaffold a project according to *options*.

    Parameters
    ----------
    options:
        Parsed command line.
    interactive:
        Whether *prompter* may be consulted.
    prompter:
        Interaction layer; only called when *interactive* is ``True``.
    runner:
        Executes the install and dev-server commands.
    settings:
        Environment snapshot (package-manager user agent).
    cwd:
        Directory the target is resolved against.  Defaults to the
        process working directory.
    templates_root:
        Directory holding ``template-<name>`` trees.  Defaults to the
        templates bundled with the package.

    Returns
    -------
    int
        Process exit code.
    """
    base = Path.cwd() if cwd is None else Path(cwd)

    project_name, target_dir = _resolve_project_name(
        options, interactive=interactive, prompter=prompter,
    )
    root = Path(os.path.abspath(base / target_dir))

    if _has_conflict(root):
        stop = _resolve_conflict(
            root, target_dir, options, interactive=interactive, prompter=prompter,
        )
        if stop is not None:
            return stop

    package_name = to_valid_package_name(project_name)
    if interactive and not is_valid_package_name(project_name):
        package_name = prompter.package_name(package_name)

    template = _resolve_template(options, interactive=interactive, prompter=prompter)
    agent = detect_package_manager(settings.user_agent)

    should_install = options.immediate.resolve(default=False)
    if interactive and not options.immediate.is_set:
        should_install = prompter.immediate(agent)

    console.print(f"\n[cyan]Scaffolding project in {escape(str(root))}...[/cyan]")

    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return _fail("Failed to create project directory", exc)

    try:
        copy_template(
            template_dir_for(template, templates_root),
            root,
            project_name,
            package_name,
        )
    except CreateRolldownError as exc:
        return _fail("Failed to copy template files", exc)

    console.print("\n[green]✓ Project created successfully![/green]")

    if not should_install:
        _print_next_steps(root, base, agent)
        return exit_codes.SUCCESS

    try:
        install(root, agent, runner, report=_info)
        console.print("\n[green]✓ Dependencies installed successfully![/green]")
        start(root, agent, runner, report=_info)
    except CreateRolldownError as exc:
        return _fail("Failed to install dependencies or start server", exc)

    return exit_codes.SUCCESS
