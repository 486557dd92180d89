"""Command-line argument parsing and mode detection.

Boolean flags are tri-state: absent means *unset*, the ``--no-`` form
means an explicit ``False``.  Nothing is defaulted during parsing; the
scaffolding flow decides what an unset flag means.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any, NoReturn, TextIO

from create_rolldown.cli.console import console, escape
from create_rolldown.core.constants import DEFAULT_TEMPLATE, FRAMEWORKS
from create_rolldown.core.models import CLIOptions, TriState
from create_rolldown.exceptions import InvalidArgumentsError
from create_rolldown.settings import Settings
from create_rolldown.version import __version__

PROG: str = "create-rolldown"

_TEMPLATE_DESCRIPTIONS: dict[str, str] = {
    "vanilla": "Vanilla TypeScript library",
    "react": "React library with TypeScript",
    "vue": "Vue library with TypeScript",
    "solid": "SolidJS library with TypeScript",
    "svelte": "Svelte library with TypeScript",
}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of exiting with status 2.

    Also records every option string it registers in
    :attr:`known_options`, ``--no-`` variants included.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.known_options: set[str] = set()

    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action:
        action = super().add_argument(*args, **kwargs)
        self.known_options.update(action.option_strings)
        return action

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentsError(
            message,
            hint=f"Run {PROG} --help for usage.",
        )


def _build_parser() -> _ArgumentParser:
    """Construct the argument parser.

    ``--help`` and ``--version`` are handled by the CLI entry point
    rather than argparse, so neither ever exits the process.  Prefixes
    of long options are not expanded.
    """
    parser = _ArgumentParser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("-V", "--version", action="store_const", const=True, default=None)
    parser.add_argument("-t", "--template", default=None)
    parser.add_argument("-h", "--help", action="store_const", const=True, default=None)
    parser.add_argument("--overwrite", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "-i",
        "--immediate",
        action=argparse.BooleanOptionalAction,
        default=None,
    )
    parser.add_argument("--interactive", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("positionals", nargs="*", default=[])
    return parser


def _is_known(arg: str, known_options: set[str]) -> bool:
    name = arg.split("=", 1)[0]
    if name in known_options:
        return True
    # Short flags may be grouped (-it) or carry their value (-treact).
    return not arg.startswith("--") and arg[:2] in known_options


def _drop_unknown_options(args: list[str], known_options: set[str]) -> list[str]:
    """Remove unrecognised options from *args*, with the value they bind.

    An unknown option takes the following argument as its value unless
    it uses the ``--name=value`` form or the next argument is itself an
    option.  Everything after ``--`` is kept.
    """
    kept: list[str] = []
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "--":
            kept.extend(args[index:])
            break
        if arg.startswith("-") and arg != "-" and not _is_known(arg, known_options):
            has_value = (
                "=" not in arg
                and index + 1 < len(args)
                and not args[index + 1].startswith("-")
            )
            index += 2 if has_value else 1
            continue
        kept.append(arg)
        index += 1
    return kept


def parse_arguments(argv: Sequence[str] | None = None) -> CLIOptions:
    """Parse *argv* (defaults to ``sys.argv[1:]``) into :class:`CLIOptions`.

    Unknown options are ignored together with their value, so in
    ``--foo bar app`` only ``app`` is a positional.  Positionals may
    appear before, between or after flags and keep their relative order.

    Raises
    ------
    InvalidArgumentsError
        If a flag is malformed, e.g. ``--template`` without a value.
    """
    parser = _build_parser()
    args = _drop_unknown_options(
        list(sys.argv[1:] if argv is None else argv),
        parser.known_options,
    )
    namespace, _unknown = parser.parse_known_intermixed_args(args)
    return CLIOptions(
        positionals=tuple(namespace.positionals),
        template=namespace.template,
        help=TriState.from_flag(namespace.help),
        version=TriState.from_flag(namespace.version),
        overwrite=TriState.from_flag(namespace.overwrite),
        immediate=TriState.from_flag(namespace.immediate),
        interactive=TriState.from_flag(namespace.interactive),
    )


# ---------------------------------------------------------------------------
# Help
# ---------------------------------------------------------------------------

def render_help() -> str:
    """Return the usage text: flags, available templates and examples."""
    template_lines = []
    for framework in FRAMEWORKS:
        description = _TEMPLATE_DESCRIPTIONS.get(framework.name, framework.display)
        if framework.name == DEFAULT_TEMPLATE:
            description += " (default)"
        template_lines.append(f"  {framework.name:<26}{description}")
    templates = "\n".join(template_lines)

    return f"""
Usage: {PROG} [project-name] [options]

Options:
  -t, --template <name>     Use a specific template
  -h, --help                Display this help message
  -V, --version             Display the version number
  --overwrite               Overwrite existing files in target directory
  -i, --immediate           Install dependencies and start dev server immediately
  --no-immediate            Skip dependency installation
  --interactive             Force interactive mode
  --no-interactive          Force non-interactive mode

Available templates:
{templates}

Examples:
  $ npm create rolldown
  $ npm create rolldown my-lib
  $ npm create rolldown my-lib --template react
  $ npm create rolldown my-lib -t vue --immediate
  $ npm create rolldown my-lib --no-interactive --template solid
"""


def display_help() -> None:
    """Print :func:`render_help` to stdout."""
    console.print(escape(render_help()))


def display_version() -> None:
    """Print ``create-rolldown <version>`` to stdout."""
    console.print(f"{PROG} {__version__}")


# ---------------------------------------------------------------------------
# Mode detection
# ---------------------------------------------------------------------------

def should_use_interactive_mode(
    options: CLIOptions,
    *,
    settings: Settings | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> bool:
    """Decide whether to prompt the user.

    An explicit ``--interactive`` / ``--no-interactive`` always wins.
    Otherwise prompts are used only when both stdin and stdout are
    terminals and neither ``CI`` nor ``CONTINUOUS_INTEGRATION`` is
    ``"true"``.
    """
    if options.interactive.is_set:
        return options.interactive.resolve(default=False)

    env = Settings.from_env() if settings is None else settings
    in_stream = sys.stdin if stdin is None else stdin
    out_stream = sys.stdout if stdout is None else stdout

    is_tty = is_terminal(in_stream) and is_terminal(out_stream)
    return is_tty and not env.is_ci


def is_terminal(stream: TextIO | None) -> bool:
    """Return ``True`` if *stream* is attached to an interactive terminal."""
    # sys.stdin may be None under some process launchers.
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False
