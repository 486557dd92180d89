"""Interactive prompts backed by questionary.

:class:`QuestionaryPrompter` satisfies the
:class:`~create_rolldown.core.protocols.Prompter` protocol.  Every
question returns exactly one answer; questionary returns ``None`` on
Ctrl+C / Esc, which is turned into
:class:`~create_rolldown.exceptions.UserCancelled`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from create_rolldown.core.models import Framework, OverwriteChoice
from create_rolldown.core.validation import is_valid_package_name
from create_rolldown.exceptions import EnvironmentError, UserCancelled

T = TypeVar("T")

_OVERWRITE_LABELS: dict[OverwriteChoice, str] = {
    OverwriteChoice.YES: "Remove existing files and continue",
    OverwriteChoice.NO: "Cancel operation",
    OverwriteChoice.IGNORE: "Ignore files and continue",
}


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _answer(result: T | None) -> T:
    if result is None:
        raise UserCancelled()
    return result


# ---------------------------------------------------------------------------
# Validators (pure — return True or an error message)
# ---------------------------------------------------------------------------

def validate_project_name(value: str) -> bool | str:
    """Reject blank project names."""
    if not value or not value.strip():
        return "Project name cannot be empty"
    return True


def validate_package_name(value: str) -> bool | str:
    """Reject blank or non-npm-compliant package names."""
    if not value or not value.strip():
        return "Package name cannot be empty"
    if not is_valid_package_name(value):
        return "Invalid package name (must follow npm naming conventions)"
    return True


def overwrite_message(target_dir: str) -> str:
    """Return the conflict question for *target_dir*."""
    display_dir = "Current directory" if target_dir == "." else f'Target directory "{target_dir}"'
    return f"{display_dir} is not empty. Please choose how to proceed:"


def _color_label(framework: Framework) -> list[tuple[str, str]]:
    """Render a framework label as prompt_toolkit formatted text."""
    return [(f"fg:ansi{framework.color}", framework.display)]


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------

class QuestionaryPrompter:
    """Concrete :class:`Prompter` using questionary widgets."""

    def project_name(self, default: str) -> str:
        """Ask for the project name.

        The field is pre-filled with *default*; an empty answer is
        rejected by :func:`validate_project_name`.
        """
        questionary = _import_questionary()
        result: str | None = questionary.text(
            "Project name:",
            default=default,
            validate=validate_project_name,
        ).ask()
        return _answer(result)

    def overwrite(self, target_dir: str) -> OverwriteChoice:
        questionary = _import_questionary()
        choices = [
            questionary.Choice(title=label, value=choice)
            for choice, label in _OVERWRITE_LABELS.items()
        ]
        result: OverwriteChoice | None = questionary.select(
            overwrite_message(target_dir),
            choices=choices,
            use_arrow_keys=True,
            use_shortcuts=False,
        ).ask()
        return _answer(result)

    def package_name(self, default: str) -> str:
        questionary = _import_questionary()
        result: str | None = questionary.text(
            "Package name:",
            default=default,
            validate=validate_package_name,
        ).ask()
        return _answer(result)

    def framework(self, frameworks: Sequence[Framework]) -> Framework:
        """Ask the user to pick a framework, labels coloured per registry."""
        questionary = _import_questionary()
        choices = [
            questionary.Choice(title=_color_label(framework), value=framework)
            for framework in frameworks
        ]
        result: Framework | None = questionary.select(
            "Select a framework:",
            choices=choices,
            use_arrow_keys=True,
            use_shortcuts=False,
        ).ask()
        return _answer(result)

    def immediate(self, agent: str) -> bool:
        questionary = _import_questionary()
        result: bool | None = questionary.confirm(
            f"Install dependencies and start dev server with {agent}?",
            default=False,
        ).ask()
        return _answer(result)
