"""Custom exception hierarchy for create-rolldown.

All exceptions that cross layer boundaries must inherit from
:class:`CreateRolldownError`.  Raw ``OSError`` and ``json`` failures
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
CreateRolldownError
├── InvalidArgumentsError
├── FilesystemError
├── TemplateNotFoundError
├── TemplateCopyError
├── CommandExecutionError
├── EnvironmentError
└── UserCancelled
"""

from __future__ import annotations


class CreateRolldownError(Exception):
    """Base exception for all create-rolldown errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Arguments -------------------------------------------------------------

class InvalidArgumentsError(CreateRolldownError):
    """Raised when the command line cannot be parsed."""


# --- Filesystem / templates ------------------------------------------------

class FilesystemError(CreateRolldownError):
    """Raised when copying or removing files fails.

    The message always names the offending path(s).
    """


class TemplateNotFoundError(CreateRolldownError):
    """Raised when the template directory does not exist."""


class TemplateCopyError(CreateRolldownError):
    """Raised when materializing a template into the target root fails."""


# --- External processes ----------------------------------------------------

class CommandExecutionError(CreateRolldownError):
    """Raised when a package-manager command cannot be spawned or fails."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CreateRolldownError):
    """Raised when a required runtime dependency is not available."""


# --- Cancellation ----------------------------------------------------------

class UserCancelled(CreateRolldownError):
    """Raised when the user aborts a prompt.

    Not a failure: the CLI boundary turns it into a zero exit status.
    """

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)
