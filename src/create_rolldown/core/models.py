"""Domain models for create-rolldown.

All records are **frozen** dataclasses — immutable value objects with
no behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Tri-state flags
# ---------------------------------------------------------------------------

class TriState(Enum):
    """A boolean CLI flag that distinguishes "unset" from "explicitly false"."""

    UNSET = "unset"
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def from_flag(cls, value: bool | None) -> TriState:
        """Map argparse's ``None`` / ``True`` / ``False`` onto a tri-state."""
        if value is None:
            return cls.UNSET
        return cls.TRUE if value else cls.FALSE

    @property
    def is_set(self) -> bool:
        return self is not TriState.UNSET

    def resolve(self, default: bool) -> bool:
        """Return the explicit value, or *default* when unset."""
        if self is TriState.UNSET:
            return default
        return self is TriState.TRUE


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CLIOptions:
    """Typed result of parsing the raw argument vector."""

    positionals: tuple[str, ...] = ()
    """Arguments not bound to a flag, in order.  The first is the target directory."""

    template: str | None = None
    """Value of ``--template`` / ``-t``; not validated at parse time."""

    help: TriState = TriState.UNSET
    version: TriState = TriState.UNSET
    overwrite: TriState = TriState.UNSET
    immediate: TriState = TriState.UNSET
    interactive: TriState = TriState.UNSET


# ---------------------------------------------------------------------------
# Framework registry entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Framework:
    """A supported framework and its template."""

    name: str
    """Identifier, also the ``template-<name>`` directory suffix."""

    display: str
    """Human-readable label."""

    color: str
    """Colour name the prompt layer renders the label in (e.g. ``"cyan"``)."""


# ---------------------------------------------------------------------------
# Package manager
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PkgInfo:
    """Package manager name and version parsed from a user-agent string."""

    name: str
    version: str


# ---------------------------------------------------------------------------
# Conflict resolution
# ---------------------------------------------------------------------------

class OverwriteChoice(str, Enum):
    """How to proceed when the target directory is not empty."""

    YES = "yes"
    """Remove existing files and continue."""

    NO = "no"
    """Cancel the operation."""

    IGNORE = "ignore"
    """Leave existing files in place and continue."""
