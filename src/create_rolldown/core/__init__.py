"""Core layer — pure scaffolding rules and data.

Rules
-----
* No ``print()`` calls.
* No filesystem, process or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from create_rolldown.core.constants import FRAMEWORKS, TEMPLATES
from create_rolldown.core.models import (
    CLIOptions,
    Framework,
    OverwriteChoice,
    PkgInfo,
    TriState,
)
from create_rolldown.core.package_manager import (
    detect_package_manager,
    get_install_command,
    get_run_command,
    pkg_from_user_agent,
)
from create_rolldown.core.protocols import CommandRunner, Prompter
from create_rolldown.core.validation import (
    format_target_dir,
    is_valid_package_name,
    to_valid_package_name,
)

__all__: list[str] = [
    "CLIOptions",
    "CommandRunner",
    "FRAMEWORKS",
    "Framework",
    "OverwriteChoice",
    "PkgInfo",
    "Prompter",
    "TEMPLATES",
    "TriState",
    "detect_package_manager",
    "format_target_dir",
    "get_install_command",
    "get_run_command",
    "is_valid_package_name",
    "pkg_from_user_agent",
    "to_valid_package_name",
]
