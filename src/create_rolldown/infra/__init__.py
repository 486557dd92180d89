"""Infrastructure layer — filesystem and process integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~create_rolldown.exceptions.CreateRolldownError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from create_rolldown.infra.command_runner import SubprocessRunner, install, start
from create_rolldown.infra.filesystem import copy, copy_dir, empty_dir, is_empty
from create_rolldown.infra.template_copier import copy_template, template_dir_for

__all__: list[str] = [
    "SubprocessRunner",
    "copy",
    "copy_dir",
    "copy_template",
    "empty_dir",
    "install",
    "is_empty",
    "start",
    "template_dir_for",
]
