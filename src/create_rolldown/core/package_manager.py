"""Package-manager detection and command tables.

Maps an agent name (``npm``, ``pnpm``, ``yarn``, ``bun``, ``deno``) to
the argument vectors used to install dependencies and run scripts.
Unknown agents fall back to the ``npm`` entry.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from create_rolldown.core.constants import DEFAULT_AGENT
from create_rolldown.core.models import PkgInfo

_INSTALL_COMMANDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "npm": ("npm", "install"),
    "pnpm": ("pnpm", "install"),
    "yarn": ("yarn",),
    "bun": ("bun", "install"),
    "deno": ("deno", "install"),
})

_RUN_COMMANDS: Mapping[str, Callable[[str], tuple[str, ...]]] = MappingProxyType({
    "npm": lambda script: ("npm", "run", script),
    "pnpm": lambda script: ("pnpm", script),
    "yarn": lambda script: ("yarn", script),
    "bun": lambda script: ("bun", "run", script),
    "deno": lambda script: ("deno", "task", script),
})

SUPPORTED_AGENTS: tuple[str, ...] = tuple(_INSTALL_COMMANDS)


def pkg_from_user_agent(user_agent: str | None) -> PkgInfo | None:
    """Parse ``name/version`` from the first token of a user-agent string.

    >>> pkg_from_user_agent("pnpm/7.14.0 npm/? node/v18.12.0 darwin x64")
    PkgInfo(name='pnpm', version='7.14.0')
    >>> pkg_from_user_agent("invalid") is None
    True
    """
    if not user_agent:
        return None
    pkg_spec = user_agent.split(" ")[0]
    parts = pkg_spec.split("/")
    if len(parts) != 2:
        return None
    name, version = parts
    return PkgInfo(name=name, version=version)


def detect_package_manager(user_agent: str | None) -> str:
    """Return the agent name from *user_agent*, or ``"npm"``."""
    info = pkg_from_user_agent(user_agent)
    if info is None or not info.name:
        return DEFAULT_AGENT
    return info.name


def get_install_command(agent: str) -> list[str]:
    """Return the dependency-install command for *agent*."""
    command = _INSTALL_COMMANDS.get(agent, _INSTALL_COMMANDS[DEFAULT_AGENT])
    return list(command)


def get_run_command(agent: str, script: str) -> list[str]:
    """Return the command that runs package script *script* with *agent*."""
    build = _RUN_COMMANDS.get(agent, _RUN_COMMANDS[DEFAULT_AGENT])
    return list(build(script))
