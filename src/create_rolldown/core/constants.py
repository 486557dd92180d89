"""Fixed registries and defaults for create-rolldown."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from create_rolldown.core.models import Framework

# All templates are TypeScript library starters (utility libraries,
# component libraries, hooks, composables).
FRAMEWORKS: tuple[Framework, ...] = (
    Framework(name="vanilla", display="Vanilla", color="yellow"),
    Framework(name="react", display="React", color="cyan"),
    Framework(name="vue", display="Vue", color="green"),
    Framework(name="solid", display="Solid", color="blue"),
    Framework(name="svelte", display="Svelte", color="red"),
)

TEMPLATES: tuple[str, ...] = tuple(framework.name for framework in FRAMEWORKS)

DEFAULT_TEMPLATE: str = "vanilla"

DEFAULT_PROJECT_NAME: str = "rolldown-project"

DEFAULT_AGENT: str = "npm"

# Files that cannot be shipped under their real name inside a package.
RENAME_FILES: Mapping[str, str] = MappingProxyType({
    "_gitignore": ".gitignore",
})

PRESERVED_ENTRY: str = ".git"
"""Directory entry that survives clearing and does not make a directory non-empty."""

DEFAULT_BANNER: str = "Rolldown - Blazing Fast Rust-based bundler for JavaScript"
