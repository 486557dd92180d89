"""Runtime settings derived from the process environment.

This is the only module that reads environment variables.  Everything
else receives a :class:`Settings` instance, which keeps mode detection
and package-manager selection deterministic under test.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

TEST_MODE_VAR: str = "_ROLLDOWN_TEST_CLI"
"""When set (to any non-empty value), child processes and ``sys.exit`` are skipped."""

USER_AGENT_VAR: str = "npm_config_user_agent"
"""Set by npm, pnpm, yarn, bun and deno when they launch an initializer."""


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable snapshot of the environment consulted by the CLI.

    Attributes
    ----------
    ci : bool
        ``CI`` equals ``"true"``.
    continuous_integration : bool
        ``CONTINUOUS_INTEGRATION`` equals ``"true"``.
    user_agent : str | None
        Raw package-manager user-agent string, if any.
    test_mode : bool
        Suppresses child-process execution and process exit calls.
    term : str | None
        Value of ``TERM``; ``"dumb"`` disables the coloured banner.
    """

    ci: bool = False
    continuous_integration: bool = False
    user_agent: str | None = None
    test_mode: bool = False
    term: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        return cls(
            ci=env.get("CI") == "true",
            continuous_integration=env.get("CONTINUOUS_INTEGRATION") == "true",
            user_agent=env.get(USER_AGENT_VAR) or None,
            test_mode=bool(env.get(TEST_MODE_VAR)),
            term=env.get("TERM"),
        )

    @property
    def is_ci(self) -> bool:
        """Whether either continuous-integration indicator is set."""
        return self.ci or self.continuous_integration
