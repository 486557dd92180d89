"""Shared pytest fixtures and configuration for the create-rolldown test suite.

Guidelines
----------
* No network access and no real package-manager processes in any test.
* Prompts are answered by :class:`ScriptedPrompter`, never a terminal.
* Filesystem work happens under ``tmp_path`` only.
* Tests must not depend on the caller's environment variables.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from create_rolldown.core.models import Framework, OverwriteChoice
from create_rolldown.exceptions import CommandExecutionError
from create_rolldown.settings import Settings

_ENV_VARS: tuple[str, ...] = (
    "CI",
    "CONTINUOUS_INTEGRATION",
    "npm_config_user_agent",
    "_ROLLDOWN_TEST_CLI",
    "TERM",
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------

class ScriptedPrompter:
    """Prompter that replays pre-recorded answers.

    Answers are keyed by prompt name.  A list answer is consumed one item
    per call.  An exception instance is raised instead of returned.
    Asking an unscripted question fails the test.
    """

    def __init__(self, **answers: Any) -> None:
        self._answers: dict[str, Any] = answers
        self.calls: list[tuple[str, Any]] = []

    def _next(self, name: str, arg: Any) -> Any:
        self.calls.append((name, arg))
        if name not in self._answers:
            raise AssertionError(f"unexpected prompt: {name}")
        answer = self._answers[name]
        if isinstance(answer, list):
            answer = answer.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    @property
    def asked(self) -> list[str]:
        return [name for name, _ in self.calls]

    def project_name(self, default: str) -> str:
        return self._next("project_name", default)

    def overwrite(self, target_dir: str) -> OverwriteChoice:
        return self._next("overwrite", target_dir)

    def package_name(self, default: str) -> str:
        return self._next("package_name", default)

    def framework(self, frameworks: Sequence[Framework]) -> Framework:
        name = self._next("framework", tuple(f.name for f in frameworks))
        return next(f for f in frameworks if f.name == name)

    def immediate(self, agent: str) -> bool:
        return self._next("immediate", agent)


class RecordingRunner:
    """CommandRunner that records commands and optionally fails one."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.commands: list[tuple[list[str], Path]] = []
        self._fail_on = fail_on

    def run(self, command: Sequence[str], *, cwd: Path) -> None:
        self.commands.append((list(command), cwd))
        if self._fail_on is not None and self._fail_on in command:
            raise CommandExecutionError(
                f"Command failed with exit code 1: {' '.join(command)}",
            )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def settings() -> Settings:
    return Settings(test_mode=True)


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def template_tree(tmp_path: Path) -> Path:
    """A small template with every file the materializer edits."""
    root = tmp_path / "template-demo"
    (root / "src").mkdir(parents=True)
    (root / "playground").mkdir()
    (root / "package.json").write_text(
        '{\n  "name": "demo-template",\n  "version": "1.2.3",\n'
        '  "description": "Demo"\n}\n',
        encoding="utf-8",
    )
    (root / "_gitignore").write_text("node_modules\ndist\n", encoding="utf-8")
    (root / "index.html").write_text(
        "<html><head><title>Old</title></head><body></body></html>\n",
        encoding="utf-8",
    )
    (root / "playground" / "index.html").write_text(
        "<html>\n<head>\n  <title>Playground</title>\n</head>\n</html>\n",
        encoding="utf-8",
    )
    (root / "src" / "index.ts").write_text("export const x = 1;\n", encoding="utf-8")
    return root
