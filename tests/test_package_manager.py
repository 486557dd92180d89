"""Tests for package-manager detection and command tables."""

from __future__ import annotations

import pytest

from create_rolldown.core.models import PkgInfo
from create_rolldown.core.package_manager import (
    SUPPORTED_AGENTS,
    detect_package_manager,
    get_install_command,
    get_run_command,
    pkg_from_user_agent,
)


class TestPkgFromUserAgent:
    def test_pnpm(self) -> None:
        assert pkg_from_user_agent("pnpm/7.14.0 node/v18.12.0") == PkgInfo(
            name="pnpm", version="7.14.0",
        )

    def test_full_npm_user_agent(self) -> None:
        info = pkg_from_user_agent("npm/10.2.3 node/v20.10.0 darwin arm64 workspaces/false")
        assert info is not None
        assert info.name == "npm"
        assert info.version == "10.2.3"

    @pytest.mark.parametrize("user_agent", [None, "", "invalid", "a/b/c node/v18"])
    def test_invalid_returns_none(self, user_agent: str | None) -> None:
        assert pkg_from_user_agent(user_agent) is None


class TestDetectPackageManager:
    def test_defaults_to_npm(self) -> None:
        assert detect_package_manager(None) == "npm"

    def test_reads_agent_name(self) -> None:
        assert detect_package_manager("bun/1.1.0 npm/? node/v21.6.0") == "bun"

    def test_empty_name_falls_back(self) -> None:
        assert detect_package_manager("/1.0.0") == "npm"


class TestInstallCommand:
    @pytest.mark.parametrize(
        ("agent", "expected"),
        [
            ("npm", ["npm", "install"]),
            ("pnpm", ["pnpm", "install"]),
            ("yarn", ["yarn"]),
            ("bun", ["bun", "install"]),
            ("deno", ["deno", "install"]),
        ],
    )
    def test_table(self, agent: str, expected: list[str]) -> None:
        assert get_install_command(agent) == expected

    def test_unknown_agent_uses_npm(self) -> None:
        assert get_install_command("xyz") == ["npm", "install"]

    def test_returns_fresh_list(self) -> None:
        command = get_install_command("npm")
        command.append("--force")
        assert get_install_command("npm") == ["npm", "install"]


class TestRunCommand:
    @pytest.mark.parametrize(
        ("agent", "expected"),
        [
            ("npm", ["npm", "run", "dev"]),
            ("pnpm", ["pnpm", "dev"]),
            ("yarn", ["yarn", "dev"]),
            ("bun", ["bun", "run", "dev"]),
            ("deno", ["deno", "task", "dev"]),
        ],
    )
    def test_table(self, agent: str, expected: list[str]) -> None:
        assert get_run_command(agent, "dev") == expected

    def test_unknown_agent_uses_npm(self) -> None:
        assert get_run_command("xyz", "build") == ["npm", "run", "build"]

    def test_every_supported_agent_has_both_commands(self) -> None:
        for agent in SUPPORTED_AGENTS:
            assert get_install_command(agent)[0] == agent
            assert get_run_command(agent, "dev")[0] == agent
