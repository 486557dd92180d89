"""Tests for directory and package-name normalisation (core/validation.py).

All functions under test are pure — no filesystem, no environment.
"""

from __future__ import annotations

import pytest

from create_rolldown.core.validation import (
    FALLBACK_PACKAGE_NAME,
    format_target_dir,
    is_valid_package_name,
    to_valid_package_name,
)

_SAMPLE_STRINGS: list[str] = [
    "",
    " ",
    "/",
    "my-app",
    "  my-app  ",
    "my-app///",
    "a / ",
    "  /x/ / ",
    "nested/path/",
    "My Project",
    "My-Invalid-Package-Name",
    ".hidden",
    "_private",
    "._both",
    "..",
    "@scope/pkg",
    "foo@bar!baz",
    "~tilde",
    "UPPER_CASE.name",
    "\tTabbed\nName\t",
    "émoji 🚀 name",
    "!!!",
]


# ---------------------------------------------------------------------------
# format_target_dir
# ---------------------------------------------------------------------------

class TestFormatTargetDir:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("my-app", "my-app"),
            ("  my-app  ", "my-app"),
            ("my-app/", "my-app"),
            ("my-app///", "my-app"),
            ("  nested/path/  ", "nested/path"),
            ("a / ", "a"),
            (".", "."),
            ("", ""),
            (None, ""),
        ],
    )
    def test_formats(self, raw: str | None, expected: str) -> None:
        assert format_target_dir(raw) == expected

    @pytest.mark.parametrize("raw", _SAMPLE_STRINGS)
    def test_idempotent(self, raw: str) -> None:
        once = format_target_dir(raw)
        assert format_target_dir(once) == once

    def test_only_slashes_become_empty(self) -> None:
        assert format_target_dir("///") == ""


# ---------------------------------------------------------------------------
# is_valid_package_name
# ---------------------------------------------------------------------------

class TestIsValidPackageName:
    @pytest.mark.parametrize(
        "name",
        ["my-package", "a", "pkg.name", "pkg_name", "~tilde", "123", "@scope/pkg", "@my-org/my.lib"],
    )
    def test_valid(self, name: str) -> None:
        assert is_valid_package_name(name) is True

    @pytest.mark.parametrize(
        "name",
        ["", "My-Package", ".hidden", "_private", "has space", "@scope/", "@/pkg", "pkg!", "a/b"],
    )
    def test_invalid(self, name: str) -> None:
        assert is_valid_package_name(name) is False


# ---------------------------------------------------------------------------
# to_valid_package_name
# ---------------------------------------------------------------------------

class TestToValidPackageName:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("My-Invalid-Package-Name", "my-invalid-package-name"),
            ("My Project", "my-project"),
            ("  spaced   out  ", "spaced-out"),
            (".hidden", "hidden"),
            ("_private", "private"),
            ("foo@bar!baz", "foo-bar-baz"),
            ("@scope/pkg", "-scope-pkg"),
            ("already-valid", "already-valid"),
        ],
    )
    def test_converts(self, raw: str, expected: str) -> None:
        assert to_valid_package_name(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", ".", "_"])
    def test_empty_result_falls_back(self, raw: str) -> None:
        assert to_valid_package_name(raw) == FALLBACK_PACKAGE_NAME

    def test_only_one_leading_dot_stripped(self) -> None:
        assert to_valid_package_name("..x") == "-x"

    @pytest.mark.parametrize("raw", _SAMPLE_STRINGS)
    def test_output_is_always_valid(self, raw: str) -> None:
        assert is_valid_package_name(to_valid_package_name(raw))

    @pytest.mark.parametrize("name", ["my-package", "pkg.name", "~tilde", "a1"])
    def test_valid_names_stay_valid(self, name: str) -> None:
        assert is_valid_package_name(name)
        assert is_valid_package_name(to_valid_package_name(name))
