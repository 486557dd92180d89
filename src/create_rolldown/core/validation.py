"""Directory and package-name normalisation.

Every function here is total: bad input degrades to an empty string or
a safe default instead of raising.
"""

from __future__ import annotations

import re

_PACKAGE_NAME_RE = re.compile(
    r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$"
)
_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE_RE = re.compile(r"^[._]")
_INVALID_CHARS_RE = re.compile(r"[^a-z0-9-~]+")

FALLBACK_PACKAGE_NAME: str = "package"


def format_target_dir(target_dir: str | None) -> str:
    """Trim whitespace and trailing ``/`` separators from *target_dir*.

    ``None`` and empty input yield ``""``.  Applying the function twice
    gives the same result as applying it once.
    """
    if not target_dir:
        return ""
    formatted = target_dir.strip()
    while formatted.endswith("/"):
        formatted = formatted.rstrip("/").rstrip()
    return formatted


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` if *name* follows the npm package-name grammar."""
    return _PACKAGE_NAME_RE.fullmatch(name) is not None


def to_valid_package_name(name: str) -> str:
    """Convert an arbitrary project name into a valid npm package name.

    >>> to_valid_package_name("My Library")
    'my-library'
    >>> to_valid_package_name("!!!")
    '-'
    >>> to_valid_package_name("")
    'package'
    """
    converted = name.strip().lower()
    converted = _WHITESPACE_RE.sub("-", converted)
    converted = _LEADING_DOT_OR_UNDERSCORE_RE.sub("", converted, count=1)
    converted = _INVALID_CHARS_RE.sub("-", converted)
    return converted or FALLBACK_PACKAGE_NAME
