"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Informational output goes to stdout, errors to stderr.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from create_rolldown.exceptions import EnvironmentError

_MARKUP_RE = re.compile(
    r"\[/?(?:bold|dim|italic|red|green|yellow|blue|magenta|cyan)"
    r"(?: (?:bold|red|green|yellow|blue|magenta|cyan))*\]"
)


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout (or stderr)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False)


def escape(text: str) -> str:
	"""Escape user-supplied *text* so it is never read as markup."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


def strip_markup(text: str) -> str:
	"""Remove the style tags used in this package from *text*."""
	return _MARKUP_RE.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render to stdout with Rich when available, else plain print."""
		self._emit(objects, stderr=False)

	def error(self, *objects: object) -> None:
		"""Render to stderr with Rich when available, else plain print."""
		self._emit(objects, stderr=True)

	@staticmethod
	def _emit(objects: tuple[object, ...], *, stderr: bool) -> None:
		try:
			rich_console = get_rich_console(stderr=stderr)
		except EnvironmentError:
			plain = [strip_markup(obj) if isinstance(obj, str) else obj for obj in objects]
			print(*plain, file=sys.stderr if stderr else sys.stdout)
			return
		rich_console.print(*objects, soft_wrap=True)


console = _ConsoleProxy()
