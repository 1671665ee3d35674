"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``, error reporting) keep working even when
Rich is not installed.
"""

from __future__ import annotations

import contextlib
import re
import sys
from collections.abc import Iterator
from typing import Any

from create_index_app.exceptions import CreateIndexAppError

_MARKUP_RE = re.compile(r"(?<!\\)\[/?[a-z #]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``CreateIndexAppError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise CreateIndexAppError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, highlight=False)


def escape(text: object) -> str:
	"""Escape *text* so Rich prints square brackets literally."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return str(text).replace("[", "\\[")
	return rich_escape(str(text))


def strip_markup(text: str) -> str:
	"""Remove Rich ``[style]...[/style]`` tags for plain output.

	Escaped brackets (``\\[``) are kept and unescaped.
	"""
	return _MARKUP_RE.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with plain-text fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except CreateIndexAppError:
			plain = [strip_markup(o) if isinstance(o, str) else o for o in objects]
			print(*plain, file=sys.stderr)
			return
		rich_console.print(*objects)

	@contextlib.contextmanager
	def status(self, message: str) -> Iterator[None]:
		"""Show a spinner with *message* while the block runs."""
		try:
			rich_console = get_rich_console()
		except CreateIndexAppError:
			print(strip_markup(message), file=sys.stderr)
			yield
			return
		with rich_console.status(message):
			yield


console = _ConsoleProxy()
