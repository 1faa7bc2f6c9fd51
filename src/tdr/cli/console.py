"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
every command keeps working — in plain text — when Rich is not
installed.

Two proxies are exported: :data:`console` writes command results to
stdout, :data:`err_console` writes diagnostics to stderr.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from tdr.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"(\\?)(\[/?(?:bold|dim|red|green|yellow|cyan)(?: (?:bold|dim|red|green|yellow|cyan))*\])")


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
	"""Create a Rich console that prints text as-is (no wrap, highlight or emoji)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False, emoji=False, soft_wrap=True)


def escape_markup(text: str) -> str:
	"""Escape *text* for a markup-enabled print.

	Without Rich, only the style tags :func:`strip_markup` would remove are
	escaped, with the same backslash Rich uses.
	"""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return _MARKUP_TAG.sub(lambda m: "\\" + m.group(2), text)
	return escape(text)


def strip_markup(text: str) -> str:
	"""Remove the Rich style tags this package emits from *text*.

	Backslash-escaped tags are kept as literal text.
	"""
	return _MARKUP_TAG.sub(lambda m: m.group(2) if m.group(1) else "", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain ``print``.

		Pass ``markup=False`` for user-supplied text so that brackets
		(``[x] buy milk``) are printed verbatim.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			stream = sys.stderr if self._stderr else sys.stdout
			if markup:
				objects = tuple(strip_markup(str(obj)) for obj in objects)
			print(*objects, file=stream)
			return
		rich_console.print(*objects, markup=markup)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
