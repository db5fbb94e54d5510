"""Small helpers to produce JavaScript source text."""

import re
from collections.abc import Mapping
from typing import Any

from html_prototype.errors import InvalidOptionsError

_JS_ESCAPES = {
	"\\": "\\\\",
	"</": "<\\/",
	"\r\n": "\\n",
	"\n": "\\n",
	"\r": "\\n",
	'"': '\\"',
	"'": "\\'",
}
_JS_ESCAPE_RE = re.compile(r"(\\|</|\r\n|[\n\r\"'])")


def ucfirst(value: str) -> str:
	"""Uppercase the first character, leaving the rest untouched."""
	return value[:1].upper() + value[1:]


def escape_javascript(value: str) -> str:
	"""Escape text so it can sit inside a single or double quoted JS string."""
	return _JS_ESCAPE_RE.sub(lambda m: _JS_ESCAPES[m.group(0)], value)


def quote(value: str) -> str:
	"""Wrap a raw value in single quotes. The value is not escaped."""
	return f"'{value}'"


def js_value(value: Any) -> str:
	"""Render a Python value as JavaScript source.

	Strings are taken as JavaScript expressions and copied verbatim. Lists and
	mappings are rendered recursively.
	"""
	if value is None:
		return "null"
	if isinstance(value, bool):
		return "true" if value else "false"
	if isinstance(value, (str, int, float)):
		return str(value)
	if isinstance(value, (list, tuple)):
		return "[" + ", ".join(js_value(item) for item in value) + "]"
	if isinstance(value, Mapping):
		return options_for_javascript(value)
	raise InvalidOptionsError(
		value, f"Cannot render {type(value).__name__} as JavaScript"
	)


def options_for_javascript(options: Mapping[str, Any]) -> str:
	"""Render a mapping of JavaScript expressions as an object literal.

	Keys are sorted so the same options always give the same text.
	`None` values are left out.
	"""
	pairs = [
		f"{key}: {js_value(value)}"
		for key, value in sorted(options.items())
		if value is not None
	]
	if not pairs:
		return "{}"
	return "{ " + ", ".join(pairs) + " }"
