"""Minimal HTML element rendering for the tag helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import escape

HtmlOptions = Mapping[str, Any]


def _emit_attrs(attrs: HtmlOptions | None, out: list[str]) -> None:
	"""Emit ` name="value"` pairs in the given order, skipping `None` values."""
	for name, value in (attrs or {}).items():
		if value is None:
			continue
		out.append(" ")
		out.append(name)
		out.append('="')
		out.append(str(escape(str(value))))
		out.append('"')


def attributes(attrs: HtmlOptions | None) -> str:
	out: list[str] = []
	_emit_attrs(attrs, out)
	return "".join(out)


def start_tag(name: str, attrs: HtmlOptions | None = None) -> str:
	"""`<form action="/x">`"""
	out: list[str] = ["<", name]
	_emit_attrs(attrs, out)
	out.append(">")
	return "".join(out)


def tag(name: str, attrs: HtmlOptions | None = None, *, open: bool = False) -> str:
	"""Return a self-closed element, or only its start tag when `open` is set."""
	if open:
		return start_tag(name, attrs)
	out: list[str] = ["<", name]
	_emit_attrs(attrs, out)
	out.append(" />")
	return "".join(out)


def content_tag(name: str, content: str, attrs: HtmlOptions | None = None) -> str:
	"""Wrap `content` in an element. The content is markup and is not escaped."""
	return f"{start_tag(name, attrs)}{content}</{name}>"


def merge_attrs(defaults: HtmlOptions, overrides: HtmlOptions | None) -> dict[str, Any]:
	"""Caller attributes win over defaults; default order is kept first."""
	merged = dict(defaults)
	if overrides:
		merged.update(overrides)
	return merged
