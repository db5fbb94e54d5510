"""script.aculo.us expressions: visual effects and drag and drop."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from html_prototype.ajax import remote_function
from html_prototype.js import options_for_javascript, quote, ucfirst
from html_prototype.options import split_ajax_options, with_default

DEFAULT_DROP_WITH = "'id=' + encodeURIComponent(element.id)"


def visual_effect(
	name: str, element_id: str, js_options: Mapping[str, Any] | None = None
) -> str:
	"""`visual_effect("highlight", "posts")` -> `new Effect.Highlight( 'posts', {} );`"""
	options = options_for_javascript(js_options or {})
	return f"new Effect.{ucfirst(name)}( '{element_id}', {options} );"


def draggable(element_id: str, options: Mapping[str, Any] | None = None) -> str:
	return f"new Draggable( '{element_id}', {options_for_javascript(options or {})} )"


def droppable(
	element_id: str,
	options: Mapping[str, Any] | None = None,
	*,
	hoverclass: str | None = None,
) -> str:
	"""Register a drop target that fires a remote call on drop.

	Ajax keys (url, update, with, callbacks...) build the `onDrop` handler,
	the others are passed to `Droppables.add` as they are.
	"""
	ajax, js_options = split_ajax_options(options)
	ajax = with_default(ajax, DEFAULT_DROP_WITH)
	js_options.setdefault("onDrop", f"function(element){{{remote_function(ajax)}}}")
	accept = js_options.get("accept")
	if isinstance(accept, (list, tuple)):
		js_options["accept"] = [quote(str(item)) for item in accept]
	elif accept:
		js_options["accept"] = quote(accept)
	hover = js_options.get("hoverclass") or hoverclass
	if hover:
		js_options["hoverclass"] = quote(hover)
	return f"Droppables.add( '{element_id}', {options_for_javascript(js_options)} )"


def sortable(element_id: str, options: Mapping[str, Any] | None = None) -> str:
	"""Make a list sortable, posting the new order through `onUpdate`."""
	ajax, js_options = split_ajax_options(options)
	ajax = with_default(ajax, f"Sortable.serialize('{element_id}')")
	js_options.setdefault("onUpdate", f"function () {{ {remote_function(ajax)} }}")
	return f"Sortable.create( '{element_id}', {options_for_javascript(js_options)} )"
