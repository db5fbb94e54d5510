"""
HTML and JavaScript helpers for the Prototype and script.aculo.us libraries.

Every method returns a string meant to be dropped into a server rendered
page. Options are plain mappings (or `AjaxOptions`) whose values are
JavaScript snippets, copied into the output as they are.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from markupsafe import escape

from html_prototype import effects, html
from html_prototype.actions import ElementAction, update_element_function
from html_prototype.ajax import AjaxOptionsLike, remote_function
from html_prototype.config import DEFAULT_CONFIG, PrototypeConfig
from html_prototype.js import options_for_javascript, quote
from html_prototype.library import prototype_js
from html_prototype.options import (
	AjaxOptions,
	resolve_frequency,
	with_default,
	with_value_default,
)
from html_prototype.templates import (
	AUTOCOMPLETE_STYLESHEET,
	AUTOCOMPLETER_TEMPLATE,
	OBSERVER_TEMPLATE,
	PERIODICAL_EXECUTER_TEMPLATE,
	SCRIPT_TEMPLATE,
)

HtmlOptions = Mapping[str, Any]


class Prototype:
	"""Generates HTML and JavaScript for the Prototype library.

	Holds no state besides its configuration, so one instance can be shared
	by every template of an application.
	"""

	config: PrototypeConfig

	def __init__(self, config: PrototypeConfig | None = None) -> None:
		self.config = config or DEFAULT_CONFIG

	# ------------------------------------------------------------------
	# Plain HTML
	# ------------------------------------------------------------------

	def tag(
		self, name: str, html_options: HtmlOptions | None = None, open: bool = False
	) -> str:
		return html.tag(name, html_options, open=open)

	def content_tag(
		self, name: str, content: str, html_options: HtmlOptions | None = None
	) -> str:
		return html.content_tag(name, content, html_options)

	def javascript_tag(
		self, content: str, html_options: HtmlOptions | None = None
	) -> str:
		"""Wrap JavaScript in a script block."""
		attrs = html.merge_attrs({"type": self.config.script_type}, html_options)
		return SCRIPT_TEMPLATE.render(attrs=html.attributes(attrs), content=content)

	def define_javascript_functions(self) -> str:
		"""Return the bundled Prototype library inside a script block."""
		return self.javascript_tag(prototype_js())

	# ------------------------------------------------------------------
	# Links and forms
	# ------------------------------------------------------------------

	def link_to_function(
		self, name: str, function: str, html_options: HtmlOptions | None = None
	) -> str:
		"""A link that runs `function` on click and cancels the navigation."""
		attrs = html.merge_attrs(
			{"href": "#", "onclick": f"{function}; return false"}, html_options
		)
		return html.content_tag("a", name, attrs)

	def link_to_remote(
		self,
		name: str,
		options: AjaxOptionsLike,
		html_options: HtmlOptions | None = None,
	) -> str:
		"""A link that fires a remote call in the background.

		The response can update the element named by the `update` option.
		"""
		return self.link_to_function(name, remote_function(options), html_options)

	def form_remote_tag(
		self, options: AjaxOptionsLike, html_options: HtmlOptions | None = None
	) -> str:
		"""Open a form that submits its serialized fields through Ajax."""
		opts = AjaxOptions.coerce(options).replace(form=True)
		attrs = html.merge_attrs(
			{"action": opts.url or "#", "method": self.config.form_method},
			html_options,
		)
		attrs["onsubmit"] = f"{remote_function(opts)}; return false"
		return html.tag("form", attrs, open=True)

	def submit_to_remote(
		self,
		name: str,
		value: str,
		options: AjaxOptionsLike,
		html_options: HtmlOptions | None = None,
	) -> str:
		"""A button that submits its enclosing form through Ajax."""
		opts = with_default(
			AjaxOptions.coerce(options), "Form.serialize(this.form)"
		)
		attrs = dict(html_options or {})
		attrs["onclick"] = f"{remote_function(opts)}; return false"
		attrs["type"] = "button"
		attrs["name"] = name
		attrs["value"] = value
		return html.tag("input", attrs)

	# ------------------------------------------------------------------
	# Remote calls
	# ------------------------------------------------------------------

	def remote_function(self, options: AjaxOptionsLike) -> str:
		return remote_function(options)

	def evaluate_remote_response(self) -> str:
		"""Callback body that evaluates a response built from update_element_function."""
		return "eval(request.responseText)"

	def periodically_call_remote(
		self, options: AjaxOptionsLike, html_options: HtmlOptions | None = None
	) -> str:
		opts = AjaxOptions.coerce(options)
		frequency = resolve_frequency(opts.frequency, self.config.periodic_frequency)
		code = PERIODICAL_EXECUTER_TEMPLATE.render(
			code=remote_function(opts), frequency=frequency
		)
		return self.javascript_tag(code, html_options)

	def observe_field(self, element_id: str, options: AjaxOptionsLike) -> str:
		"""Fire a remote call whenever the field's value changes.

		`with` defaults to `value` (the new field value) when `update` is set.
		"""
		return self._build_observer("Form.Element.Observer", element_id, options)

	def observe_form(self, element_id: str, options: AjaxOptionsLike) -> str:
		"""Like observe_field, for every field of the form `element_id`."""
		return self._build_observer("Form.Observer", element_id, options)

	def _build_observer(
		self, klass: str, element_id: str, options: AjaxOptionsLike
	) -> str:
		opts = with_value_default(AjaxOptions.coerce(options))
		frequency = resolve_frequency(opts.frequency, self.config.observer_frequency)
		code = OBSERVER_TEMPLATE.render(
			klass=klass,
			element_id=element_id,
			frequency=frequency,
			callback=remote_function(opts),
		)
		return self.javascript_tag(code)

	# ------------------------------------------------------------------
	# Autocompletion
	# ------------------------------------------------------------------

	def auto_complete_field(
		self, field_id: str, options: Mapping[str, Any] | None = None
	) -> str:
		"""Attach an Ajax autocompleter to a text field.

		Recognized options: `url` (required), `update` (defaults to the field
		id plus `_auto_complete`), `with` and `indicator`.
		"""
		options = options or {}
		suffix = self.config.autocomplete_suffix
		update = options.get("update") or f"{field_id}{suffix}"
		js_options: dict[str, Any] = {}
		if options.get("with"):
			js_options["callback"] = (
				f"function ( element, value ) {{ return {options['with']} }}"
			)
		if options.get("indicator"):
			js_options["indicator"] = quote(options["indicator"])
		code = AUTOCOMPLETER_TEMPLATE.render(
			field_id=field_id,
			update=update,
			url=options.get("url") or "",
			options=options_for_javascript(js_options),
		)
		return self.javascript_tag(code)

	def auto_complete_result(self, items: Iterable[Any]) -> str:
		"""The `<ul>` list an autocompleter expects as its response."""
		entries = "".join(
			html.content_tag("li", str(escape(item))) for item in items
		)
		return html.content_tag("ul", entries)

	def auto_complete_stylesheet(self) -> str:
		return html.content_tag("style", AUTOCOMPLETE_STYLESHEET)

	# ------------------------------------------------------------------
	# script.aculo.us
	# ------------------------------------------------------------------

	def draggable_element(
		self, element_id: str, options: Mapping[str, Any] | None = None
	) -> str:
		return self.javascript_tag(effects.draggable(element_id, options))

	def drop_receiving_element(
		self, element_id: str, options: Mapping[str, Any] | None = None
	) -> str:
		"""Make an element accept draggables and call `url` on drop.

		The remote call gets the dropped element's id as parameter by default.
		"""
		code = effects.droppable(
			element_id, options, hoverclass=self.config.drop_hoverclass
		)
		return self.javascript_tag(code)

	def sortable_element(
		self, element_id: str, options: Mapping[str, Any] | None = None
	) -> str:
		"""Make a list sortable, posting the serialized order to `url`."""
		return self.javascript_tag(effects.sortable(element_id, options))

	def visual_effect(
		self, name: str, element_id: str, js_options: Mapping[str, Any] | None = None
	) -> str:
		return effects.visual_effect(name, element_id, js_options)

	def update_element_function(
		self,
		element_id: str,
		content: str = "",
		*,
		action: str | ElementAction = "update",
		position: str | None = None,
		binding: str | None = None,
		content_fn: Callable[[], str] | None = None,
	) -> str:
		return update_element_function(
			element_id,
			content,
			action=action,
			position=position,
			binding=binding,
			content_fn=content_fn,
		)
