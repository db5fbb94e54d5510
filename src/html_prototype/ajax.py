"""Builders for the `Ajax.Request` / `Ajax.Updater` expressions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from html_prototype.js import escape_javascript, options_for_javascript, ucfirst
from html_prototype.options import AjaxOptions, is_asynchronous

logger = logging.getLogger(__name__)

AjaxOptionsLike = AjaxOptions | Mapping[str, Any]


def callback_name(phase: str) -> str:
	"""`complete` -> `onComplete`."""
	return "on" + ucfirst(phase)


def build_callbacks(options: AjaxOptions) -> dict[str, str]:
	"""Wrap each callback snippet in a function taking the request."""
	return {
		callback_name(phase): f"function(request){{{code}}}"
		for phase, code in options.callbacks().items()
	}


def ajax_options(options: AjaxOptions) -> dict[str, Any]:
	"""Collect the entries of the options object passed to Ajax.Request."""
	js_options: dict[str, Any] = build_callbacks(options)
	js_options["asynchronous"] = 1 if is_asynchronous(options) else 0
	if options.method:
		js_options["method"] = options.method
	if options.position:
		js_options["insertion"] = f"Insertion.{ucfirst(options.position)}"
	if options.form:
		js_options["parameters"] = "Form.serialize(this)"
	elif options.with_:
		js_options["parameters"] = options.with_
	return js_options


def options_for_ajax(options: AjaxOptionsLike) -> str:
	return options_for_javascript(ajax_options(AjaxOptions.coerce(options)))


def remote_function(options: AjaxOptionsLike) -> str:
	"""Return the JavaScript expression that fires the remote call.

	`before` and `after` surround the constructor call. `condition` and then
	`confirm` wrap everything, so a failed guard skips `before`/`after` too.
	"""
	opts = AjaxOptions.coerce(options)
	js_options = options_for_ajax(opts)
	url = opts.url or ""
	if opts.update:
		logger.debug("Remote call to %r updates %r", url, opts.update)
		function = f"new Ajax.Updater( '{opts.update}', '{url}', {js_options} )"
	else:
		logger.debug("Remote call to %r", url)
		function = f"new Ajax.Request( '{url}', {js_options} )"

	if opts.before:
		function = f"{opts.before}; {function}"
	if opts.after:
		function = f"{function}; {opts.after};"
	if opts.condition:
		function = f"if ({opts.condition}) {{ {function}; }}"
	if opts.confirm:
		function = (
			f"if (confirm('{escape_javascript(opts.confirm)}')) {{ {function}; }}"
		)
	return function
