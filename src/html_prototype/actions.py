from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from html_prototype.errors import InvalidActionError
from html_prototype.js import escape_javascript, ucfirst
from html_prototype.options import Position


@dataclass(frozen=True, slots=True)
class Update:
	"""Replace the element content, or insert next to it when `position` is set."""

	position: Position | str | None = None


@dataclass(frozen=True, slots=True)
class Empty:
	pass


@dataclass(frozen=True, slots=True)
class Remove:
	pass


ElementAction: TypeAlias = Update | Empty | Remove


def parse_action(
	action: str | ElementAction, position: str | None = None
) -> ElementAction:
	"""Turn an action name into its variant. Raises InvalidActionError."""
	if isinstance(action, (Update, Empty, Remove)):
		return action
	if action == "update":
		return Update(position=position)
	if action == "empty":
		return Empty()
	if action == "remove":
		return Remove()
	raise InvalidActionError(action)


def update_element_function(
	element_id: str,
	content: str = "",
	*,
	action: str | ElementAction = "update",
	position: str | None = None,
	binding: str | None = None,
	content_fn: Callable[[], str] | None = None,
) -> str:
	"""Return JavaScript that updates, empties or removes a DOM element.

	`content_fn`, when given, produces the content instead of `content`.
	`binding` is extra JavaScript appended after the update statement.
	"""
	resolved = parse_action(action, position)
	if content_fn is not None:
		content = content_fn()
	content = escape_javascript(content or "")

	if isinstance(resolved, Update):
		if resolved.position:
			insertion = ucfirst(str(resolved.position))
			function = f"new Insertion.{insertion}( '{element_id}', '{content}' )"
		else:
			function = f"$('{element_id}').innerHTML = '{content}'"
	elif isinstance(resolved, Empty):
		function = f"$('{element_id}').innerHTML = ''"
	else:
		function = f"Element.remove('{element_id}')"

	function += "\n"
	if binding:
		function += binding
	return function
