"""Option structures and the defaults applied to them before serialization."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, Literal, TypeAlias

from html_prototype.errors import InvalidOptionsError

logger = logging.getLogger(__name__)

Callback: TypeAlias = Literal[
	"uninitialized", "loading", "loaded", "interactive", "complete"
]
Position: TypeAlias = Literal["before", "top", "bottom", "after"]

# Lifecycle phases of an Ajax.Request, in the order the browser reaches them
CALLBACKS: Final[tuple[Callback, ...]] = (
	"uninitialized",
	"loading",
	"loaded",
	"interactive",
	"complete",
)

# Mapping keys whose Python field name differs
_FIELD_ALIASES: Final[dict[str, str]] = {"with": "with_"}
_ALIASED_FIELDS: Final[frozenset[str]] = frozenset(_FIELD_ALIASES.values())
_FALSE_STRINGS: Final[frozenset[str]] = frozenset({"", "0", "false", "no", "off"})


def _flag(value: Any) -> bool:
	"""Template values often arrive as strings, so `"0"` is false."""
	if isinstance(value, str):
		return value.strip().lower() not in _FALSE_STRINGS
	return bool(value)


@dataclass(frozen=True, slots=True)
class AjaxOptions:
	"""Options of one remote call.

	Every value except `form` is JavaScript source text (or a plain URL / DOM
	id) and is copied into the output without validation.
	"""

	url: str | None = None
	update: str | None = None
	position: str | None = None
	method: str | None = None
	type: str | None = None
	form: bool = False
	with_: str | None = None
	before: str | None = None
	after: str | None = None
	condition: str | None = None
	confirm: str | None = None
	uninitialized: str | None = None
	loading: str | None = None
	loaded: str | None = None
	interactive: str | None = None
	complete: str | None = None
	frequency: float | None = None
	"""Seconds between polls, for observers and periodic calls only."""

	@classmethod
	def coerce(cls, value: AjaxOptions | Mapping[str, Any] | None) -> AjaxOptions:
		"""Build options from a plain mapping, as used by templates."""
		if value is None:
			return cls()
		if isinstance(value, AjaxOptions):
			return value
		if not isinstance(value, Mapping):
			raise InvalidOptionsError(value)
		kwargs: dict[str, Any] = {}
		for key, item in value.items():
			name = _FIELD_ALIASES.get(key, key)
			if key in _ALIASED_FIELDS or name not in _FIELD_NAMES:
				logger.debug("Ignoring unknown Ajax option %r", key)
				continue
			kwargs[name] = _flag(item) if name == "form" else item
		return cls(**kwargs)

	def replace(self, **changes: Any) -> AjaxOptions:
		return dataclasses.replace(self, **changes)

	def callbacks(self) -> dict[Callback, str]:
		"""Return the callback snippets that are set, in lifecycle order."""
		found: dict[Callback, str] = {}
		for name in CALLBACKS:
			code = getattr(self, name)
			if code:
				found[name] = code
		return found


_FIELD_NAMES: Final[frozenset[str]] = frozenset(
	f.name for f in dataclasses.fields(AjaxOptions)
)

# Keys understood by AjaxOptions when given as a mapping
AJAX_OPTION_KEYS: Final[frozenset[str]] = frozenset(
	{"with"} | (_FIELD_NAMES - _ALIASED_FIELDS - {"frequency"})
)


def split_ajax_options(
	options: Mapping[str, Any] | None,
) -> tuple[AjaxOptions, dict[str, Any]]:
	"""Separate Ajax keys from the remaining (widget) options."""
	ajax: dict[str, Any] = {}
	rest: dict[str, Any] = {}
	for key, value in (options or {}).items():
		if key in AJAX_OPTION_KEYS:
			ajax[key] = value
		else:
			rest[key] = value
	return AjaxOptions.coerce(ajax), rest


def with_value_default(options: AjaxOptions) -> AjaxOptions:
	"""Default `with` to `value` when an update target is set."""
	if options.update and not options.with_:
		return options.replace(with_="value")
	return options


def with_default(options: AjaxOptions, expression: str) -> AjaxOptions:
	"""Default `with` to the given expression."""
	if options.with_:
		return options
	return options.replace(with_=expression)


def resolve_frequency(frequency: Any, default: float) -> Any:
	"""Return the given frequency, or the default if it is missing or zero."""
	return frequency or default


def is_asynchronous(options: AjaxOptions) -> bool:
	return options.type != "synchronous"
