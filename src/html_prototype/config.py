from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PrototypeConfig:
	"""
	Defaults used by the helper object when an option is not given.

	Attributes:
	    script_type (str): `type` attribute of generated script blocks.
	    periodic_frequency (float): Seconds between periodic remote calls.
	    observer_frequency (float): Seconds between field/form observer polls.
	    drop_hoverclass (str): CSS class set on a droppable while hovered.
	    autocomplete_suffix (str): Suffix for the default autocomplete target.
	    form_method (str): `method` attribute of remote forms.
	"""

	script_type: str = "text/javascript"
	"""`type` attribute of generated script blocks."""

	periodic_frequency: float = 10
	"""Seconds between two calls of `periodically_call_remote`."""

	observer_frequency: float = 2
	"""Seconds between two polls of a field or form observer."""

	drop_hoverclass: str = "hover"
	"""Droppables need a hover class to react to draggables."""

	autocomplete_suffix: str = "_auto_complete"
	"""Appended to the field id to build the default autocomplete target."""

	form_method: str = "post"
	"""`method` attribute of forms built by `form_remote_tag`."""


DEFAULT_CONFIG = PrototypeConfig()
