from __future__ import annotations


class PrototypeError(Exception):
	"""Base class for errors raised while generating Prototype helpers."""


class InvalidActionError(PrototypeError, ValueError):
	"""Raised when an element update action is not one of the known kinds."""

	action: str

	def __init__(self, action: str) -> None:
		self.action = action
		super().__init__(
			f"Invalid action {action!r}, choose one of 'update', 'empty' or 'remove'"
		)


class InvalidOptionsError(PrototypeError, TypeError):
	"""Raised when options, or an option value, have an unsupported type."""

	def __init__(self, value: object, message: str | None = None) -> None:
		super().__init__(
			message or f"Expected a mapping or AjaxOptions, got {type(value).__name__}"
		)
