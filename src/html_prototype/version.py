"""
Exposes `__version__`, the installed distribution version.
Falls back to the local pyproject.toml when running from a source checkout.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from pathlib import Path

__all__ = ["__version__"]

DISTRIBUTION = "html-prototype"


def _read_local_pyproject_version() -> str | None:
	# src/html_prototype/version.py -> repository root
	pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
	try:
		lines = pyproject.read_text().splitlines()
	except OSError:
		return None
	for line in lines:
		line = line.strip()
		if line.startswith("version") and "=" in line:
			rhs = line.split("=", 1)[1].strip().strip("\"'")
			if rhs:
				return rhs
	return None


def _resolve_version() -> str:
	try:
		return _pkg_version(DISTRIBUTION)
	except PackageNotFoundError:
		pass
	return _read_local_pyproject_version() or "0.0.0"


__version__: str = _resolve_version()
