"""The bundled Prototype JavaScript library."""

from functools import cache
from importlib.resources import files

PROTOTYPE_VERSION = "1.2.0"
_ASSET = "assets/prototype.js"


@cache
def prototype_js() -> str:
	"""Return the library source exactly as shipped."""
	return files("html_prototype").joinpath(_ASSET).read_text(encoding="utf-8")
