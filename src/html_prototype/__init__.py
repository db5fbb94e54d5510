from .actions import ElementAction, Empty, Remove, Update, update_element_function
from .ajax import build_callbacks, options_for_ajax, remote_function
from .config import PrototypeConfig
from .effects import visual_effect
from .errors import InvalidActionError, InvalidOptionsError, PrototypeError
from .helpers import Prototype
from .js import escape_javascript, options_for_javascript
from .library import prototype_js
from .options import CALLBACKS, AjaxOptions
from .version import __version__

# Shared helper with the default configuration
prototype = Prototype()
