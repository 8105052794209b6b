from .naming import kebab_from_snake
from .outputs_from_exports import outputs_from_exports, serialize_exports
from .run_once import run_once
