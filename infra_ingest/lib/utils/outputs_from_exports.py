from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from pulumi import Output, get_stack


def serialize_exports(val: Any) -> Any:
    """Convert dataclasses and enums in an exports object to plain values Pulumi can export"""
    if isinstance(val, Output):
        return val
    elif isinstance(val, Enum):
        return val.value
    elif isinstance(val, list):
        return [serialize_exports(v) for v in val]
    elif isinstance(val, dict):
        return {k: serialize_exports(v) for k, v in val.items()}
    elif is_dataclass(val) and not isinstance(val, type):
        return {f.name: serialize_exports(getattr(val, f.name)) for f in fields(val)}
    elif isinstance(val, type):
        raise TypeError(f"Unexpected value '{val}' of type '{type(val)}'")
    else:
        return val


def outputs_from_exports(exports: object) -> dict:
    """Generate a serializable output from a module's exports object

    Dataclasses become dicts and enums become their values. Outputs are passed through untouched.

    :param exports: A module exports object, usually a dataclass instance
    :return: The output for the module, keyed by stack name
    """
    return {
        get_stack(): serialize_exports(exports),
    }
