from typing import Any, TypeVar

ConfigType = TypeVar("ConfigType")
"""A module's config dataclass, mapped from the stack configuration"""

ExportsType = Any
"""Whatever a module's ``build`` returns, usually a dataclass of ``Output`` values"""
