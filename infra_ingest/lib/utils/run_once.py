from functools import wraps
from typing import Callable

_unset = object()


def run_once(func: Callable) -> Callable:
    """
    Cache the first result of ``func`` and hand it back on every later call, whatever the arguments.

    Used for values that are fixed for the lifetime of a Pulumi program (the sysenv name, a module's config type).

    :param func: The decorated function
    """
    cached = _unset

    @wraps(func)
    def wrapper(*args, **kwargs):
        nonlocal cached

        if cached is _unset:
            cached = func(*args, **kwargs)

        return cached

    return wrapper
