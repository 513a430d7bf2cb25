from __future__ import annotations

import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for ``issubclass`` checks.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_subclass_safe(candidate: object, base: object) -> bool:
    """Return whether ``candidate`` subclasses ``base`` without raising.

    Both values must be runtime classes; anything else (factory callables,
    generic aliases) is never a subtype.

    Args:
        candidate: Class expected to be the subtype.
        base: Class expected to be the supertype.

    """
    if not is_runtime_class(candidate) or not is_runtime_class(base):
        return False
    try:
        return issubclass(candidate, base)
    except TypeError:
        return False


__all__ = ["is_runtime_class", "is_subclass_safe"]
