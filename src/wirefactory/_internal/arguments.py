from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from wirefactory._internal.resolution_context import ResolutionContext
from wirefactory.definitions import Definition, Literal, NestedRef

T = TypeVar("T")

NestedResolver = Callable[[str, ResolutionContext], T]


class ArgumentBuilder:
    """Turn a definition's argument descriptors into positional values."""

    def build(
        self,
        definition: Definition,
        context: ResolutionContext,
        resolve_nested: NestedResolver[T],
    ) -> list[T | Any]:
        """Build arguments in declaration order.

        Literal values are emitted as they are. Nested references are handed to
        ``resolve_nested`` while ``definition`` stays on the context stack. A
        failure in any nested call propagates and the partial list is dropped.

        Args:
            definition: Definition whose arguments are built.
            context: Resolution state of the current top-level request.
            resolve_nested: Callback building a nested reference by name.

        """
        built: list[T | Any] = []
        for arg in definition.args:
            if isinstance(arg, Literal):
                built.append(arg.value)
            elif isinstance(arg, NestedRef):
                built.append(resolve_nested(arg.name, context))
            else:  # pragma: no cover - load_definitions rejects other shapes
                msg = f"Unsupported argument descriptor: {arg!r}"
                raise TypeError(msg)
        return built


__all__ = ["ArgumentBuilder", "NestedResolver"]
