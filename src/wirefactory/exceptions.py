from __future__ import annotations

from collections.abc import Sequence


class WireFactoryError(Exception):
    """Represent a base class for all wirefactory-specific failures.

    Catch this type when you want to handle any wirefactory error path without
    matching each concrete exception class individually.
    """


class WireFactoryMalformedConfigError(WireFactoryError):
    """Signal a configuration entry with an invalid shape.

    Raised by ``load_definitions`` (and therefore by ``Container(...)``) when an
    entry lacks a ``name``, carries unknown keys, or declares an argument that
    is neither a nested reference (``{"name": ...}``) nor a literal
    (``{"value": ...}``). No container is created in that case.

    Typical fixes include adding the missing ``name`` key, fixing typos in
    entry keys, and giving each argument exactly one of ``name``/``value``.
    """

    def __init__(self, message: str, *, index: int | None = None, arg_index: int | None = None) -> None:
        self.index = index
        self.arg_index = arg_index
        location = ""
        if index is not None:
            location = f"entry {index}"
            if arg_index is not None:
                location += f", argument {arg_index}"
            location += ": "
        super().__init__(f"{location}{message}")


class WireFactoryUnresolvedDependencyError(WireFactoryError):
    """Signal that no definition is compatible with a requested name.

    Raised by ``Container.get_instance`` and ``Container.plan`` when neither an
    exact definition nor a definition of a subclass exists for the name.

    Typical fixes include adding a definition for a concrete implementation of
    the requested class, or checking the dotted path for typos.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No definition is compatible with '{name}'")


class WireFactoryCyclicDependencyError(WireFactoryError):
    """Signal that a name reappears on its own active resolution stack.

    ``path`` lists the names from the first occurrence of the repeated name to
    the point where it was requested again.

    Typical fix is breaking the cycle by replacing one of the nested
    references with a literal or restructuring the collaborators.
    """

    def __init__(self, name: str, path: Sequence[str]) -> None:
        self.name = name
        self.path = tuple(path)
        super().__init__(f"Cyclic dependency on '{name}': {' -> '.join(self.path)}")


class WireFactoryUnknownClassError(WireFactoryError):
    """Signal that a class name cannot be located by the class registry.

    Raised by the instantiator when the selected definition names a module or
    attribute that does not exist, or an object that is not constructible.
    """

    def __init__(self, name: str, reason: str | None = None) -> None:
        self.name = name
        message = f"Cannot load class '{name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class WireFactoryConstructionFailedError(WireFactoryError):
    """Signal that a constructor rejected the built positional arguments.

    Raised when the argument count does not bind to the constructor signature
    or when the constructor itself raises. The original exception, if any, is
    available as ``__cause__``.

    Typical fix is aligning the definition's ``args`` with the constructor's
    positional parameters.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Cannot construct '{name}': {reason}")
