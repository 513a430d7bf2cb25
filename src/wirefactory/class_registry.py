from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol, TypeAlias, runtime_checkable

from wirefactory._internal.type_checks import is_subclass_safe
from wirefactory.exceptions import WireFactoryUnknownClassError

logger = logging.getLogger(__name__)

TypeHandle: TypeAlias = Callable[..., Any]
"""A runtime class, or a factory callable standing in for one."""


@runtime_checkable
class ClassRegistryProtocol(Protocol):
    """Capability the container uses to touch code outside its data model.

    Implementations map names to type handles, answer subtype questions for
    candidate matching, and construct objects from built argument lists.
    """

    def resolve_type(self, name: str) -> TypeHandle:
        """Return the type handle identified by ``name``.

        Raises:
            WireFactoryUnknownClassError: If the name cannot be located.

        """
        ...

    def is_subtype(self, candidate: TypeHandle, base: TypeHandle) -> bool:
        """Return whether ``candidate`` can satisfy a request for ``base``."""
        ...

    def construct(self, handle: TypeHandle, args: Sequence[Any]) -> Any:
        """Call ``handle`` with ``args`` as positional arguments."""
        ...


class ImportClassRegistry:
    """Locate classes by dotted import path.

    ``"package.module.ClassName"`` imports the longest importable module
    prefix and walks the remaining parts as attributes, so nested classes such
    as ``"package.module.Outer.Inner"`` also work. The explicit
    ``"package.module:ClassName"`` form skips the prefix search.

    Loaded handles are cached per name for the registry's lifetime.
    """

    def __init__(self) -> None:
        self._cache: dict[str, TypeHandle] = {}

    def resolve_type(self, name: str) -> TypeHandle:
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        handle = self._load(name)
        if not callable(handle):
            raise WireFactoryUnknownClassError(name, f"{type(handle).__name__} object is not callable")
        self._cache[name] = handle
        logger.debug("Loaded class '%s' as %r", name, handle)
        return handle

    def is_subtype(self, candidate: TypeHandle, base: TypeHandle) -> bool:
        return is_subclass_safe(candidate, base)

    def construct(self, handle: TypeHandle, args: Sequence[Any]) -> Any:
        return handle(*args)

    def _load(self, name: str) -> Any:
        if ":" in name:
            module_name, _, attribute_path = name.partition(":")
            module = self._import(name, module_name)
            if module is None:
                raise WireFactoryUnknownClassError(name, f"no module named '{module_name}'")
            return self._walk(name, module, attribute_path.split("."))

        parts = name.split(".")
        if len(parts) < 2:  # noqa: PLR2004
            raise WireFactoryUnknownClassError(name, "expected a dotted 'module.ClassName' path")

        for split_at in range(len(parts) - 1, 0, -1):
            module = self._import(name, ".".join(parts[:split_at]))
            if module is not None:
                return self._walk(name, module, parts[split_at:])
        raise WireFactoryUnknownClassError(name, f"no module named '{parts[0]}'")

    def _import(self, name: str, module_name: str) -> Any | None:
        try:
            return importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            # Only a missing prefix module means "try a shorter prefix"; a missing
            # import inside an existing module is a broken collaborator.
            if exc.name is not None and (module_name == exc.name or module_name.startswith(f"{exc.name}.")):
                return None
            raise WireFactoryUnknownClassError(name, str(exc)) from exc
        except ImportError as exc:
            raise WireFactoryUnknownClassError(name, str(exc)) from exc
        except Exception as exc:
            # The module exists but failed while executing its body.
            raise WireFactoryUnknownClassError(name, f"{type(exc).__name__}: {exc}") from exc

    def _walk(self, name: str, obj: Any, attributes: Sequence[str]) -> Any:
        for attribute in attributes:
            try:
                obj = getattr(obj, attribute)
            except AttributeError as exc:
                raise WireFactoryUnknownClassError(name, f"no attribute '{attribute}'") from exc
            except Exception as exc:
                raise WireFactoryUnknownClassError(name, f"{type(exc).__name__}: {exc}") from exc
        return obj


class MappingClassRegistry:
    """Locate classes through an explicit name to class (or factory) map.

    Useful where reflective imports are unwanted: every constructible name is
    declared up front. Factory callables are accepted as handles, but only
    runtime classes take part in subtype matching.
    """

    def __init__(self, classes: Mapping[str, TypeHandle]) -> None:
        self._classes = dict(classes)

    def resolve_type(self, name: str) -> TypeHandle:
        try:
            return self._classes[name]
        except KeyError:
            raise WireFactoryUnknownClassError(name, "not present in the class map") from None

    def is_subtype(self, candidate: TypeHandle, base: TypeHandle) -> bool:
        return is_subclass_safe(candidate, base)

    def construct(self, handle: TypeHandle, args: Sequence[Any]) -> Any:
        return handle(*args)

    @classmethod
    def from_classes(cls, *classes: type[Any]) -> MappingClassRegistry:
        """Build a registry keyed by each class's ``module.QualifiedName``."""
        return cls({f"{klass.__module__}.{klass.__qualname__}": klass for klass in classes})


__all__ = [
    "ClassRegistryProtocol",
    "ImportClassRegistry",
    "MappingClassRegistry",
    "TypeHandle",
]
