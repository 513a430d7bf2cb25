from __future__ import annotations

import logging
from collections.abc import Sequence

from wirefactory._internal.resolution_context import ResolutionContext
from wirefactory.class_registry import ClassRegistryProtocol, TypeHandle
from wirefactory.definitions import Definition
from wirefactory.exceptions import (
    WireFactoryCyclicDependencyError,
    WireFactoryUnknownClassError,
    WireFactoryUnresolvedDependencyError,
)
from wirefactory.match_mode import MatchMode

logger = logging.getLogger(__name__)


class NameResolver:
    """Select the definition that satisfies a requested name.

    Every request performs a fresh linear scan of the definitions. A definition
    is a candidate when its name equals the requested name or, in
    ``MatchMode.SUBTYPE``, when its class subclasses the requested class. The
    candidate with the greatest index wins, which is what makes appended
    overrides take effect without editing earlier entries.
    """

    def __init__(self, class_registry: ClassRegistryProtocol, match_mode: MatchMode) -> None:
        self._class_registry = class_registry
        self._match_mode = match_mode

    def resolve(
        self,
        requested_name: str,
        definitions: Sequence[Definition],
        context: ResolutionContext,
    ) -> tuple[int, Definition]:
        """Return the index and definition selected for ``requested_name``.

        Args:
            requested_name: Name asked for by the caller or a nested reference.
            definitions: Ordered definitions; later entries take precedence.
            context: Active resolution stack used for cycle detection.

        Raises:
            WireFactoryUnresolvedDependencyError: If no definition is compatible.
            WireFactoryCyclicDependencyError: If the name is already being built.

        """
        selected = self._select(requested_name, definitions)
        if selected is None:
            raise WireFactoryUnresolvedDependencyError(requested_name)
        index, definition = selected

        position = context.find_active(requested_name, definition.name)
        if position is not None:
            path = [*context.path_from(position), requested_name]
            raise WireFactoryCyclicDependencyError(requested_name, path)

        logger.debug(
            "Resolved '%s' to definition #%d '%s' (depth=%d)",
            requested_name,
            index,
            definition.name,
            context.depth,
        )
        return index, definition

    def _select(
        self,
        requested_name: str,
        definitions: Sequence[Definition],
    ) -> tuple[int, Definition] | None:
        requested_type = self._requested_type(requested_name)
        selected: tuple[int, Definition] | None = None
        for index, definition in enumerate(definitions):
            if self._is_compatible(definition, requested_name, requested_type):
                selected = (index, definition)
        return selected

    def _requested_type(self, requested_name: str) -> TypeHandle | None:
        if self._match_mode is MatchMode.EXACT:
            return None
        try:
            return self._class_registry.resolve_type(requested_name)
        except WireFactoryUnknownClassError:
            logger.debug("'%s' is not a loadable class; matching by exact name only", requested_name)
            return None

    def _is_compatible(
        self,
        definition: Definition,
        requested_name: str,
        requested_type: TypeHandle | None,
    ) -> bool:
        if definition.name == requested_name:
            return True
        if requested_type is None:
            return False
        try:
            candidate_type = self._class_registry.resolve_type(definition.name)
        except WireFactoryUnknownClassError:
            return False
        return self._class_registry.is_subtype(candidate_type, requested_type)


__all__ = ["NameResolver"]
