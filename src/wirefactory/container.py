from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wirefactory._internal.arguments import ArgumentBuilder
from wirefactory._internal.instantiator import Instantiator
from wirefactory._internal.resolution_context import ResolutionContext
from wirefactory._internal.resolver import NameResolver
from wirefactory.class_registry import ClassRegistryProtocol, ImportClassRegistry
from wirefactory.definitions import Definition, Literal, RawConfig, RawEntry, load_definitions
from wirefactory.match_mode import MatchMode

if TYPE_CHECKING:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlanNode:
    """One node of a resolution plan computed without constructing objects.

    Attributes:
        requested: Name that was asked for.
        definition: Definition selected for it.
        index: Position of ``definition`` in the container's configuration.
        arguments: Planned arguments in declaration order; nested references
            appear as ``PlanNode`` and literals as ``Literal``.

    """

    requested: str
    definition: Definition
    index: int
    arguments: tuple[PlanNode | Literal, ...]

    def render(self, indent: str = "  ") -> str:
        """Return the plan as an indented text tree."""
        lines: list[str] = []
        self._render_into(lines, depth=0, indent=indent)
        return "\n".join(lines)

    def _render_into(self, lines: list[str], *, depth: int, indent: str) -> None:
        label = self.definition.name
        if self.requested != self.definition.name:
            label = f"{self.requested} -> {label}"
        lines.append(f"{indent * depth}{label} [#{self.index}]")
        for argument in self.arguments:
            if isinstance(argument, PlanNode):
                argument._render_into(lines, depth=depth + 1, indent=indent)
            else:
                lines.append(f"{indent * (depth + 1)}value {argument.value!r}")


class Container:
    """Build object graphs from an ordered list of definitions.

    Each definition names a class and its positional constructor arguments.
    ``get_instance`` resolves the requested name to a definition (an exact
    name, or a definition of a subclass when the name is an abstraction),
    builds nested references recursively, and constructs the result. Nothing
    is cached: every call returns a fresh graph.

    When several definitions are compatible with a name, the last one in the
    configuration wins. Compose a base configuration with overrides by
    appending entries (``compose_configs`` or ``with_overrides``).

    Example:
        container = Container(
            [
                {"name": "app.Writer", "args": [{"name": "app.Storage"}]},
                {"name": "app.SqlStorage"},
            ]
        )
        writer = container.get_instance("app.Writer")

    """

    def __init__(
        self,
        config: RawConfig,
        class_registry: ClassRegistryProtocol | None = None,
        *,
        match_mode: MatchMode = MatchMode.SUBTYPE,
    ) -> None:
        """Load the configuration and prepare the resolution engine.

        Args:
            config: Ordered raw entries or ``Definition`` objects.
            class_registry: Capability used to load and construct classes.
                Defaults to ``ImportClassRegistry``.
            match_mode: Candidate matching rule for requested names.

        Raises:
            WireFactoryMalformedConfigError: If any entry has an invalid shape.

        """
        self._definitions = load_definitions(config)
        self._class_registry: ClassRegistryProtocol = class_registry or ImportClassRegistry()
        self._match_mode = match_mode
        self._resolver = NameResolver(self._class_registry, match_mode)
        self._argument_builder = ArgumentBuilder()
        self._instantiator = Instantiator(self._class_registry)
        logger.info(
            "Container loaded %d definition(s) match_mode=%s",
            len(self._definitions),
            match_mode.value,
        )

    @property
    def definitions(self) -> tuple[Definition, ...]:
        """Loaded definitions in precedence order (last wins)."""
        return self._definitions

    @property
    def match_mode(self) -> MatchMode:
        return self._match_mode

    def get_instance(self, name: str) -> Any:
        """Build a fully wired instance for ``name``.

        Args:
            name: Dotted class name, concrete or abstract.

        Returns:
            A newly constructed object graph rooted at the selected definition.

        Raises:
            WireFactoryUnresolvedDependencyError: If a requested name has no
                compatible definition.
            WireFactoryCyclicDependencyError: If a name is needed while it is
                already being built.
            WireFactoryUnknownClassError: If a selected class cannot be loaded.
            WireFactoryConstructionFailedError: If a constructor rejects its
                arguments.

        """
        return self._build(name, ResolutionContext(self._definitions))

    def plan(self, name: str) -> PlanNode:
        """Resolve ``name`` the way ``get_instance`` would, without constructing.

        Raises the same unresolved and cyclic dependency errors as
        ``get_instance``. Class loading and constructor failures are only
        detected by ``get_instance``.
        """
        return self._plan(name, ResolutionContext(self._definitions))

    def with_overrides(self, *entries: RawEntry) -> Self:
        """Return a new container with ``entries`` appended to this configuration.

        The current container is left unchanged. The new one shares the class
        registry and match mode.
        """
        return type(self)(
            [*self._definitions, *entries],
            self._class_registry,
            match_mode=self._match_mode,
        )

    def _build(self, name: str, context: ResolutionContext) -> Any:
        _, definition = self._resolver.resolve(name, context.definitions, context)
        with context.enter(name, definition):
            args = self._argument_builder.build(definition, context, self._build)
        return self._instantiator.instantiate(definition.name, args)

    def _plan(self, name: str, context: ResolutionContext) -> PlanNode:
        index, definition = self._resolver.resolve(name, context.definitions, context)
        with context.enter(name, definition):
            nested = self._argument_builder.build(definition, context, self._plan)
        # Literals come back as bare values; keep their descriptors in the plan.
        arguments = tuple(
            arg if isinstance(arg, Literal) else value
            for arg, value in zip(definition.args, nested, strict=True)
        )
        return PlanNode(
            requested=name,
            definition=definition,
            index=index,
            arguments=arguments,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(definitions={len(self._definitions)}, "
            f"match_mode={self._match_mode.value})"
        )


__all__ = ["Container", "PlanNode"]
