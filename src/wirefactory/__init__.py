from wirefactory.class_registry import (
    ClassRegistryProtocol,
    ImportClassRegistry,
    MappingClassRegistry,
    TypeHandle,
)
from wirefactory.container import Container, PlanNode
from wirefactory.definitions import (
    ArgSpec,
    Definition,
    Literal,
    NestedRef,
    compose_configs,
    load_config_file,
    load_definitions,
)
from wirefactory.exceptions import (
    WireFactoryConstructionFailedError,
    WireFactoryCyclicDependencyError,
    WireFactoryError,
    WireFactoryMalformedConfigError,
    WireFactoryUnknownClassError,
    WireFactoryUnresolvedDependencyError,
)
from wirefactory.match_mode import MatchMode

__all__ = [
    "ArgSpec",
    "ClassRegistryProtocol",
    "Container",
    "Definition",
    "ImportClassRegistry",
    "Literal",
    "MappingClassRegistry",
    "MatchMode",
    "NestedRef",
    "PlanNode",
    "TypeHandle",
    "WireFactoryConstructionFailedError",
    "WireFactoryCyclicDependencyError",
    "WireFactoryError",
    "WireFactoryMalformedConfigError",
    "WireFactoryUnknownClassError",
    "WireFactoryUnresolvedDependencyError",
    "compose_configs",
    "load_config_file",
    "load_definitions",
]
