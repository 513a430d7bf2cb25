from __future__ import annotations

import collections
import fractions
import numbers

import pytest

from tests import fakes
from tests.fakes import Outer, SqlStorage, Storage, Writer, name_of
from wirefactory.class_registry import (
    ClassRegistryProtocol,
    ImportClassRegistry,
    MappingClassRegistry,
)
from wirefactory.exceptions import WireFactoryUnknownClassError


def test_registries_satisfy_protocol() -> None:
    assert isinstance(ImportClassRegistry(), ClassRegistryProtocol)
    assert isinstance(MappingClassRegistry({}), ClassRegistryProtocol)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("collections.OrderedDict", collections.OrderedDict),
        ("builtins.dict", dict),
        ("fractions.Fraction", fractions.Fraction),
        ("fractions:Fraction", fractions.Fraction),
        (name_of(Outer.Inner), Outer.Inner),
        (f"{fakes.MODULE}:Outer.Inner", Outer.Inner),
    ],
)
def test_import_registry_resolves_dotted_paths(
    import_registry: ImportClassRegistry,
    name: str,
    expected: type,
) -> None:
    assert import_registry.resolve_type(name) is expected


def test_import_registry_caches_loaded_classes(import_registry: ImportClassRegistry) -> None:
    first = import_registry.resolve_type(name_of(Writer))

    assert import_registry.resolve_type(name_of(Writer)) is first
    assert import_registry._cache[name_of(Writer)] is Writer


@pytest.mark.parametrize(
    ("name", "match"),
    [
        ("Writer", "expected a dotted"),
        ("no_such_package_xyz.Thing", "no module named 'no_such_package_xyz'"),
        ("no_such_package_xyz:Thing", "no module named 'no_such_package_xyz'"),
        (f"{fakes.MODULE}.Missing", "no attribute 'Missing'"),
        (f"{fakes.MODULE}.NOT_A_CLASS", "not callable"),
    ],
)
def test_import_registry_reports_unknown_classes(
    import_registry: ImportClassRegistry,
    name: str,
    match: str,
) -> None:
    with pytest.raises(WireFactoryUnknownClassError, match=match) as exc_info:
        import_registry.resolve_type(name)

    assert exc_info.value.name == name


def test_import_registry_subtype_checks(import_registry: ImportClassRegistry) -> None:
    assert import_registry.is_subtype(SqlStorage, Storage)
    assert import_registry.is_subtype(Storage, Storage)
    assert import_registry.is_subtype(fractions.Fraction, numbers.Number)
    assert not import_registry.is_subtype(Storage, SqlStorage)
    assert not import_registry.is_subtype(len, Storage)
    assert not import_registry.is_subtype(list[int], list)


def test_import_registry_constructs_with_positional_arguments(
    import_registry: ImportClassRegistry,
) -> None:
    storage = SqlStorage()

    writer = import_registry.construct(Writer, [storage])

    assert isinstance(writer, Writer)
    assert writer.storage is storage


def test_mapping_registry_uses_explicit_names(mapping_registry: MappingClassRegistry) -> None:
    assert mapping_registry.resolve_type("SqlStorage") is SqlStorage

    with pytest.raises(WireFactoryUnknownClassError, match="not present in the class map"):
        mapping_registry.resolve_type(name_of(SqlStorage))


def test_mapping_registry_accepts_factories_without_subtyping() -> None:
    def make_storage() -> SqlStorage:
        return SqlStorage()

    registry = MappingClassRegistry({"storage": make_storage, "Storage": Storage})

    handle = registry.resolve_type("storage")

    assert isinstance(registry.construct(handle, []), SqlStorage)
    assert not registry.is_subtype(handle, Storage)


def test_mapping_registry_from_classes_uses_qualified_names() -> None:
    registry = MappingClassRegistry.from_classes(Writer, Outer.Inner)

    assert registry.resolve_type(name_of(Writer)) is Writer
    assert registry.resolve_type(name_of(Outer.Inner)) is Outer.Inner


@pytest.mark.parametrize(
    "name",
    ["tests.broken_collaborator.Broken", "tests.broken_collaborator:Broken"],
)
def test_import_registry_wraps_module_import_failures(
    import_registry: ImportClassRegistry,
    name: str,
) -> None:
    with pytest.raises(
        WireFactoryUnknownClassError,
        match="RuntimeError: collaborator failed at import",
    ) as exc_info:
        import_registry.resolve_type(name)

    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert name not in import_registry._cache


def test_import_registry_wraps_attribute_lookup_failures(import_registry: ImportClassRegistry) -> None:
    with pytest.raises(WireFactoryUnknownClassError, match="RuntimeError: lazy attribute Thing failed"):
        import_registry.resolve_type("tests.lazy_collaborator.Thing")
