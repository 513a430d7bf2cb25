from __future__ import annotations

import pytest

from tests.fakes import Exploding, Pair, SqlStorage, Writer, name_of
from wirefactory._internal.instantiator import Instantiator
from wirefactory.class_registry import ImportClassRegistry, MappingClassRegistry
from wirefactory.exceptions import (
    WireFactoryConstructionFailedError,
    WireFactoryError,
    WireFactoryUnknownClassError,
)


@pytest.fixture()
def instantiator() -> Instantiator:
    return Instantiator(ImportClassRegistry())


def test_constructs_with_positional_arguments_in_order(instantiator: Instantiator) -> None:
    pair = instantiator.instantiate(name_of(Pair), ["a", "b"])

    assert isinstance(pair, Pair)
    assert (pair.first, pair.second) == ("a", "b")


def test_unknown_class(instantiator: Instantiator) -> None:
    with pytest.raises(WireFactoryUnknownClassError):
        instantiator.instantiate("tests.fakes.Missing", [])


@pytest.mark.parametrize("args", [[], [SqlStorage(), "extra"]])
def test_argument_count_mismatch(instantiator: Instantiator, args: list[object]) -> None:
    with pytest.raises(WireFactoryConstructionFailedError, match="Cannot construct") as exc_info:
        instantiator.instantiate(name_of(Writer), args)

    assert exc_info.value.name == name_of(Writer)
    assert isinstance(exc_info.value.__cause__, TypeError)


def test_constructor_exception_is_chained(instantiator: Instantiator) -> None:
    with pytest.raises(WireFactoryConstructionFailedError, match="ValueError: boom") as exc_info:
        instantiator.instantiate(name_of(Exploding), [])

    assert isinstance(exc_info.value.__cause__, ValueError)


def test_library_errors_from_constructors_propagate_unchanged() -> None:
    original = WireFactoryUnknownClassError("inner.Thing")

    def factory() -> None:
        raise original

    instantiator = Instantiator(MappingClassRegistry({"factory": factory}))

    with pytest.raises(WireFactoryError) as exc_info:
        instantiator.instantiate("factory", [])

    assert exc_info.value is original


def test_builtins_without_signature_are_called_directly(instantiator: Instantiator) -> None:
    assert instantiator.instantiate("builtins.dict", []) == {}
    assert instantiator.instantiate("builtins.int", ["7"]) == 7
