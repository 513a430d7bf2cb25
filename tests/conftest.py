"""Shared pytest fixtures for wirefactory tests."""

from __future__ import annotations

from typing import Any

import pytest

from tests import fakes
from tests.fakes import App, SqlStorage, Storage, Writer, XmlStorage, name_of
from wirefactory.class_registry import ImportClassRegistry, MappingClassRegistry
from wirefactory.container import Container

pytest_plugins = ["pytester", "wirefactory.integrations.pytest_plugin"]


@pytest.fixture(autouse=True)
def _reset_constructed() -> None:
    fakes.constructed.clear()


@pytest.fixture()
def notes_config() -> list[dict[str, Any]]:
    """App -> Writer -> Storage, with SqlStorage as the only storage."""
    return [
        {
            "name": name_of(App),
            "args": [{"name": name_of(Writer)}, {"value": "views/write_form.php"}],
        },
        {"name": name_of(Writer), "args": [{"name": name_of(Storage)}]},
        {"name": name_of(SqlStorage)},
    ]


@pytest.fixture()
def container(notes_config: list[dict[str, Any]]) -> Container:
    """Container over the notes configuration, loading classes by import path."""
    return Container(notes_config)


@pytest.fixture()
def import_registry() -> ImportClassRegistry:
    return ImportClassRegistry()


@pytest.fixture()
def mapping_registry() -> MappingClassRegistry:
    """Explicit registry using short names instead of import paths."""
    return MappingClassRegistry(
        {
            "App": App,
            "Writer": Writer,
            "Storage": Storage,
            "SqlStorage": SqlStorage,
            "XmlStorage": XmlStorage,
        },
    )
