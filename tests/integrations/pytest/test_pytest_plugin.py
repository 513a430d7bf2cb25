from __future__ import annotations

from typing import Any

import pytest

from tests.fakes import App, SqlStorage, Storage, Writer, XmlStorage, name_of
from wirefactory import Container, MappingClassRegistry

pytestmark = pytest.mark.wirefactory_override({"name": name_of(SqlStorage)})


@pytest.fixture()
def wirefactory_definitions() -> list[dict[str, Any]]:
    return [
        {"name": name_of(App), "args": [{"name": name_of(Writer)}, {"value": "views/write_form.php"}]},
        {"name": name_of(Writer), "args": [{"name": name_of(Storage)}]},
    ]


def test_module_marker_supplies_storage(wirefactory_container: Container) -> None:
    app = wirefactory_container.get_instance(name_of(App))

    assert isinstance(app.writer.storage, SqlStorage)


@pytest.mark.wirefactory_override({"name": name_of(XmlStorage)})
def test_test_marker_wins_over_module_marker(
    wirefactory_container: Container,
    wirefactory_overrides: list[Any],
) -> None:
    app = wirefactory_container.get_instance(name_of(App))

    assert wirefactory_overrides == [{"name": name_of(SqlStorage)}, {"name": name_of(XmlStorage)}]
    assert isinstance(app.writer.storage, XmlStorage)


class TestCustomRegistry:
    @pytest.fixture()
    def wirefactory_class_registry(self) -> MappingClassRegistry:
        return MappingClassRegistry.from_classes(App, Writer, Storage, SqlStorage, XmlStorage)

    def test_container_uses_overridden_registry(self, wirefactory_container: Container) -> None:
        writer = wirefactory_container.get_instance(name_of(Writer))

        assert isinstance(writer.storage, SqlStorage)


def test_definitions_fixture_must_be_overridden(pytester: pytest.Pytester) -> None:
    pytester.makepyfile(
        """
        def test_uses_container(wirefactory_container):
            pass
        """,
    )

    result = pytester.runpytest("-p", "wirefactory.integrations.pytest_plugin")

    result.assert_outcomes(errors=1)
    result.stdout.fnmatch_lines(
        ["*RuntimeError: The wirefactory pytest plugin requires overriding the 'wirefactory_definitions' fixture*"],
    )


def test_override_marker_is_registered(pytester: pytest.Pytester) -> None:
    result = pytester.runpytest("-p", "wirefactory.integrations.pytest_plugin", "--markers")

    result.stdout.fnmatch_lines(["@pytest.mark.wirefactory_override(*entries):*"])
