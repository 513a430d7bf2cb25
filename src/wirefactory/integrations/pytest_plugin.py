"""pytest fixtures for building wirefactory containers in test suites.

Enable with ``pytest_plugins = ["wirefactory.integrations.pytest_plugin"]`` and
override ``wirefactory_definitions`` to return the base configuration.
Individual tests append overrides with the ``wirefactory_override`` marker::

    @pytest.mark.wirefactory_override({"name": "tests.fakes.InMemoryStorage"})
    def test_writer(wirefactory_container): ...

Markers closer to the test are appended later, so they win over markers on
the module or class.
"""

from __future__ import annotations

from typing import Any

import pytest

from wirefactory.class_registry import ClassRegistryProtocol
from wirefactory.container import Container
from wirefactory.definitions import RawConfig, RawEntry, compose_configs
from wirefactory.match_mode import MatchMode

_OVERRIDE_MARKER = "wirefactory_override"


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        f"{_OVERRIDE_MARKER}(*entries): append definitions to the wirefactory container for this test",
    )


@pytest.fixture()
def wirefactory_definitions() -> RawConfig:
    """Fixture hook for the base configuration of the plugin-managed container.

    Users must override this fixture in their own test suite.

    """
    msg = (
        "The wirefactory pytest plugin requires overriding the 'wirefactory_definitions' "
        "fixture in your test suite. Define @pytest.fixture() def wirefactory_definitions(): ... "
        "and return the base configuration list."
    )
    raise RuntimeError(msg)


@pytest.fixture()
def wirefactory_class_registry() -> ClassRegistryProtocol | None:
    """Class registry used by ``wirefactory_container``; ``None`` means import paths."""
    return None


@pytest.fixture()
def wirefactory_match_mode() -> MatchMode:
    return MatchMode.SUBTYPE


@pytest.fixture()
def wirefactory_overrides(request: pytest.FixtureRequest) -> list[RawEntry]:
    """Entries collected from ``wirefactory_override`` markers, outermost first."""
    markers = list(request.node.iter_markers(name=_OVERRIDE_MARKER))
    entries: list[RawEntry] = []
    for marker in reversed(markers):
        entries.extend(marker.args)
    return entries


@pytest.fixture()
def wirefactory_container(
    wirefactory_definitions: RawConfig,
    wirefactory_overrides: list[RawEntry],
    wirefactory_class_registry: ClassRegistryProtocol | None,
    wirefactory_match_mode: MatchMode,
) -> Container:
    """Container built from the base definitions followed by per-test overrides."""
    config: list[Any] = compose_configs(wirefactory_definitions, wirefactory_overrides)
    return Container(config, wirefactory_class_registry, match_mode=wirefactory_match_mode)


__all__ = [
    "pytest_configure",
    "wirefactory_class_registry",
    "wirefactory_container",
    "wirefactory_definitions",
    "wirefactory_match_mode",
    "wirefactory_overrides",
]
