"""Normalize raw configuration entries into typed definition records.

A raw configuration is an ordered sequence of mappings::

    [
        {"name": "app.Application", "args": [{"name": "app.Writer"}, {"value": "views/form.html"}]},
        {"name": "app.Writer", "args": [{"name": "app.Storage"}]},
        {"name": "app.SqlStorage"},
    ]

Each ``args`` item is either a nested reference (``{"name": ...}``) resolved
through the container, or a literal (``{"value": ...}``) passed through as is.
The ``class`` key is accepted as an alias of ``name``.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias

from wirefactory.exceptions import WireFactoryMalformedConfigError

_NAME_KEYS = ("name", "class")
_ENTRY_KEYS = frozenset({*_NAME_KEYS, "args"})
_ARG_KEYS = frozenset({*_NAME_KEYS, "value"})


@dataclass(frozen=True, slots=True)
class NestedRef:
    """Argument resolved and constructed through the container.

    Attributes:
        name: Requested class name, matched with the same rules as a top-level
            ``get_instance`` call.

    """

    name: str


@dataclass(frozen=True, slots=True)
class Literal:
    """Argument passed to the constructor unchanged.

    Attributes:
        value: Opaque value; the container never inspects or copies it.

    """

    value: Any


ArgSpec: TypeAlias = NestedRef | Literal


@dataclass(frozen=True, slots=True)
class Definition:
    """Normalized configuration entry.

    Attributes:
        name: Dotted class name identifying the class to construct.
        args: Ordered constructor argument descriptors.

    """

    name: str
    args: tuple[ArgSpec, ...] = ()


RawEntry: TypeAlias = Mapping[str, Any] | Definition
RawConfig: TypeAlias = Iterable[RawEntry]


def load_definitions(raw_config: RawConfig) -> tuple[Definition, ...]:
    """Convert raw configuration entries into an immutable definition sequence.

    Entry order is preserved; it determines override precedence during
    resolution.

    Args:
        raw_config: Ordered entries, either mappings or ``Definition`` objects.

    Returns:
        The loaded definitions as a tuple.

    Raises:
        WireFactoryMalformedConfigError: If the configuration or any entry has
            an invalid shape.

    """
    if isinstance(raw_config, (str, bytes, Mapping)) or not isinstance(raw_config, Iterable):
        msg = f"configuration must be a sequence of entries, got {type(raw_config).__name__}"
        raise WireFactoryMalformedConfigError(msg)
    return tuple(_load_entry(entry, index) for index, entry in enumerate(raw_config))


def compose_configs(*configs: RawConfig) -> list[RawEntry]:
    """Concatenate configurations, later ones overriding earlier ones.

    Entries are never merged by key: an override is simply appended, so the
    last compatible definition wins at resolution time.
    """
    composed: list[RawEntry] = []
    for config in configs:
        composed.extend(config)
    return composed


def load_config_file(path: str | Path) -> list[dict[str, Any]]:
    """Read a JSON array of configuration entries from ``path``.

    Raises:
        WireFactoryMalformedConfigError: If the file is not UTF-8 encoded JSON
            or its top-level value is not an array.

    """
    source = Path(path)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"{source}: invalid JSON ({exc})"
        raise WireFactoryMalformedConfigError(msg) from exc
    except UnicodeDecodeError as exc:
        msg = f"{source}: not UTF-8 text ({exc})"
        raise WireFactoryMalformedConfigError(msg) from exc
    if not isinstance(payload, list):
        msg = f"{source}: expected a JSON array of entries, got {type(payload).__name__}"
        raise WireFactoryMalformedConfigError(msg)
    return payload


def _load_entry(entry: object, index: int) -> Definition:
    if isinstance(entry, Definition):
        return entry
    if not isinstance(entry, Mapping):
        msg = f"expected a mapping, got {type(entry).__name__}"
        raise WireFactoryMalformedConfigError(msg, index=index)

    unknown = sorted(str(key) for key in entry if key not in _ENTRY_KEYS)
    if unknown:
        msg = f"unknown keys {unknown}"
        raise WireFactoryMalformedConfigError(msg, index=index)

    name = _read_name(entry, index=index)
    if name is None:
        msg = "entry has no 'name'"
        raise WireFactoryMalformedConfigError(msg, index=index)

    raw_args = entry.get("args", ())
    if raw_args is None:
        raw_args = ()
    if isinstance(raw_args, (str, bytes, Mapping)) or not isinstance(raw_args, Sequence):
        msg = f"'args' must be a sequence, got {type(raw_args).__name__}"
        raise WireFactoryMalformedConfigError(msg, index=index)

    args = tuple(
        _load_arg(raw_arg, index=index, arg_index=arg_index)
        for arg_index, raw_arg in enumerate(raw_args)
    )
    return Definition(name=name, args=args)


def _load_arg(raw_arg: object, *, index: int, arg_index: int) -> ArgSpec:
    if isinstance(raw_arg, (NestedRef, Literal)):
        return raw_arg
    if not isinstance(raw_arg, Mapping):
        msg = f"expected a mapping, got {type(raw_arg).__name__}"
        raise WireFactoryMalformedConfigError(msg, index=index, arg_index=arg_index)

    unknown = sorted(str(key) for key in raw_arg if key not in _ARG_KEYS)
    if unknown:
        msg = f"unknown keys {unknown}"
        raise WireFactoryMalformedConfigError(msg, index=index, arg_index=arg_index)

    name = _read_name(raw_arg, index=index, arg_index=arg_index)
    has_value = "value" in raw_arg
    if name is not None and has_value:
        msg = "argument is both a nested reference and a literal"
        raise WireFactoryMalformedConfigError(msg, index=index, arg_index=arg_index)
    if name is not None:
        return NestedRef(name)
    if has_value:
        return Literal(raw_arg["value"])
    msg = "argument is neither a nested reference nor a literal"
    raise WireFactoryMalformedConfigError(msg, index=index, arg_index=arg_index)


def _read_name(
    raw: Mapping[str, Any],
    *,
    index: int,
    arg_index: int | None = None,
) -> str | None:
    present = [key for key in _NAME_KEYS if key in raw]
    if not present:
        return None
    if len(present) > 1:
        msg = "'name' and 'class' are aliases; give only one"
        raise WireFactoryMalformedConfigError(msg, index=index, arg_index=arg_index)
    name = raw[present[0]]
    if not isinstance(name, str) or not name.strip():
        msg = f"'{present[0]}' must be a non-empty string, got {name!r}"
        raise WireFactoryMalformedConfigError(msg, index=index, arg_index=arg_index)
    return name


__all__ = [
    "ArgSpec",
    "Definition",
    "Literal",
    "NestedRef",
    "RawConfig",
    "RawEntry",
    "compose_configs",
    "load_config_file",
    "load_definitions",
]
