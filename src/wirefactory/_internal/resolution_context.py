from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from wirefactory.definitions import Definition


@dataclass(frozen=True, slots=True)
class ResolutionFrame:
    """A definition being built for a requested name."""

    requested: str
    definition: Definition


@dataclass(slots=True)
class ResolutionContext:
    """Per-call resolution state.

    Created by the container for each top-level request and discarded when it
    returns. Never shared between calls, so no locking is needed.
    """

    definitions: tuple[Definition, ...]
    _frames: list[ResolutionFrame] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self._frames)

    def find_active(self, *names: str) -> int | None:
        """Return the stack position of the first frame mentioning any of ``names``."""
        for position, frame in enumerate(self._frames):
            if frame.requested in names or frame.definition.name in names:
                return position
        return None

    def path_from(self, position: int) -> list[str]:
        """Return requested names on the stack starting at ``position``."""
        return [frame.requested for frame in self._frames[position:]]

    @contextmanager
    def enter(self, requested: str, definition: Definition) -> Iterator[None]:
        """Keep ``definition`` on the active stack while its arguments are built."""
        self._frames.append(ResolutionFrame(requested, definition))
        try:
            yield
        finally:
            self._frames.pop()


__all__ = ["ResolutionContext", "ResolutionFrame"]
