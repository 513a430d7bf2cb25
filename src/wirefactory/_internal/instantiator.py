from __future__ import annotations

import inspect
import logging
from collections.abc import Sequence
from typing import Any

from wirefactory.class_registry import ClassRegistryProtocol, TypeHandle
from wirefactory.exceptions import WireFactoryConstructionFailedError, WireFactoryError

logger = logging.getLogger(__name__)


class Instantiator:
    """Construct objects by class name through a class registry."""

    def __init__(self, class_registry: ClassRegistryProtocol) -> None:
        self._class_registry = class_registry

    def instantiate(self, class_name: str, args: Sequence[Any]) -> Any:
        """Load ``class_name`` and call it with ``args`` as positional arguments.

        Raises:
            WireFactoryUnknownClassError: If the class cannot be located.
            WireFactoryConstructionFailedError: If the arguments do not bind to the
                constructor signature or the constructor raises.

        """
        handle = self._class_registry.resolve_type(class_name)
        self._check_arguments(class_name, handle, args)
        logger.debug("Constructing '%s' with %d argument(s)", class_name, len(args))
        try:
            return self._class_registry.construct(handle, args)
        except WireFactoryError:
            raise
        except Exception as exc:
            raise WireFactoryConstructionFailedError(class_name, f"{type(exc).__name__}: {exc}") from exc

    def _check_arguments(self, class_name: str, handle: TypeHandle, args: Sequence[Any]) -> None:
        try:
            signature = inspect.signature(handle)
        except (TypeError, ValueError):
            # Some builtins expose no signature; let the call itself decide.
            return
        try:
            signature.bind(*args)
        except TypeError as exc:
            raise WireFactoryConstructionFailedError(class_name, str(exc)) from exc


__all__ = ["Instantiator"]
