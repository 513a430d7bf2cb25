from __future__ import annotations

from enum import Enum


class MatchMode(Enum):
    """Select how a requested name is matched against definitions.

    Pass a value as ``Container(..., match_mode=...)``. Whatever the mode, the
    latest compatible definition in the configuration wins.
    """

    SUBTYPE = "subtype"
    """Match equal names and definitions whose class subclasses the requested class."""

    EXACT = "exact"
    """Match equal names only; no class is loaded while selecting definitions."""
