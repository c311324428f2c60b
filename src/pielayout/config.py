"""Tuneable layout constants.

Usage
-----
>>> from pielayout.config import LayoutConfig
>>> assign_angles(items, parent_angle=180.0, config=LayoutConfig(parent_collision_nudge=1.0))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """All tuneable parameters of the layout engine.

    Attributes
    ----------
    parent_collision_epsilon : float
        A fixed angle closer than this (in degrees) to the parent angle
        counts as colliding with the parent link.
    parent_collision_nudge : float
        Offset in degrees added to a colliding fixed angle.
    min_spacing_deg : float
        Smallest angular distance between neighbouring items that the
        diagnostics quality gate accepts.
    """

    parent_collision_epsilon: float = 1e-4
    parent_collision_nudge: float = 0.1
    min_spacing_deg: float = 10.0

    def __post_init__(self) -> None:
        if self.parent_collision_epsilon < 0:
            raise ValueError("parent_collision_epsilon must be >= 0")
        if self.min_spacing_deg < 0:
            raise ValueError("min_spacing_deg must be >= 0")


DEFAULT_LAYOUT = LayoutConfig()
