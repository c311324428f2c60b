"""Angle assignment for the items of one menu level.

Items may carry a fixed angle. All others are distributed evenly into
the gaps between the fixed ones, and some angular space is kept free for
the link back to the parent item when a parent angle is given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, List, Mapping, Optional, Sequence

from .config import DEFAULT_LAYOUT, LayoutConfig
from .geometry import check_angle, normalize_angle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixedAngle:
    index: int
    angle: float


def fixed_angle_of(item: Any) -> Optional[float]:
    """Return the fixed angle carried by *item*, or ``None``.

    *item* may be ``None``, a number, a mapping with an ``"angle"`` key
    or any object with an ``angle`` attribute. Negative angles count as
    not fixed.
    """
    if item is None:
        return None
    if isinstance(item, (int, float)) and not isinstance(item, bool):
        value = item
    elif isinstance(item, Mapping):
        value = item.get("angle")
    else:
        value = getattr(item, "angle", None)
    if value is None:
        return None
    angle = check_angle(value, "fixed angle")
    return angle if angle >= 0 else None


def collect_fixed_angles(items: Sequence[Any]) -> List[FixedAngle]:
    fixed: List[FixedAngle] = []
    for index, item in enumerate(items):
        angle = fixed_angle_of(item)
        if angle is not None:
            fixed.append(FixedAngle(index=index, angle=angle))
    return fixed


def nudge_parent_collisions(
    fixed: Sequence[FixedAngle],
    parent_angle: Optional[float],
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> List[FixedAngle]:
    """Move fixed angles that coincide with the parent link a tiny bit.

    Only the parent angle is checked. A nudged angle may end up close to
    another fixed angle and produce a very narrow wedge.
    """
    if parent_angle is None:
        return list(fixed)
    result: List[FixedAngle] = []
    for entry in fixed:
        if abs(entry.angle - parent_angle) < config.parent_collision_epsilon:
            nudged = entry.angle + config.parent_collision_nudge
            logger.debug(
                "fixed angle %.4f of item %d collides with parent link, moved to %.4f",
                entry.angle, entry.index, nudged,
            )
            entry = replace(entry, angle=nudged)
        result.append(entry)
    return result


def prune_fixed_angles(fixed: Sequence[FixedAngle]) -> List[FixedAngle]:
    """Keep only a monotonically non-decreasing run of fixed angles.

    An entry smaller than the last kept one is dropped and its item is
    laid out as if it had no fixed angle.
    """
    kept: List[FixedAngle] = []
    for entry in fixed:
        if kept and entry.angle < kept[-1].angle:
            logger.debug(
                "ignoring fixed angle %.4f of item %d, smaller than %.4f of item %d",
                entry.angle, entry.index, kept[-1].angle, kept[-1].index,
            )
            continue
        kept.append(entry)
    return kept


def first_item_angle(item_count: int, parent_angle: Optional[float]) -> float:
    """Angle for the first item when no item has a fixed angle.

    Without a parent this is the top (0°). With a parent, the circle is
    split evenly into ``item_count + 1`` parts starting at the parent and
    the boundary closest to the top is used.
    """
    if parent_angle is None:
        return 0.0
    wedge_size = 360.0 / (item_count + 1)
    first = 0.0
    min_diff = 360.0
    for i in range(item_count):
        angle = normalize_angle(parent_angle + (i + 1) * wedge_size)
        diff = min(angle, 360.0 - angle)
        if diff < min_diff:
            min_diff = diff
            first = angle
    return first


def assign_angles(
    items: Sequence[Any],
    parent_angle: Optional[float] = None,
    config: Optional[LayoutConfig] = None,
) -> List[float]:
    """Compute one angle per item, in the order of *items*.

    Fixed angles must increase monotonically; a fixed angle smaller than
    a preceding one is ignored. If *parent_angle* is given, the item
    distribution leaves a gap in that direction for the back link.
    """
    config = config or DEFAULT_LAYOUT
    n = len(items)
    if n == 0:
        return []

    if parent_angle is not None:
        parent_angle = normalize_angle(check_angle(parent_angle, "parent angle"))

    fixed = collect_fixed_angles(items)
    fixed = nudge_parent_collisions(fixed, parent_angle, config)
    fixed = [replace(entry, angle=normalize_angle(entry.angle)) for entry in fixed]
    fixed = prune_fixed_angles(fixed)

    if not fixed:
        fixed = [FixedAngle(index=0, angle=first_item_angle(n, parent_angle))]

    angles: List[Optional[float]] = [None] * n

    # Consecutive pairs of fixed angles span the wedges the remaining
    # items are spread into. A single fixed angle spans one 360° wedge.
    for i, begin in enumerate(fixed):
        end = fixed[(i + 1) % len(fixed)]
        angles[begin.index] = begin.angle

        end_angle = end.angle
        if end_angle <= begin.angle:
            end_angle += 360.0

        item_count = (end.index - begin.index - 1) % n

        parent_in_wedge = False
        local_parent = parent_angle
        if local_parent is not None:
            if local_parent < begin.angle:
                local_parent += 360.0
            parent_in_wedge = begin.angle < local_parent < end_angle
            if parent_in_wedge:
                item_count += 1

        gap = (end_angle - begin.angle) / (item_count + 1)

        index = (begin.index + 1) % n
        step = 1
        parent_gap_pending = parent_in_wedge
        while index != end.index:
            angle = begin.angle + gap * step
            if parent_gap_pending and angle + gap / 2.0 - local_parent > 0:
                step += 1
                angle = begin.angle + gap * step
                parent_gap_pending = False
            angles[index] = normalize_angle(angle)
            index = (index + 1) % n
            step += 1

    return angles
