"""Hit-testing wedges for the items of one menu level."""

from __future__ import annotations

from bisect import bisect_right
from typing import List, Optional, Sequence

from .geometry import check_angle, is_angle_between, normalize_angle
from .models import LayoutInputError, Wedge


def compute_wedges(
    angles: Sequence[float],
    parent_angle: Optional[float] = None,
) -> List[Wedge]:
    """Start and end angles of the wedge around each item.

    Separators sit halfway between neighbouring angles. If *parent_angle*
    is given it takes part in the separation, which leaves a gap towards
    the parent. Each returned wedge is a single interval with
    ``start < end``, so *start* can be negative and *end* larger than 360°.

    Sorting makes this O(N log N), which is fine for menu-sized inputs.
    """
    if not angles:
        return []

    item_angles = [check_angle(a, f"angle {i}") for i, a in enumerate(angles)]
    for i, angle in enumerate(item_angles):
        if not 0.0 <= angle < 360.0:
            raise LayoutInputError(f"angle {i} must be in [0, 360), got {angle}")

    if parent_angle is not None:
        parent_angle = normalize_angle(check_angle(parent_angle, "parent angle"))

    if len(item_angles) == 1 and parent_angle is None:
        return [Wedge(0.0, 360.0)]

    all_angles = list(item_angles)
    if parent_angle is not None:
        all_angles.append(parent_angle)
    all_angles.sort()

    separators: List[float] = []
    for i in range(len(all_angles) - 1):
        separators.append((all_angles[i] + all_angles[i + 1]) / 2.0)
    separators.append((all_angles[-1] + all_angles[0] + 360.0) / 2.0)

    wedges: List[Wedge] = []
    for angle in item_angles:
        wedge_index = bisect_right(separators, angle)
        start = separators[-1] - 360.0 if wedge_index == 0 else separators[wedge_index - 1]
        wedges.append(Wedge(start, separators[wedge_index]))
    return wedges


def find_item_at_angle(wedges: Sequence[Wedge], angle: float) -> Optional[int]:
    """Index of the wedge containing *angle*, or ``None`` (parent gap)."""
    angle = normalize_angle(check_angle(angle, "pointer angle"))
    for index, wedge in enumerate(wedges):
        if is_angle_between(angle, wedge.start, wedge.end):
            return index
    return None
