"""Drag-and-drop support for reordering menu items.

- :func:`assign_angles_for_drag` — item angles with a gap for a pending drop
- :func:`compute_drop_index` — insertion slot indicated by a pointer angle
- :func:`drop_zone_boundaries` — shared zone boundaries behind it
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from typing import Any, List, Optional, Sequence

from .angles import assign_angles
from .config import LayoutConfig
from .geometry import check_angle, normalize_angle
from .models import DragLayout, LayoutInputError

logger = logging.getLogger(__name__)


def assign_angles_for_drag(
    items: Sequence[Any],
    parent_angle: Optional[float] = None,
    drop_index: Optional[int] = None,
    config: Optional[LayoutConfig] = None,
) -> DragLayout:
    """Like :func:`assign_angles`, but leave room for a to-be-dropped item.

    If *drop_index* is given, an unfixed placeholder is inserted there
    before the angles are computed. Its angle is removed from the result
    and returned separately as ``drop_angle``. *items* is never modified.
    """
    if drop_index is None:
        return DragLayout(angles=assign_angles(items, parent_angle, config))

    if isinstance(drop_index, bool) or not isinstance(drop_index, int):
        raise LayoutInputError(f"drop index must be an integer, got {drop_index!r}")
    if not 0 <= drop_index <= len(items):
        raise LayoutInputError(
            f"drop index {drop_index} out of range for {len(items)} items"
        )

    augmented = list(items)
    augmented.insert(drop_index, None)
    angles = assign_angles(augmented, parent_angle, config)
    drop_angle = angles.pop(drop_index)
    return DragLayout(angles=angles, drop_angle=drop_angle)


def drop_zone_boundaries(angles: Sequence[float]) -> List[float]:
    """Upper boundaries of the drop zones of *angles*, unwrapped.

    *angles* must be in circular order. They are unwrapped into an
    increasing run shorter than one full turn and zone ``i`` ends halfway
    between item ``i`` and item ``i + 1``. Each boundary is computed once
    and shared by the two zones it separates, so the zones tile the
    circle without gaps.
    """
    unwrapped: List[float] = []
    for angle in angles:
        if unwrapped:
            while angle < unwrapped[-1]:
                angle += 360.0
        unwrapped.append(angle)
    if unwrapped and unwrapped[-1] - unwrapped[0] >= 360.0:
        logger.warning("angles %s are not in circular order", list(angles))
        raise LayoutInputError(
            f"angles must be in circular order to compute drop zones, got {list(angles)}"
        )

    n = len(unwrapped)
    boundaries = [(unwrapped[i] + unwrapped[i + 1]) / 2.0 for i in range(n - 1)]
    boundaries.append((unwrapped[-1] + unwrapped[0] + 360.0) / 2.0)
    return boundaries


def compute_drop_index(angles: Sequence[float], pointer_angle: float) -> int:
    """Insertion index in ``[0, N]`` indicated by *pointer_angle*.

    Each item owns a drop zone centred on its angle that reaches halfway
    to both neighbours. Pointing into the zone of item ``i`` means
    "insert before item ``i``". A pointer exactly on a boundary belongs
    to the earlier zone.
    """
    pointer = normalize_angle(check_angle(pointer_angle, "pointer angle"))
    item_angles = [normalize_angle(check_angle(a, f"angle {i}")) for i, a in enumerate(angles)]
    n = len(item_angles)

    if n == 0:
        return 0

    if n == 1:
        delta = pointer - item_angles[0]
        return 0 if delta < 90.0 or delta > 270.0 else 1

    boundaries = drop_zone_boundaries(item_angles)

    # The zones cover (boundaries[-1] - 360, boundaries[-1]].
    last = boundaries[-1]
    if pointer > last:
        pointer -= 360.0
    elif pointer <= last - 360.0:
        pointer += 360.0
    return min(bisect_left(boundaries, pointer), n - 1)
