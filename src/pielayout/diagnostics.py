from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .config import DEFAULT_LAYOUT, LayoutConfig
from .geometry import normalize_angle
from .menu import iter_layout
from .models import LayoutNode, Wedge
from .wedges import compute_wedges


def wedge_widths(wedges: Sequence[Wedge]) -> List[float]:
    return [wedge.end - wedge.start for wedge in wedges]


def wedge_coverage(wedges: Sequence[Wedge]) -> float:
    """Total angular span of *wedges*.

    This is 360° for a level without a parent link and less than that
    when a gap towards the parent is left open.
    """
    return sum(wedge_widths(wedges))


def min_angular_spacing(
    angles: Sequence[float],
    parent_angle: Optional[float] = None,
) -> float:
    """Smallest circular gap between neighbouring angles, parent included.

    Returns 360 if fewer than two directions are present.
    """
    directions = sorted(normalize_angle(a) for a in angles)
    if parent_angle is not None:
        directions = sorted(directions + [normalize_angle(parent_angle)])
    if len(directions) < 2:
        return 360.0
    gaps = [b - a for a, b in zip(directions, directions[1:])]
    gaps.append(directions[0] + 360.0 - directions[-1])
    return min(gaps)


def level_quality_gates(
    angles: Sequence[float],
    parent_angle: Optional[float] = None,
    min_spacing_deg: Optional[float] = None,
    config: Optional[LayoutConfig] = None,
) -> Dict[str, float | bool]:
    """Return quality metrics and pass/fail flags for one menu level.

    Spacing compares the closest pair of directions against
    *min_spacing_deg*, which defaults to ``config.min_spacing_deg``.
    Wedges must never have a negative width.
    """
    if min_spacing_deg is None:
        min_spacing_deg = (config or DEFAULT_LAYOUT).min_spacing_deg
    wedges = compute_wedges(angles, parent_angle)
    widths = wedge_widths(wedges)
    spacing = min_angular_spacing(angles, parent_angle)

    spacing_ok = spacing >= min_spacing_deg
    widths_ok = all(width >= 0.0 for width in widths)

    return {
        "item_count": len(angles),
        "min_spacing": spacing,
        "min_spacing_target": min_spacing_deg,
        "min_wedge_width": min(widths) if widths else 0.0,
        "coverage": wedge_coverage(wedges),
        "spacing_ok": spacing_ok,
        "widths_ok": widths_ok,
        "passed": spacing_ok and widths_ok,
    }


def diagnostics_report(
    layout: LayoutNode,
    min_spacing_deg: Optional[float] = None,
    config: Optional[LayoutConfig] = None,
) -> Dict[str, object]:
    """Build a structured diagnostics report suitable for JSON export.

    Levels are keyed by the slash-separated child-index path of the
    submenu they belong to (``""`` for the root).
    """
    levels: Dict[str, object] = {}
    passed = True
    for path, node in iter_layout(layout):
        if not node.children:
            continue
        parent_angle = node.children[0].parent_angle
        quality = level_quality_gates(
            node.child_angles(),
            parent_angle,
            min_spacing_deg=min_spacing_deg,
            config=config,
        )
        passed = passed and bool(quality["passed"])
        levels["/".join(str(i) for i in path)] = {
            "name": node.name,
            "parent_angle": parent_angle,
            "angles": node.child_angles(),
            "quality": quality,
        }

    return {
        "level_count": len(levels),
        "passed": passed,
        "levels": levels,
    }
