"""pielayout — angular layout engine for pie menus.

Public API is organised into layers:

- **Core** — models, angle primitives, angle assignment, wedges
- **Drag and drop** — drop gaps and drop index resolution
- **Menu trees** — layout of a whole menu hierarchy, JSON I/O
- **Diagnostics** — layout quality checks and reports
- **Rendering** — PNG preview (requires matplotlib)
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import DragLayout, LayoutInputError, LayoutNode, MenuItem, Wedge
from .config import DEFAULT_LAYOUT, LayoutConfig
from .geometry import (
    add,
    get_angle,
    get_direction,
    get_distance,
    get_length,
    is_angle_between,
    normalize_angle,
    subtract,
    to_degrees,
    to_radians,
)
from .angles import assign_angles, nudge_parent_collisions, prune_fixed_angles
from .wedges import compute_wedges, find_item_at_angle

# ── Drag and drop ───────────────────────────────────────────────────
from .dnd import assign_angles_for_drag, compute_drop_index, drop_zone_boundaries

# ── Menu trees ──────────────────────────────────────────────────────
from .menu import find_node, iter_layout, layout_menu
from .io import (
    layout_to_dict,
    load_menu,
    menu_from_dict,
    menu_to_dict,
    save_layout,
    save_menu,
    validate_menu_payload,
)

# ── Diagnostics ─────────────────────────────────────────────────────
from .diagnostics import (
    diagnostics_report,
    level_quality_gates,
    min_angular_spacing,
    wedge_coverage,
    wedge_widths,
)

# ── Rendering (requires matplotlib) ────────────────────────────────
from .render import render_png

__all__ = [
    # Core
    "DragLayout",
    "LayoutInputError",
    "LayoutNode",
    "MenuItem",
    "Wedge",
    "DEFAULT_LAYOUT",
    "LayoutConfig",
    "add",
    "get_angle",
    "get_direction",
    "get_distance",
    "get_length",
    "is_angle_between",
    "normalize_angle",
    "subtract",
    "to_degrees",
    "to_radians",
    "assign_angles",
    "nudge_parent_collisions",
    "prune_fixed_angles",
    "compute_wedges",
    "find_item_at_angle",
    # Drag and drop
    "assign_angles_for_drag",
    "compute_drop_index",
    "drop_zone_boundaries",
    # Menu trees
    "find_node",
    "iter_layout",
    "layout_menu",
    "layout_to_dict",
    "load_menu",
    "menu_from_dict",
    "menu_to_dict",
    "save_layout",
    "save_menu",
    "validate_menu_payload",
    # Diagnostics
    "diagnostics_report",
    "level_quality_gates",
    "min_angular_spacing",
    "wedge_coverage",
    "wedge_widths",
    # Rendering
    "render_png",
]
