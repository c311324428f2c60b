from __future__ import annotations

from pathlib import Path
from typing import Optional

from .geometry import get_direction
from .models import LayoutNode


def render_png(
    node: LayoutNode,
    output_path: str | Path,
    radius: float = 1.0,
    item_color: str = "#5aa9e6",
    separator_color: str = "#2b2b2b",
    parent_color: str = "#d1495b",
    item_size: float = 220.0,
    padding: float = 0.4,
    dpi: int = 150,
    title: Optional[str] = None,
) -> None:
    """Render one menu level (the children of *node*) to PNG.

    Items are placed with :func:`get_direction`, so 0° is at the top.
    Requires matplotlib; imported lazily to keep core package lightweight.
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Circle
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    fig, ax = plt.subplots()

    ax.add_patch(Circle((0.0, 0.0), radius, fill=False, edgecolor="#bbbbbb", linewidth=1.0))
    ax.scatter([0.0], [0.0], s=item_size, c=separator_color, zorder=3)
    ax.text(0.0, 0.0, node.name, ha="center", va="center", color="white", fontsize=6, zorder=4)

    for child in node.children:
        if child.wedge is not None:
            x, y = get_direction(child.wedge.start, radius * 1.2)
            ax.plot([0.0, x], [0.0, y], color=separator_color, linewidth=0.8)

    parent_angle = node.children[0].parent_angle if node.children else None
    if parent_angle is not None:
        x, y = get_direction(parent_angle, radius * 1.2)
        ax.plot([0.0, x], [0.0, y], color=parent_color, linewidth=1.2, linestyle=(0, (3, 3)))

    for child in node.children:
        x, y = get_direction(child.angle, radius)
        ax.scatter([x], [y], s=item_size, c=item_color, zorder=3)
        lx, ly = get_direction(child.angle, radius + padding * 0.6)
        ax.text(lx, ly, child.name, ha="center", va="center", fontsize=7)

    extent = radius * 1.2 + padding
    ax.set_aspect("equal", "box")
    ax.set_xlim(-extent, extent)
    # Screen coordinates: y grows downwards.
    ax.set_ylim(extent, -extent)
    ax.axis("off")
    if title:
        ax.set_title(title)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)
