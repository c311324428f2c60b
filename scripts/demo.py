import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from pielayout.dnd import assign_angles_for_drag, compute_drop_index
from pielayout.io import load_menu
from pielayout.menu import iter_layout, layout_menu


def main() -> None:
    root = load_menu(ROOT / "examples" / "demo_menu.json")
    layout = layout_menu(root)

    for path, node in iter_layout(layout):
        if node.angle is None:
            continue
        indent = "  " * (len(path) - 1)
        print(
            f"{indent}{node.name}: {node.angle:7.2f}° "
            f"wedge [{node.wedge.start:7.2f}, {node.wedge.end:7.2f}]"
        )

    angles = layout.child_angles()
    pointer = 60.0
    drop_index = compute_drop_index(angles, pointer)
    drag = assign_angles_for_drag(root.children, drop_index=drop_index)
    print(f"Pointer at {pointer}° drops at index {drop_index}, angle {drag.drop_angle:.2f}°")


if __name__ == "__main__":
    main()
