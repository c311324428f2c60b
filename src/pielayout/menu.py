"""Layout of a whole menu tree.

The root item sits in the center of the menu. Its children are placed
around it without a parent gap. Every deeper level reserves space in
the direction pointing back to its parent, i.e. opposite to the angle
of the submenu item itself.

Usage
-----
>>> from pielayout.menu import layout_menu
>>> layout = layout_menu(root)
>>> layout.children[0].angle
0.0
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from .angles import assign_angles
from .config import LayoutConfig
from .geometry import normalize_angle
from .models import LayoutNode, MenuItem
from .wedges import compute_wedges

logger = logging.getLogger(__name__)

NodePath = Tuple[int, ...]


def parent_angle_for(angle: Optional[float]) -> Optional[float]:
    """Direction back to the parent for the children of an item at *angle*."""
    if angle is None:
        return None
    return normalize_angle(angle + 180.0)


def layout_menu(root: MenuItem, config: Optional[LayoutConfig] = None) -> LayoutNode:
    """Assign angles and wedges to every item below *root*.

    The tree is walked with an explicit stack, so deep nesting does not
    hit the recursion limit.
    """
    root_node = LayoutNode(name=root.name, icon=root.icon)
    stack: List[Tuple[MenuItem, LayoutNode]] = [(root, root_node)]
    levels = 0

    while stack:
        item, node = stack.pop()
        if not item.children:
            continue

        parent_angle = parent_angle_for(node.angle)
        angles = assign_angles(item.children, parent_angle, config)
        wedges = compute_wedges(angles, parent_angle)
        levels += 1

        for child, angle, wedge in zip(item.children, angles, wedges):
            child_node = LayoutNode(
                name=child.name,
                icon=child.icon,
                angle=angle,
                parent_angle=parent_angle,
                wedge=wedge,
            )
            node.children.append(child_node)
            stack.append((child, child_node))

    logger.debug("laid out %d menu levels below %r", levels, root.name)
    return root_node


def iter_layout(node: LayoutNode, path: NodePath = ()) -> Iterator[Tuple[NodePath, LayoutNode]]:
    """Yield ``(path, node)`` pairs depth first, starting with *node*.

    *path* is the tuple of child indices leading from the start node.
    """
    stack: List[Tuple[NodePath, LayoutNode]] = [(path, node)]
    while stack:
        current_path, current = stack.pop()
        yield current_path, current
        for index in reversed(range(len(current.children))):
            stack.append((current_path + (index,), current.children[index]))


def find_node(root: LayoutNode, path: NodePath) -> LayoutNode:
    """Follow *path* (child indices) from *root*; raise ``KeyError`` if invalid."""
    node = root
    for depth, index in enumerate(path):
        if not 0 <= index < len(node.children):
            raise KeyError(f"no child {index} at depth {depth} below {node.name!r}")
        node = node.children[index]
    return node


def parse_path(text: str) -> NodePath:
    """Parse ``"0/2/1"`` into ``(0, 2, 1)``; an empty string is the root."""
    text = text.strip().strip("/")
    if not text:
        return ()
    return tuple(int(part) for part in text.split("/"))
