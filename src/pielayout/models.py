from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


class LayoutInputError(ValueError):
    """Raised for malformed layout input (non-finite angles, bad indices)."""


@dataclass(frozen=True)
class MenuItem:
    """One entry of a menu tree.

    *angle* is an optional fixed direction in degrees (0° up, 90° right).
    Items with *children* are submenus.
    """

    name: str
    angle: Optional[float] = None
    icon: Optional[str] = None
    children: tuple["MenuItem", ...] = field(default_factory=tuple)

    def is_submenu(self) -> bool:
        return bool(self.children)


@dataclass(frozen=True)
class Wedge:
    """Angular interval ``(start, end]`` used for hit-testing.

    ``start < end`` always holds, so *start* may be negative and *end*
    may exceed 360.
    """

    start: float
    end: float

    @property
    def width(self) -> float:
        return self.end - self.start

    @property
    def center(self) -> float:
        return (self.start + self.end) / 2.0


@dataclass(frozen=True)
class DragLayout:
    angles: List[float]
    drop_angle: Optional[float] = None


@dataclass
class LayoutNode:
    """A menu item together with its computed placement.

    *angle* and *wedge* are ``None`` for the root, which sits in the
    center. *parent_angle* is the direction from this node's center
    back towards its parent and is reserved when laying out its children.
    """

    name: str
    icon: Optional[str] = None
    angle: Optional[float] = None
    parent_angle: Optional[float] = None
    wedge: Optional[Wedge] = None
    children: List["LayoutNode"] = field(default_factory=list)

    def child_angles(self) -> List[float]:
        return [child.angle for child in self.children]

    def child_wedges(self) -> List[Wedge]:
        return [child.wedge for child in self.children]

    def item_at(self, pointer_angle: float) -> Optional[int]:
        """Index of the child whose wedge contains *pointer_angle*.

        Returns ``None`` when the pointer is in the gap reserved for the
        parent link, or when the node has no children.
        """
        from .wedges import find_item_at_angle

        return find_item_at_angle(self.child_wedges(), pointer_angle)
