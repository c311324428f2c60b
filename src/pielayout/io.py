"""JSON reading and writing of menu trees and computed layouts.

Functions
---------
- :func:`menu_from_dict` / :func:`menu_to_dict` — menu tree payloads
- :func:`layout_to_dict` — computed layout payload
- :func:`load_menu` / :func:`save_menu` / :func:`save_layout` — files
- :func:`validate_menu_payload` — lightweight structural check
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .geometry import check_angle
from .models import LayoutInputError, LayoutNode, MenuItem, Wedge

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

FORMAT_VERSION = "1.0"


def validate_menu_payload(payload: Dict[str, Any]) -> List[str]:
    """Validate a menu payload against the expected structure.

    Returns a list of error messages (empty = valid).

    This is a lightweight structural validator, not a full JSON Schema
    check. Use ``schemas/menu.schema.json`` with ``jsonschema`` for
    formal validation.
    """
    errors: List[str] = []
    if not isinstance(payload, dict):
        return ["payload must be an object"]
    if "root" not in payload:
        return ["Missing top-level key: root"]

    stack = [("root", payload["root"])]
    while stack:
        where, item = stack.pop()
        if not isinstance(item, dict):
            errors.append(f"{where}: item must be an object")
            continue
        if not isinstance(item.get("name"), str):
            errors.append(f"{where}: missing 'name'")
        angle = item.get("angle")
        if angle is not None:
            try:
                check_angle(angle)
            except LayoutInputError as exc:
                errors.append(f"{where}: {exc}")
        icon = item.get("icon")
        if icon is not None and not isinstance(icon, str):
            errors.append(f"{where}: 'icon' must be a string")
        children = item.get("children", [])
        if not isinstance(children, list):
            errors.append(f"{where}: 'children' must be a list")
            continue
        for index in reversed(range(len(children))):
            stack.append((f"{where}/{index}", children[index]))

    return errors


def menu_from_dict(payload: Dict[str, Any]) -> MenuItem:
    errors = validate_menu_payload(payload)
    if errors:
        raise LayoutInputError("invalid menu payload:\n" + "\n".join(errors))
    return _item_from_dict(payload["root"])


def _item_from_dict(data: Dict[str, Any]) -> MenuItem:
    angle = data.get("angle")
    return MenuItem(
        name=data["name"],
        angle=float(angle) if angle is not None else None,
        icon=data.get("icon"),
        children=tuple(_item_from_dict(child) for child in data.get("children", [])),
    )


def menu_to_dict(root: MenuItem) -> Dict[str, Any]:
    return {"version": FORMAT_VERSION, "root": _item_to_dict(root)}


def _item_to_dict(item: MenuItem) -> Dict[str, Any]:
    data: Dict[str, Any] = {"name": item.name}
    if item.icon is not None:
        data["icon"] = item.icon
    if item.angle is not None:
        data["angle"] = item.angle
    if item.children:
        data["children"] = [_item_to_dict(child) for child in item.children]
    return data


def layout_to_dict(root: LayoutNode) -> Dict[str, Any]:
    return {"version": FORMAT_VERSION, "root": _node_to_dict(root)}


def _node_to_dict(node: LayoutNode) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "name": node.name,
        "angle": node.angle,
        "parent_angle": node.parent_angle,
        "wedge": _wedge_to_dict(node.wedge),
        "children": [_node_to_dict(child) for child in node.children],
    }
    if node.icon is not None:
        data["icon"] = node.icon
    return data


def _wedge_to_dict(wedge: Wedge | None) -> Dict[str, float] | None:
    if wedge is None:
        return None
    return {"start": wedge.start, "end": wedge.end}


def load_menu(path: PathLike) -> MenuItem:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise LayoutInputError(f"cannot read menu file {path}: {exc.strerror or exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LayoutInputError(f"menu file {path} is not valid JSON: {exc}") from exc
    logger.debug("loaded menu payload from %s", path)
    return menu_from_dict(data)


def save_menu(root: MenuItem, path: PathLike, indent: int = 2) -> Path:
    return _write_json(menu_to_dict(root), path, indent)


def save_layout(root: LayoutNode, path: PathLike, indent: int = 2) -> Path:
    return _write_json(layout_to_dict(root), path, indent)


def _write_json(payload: Dict[str, Any], path: PathLike, indent: int) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(payload, indent=indent), encoding="utf-8")
    logger.debug("wrote %s", out)
    return out
