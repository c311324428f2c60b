"""pielayout command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_LAYOUT
from .io import load_menu, save_layout
from .models import LayoutInputError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pie menu layout CLI")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    layout = sub.add_parser("layout", help="Compute angles and wedges for a menu")
    layout.add_argument("--in", dest="input_path", required=True)
    layout.add_argument("--out", dest="output_path", required=True)

    render = sub.add_parser("render", help="Render one menu level to PNG")
    render.add_argument("--in", dest="input_path", required=True)
    render.add_argument("--out", dest="output_path", required=True)
    render.add_argument("--path", default="", help="Submenu path as child indices, e.g. 0/2")
    render.add_argument("--dpi", type=int, default=150)

    diagnose = sub.add_parser("diagnose", help="Check layout quality of a menu")
    diagnose.add_argument("--in", dest="input_path", required=True)
    diagnose.add_argument("--json", dest="json_path")
    diagnose.add_argument("--min-spacing", type=float, default=DEFAULT_LAYOUT.min_spacing_deg)
    diagnose.add_argument("--strict", action="store_true", help="Exit 1 if a gate fails")

    drop = sub.add_parser("drop-index", help="Insertion index for a pointer angle")
    drop.add_argument("--angles", type=float, nargs="*", default=[])
    drop.add_argument("--pointer", type=float, required=True)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "layout":
            _cmd_layout(args)

        elif args.command == "render":
            _cmd_render(args)

        elif args.command == "diagnose":
            _cmd_diagnose(args)

        elif args.command == "drop-index":
            _cmd_drop_index(args)
    except (LayoutInputError, OSError) as exc:
        print(exc)
        raise SystemExit(1)


def _cmd_layout(args) -> None:
    from .menu import layout_menu

    layout = layout_menu(load_menu(args.input_path))
    save_layout(layout, args.output_path)
    print(f"Saved {args.output_path}")


def _cmd_render(args) -> None:
    from .menu import find_node, layout_menu, parse_path
    from .render import render_png

    layout = layout_menu(load_menu(args.input_path))
    try:
        node = find_node(layout, parse_path(args.path))
    except (KeyError, ValueError) as exc:
        print(f"Invalid path {args.path!r}: {exc}")
        raise SystemExit(1)
    render_png(node, args.output_path, dpi=args.dpi, title=node.name)
    print(f"Saved {args.output_path}")


def _cmd_diagnose(args) -> None:
    from .diagnostics import diagnostics_report
    from .menu import layout_menu

    layout = layout_menu(load_menu(args.input_path))
    report = diagnostics_report(layout, min_spacing_deg=args.min_spacing)

    for key, level in report["levels"].items():
        quality = level["quality"]
        lines = [
            f"level {key or '<root>'} ({level['name']}):",
            f"  items: {quality['item_count']}",
            f"  min_spacing: {quality['min_spacing']:.2f} "
            f"(target {quality['min_spacing_target']:.2f}) ok={quality['spacing_ok']}",
            f"  min_wedge_width: {quality['min_wedge_width']:.2f} ok={quality['widths_ok']}",
            f"  coverage: {quality['coverage']:.2f}",
        ]
        for line in lines:
            print(line)
    print(f"passed: {report['passed']}")

    if args.json_path:
        Path(args.json_path).write_text(json.dumps(report, indent=2), encoding="utf-8")
    if args.strict and not report["passed"]:
        raise SystemExit(1)


def _cmd_drop_index(args) -> None:
    from .dnd import compute_drop_index

    print(compute_drop_index(args.angles, args.pointer))


if __name__ == "__main__":
    main()
