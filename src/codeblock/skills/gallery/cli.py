"""CLI subcommand registration for the /gallery skill."""

from __future__ import annotations

import argparse
from typing import Any

from codeblock.skills.highlight.renderer import FORMATS


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``gallery`` subcommand and its sub-actions."""
    gal = subparsers.add_parser("gallery", help="Browse the example snippets")
    gal_sub = gal.add_subparsers(dest="action")

    # --- gallery list ---
    gl = gal_sub.add_parser("list", help="List example snippets")
    gl.add_argument("--section", default=None, help="Only list one section")

    # --- gallery show ---
    gs = gal_sub.add_parser("show", help="Show a highlighted example snippet")
    gs.add_argument("name", help="Snippet name or title, e.g. state or @State")
    gs.add_argument(
        "--format",
        dest="fmt",
        choices=FORMATS,
        default="html",
        help="Output format (default: html)",
    )
    gs.add_argument(
        "--style",
        default="codeblock",
        help="Pygments style name (default: codeblock)",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate gallery action."""
    from codeblock.errors import CodeblockError
    from codeblock.skills.gallery import list_snippets, show

    if args.action == "list":
        return list_snippets(args.section)

    if args.action == "show":
        try:
            return show(args.name, fmt=args.fmt, style=args.style)
        except CodeblockError as e:
            return {"error": str(e)}

    return {"error": f"Unknown gallery action: {args.action}"}
