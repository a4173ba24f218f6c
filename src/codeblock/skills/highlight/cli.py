"""CLI subcommand registration for the /highlight skill."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from codeblock.lang import language_names
from codeblock.skills.highlight.renderer import FORMATS


def _add_render_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=FORMATS,
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument(
        "--style",
        default="codeblock",
        help="Pygments style name (default: codeblock)",
    )


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``highlight`` subcommand and its sub-actions."""
    hl = subparsers.add_parser("highlight", help="Syntax-highlight code snippets")
    hl_sub = hl.add_subparsers(dest="action")

    # --- highlight snippet ---
    hs = hl_sub.add_parser("snippet", help="Highlight a code string")
    hs.add_argument(
        "code", nargs="?", default=None, help="Code to highlight (stdin if omitted)"
    )
    hs.add_argument(
        "--language",
        default="swift",
        help=f"Source language: {', '.join(language_names())} (default: swift)",
    )
    _add_render_options(hs)

    # --- highlight file ---
    hf = hl_sub.add_parser("file", help="Highlight a source file")
    hf.add_argument("path", help="Path to the source file")
    hf.add_argument(
        "--language",
        default=None,
        help="Source language (detected from the extension if omitted)",
    )
    _add_render_options(hf)


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate highlight action."""
    from codeblock.errors import CodeblockError
    from codeblock.skills.highlight import highlight_file, highlight_snippet

    try:
        if args.action == "snippet":
            code = args.code if args.code is not None else sys.stdin.read()
            return highlight_snippet(
                code,
                language=args.language,
                fmt=args.fmt,
                style=args.style,
            )

        if args.action == "file":
            return highlight_file(
                args.path,
                language=args.language,
                fmt=args.fmt,
                style=args.style,
            )
    except FileNotFoundError:
        return {"error": f"File not found: {args.path}"}
    except OSError as e:
        return {"error": f"Cannot read {args.path}: {e.strerror}"}
    except CodeblockError as e:
        return {"error": str(e)}

    return {"error": f"Unknown highlight action: {args.action}"}
