"""CLI entry point for codeblock skills."""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="codeblock",
        description="Regex-overlay syntax highlighting for example code snippets",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    sub = parser.add_subparsers(dest="command")

    # --- Register skill subcommands ---
    from codeblock.skills.highlight.cli import register as register_highlight
    from codeblock.skills.gallery.cli import register as register_gallery

    register_highlight(sub)
    register_gallery(sub)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 1

    # Skill subcommands with two-level dispatch
    skill_dispatch = {
        "highlight": "codeblock.skills.highlight.cli",
        "gallery": "codeblock.skills.gallery.cli",
    }

    if args.command in skill_dispatch:
        # Check if action was provided
        if not getattr(args, "action", None):
            # Re-parse to show skill-specific help
            parser.parse_args([args.command, "--help"])
            return 1

        cli_mod = importlib.import_module(skill_dispatch[args.command])
        result = cli_mod.run(args)
        json.dump(result, sys.stdout, indent=2)
        print()
        return 1 if "error" in result else 0

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
