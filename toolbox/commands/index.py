"""Entry point for tools-index.

Scans a directory for README.md files with name/purpose front matter and
prints (or writes) a Markdown table of the tools found. With --just a
justfile with install recipes for Bun tools is written as well.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from toolbox.data import emit, generate_manifest, render, scan
from toolbox.utils.cli import UsageParser


def build_parser() -> UsageParser:
    parser = UsageParser(
        prog="tools-index",
        description="Generate a Markdown index of tools from README front matter.",
    )
    parser.add_argument("directory", help="directory to scan for README.md files")
    parser.add_argument("output", nargs="?", help="file to write the index to (default: stdout)")
    parser.add_argument("--just", action="store_true",
                        help="also write a justfile next to the index")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run tools-index. Returns the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    root = Path(args.directory)
    if not root.is_dir():
        parser.error(f"'{args.directory}' is not a directory")

    print(f"Scanning {root} for tools...", file=sys.stderr)
    tools = scan(root)
    print(f"Found {len(tools)} tools", file=sys.stderr)

    destination = Path(args.output) if args.output else None
    emit(render(tools), destination)

    if args.just:
        output_dir = destination.parent if destination is not None else Path.cwd()
        generate_manifest(tools, output_dir, root, output=destination)

    return 0


if __name__ == "__main__":
    sys.exit(main())
