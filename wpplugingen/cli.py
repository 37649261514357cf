"""Command line interface."""

from __future__ import annotations

import argparse
import subprocess
import sys

from .generator import generate_plugin

VERSION_TEXT = "WP Plugin Generator v0.1.0 -- HEAD"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wp-plugin-generator", description="A WordPress plugin generator"
    )
    export_help = "Export directory for the generated plugin"
    parser.add_argument("--export-dir", default=".", help=export_help)
    commands = parser.add_subparsers(dest="command")

    generate = commands.add_parser(
        "generate", help="Generate the WordPress plugin boilercode."
    )
    generate.add_argument("project_name", metavar="company/project-name")
    generate.add_argument("--export-dir", default=argparse.SUPPRESS, help=export_help)

    version = commands.add_parser(
        "version", help="Print the version number of WP Plugin Generator"
    )
    version.add_argument("--export-dir", default=argparse.SUPPRESS, help=export_help)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        print(VERSION_TEXT)
        return 0
    if args.command == "generate":
        try:
            generate_plugin(args.export_dir, args.project_name)
        except (ValueError, OSError, subprocess.CalledProcessError) as exc:
            print(f"Error generating plugin: {exc}", file=sys.stderr)
            return 1
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())