#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from cdepgraph.__version__ import __version__
from cdepgraph.interfaces.cli.commands.modules_cli import cmd_modules
from cdepgraph.interfaces.cli.commands.render_cli import cmd_render


def _add_input_arguments(s: argparse.ArgumentParser) -> None:
    source = s.add_mutually_exclusive_group(required=True)
    source.add_argument("-s", "--file", help="process a single DOT file")
    source.add_argument("-d", "--directory", help="process every DOT file in a directory")
    s.add_argument("-r", "--recursive", action="store_true", help="descend into subdirectories with -d")
    s.add_argument("-v", "--verbose", action="count", default=0, help="more log output (repeat for debug)")
    s.add_argument("-q", "--quiet", action="count", default=0, help="less log output")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="cdepgraph",
        description="cdepgraph - Module dependency graphs from C call-graph DOT files",
        epilog="Examples:\n"
        "  cdepgraph render -d html/ -o deps.dot              # Whole project\n"
        "  cdepgraph render -s adc_8c_cgraph.dot              # Single call graph\n"
        "  cdepgraph render -d html/ --include BMS CONT       # Only two modules\n"
        "  cdepgraph render -d html/ --private BMS            # Show BMS private functions\n"
        "  cdepgraph modules -d html/                         # List detected modules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'cdepgraph <command> --help' for command-specific help)",
    )

    # render: Parse and write the restructured graph
    s = sub.add_parser("render", help="Write a module-grouped dependency graph")
    _add_input_arguments(s)
    s.add_argument("-o", "--output", help="output DOT file (default: out.dot)")
    s.add_argument("--include", nargs="+", metavar="PREFIX", help="only render these modules")
    s.add_argument("--private", nargs="+", metavar="PREFIX", help="also render private functions of these modules")
    s.add_argument("--graph-template", help="path to the graph template")
    s.add_argument("--subgraph-template", help="path to the subgraph template")
    s.set_defaults(func=cmd_render)

    # modules: Summarise detected modules
    s = sub.add_parser("modules", help="List modules and their function counts")
    _add_input_arguments(s)
    s.set_defaults(func=cmd_modules)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
