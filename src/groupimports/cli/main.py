"""groupimports CLI entry point — argument parsing and command dispatch.

Usage::

    groupimports check src/ [--format json] [--config .groupimports.yaml]
    groupimports fix src/App.js
    groupimports groups
    groupimports classify react modules/utilities components/Button

Strings and exit codes come from the central config module.
"""

from __future__ import annotations

import argparse
import sys

from groupimports import __version__
from groupimports.cli.commands import cmd_check, cmd_classify, cmd_fix, cmd_groups
from groupimports.exceptions import GroupImportsError
from groupimports.lib import config


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse tree, one sub-parser per subcommand."""
    prog = config.get_str("cli.prog_name")
    fmt_stderr = config.get_str("formats.stderr")
    fmt_json = config.get_str("formats.json")

    parser = argparse.ArgumentParser(prog=prog, description=config.get_str("cli.description"))
    parser.add_argument("--version", action="version", version=f"{prog} {__version__}")
    parser.add_argument("--config", help="Path to a .groupimports.yaml project file")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sub_check = subparsers.add_parser("check", help="Report misordered imports")
    sub_check.add_argument("files", nargs="+", help="Files or directories to check")
    sub_check.add_argument(
        "--format", choices=[fmt_stderr, fmt_json], default=fmt_stderr, help="Output format"
    )

    sub_fix = subparsers.add_parser("fix", help="Reorder imports in place")
    sub_fix.add_argument("files", nargs="+", help="Files or directories to fix")

    subparsers.add_parser("groups", help="Show the effective pattern groups")

    sub_classify = subparsers.add_parser(
        "classify", help="Show the group and pattern a module path falls into"
    )
    sub_classify.add_argument("paths", nargs="+", help="Module specifiers to classify")

    return parser


def main() -> None:
    """Parse arguments and dispatch to the matching command handler."""
    parser = build_parser()
    args = parser.parse_args()

    dispatch = {
        "check": cmd_check,
        "fix": cmd_fix,
        "groups": cmd_groups,
        "classify": cmd_classify,
    }

    handler = dispatch.get(args.command)
    if not handler:
        parser.print_help()
        return

    try:
        code = handler(args)
    except (GroupImportsError, OSError) as exc:
        sys.stderr.write(f"  {exc}\n")
        code = config.get_int("exit_codes.error")
    sys.exit(code)


if __name__ == "__main__":
    main()
