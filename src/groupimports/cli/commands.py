"""commands — handlers for the groupimports subcommands.

Each handler takes the parsed argparse namespace and returns the process
exit code; ``cli.main`` does the ``sys.exit``.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Iterator

from groupimports.engine import lint_file
from groupimports.exceptions import GroupImportsError
from groupimports.lib import config
from groupimports.lib.formatter import colorize, format_summary_stderr
from groupimports.lib.project import resolve_project_config
from groupimports.lib.weights import locate


def iter_source_files(paths: list[str]) -> Iterator[Path]:
    """Yield files named directly plus module files found under directories."""
    extensions = tuple(config.get_list("files.extensions"))
    skip = set(config.get_list("files.skip_directories"))
    for raw in paths:
        path = Path(raw)
        if not path.is_dir():
            yield path
            continue
        for root, dirs, files in os.walk(path):
            dirs[:] = sorted(d for d in dirs if d not in skip)
            for name in sorted(files):
                if name.endswith(extensions):
                    yield Path(root) / name


def _lint_paths(args: argparse.Namespace, *, fix: bool) -> int:
    exit_ok = config.get_int("exit_codes.ok")
    exit_violations = config.get_int("exit_codes.violations")
    exit_error = config.get_int("exit_codes.error")
    rejected_status = config.get_str("statuses.rejected")

    checked = 0
    rejected = 0
    errored = False
    for path in iter_source_files(args.files):
        try:
            project = resolve_project_config(path, args.config)
            result = lint_file(
                path,
                project=project,
                fix=fix,
                output_format=getattr(args, "format", ""),
            )
        except (GroupImportsError, OSError) as exc:
            sys.stderr.write(f"  {exc}\n")
            errored = True
            continue
        checked += 1
        if result.status == rejected_status:
            rejected += 1

    if getattr(args, "format", "") != config.get_str("formats.json"):
        sys.stderr.write(format_summary_stderr(checked, rejected) + "\n")

    if errored:
        return exit_error
    return exit_violations if rejected else exit_ok


def cmd_check(args: argparse.Namespace) -> int:
    """Report misordered import blocks without touching files."""
    return _lint_paths(args, fix=False)


def cmd_fix(args: argparse.Namespace) -> int:
    """Rewrite misordered import blocks in place where it is safe."""
    return _lint_paths(args, fix=True)


def cmd_groups(args: argparse.Namespace) -> int:
    """Print the effective pattern groups in priority order."""
    project = resolve_project_config(Path.cwd(), args.config)
    header = config.get_str("formatting.group_header")
    if project.path is not None:
        print(colorize(str(project.path), "file_path", stream=sys.stdout))
    for gi, group in enumerate(project.configuration.groups):
        print(colorize(header.format(index=gi), "fix", stream=sys.stdout))
        for pi, pattern in enumerate(group):
            print(f"  {pi}: {pattern}")
    print(f"unmatched: {project.configuration.unmatched}")
    return config.get_int("exit_codes.ok")


def cmd_classify(args: argparse.Namespace) -> int:
    """Show which group and pattern each module path falls into."""
    project = resolve_project_config(Path.cwd(), args.config)
    configuration = project.configuration
    matched_tpl = config.get_str("formatting.classify_template")
    unmatched_tpl = config.get_str("formatting.classify_unmatched")
    for module_path in args.paths:
        slot = locate(module_path, configuration)
        if slot is None:
            print(unmatched_tpl.format(path=module_path, policy=configuration.unmatched))
            continue
        gi, pi = slot
        print(matched_tpl.format(
            path=module_path, group=gi, pattern=pi, matched=configuration.groups[gi][pi]
        ))
    return config.get_int("exit_codes.ok")
