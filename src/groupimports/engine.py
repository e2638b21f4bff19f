"""groupimports engine — thin orchestrator around the group-imports rule.

Composes the library modules to lint one ES module and return structured
results.  This is the main entry point for programmatic usage.

The engine never inspects syntax itself: it delegates parsing to
SourceAnalyzer (lib/analyzer) and the checking to GroupImportsRule
(lib/rule).  It owns timing, fix application, telemetry and output.
"""

from __future__ import annotations

import json
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from groupimports import __version__ as VERSION
from groupimports.exceptions import GroupImportsError, GroupImportsParseError
from groupimports.lib import config
from groupimports.lib.analyzer import SourceAnalyzer
from groupimports.lib.formatter import format_diagnostic_stderr, format_result_json
from groupimports.lib.groups import GroupConfiguration
from groupimports.lib.logger import log_lint
from groupimports.lib.models import Diagnostic, Fix
from groupimports.lib.project import ProjectConfig, resolve_project_config
from groupimports.lib.rule import GroupImportsRule


@dataclass
class LintResult:
    """Result of linting one source text."""

    status: str
    filepath: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    import_count: int = 0
    lint_ms: int = 0
    fixed_source: Optional[str] = None

    @property
    def fix(self) -> Optional[Fix]:
        """The single fix on offer, or None."""
        for diagnostic in self.diagnostics:
            if diagnostic.fix is not None:
                return diagnostic.fix
        return None


def lint_source(
    source: str,
    filepath: str = "",
    *,
    configuration: Optional[GroupConfiguration] = None,
) -> LintResult:
    """Lint an ES module source string.

    Args:
        source: Module source text.
        filepath: Path used in messages. Defaults to the stdin label.
        configuration: Pattern groups; the packaged defaults when None.

    Returns:
        LintResult with status 'passed' or 'rejected'.

    Raises:
        GroupImportsParseError: If the source is not a valid ES module.
        MalformedImportError: If a declaration breaks record invariants.
    """
    if not filepath:
        filepath = config.get_str("defaults.stdin_filename")
    if configuration is None:
        configuration = GroupConfiguration.default()

    start = time.time()

    # Wrap parse errors so callers get one exception type instead of
    # whatever esprima raises.
    try:
        analyzer = SourceAnalyzer(source, filepath)
    except Exception as exc:
        raise GroupImportsParseError(filepath, exc) from exc

    program = analyzer.program
    diagnostics = GroupImportsRule(configuration).diagnose(program)

    status = config.get_str("statuses.rejected" if diagnostics else "statuses.passed")
    return LintResult(
        status=status,
        filepath=filepath,
        diagnostics=diagnostics,
        import_count=len(program.imports),
        lint_ms=int((time.time() - start) * 1000),
    )


def fix_source(
    source: str,
    filepath: str = "",
    *,
    configuration: Optional[GroupConfiguration] = None,
) -> str:
    """Return ``source`` with its import block reordered, when fixable.

    Source that is canonical, or whose block cannot be safely rewritten,
    comes back unchanged.
    """
    result = lint_source(source, filepath, configuration=configuration)
    fix = result.fix
    return fix.apply(source) if fix is not None else source


def lint_file(
    path: Union[str, Path],
    *,
    project: Optional[ProjectConfig] = None,
    fix: bool = False,
    output_format: str = "",
    stream: Any = None,
) -> LintResult:
    """Lint (and optionally fix) a file on disk, writing output to ``stream``.

    Args:
        path: File to lint.
        project: Effective settings; discovered from ``path`` when None.
        fix: Rewrite the file in place when a fix is available.
        output_format: 'stderr' or 'json'. Defaults to the config value.
        stream: Where output goes. Defaults to sys.stderr.

    Returns:
        The LintResult; status is 'fixed' when the file was rewritten.
    """
    if not output_format:
        output_format = config.get_str("formats.default")
    out = stream or sys.stderr
    filepath = str(path)

    if project is None:
        project = resolve_project_config(filepath)

    with open(filepath, "r", encoding="utf-8", newline="") as fh:
        source = fh.read()

    result = lint_source(source, filepath, configuration=project.configuration)

    if fix and result.fix is not None:
        result.fixed_source = result.fix.apply(source)
        with open(filepath, "w", encoding="utf-8", newline="") as fh:
            fh.write(result.fixed_source)
        result.status = config.get_str("statuses.fixed")

    if project.logging_enabled and project.log_directory:
        log_lint(
            project.log_directory,
            filepath,
            result.status,
            result.diagnostics,
            result.import_count,
            source,
            result.lint_ms,
        )

    emit_result(result, source, output_format, out)
    return result


def emit_result(result: LintResult, source: str, output_format: str, stream: Any) -> None:
    """Write a result to ``stream`` in the requested format."""
    if output_format == config.get_str("formats.json"):
        data = format_result_json(result.filepath, result.status, result.diagnostics)
        stream.write(json.dumps(data, indent=config.get_int("defaults.json_indent")) + "\n")
    elif result.status == config.get_str("statuses.fixed"):
        msg = config.get_str("messages.fixed").format(filepath=result.filepath)
        stream.write(f"  {msg}\n")
    else:
        for diagnostic in result.diagnostics:
            stream.write(
                format_diagnostic_stderr(result.filepath, diagnostic, source, stream=stream)
                + "\n"
            )


def main() -> None:
    """CLI entry point for python -m groupimports.engine."""
    import argparse

    fmt_stderr = config.get_str("formats.stderr")
    fmt_json = config.get_str("formats.json")
    stdin_filename = config.get_str("defaults.stdin_filename")
    exit_violations = config.get_int("exit_codes.violations")
    exit_ok = config.get_int("exit_codes.ok")
    exit_error = config.get_int("exit_codes.error")

    parser = argparse.ArgumentParser(
        description="groupimports engine — check ES module import order",
    )
    parser.add_argument("--file", help="Path to the module to check")
    parser.add_argument("--stdin", action="store_true", help="Read code from stdin")
    parser.add_argument("--filename", help="Filename to use when reading from stdin")
    parser.add_argument("--config", help="Path to a .groupimports.yaml project file")
    parser.add_argument(
        "--format",
        choices=[fmt_stderr, fmt_json],
        default=fmt_stderr,
        help="Output format",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Apply the fix (in place for --file, to stdout for --stdin)",
    )
    parser.add_argument("--version", action="version", version=f"groupimports {VERSION}")

    args = parser.parse_args()

    if not args.stdin and not args.file:
        parser.error("Either --file or --stdin is required")
        return

    try:
        if args.stdin:
            source = sys.stdin.read()
            filepath = args.filename or stdin_filename
            project = resolve_project_config(args.filename, args.config)
            result = lint_source(source, filepath, configuration=project.configuration)
            if args.fix:
                fix = result.fix
                sys.stdout.write(fix.apply(source) if fix is not None else source)
                sys.exit(exit_ok if fix is not None or not result.diagnostics else exit_violations)
            emit_result(result, source, args.format, sys.stderr)
        else:
            project = resolve_project_config(args.file, args.config)
            result = lint_file(
                args.file, project=project, fix=args.fix, output_format=args.format
            )
    except (GroupImportsError, OSError) as exc:
        sys.stderr.write(f"  {exc}\n")
        sys.exit(exit_error)

    sys.exit(exit_violations if result.status == config.get_str("statuses.rejected") else exit_ok)


if __name__ == "__main__":
    main()
