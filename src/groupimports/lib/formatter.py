"""formatter — diagnostic output for stderr and JSON.

Stderr output mimics a traceback frame per diagnostic::

      File "src/App.js", line 1, column 0
        import { helperB } from 'utils/b';
      Imports are in the wrong order
      Fix: run `groupimports fix` to reorder

Colours come from the ``theme`` section of defaults.yaml and are only
emitted when the target stream is a TTY, so piped output stays clean.
"""

from __future__ import annotations

import sys
from typing import Any, Optional

from groupimports.lib import config
from groupimports.lib.models import Diagnostic


# ---------------------------------------------------------------------------
# Colour
# ---------------------------------------------------------------------------


def code(role: str, *, stream: Any = None) -> str:
    """Return the ANSI escape for a semantic role, or "" off a TTY.

    Args:
        role: Role name from ``theme.roles`` (or ``reset``).
        stream: The stream whose TTY-ness decides. Defaults to sys.stderr.
    """
    target = stream or sys.stderr
    if not hasattr(target, "isatty") or not target.isatty():
        return ""
    ansi: dict[str, str] = config.get("theme.ansi")
    roles: dict[str, str] = config.get("theme.roles")
    return ansi.get(roles.get(role, role), "")


def colorize(text: str, role: str, *, stream: Any = None) -> str:
    """Wrap ``text`` in the colour for ``role`` when writing to a TTY."""
    start = code(role, stream=stream)
    if not start:
        return text
    return f"{start}{text}{code('reset', stream=stream)}"


# ---------------------------------------------------------------------------
# Stderr formatting
# ---------------------------------------------------------------------------


def format_diagnostic_stderr(
    filepath: str,
    diagnostic: Diagnostic,
    source: str,
    *,
    stream: Any = None,
) -> str:
    """Format one diagnostic for human readers.

    Args:
        filepath: Path shown in the frame header.
        diagnostic: The diagnostic to format.
        source: Source text, used to quote the first offending line.
        stream: Stream the text is destined for (TTY check only).

    Returns:
        Multi-line string without a trailing newline.
    """
    file_line_tpl = config.get_str("formatting.file_line_template")
    fix_prefix = config.get_str("formatting.fix_prefix")

    loc = diagnostic.start_loc
    lines = source.splitlines()
    quoted = lines[loc.line - 1].rstrip() if 0 < loc.line <= len(lines) else ""

    parts: list[str] = [
        "  " + colorize(
            file_line_tpl.format(filepath=filepath, line=loc.line, column=loc.column),
            "file_path",
            stream=stream,
        )
    ]
    if quoted:
        parts.append(f"    {quoted}")
    parts.append("  " + colorize(diagnostic.message, "error", stream=stream))
    if diagnostic.fixable:
        hint = config.get_str("formatting.fix_available")
        parts.append("  " + colorize(f"{fix_prefix}{hint}", "fix", stream=stream))
    else:
        hint = config.get_str("formatting.fix_unavailable")
        if diagnostic.note:
            hint = f"{hint} ({diagnostic.note})"
        parts.append("  " + colorize(f"{fix_prefix}{hint}", "warning", stream=stream))
    return "\n".join(parts)


def format_summary_stderr(files: int, rejected: int, *, stream: Any = None) -> str:
    """One-line summary after checking several files."""
    text = config.get_str("formatting.summary_template").format(
        files=files, rejected=rejected
    )
    return colorize(text, "error" if rejected else "passed", stream=stream)


# ---------------------------------------------------------------------------
# JSON formatting
# ---------------------------------------------------------------------------


def diagnostic_to_dict(diagnostic: Diagnostic) -> dict[str, Any]:
    """JSON-compatible form of a diagnostic, including the replacement text."""
    fix: Optional[dict[str, Any]] = None
    if diagnostic.fix is not None:
        fix = {
            "range": [diagnostic.fix.start, diagnostic.fix.end],
            "text": diagnostic.fix.text,
        }
    return {
        "rule": diagnostic.rule_id,
        "message": diagnostic.message,
        "range": [diagnostic.start, diagnostic.end],
        "start": {"line": diagnostic.start_loc.line, "column": diagnostic.start_loc.column},
        "end": {"line": diagnostic.end_loc.line, "column": diagnostic.end_loc.column},
        "fix": fix,
        "note": diagnostic.note,
    }


def format_result_json(
    filepath: str,
    status: str,
    diagnostics: list[Diagnostic],
) -> dict[str, Any]:
    """Structured result for one file, suitable for json.dumps()."""
    return {
        "file": filepath,
        "status": status,
        "diagnostics": [diagnostic_to_dict(d) for d in diagnostics],
    }
