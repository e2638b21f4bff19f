"""logger — JSONL lint telemetry.

When a project enables logging, every linted file appends one JSON line
to ``lint_log.jsonl`` in the configured directory: file path, status,
number of imports, the diagnostic (if any), a truncated SHA-256 of the
source and timing.  Constants come from ``config/defaults.yaml``.
"""

from __future__ import annotations

import datetime
import hashlib
import json
import os
from typing import Any

from groupimports.lib import config
from groupimports.lib.models import Diagnostic


def diagnostic_entry(diagnostic: Diagnostic) -> dict[str, Any]:
    """Summarize a diagnostic for the log (no replacement text)."""
    return {
        "rule": diagnostic.rule_id,
        "line": diagnostic.start_loc.line,
        "end_line": diagnostic.end_loc.line,
        "fixable": diagnostic.fixable,
    }


def log_lint(
    log_dir: str,
    filepath: str,
    status: str,
    diagnostics: list[Diagnostic],
    import_count: int,
    source: str,
    lint_ms: int,
) -> None:
    """Append a JSONL entry describing one lint of one file.

    Args:
        log_dir: Directory to write the log file in.
        filepath: Path of the linted file.
        status: 'passed', 'rejected' or 'fixed'.
        diagnostics: Diagnostics reported for the file.
        import_count: Number of top-level import declarations.
        source: The source text that was linted.
        lint_ms: Duration in milliseconds.
    """
    if not log_dir:
        return
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, config.get_str("filenames.lint_log"))

    utc_src = config.get_str("formatting.utc_offset_source")
    utc_rep = config.get_str("formatting.utc_offset_replacement")
    hash_prefix = config.get_str("formatting.hash_prefix")
    hash_trunc = config.get_int("defaults.hash_truncation_length")
    separators = tuple(config.get_list("formatting.json_separators"))

    entry: dict[str, Any] = {
        "timestamp": (
            datetime.datetime.now(datetime.timezone.utc)
            .isoformat()
            .replace(utc_src, utc_rep)
        ),
        "event": "lint",
        "file": filepath,
        "status": status,
        "imports": import_count,
        "diagnostics": [diagnostic_entry(d) for d in diagnostics],
        "code_length_lines": len(source.splitlines()),
        "code_hash": hash_prefix + hashlib.sha256(source.encode()).hexdigest()[:hash_trunc],
        "lint_ms": lint_ms,
    }

    with open(log_path, "a", encoding="utf-8") as fh:
        fh.write(json.dumps(entry, separators=separators) + "\n")
