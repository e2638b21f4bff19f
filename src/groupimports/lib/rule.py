"""rule — the group-imports rule: build, weigh, validate, regenerate, report.

For each program the rule:

1. returns at once when the file has no import declarations;
2. builds and weighs one record per declaration, in source order;
3. returns when the records are already canonical;
4. otherwise reports exactly one diagnostic spanning the first import's
   start to the last import's end, with the regenerated block as the fix.

The fix is withheld (the diagnostic is still reported) when code or
comments sit inside that span, because replacing it would delete them.
"""

from __future__ import annotations

from typing import Optional, Protocol

from groupimports.lib import config
from groupimports.lib.analyzer import location_of
from groupimports.lib.groups import GroupConfiguration
from groupimports.lib.models import Diagnostic, Fix, ImportRecord, Program
from groupimports.lib.records import build_records
from groupimports.lib.renderer import line_separator, render_block
from groupimports.lib.validator import is_canonical
from groupimports.lib.weights import weigh_all


class DiagnosticSink(Protocol):
    """Anything that accepts diagnostics from the rule."""

    def report(self, diagnostic: Diagnostic) -> None: ...


class DiagnosticCollector:
    """Sink that keeps reported diagnostics in a list."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)


def _overlaps(span: tuple[int, int], other: tuple[int, int]) -> bool:
    return other[0] < span[1] and other[1] > span[0]


class GroupImportsRule:
    """Checks that a program's imports are grouped and ordered.

    Attributes:
        configuration: Pattern groups the rule classifies paths with.
        rule_id: Identifier put on every diagnostic.
    """

    def __init__(self, configuration: GroupConfiguration) -> None:
        self.configuration = configuration
        self.rule_id = config.get_str("rule.id")

    def records(self, program: Program) -> list[ImportRecord]:
        """Weighted records for the program's imports, in source order."""
        return weigh_all(build_records(list(program.imports)), self.configuration)

    def check(self, program: Program, sink: DiagnosticSink) -> None:
        """Report at most one diagnostic for ``program`` to ``sink``."""
        if not program.imports:
            return

        records = self.records(program)
        if is_canonical(records, program.source):
            return

        span = (program.imports[0].start, program.imports[-1].end)
        safe = not any(_overlaps(span, other) for other in program.other_ranges)

        fix: Optional[Fix] = None
        note = ""
        if safe:
            text = render_block(records, line_separator(program.source))
            fix = Fix(start=span[0], end=span[1], text=text)
        else:
            note = config.get_str("rule.unsafe_fix_reason")

        sink.report(Diagnostic(
            rule_id=self.rule_id,
            message=config.get_str("rule.message"),
            start=span[0],
            end=span[1],
            start_loc=location_of(program.source, span[0]),
            end_loc=location_of(program.source, span[1]),
            fix=fix,
            note=note,
        ))

    def diagnose(self, program: Program) -> list[Diagnostic]:
        """Run :meth:`check` with a fresh collector and return its contents."""
        collector = DiagnosticCollector()
        self.check(program, collector)
        return collector.diagnostics
