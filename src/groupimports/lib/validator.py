"""validator — decide whether an import block is already canonical.

Two checks run over each adjacent pair of records, in source order:

1. Order: the earlier record's ``(rank, sort_name)`` must not exceed the
   later one's.  Equal keys are fine.
2. Spacing: when the group index goes up, the text between the two
   declarations must contain a blank line, i.e. at least
   ``rendering.blank_line_breaks`` line breaks.

Extra blank lines inside a group are tolerated; the validator only asks
for what the regenerator guarantees.
"""

from __future__ import annotations

from typing import Iterator, Optional

from groupimports.lib import config
from groupimports.lib.models import ImportRecord
from groupimports.lib.weights import weight_of


def line_breaks_between(source: str, earlier: ImportRecord, later: ImportRecord) -> int:
    """Count line breaks in the source text separating two declarations."""
    return source.count("\n", earlier.end, later.start)


def is_ordered_pair(earlier: ImportRecord, later: ImportRecord) -> bool:
    """True when ``later`` may follow ``earlier`` in canonical order."""
    return weight_of(earlier).sort_key <= weight_of(later).sort_key


def is_spaced_pair(source: str, earlier: ImportRecord, later: ImportRecord) -> bool:
    """True unless a group boundary lacks a separating blank line."""
    if weight_of(later).group_index <= weight_of(earlier).group_index:
        return True
    required = config.get_int("rendering.blank_line_breaks")
    return line_breaks_between(source, earlier, later) >= required


def _pairs(records: list[ImportRecord]) -> Iterator[tuple[ImportRecord, ImportRecord]]:
    return zip(records, records[1:])


def find_violation(
    records: list[ImportRecord], source: str
) -> Optional[tuple[ImportRecord, ImportRecord]]:
    """Return the first adjacent pair that breaks canonical order, if any."""
    for earlier, later in _pairs(records):
        if not is_ordered_pair(earlier, later) or not is_spaced_pair(source, earlier, later):
            return earlier, later
    return None


def is_canonical(records: list[ImportRecord], source: str) -> bool:
    """Return True if the weighted records, in source order, are canonical.

    Args:
        records: Weighted records in the order they appear in the file.
        source: The file text the record offsets refer to.
    """
    return find_violation(records, source) is None
