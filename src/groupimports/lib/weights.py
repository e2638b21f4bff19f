"""weights — map an ImportRecord to its canonical sort weight.

Classification is first-match-wins: groups are scanned in configured order
and, inside each group, patterns in configured order; the first pattern
whose glob matches the path decides the slot.  A later, more specific
pattern never overrides an earlier broad one.

The scalar rank packs group, pattern and kind into disjoint ranges::

    rank = (group * pattern_span + pattern) * KIND_SPAN + kind

``pattern_span`` exceeds every pattern index of the configuration and
``KIND_SPAN`` exceeds every kind, so a higher group always outranks any
pattern and a higher pattern always outranks any kind.
"""

from __future__ import annotations

import dataclasses
from typing import Optional

from groupimports.lib.groups import GroupConfiguration
from groupimports.lib.matcher import matches
from groupimports.lib.models import ImportKind, ImportRecord, Weight

KIND_SPAN = len(ImportKind)


def locate(path: str, configuration: GroupConfiguration) -> Optional[tuple[int, int]]:
    """Return ``(group_index, pattern_index)`` of the first matching pattern.

    Returns None when no configured pattern matches.
    """
    for gi, group in enumerate(configuration.groups):
        for pi, pattern in enumerate(group):
            if matches(path, pattern):
                return gi, pi
    return None


def sort_name(record: ImportRecord) -> str:
    """Tie-break name: default, else namespace, else first named alias."""
    if record.default_name:
        return record.default_name
    if record.namespace_name:
        return record.namespace_name
    if record.named:
        return record.named[0].alias
    return ""


def rank_of(
    group_index: int,
    pattern_index: int,
    kind: ImportKind,
    configuration: GroupConfiguration,
) -> int:
    return (group_index * configuration.pattern_span + pattern_index) * KIND_SPAN + int(kind)


def compute_weight(record: ImportRecord, configuration: GroupConfiguration) -> Weight:
    """Compute the weight of a record under a configuration.

    Unmatched paths land in the slot chosen by the configuration's
    ``unmatched`` policy: a trailing group of their own, or slot (0, 0).
    """
    slot = locate(record.path, configuration)
    if slot is None:
        group_index, pattern_index = configuration.unmatched_group_index, 0
    else:
        group_index, pattern_index = slot
    kind = record.kind
    return Weight(
        rank=rank_of(group_index, pattern_index, kind, configuration),
        sort_name=sort_name(record),
        group_index=group_index,
        pattern_index=pattern_index,
        kind=kind,
        matched=slot is not None,
    )


def weigh(record: ImportRecord, configuration: GroupConfiguration) -> ImportRecord:
    """Return a copy of ``record`` carrying its computed weight."""
    return dataclasses.replace(record, weight=compute_weight(record, configuration))


def weigh_all(
    records: list[ImportRecord], configuration: GroupConfiguration
) -> list[ImportRecord]:
    return [weigh(r, configuration) for r in records]


def weight_of(record: ImportRecord) -> Weight:
    """Return the record's weight, refusing records that were never weighed."""
    if record.weight is None:
        raise ValueError(f"import of {record.path!r} has not been weighed")
    return record.weight
