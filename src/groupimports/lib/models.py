"""Data models for import declarations, records, weights and diagnostics.

The host parser hands back loosely shaped nodes; everything past
``lib/analyzer`` works on the frozen dataclasses defined here instead.
Specifier and render-form kinds are closed enums so that every dispatch
over them can be exhaustive.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional


# ---------------------------------------------------------------------------
# Host-side nodes
# ---------------------------------------------------------------------------


class SpecifierKind(enum.Enum):
    """The three binding forms an import specifier can take."""

    DEFAULT = "default"
    NAMESPACE = "namespace"
    NAMED = "named"


@dataclass(frozen=True)
class ImportSpecifier:
    """One binding of an import declaration.

    Attributes:
        kind: Which binding form this is.
        imported: Exported name being imported.  Equal to ``local`` for
            default and namespace specifiers.
        local: Local binding name.
        start: Offset of the specifier in the source.
        end: Offset just past the specifier.
    """

    kind: SpecifierKind
    imported: str
    local: str
    start: int = 0
    end: int = 0


@dataclass(frozen=True)
class ImportDeclaration:
    """A top-level static ``import`` statement.

    Attributes:
        path: The module specifier string (already unquoted).
        specifiers: Specifiers in source order.
        start: Offset of the ``import`` keyword.
        end: Offset just past the statement (including its semicolon).
    """

    path: str
    specifiers: tuple[ImportSpecifier, ...]
    start: int
    end: int


@dataclass(frozen=True)
class Program:
    """The slice of a parsed file that the rule looks at.

    Attributes:
        source: The full source text the offsets refer to.
        imports: Top-level import declarations in source order.
        other_ranges: ``(start, end)`` of every other top-level statement
            and of every comment.
    """

    source: str
    imports: tuple[ImportDeclaration, ...] = ()
    other_ranges: tuple[tuple[int, int], ...] = ()


# ---------------------------------------------------------------------------
# Records and weights
# ---------------------------------------------------------------------------


class ImportKind(enum.IntEnum):
    """Structural rank of a record; lower sorts first within a pattern slot."""

    DEFAULT = 0
    NAMESPACE = 1
    NAMED = 2
    SIDE_EFFECT = 3


@dataclass(frozen=True)
class NamedImport:
    """A ``{ name as alias }`` binding.  Unaliased when both are equal."""

    name: str
    alias: str

    @property
    def is_aliased(self) -> bool:
        return self.name != self.alias


@dataclass(frozen=True, order=True)
class Weight:
    """Sort key of one record.

    Ordering compares ``rank`` first and ``sort_name`` second, which is the
    canonical order; the index fields are kept for grouping and display.

    Attributes:
        rank: Scalar ordinal combining group, pattern and kind.
        sort_name: Tie-break name (default, else namespace, else first
            named alias, else empty).
        group_index: Index of the matched group (or the unmatched slot).
        pattern_index: Index of the matched pattern inside the group.
        kind: Structural rank of the record.
        matched: Whether any configured pattern matched the path.
    """

    rank: int
    sort_name: str
    group_index: int = field(compare=False)
    pattern_index: int = field(compare=False)
    kind: ImportKind = field(compare=False)
    matched: bool = field(default=True, compare=False)

    @property
    def sort_key(self) -> tuple[int, str]:
        return (self.rank, self.sort_name)


@dataclass(frozen=True)
class ImportRecord:
    """Normalized, immutable view of one import declaration.

    Attributes:
        path: Module specifier.
        start: Source offset of the declaration.
        end: Source offset just past the declaration.
        default_name: Local name of the default binding, if any.
        namespace_name: Local name of the namespace binding, if any.
        named: Named bindings in source order.
        weight: Computed by the weight calculator; None until weighed.
    """

    path: str
    start: int = 0
    end: int = 0
    default_name: Optional[str] = None
    namespace_name: Optional[str] = None
    named: tuple[NamedImport, ...] = ()
    weight: Optional[Weight] = None

    @property
    def kind(self) -> ImportKind:
        """Structural kind, decided by which bindings are present."""
        if self.default_name:
            return ImportKind.DEFAULT
        if self.namespace_name:
            return ImportKind.NAMESPACE
        if self.named:
            return ImportKind.NAMED
        return ImportKind.SIDE_EFFECT


class RenderForm(enum.Enum):
    """Textual shape of a regenerated import statement."""

    DEFAULT = "default"
    DEFAULT_NAMESPACE = "default_namespace"
    DEFAULT_NAMED = "default_named"
    NAMESPACE = "namespace"
    NAMED = "named"
    SIDE_EFFECT = "side_effect"


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Location:
    """1-based line, 0-based column (the convention of ESLint locations)."""

    line: int
    column: int


@dataclass(frozen=True)
class Fix:
    """Replace ``source[start:end]`` with ``text``."""

    start: int
    end: int
    text: str

    def apply(self, source: str) -> str:
        return source[: self.start] + self.text + source[self.end :]


@dataclass(frozen=True)
class Diagnostic:
    """A single report from the rule.

    Attributes:
        rule_id: Identifier of the reporting rule.
        message: Human-readable message.
        start: Offset where the offending range begins.
        end: Offset where it ends.
        start_loc: Line/column of ``start``.
        end_loc: Line/column of ``end``.
        fix: Replacement for the range, or None when it is unsafe.
        note: Extra explanation (why no fix was attached).
    """

    rule_id: str
    message: str
    start: int
    end: int
    start_loc: Location
    end_loc: Location
    fix: Optional[Fix] = None
    note: str = ""

    @property
    def fixable(self) -> bool:
        return self.fix is not None
