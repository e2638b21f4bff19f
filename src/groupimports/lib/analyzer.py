"""SourceAnalyzer — single-parse view of an ES module for the import rule.

The rule never touches esprima nodes.  This module parses a file once
with ``esprima.parseModule`` (ranges and comments enabled) and converts
the top-level import declarations into the frozen models of
``lib/models``.  Everything else at the top level, together with every
comment, is kept only as a ``(start, end)`` range so the rule can tell
whether an import block is safe to rewrite.

Offsets are indices into the Python source string.
"""

from __future__ import annotations

from typing import Any, Optional

import esprima

from groupimports.lib import config
from groupimports.lib.models import (
    ImportDeclaration,
    ImportSpecifier,
    Location,
    Program,
    SpecifierKind,
)

_SPECIFIER_KINDS = {
    "ImportDefaultSpecifier": SpecifierKind.DEFAULT,
    "ImportNamespaceSpecifier": SpecifierKind.NAMESPACE,
    "ImportSpecifier": SpecifierKind.NAMED,
}


def _range(node: Any) -> tuple[int, int]:
    start, end = node.range
    return int(start), int(end)


def _convert_specifier(node: Any) -> ImportSpecifier:
    kind = _SPECIFIER_KINDS[node.type]
    local = node.local.name
    imported = node.imported.name if kind is SpecifierKind.NAMED else local
    start, end = _range(node)
    return ImportSpecifier(kind=kind, imported=imported, local=local, start=start, end=end)


def _convert_declaration(node: Any) -> ImportDeclaration:
    start, end = _range(node)
    return ImportDeclaration(
        path=node.source.value,
        specifiers=tuple(_convert_specifier(s) for s in node.specifiers),
        start=start,
        end=end,
    )


class SourceAnalyzer:
    """Parse an ES module once and answer the import rule's queries.

    Attributes:
        source: Raw source text.
        filepath: Path used in messages.
        tree: The esprima Program node.

    Raises:
        Any esprima error on invalid syntax; the engine wraps it in
        ``GroupImportsParseError``.
    """

    def __init__(self, source: str, filepath: str) -> None:
        self.source = source
        self.filepath = filepath
        self.tree = esprima.parseModule(
            source,
            range=True,
            comment=True,
            jsx=config.get_bool("parser.jsx"),
            tolerant=config.get_bool("parser.tolerant"),
        )
        self._program: Optional[Program] = None

    def import_declarations(self) -> list[ImportDeclaration]:
        """Top-level import declarations in source order."""
        return [
            _convert_declaration(node)
            for node in self.tree.body
            if node.type == "ImportDeclaration"
        ]

    def other_ranges(self) -> list[tuple[int, int]]:
        """Ranges of non-import top-level statements and of all comments."""
        ranges = [_range(node) for node in self.tree.body if node.type != "ImportDeclaration"]
        for comment in getattr(self.tree, "comments", None) or []:
            if getattr(comment, "range", None):
                ranges.append(_range(comment))
        return sorted(ranges)

    @property
    def program(self) -> Program:
        """The rule's input, built on first access."""
        if self._program is None:
            self._program = Program(
                source=self.source,
                imports=tuple(self.import_declarations()),
                other_ranges=tuple(self.other_ranges()),
            )
        return self._program


def location_of(source: str, offset: int) -> Location:
    """Line/column of ``offset`` in ``source``."""
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return Location(line=line, column=offset - line_start)
