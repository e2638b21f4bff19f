"""records — turn an import declaration into an ImportRecord.

The builder partitions specifiers by kind.  ES grammar allows at most one
default and one namespace binding per declaration; a declaration that
carries more is rejected instead of keeping whichever came last.
"""

from __future__ import annotations

from groupimports.exceptions import MalformedImportError
from groupimports.lib import config
from groupimports.lib.models import (
    ImportDeclaration,
    ImportRecord,
    NamedImport,
    SpecifierKind,
)


def build_record(declaration: ImportDeclaration) -> ImportRecord:
    """Build the normalized record for one declaration.

    Args:
        declaration: A static top-level import declaration.

    Returns:
        An unweighted ImportRecord.

    Raises:
        MalformedImportError: If the declaration has two default or two
            namespace specifiers.
    """
    default_name = None
    namespace_name = None
    named: list[NamedImport] = []

    for spec in declaration.specifiers:
        if spec.kind is SpecifierKind.DEFAULT:
            if default_name is not None:
                raise MalformedImportError(
                    declaration.path, config.get_str("messages.duplicate_default")
                )
            default_name = spec.local
        elif spec.kind is SpecifierKind.NAMESPACE:
            if namespace_name is not None:
                raise MalformedImportError(
                    declaration.path, config.get_str("messages.duplicate_namespace")
                )
            namespace_name = spec.local
        else:
            named.append(NamedImport(name=spec.imported, alias=spec.local))

    return ImportRecord(
        path=declaration.path,
        start=declaration.start,
        end=declaration.end,
        default_name=default_name,
        namespace_name=namespace_name,
        named=tuple(named),
    )


def build_records(declarations: list[ImportDeclaration]) -> list[ImportRecord]:
    """Build records for declarations, keeping source order."""
    return [build_record(d) for d in declarations]
