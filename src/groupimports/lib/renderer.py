"""renderer — regenerate the canonical import block as source text.

Records are stable-sorted by weight, rendered one statement each, joined
with a single line break inside a group and a blank line between groups.
The line separator follows the file being fixed, so CRLF files stay CRLF.
The output is a fixed point: parsing it back, weighing and validating
yields a canonical block that renders to the same text.

Forms::

    import React from 'react';
    import Main, * as utils from 'lib';
    import React, { Component, createRef as ref } from 'react';
    import * as utils from 'utility-belt';
    import { useEffect, useState } from 'react';
    import 'polyfill';
"""

from __future__ import annotations

from groupimports.exceptions import MalformedImportError
from groupimports.lib import config
from groupimports.lib.models import ImportRecord, NamedImport, RenderForm
from groupimports.lib.weights import weight_of


def render_form(record: ImportRecord) -> RenderForm:
    """Pick the textual form for a record from the bindings it carries.

    Raises:
        MalformedImportError: For a namespace binding combined with named
            bindings, which no ES import can express.
    """
    has_default = record.default_name is not None
    has_namespace = record.namespace_name is not None
    has_named = bool(record.named)

    if has_namespace and has_named:
        raise MalformedImportError(
            record.path, config.get_str("messages.namespace_with_named")
        )
    if has_default and has_namespace:
        return RenderForm.DEFAULT_NAMESPACE
    if has_default and has_named:
        return RenderForm.DEFAULT_NAMED
    if has_default:
        return RenderForm.DEFAULT
    if has_namespace:
        return RenderForm.NAMESPACE
    if has_named:
        return RenderForm.NAMED
    return RenderForm.SIDE_EFFECT


def render_named(named: NamedImport) -> str:
    """``name`` when unaliased, ``name as alias`` otherwise."""
    if named.is_aliased:
        return f"{named.name} as {named.alias}"
    return named.name


_ESCAPES = {
    "\\": "\\\\",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _escape_char(char: str, quote: str) -> str:
    if char in _ESCAPES:
        return _ESCAPES[char]
    if char == quote:
        return "\\" + quote
    if char < " " or char == "\x7f":
        return f"\\x{ord(char):02x}"
    return char


def quote_path(path: str) -> str:
    """Render ``path`` as a string literal that parses back to ``path``.

    Line terminators and other control characters are written as escapes;
    a raw line break inside a single-quoted literal is a syntax error.
    """
    quote = config.get_str("rendering.quote")
    escaped = "".join(_escape_char(c, quote) for c in path)
    return f"{quote}{escaped}{quote}"


def render_record(record: ImportRecord) -> str:
    """Render one record as a single import statement."""
    form = render_form(record)
    path = quote_path(record.path)
    named = ", ".join(render_named(n) for n in record.named)

    if form is RenderForm.DEFAULT:
        return f"import {record.default_name} from {path};"
    if form is RenderForm.DEFAULT_NAMESPACE:
        return f"import {record.default_name}, * as {record.namespace_name} from {path};"
    if form is RenderForm.DEFAULT_NAMED:
        return f"import {record.default_name}, {{ {named} }} from {path};"
    if form is RenderForm.NAMESPACE:
        return f"import * as {record.namespace_name} from {path};"
    if form is RenderForm.NAMED:
        return f"import {{ {named} }} from {path};"
    if form is RenderForm.SIDE_EFFECT:
        return f"import {path};"
    raise AssertionError(f"unhandled render form: {form!r}")


def sort_records(records: list[ImportRecord]) -> list[ImportRecord]:
    """Stable sort of weighted records into canonical order."""
    return sorted(records, key=lambda r: weight_of(r).sort_key)


def group_records(records: list[ImportRecord]) -> list[list[ImportRecord]]:
    """Split canonically sorted records into runs sharing a group index."""
    grouped: list[list[ImportRecord]] = []
    for record in records:
        if grouped and weight_of(grouped[-1][-1]).group_index == weight_of(record).group_index:
            grouped[-1].append(record)
        else:
            grouped.append([record])
    return grouped


def line_separator(source: str) -> str:
    """CRLF when ``source`` already uses it, the configured default otherwise."""
    crlf = config.get_str("rendering.crlf_separator")
    if crlf in source:
        return crlf
    return config.get_str("rendering.line_separator")


def render_block(records: list[ImportRecord], newline: str = "") -> str:
    """Render weighted records, in any order, as the canonical import block.

    Args:
        records: Weighted records.
        newline: Line separator to emit. Defaults to ``rendering.line_separator``.
    """
    if not newline:
        newline = config.get_str("rendering.line_separator")
    group_sep = newline * config.get_int("rendering.blank_line_breaks")
    return group_sep.join(
        newline.join(render_record(r) for r in group)
        for group in group_records(sort_records(records))
    )
