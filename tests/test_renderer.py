"""Unit tests for groupimports.lib.renderer (import block regeneration)."""

from __future__ import annotations

import pytest

from groupimports.exceptions import MalformedImportError
from groupimports.lib.groups import GroupConfiguration
from groupimports.lib.models import ImportRecord, NamedImport, RenderForm
from groupimports.lib.renderer import (
    line_separator,
    quote_path,
    render_block,
    render_form,
    render_named,
    render_record,
)
from groupimports.lib.rule import GroupImportsRule
from groupimports.lib.weights import weigh_all


class TestRenderRecord:
    """Each render form produces valid ES import syntax."""

    @pytest.mark.parametrize(
        ("record", "expected"),
        [
            (
                ImportRecord("react", default_name="React"),
                "import React from 'react';",
            ),
            (
                ImportRecord("library", default_name="Main", namespace_name="utilities"),
                "import Main, * as utilities from 'library';",
            ),
            (
                ImportRecord(
                    "react",
                    default_name="React",
                    named=(NamedImport("Component", "Component"), NamedImport("createRef", "ref")),
                ),
                "import React, { Component, createRef as ref } from 'react';",
            ),
            (
                ImportRecord("utility-belt", namespace_name="utilities"),
                "import * as utilities from 'utility-belt';",
            ),
            (
                ImportRecord(
                    "react",
                    named=(
                        NamedImport("useEffect", "useEffect"),
                        NamedImport("useState", "useState"),
                        NamedImport("useRef", "useRef"),
                    ),
                ),
                "import { useEffect, useState, useRef } from 'react';",
            ),
            (
                ImportRecord("polyfill"),
                "import 'polyfill';",
            ),
        ],
    )
    def test_forms(self, record: ImportRecord, expected: str) -> None:
        assert render_record(record) == expected

    def test_named_order_not_resorted(self) -> None:
        record = ImportRecord("m", named=(NamedImport("b", "b"), NamedImport("a", "a")))
        assert render_record(record) == "import { b, a } from 'm';"

    def test_namespace_with_named_rejected(self) -> None:
        record = ImportRecord("m", namespace_name="ns", named=(NamedImport("a", "a"),))
        with pytest.raises(MalformedImportError):
            render_form(record)

    def test_render_form_dispatch(self) -> None:
        assert render_form(ImportRecord("m")) is RenderForm.SIDE_EFFECT
        assert render_form(ImportRecord("m", namespace_name="n")) is RenderForm.NAMESPACE


class TestHelpers:
    def test_render_named(self) -> None:
        assert render_named(NamedImport("actions", "actions")) == "actions"
        assert render_named(NamedImport("actions", "exampleActions")) == "actions as exampleActions"

    def test_quote_path_escapes(self) -> None:
        assert quote_path("it's") == "'it\\'s'"
        assert quote_path("a\\b") == "'a\\\\b'"

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("utils/a\nb", "'utils/a\\nb'"),
            ("a\r\nb", "'a\\r\\nb'"),
            ("a\tb", "'a\\tb'"),
            ("a\u2028b\u2029", "'a\\u2028b\\u2029'"),
            ("a\x00b\x1b", "'a\\x00b\\x1b'"),
            ("grüße", "'grüße'"),
        ],
    )
    def test_quote_path_escapes_control_characters(self, path: str, expected: str) -> None:
        assert quote_path(path) == expected


class TestRoundTrip:
    """Regenerated text parses back to the same import paths."""

    def test_escaped_newline_in_path(self, parse, two_groups: GroupConfiguration) -> None:
        source = "import b from 'utils/a\\nb';\nimport React from 'react';\n"
        (diagnostic,) = GroupImportsRule(two_groups).diagnose(parse(source))
        fixed = diagnostic.fix.apply(source)
        assert fixed == "import React from 'react';\n\nimport b from 'utils/a\\nb';\n"
        reparsed = parse(fixed)
        assert [d.path for d in reparsed.imports] == ["react", "utils/a\nb"]
        assert GroupImportsRule(two_groups).diagnose(reparsed) == []


class TestRenderBlock:
    """Grouping, spacing and stability of the regenerated block."""

    def test_groups_separated_by_blank_line(self, two_groups: GroupConfiguration) -> None:
        records = weigh_all(
            [
                ImportRecord("utils/b", named=(NamedImport("helperB", "helperB"),)),
                ImportRecord("react", default_name="React"),
            ],
            two_groups,
        )
        assert render_block(records) == (
            "import React from 'react';\n\nimport { helperB } from 'utils/b';"
        )

    def test_same_group_single_line_break(self, two_groups: GroupConfiguration) -> None:
        records = weigh_all(
            [
                ImportRecord("react", named=(NamedImport("useState", "useState"),)),
                ImportRecord("react", default_name="React"),
            ],
            two_groups,
        )
        assert render_block(records) == (
            "import React from 'react';\nimport { useState } from 'react';"
        )

    def test_stable_for_equal_weights(self, two_groups: GroupConfiguration) -> None:
        """Records with identical weights keep their relative order."""
        first = ImportRecord("react", named=(NamedImport("x", "x"), NamedImport("y", "y")))
        second = ImportRecord("react", named=(NamedImport("x", "x"),))
        records = weigh_all([first, second], two_groups)
        assert render_block(records) == (
            "import { x, y } from 'react';\nimport { x } from 'react';"
        )
        assert render_block(list(reversed(records))) == (
            "import { x } from 'react';\nimport { x, y } from 'react';"
        )

    def test_deterministic_regardless_of_input_order(
        self, two_groups: GroupConfiguration
    ) -> None:
        records = weigh_all(
            [
                ImportRecord("lodash", default_name="_"),
                ImportRecord("utils/a", namespace_name="a"),
                ImportRecord("react", named=(NamedImport("useState", "useState"),)),
                ImportRecord("react", default_name="React"),
            ],
            two_groups,
        )
        expected = render_block(records)
        assert render_block(list(reversed(records))) == expected
        assert render_block(records[1:] + records[:1]) == expected
        assert expected == (
            "import React from 'react';\n"
            "import { useState } from 'react';\n"
            "\n"
            "import * as a from 'utils/a';\n"
            "\n"
            "import _ from 'lodash';"
        )

    def test_empty_block(self) -> None:
        assert render_block([]) == ""


class TestLineSeparator:
    """The block keeps the line endings of the file it replaces."""

    def test_detects_crlf(self) -> None:
        assert line_separator("import a from 'a';\r\n") == "\r\n"
        assert line_separator("import a from 'a';\n") == "\n"
        assert line_separator("") == "\n"

    def test_crlf_block(self, two_groups: GroupConfiguration) -> None:
        records = weigh_all(
            [
                ImportRecord("utils/b", default_name="b"),
                ImportRecord("react", named=(NamedImport("useState", "useState"),)),
                ImportRecord("react", default_name="React"),
            ],
            two_groups,
        )
        assert render_block(records, "\r\n") == (
            "import React from 'react';\r\n"
            "import { useState } from 'react';\r\n"
            "\r\n"
            "import b from 'utils/b';"
        )
