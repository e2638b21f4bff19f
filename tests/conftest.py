"""Shared fixtures for the groupimports test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

from groupimports.lib import config
from groupimports.lib.analyzer import SourceAnalyzer
from groupimports.lib.groups import GroupConfiguration
from groupimports.lib.models import ImportRecord, Program
from groupimports.lib.records import build_records
from groupimports.lib.weights import weigh_all


FIXTURES_DIR = Path(__file__).parent / "fixtures"
PASSING_DIR = FIXTURES_DIR / "passing"
FAILING_DIR = FIXTURES_DIR / "failing"
EDGE_CASES_DIR = FIXTURES_DIR / "edge_cases"


@pytest.fixture(autouse=True)
def _fresh_defaults():
    """Give each test a freshly loaded defaults.yaml."""
    config.reset()
    yield
    config.reset()


@pytest.fixture()
def two_groups() -> GroupConfiguration:
    """group 0 = react, group 1 = utils/**; unmatched paths go last."""
    return GroupConfiguration.from_value([["react"], ["utils/**"]], "last")


@pytest.fixture()
def default_groups() -> GroupConfiguration:
    """The configuration packaged in defaults.yaml."""
    return GroupConfiguration.default()


@pytest.fixture()
def parse() -> Callable[[str], Program]:
    """Parse ES module source into the rule's Program model."""

    def _parse(source: str) -> Program:
        return SourceAnalyzer(source, "test.js").program

    return _parse


@pytest.fixture()
def weighed(parse) -> Callable[[str, GroupConfiguration], list[ImportRecord]]:
    """Parse source and return its weighted records in source order."""

    def _weighed(source: str, configuration: GroupConfiguration) -> list[ImportRecord]:
        program = parse(source)
        return weigh_all(build_records(list(program.imports)), configuration)

    return _weighed


@pytest.fixture()
def write_project(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a .groupimports.yaml into tmp_path and return its path."""

    def _write(data: dict[str, Any]) -> Path:
        path = tmp_path / ".groupimports.yaml"
        with open(path, "w", encoding="utf-8") as fh:
            yaml.dump(data, fh, default_flow_style=False)
        return path

    return _write


@pytest.fixture()
def misordered_source() -> str:
    return (FAILING_DIR / "misordered.js").read_text(encoding="utf-8")


@pytest.fixture()
def canonical_source() -> str:
    return (PASSING_DIR / "canonical.js").read_text(encoding="utf-8")


@pytest.fixture()
def interleaved_source() -> str:
    return (FAILING_DIR / "interleaved.js").read_text(encoding="utf-8")
