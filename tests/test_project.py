"""Unit tests for groupimports.lib.project (project file discovery)."""

from __future__ import annotations

from pathlib import Path

import pytest

from groupimports.exceptions import GroupConfigurationError
from groupimports.lib.project import (
    find_project_config,
    load_project_config,
    resolve_project_config,
    validate_project_config,
)


class TestValidateProjectConfig:
    """Tests for validate_project_config."""

    def test_valid_config(self) -> None:
        data = {"groups": [["react"]], "unmatched": "first", "logging": {"enabled": True}}
        assert validate_project_config(data) == []

    def test_empty_mapping_is_valid(self) -> None:
        assert validate_project_config({}) == []

    def test_not_a_dict(self) -> None:
        errors = validate_project_config("not a dict")
        assert len(errors) == 1
        assert "mapping" in errors[0]

    def test_bad_groups(self) -> None:
        assert validate_project_config({"groups": "react"})

    def test_bad_unmatched(self) -> None:
        assert any("unmatched" in e for e in validate_project_config({"unmatched": 1}))

    def test_bad_logging(self) -> None:
        assert any("logging" in e for e in validate_project_config({"logging": "yes"}))
        errors = validate_project_config({"logging": {"enabled": "yes", "directory": 3}})
        assert any("logging.enabled" in e for e in errors)
        assert any("logging.directory" in e for e in errors)


class TestLoadProjectConfig:
    def test_loads_groups_and_logging(self, write_project) -> None:
        path = write_project({
            "groups": [["react"], ["utils/**"]],
            "unmatched": "first",
            "logging": {"enabled": True, "directory": "logs"},
        })
        project = load_project_config(path)
        assert project.configuration.groups == (("react",), ("utils/**",))
        assert project.configuration.unmatched == "first"
        assert project.logging_enabled
        assert project.log_directory == "logs"
        assert project.path == path

    def test_missing_groups_fall_back_to_defaults(self, write_project) -> None:
        project = load_project_config(write_project({"unmatched": "last"}))
        assert len(project.configuration.groups) == 7

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / ".groupimports.yaml"
        path.write_text("")
        assert not load_project_config(path).logging_enabled

    def test_invalid_file_raises(self, write_project) -> None:
        with pytest.raises(GroupConfigurationError) as info:
            load_project_config(write_project({"groups": [[]]}))
        assert info.value.source.endswith(".groupimports.yaml")


class TestDiscovery:
    """Walking up from the linted file."""

    def test_found_in_ancestor(self, tmp_path: Path, write_project) -> None:
        path = write_project({"groups": [["react"]]})
        nested = tmp_path / "src" / "components"
        nested.mkdir(parents=True)
        target = nested / "App.js"
        target.write_text("")
        assert find_project_config(target) == path.resolve()

    def test_not_found(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        isolated = tmp_path / "deep"
        isolated.mkdir()
        found = find_project_config(isolated)
        assert found is None or not str(found).startswith(str(tmp_path))

    def test_explicit_wins(self, tmp_path: Path, write_project) -> None:
        write_project({"groups": [["react"]]})
        other = tmp_path / "other.yaml"
        other.write_text("groups:\n  - [vue]\n")
        project = resolve_project_config(tmp_path / "App.js", other)
        assert project.configuration.groups == (("vue",),)

    def test_env_var(self, tmp_path: Path, monkeypatch) -> None:
        cfg = tmp_path / "env.yaml"
        cfg.write_text("groups:\n  - [svelte]\n")
        monkeypatch.setenv("GROUPIMPORTS_CONFIG", str(cfg))
        project = resolve_project_config(tmp_path / "App.js")
        assert project.configuration.groups == (("svelte",),)

    def test_defaults_without_project_file(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.delenv("GROUPIMPORTS_CONFIG", raising=False)
        monkeypatch.setattr(
            "groupimports.lib.project.find_project_config", lambda start: None
        )
        project = resolve_project_config(tmp_path / "App.js")
        assert project.path is None
        assert project.configuration.groups[0][0] == "react"


class TestInvalidYaml:
    def test_syntax_error_becomes_config_error(self, tmp_path: Path) -> None:
        path = tmp_path / ".groupimports.yaml"
        path.write_text("groups: [[react\n")
        with pytest.raises(GroupConfigurationError):
            load_project_config(path)
