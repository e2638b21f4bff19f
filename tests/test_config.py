"""Unit tests for groupimports.lib.config defaults accessor."""

from __future__ import annotations

import pytest

from groupimports.lib import config


class TestLoadDefaults:
    """Tests for config loading and caching."""

    def test_loads_successfully(self) -> None:
        """defaults.yaml loads without error."""
        assert isinstance(config.load_defaults(), dict)

    def test_cached_on_second_call(self) -> None:
        """Second call returns the same dict object (cached)."""
        assert config.load_defaults() is config.load_defaults()

    def test_reset_clears_cache(self) -> None:
        """reset() forces a fresh load on next call."""
        first = config.load_defaults()
        config.reset()
        second = config.load_defaults()
        assert first is not second
        assert first == second


class TestGet:
    """Tests for the dot-notation accessor."""

    def test_top_level_key(self) -> None:
        assert isinstance(config.get("rule"), dict)

    def test_nested_key(self) -> None:
        assert config.get("rule.message") == "Imports are in the wrong order"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError, match="nonexistent"):
            config.get("nonexistent.key")

    def test_empty_key_raises(self) -> None:
        with pytest.raises(KeyError):
            config.get("")


class TestTypedAccessors:
    """Tests for get_str, get_int, get_bool, get_list."""

    def test_get_str(self) -> None:
        assert config.get_str("statuses.passed") == "passed"

    def test_get_str_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="Expected str"):
            config.get_str("statuses")

    def test_get_int(self) -> None:
        assert config.get_int("exit_codes.violations") == 1

    def test_get_int_rejects_bool(self) -> None:
        """A YAML boolean is not accepted where a number is expected."""
        with pytest.raises(TypeError, match="Expected int"):
            config.get_int("parser.jsx")

    def test_get_bool(self) -> None:
        assert config.get_bool("parser.jsx") is True

    def test_get_list(self) -> None:
        assert isinstance(config.get_list("groups"), list)

    def test_get_list_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="Expected list"):
            config.get_list("statuses.passed")

    def test_separators(self) -> None:
        """LF by default, CRLF for files that already use it."""
        assert config.get_str("rendering.line_separator") == "\n"
        assert config.get_str("rendering.crlf_separator") == "\r\n"
        assert config.get_int("rendering.blank_line_breaks") == 2

    def test_theme_colours_are_all_used(self) -> None:
        """Every ANSI entry is a role's colour or the reset code."""
        ansi = config.get("theme.ansi")
        used = set(config.get("theme.roles").values()) | {"reset"}
        assert set(ansi) == used
