"""config — typed, dotted-key access to the packaged ``defaults.yaml``.

Everything the rule and its front ends print or compare against lives in
that file, grouped by section:

    rule        identifier, message and the note for withheld fixes
    groups      the default pattern groups and the ``unmatched`` policy
    matching    wcmatch flag names for the glob primitive
    rendering   quote character, line separator, blank-line count
    formatting  stderr frame, summary and ``classify`` templates
    statuses / exit_codes / formats / theme / files

A key is addressed as ``"section.name"``.  The mapping is read once and
cached; ``reset()`` drops the cache so tests start from the file again.
Project files never write into it: per-project settings are carried by
``lib.project.ProjectConfig``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from groupimports.lib.yaml_loader import load_yaml

_DEFAULTS: Optional[dict[str, Any]] = None

_CONFIG_FILE = Path(__file__).resolve().parent.parent / "config" / "defaults.yaml"


def load_defaults() -> dict[str, Any]:
    """Return the parsed ``defaults.yaml``, reading it on first use.

    Raises:
        FileNotFoundError: If the package data file is missing.
        yaml.YAMLError: If it is not valid YAML.
        TypeError: If its top level is not a mapping.
    """
    global _DEFAULTS  # noqa: PLW0603
    if _DEFAULTS is None:
        data = load_yaml(_CONFIG_FILE)
        if not isinstance(data, dict):
            msg = f"defaults.yaml must be a YAML mapping, got {type(data).__name__}"
            raise TypeError(msg)
        _DEFAULTS = data
    return _DEFAULTS


def get(dotted_key: str) -> Any:
    """Return the value at a dot-separated path such as ``"rule.message"``.

    Raises:
        KeyError: If any segment of the path is missing.
    """
    node: Any = load_defaults()
    for part in dotted_key.split("."):
        if not isinstance(node, dict) or part not in node:
            msg = f"Config key not found: {dotted_key!r} (missing segment: {part!r})"
            raise KeyError(msg)
        node = node[part]
    return node


def _typed(dotted_key: str, expected: type) -> Any:
    value = get(dotted_key)
    # bool is an int subclass; a YAML `true` must not pass as a number.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        msg = f"Expected {expected.__name__} for {dotted_key!r}, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def get_str(dotted_key: str) -> str:
    """Return a config value that must be a string."""
    return _typed(dotted_key, str)


def get_int(dotted_key: str) -> int:
    """Return a config value that must be an integer."""
    return _typed(dotted_key, int)


def get_bool(dotted_key: str) -> bool:
    """Return a config value that must be a boolean."""
    return _typed(dotted_key, bool)


def get_list(dotted_key: str) -> list[Any]:
    """Return a config value that must be a list."""
    return _typed(dotted_key, list)


def reset() -> None:
    """Clear the cached defaults (used by tests)."""
    global _DEFAULTS  # noqa: PLW0603
    _DEFAULTS = None
