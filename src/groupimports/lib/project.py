"""project — discovery and loading of ``.groupimports.yaml``.

A project file may set::

    groups:            # ordered list of ordered glob lists
      - ["react", "react-*"]
      - ["components/**/*"]
    unmatched: last    # or "first"
    logging:
      enabled: true
      directory: .groupimports/logs

Lookup order: an explicit path (``--config``), then ``$GROUPIMPORTS_CONFIG``,
then the nearest ``.groupimports.yaml`` walking up from the linted file.
Without any project file the packaged defaults apply.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from groupimports.exceptions import GroupConfigurationError
from groupimports.lib import config
from groupimports.lib.groups import GroupConfiguration, validate_groups, validate_unmatched
from groupimports.lib.yaml_loader import load_yaml


@dataclass(frozen=True)
class ProjectConfig:
    """Effective settings for one lint run.

    Attributes:
        configuration: Pattern groups and unmatched policy.
        logging_enabled: Whether to append JSONL lint telemetry.
        log_directory: Where the telemetry file lives.
        path: The project file these settings came from, if any.
    """

    configuration: GroupConfiguration
    logging_enabled: bool = False
    log_directory: str = ""
    path: Optional[Path] = None


def validate_project_config(data: Any) -> list[str]:
    """Validate the structure of a parsed project file.

    Returns:
        List of validation error messages. Empty if valid.
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        errors.append(f"Project config must be a mapping, got {type(data).__name__}")
        return errors

    if "groups" in data:
        errors.extend(validate_groups(data["groups"]))

    if "unmatched" in data:
        errors.extend(validate_unmatched(data["unmatched"]))

    logging_cfg = data.get("logging")
    if logging_cfg is not None:
        if not isinstance(logging_cfg, dict):
            errors.append(
                f"'logging' must be a mapping, got {type(logging_cfg).__name__}"
            )
        else:
            enabled = logging_cfg.get("enabled")
            if enabled is not None and not isinstance(enabled, bool):
                errors.append("logging.enabled must be a boolean")
            directory = logging_cfg.get("directory")
            if directory is not None and not isinstance(directory, str):
                errors.append("logging.directory must be a string")

    return errors


def find_project_config(start: Union[str, Path]) -> Optional[Path]:
    """Walk up from ``start`` looking for the project file.

    Args:
        start: A file or directory to begin the search from.

    Returns:
        Path of the nearest project file, or None.
    """
    filename = config.get_str("filenames.project_config")
    here = Path(start).resolve()
    if not here.is_dir():
        here = here.parent
    for directory in (here, *here.parents):
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


def load_project_config(path: Union[str, Path]) -> ProjectConfig:
    """Load and validate a project file.

    Raises:
        FileNotFoundError: If the file does not exist.
        GroupConfigurationError: If the file is not valid YAML or its
            content is invalid.
    """
    try:
        data = load_yaml(path)
    except yaml.YAMLError as exc:
        raise GroupConfigurationError(str(path), [str(exc)]) from exc
    if data is None:
        data = {}
    errors = validate_project_config(data)
    if errors:
        raise GroupConfigurationError(str(path), errors)

    configuration = GroupConfiguration.from_value(
        data.get("groups", config.get("groups")),
        data.get("unmatched"),
        source=str(path),
    )
    logging_cfg = data.get("logging") or {}
    return ProjectConfig(
        configuration=configuration,
        logging_enabled=logging_cfg.get("enabled", False),
        log_directory=logging_cfg.get("directory", ""),
        path=Path(path),
    )


def resolve_project_config(
    filepath: Union[str, Path, None] = None,
    explicit: Union[str, Path, None] = None,
) -> ProjectConfig:
    """Return the settings that apply to ``filepath``.

    Args:
        filepath: The file being linted; its directory anchors discovery.
        explicit: A project file chosen by the caller.
    """
    if explicit:
        return load_project_config(explicit)

    env = os.environ.get(config.get_str("env_vars.config"))
    if env:
        return load_project_config(env)

    found = find_project_config(filepath if filepath else Path.cwd())
    if found is not None:
        return load_project_config(found)

    return ProjectConfig(configuration=GroupConfiguration.default())
