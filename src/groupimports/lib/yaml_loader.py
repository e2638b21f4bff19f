"""yaml_loader — PyYAML entry points for groupimports.

Two documents are read through here: the packaged ``defaults.yaml``
(by ``lib.config``) and a project's ``.groupimports.yaml`` (by
``lib.project``).  Both use ``safe_load`` and UTF-8; an empty document
comes back as None and callers decide what that means.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

import yaml


def load_yaml(path: Union[str, Path]) -> Optional[Any]:
    """Load a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed contents, or None if the file is empty.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML.
    """
    with open(path, "r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def load_yaml_string(text: str) -> Optional[Any]:
    """Parse YAML from a string."""
    return yaml.safe_load(text)
