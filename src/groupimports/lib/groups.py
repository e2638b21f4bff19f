"""groups — the ordered pattern-group configuration.

A configuration is an ordered list of groups, each an ordered list of glob
patterns.  Both orders are significant: the group index is the primary
sort axis and the pattern index the secondary one.

Configurations are immutable values.  The rule receives one at
construction, so several configurations can coexist in a process (one per
project, one per test) without shared mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from groupimports.exceptions import GroupConfigurationError
from groupimports.lib import config


def validate_groups(data: Any) -> list[str]:
    """Validate the shape of a raw ``groups`` value.

    Args:
        data: The parsed YAML value.

    Returns:
        List of validation error messages. Empty if valid.
    """
    errors: list[str] = []

    if not isinstance(data, list):
        errors.append(f"'groups' must be a list of lists, got {type(data).__name__}")
        return errors

    if not data:
        errors.append("'groups' must contain at least one group")

    for gi, group in enumerate(data):
        if not isinstance(group, list):
            errors.append(f"groups[{gi}] must be a list, got {type(group).__name__}")
            continue
        if not group:
            errors.append(f"groups[{gi}] must contain at least one pattern")
        for pi, pattern in enumerate(group):
            if not isinstance(pattern, str) or not pattern:
                errors.append(f"groups[{gi}][{pi}] must be a non-empty string")

    return errors


def validate_unmatched(value: Any) -> list[str]:
    """Validate an ``unmatched`` placement policy."""
    valid = list(config.get("unmatched_policies").values())
    if value not in valid:
        return [f"'unmatched' must be one of {valid}, got {value!r}"]
    return []


@dataclass(frozen=True)
class GroupConfiguration:
    """Validated pattern groups plus the unmatched-path policy.

    Attributes:
        groups: Pattern groups in priority order.
        unmatched: ``"last"`` (own trailing group) or ``"first"`` (slot 0/0).
    """

    groups: tuple[tuple[str, ...], ...]
    unmatched: str = "last"

    @classmethod
    def from_value(
        cls,
        groups: Any,
        unmatched: Any = None,
        *,
        source: str = "<config>",
    ) -> GroupConfiguration:
        """Validate raw YAML values and build a configuration.

        Args:
            groups: List of lists of glob strings.
            unmatched: Placement policy; the packaged default when None.
            source: Label used in error messages.

        Raises:
            GroupConfigurationError: If validation fails.
        """
        if unmatched is None:
            unmatched = config.get_str("unmatched")
        errors = validate_groups(groups) + validate_unmatched(unmatched)
        if errors:
            raise GroupConfigurationError(source, errors)
        return cls(
            groups=tuple(tuple(group) for group in groups),
            unmatched=unmatched,
        )

    @classmethod
    def default(cls) -> GroupConfiguration:
        """Return the configuration packaged in defaults.yaml."""
        return cls.from_value(config.get("groups"), source="defaults.yaml")

    @property
    def unmatched_first(self) -> bool:
        return self.unmatched == config.get_str("unmatched_policies.first")

    @property
    def unmatched_group_index(self) -> int:
        """Group index given to paths no pattern matches."""
        return 0 if self.unmatched_first else len(self.groups)

    @property
    def pattern_span(self) -> int:
        """Numeric base for pattern indices; larger than any pattern index."""
        return max(len(group) for group in self.groups) + 1
