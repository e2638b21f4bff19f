"""Custom exceptions for groupimports.

Exceptions:
    GroupImportsParseError — esprima could not parse a source file.
        Wraps the original parse exception.
    MalformedImportError — an import declaration breaks the record
        invariants (duplicate default or namespace binding, namespace
        combined with named bindings).
    GroupConfigurationError — the pattern-group configuration is not an
        ordered list of lists of glob strings, or names an unknown policy.

Messages are templated from ``config/defaults.yaml``.
"""

from __future__ import annotations

from groupimports.lib import config


class GroupImportsError(Exception):
    """Base class for all groupimports errors."""


class GroupImportsParseError(GroupImportsError):
    """Raised when a source file cannot be parsed as an ES module.

    An unparseable file is reported as an error rather than treated as
    having no imports, so broken files never silently pass.
    """

    def __init__(self, filepath: str, original_error: Exception) -> None:
        self.filepath = filepath
        self.original_error = original_error
        msg = config.get_str("messages.parse_error")
        super().__init__(msg.format(filepath=filepath, error=original_error))


class MalformedImportError(GroupImportsError):
    """Raised when a declaration cannot be turned into a valid ImportRecord."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        msg = config.get_str("messages.malformed_import")
        super().__init__(msg.format(path=path, reason=reason))


class GroupConfigurationError(GroupImportsError):
    """Raised when a group configuration fails validation.

    Attributes:
        source: Where the configuration came from (file path or label).
        errors: Human-readable validation messages.
    """

    def __init__(self, source: str, errors: list[str]) -> None:
        self.source = source
        self.errors = list(errors)
        msg = config.get_str("messages.config_error")
        super().__init__(msg.format(source=source, errors="; ".join(self.errors)))
