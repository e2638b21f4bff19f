"""groupimports — group and order ES module imports by path pattern.

Stable public API:
    lint_source: Lint an ES module source string.
    fix_source: Return the source with its import block reordered.
    LintResult: Dataclass returned by lint_source.
    GroupConfiguration: Immutable pattern-group configuration.
    GroupImportsRule: The rule itself, for embedding in other hosts.
    GroupImportsParseError, MalformedImportError, GroupConfigurationError.
"""

__version__ = "0.1.0"

from groupimports.engine import LintResult, fix_source, lint_source
from groupimports.exceptions import (
    GroupConfigurationError,
    GroupImportsParseError,
    MalformedImportError,
)
from groupimports.lib.groups import GroupConfiguration
from groupimports.lib.rule import GroupImportsRule

__all__ = [
    "__version__",
    "lint_source",
    "fix_source",
    "LintResult",
    "GroupConfiguration",
    "GroupImportsRule",
    "GroupImportsParseError",
    "MalformedImportError",
    "GroupConfigurationError",
]
