"""Output format constants for steamstats.

These constants prevent stringly-typed format names in client code and in
the CLI.
"""

from enum import Enum


class OutputFormat(str, Enum):
    """Target representation for a parsed dump."""

    JSON = "json"
    CSHARP = "csharp"
