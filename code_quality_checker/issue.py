"""
Issue data models for the code quality checker.
"""

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Issue severity levels. Values are the wire names."""
    WARNING = "warning"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class Issue:
    """A single finding reported by a rule.

    ``message`` always starts with ``Line <N>:``; consumers that only see the
    text recover the line number from it. ``line_number`` carries the same
    number as a structured field.
    """
    severity: Severity
    title: str
    message: str
    line_number: int
    rule_id: str = ""

    @property
    def type(self) -> str:
        """Wire name of the severity."""
        return self.severity.value
