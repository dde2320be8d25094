"""
TODO marker check.
"""

from ..issue import Severity
from ..rule_base import Rule
from ..utils import trim_line


class TodoCommentRule(Rule):
    """Flags lines that still carry a TODO marker (case-sensitive)."""

    id = "todo-comment"
    title = "TODO comment found"
    severity = Severity.WARNING
    explanation = "Consider resolving or removing TODOs before release."

    def _matches(self, line: str) -> bool:
        return "TODO" in trim_line(line)
