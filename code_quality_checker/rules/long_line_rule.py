"""
Line length check.
"""

from ..issue import Severity
from ..rule_base import Rule

MAX_LINE_LENGTH = 100


class LongLineRule(Rule):
    """Flags lines longer than ``max_length`` characters.

    Length is measured on the raw line as stored: leading/trailing whitespace
    counts and tabs are one character each.
    """

    id = "long-line"
    title = "Line too long"
    severity = Severity.SUGGESTION
    explanation = "Break this line into smaller parts for readability."

    def __init__(self, max_length: int = MAX_LINE_LENGTH):
        self.max_length = max_length

    def _matches(self, line: str) -> bool:
        return len(line) > self.max_length
