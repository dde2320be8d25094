"""
JavaScript loose equality check.
"""

from ..issue import Severity
from ..rule_base import Rule
from ..utils import trim_line


class LooseEqualityRule(Rule):
    """Flags ``==`` in JavaScript lines that do not also contain ``===``.

    This is a plain substring test. It also fires on ``==`` inside string
    literals and comments.
    """

    id = "loose-equality"
    title = "Loose equality operator"
    severity = Severity.WARNING
    explanation = "Use '===' instead of '==' to avoid unexpected type coercion."
    languages = frozenset({"javascript"})

    def _matches(self, line: str) -> bool:
        trimmed = trim_line(line)
        return "==" in trimmed and "===" not in trimmed
