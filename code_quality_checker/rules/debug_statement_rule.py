"""
Leftover debug output check.
"""

from ..issue import Severity
from ..rule_base import Rule
from ..utils import trim_line


class DebugStatementRule(Rule):
    """Flags debug output: a line starting with ``print(`` or containing ``console.log``.

    ``print(`` must be the first thing on the trimmed line, while
    ``console.log`` may appear anywhere, so ``x = print(y)`` is not flagged.
    """

    id = "debug-statement"
    title = "Debug statement"
    severity = Severity.SUGGESTION
    explanation = "Remove debug prints/logs in production code."

    def _matches(self, line: str) -> bool:
        trimmed = trim_line(line)
        return trimmed.startswith("print(") or "console.log" in trimmed
