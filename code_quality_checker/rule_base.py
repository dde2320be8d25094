"""
Base rule class for per-line code quality checks.
"""

from typing import FrozenSet, List, Optional

from .issue import Issue, Severity
from .utils import format_line_message


class Rule:
    """Base class for all rules.

    A rule looks at exactly one line at a time. Subclasses set the class
    attributes and override ``_matches``; rules that emit more than one issue
    per line override ``evaluate`` instead.
    """

    id: str = ""
    title: str = ""
    severity: Severity = Severity.WARNING
    explanation: str = ""
    # None means the rule applies to every language.
    languages: Optional[FrozenSet[str]] = None

    def applies_to(self, language: str) -> bool:
        """True if the rule is enabled for the given language tag (exact match)."""
        return self.languages is None or language in self.languages

    def evaluate(self, line: str, line_number: int, language: str) -> List[Issue]:
        """Run the rule on one raw (untrimmed) line. Returns zero or more issues."""
        if not self.applies_to(language):
            return []
        if not self._matches(line):
            return []
        return [self._issue(line_number)]

    def _matches(self, line: str) -> bool:
        """Override in subclasses to implement the check."""
        return False

    def _issue(self, line_number: int, explanation: Optional[str] = None) -> Issue:
        """Build an issue for this rule at the given line."""
        return Issue(
            severity=self.severity,
            title=self.title,
            message=format_line_message(line_number, explanation or self.explanation),
            line_number=line_number,
            rule_id=self.id,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
