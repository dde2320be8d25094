"""
Analysis report model.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from .issue import Issue, Severity


@dataclass(frozen=True)
class Report:
    """Result of one analysis run: ordered issues plus counts per severity.

    Counts are derived from ``issues`` and cannot be set independently.
    """
    issues: Tuple[Issue, ...] = ()
    suggested_code: Optional[str] = None
    _counts: Dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "issues", tuple(self.issues))
        counts = {s.value: 0 for s in Severity}
        for issue in self.issues:
            counts[issue.severity.value] = counts.get(issue.severity.value, 0) + 1
        object.__setattr__(self, "_counts", counts)

    @classmethod
    def from_issues(cls, issues: Iterable[Issue]) -> "Report":
        return cls(issues=tuple(issues))

    @property
    def total(self) -> int:
        return len(self.issues)

    @property
    def warnings(self) -> int:
        return self._counts[Severity.WARNING.value]

    @property
    def suggestions(self) -> int:
        return self._counts[Severity.SUGGESTION.value]

    def counts(self) -> Dict[str, int]:
        """Issue count for every severity value."""
        return dict(self._counts)

    def with_suggested_code(self, suggested_code: Optional[str]) -> "Report":
        """Copy of this report carrying the rewrite collaborator's result."""
        return replace(self, suggested_code=suggested_code)

    def to_dict(self) -> Dict[str, Any]:
        """Transport shape of the report."""
        return {
            "warnings": self.warnings,
            "suggestions": self.suggestions,
            "total": self.total,
            "issues": [
                {
                    "type": i.type,
                    "title": i.title,
                    "message": i.message,
                    "line_number": i.line_number,
                }
                for i in self.issues
            ],
            "suggested_code": self.suggested_code,
        }
