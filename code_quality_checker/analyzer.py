"""
Analyzer that runs the rule set over every line of a snippet.
"""

import logging
from typing import List, Optional

from .issue import Issue
from .report import Report
from .rule_set import RuleSet, default_rule_set
from .utils import split_lines

logger = logging.getLogger(__name__)


class CodeQualityAnalyzer:
    """Main analyzer for per-line code quality checks."""

    def __init__(self, rule_set: Optional[RuleSet] = None):
        self.rule_set = rule_set if rule_set is not None else default_rule_set()

    def analyze(self, code: str, language: str) -> Report:
        """Analyze a snippet and return its report.

        Lines are numbered from 1. Issues come out in line order, and within a
        line in rule order. The result depends only on ``code``, ``language``
        and the rule set.
        """
        lines = split_lines(code)
        issues: List[Issue] = []
        for line_number, line in enumerate(lines, 1):
            for rule in self.rule_set:
                issues.extend(rule.evaluate(line, line_number, language))

        report = Report.from_issues(issues)
        logger.debug(
            "Analyzed %d line(s) of %s: %d issue(s)", len(lines), language, report.total
        )
        return report


def analyze_code(code: str, language: str) -> Report:
    """Analyze with the default rule set."""
    return CodeQualityAnalyzer().analyze(code, language)
