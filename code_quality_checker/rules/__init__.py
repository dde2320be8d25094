"""
Rules package for per-line code quality checks.
"""

from .todo_rule import TodoCommentRule
from .long_line_rule import LongLineRule, MAX_LINE_LENGTH
from .loose_equality_rule import LooseEqualityRule
from .debug_statement_rule import DebugStatementRule

__all__ = [
    'TodoCommentRule',
    'LongLineRule',
    'LooseEqualityRule',
    'DebugStatementRule',
    'MAX_LINE_LENGTH',
]
