"""
Ordered collection of rules.
"""

from typing import Iterable, Iterator, List, Optional

from .rule_base import Rule
from .rules import DebugStatementRule, LongLineRule, LooseEqualityRule, TodoCommentRule


class RuleSet:
    """Rules evaluated in declaration order.

    Order decides the order of issues within a line, nothing else.
    """

    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self._rules: List[Rule] = []
        for rule in rules or ():
            self.add(rule)

    def add(self, rule: Rule) -> None:
        """Append a rule. Rule ids must be unique within the set."""
        if self.get(rule.id) is not None:
            raise ValueError(f"Rule already registered: {rule.id}")
        self._rules.append(rule)

    def remove(self, rule_id: str) -> Rule:
        """Remove and return the rule with the given id."""
        rule = self.get(rule_id)
        if rule is None:
            raise KeyError(rule_id)
        self._rules.remove(rule)
        return rule

    def get(self, rule_id: str) -> Optional[Rule]:
        for rule in self._rules:
            if rule.id == rule_id:
                return rule
        return None

    def ids(self) -> List[str]:
        return [rule.id for rule in self._rules]

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({self.ids()!r})"


def default_rule_set() -> RuleSet:
    """A fresh rule set holding the shipped rules in their fixed order."""
    return RuleSet([
        TodoCommentRule(),
        LongLineRule(),
        LooseEqualityRule(),
        DebugStatementRule(),
    ])
