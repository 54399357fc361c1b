"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    An entry is excluded if ANY of the constituent rules excludes it.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from dirscaffold.exclusion_rules.hidden_rules import HiddenEntryExclusionRules
        >>> from dirscaffold.exclusion_rules.name_rules import NamePatternExclusionRules
        >>> composite = CompositeExclusionRules([HiddenEntryExclusionRules(), NamePatternExclusionRules("*.tmp")])
        >>> composite.exclude(".env")
        True
        >>> composite.exclude("cache.tmp")
        True
        >>> composite.exclude("README.md")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine, evaluated in order.

        Raises:
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, name: str) -> bool:
        return any(rule.exclude(name) for rule in self.rules)

    def has_rules(self) -> bool:
        """True if ANY constituent rule can exclude something."""
        return any(rule.has_rules() for rule in self.rules)
