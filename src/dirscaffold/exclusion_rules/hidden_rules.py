"""Exclusion of hidden (dot-prefixed) entries."""

from .base_rules import BaseExclusionRules


class HiddenEntryExclusionRules(BaseExclusionRules):
    """Excludes entries whose name starts with a dot.

    Example:
        >>> rules = HiddenEntryExclusionRules()
        >>> rules.exclude(".git/")
        True
        >>> rules.exclude("src/")
        False
    """

    def exclude(self, name: str) -> bool:
        return name.startswith(".")
