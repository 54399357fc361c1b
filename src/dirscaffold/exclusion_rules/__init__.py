"""Exclusion rules for filtering entries by name."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .hidden_rules import HiddenEntryExclusionRules
from .name_rules import NamePatternExclusionRules, split_patterns

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "HiddenEntryExclusionRules",
    "NamePatternExclusionRules",
    "split_patterns",
]
