from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Rules are consulted once per discovered entry, before the entry is added to
    the tree. They only ever see the entry's bare name: directories are passed
    with a trailing slash (``"build/"``) and every other kind without one
    (``"app.log"``), so that directory-only rules can tell the two apart.

    Example:
        >>> from dirscaffold.exclusion_rules.name_rules import NamePatternExclusionRules
        >>> rules = NamePatternExclusionRules("*.log|node_modules")
        >>> rules.exclude("app.log")
        True
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("main.rs")
        False
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if an entry should be excluded.

        Args:
            name (str): The bare entry name, with a trailing slash for directories.

        Returns:
            bool: True if the entry should be excluded, False if it should be kept.
        """
        pass

    def has_rules(self) -> bool:
        """Whether this rule set can exclude anything at all."""
        return True
