"""Exclusion of entries whose bare name matches a glob pattern."""

import re
from typing import List, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dirscaffold.exceptions import InvalidPatternError

from .base_rules import BaseExclusionRules

PatternsType = Union[str, Sequence[str]]

# Characters gitignore syntax would interpret; only "*" and "?" stay wildcards
_LITERAL_CHARS = "[]\\!#"


def split_patterns(patterns: PatternsType) -> List[str]:
    """Split pattern input into individual patterns.

    A single string is treated as a pipe-separated set of patterns. Each pattern is
    stripped of surrounding whitespace and empty patterns are dropped.

    Args:
        patterns: A pipe-separated string, or a sequence of pipe-separated strings.

    Returns:
        The individual patterns, in order.

    Example:
        >>> split_patterns("node_modules| .git |")
        ['node_modules', '.git']
        >>> split_patterns(["*.log", "dist|build"])
        ['*.log', 'dist', 'build']
    """
    if isinstance(patterns, str):
        patterns = [patterns]
    result = []
    for group in patterns:
        for segment in group.split("|"):
            segment = segment.strip()
            if segment:
                result.append(segment)
    return result


class NamePatternExclusionRules(BaseExclusionRules):
    """Excludes entries whose bare name matches any of a set of glob patterns.

    Only two characters are wildcards: ``*`` matches any run of characters and
    ``?`` matches exactly one character. Every other character, including ``[``,
    ``]`` and ``\\``, matches itself. A pattern ending in ``/`` matches
    directories only. Patterns are matched against bare names, never full paths,
    and a match against any one pattern excludes the entry.

    Patterns are compiled with the pathspec library after escaping everything
    gitignore syntax would otherwise interpret, so a leading ``!`` or ``#`` is
    taken literally and every pattern can only ever add exclusions.

    Attributes:
        patterns (List[str]): The patterns in the order they were given.
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = NamePatternExclusionRules("*.log|node_modules|build/|file[1].txt")
        >>> rules.exclude("app.log")
        True
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("build")
        False
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("file[1].txt"), rules.exclude("file1.txt")
        (True, False)
    """

    def __init__(self, patterns: PatternsType = ()) -> None:
        """Compile the given patterns.

        Args:
            patterns: A pipe-separated pattern string or a sequence of them.

        Raises:
            InvalidPatternError: If any pattern cannot be compiled.
        """
        self.patterns: List[str] = []
        self.spec = PathSpec([])
        for pattern in split_patterns(patterns):
            self.add_rule(pattern)

    def add_rule(self, rule: str) -> None:
        """Compile and add a single pattern.

        Args:
            rule: A glob pattern such as ``"*.pyc"`` or ``"node_modules"``.

        Raises:
            InvalidPatternError: If the pattern contains a ``/`` other than a single
                trailing one, or cannot be compiled.

        Example:
            >>> rules = NamePatternExclusionRules()
            >>> rules.add_rule("!important")
            >>> rules.exclude("!important")
            True
            >>> rules.exclude("important")
            False
        """
        dir_only = rule.endswith("/")
        name_part = rule[:-1] if dir_only else rule
        if not name_part or "/" in name_part:
            raise InvalidPatternError(rule, "patterns match bare names and may only end with '/'")

        literal = "".join("\\" + char if char in _LITERAL_CHARS else char for char in name_part)
        if dir_only:
            literal += "/"
        try:
            compiled = GitWildMatchPattern(literal)
        except (ValueError, re.error) as e:
            raise InvalidPatternError(rule, str(e)) from e

        # Ensure patterns is a list that supports append
        if not hasattr(self.spec.patterns, "append"):
            self.spec.patterns = list(self.spec.patterns)

        self.spec.patterns.append(compiled)
        self.patterns.append(rule)

    def exclude(self, name: str) -> bool:
        return bool(self.patterns) and self.spec.match_file(name)

    def has_rules(self) -> bool:
        return bool(self.patterns)
