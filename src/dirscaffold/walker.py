"""Directory traversal that turns a root path into a DirTree.

The walker is the only component that talks to a filesystem. It applies the
exclusion, directories-only and depth policies, imposes a total presentation
order on every directory's children, and contains listing failures below the
root as UNREADABLE nodes instead of aborting the traversal.
"""

import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from dirscaffold.exceptions import DirectoryListingError, RootPathError
from dirscaffold.exclusion_rules.base_rules import BaseExclusionRules
from dirscaffold.exclusion_rules.composite_rules import CompositeExclusionRules
from dirscaffold.exclusion_rules.hidden_rules import HiddenEntryExclusionRules
from dirscaffold.exclusion_rules.name_rules import NamePatternExclusionRules, split_patterns
from dirscaffold.file_system.base import BaseFileSystem
from dirscaffold.file_system.real import RealFileSystem
from dirscaffold.models import DirTree, FsEntry, TreeNode
from dirscaffold.types import EntryKind, PathType


class WalkOptions:
    """Traversal options for build_tree.

    Attributes:
        max_depth (Optional[int]): Number of directory levels to show below the root,
            or None for no limit. With ``max_depth=1`` only the root's own children
            are shown.
        exclude_patterns (Tuple[str, ...]): Glob patterns matched against bare names.
        directories_only (bool): Drop every entry that is not a directory.
        dirs_first (bool): List directories before all other entries.
        show_hidden (bool): Keep entries whose name starts with a dot.

    Example:
        >>> options = WalkOptions(max_depth=2, exclude_patterns="*.pyc|__pycache__")
        >>> options.exclude_patterns
        ('*.pyc', '__pycache__')
        >>> WalkOptions(max_depth=0)
        Traceback (most recent call last):
        ...
        ValueError: max_depth must be a positive integer, got 0
    """

    __slots__ = ("_max_depth", "_exclude_patterns", "_directories_only", "_dirs_first", "_show_hidden")

    def __init__(
        self,
        *,
        max_depth: Optional[int] = None,
        exclude_patterns: Union[str, Sequence[str]] = (),
        directories_only: bool = False,
        dirs_first: bool = False,
        show_hidden: bool = True,
    ) -> None:
        """Initialize traversal options.

        Args:
            max_depth: Positive depth limit, or None. Defaults to None.
            exclude_patterns: A pipe-separated pattern string or a sequence of them.
                Defaults to no patterns.
            directories_only: Show directories only. Defaults to False.
            dirs_first: Sort directories before other entries. Defaults to False.
            show_hidden: Show dot-prefixed entries. Defaults to True.

        Raises:
            ValueError: If max_depth is not a positive integer.
        """
        if max_depth is not None and (isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1):
            raise ValueError(f"max_depth must be a positive integer, got {max_depth!r}")
        self._max_depth = max_depth
        self._exclude_patterns = tuple(split_patterns(exclude_patterns))
        self._directories_only = directories_only
        self._dirs_first = dirs_first
        self._show_hidden = show_hidden

    @property
    def max_depth(self) -> Optional[int]:
        return self._max_depth

    @property
    def exclude_patterns(self) -> Tuple[str, ...]:
        return self._exclude_patterns

    @property
    def directories_only(self) -> bool:
        return self._directories_only

    @property
    def dirs_first(self) -> bool:
        return self._dirs_first

    @property
    def show_hidden(self) -> bool:
        return self._show_hidden

    def __repr__(self) -> str:
        return (
            f"WalkOptions(max_depth={self._max_depth!r}, exclude_patterns={self._exclude_patterns!r}, "
            f"directories_only={self._directories_only!r}, dirs_first={self._dirs_first!r}, "
            f"show_hidden={self._show_hidden!r})"
        )


def compile_exclusion_rules(options: WalkOptions) -> Optional[BaseExclusionRules]:
    """Build the exclusion rules implied by the options.

    Args:
        options: The traversal options.

    Returns:
        The combined rules, or None if nothing can be excluded by name.

    Raises:
        InvalidPatternError: If any exclusion pattern cannot be compiled.
    """
    rules: List[BaseExclusionRules] = [NamePatternExclusionRules(options.exclude_patterns)]
    if not options.show_hidden:
        rules.append(HiddenEntryExclusionRules())
    composite = CompositeExclusionRules(rules)
    return composite if composite.has_rules() else None


def _root_name(root_path: str) -> str:
    name = os.path.basename(os.path.normpath(root_path))
    # "/" has no basename; keep the entry name free of separators
    return name if name and os.sep not in name else ""


class _Walker:
    """Single-use traversal state shared by the recursive expansion."""

    def __init__(
        self, fs: BaseFileSystem, options: WalkOptions, exclusion_rules: Optional[BaseExclusionRules]
    ) -> None:
        self.fs = fs
        self.options = options
        self.exclusion_rules = exclusion_rules

    def _keep(self, name: str, kind: EntryKind) -> bool:
        if self.options.directories_only and kind is not EntryKind.DIRECTORY:
            return False
        if self.exclusion_rules is not None:
            match_name = f"{name}/" if kind is EntryKind.DIRECTORY else name
            if self.exclusion_rules.exclude(match_name):
                return False
        return True

    def _sort_key(self, entry: FsEntry) -> Tuple[bool, str, str]:
        # Codepoint order on the name; the rendered name only breaks exact ties
        dirs_last = self.options.dirs_first and entry.kind is not EntryKind.DIRECTORY
        return (dirs_last, entry.name, entry.display_name)

    def _should_expand(self, depth: int) -> bool:
        return self.options.max_depth is None or depth < self.options.max_depth

    def expand(self, path: Path, listing: List[Tuple[str, EntryKind]], depth: int) -> List[TreeNode]:
        """Build the child nodes of the directory at ``path``, listed at ``depth``."""
        entries = sorted(
            (FsEntry(name, kind) for name, kind in listing if self._keep(name, kind)),
            key=self._sort_key,
        )

        children = []
        for entry in entries:
            if entry.kind is EntryKind.DIRECTORY and self._should_expand(depth + 1):
                children.append(self.build_directory(path / entry.name, entry.name, depth + 1))
            else:
                # Symlinks are never expanded, which is what guarantees termination
                children.append(TreeNode(entry))
        return children

    def build_directory(self, path: Path, name: str, depth: int) -> TreeNode:
        try:
            listing = self.fs.list_dir(path)
        except DirectoryListingError as e:
            return TreeNode(FsEntry(name, EntryKind.UNREADABLE, error=e.description))
        return TreeNode(FsEntry(name, EntryKind.DIRECTORY), self.expand(path, listing, depth))


def build_tree(
    root_path: PathType,
    options: Optional[WalkOptions] = None,
    fs: Optional[BaseFileSystem] = None,
) -> DirTree:
    """Walk the directory at ``root_path`` and build its DirTree.

    The root is always shown, regardless of exclusion patterns. Every other
    directory that fails to list becomes an UNREADABLE leaf and traversal of its
    siblings and ancestors continues normally. Directories are listed one at a
    time, depth first, in presentation order.

    Args:
        root_path: The directory to walk. Its string form becomes the first line
            of the rendered tree.
        options: Traversal options. Defaults to WalkOptions().
        fs: The filesystem to read from. Defaults to RealFileSystem().

    Returns:
        The fully built tree.

    Raises:
        InvalidPatternError: If an exclusion pattern is malformed. Raised before
            anything is listed.
        RootPathError: If the root itself cannot be listed.

    Example:
        >>> from dirscaffold.file_system.fixture import FixtureFileSystem
        >>> fs = FixtureFileSystem({"b": None, "A": None, "a2": {}}, root="proj")
        >>> tree = build_tree("proj", fs=fs)
        >>> [child.name for child in tree.root.children]
        ['A', 'a2', 'b']
    """
    if options is None:
        options = WalkOptions()
    if fs is None:
        fs = RealFileSystem()
    exclusion_rules = compile_exclusion_rules(options)

    root_literal = os.fspath(root_path)
    path = Path(root_path)
    try:
        listing = fs.list_dir(path)
    except DirectoryListingError as e:
        raise RootPathError(root_literal, e.description) from e

    walker = _Walker(fs, options, exclusion_rules)
    root = TreeNode(FsEntry(_root_name(root_literal), EntryKind.DIRECTORY), walker.expand(path, listing, 0))
    return DirTree(root_literal, root)
