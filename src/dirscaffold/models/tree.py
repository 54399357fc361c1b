"""Tree model produced by the walker and consumed by the renderer."""

from typing import Any, Iterable, Iterator, Optional, Tuple

from dirscaffold.models.entry import FsEntry
from dirscaffold.types import EntryKind


class TreeNode:
    """A directory-structure node: one entry plus its ordered children.

    Children are stored in presentation order and are fixed at construction.
    Only DIRECTORY nodes may have children; a directory whose expansion was cut
    off by a depth limit simply has none.

    Attributes:
        entry (FsEntry): The entry this node wraps.
        children (tuple[TreeNode, ...]): Child nodes in presentation order.

    Example:
        >>> leaf = TreeNode(FsEntry("main.py", EntryKind.FILE))
        >>> root = TreeNode(FsEntry("src", EntryKind.DIRECTORY), [leaf])
        >>> [child.name for child in root.children]
        ['main.py']
    """

    __slots__ = ("_entry", "_children")

    def __init__(self, entry: FsEntry, children: Iterable["TreeNode"] = ()) -> None:
        """Initialize a TreeNode.

        Args:
            entry: The entry this node represents.
            children: Child nodes in presentation order.

        Raises:
            ValueError: If a non-directory entry is given children.
        """
        children = tuple(children)
        if children and entry.kind is not EntryKind.DIRECTORY:
            raise ValueError(f"Only directories may have children, got {entry!r}")
        self._entry = entry
        self._children: Tuple[TreeNode, ...] = children

    @property
    def entry(self) -> FsEntry:
        return self._entry

    @property
    def children(self) -> Tuple["TreeNode", ...]:
        return self._children

    @property
    def name(self) -> str:
        return self._entry.name

    @property
    def kind(self) -> EntryKind:
        return self._entry.kind

    @property
    def error(self) -> Optional[str]:
        return self._entry.error

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Yield this node and all of its descendants in depth-first order."""
        yield self
        for child in self._children:
            yield from child.iter_nodes()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TreeNode):
            return False
        return self._entry == other._entry and self._children == other._children

    def __hash__(self) -> int:
        return hash((self._entry, self._children))

    def __repr__(self) -> str:
        return f"TreeNode({self._entry!r}, children={len(self._children)})"


class DirTree:
    """The complete result of one traversal.

    Attributes:
        root_path (str): The root path literal, printed as the first output line.
        root (TreeNode): The root node; always a DIRECTORY.
    """

    __slots__ = ("_root_path", "_root")

    def __init__(self, root_path: str, root: TreeNode) -> None:
        self._root_path = root_path
        self._root = root

    @property
    def root_path(self) -> str:
        return self._root_path

    @property
    def root(self) -> TreeNode:
        return self._root

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DirTree):
            return False
        return self._root_path == other._root_path and self._root == other._root

    def __hash__(self) -> int:
        return hash((self._root_path, self._root))

    def __repr__(self) -> str:
        return f"DirTree(root_path={self._root_path!r}, root={self._root!r})"
