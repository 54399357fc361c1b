"""ASCII rendering of a DirTree.

The renderer is a pure, single-pass, depth-first walk over an already built
tree. It never touches the filesystem, so rendering the same tree twice always
produces the same text.
"""

from typing import Iterator, Protocol

from dirscaffold.models import DirTree, TreeNode

BRANCH = "|-- "
LAST_BRANCH = "`-- "
PIPE_PREFIX = "|   "
SPACE_PREFIX = "    "


class TextSink(Protocol):
    """Anything with a ``write(str)`` method, e.g. a text stream or SafeWriter."""

    def write(self, data: str) -> object: ...


def format_node(node: TreeNode) -> str:
    """Format a node's name with its directory suffix and inline error annotation.

    Example:
        >>> from dirscaffold.models import FsEntry
        >>> from dirscaffold.types import EntryKind
        >>> format_node(TreeNode(FsEntry("secret", EntryKind.UNREADABLE, error="Permission denied")))
        'secret/ [error: Permission denied]'
    """
    text = node.entry.display_name
    if node.error is not None:
        text += f" [error: {node.error}]"
    return text


def stream_tree_representation(tree: DirTree) -> Iterator[str]:
    """Generate the tree representation one line at a time.

    The first line is the root path literal. Every other line is an inherited
    prefix, a connector (``|-- `` for all but the last sibling, ```-- `` for the
    last) and the formatted node. Lines carry no trailing newline.

    Args:
        tree: The tree to render.

    Yields:
        Lines of the tree representation.

    Example:
        >>> from dirscaffold.file_system.fixture import FixtureFileSystem
        >>> from dirscaffold.walker import build_tree
        >>> fs = FixtureFileSystem({"src": {"main.py": None}, "README.md": None}, root="proj")
        >>> for line in stream_tree_representation(build_tree("proj", fs=fs)):
        ...     print(line)
        proj
        |-- README.md
        `-- src/
            `-- main.py
    """

    def write_children(node: TreeNode, prefix: str) -> Iterator[str]:
        last_index = len(node.children) - 1
        for i, child in enumerate(node.children):
            is_last = i == last_index
            connector = LAST_BRANCH if is_last else BRANCH
            yield f"{prefix}{connector}{format_node(child)}"
            if child.children:
                yield from write_children(child, prefix + (SPACE_PREFIX if is_last else PIPE_PREFIX))

    yield tree.root_path
    yield from write_children(tree.root, "")


def render(tree: DirTree, sink: TextSink) -> None:
    """Write the tree representation to ``sink``, one newline-terminated line per write.

    Args:
        tree: The tree to render.
        sink: Destination for the text.

    Raises:
        OSError: Propagated from the sink if writing fails.
    """
    for line in stream_tree_representation(tree):
        sink.write(line + "\n")


def get_tree_representation(tree: DirTree) -> str:
    """Get the complete tree representation as a newline-terminated string."""
    return "".join(line + "\n" for line in stream_tree_representation(tree))
