"""In-memory representation of a walked directory."""

from .entry import FsEntry
from .tree import DirTree, TreeNode

__all__ = [
    "DirTree",
    "FsEntry",
    "TreeNode",
]
