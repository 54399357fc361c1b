from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of entry kinds assigned when an entry is discovered.

    The kind of an entry is decided once, during traversal, and never changes
    afterwards. Symlinks are classified from the link itself; their targets are
    never inspected.

    Attributes:
        FILE: Regular file, or any other non-directory, non-symlink object
        DIRECTORY: Directory
        SYMLINK: Symbolic link (always a leaf)
        UNREADABLE: Directory whose listing failed
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    UNREADABLE = "unreadable"
