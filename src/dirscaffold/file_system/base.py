from abc import ABC, abstractmethod
from typing import List, Tuple

from dirscaffold.types import EntryKind, PathType

# A listed child: its bare name and a kind hint (FILE, DIRECTORY or SYMLINK)
ListedEntry = Tuple[str, EntryKind]


class BaseFileSystem(ABC):
    """
    Abstract base class defining the filesystem capability used by the walker.

    A filesystem has a single operation: list the immediate children of one
    directory. Implementations classify each child as a file, directory or
    symlink without following symlinks, and report every failure as a
    DirectoryListingError so the caller can decide how to handle it.

    Example:
        >>> from dirscaffold.file_system.fixture import FixtureFileSystem
        >>> fs = FixtureFileSystem({"docs": {}, "README.md": None}, root="proj")
        >>> sorted(name for name, _ in fs.list_dir("proj"))
        ['README.md', 'docs']
    """

    @abstractmethod
    def list_dir(self, path: PathType) -> List[ListedEntry]:
        """
        List the immediate children of the directory at ``path``.

        Args:
            path: The directory to list.

        Returns:
            An unordered list of ``(name, kind)`` pairs, where ``kind`` is one of
            EntryKind.FILE, EntryKind.DIRECTORY or EntryKind.SYMLINK.

        Raises:
            DirectoryListingError: If the directory cannot be listed for any reason.
        """
        pass
