"""In-memory filesystem built from a literal layout description.

The fixture filesystem performs no I/O, so traversal results depend only on the
layout it was built from. It is used to exercise the walker deterministically.
"""

from pathlib import PurePath, PurePosixPath
from typing import Any, Dict, List, Mapping, Optional, Union

from dirscaffold.exceptions import DirectoryListingError
from dirscaffold.types import EntryKind, PathType

from .base import BaseFileSystem, ListedEntry


class FixtureSymlink:
    """Layout marker for a symbolic link.

    The target is recorded for readability of fixtures only; it is never followed.

    Attributes:
        target (str): Where the link points.
    """

    def __init__(self, target: str = "") -> None:
        self.target = target


class FixtureError:
    """Layout marker for a directory whose listing fails.

    Attributes:
        description (str): The failure description reported when it is listed.
    """

    def __init__(self, description: str = "Permission denied") -> None:
        self.description = description


# A layout maps names to: a nested mapping (directory), None or str (file),
# FixtureSymlink (symlink) or FixtureError (unlistable directory)
LayoutValue = Union[Mapping[str, Any], None, str, FixtureSymlink, FixtureError]


def _normalize(path: PathType) -> str:
    return str(PurePosixPath(PurePath(path).as_posix()))


class FixtureFileSystem(BaseFileSystem):
    """A filesystem described by nested mappings.

    Every directory listing is recorded in ``calls``, which lets tests check that
    nothing is listed twice and that symlinks are never expanded.

    Attributes:
        root (str): Path at which the layout is mounted.
        calls (List[str]): Normalized paths passed to list_dir, in call order.

    Example:
        >>> fs = FixtureFileSystem(
        ...     {"src": {"main.py": None}, "loop": FixtureSymlink(".."), "secret": FixtureError()},
        ...     root="proj",
        ... )
        >>> sorted(fs.list_dir("proj"))  # doctest: +NORMALIZE_WHITESPACE
        [('loop', <EntryKind.SYMLINK: 'symlink'>), ('secret', <EntryKind.DIRECTORY: 'directory'>),
         ('src', <EntryKind.DIRECTORY: 'directory'>)]
        >>> fs.list_dir("proj/secret")
        Traceback (most recent call last):
        ...
        dirscaffold.exceptions.DirectoryListingError: proj/secret: Permission denied
    """

    def __init__(self, layout: Mapping[str, LayoutValue], root: PathType = "fixture") -> None:
        """Initialize the fixture from a layout.

        Args:
            layout: Mapping describing the contents of the root directory.
            root: Path at which the layout is mounted. Defaults to "fixture".

        Raises:
            ValueError: If a name in the layout contains a path separator or a value
                has an unsupported type.
        """
        self.root = _normalize(root)
        self.calls: List[str] = []
        self._directories: Dict[str, List[ListedEntry]] = {}
        self._files: Dict[str, EntryKind] = {}
        self._errors: Dict[str, str] = {}
        self._add_directory(self.root, layout)

    def _add_directory(self, path: str, layout: Mapping[str, LayoutValue]) -> None:
        entries: List[ListedEntry] = []
        for name, value in layout.items():
            if not name or "/" in name:
                raise ValueError(f"Invalid fixture entry name: {name!r}")
            child_path = str(PurePosixPath(path) / name)
            if isinstance(value, Mapping):
                entries.append((name, EntryKind.DIRECTORY))
                self._add_directory(child_path, value)
            elif isinstance(value, FixtureError):
                entries.append((name, EntryKind.DIRECTORY))
                self._errors[child_path] = value.description
            elif isinstance(value, FixtureSymlink):
                entries.append((name, EntryKind.SYMLINK))
                self._files[child_path] = EntryKind.SYMLINK
            elif value is None or isinstance(value, str):
                entries.append((name, EntryKind.FILE))
                self._files[child_path] = EntryKind.FILE
            else:
                raise ValueError(f"Unsupported fixture value for {child_path}: {type(value).__name__}")
        self._directories[path] = entries

    def set_error(self, path: PathType, description: str) -> None:
        """Make listing ``path`` fail with ``description``.

        Args:
            path: Any path, existing in the layout or not.
            description: The failure description to report.
        """
        self._errors[_normalize(path)] = description

    def list_dir(self, path: PathType) -> List[ListedEntry]:
        key = _normalize(path)
        self.calls.append(key)

        error: Optional[str] = self._errors.get(key)
        if error is not None:
            raise DirectoryListingError(key, error)
        if key in self._directories:
            return list(self._directories[key])
        if key in self._files:
            raise DirectoryListingError(key, "Not a directory")
        raise DirectoryListingError(key, "No such file or directory")
