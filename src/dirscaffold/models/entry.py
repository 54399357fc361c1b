"""Entry model for a single discovered filesystem object."""

import os
from typing import Any, Optional

from dirscaffold.types import EntryKind


class FsEntry:
    """Immutable description of one filesystem entry.

    Attributes:
        name (str): The final path segment of the entry, never a full path.
        kind (EntryKind): Classification decided at discovery time.
        error (Optional[str]): Listing failure description, only set for UNREADABLE entries.

    Example:
        >>> entry = FsEntry("src", EntryKind.DIRECTORY)
        >>> entry.display_name
        'src/'
        >>> FsEntry("secret", EntryKind.UNREADABLE, error="Permission denied").error
        'Permission denied'
    """

    __slots__ = ("_name", "_kind", "_error")

    def __init__(self, name: str, kind: EntryKind, error: Optional[str] = None) -> None:
        """Initialize an FsEntry.

        Args:
            name: The bare entry name.
            kind: The entry classification.
            error: Failure description. Required for, and only allowed on, UNREADABLE entries.

        Raises:
            ValueError: If the name contains a path separator, or the error does not
                agree with the kind.
        """
        if "/" in name or os.sep in name:
            raise ValueError(f"Entry name must not contain a path separator: {name!r}")
        if (kind is EntryKind.UNREADABLE) != (error is not None):
            raise ValueError(f"An error description is required exactly for unreadable entries, got {kind}")
        self._name = name
        self._kind = kind
        self._error = error

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> EntryKind:
        return self._kind

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_dir(self) -> bool:
        """True for directories, including those that could not be listed."""
        return self._kind in (EntryKind.DIRECTORY, EntryKind.UNREADABLE)

    @property
    def display_name(self) -> str:
        """The name as printed in a tree: directories carry a trailing slash."""
        return f"{self._name}/" if self.is_dir else self._name

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FsEntry):
            return False
        return self._name == other._name and self._kind == other._kind and self._error == other._error

    def __hash__(self) -> int:
        return hash((self._name, self._kind, self._error))

    def __repr__(self) -> str:
        if self._error is None:
            return f"FsEntry(name={self._name!r}, kind={self._kind})"
        return f"FsEntry(name={self._name!r}, kind={self._kind}, error={self._error!r})"
