"""Filesystem implementation backed by the operating system."""

import os
from typing import List

from dirscaffold.exceptions import DirectoryListingError
from dirscaffold.types import EntryKind, PathType

from .base import BaseFileSystem, ListedEntry


def describe_os_error(error: OSError) -> str:
    """Return the short description of an OSError, e.g. 'Permission denied'."""
    return error.strerror or str(error)


class RealFileSystem(BaseFileSystem):
    """Lists directories with ``os.scandir``.

    Symlinks are classified from the link itself: a symlink to a directory is
    reported as SYMLINK, never as DIRECTORY. Objects that are neither
    directories nor symlinks (regular files, sockets, FIFOs, devices) are
    reported as FILE.
    """

    def list_dir(self, path: PathType) -> List[ListedEntry]:
        entries: List[ListedEntry] = []
        try:
            with os.scandir(path) as it:
                for entry in it:
                    entries.append((entry.name, self._classify(entry)))
        except OSError as e:
            raise DirectoryListingError(os.fspath(path), describe_os_error(e)) from e
        return entries

    @staticmethod
    def _classify(entry: "os.DirEntry[str]") -> EntryKind:
        try:
            if entry.is_symlink():
                return EntryKind.SYMLINK
            if entry.is_dir(follow_symlinks=False):
                return EntryKind.DIRECTORY
        except OSError:
            # Vanished or cannot be stat'ed; shown as a plain leaf
            return EntryKind.FILE
        return EntryKind.FILE
