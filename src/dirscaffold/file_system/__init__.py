"""Filesystem access for directory traversal.

The walker only talks to a filesystem through :class:`BaseFileSystem`, so the
same traversal logic runs against the real filesystem or an in-memory fixture.
"""

from .base import BaseFileSystem
from .fixture import FixtureError, FixtureFileSystem, FixtureSymlink
from .real import RealFileSystem

__all__ = [
    "BaseFileSystem",
    "FixtureError",
    "FixtureFileSystem",
    "FixtureSymlink",
    "RealFileSystem",
]
