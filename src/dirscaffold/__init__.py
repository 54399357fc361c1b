"""Deterministic ASCII directory trees.

This package walks a directory through a swappable filesystem interface and
renders the result with the classic ``|--`` / ```--`` scaffold, producing the
same bytes on every run over an unchanged filesystem.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirscaffold")
except PackageNotFoundError:
    __version__ = "unknown"
