"""Unit tests for the RealFileSystem class."""

import errno
import os
from unittest.mock import patch

import pytest

from dirscaffold.exceptions import DirectoryListingError
from dirscaffold.file_system.real import RealFileSystem, describe_os_error
from dirscaffold.types import EntryKind


@pytest.fixture
def temp_directory(tmp_path):
    (tmp_path / "dir1").mkdir()
    (tmp_path / "dir1" / "file1.txt").touch()
    (tmp_path / "file2.py").touch()
    return tmp_path


@pytest.fixture
def temp_directory_with_symlinks(temp_directory):
    """Add a symlink to a directory and a symlink back to the parent."""
    try:
        os.symlink(temp_directory / "dir1", temp_directory / "link_to_dir")
        os.symlink(temp_directory, temp_directory / "dir1" / "loop")
        has_symlinks = True
    except (OSError, NotImplementedError):
        has_symlinks = False
    return temp_directory, has_symlinks


def test_list_dir(temp_directory):
    listing = dict(RealFileSystem().list_dir(temp_directory))
    assert listing == {"dir1": EntryKind.DIRECTORY, "file2.py": EntryKind.FILE}


def test_list_dir_accepts_strings(temp_directory):
    listing = RealFileSystem().list_dir(str(temp_directory / "dir1"))
    assert listing == [("file1.txt", EntryKind.FILE)]


def test_symlinks_are_not_followed(temp_directory_with_symlinks):
    """A symlink to a directory is classified as SYMLINK."""
    tmp_path, has_symlinks = temp_directory_with_symlinks
    if not has_symlinks:
        pytest.skip("Symlink creation not supported on this platform/environment")

    fs = RealFileSystem()
    assert dict(fs.list_dir(tmp_path))["link_to_dir"] is EntryKind.SYMLINK
    assert dict(fs.list_dir(tmp_path / "dir1"))["loop"] is EntryKind.SYMLINK


def test_missing_directory(tmp_path):
    with pytest.raises(DirectoryListingError) as excinfo:
        RealFileSystem().list_dir(tmp_path / "missing")
    assert excinfo.value.description == "No such file or directory"
    assert excinfo.value.path == str(tmp_path / "missing")


def test_not_a_directory(temp_directory):
    with pytest.raises(DirectoryListingError) as excinfo:
        RealFileSystem().list_dir(temp_directory / "file2.py")
    assert excinfo.value.description == "Not a directory"


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root can read any directory")
def test_permission_denied(tmp_path):
    secret = tmp_path / "secret"
    secret.mkdir()
    secret.chmod(0)
    try:
        with pytest.raises(DirectoryListingError) as excinfo:
            RealFileSystem().list_dir(secret)
        assert excinfo.value.description == "Permission denied"
    finally:
        secret.chmod(0o755)


def test_permission_denied_mocked(tmp_path):
    """Errors raised by scandir are converted to DirectoryListingError."""
    error = PermissionError(errno.EACCES, "Permission denied")
    with patch("dirscaffold.file_system.real.os.scandir", side_effect=error):
        with pytest.raises(DirectoryListingError) as excinfo:
            RealFileSystem().list_dir(tmp_path)
    assert excinfo.value.description == "Permission denied"
    assert isinstance(excinfo.value.__cause__, PermissionError)


def test_describe_os_error():
    assert describe_os_error(OSError(errno.EIO, "Input/output error")) == "Input/output error"
    assert describe_os_error(OSError("opaque failure")) == "opaque failure"
