"""Signal-aware output sink for the dirscaffold CLI."""

import errno
import os
import types
from pathlib import Path
from typing import IO, Optional, Type, Union

from dirscaffold.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes UTF-8 text to a file descriptor or a file path.

    Names that are not valid UTF-8 are written as their original bytes, the same
    way ``os.fsencode`` would restore them.

    Every write checks for a pending SIGPIPE or SIGINT first, so output stops at
    a line boundary once the reader has gone away or the user interrupted the
    run. A closed pipe is always reported as BrokenPipeError.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The file descriptor being written to.
    """

    def __init__(self, file: Union[int, str, "os.PathLike[str]"]):
        """Initialize the safe writer.

        Args:
            file: A file descriptor (int), or a path that is opened for writing.

        Raises:
            TypeError: If file is neither an int nor path-like.
        """
        self.file = file
        self._closed = False
        self._file_obj: Optional[IO[bytes]] = None

        if isinstance(file, int):
            self.fd = file
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write all of ``data``.

        Args:
            data: String data to write.

        Raises:
            BrokenPipeError: If an interruption signal was received or the pipe is broken.
            OSError: If another I/O error occurs during writing.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        view = memoryview(data.encode("utf-8", errors="surrogateescape"))
        try:
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def close(self) -> None:
        """Close the file if this writer opened it. Safe to call more than once."""
        if self._closed:
            return

        try:
            if self._file_obj is not None:
                self._file_obj.close()
        except OSError as e:
            if e.errno != errno.EPIPE:
                raise
        finally:
            self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes priority over one from close()
            if exc_type is None:
                raise
