"""Signal handling for the dirscaffold CLI.

SIGINT and SIGPIPE are recorded rather than acted on immediately, so the
writer can stop at a line boundary and the CLI can exit with the conventional
status code (130 for SIGINT, 141 for SIGPIPE).
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, Optional

# SIGPIPE does not exist on Windows
SIGPIPE: Optional[int] = getattr(signal, "SIGPIPE", None)

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records interruption signals received while the tree is being written.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._original_handlers: Dict[int, Any] = {}

    @property
    def interrupted(self) -> bool:
        """True once either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """The exit status implied by received signals, or None if there were none."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None

    def _handle(self, signum: int, frame: Optional[FrameType]) -> None:
        if signum == signal.SIGINT:
            self.sigint_received.set()
        elif signum == SIGPIPE:
            self.sigpipe_received.set()
        # A second delivery of the same signal gets the original behavior
        signal.signal(signum, self._original_handlers.get(signum, signal.SIG_DFL))

    def install(self) -> None:
        """Install handlers for SIGINT and, where available, SIGPIPE."""
        for signum in (signal.SIGINT, SIGPIPE):
            if signum is None:
                continue
            self._original_handlers[signum] = signal.getsignal(signum)
            signal.signal(signum, self._handle)

    def restore(self) -> None:
        """Put back the handlers that were active before install()."""
        for signum, handler in self._original_handlers.items():
            signal.signal(signum, handler)
        self._original_handlers.clear()


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure signal handlers for SIGPIPE and SIGINT."""
    signal_handler.install()


def cleanup() -> None:
    """Cleanup function registered with atexit.

    Redirects stdout to the null device after an interruption so that flushing
    the interpreter's stdout at shutdown does not print a second error.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
