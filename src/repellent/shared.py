"""
Process-wide logger handles.

Each handle is created on first use and lives until the process
exits. Code that wants its own counter should construct a logger
directly instead.
"""

import threading
import warnings
from typing import Optional

from repellent.concurrent_logger import ConcurrentLogger
from repellent.sequential_logger import SequentialLogger

_handle_lock = threading.Lock()
_console: Optional[ConcurrentLogger] = None
_sequential: Optional[SequentialLogger] = None


def get_console() -> ConcurrentLogger:
    """Shared thread-safe logger."""
    global _console
    if _console is None:
        with _handle_lock:
            if _console is None:
                _console = ConcurrentLogger()
    return _console


def get_sequential_logger() -> SequentialLogger:
    """
    Shared single-threaded logger.

    Deprecated in favour of get_console().
    """
    global _sequential
    warnings.warn(
        "The shared SequentialLogger is deprecated; use get_console() instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    if _sequential is None:
        with _handle_lock:
            if _sequential is None:
                _sequential = SequentialLogger()
    return _sequential
