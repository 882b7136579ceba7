import sys
import threading
from typing import Protocol


class LogSink(Protocol):
    """
    Destination for finished console lines.
    """

    def emit(self, line: str) -> None:
        """
        Write one complete line.

        Must not raise exceptions outward.
        """

    def flush(self) -> None:
        """
        Push any buffered lines to their destination.

        Must not raise exceptions outward.
        """


class ConsoleSink:
    """
    Log sink that writes each line to standard output.

    sys.stdout is looked up on every write so redirection
    and test capture take effect without rebuilding the sink.
    """

    def __init__(self):
        self._lock = threading.Lock()

    def emit(self, line: str) -> None:
        try:
            with self._lock:
                sys.stdout.write(line + "\n")
        except Exception:
            # Never allow logging to break the caller
            pass

    def flush(self) -> None:
        try:
            with self._lock:
                sys.stdout.flush()
        except Exception:
            pass
