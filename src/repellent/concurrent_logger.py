import threading
from typing import Any, Callable, Optional, Tuple

from repellent.console_config import ConsoleConfig
from repellent.console_logger import ConsoleLogger
from repellent.console_sink import LogSink
from repellent.log_category import LogCategory


class ConcurrentLogger(ConsoleLogger):
    """
    Console logger that is safe to call from any number of threads.

    Each call claims its sequence number and records its category in
    one critical section, so numbers are unique and gapless and every
    line is rendered with its own category. Formatting and printing
    happen outside the lock: lines can reach stdout in a different
    order than their sequence numbers.
    """

    def __init__(
        self,
        *,
        config: Optional[ConsoleConfig] = None,
        sink: Optional[LogSink] = None,
        terminate: Optional[Callable[[int], Any]] = None,
    ):
        super().__init__(config=config, sink=sink, terminate=terminate)
        self._lock = threading.Lock()

    def _advance(self, category: LogCategory) -> Tuple[int, LogCategory]:
        with self._lock:
            return self._state.advance(category)
