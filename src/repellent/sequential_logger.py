from typing import Tuple

from repellent.console_logger import ConsoleLogger
from repellent.log_category import LogCategory


class SequentialLogger(ConsoleLogger):
    """
    Console logger for a single logical thread of control (e.g. a UI thread).

    State is mutated without any synchronization. Used from several
    threads at once, sequence numbers may repeat or be skipped and a
    line may carry another call's category label.
    """

    def _advance(self, category: LogCategory) -> Tuple[int, LogCategory]:
        sequence, _ = self._state.advance(category)
        # Rendered from the shared field, so concurrent callers can cross labels
        return sequence, self._state.last_category
