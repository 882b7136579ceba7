from dataclasses import dataclass
from typing import Tuple

from repellent.log_category import LogCategory


@dataclass
class LoggerState:
    """
    Mutable state owned by a single logger instance.

    sequence_count only ever grows, by exactly one per logging call.
    It is never reset; a fresh count requires a fresh logger.
    """

    sequence_count: int = 0
    # Number of log lines issued so far.

    last_category: LogCategory = LogCategory.NONE
    # Category of the most recently started call.

    def advance(self, category: LogCategory) -> Tuple[int, LogCategory]:
        """
        Increment the counter and record the category.

        Not synchronized. Returns the (sequence, category) pair
        assigned to this call.
        """
        self.sequence_count += 1
        self.last_category = category
        return self.sequence_count, category
