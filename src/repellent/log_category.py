from enum import Enum
from typing import Optional


class LogCategory(str, Enum):
    """
    Semantic category attached to a console log line.

    NONE renders no label at all; every other member renders
    as its upper-cased name followed by a colon.
    """

    ERROR = "error"        # An operation failed
    WARNING = "warning"    # Unexpected but recoverable condition
    INFO = "info"          # Information about the running operation
    SUCCESS = "success"    # An operation succeeded
    DEBUG = "debug"        # General debugging output
    NONE = "none"          # No category

    @property
    def id(self) -> str:
        return self.value

    @property
    def label(self) -> Optional[str]:
        """
        Display label for this category, or None for NONE.
        """
        if self is LogCategory.NONE:
            return None
        return f"{self.name}:"
