"""
Declarative configuration for console loggers.
"""

from dataclasses import dataclass
from typing import Optional

from repellent.console_exceptions import ConsoleConfigError


@dataclass(frozen=True)
class ConsoleConfig:
    """
    Rendering options shared by both logger variants.
    """

    root_marker: Optional[str] = None
    # Path marker (e.g. "myproject/") after which the file tag starts.
    # None keeps only the file's basename.

    sequence_width: int = 3
    # Minimum zero-padded width of the sequence number.

    time_format: str = "%H:%M:%S"
    # strftime pattern of the timestamp column.

    def __post_init__(self):
        if self.sequence_width < 1:
            raise ConsoleConfigError(
                "sequence_width must be at least 1",
                details={"sequence_width": self.sequence_width},
            )
        if not self.time_format:
            raise ConsoleConfigError("time_format must not be empty")
        if self.root_marker == "":
            raise ConsoleConfigError("root_marker must be None or non-empty")
