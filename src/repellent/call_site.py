from __future__ import annotations

import inspect
import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CallSite:
    """
    Source location a log call was made from.

    Either passed explicitly by the caller or captured from
    the Python call stack with CallSite.capture().
    """

    operation: str
    # Function / method identifier. May carry a parameter list,
    # e.g. "addOne()" or "foo(bar:)".

    line: int
    # Source line number of the call expression.

    file_id: str
    # File identifier, usually a path such as "app/views/content.py".

    @classmethod
    def capture(cls, depth: int = 1) -> "CallSite":
        """
        Build a CallSite from the frame `depth` levels above the caller.

        depth=1 describes whoever called the function that calls capture().
        """
        frame = inspect.currentframe()
        try:
            target = frame.f_back if frame is not None else None
            for _ in range(depth):
                if target is None or target.f_back is None:
                    break
                target = target.f_back

            if target is None:
                return cls(operation="<unknown>", line=0, file_id="<unknown>")

            return cls(
                operation=target.f_code.co_name,
                line=target.f_lineno,
                file_id=target.f_code.co_filename,
            )
        finally:
            # Break the frame reference cycle
            del frame

    @property
    def operation_tag(self) -> str:
        """Operation name truncated at its first parenthesis."""
        return self.operation.split("(", 1)[0]

    def file_tag(self, root_marker: Optional[str] = None) -> str:
        """
        File identifier with its path prefix and extension removed.

        With a root marker, everything up to and including its last
        occurrence is dropped; without one (or when it is absent from
        the identifier) only the basename is kept.
        """
        file_id = self.file_id.replace("\\", "/")

        if root_marker and root_marker in file_id:
            tag = file_id.rsplit(root_marker, 1)[1]
        else:
            tag = file_id.rsplit("/", 1)[-1]

        stem, _ext = os.path.splitext(tag)
        return stem or tag
