"""
Shared contract of the sequential and concurrent console loggers.

Every operation formats its line the same way in both variants;
subclasses only decide how the sequence counter is advanced.
"""

from __future__ import annotations

import os
import sys
import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Iterator, NoReturn, Optional, Tuple, TypeVar

from repellent.call_site import CallSite
from repellent.console_config import ConsoleConfig
from repellent.console_sink import ConsoleSink, LogSink
from repellent.formatter import (
    display,
    format_call_tag,
    format_category_label,
    format_duration,
    format_prefix,
    join_items,
    represent,
)
from repellent.log_category import LogCategory
from repellent.logger_state import LoggerState

T = TypeVar("T")

FATAL_EXIT_STATUS = 1


def terminate_process(status: int) -> NoReturn:
    """
    Flush the standard streams and end the process immediately.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except Exception:
            pass
    os._exit(status)


class ConsoleLogger(ABC):
    """
    Numbered, timestamped and caller-tagged console logging.

    Each call is assigned the next sequence number and printed as
    "<seq> | <HH:mm:ss> | [file.operation.line] CATEGORY: text".
    """

    def __init__(
        self,
        *,
        config: Optional[ConsoleConfig] = None,
        sink: Optional[LogSink] = None,
        terminate: Optional[Callable[[int], Any]] = None,
    ):
        self._config = config or ConsoleConfig()
        self._sink = sink or ConsoleSink()
        self._terminate = terminate or terminate_process
        self._state = LoggerState()

    # -------------------------------------------------
    # Variant seam
    # -------------------------------------------------
    @abstractmethod
    def _advance(self, category: LogCategory) -> Tuple[int, LogCategory]:
        """
        Claim the next sequence number for a call of `category`.

        Returns the sequence number and the category to render.
        """
        raise NotImplementedError

    # -------------------------------------------------
    # Introspection
    # -------------------------------------------------
    @property
    def sequence_count(self) -> int:
        return self._state.sequence_count

    @property
    def last_category(self) -> LogCategory:
        return self._state.last_category

    @property
    def config(self) -> ConsoleConfig:
        return self._config

    # -------------------------------------------------
    # Logging
    # -------------------------------------------------
    def log(
        self,
        *items: Any,
        call_site: Optional[CallSite] = None,
        category: LogCategory = LogCategory.NONE,
        simple: bool = False,
    ) -> None:
        """
        Print the items, space separated, as one numbered line.
        """
        site = self._site(call_site)
        sequence, shown = self._advance(category)
        self._write(sequence, self._body(site, shown, join_items(items), simple))

    def log_message(
        self,
        message: str = "",
        *items: Any,
        call_site: Optional[CallSite] = None,
        category: LogCategory = LogCategory.NONE,
        profile: bool = False,
        simple: bool = False,
    ) -> None:
        """
        Print a message, followed by any items, as one numbered line.

        profile=True drops the line number from the call tag.
        """
        site = self._site(call_site)
        sequence, shown = self._advance(category)

        text = display(message)
        if items:
            text = f"{text} {join_items(items)}"

        self._write(sequence, self._body(site, shown, text, simple, profile))

    # -------------------------------------------------
    # Profiling
    # -------------------------------------------------
    def profile(
        self,
        block: Callable[..., T],
        *args: Any,
        call_site: Optional[CallSite] = None,
        **kwargs: Any,
    ) -> T:
        """
        Run block(*args, **kwargs) and log how long it took in milliseconds.

        The duration line is written whether the block returns or raises;
        a raised exception propagates unchanged.
        """
        site = self._site(call_site)
        start = time.perf_counter()
        try:
            return block(*args, **kwargs)
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            self._log_duration(elapsed, site)

    def profiling(self, call_site: Optional[CallSite] = None):
        """
        Context-manager form of profile() for timing a `with` block.
        """
        return self._profiling(self._site(call_site))

    @contextmanager
    def _profiling(self, site: CallSite) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            self._log_duration(elapsed, site)

    def _log_duration(self, elapsed_ms: float, site: CallSite) -> None:
        self.log_message(
            f"*** Executed task in {format_duration(elapsed_ms)}ms ***",
            call_site=site,
            profile=True,
        )

    # -------------------------------------------------
    # Reporting helpers
    # -------------------------------------------------
    def guard_blocked(
        self,
        reason: Optional[str] = None,
        call_site: Optional[CallSite] = None,
    ) -> None:
        """
        Report that a guard condition was not met.
        """
        site = self._site(call_site)
        if reason is not None:
            message = f"BLOCKED: Function did not pass guard ({reason})"
        else:
            message = "BLOCKED: Function did not pass guard"
        self.log_message(message, call_site=site)

    def catch_error(
        self,
        error: BaseException,
        include_context: bool = True,
        call_site: Optional[CallSite] = None,
    ) -> None:
        """
        Log a caught error's description under the ERROR category.

        With include_context, the error's full representation follows
        on a bare "==> ..." line.
        """
        site = self._site(call_site)
        description = display(error) or type(error).__name__
        self.log_message(description, call_site=site, category=LogCategory.ERROR)
        if include_context:
            self._sink.emit(f"==> {represent(error)}")

    def fatal(
        self,
        message: str,
        *items: Any,
        call_site: Optional[CallSite] = None,
    ) -> NoReturn:
        """
        Log "FATAL ERROR: <message>" and terminate the process with status 1.
        """
        site = self._site(call_site)
        self.log_message(f"FATAL ERROR: {display(message)}", *items, call_site=site)
        self._sink.flush()
        self._terminate(FATAL_EXIT_STATUS)
        # An injected terminator is not allowed to hand control back
        raise SystemExit(FATAL_EXIT_STATUS)

    # -------------------------------------------------
    # Internals
    # -------------------------------------------------
    @staticmethod
    def _site(call_site: Optional[CallSite]) -> CallSite:
        if call_site is not None:
            return call_site
        # Skip this helper and the public operation that called it
        return CallSite.capture(depth=2)

    def _body(
        self,
        site: CallSite,
        category: LogCategory,
        text: str,
        simple: bool,
        profile: bool = False,
    ) -> str:
        if simple:
            return text
        tag = format_call_tag(site, profile, self._config.root_marker)
        return f"{tag} {format_category_label(category)}{text}"

    def _write(self, sequence: int, body: str) -> None:
        prefix = format_prefix(
            sequence,
            width=self._config.sequence_width,
            time_format=self._config.time_format,
        )
        self._sink.emit(prefix + body)
