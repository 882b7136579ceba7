from repellent.call_site import CallSite
from repellent.concurrent_logger import ConcurrentLogger
from repellent.console_config import ConsoleConfig
from repellent.console_exceptions import ConsoleConfigError, ConsoleError
from repellent.console_logger import ConsoleLogger
from repellent.console_sink import ConsoleSink, LogSink
from repellent.log_category import LogCategory
from repellent.sequential_logger import SequentialLogger
from repellent.shared import get_console, get_sequential_logger

__all__ = [
    "CallSite",
    "ConcurrentLogger",
    "ConsoleConfig",
    "ConsoleConfigError",
    "ConsoleError",
    "ConsoleLogger",
    "ConsoleSink",
    "LogCategory",
    "LogSink",
    "SequentialLogger",
    "get_console",
    "get_sequential_logger",
]
