import pytest

from repellent.call_site import CallSite


class ListSink:
    """Collects emitted lines instead of printing them."""

    def __init__(self):
        self.lines = []
        self.flushes = 0

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def flush(self) -> None:
        self.flushes += 1


@pytest.fixture
def sink() -> ListSink:
    return ListSink()


@pytest.fixture
def site() -> CallSite:
    return CallSite(operation="addOne()", line=7, file_id="Views/ContentView.swift")
