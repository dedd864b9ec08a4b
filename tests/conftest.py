"""
Pytest configuration and fixtures.
"""

import io
import sys
from pathlib import Path
from typing import List, Optional

import pytest


def pytest_configure(config):
    """Configure pytest."""
    # Add src to path
    src_path = Path(__file__).parent.parent / "src"
    sys.path.insert(0, str(src_path))


class FakeScreen:
    """
    Terminal that simulates a screen.

    ``lines`` holds completed lines still on screen; erasing removes them the
    way cursor-up plus erase-line would. ``fail_after`` makes the write after
    that many successful writes fail; ``fail_on_clear`` makes erasing fail.
    """

    def __init__(
        self,
        height: Optional[int] = None,
        fail_after: Optional[int] = None,
        fail_on_clear: bool = False,
    ):
        self.height = height
        self.fail_after = fail_after
        self.fail_on_clear = fail_on_clear
        self.lines: List[str] = []
        self.pending = ""
        self.writes: List[str] = []
        self.styles: List[Optional[str]] = []
        self.cleared: List[int] = []

    @staticmethod
    def _broken_pipe(action: str):
        from term_construct import WriteError

        return WriteError(f"Failed to {action}: broken pipe", cause=BrokenPipeError())

    def _record(self, text: str) -> None:
        if self.fail_after is not None and len(self.writes) >= self.fail_after:
            raise self._broken_pipe("write line")
        self.writes.append(text)

    def write_line(self, text: str, style: Optional[str] = None) -> None:
        self._record(text)
        self.styles.append(style)
        self.lines.append(self.pending + text)
        self.pending = ""

    def write_str(self, text: str) -> None:
        self._record(text)
        parts = (self.pending + text).split("\n")
        self.lines.extend(parts[:-1])
        self.pending = parts[-1]

    def visible_line_count(self) -> Optional[int]:
        return self.height

    def clear_last_lines(self, count: int) -> None:
        if self.fail_on_clear:
            raise self._broken_pipe(f"clear {count} lines")
        if count <= 0:
            return
        self.cleared.append(count)
        self.pending = ""
        del self.lines[max(0, len(self.lines) - count):]


@pytest.fixture
def screen() -> FakeScreen:
    """Screen that cannot report its size."""
    return FakeScreen()


@pytest.fixture
def make_screen():
    """Factory for screens with a given height or failure point."""
    return FakeScreen


@pytest.fixture
def output() -> io.StringIO:
    """Text buffer standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def plain_terminal(output: io.StringIO):
    """Console terminal over a non-tty buffer (no colour, no control codes)."""
    from term_construct import ConsoleTerminal

    return ConsoleTerminal.from_file(output, force_terminal=False, width=80)


@pytest.fixture
def tty_terminal(output: io.StringIO):
    """Console terminal that behaves like a 24 row tty."""
    from term_construct import ConsoleTerminal

    return ConsoleTerminal.from_file(
        output, force_terminal=True, color_system=None, width=80, height=24
    )
