"""
Terminal output targets.

The router never talks to the terminal directly. It goes through the
``Terminal`` protocol, whose default implementation delegates to a Rich
``Console`` for line writing, size detection and cursor control.
"""

from __future__ import annotations

import errno
import os
from contextlib import contextmanager
from typing import IO, Any, Iterator, Optional, Protocol, runtime_checkable

from rich.console import Console
from rich.control import Control, ControlType
from rich.text import Text

from .errors import WriteError


@runtime_checkable
class Terminal(Protocol):
    """Operations the router needs from an output target."""

    def write_line(self, text: str, style: Optional[str] = None) -> None:
        ...

    def write_str(self, text: str) -> None:
        ...

    def visible_line_count(self) -> Optional[int]:
        ...

    def clear_last_lines(self, count: int) -> None:
        ...


class _TerminalConsole(Console):
    """Console that surfaces broken pipes instead of exiting the process."""

    def on_broken_pipe(self) -> None:
        raise BrokenPipeError(errno.EPIPE, os.strerror(errno.EPIPE))


def _adopt_console(console: Console) -> _TerminalConsole:
    """
    Rebuild a console as one that surfaces broken pipes.

    Args:
        console: Caller supplied Rich console

    Returns:
        Console writing to the same file with the same geometry and colours
    """
    return _TerminalConsole(
        file=console.file,
        width=console.width,
        height=console.height,
        color_system=console.color_system,
        force_terminal=console.is_terminal,
        soft_wrap=console.soft_wrap,
    )


@contextmanager
def _wrap_write_errors(action: str) -> Iterator[None]:
    """
    Re-raise output failures as WriteError.

    Args:
        action: Short description of the failed operation
    """
    try:
        yield
    except (OSError, ValueError) as exc:
        raise WriteError(f"Failed to {action}: {exc}", cause=exc) from exc


class ConsoleTerminal:
    """Terminal backed by a Rich console."""

    def __init__(self, console: Optional[Console] = None):
        """
        Wrap a console.

        A plain Rich console passed in by the caller is rebound onto a console
        with the same file, size and colour settings that raises WriteError on
        a broken pipe. Rich's own handler would exit the process.

        Args:
            console: Rich console to write to (defaults to stdout)
        """
        if console is None:
            console = _TerminalConsole()
        elif not isinstance(console, _TerminalConsole):
            console = _adopt_console(console)
        self.console = console

    @classmethod
    def stdout(cls) -> "ConsoleTerminal":
        """Terminal bound to the process standard output."""
        return cls(_TerminalConsole())

    @classmethod
    def stderr(cls) -> "ConsoleTerminal":
        """Terminal bound to the process standard error."""
        return cls(_TerminalConsole(stderr=True))

    @classmethod
    def from_file(cls, file: IO[str], **console_kwargs: Any) -> "ConsoleTerminal":
        """
        Terminal writing to an arbitrary text file.

        Args:
            file: Writable text stream
            **console_kwargs: Extra arguments for the Rich console

        Returns:
            ConsoleTerminal over ``file``
        """
        return cls(_TerminalConsole(file=file, **console_kwargs))

    def write_line(self, text: str, style: Optional[str] = None) -> None:
        with _wrap_write_errors("write line"):
            self.console.print(Text(text, style=style or ""), soft_wrap=True)

    def write_str(self, text: str) -> None:
        with _wrap_write_errors("write to terminal"):
            self.console.print(Text(text), end="", soft_wrap=True)

    def write_line_break(self) -> None:
        """Write an empty line."""
        write_line_break(self)

    def visible_line_count(self) -> Optional[int]:
        """
        Number of rows visible in the terminal.

        Returns:
            Terminal height, or None when output is not a terminal
        """
        if not self.console.is_terminal:
            return None
        return self.console.size.height

    def clear_last_lines(self, count: int) -> None:
        """
        Erase the current line and the ``count`` lines above it.

        Args:
            count: Number of previously written lines to erase
        """
        if count <= 0:
            return
        codes = [(ControlType.CARRIAGE_RETURN,), (ControlType.ERASE_IN_LINE, 2)]
        codes += [(ControlType.CURSOR_UP, 1), (ControlType.ERASE_IN_LINE, 2)] * count
        with _wrap_write_errors(f"clear {count} lines"):
            self.console.control(Control(*codes))

    def __repr__(self) -> str:
        name = getattr(self.console.file, "name", None) or type(self.console.file).__name__
        return f"ConsoleTerminal({name})"


def write_line_break(terminal: Terminal) -> None:
    """
    Write a single empty line to a terminal.

    Args:
        terminal: Output target
    """
    terminal.write_str("\n")
