"""
The View contract.

A view is any object with a ``title`` and a ``content`` method. Display it by
passing it to ``Construct.display``:

    class Foo:
        def title(self) -> str:
            return "Title"

        def content(self, terminal, construct) -> None:
            terminal.write_line("hello world")

    Construct().display(Foo())

``content`` receives the router, so a view can move on to the next screen by
calling ``construct.display(next_view)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .terminal import Terminal

if TYPE_CHECKING:
    from .router import Construct


@runtime_checkable
class View(Protocol):
    """A screen that can be written to the terminal."""

    def title(self) -> str:
        """Heading displayed above the content."""
        ...

    def content(self, terminal: Terminal, construct: "Construct") -> None:
        """
        Write the body of the view.

        Args:
            terminal: Output target to write to
            construct: Router displaying this view, for chaining navigation

        Raises:
            WriteError: If a write to the terminal fails
        """
        ...
