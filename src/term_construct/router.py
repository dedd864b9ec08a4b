"""
View based routing for the terminal.

Create a ``Construct`` and pass views to ``display``:

    construct = Construct()
    construct.display(Foo())

or configure one through the builder:

    construct = (
        Construct.builder()
        .with_terminal(ConsoleTerminal.stdout())
        .with_logo("Logo")
        .build()
    )
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from rich.console import Console

from . import clearing
from .clearing import ClearingStrategy, FixedBound
from .config import ConstructConfig
from .terminal import ConsoleTerminal, Terminal
from .theme import THEME
from .view import View

logger = logging.getLogger(__name__)


class Construct:
    """Displays one view at a time, clearing the previous one first."""

    def __init__(self, config: Optional[ConstructConfig] = None):
        """
        Initialize the router.

        Args:
            config: Router configuration (stdout, no logo, exact clearing
                if omitted)
        """
        self._config = config if config is not None else ConstructConfig()

    @staticmethod
    def builder() -> "ConstructBuilder":
        """Create a ``ConstructBuilder``."""
        return ConstructBuilder()

    @property
    def config(self) -> ConstructConfig:
        return self._config

    @property
    def terminal(self) -> Terminal:
        return self._config.terminal

    @property
    def logo(self) -> Optional[str]:
        return self._config.decoration

    @property
    def clearing_strategy(self) -> ClearingStrategy:
        return self._config.clearing_strategy

    def clear(self) -> int:
        """
        Erase previously written output using the configured strategy.

        Returns:
            Number of lines erased

        Raises:
            WriteError: If the terminal write fails
        """
        return clearing.clear(self.terminal, self.clearing_strategy)

    def display(self, view: View) -> None:
        """
        Display a view in the terminal.

        Clears the previous output, writes the logo (if any) and the view
        title, then hands the terminal to the view's content renderer.

        Args:
            view: View to display

        Raises:
            WriteError: If any write to the terminal fails. Nothing else is
                written for this call once a write has failed.
        """
        cleared = self.clear()
        if self.logo is not None:
            self.terminal.write_line(self.logo, style=THEME["logo"])

        title = view.title()
        logger.debug("Displaying view %r (cleared %d lines)", title, cleared)
        self.terminal.write_line(title, style=THEME["title"])
        view.content(self.terminal, self)

    navigate = display

    def __repr__(self) -> str:
        return (
            f"Construct(terminal={self.terminal!r}, logo={self.logo!r}, "
            f"clearing_strategy={self.clearing_strategy!r})"
        )


class ConstructBuilder:
    """
    Builder for ``Construct``.

    Every ``with_*`` method returns the builder so calls can be chained.
    """

    def __init__(self) -> None:
        self._options: Dict[str, Any] = {}

    def with_terminal(self, terminal: Terminal) -> "ConstructBuilder":
        """Use a specific output target."""
        self._options["terminal"] = terminal
        return self

    def with_console(self, console: Console) -> "ConstructBuilder":
        """Write to an existing Rich console (its file, size and colours)."""
        return self.with_terminal(ConsoleTerminal(console))

    def with_logo(self, logo: str) -> "ConstructBuilder":
        """Write ``logo`` above the title of every view."""
        self._options["decoration"] = logo
        return self

    def with_clearing_strategy(self, strategy: ClearingStrategy) -> "ConstructBuilder":
        """Choose how previous output is erased."""
        self._options["clearing_strategy"] = strategy
        return self

    def with_fixed_bound(self, lines: int) -> "ConstructBuilder":
        """Always erase ``lines`` lines, whatever the terminal size."""
        return self.with_clearing_strategy(FixedBound(lines=lines))

    def build(self) -> Construct:
        """
        Build a new ``Construct``.

        Returns:
            Router using the configured options (stdout if no terminal was set)
        """
        return Construct(ConstructConfig(**self._options))
