"""
Clearing strategies for view transitions.

``Exact`` erases as many lines as the terminal reports visible and only falls
back to a fixed count when the terminal cannot report its size.
``FixedBound`` always erases a fixed number of lines and leaves residue when
more than that were written.
"""

from __future__ import annotations

import logging
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .terminal import Terminal

logger = logging.getLogger(__name__)

DEFAULT_FIXED_BOUND = 999


class Exact(BaseModel):
    """Erase exactly the visible lines of the terminal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["exact"] = "exact"
    fallback: int = Field(
        default=DEFAULT_FIXED_BOUND,
        gt=0,
        description="Lines to erase when the terminal cannot report its size",
    )


class FixedBound(BaseModel):
    """Erase a fixed number of lines regardless of terminal size."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed_bound"] = "fixed_bound"
    lines: int = Field(
        default=DEFAULT_FIXED_BOUND, gt=0, description="Lines to erase on every clear"
    )


ClearingStrategy = Union[Exact, FixedBound]


def lines_to_clear(terminal: Terminal, strategy: ClearingStrategy) -> int:
    """
    Compute how many lines a clear should erase.

    Args:
        terminal: Output target being cleared
        strategy: Clearing strategy

    Returns:
        Number of lines to erase
    """
    if isinstance(strategy, FixedBound):
        return strategy.lines

    visible = terminal.visible_line_count()
    if visible is None or visible <= 0:
        logger.debug(
            "Terminal size unavailable (%r), clearing fixed bound of %d lines",
            visible,
            strategy.fallback,
        )
        return strategy.fallback
    return visible


def clear(terminal: Terminal, strategy: ClearingStrategy = Exact()) -> int:
    """
    Clear previously written output.

    Args:
        terminal: Output target
        strategy: Clearing strategy (exact by default)

    Returns:
        Number of lines erased
    """
    count = lines_to_clear(terminal, strategy)
    terminal.clear_last_lines(count)
    return count
