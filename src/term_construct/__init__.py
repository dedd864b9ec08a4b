"""
Minimal view router for terminal applications.

Define screens as views (a title plus a content renderer) and display them
one at a time through a ``Construct``; previous output is cleared on every
transition.
"""

import logging

from .clearing import DEFAULT_FIXED_BOUND, ClearingStrategy, Exact, FixedBound, clear
from .config import ConstructConfig, get_default_config
from .errors import WriteError
from .logging_config import setup_logging
from .router import Construct, ConstructBuilder
from .terminal import ConsoleTerminal, Terminal, write_line_break
from .view import View

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Construct",
    "ConstructBuilder",
    "ConstructConfig",
    "get_default_config",
    "View",
    "Terminal",
    "ConsoleTerminal",
    "write_line_break",
    "clear",
    "ClearingStrategy",
    "Exact",
    "FixedBound",
    "DEFAULT_FIXED_BOUND",
    "WriteError",
    "setup_logging",
]
