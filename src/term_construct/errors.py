"""
Errors raised by the view router.
"""

from typing import Optional


class WriteError(Exception):
    """
    A write to the terminal output target failed.

    Wraps the underlying failure (closed descriptor, broken pipe, ...). The
    original exception is available as ``cause`` and is chained as
    ``__cause__``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
