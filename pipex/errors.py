"""Error type and stream reporting shared by the pipeline stages."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


class PipexError(Exception):
    """A failure that ends a pipeline stage with a given exit code.

    An exit code of 1 marks a system failure. Its report carries the reason
    from the ``OSError`` set as the error's cause, in the style of ``perror``.
    Other codes print the message exactly as given.
    """

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


def print_string(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text`` to ``stream`` (stdout by default) and return its length.

    ``None`` is written as ``(null)``.
    """
    if text is None:
        text = "(null)"
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)


def report_error(error: PipexError, stream: Optional[TextIO] = None) -> int:
    """Write ``error`` to ``stream`` (stderr by default) and return its exit code."""
    target = sys.stderr if stream is None else stream
    if error.exit_code == 1:
        reason = getattr(error.__cause__, "strerror", None)
        line = f"{error.message}: {reason}\n" if reason else f"{error.message}\n"
    else:
        line = error.message
    target.write(line)
    target.flush()
    return error.exit_code