"""Error values that carry a description of where they were created."""

from __future__ import annotations

import inspect
import os


class DocError(Exception):
    """An error with a reason and the source location that produced it."""

    def __init__(self, reason, location):
        super().__init__(reason, location)
        self.reason = str(reason)
        self.location = str(location)

    def __str__(self) -> str:
        return f"{self.reason} at {self.location}"


def nice(value) -> str:
    """Return the printable form of a value used in diagnostic messages."""
    if isinstance(value, OSError) and value.strerror:
        return value.strerror
    if isinstance(value, BaseException):
        return str(value)
    return str(value)


def _caller_location(depth: int) -> str:
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None or frame.f_back is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>"
        filename = os.path.basename(frame.f_code.co_filename)
        return f"{filename}:{frame.f_lineno}"
    finally:
        del frame


def make_error(*args) -> DocError:
    """Build a DocError whose reason is the concatenation of ``args``.

    The location of the caller is appended to the reason and also
    stored on the error.
    """
    if not args:
        raise TypeError("make_error() needs at least one argument")
    location = _caller_location(1)
    text = "".join(nice(arg) for arg in args)
    return DocError(f"{text} {location}", location)