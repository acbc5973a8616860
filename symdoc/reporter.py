"""Uniform printing and counting of diagnostics."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from .errors import nice


class Reporter:
    """Prints progress and error messages and keeps count of failures."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        self._out = out
        self._err = err
        self._lock = threading.Lock()
        self._error_count = 0
        self._test_failure_count = 0

    @property
    def error_count(self) -> int:
        return self._error_count

    @property
    def test_failure_count(self) -> int:
        return self._test_failure_count

    def exit_code(self) -> int:
        """Return a process exit status reflecting the failures seen."""
        if self._error_count > 0 or self._test_failure_count > 0:
            return 1
        return 0

    def _out_stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _err_stream(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def _write(self, stream: TextIO, text: str, count: bool) -> None:
        with self._lock:
            stream.write(text + "\n")
            if count:
                self._error_count += 1

    def print(self, *args) -> None:
        """Write the concatenated arguments as one line of output."""
        if not args:
            raise TypeError("print() needs at least one argument")
        self._write(self._out_stream(), "".join(nice(a) for a in args), False)

    def failed(self, *args) -> None:
        """Report that an action could not be performed."""
        if not args:
            raise TypeError("failed() needs at least one argument")
        text = "error: Couldn't " + "".join(nice(a) for a in args) + "."
        self._write(self._err_stream(), text, True)

    def error(self, err, *args) -> bool:
        """Report ``err`` if it is an exception; return whether it was."""
        if not args:
            raise TypeError("error() needs at least one action argument")
        if not isinstance(err, BaseException):
            return False
        text = (
            "error: Couldn't "
            + "".join(nice(a) for a in args)
            + " because "
            + nice(err)
            + "."
        )
        self._write(self._err_stream(), text, True)
        return True

    def report_error(self) -> None:
        """Increment the count of errors."""
        with self._lock:
            self._error_count += 1

    def report_test_failure(self) -> None:
        """Increment the count of test failures."""
        with self._lock:
            self._test_failure_count += 1