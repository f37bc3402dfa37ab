"""A switchable logger that streams values to standard output."""

from __future__ import annotations

import sys
from typing import TextIO


class Logger:
    """Writes values back to back, like a stream, while enabled."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.enabled = True
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def write(self, *args) -> Logger:
        """Write each argument with no separator; return the logger for chaining."""
        if self.enabled:
            stream = self.stream
            for value in args:
                stream.write(str(value))
        return self

    def __lshift__(self, value) -> Logger:
        return self.write(value)


_instance: Logger | None = None


def get_logger() -> Logger:
    """Return the shared logger."""
    global _instance
    if _instance is None:
        _instance = Logger()
    return _instance