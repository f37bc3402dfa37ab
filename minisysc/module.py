"""Base class for simulation modules that register threads and processes."""

from __future__ import annotations

from typing import Callable

from .simcontext import Simcontext


class Module:
    """A named module; its methods can be registered as threads or processes."""

    def __init__(self, name: str = "") -> None:
        self.name = str(name)

    def sc_thread(self, func: Callable[[], object]):
        """Register ``func`` as a thread of the shared context; return its handle."""
        return Simcontext.get().add_thread(func)

    def sc_process(self, func: Callable[[], object]) -> None:
        """Register ``func`` as a process of the shared context."""
        Simcontext.get().add_process(func)

    def __str__(self) -> str:
        return self.name