"""Registered transport callbacks and helpers to drive the shared context."""

from __future__ import annotations

from typing import Callable

from .payload import GenericPayload
from .simcontext import Simcontext
from .simtime import SimTime

TransportFunction = Callable[[GenericPayload, SimTime], object]

_transports: list[TransportFunction] = []


class SimpleTargetSocket:
    """A target socket whose blocking transport goes into the shared registry."""

    def register_b_transport(self, callback: TransportFunction) -> None:
        _transports.append(callback)


def transports() -> list[TransportFunction]:
    """Return the list of registered blocking transport callbacks."""
    return _transports


def step() -> None:
    """Run the next time step of the shared context."""
    Simcontext.get().run_next_step()


def current_time() -> str:
    """Return the global simulation time as text."""
    return Simcontext.get().global_time().to_string()