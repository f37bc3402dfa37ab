"""Events that wake a waiting thread, and the ``wait`` call."""

from __future__ import annotations

from .logger import get_logger
from .simcontext import Simcontext
from .simtime import SimTime


class Event:
    """Remembers the thread that waits on it and schedules it when notified."""

    def __init__(self) -> None:
        self.waiting_thread = None

    def notify(self, time: SimTime) -> None:
        """Wake the waiting thread (or the active one) after ``time``."""
        ctx = Simcontext.get()
        thread = self.waiting_thread
        if thread is None:
            thread = ctx.active_thread()
        get_logger().write("\tnotify ", thread, " in ", time, "\n")
        if thread is None:
            raise RuntimeError("notify on an event nobody waits for")
        ctx.add_waketime(ctx.global_time() + time, thread)

    def cancel(self) -> None:
        """Withdraw the pending wake of the waiting thread."""
        get_logger().write("event cancel", "\n")
        if self.waiting_thread is None:
            raise RuntimeError("cancel on unwaited event")
        Simcontext.get().remove_waketime(self.waiting_thread)


def wait(what) -> None:
    """Make the active thread wait on an event or for a span of time."""
    ctx = Simcontext.get()
    if isinstance(what, Event):
        what.waiting_thread = ctx.active_thread()
    elif isinstance(what, SimTime):
        ctx.add_waketime(ctx.global_time() + what)
    else:
        raise TypeError(f"cannot wait on {type(what).__name__}")