"""The simulation context: registered threads, their wake times and global time."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Callable, Optional

from .logger import get_logger
from .simtime import SimTime, TimeUnit


@dataclass(frozen=True, eq=False)
class _Thread:
    """A registered thread; ordered among equal wake times by registration."""

    seq: int
    func: Callable[[], object]

    def __call__(self) -> object:
        return self.func()

    def __str__(self) -> str:
        return f"thread {self.seq}"


class Simcontext:
    """Schedules threads by wake time and runs them one time step at a time."""

    _instance: Optional["Simcontext"] = None

    def __init__(self) -> None:
        self._threads: list[_Thread] = []
        self._processes: list[Callable[[], object]] = []
        self._wakelist: list[tuple[SimTime, int]] = []
        self._by_seq: dict[int, _Thread] = {}
        self._global_time = SimTime()
        self._active: _Thread | None = None

    @staticmethod
    def get() -> "Simcontext":
        """Return the shared context, creating it on first use."""
        if Simcontext._instance is None:
            Simcontext._instance = Simcontext()
        return Simcontext._instance

    @staticmethod
    def reset() -> "Simcontext":
        """Replace the shared context with a fresh one and return it."""
        Simcontext._instance = Simcontext()
        return Simcontext._instance

    def active_thread(self) -> _Thread | None:
        """Return the thread being run, or None outside of a step."""
        return self._active

    def global_time(self) -> SimTime:
        return self._global_time

    def add_thread(self, thread: Callable[[], object]) -> _Thread:
        """Register a thread and schedule it at time zero; return its handle."""
        handle = _Thread(len(self._threads), thread)
        self._threads.append(handle)
        self._by_seq[handle.seq] = handle
        self._insert(SimTime(0, TimeUnit.MS), handle)
        return handle

    def add_process(self, process: Callable[[], object]) -> None:
        self._processes.append(process)

    def add_waketime(self, time: SimTime, thread: _Thread | None = None) -> None:
        """Schedule ``thread`` (the active thread by default) to run at ``time``."""
        if thread is None:
            thread = self._active
        if thread is None:
            raise RuntimeError("add waketime with invalid active thread")
        if not isinstance(thread, _Thread) or self._by_seq.get(thread.seq) is not thread:
            raise TypeError("thread must be a handle returned by add_thread")
        self._insert(time, thread)

    def remove_waketime(self, thread: _Thread) -> None:
        """Remove the earliest scheduled wake of ``thread``."""
        for index, (_, seq) in enumerate(self._wakelist):
            if self._by_seq[seq] is thread:
                del self._wakelist[index]
                return
        raise ValueError(f"{thread} has no scheduled wake time")

    def run_next_step(self) -> None:
        """Advance to the earliest wake time and run every thread due then."""
        log = get_logger()
        if not self._wakelist:
            log.write("No waiting threads", "\n")
            return
        next_time = self._wakelist[0][0]
        if next_time < self._global_time:
            raise RuntimeError("next wake event lies in the past")
        self._global_time = next_time
        log.write("Running threads at ", self._global_time, "\n")
        try:
            while self._wakelist and self._wakelist[0][0] == self._global_time:
                _, seq = self._wakelist.pop(0)
                self._active = self._by_seq[seq]
                self._active()
        finally:
            self._active = None

    def info(self) -> None:
        """Write the number of registered processes and threads."""
        get_logger().write(
            "                      processes: ", len(self._processes), "\n",
            "                        threads: ", len(self._threads), "\n",
        )

    def _insert(self, time: SimTime, thread: _Thread) -> None:
        key = (time, thread.seq)
        index = bisect.bisect_left(self._wakelist, key)
        if index < len(self._wakelist) and self._wakelist[index] == key:
            return
        self._wakelist.insert(index, key)