# minisysc

A small discrete-event simulation kernel in the SystemC style: simulated
time with units, events, threads woken at points in simulated time, modules,
and transaction payloads for blocking transport.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Overview

- `minisysc.simtime`: `TimeUnit` (`FS`, `PS`, `NS`, `US`, `MS`, `SEC`) and
  `SimTime`, an immutable unsigned 64-bit count with a unit (the unit
  defaults to microseconds). Times of different units compare, hash and
  add or subtract exactly by converting to the finer unit; the result of
  `+` and `-` is in the finer unit. Multiplying by a number keeps the unit
  and truncates to an integer. `to_string()` gives text such as
  `"20 nanoseconds"`. Helper functions: `unit_to_string`, `to_factor`,
  `factor_diff`, `abs_factor_diff`, `biggest_unit`, `smallest_unit`.
- `minisysc.simcontext`: `Simcontext`, the shared scheduler obtained with
  `Simcontext.get()` (and replaced by a fresh one with `Simcontext.reset()`).
  `add_thread` registers a callable, schedules it at time zero and returns a
  handle; `add_waketime(time, thread=None)` schedules a thread (the active
  one by default); `remove_waketime` removes a thread's earliest wake;
  `run_next_step` advances global time to the earliest wake time and runs
  every thread due then, in registration order. `add_process` only records
  a callable; processes are counted by `info()` but never run.
- `minisysc.event`: `Event` with `notify(time)` and `cancel()`, and
  `wait(what)`, which either records the active thread as waiting on an
  `Event` or schedules it to wake again after a `SimTime`.
- `minisysc.module`: `Module`, a named base class whose `sc_thread` and
  `sc_process` register callables with the shared context.
- `minisysc.payload`: `GenericPayload` (address, command, data, data
  length) with its `Command` and `ResponseStatus` enumerations.
- `minisysc.registry`: `SimpleTargetSocket`, whose `register_b_transport`
  appends a callback to the shared list returned by `transports()`;
  `step()` runs the next step of the shared context and `current_time()`
  returns its global time as text.
- `minisysc.logger`: `Logger`, a switchable writer to standard output,
  obtained with `get_logger()`. The scheduler and events report what they
  do through it; call `get_logger().disable()` to silence them.

## Example

```python
from minisysc.event import wait
from minisysc.logger import get_logger
from minisysc.module import Module
from minisysc.registry import current_time, step
from minisysc.simtime import SimTime, TimeUnit


class Ticker(Module):
    def __init__(self):
        super().__init__("ticker")
        self.ticks = 0
        self.sc_thread(self.tick)

    def tick(self):
        self.ticks += 1
        wait(SimTime(10, TimeUnit.NS))


get_logger().disable()
ticker = Ticker()
for _ in range(3):
    step()
print(ticker.ticks, current_time())   # 3 20 nanoseconds
```

Each call to `step()` runs every thread due at the next wake time; a thread
runs once per wake-up and asks to be woken again by calling `wait`.

## What it does not do

- Registered transport callbacks are only stored; nothing in the package
  calls them or routes payloads to them.
- Processes added with `sc_process` are never run.
- There is no command-line program; the kernel is driven from Python by
  calling `step()` or `Simcontext.run_next_step()`.