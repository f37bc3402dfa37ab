"""Simulation time values with units, from femtoseconds up to seconds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_UINT64_LIMIT = 1 << 64


class TimeUnit(IntEnum):
    """Time units ordered from the finest to the coarsest."""

    FS = 0
    PS = 1
    NS = 2
    US = 3
    MS = 4
    SEC = 5


default_time_unit = TimeUnit.US

_UNIT_NAMES = {
    TimeUnit.FS: "femtoseconds",
    TimeUnit.PS: "picoseconds",
    TimeUnit.NS: "nanoseconds",
    TimeUnit.US: "microseconds",
    TimeUnit.MS: "milliseconds",
    TimeUnit.SEC: "seconds",
}


def unit_to_string(unit) -> str:
    """Return the spelled-out name of a unit."""
    try:
        return _UNIT_NAMES[TimeUnit(unit)]
    except ValueError:
        return "ERROR SECONDS"


def to_factor(unit) -> int:
    """Return how many of ``unit`` make up one second."""
    return 1000 ** (TimeUnit.SEC - TimeUnit(unit))


def factor_diff(from_unit, to_unit) -> float:
    """Return the factor that converts a count in ``from_unit`` into ``to_unit``."""
    return float(to_factor(to_unit)) / float(to_factor(from_unit))


def abs_factor_diff(a, b) -> int:
    """Like :func:`factor_diff`, but always at least one."""
    fa, fb = to_factor(a), to_factor(b)
    return max(fa, fb) // min(fa, fb)


def biggest_unit(a, b) -> TimeUnit:
    """Return the coarser of two units."""
    return TimeUnit(max(a, b))


def smallest_unit(a, b) -> TimeUnit:
    """Return the finer of two units."""
    return TimeUnit(min(a, b))


@dataclass(frozen=True, eq=False)
class SimTime:
    """An unsigned 64-bit count of time units."""

    time: int = 0
    unit: TimeUnit | None = None

    def __post_init__(self) -> None:
        unit = default_time_unit if self.unit is None else TimeUnit(self.unit)
        object.__setattr__(self, "unit", unit)
        time = int(self.time)
        if not 0 <= time < _UINT64_LIMIT:
            raise ValueError(f"time value {time} out of range for an unsigned 64-bit count")
        object.__setattr__(self, "time", time)

    def value(self) -> int:
        """Return the raw count in this time's own unit."""
        return self.time

    def to_default_time_units(self) -> float:
        """Return this time expressed in the module's default unit."""
        return factor_diff(self.unit, default_time_unit) * self.time

    def to_smaller_unit(self, other) -> int:
        """Return the count in ``other`` if that is finer, else the raw count."""
        if to_factor(self.unit) >= to_factor(other):
            return self.time
        return self.time * abs_factor_diff(self.unit, other)

    def to_string(self) -> str:
        return f"{self.time} {unit_to_string(self.unit)}"

    def __str__(self) -> str:
        return self.to_string()

    def _pair(self, other: SimTime) -> tuple[int, int]:
        return self.to_smaller_unit(other.unit), other.to_smaller_unit(self.unit)

    def __eq__(self, other):
        if not isinstance(other, SimTime):
            return NotImplemented
        left, right = self._pair(other)
        return left == right

    def __lt__(self, other):
        if not isinstance(other, SimTime):
            return NotImplemented
        left, right = self._pair(other)
        return left < right

    def __le__(self, other):
        if not isinstance(other, SimTime):
            return NotImplemented
        left, right = self._pair(other)
        return left <= right

    def __gt__(self, other):
        if not isinstance(other, SimTime):
            return NotImplemented
        left, right = self._pair(other)
        return left > right

    def __ge__(self, other):
        if not isinstance(other, SimTime):
            return NotImplemented
        left, right = self._pair(other)
        return left >= right

    def __hash__(self) -> int:
        return hash(self.time * to_factor(self.unit))

    def __add__(self, other):
        if not isinstance(other, SimTime):
            return NotImplemented
        left, right = self._pair(other)
        return SimTime(left + right, smallest_unit(self.unit, other.unit))

    def __sub__(self, other):
        if not isinstance(other, SimTime):
            return NotImplemented
        left, right = self._pair(other)
        return SimTime(left - right, smallest_unit(self.unit, other.unit))

    def __mul__(self, factor):
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return SimTime(int(self.time * factor), self.unit)

    def __rmul__(self, factor):
        return self.__mul__(factor)