import pytest

from minisysc import simtime
from minisysc.simtime import (
    SimTime,
    TimeUnit,
    abs_factor_diff,
    biggest_unit,
    factor_diff,
    smallest_unit,
    to_factor,
    unit_to_string,
)


@pytest.mark.parametrize(
    "unit,name",
    [
        (TimeUnit.FS, "femtoseconds"),
        (TimeUnit.PS, "picoseconds"),
        (TimeUnit.NS, "nanoseconds"),
        (TimeUnit.US, "microseconds"),
        (TimeUnit.MS, "milliseconds"),
        (TimeUnit.SEC, "seconds"),
    ],
)
def test_unit_to_string(unit, name):
    assert unit_to_string(unit) == name


def test_unit_to_string_invalid():
    assert unit_to_string(42) == "ERROR SECONDS"


def test_to_factor_seconds_is_one():
    assert to_factor(TimeUnit.SEC) == 1
    assert to_factor(TimeUnit.MS) == 1000


def test_to_factor_steps_by_thousand():
    units = list(TimeUnit)
    for finer, coarser in zip(units, units[1:]):
        assert to_factor(finer) == to_factor(coarser) * 1000


def test_factor_diff_and_inverse():
    assert factor_diff(TimeUnit.MS, TimeUnit.US) == 1000.0
    assert factor_diff(TimeUnit.US, TimeUnit.MS) * factor_diff(TimeUnit.MS, TimeUnit.US) == 1.0


def test_abs_factor_diff_symmetric():
    assert abs_factor_diff(TimeUnit.NS, TimeUnit.SEC) == abs_factor_diff(TimeUnit.SEC, TimeUnit.NS)
    assert abs_factor_diff(TimeUnit.MS, TimeUnit.MS) == 1
    assert abs_factor_diff(TimeUnit.US, TimeUnit.MS) == 1000


def test_biggest_and_smallest_unit():
    assert biggest_unit(TimeUnit.NS, TimeUnit.MS) is TimeUnit.MS
    assert smallest_unit(TimeUnit.NS, TimeUnit.MS) is TimeUnit.NS


def test_default_unit():
    t = SimTime()
    assert t.unit is TimeUnit.US
    assert t.value() == 0


def test_to_string():
    assert SimTime(5, TimeUnit.NS).to_string() == "5 nanoseconds"
    assert str(SimTime(7, TimeUnit.SEC)) == "7 seconds"


def test_to_smaller_unit():
    t = SimTime(3, TimeUnit.MS)
    assert t.to_smaller_unit(TimeUnit.US) == 3 * 1000
    assert t.to_smaller_unit(TimeUnit.SEC) == 3


def test_to_default_time_units():
    assert SimTime(2, TimeUnit.MS).to_default_time_units() == 2 * 1000.0
    assert SimTime(4, TimeUnit.US).to_default_time_units() == 4.0


def test_ordering():
    small = SimTime(999, TimeUnit.US)
    big = SimTime(1, TimeUnit.MS)
    assert small < big
    assert small <= big
    assert big > small
    assert big >= small
    assert big <= SimTime(1000, TimeUnit.US)
    assert sorted([big, small]) == [small, big]


def test_add_uses_smallest_unit():
    a = SimTime(1, TimeUnit.MS)
    b = SimTime(5, TimeUnit.US)
    result = a + b
    assert result.unit is TimeUnit.US
    assert result.value() == 1000 + 5


def test_add_sub_round_trip():
    a = SimTime(12, TimeUnit.SEC)
    b = SimTime(30, TimeUnit.NS)
    assert (a + b) - b == a
    assert (a + b) > a


def test_sub_below_zero_raises():
    with pytest.raises(ValueError):
        SimTime(1, TimeUnit.US) - SimTime(1, TimeUnit.MS)


def test_multiplication():
    t = SimTime(10, TimeUnit.NS)
    assert t * 3 == SimTime(30, TimeUnit.NS)
    assert 3 * t == t * 3
    assert (t * 2.5).value() == 25
    assert (t * 2).unit is TimeUnit.NS


def test_negative_time_rejected():
    with pytest.raises(ValueError):
        SimTime(-1, TimeUnit.NS)


def test_comparison_with_other_type():
    assert (SimTime(1, TimeUnit.NS) == 1) is False
    with pytest.raises(TypeError):
        SimTime(1, TimeUnit.NS) < 1


def test_default_unit_follows_module_setting(monkeypatch):
    monkeypatch.setattr(simtime, "default_time_unit", TimeUnit.MS)
    assert SimTime(3).unit is TimeUnit.MS
    assert SimTime(1, TimeUnit.SEC).to_default_time_units() == 1000.0