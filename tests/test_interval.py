# tests/test_interval.py
import pytest

from plutus_ledger.core import INTEGER, Constr, Integer, UnexpectedConstructorIndex
from plutus_ledger.v1 import (
    Extended,
    ExtendedKind,
    Interval,
    IntervalKind,
    InvalidInterval,
    LowerBound,
    PlutusInterval,
    UnexpectedOpenBound,
    UpperBound,
    interval_of,
)

INTERVAL = interval_of(INTEGER)


def closed(a, b):
    return PlutusInterval.finite(a, b)


def open_(a, b):
    return PlutusInterval(LowerBound(Extended.finite(a), False), UpperBound(Extended.finite(b), False))


def test_extended_order():
    assert Extended.neg_inf() < Extended.finite(-100) < Extended.finite(0) < Extended.pos_inf()
    assert Extended.finite(3) == Extended.finite(3)
    with pytest.raises(ValueError):
        Extended(ExtendedKind.FINITE)
    with pytest.raises(ValueError):
        Extended(ExtendedKind.POS_INF, 1)


def test_bound_order_breaks_ties_by_restrictiveness():
    assert LowerBound(Extended.finite(1), True) < LowerBound(Extended.finite(1), False)
    assert UpperBound(Extended.finite(1), False) < UpperBound(Extended.finite(1), True)


def test_always_contains_never():
    assert PlutusInterval.always().contains(PlutusInterval.never())
    assert not PlutusInterval.never().contains(PlutusInterval.always())
    assert PlutusInterval.always().contains(closed(1, 5))


@pytest.mark.parametrize("other", [
    closed(1, 5),
    closed(0, 0),
    PlutusInterval.start_at(3),
    PlutusInterval.end_before(3),
    PlutusInterval.always(),
])
def test_only_always_contains_nonempty_intervals(other):
    assert PlutusInterval.always().contains(other)
    assert not PlutusInterval.never().contains(other)


@pytest.mark.parametrize("empty", [
    PlutusInterval(LowerBound(Extended.pos_inf(), False), UpperBound(Extended.neg_inf(), True)),
    PlutusInterval(LowerBound(Extended.pos_inf(), False), UpperBound(Extended.neg_inf(), False)),
    open_(3, 3),
])
def test_never_contains_only_itself(empty):
    assert not PlutusInterval.never().contains(empty)
    assert PlutusInterval.never().contains(PlutusInterval.never())
    assert not empty.contains(PlutusInterval.never())


def test_containment_at_equal_points():
    assert closed(1, 5).contains(open_(1, 5))
    assert not open_(1, 5).contains(closed(1, 5))


def test_emptiness():
    assert PlutusInterval.never().is_empty()
    assert not PlutusInterval.always().is_empty()
    assert not closed(3, 3).is_empty()
    assert open_(3, 3).is_empty()
    assert closed(5, 1).is_empty()


def test_member():
    assert closed(1, 5).member(1)
    assert closed(1, 5).member(5)
    assert not open_(1, 5).member(5)
    assert not PlutusInterval.end_before(5).member(5)
    assert PlutusInterval.always().member(-10**20)
    assert not PlutusInterval.never().member(0)


def test_intersect():
    assert closed(1, 5).intersect(closed(3, 10)) == closed(3, 5)
    assert closed(1, 2).intersect(closed(3, 4)) == PlutusInterval.never()
    assert PlutusInterval.always().intersect(closed(1, 2)) == closed(1, 2)


def test_intersect_keeps_the_open_bound_on_ties():
    assert closed(1, 5).intersect(open_(1, 5)) == open_(1, 5)
    lower = closed(0, 10).intersect(open_(0, 10)).from_
    assert lower == LowerBound(Extended.finite(0), False)
    assert not lower.admits(0)


def test_hull():
    assert closed(1, 3).hull(closed(5, 8)) == closed(1, 8)
    assert closed(1, 5).hull(open_(1, 5)) == closed(1, 5)
    assert PlutusInterval.start_at(3).hull(PlutusInterval.end_at(0)) == PlutusInterval.always()


def test_overlaps():
    assert closed(1, 5).overlaps(closed(5, 9))
    assert not PlutusInterval.end_before(5).overlaps(PlutusInterval.start_at(5))


def test_before_and_after():
    assert closed(1, 5).before(6)
    assert not closed(1, 5).before(5)
    assert PlutusInterval.end_before(5).before(5)
    assert not PlutusInterval.start_at(1).before(100)

    assert closed(3, 5).after(2)
    assert not closed(3, 5).after(3)
    assert PlutusInterval.start_after(3).after(3)
    assert not PlutusInterval.end_at(9).after(0)


def test_map():
    assert closed(1, 5).map(lambda x: x * 10) == closed(10, 50)
    assert PlutusInterval.always().map(str) == PlutusInterval.always()
    assert PlutusInterval.start_after(2).map(lambda x: x + 1) == PlutusInterval.start_after(3)


def test_str():
    assert str(closed(1, 5)) == "[1, 5]"
    assert str(PlutusInterval.start_after(3)) == "(3, +inf]"
    assert str(PlutusInterval.always()) == "[-inf, +inf]"


def test_encoding():
    tree = Constr(0, (
        Constr(0, (Constr(1, (Integer(1),)), Constr(1))),
        Constr(0, (Constr(2), Constr(0))),
    ))
    interval = PlutusInterval(LowerBound(Extended.finite(1), True), UpperBound(Extended.pos_inf(), False))
    assert INTERVAL.encode(interval) == tree
    assert INTERVAL.decode(tree) == interval


def test_bad_extended_tag_path():
    tree = Constr(0, (
        Constr(0, (Constr(3), Constr(1))),
        Constr(0, (Constr(2), Constr(1))),
    ))
    with pytest.raises(UnexpectedConstructorIndex) as exc:
        INTERVAL.decode(tree)
    assert exc.value.valid == (0, 1, 2)
    assert exc.value.path == ("from", "bound")


@pytest.mark.parametrize("interval, expected", [
    (closed(1, 5), Interval(IntervalKind.FINITE, 1, 5)),
    (PlutusInterval.start_at(3), Interval(IntervalKind.START_AT, start=3)),
    (PlutusInterval.start_after(3), Interval(IntervalKind.START_AFTER, start=3)),
    (PlutusInterval.end_at(3), Interval(IntervalKind.END_AT, end=3)),
    (PlutusInterval.end_before(3), Interval(IntervalKind.END_BEFORE, end=3)),
    (PlutusInterval.always(), Interval(IntervalKind.ALWAYS)),
    (PlutusInterval.never(), Interval(IntervalKind.NEVER)),
])
def test_to_interval(interval, expected):
    assert interval.to_interval() == expected
    assert expected.to_plutus_interval() == interval


@pytest.mark.parametrize("interval", [
    closed(5, 1),
    PlutusInterval(LowerBound(Extended.finite(1), True), UpperBound(Extended.neg_inf(), True)),
    PlutusInterval(LowerBound(Extended.pos_inf(), True), UpperBound(Extended.finite(1), True)),
])
def test_to_interval_rejects_invalid(interval):
    with pytest.raises(InvalidInterval):
        interval.to_interval()


@pytest.mark.parametrize("interval", [
    open_(1, 5),
    PlutusInterval(LowerBound(Extended.finite(1), True), UpperBound(Extended.pos_inf(), False)),
    PlutusInterval(LowerBound(Extended.neg_inf(), False), UpperBound(Extended.finite(1), True)),
    PlutusInterval(LowerBound(Extended.neg_inf(), True), UpperBound(Extended.pos_inf(), False)),
    PlutusInterval(LowerBound(Extended.pos_inf(), False), UpperBound(Extended.neg_inf(), True)),
])
def test_to_interval_rejects_open_bounds(interval):
    with pytest.raises(UnexpectedOpenBound):
        interval.to_interval()
