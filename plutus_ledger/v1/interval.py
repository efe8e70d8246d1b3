# plutus_ledger/v1/interval.py
"""
Extended bounds and the interval algebra.

Bounds are ordered by restrictiveness. Two lower bounds at the same point:
the closed one is smaller (it admits more). Two upper bounds at the same
point: the open one is smaller. With that ordering, intersection is
max(lowers)/min(uppers) and hull is min(lowers)/max(uppers).
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import Any, Callable, Generic, Optional, TypeVar

from plutus_ledger.core.codec import (
    BOOL,
    Codec,
    expect_fields,
    parse_constr,
    parse_record,
)
from plutus_ledger.core.data import Constr, PlutusData
from plutus_ledger.core.errors import ROOT, DataPath, UnexpectedConstructorIndex

T = TypeVar("T")
U = TypeVar("U")


class ExtendedKind(IntEnum):
    """Wire tags of Extended."""
    NEG_INF = 0
    FINITE = 1
    POS_INF = 2


@total_ordering
@dataclass(frozen=True, eq=True)
class Extended(Generic[T]):
    kind: ExtendedKind
    value: Any = None

    def __post_init__(self):
        if (self.kind == ExtendedKind.FINITE) != (self.value is not None):
            raise ValueError("Only a finite Extended carries a value")

    @classmethod
    def neg_inf(cls) -> "Extended[T]":
        return cls(ExtendedKind.NEG_INF)

    @classmethod
    def finite(cls, value: T) -> "Extended[T]":
        return cls(ExtendedKind.FINITE, value)

    @classmethod
    def pos_inf(cls) -> "Extended[T]":
        return cls(ExtendedKind.POS_INF)

    @property
    def is_finite(self) -> bool:
        return self.kind == ExtendedKind.FINITE

    def map(self, f: Callable[[T], U]) -> "Extended[U]":
        return Extended.finite(f(self.value)) if self.is_finite else self

    def __lt__(self, other: "Extended[T]") -> bool:
        if self.kind != other.kind:
            return self.kind < other.kind
        return self.is_finite and self.value < other.value

    def __str__(self) -> str:
        if self.kind == ExtendedKind.NEG_INF:
            return "-inf"
        if self.kind == ExtendedKind.POS_INF:
            return "+inf"
        return str(self.value)

    def to_plutus_data(self, inner: Codec[T]) -> PlutusData:
        if self.is_finite:
            return Constr(int(ExtendedKind.FINITE), (inner.encode(self.value),))
        return Constr(int(self.kind))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, inner: Codec[T], path: DataPath = ROOT) -> "Extended[T]":
        tag, fields = parse_constr(data, path)
        if tag == ExtendedKind.FINITE:
            (field,) = expect_fields(fields, 1, path)
            return cls.finite(inner.decode(field, path + ("Finite", 0)))
        if tag in (ExtendedKind.NEG_INF, ExtendedKind.POS_INF):
            expect_fields(fields, 0, path)
            return cls(ExtendedKind(tag))
        raise UnexpectedConstructorIndex(tuple(int(k) for k in ExtendedKind), tag, path)


@total_ordering
@dataclass(frozen=True, eq=True)
class LowerBound(Generic[T]):
    bound: Extended[T]
    closed: bool = True

    def __lt__(self, other: "LowerBound[T]") -> bool:
        if self.bound != other.bound:
            return self.bound < other.bound
        return self.closed and not other.closed

    def map(self, f: Callable[[T], U]) -> "LowerBound[U]":
        return LowerBound(self.bound.map(f), self.closed)

    def admits(self, x: T) -> bool:
        x_ext = Extended.finite(x)
        return self.bound < x_ext or (self.closed and self.bound == x_ext)

    def to_plutus_data(self, inner: Codec[T]) -> PlutusData:
        return Constr(0, (self.bound.to_plutus_data(inner), BOOL.encode(self.closed)))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, inner: Codec[T], path: DataPath = ROOT) -> "LowerBound[T]":
        bound, closed = parse_record(data, 2, path)
        return cls(
            Extended.from_plutus_data(bound, inner, path + ("bound",)),
            BOOL.decode(closed, path + ("closed",)),
        )


@total_ordering
@dataclass(frozen=True, eq=True)
class UpperBound(Generic[T]):
    bound: Extended[T]
    closed: bool = True

    def __lt__(self, other: "UpperBound[T]") -> bool:
        if self.bound != other.bound:
            return self.bound < other.bound
        return other.closed and not self.closed

    def map(self, f: Callable[[T], U]) -> "UpperBound[U]":
        return UpperBound(self.bound.map(f), self.closed)

    def admits(self, x: T) -> bool:
        x_ext = Extended.finite(x)
        return x_ext < self.bound or (self.closed and self.bound == x_ext)

    def to_plutus_data(self, inner: Codec[T]) -> PlutusData:
        return Constr(0, (self.bound.to_plutus_data(inner), BOOL.encode(self.closed)))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, inner: Codec[T], path: DataPath = ROOT) -> "UpperBound[T]":
        bound, closed = parse_record(data, 2, path)
        return cls(
            Extended.from_plutus_data(bound, inner, path + ("bound",)),
            BOOL.decode(closed, path + ("closed",)),
        )


@dataclass(frozen=True)
class PlutusInterval(Generic[T]):
    """An interval whose ends may each be open or closed, finite or infinite."""
    from_: LowerBound[T]
    to: UpperBound[T]

    # ── constructors ──────────────────────────────────────────────────────

    @classmethod
    def finite(cls, start: T, end: T) -> "PlutusInterval[T]":
        return cls(LowerBound(Extended.finite(start), True), UpperBound(Extended.finite(end), True))

    @classmethod
    def start_at(cls, start: T) -> "PlutusInterval[T]":
        return cls(LowerBound(Extended.finite(start), True), UpperBound(Extended.pos_inf(), True))

    @classmethod
    def start_after(cls, start: T) -> "PlutusInterval[T]":
        return cls(LowerBound(Extended.finite(start), False), UpperBound(Extended.pos_inf(), True))

    @classmethod
    def end_at(cls, end: T) -> "PlutusInterval[T]":
        return cls(LowerBound(Extended.neg_inf(), True), UpperBound(Extended.finite(end), True))

    @classmethod
    def end_before(cls, end: T) -> "PlutusInterval[T]":
        return cls(LowerBound(Extended.neg_inf(), True), UpperBound(Extended.finite(end), False))

    @classmethod
    def always(cls) -> "PlutusInterval[T]":
        return cls(LowerBound(Extended.neg_inf(), True), UpperBound(Extended.pos_inf(), True))

    @classmethod
    def never(cls) -> "PlutusInterval[T]":
        return cls(LowerBound(Extended.pos_inf(), True), UpperBound(Extended.neg_inf(), True))

    # ── algebra ───────────────────────────────────────────────────────────

    def is_empty(self) -> bool:
        lower, upper = self.from_.bound, self.to.bound
        if lower != upper:
            return upper < lower
        return not (lower.is_finite and self.from_.closed and self.to.closed)

    def contains(self, other: "PlutusInterval[T]") -> bool:
        """True iff every point of `other` lies in `self`.

        An empty interval contains only itself, so `never()` holds nothing but `never()`.
        """
        if self.is_empty():
            return self == other
        return self.from_ <= other.from_ and other.to <= self.to

    def member(self, x: T) -> bool:
        return self.from_.admits(x) and self.to.admits(x)

    def intersect(self, other: "PlutusInterval[T]") -> "PlutusInterval[T]":
        result = PlutusInterval(max(self.from_, other.from_), min(self.to, other.to))
        return PlutusInterval.never() if result.is_empty() else result

    def hull(self, other: "PlutusInterval[T]") -> "PlutusInterval[T]":
        return PlutusInterval(min(self.from_, other.from_), max(self.to, other.to))

    def overlaps(self, other: "PlutusInterval[T]") -> bool:
        return not self.intersect(other).is_empty()

    def before(self, x: T) -> bool:
        """Every point of the interval is smaller than `x`."""
        return self.to < UpperBound(Extended.finite(x), True)

    def after(self, x: T) -> bool:
        """Every point of the interval is greater than `x`."""
        return LowerBound(Extended.finite(x), True) < self.from_

    def map(self, f: Callable[[T], U]) -> "PlutusInterval[U]":
        """Apply a monotonic `f` to the finite bounds; monotonicity is not checked."""
        return PlutusInterval(self.from_.map(f), self.to.map(f))

    def to_interval(self) -> "Interval[T]":
        """Name the shape of this interval, see Interval.from_plutus_interval."""
        return Interval.from_plutus_interval(self)

    def __str__(self) -> str:
        left = "[" if self.from_.closed else "("
        right = "]" if self.to.closed else ")"
        return f"{left}{self.from_.bound}, {self.to.bound}{right}"

    # ── codec ─────────────────────────────────────────────────────────────

    def to_plutus_data(self, inner: Codec[T]) -> PlutusData:
        return Constr(0, (self.from_.to_plutus_data(inner), self.to.to_plutus_data(inner)))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, inner: Codec[T], path: DataPath = ROOT) -> "PlutusInterval[T]":
        lower, upper = parse_record(data, 2, path)
        return cls(
            LowerBound.from_plutus_data(lower, inner, path + ("from",)),
            UpperBound.from_plutus_data(upper, inner, path + ("to",)),
        )


class IntervalConversionError(ValueError):
    """A PlutusInterval that none of the named Interval shapes describes."""


class InvalidInterval(IntervalConversionError):
    def __init__(self, interval: PlutusInterval):
        self.interval = interval
        super().__init__(f"Interval is invalid: {interval}")


class UnexpectedOpenBound(IntervalConversionError):
    def __init__(self, interval: PlutusInterval):
        self.interval = interval
        super().__init__(f"Interval with open bound could not be converted: {interval}")


class IntervalKind(Enum):
    FINITE = "Finite"
    START_AT = "StartAt"
    START_AFTER = "StartAfter"
    END_AT = "EndAt"
    END_BEFORE = "EndBefore"
    ALWAYS = "Always"
    NEVER = "Never"


@dataclass(frozen=True)
class Interval(Generic[T]):
    """
    The named interval shapes. `start` is set for FINITE, START_AT and
    START_AFTER; `end` for FINITE, END_AT and END_BEFORE.
    """
    kind: IntervalKind
    start: Optional[T] = None
    end: Optional[T] = None

    def to_plutus_interval(self) -> PlutusInterval[T]:
        kind = self.kind
        if kind == IntervalKind.FINITE:
            return PlutusInterval.finite(self.start, self.end)
        if kind == IntervalKind.START_AT:
            return PlutusInterval.start_at(self.start)
        if kind == IntervalKind.START_AFTER:
            return PlutusInterval.start_after(self.start)
        if kind == IntervalKind.END_AT:
            return PlutusInterval.end_at(self.end)
        if kind == IntervalKind.END_BEFORE:
            return PlutusInterval.end_before(self.end)
        if kind == IntervalKind.ALWAYS:
            return PlutusInterval.always()
        return PlutusInterval.never()

    @classmethod
    def from_plutus_interval(cls, interval: PlutusInterval[T]) -> "Interval[T]":
        """
        Classify `interval` by the kinds of its bounds.

        Raises UnexpectedOpenBound when an open bound has no named shape
        (e.g. a finite interval open on either end), and InvalidInterval for
        a closed finite interval whose start exceeds its end or for bound
        kinds that describe no shape at all (e.g. a finite lower bound with
        a -inf upper bound).
        """
        lower, upper = interval.from_, interval.to
        lo, hi = lower.bound.kind, upper.bound.kind
        both_closed = lower.closed and upper.closed
        Kind = ExtendedKind

        if lo == Kind.FINITE and hi == Kind.FINITE:
            if not both_closed:
                raise UnexpectedOpenBound(interval)
            if lower.bound.value > upper.bound.value:
                raise InvalidInterval(interval)
            return cls(IntervalKind.FINITE, lower.bound.value, upper.bound.value)

        if lo == Kind.FINITE and hi == Kind.POS_INF:
            if not upper.closed:
                raise UnexpectedOpenBound(interval)
            kind = IntervalKind.START_AT if lower.closed else IntervalKind.START_AFTER
            return cls(kind, start=lower.bound.value)

        if lo == Kind.NEG_INF and hi == Kind.FINITE:
            if not lower.closed:
                raise UnexpectedOpenBound(interval)
            kind = IntervalKind.END_AT if upper.closed else IntervalKind.END_BEFORE
            return cls(kind, end=upper.bound.value)

        if (lo, hi) in ((Kind.NEG_INF, Kind.POS_INF), (Kind.POS_INF, Kind.NEG_INF)):
            if not both_closed:
                raise UnexpectedOpenBound(interval)
            return cls(IntervalKind.ALWAYS if lo == Kind.NEG_INF else IntervalKind.NEVER)

        raise InvalidInterval(interval)


def interval_of(inner: Codec[T]) -> Codec[PlutusInterval[T]]:
    def encode(interval: PlutusInterval[T]) -> PlutusData:
        return interval.to_plutus_data(inner)

    def decode(data: PlutusData, path: DataPath = ROOT) -> PlutusInterval[T]:
        return PlutusInterval.from_plutus_data(data, inner, path)

    return Codec(f"PlutusInterval[{inner.name}]", encode, decode)
