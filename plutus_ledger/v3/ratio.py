# plutus_ledger/v3/ratio.py
from dataclasses import dataclass
from fractions import Fraction

from plutus_ledger.core.codec import INTEGER, as_int, pair_of
from plutus_ledger.core.data import PlutusData
from plutus_ledger.core.errors import ROOT, DataPath, InvariantViolation

_PAIR = pair_of(INTEGER, INTEGER)


@dataclass(frozen=True)
class Rational:
    """
    Arbitrary-precision ratio, travelling as the pair (numerator, denominator).

    The pair is kept exactly as given (not reduced) so that re-encoding
    reproduces the original tree; only a positive denominator is required.
    """
    numerator: int
    denominator: int = 1

    def __post_init__(self):
        as_int(self.numerator, "Rational.numerator")
        self._check_denominator(as_int(self.denominator, "Rational.denominator"))

    @staticmethod
    def _check_denominator(denominator: int, path: DataPath = ROOT):
        if denominator <= 0:
            raise InvariantViolation(f"Rational denominator must be positive, got {denominator}", path)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        return cls(value.numerator, value.denominator)

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def to_plutus_data(self) -> PlutusData:
        return _PAIR.encode((self.numerator, self.denominator))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "Rational":
        numerator, denominator = _PAIR.decode(data, path)
        cls._check_denominator(denominator, path + (1,))
        return cls(numerator, denominator)
