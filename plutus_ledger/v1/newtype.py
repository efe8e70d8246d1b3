# plutus_ledger/v1/newtype.py
"""Integer newtypes. All encode transparently as Integer."""

from dataclasses import dataclass

from plutus_ledger.core.codec import as_int, guard_non_negative, parse_integer
from plutus_ledger.core.data import Integer, PlutusData
from plutus_ledger.core.errors import ROOT, DataPath


@dataclass(frozen=True, order=True)
class LedgerInteger:
    value: int = 0

    def __post_init__(self):
        as_int(self.value, type(self).__name__)
        self.validate(self.value)

    @classmethod
    def validate(cls, value: int, path: DataPath = ROOT) -> int:
        return value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def to_plutus_data(self) -> PlutusData:
        return Integer(self.value)

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT):
        value = parse_integer(data, path)
        cls.validate(value, path)
        return cls(value)


class NonNegativeInteger(LedgerInteger):
    @classmethod
    def validate(cls, value: int, path: DataPath = ROOT) -> int:
        return guard_non_negative(value, cls.__name__, path)
