# plutus_ledger/core/data.py
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union


class DataKind(str, Enum):
    """Names of the five Data tree variants."""
    CONSTR = "Constr"
    MAP = "Map"
    LIST = "List"
    INTEGER = "Integer"
    BYTES = "Bytes"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Constr:
    """Tagged constructor: records, sum-type variants, optionals, booleans."""
    tag: int
    fields: Tuple["PlutusData", ...] = ()

    def __post_init__(self):
        if isinstance(self.tag, bool) or not isinstance(self.tag, int):
            raise TypeError(f"Constr tag must be an int, got {type(self.tag).__name__}")
        if self.tag < 0:
            raise ValueError(f"Constr tag must be non-negative, got {self.tag}")
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def kind(self) -> DataKind:
        return DataKind.CONSTR


@dataclass(frozen=True)
class DataMap:
    """Ordered key/value pairs. Duplicate keys allowed, never sorted."""
    entries: Tuple[Tuple["PlutusData", "PlutusData"], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple((k, v) for k, v in self.entries))

    @property
    def kind(self) -> DataKind:
        return DataKind.MAP


@dataclass(frozen=True)
class DataList:
    items: Tuple["PlutusData", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def kind(self) -> DataKind:
        return DataKind.LIST


@dataclass(frozen=True)
class Integer:
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer value must be an int, got {type(self.value).__name__}")

    @property
    def kind(self) -> DataKind:
        return DataKind.INTEGER


@dataclass(frozen=True)
class Bytes:
    value: bytes = b""

    def __post_init__(self):
        if not isinstance(self.value, (bytes, bytearray, memoryview)):
            raise TypeError(f"Bytes value must be bytes-like, got {type(self.value).__name__}")
        object.__setattr__(self, "value", bytes(self.value))

    @property
    def kind(self) -> DataKind:
        return DataKind.BYTES

    def __repr__(self) -> str:
        return f"Bytes({self.value.hex()!r})"


PlutusData = Union[Constr, DataMap, DataList, Integer, Bytes]


def kind_of(data: PlutusData) -> DataKind:
    return data.kind


def constr(tag: int, fields: Iterable[PlutusData] = ()) -> Constr:
    return Constr(tag, tuple(fields))


def data_map(entries: Iterable[Tuple[PlutusData, PlutusData]] = ()) -> DataMap:
    return DataMap(tuple(entries))


def data_list(items: Iterable[PlutusData] = ()) -> DataList:
    return DataList(tuple(items))
