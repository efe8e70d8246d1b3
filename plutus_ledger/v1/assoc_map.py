# plutus_ledger/v1/assoc_map.py
"""
Association container that mirrors the on-chain Map.

Entries keep exactly the order they were given in: nothing is sorted and
nothing is deduplicated. Equality compares pairs position by position, so
two maps holding the same pairs in a different order are different values.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from plutus_ledger.core.codec import Codec, parse_map
from plutus_ledger.core.data import DataMap, PlutusData
from plutus_ledger.core.errors import ROOT, DataPath

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class AssocMap(Generic[K, V]):
    entries: Tuple[Tuple[K, V], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple((k, v) for k, v in self.entries))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[K, V]]) -> "AssocMap[K, V]":
        return cls(tuple(pairs))

    def to_pairs(self) -> Tuple[Tuple[K, V], ...]:
        return self.entries

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """First value stored under `key`."""
        for k, v in self.entries:
            if k == key:
                return v
        return default

    def insert(self, key: K, value: V) -> "AssocMap[K, V]":
        """Replace the value at the key's original position, or append."""
        entries = list(self.entries)
        for i, (k, _) in enumerate(entries):
            if k == key:
                entries[i] = (key, value)
                return AssocMap(tuple(entries))
        entries.append((key, value))
        return AssocMap(tuple(entries))

    def delete(self, key: K) -> "AssocMap[K, V]":
        """Drop the first entry stored under `key`."""
        for i, (k, _) in enumerate(self.entries):
            if k == key:
                return AssocMap(self.entries[:i] + self.entries[i + 1:])
        return self

    def union_with(self, combine: Callable[[V, V], V], other: "AssocMap[K, V]") -> "AssocMap[K, V]":
        """Keys in first-seen order (self, then other); colliding values are combined."""
        result = self
        for k, v in other.entries:
            mine = result.get(k, _MISSING)
            result = result.insert(k, v if mine is _MISSING else combine(mine, v))
        return result

    def keys(self) -> Tuple[K, ...]:
        return tuple(k for k, _ in self.entries)

    def values(self) -> Tuple[V, ...]:
        return tuple(v for _, v in self.entries)

    def items(self) -> Tuple[Tuple[K, V], ...]:
        return self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __contains__(self, key) -> bool:
        return any(k == key for k, _ in self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def to_plutus_data(self, key: Codec[K], value: Codec[V]) -> PlutusData:
        return DataMap(tuple((key.encode(k), value.encode(v)) for k, v in self.entries))

    @classmethod
    def from_plutus_data(
        cls, data: PlutusData, key: Codec[K], value: Codec[V], path: DataPath = ROOT
    ) -> "AssocMap[K, V]":
        entries = []
        for i, (k, v) in enumerate(parse_map(data, path)):
            entries.append((key.decode(k, path + (i, "key")), value.decode(v, path + (i, "value"))))
        return cls(tuple(entries))


_MISSING = object()


def assoc_map_of(key: Codec[K], value: Codec[V]) -> Codec[AssocMap[K, V]]:
    def encode(m: AssocMap[K, V]) -> PlutusData:
        return m.to_plutus_data(key, value)

    def decode(data: PlutusData, path: DataPath = ROOT) -> AssocMap[K, V]:
        return AssocMap.from_plutus_data(data, key, value, path)

    return Codec(f"AssocMap[{key.name}, {value.name}]", encode, decode)
