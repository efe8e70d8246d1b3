# plutus_ledger/core/codec.py
"""
Encode/decode pairs over the Data tree.

Every ledger type carries an explicit `to_plutus_data` / `from_plutus_data` pair.
Generic shapes (optional, list, pair, association container) cannot know their
element type, so they take `Codec` values explicitly instead of inspecting
anything at runtime.

Derivation rules (fixed by the on-chain side):
  record with N fields      -> Constr 0 [f1..fN]
  sum type variant k        -> Constr k [fields]   (k pinned by variant_table)
  optional                  -> Constr 0 [v] | Constr 1 []
  sequence                  -> List
  association container     -> Map
  bytes / byte identifiers  -> Bytes
  integer newtypes          -> Integer
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, Optional, Tuple, TypeVar

from plutus_ledger.core.data import (
    Bytes,
    Constr,
    DataKind,
    DataList,
    DataMap,
    Integer,
    PlutusData,
)
from plutus_ledger.core.errors import (
    ROOT,
    DataPath,
    FieldCountMismatch,
    InternalConversionFailure,
    InvariantViolation,
    PlutusDataError,
    UnexpectedConstructorIndex,
    UnexpectedDataVariant,
)

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")

# Constructor tags are decoded into a 32-bit unsigned slot on the on-chain side
MAX_CONSTR_TAG = 2**32 - 1


@dataclass(frozen=True)
class DecodeResult(Generic[T]):
    """Outcome of a decode that should not raise."""
    value: Optional[T] = None
    error: Optional[PlutusDataError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self):
        return self.ok


@dataclass(frozen=True)
class Codec(Generic[T]):
    """A total encoder paired with a fallible, path-aware decoder."""
    name: str
    encode: Callable[[T], PlutusData]
    decode: Callable[..., T]

    def try_decode(self, data: PlutusData, path: DataPath = ROOT) -> DecodeResult[T]:
        try:
            return DecodeResult(value=self.decode(data, path))
        except PlutusDataError as e:
            return DecodeResult(error=e)


# ── variant parsers ─────────────────────────────────────────────────────────

def parse_integer(data: PlutusData, path: DataPath = ROOT) -> int:
    if isinstance(data, Integer):
        return data.value
    raise UnexpectedDataVariant(DataKind.INTEGER, data.kind, path)


def parse_bytes(data: PlutusData, path: DataPath = ROOT) -> bytes:
    if isinstance(data, Bytes):
        return data.value
    raise UnexpectedDataVariant(DataKind.BYTES, data.kind, path)


def parse_list(data: PlutusData, path: DataPath = ROOT) -> Tuple[PlutusData, ...]:
    if isinstance(data, DataList):
        return data.items
    raise UnexpectedDataVariant(DataKind.LIST, data.kind, path)


def parse_map(data: PlutusData, path: DataPath = ROOT) -> Tuple[Tuple[PlutusData, PlutusData], ...]:
    if isinstance(data, DataMap):
        return data.entries
    raise UnexpectedDataVariant(DataKind.MAP, data.kind, path)


def parse_constr(data: PlutusData, path: DataPath = ROOT) -> Tuple[int, Tuple[PlutusData, ...]]:
    """Return (tag, fields); the tag must fit the on-chain 32-bit slot."""
    if not isinstance(data, Constr):
        raise UnexpectedDataVariant(DataKind.CONSTR, data.kind, path)
    if data.tag > MAX_CONSTR_TAG:
        raise InternalConversionFailure(
            f"Constr tag {data.tag} does not fit in 32 bits", path
        )
    return data.tag, data.fields


def parse_constr_with_tag(data: PlutusData, expected_tag: int, path: DataPath = ROOT) -> Tuple[PlutusData, ...]:
    tag, fields = parse_constr(data, path)
    if tag != expected_tag:
        raise UnexpectedConstructorIndex((expected_tag,), tag, path)
    return fields


def expect_fields(fields: Tuple[PlutusData, ...], count: int, path: DataPath = ROOT) -> Tuple[PlutusData, ...]:
    if len(fields) != count:
        raise FieldCountMismatch(count, len(fields), path)
    return fields


def parse_record(data: PlutusData, count: int, path: DataPath = ROOT) -> Tuple[PlutusData, ...]:
    """Fields of a record: Constr 0 with exactly `count` fields."""
    return expect_fields(parse_constr_with_tag(data, 0, path), count, path)


def decode_positional(fields: Tuple[PlutusData, ...], codecs: Tuple["Codec", ...], path: DataPath = ROOT) -> tuple:
    """Decode variant fields in order; each failure is reported at `path[i]`."""
    expect_fields(fields, len(codecs), path)
    return tuple(codec.decode(field, path + (i,)) for i, (codec, field) in enumerate(zip(codecs, fields)))


def decode_record(data: PlutusData, named: Tuple[Tuple[str, "Codec"], ...], path: DataPath = ROOT) -> tuple:
    """Decode a record's fields in order; each failure is reported at `path.<name>`."""
    fields = parse_record(data, len(named), path)
    return tuple(codec.decode(field, path + (name,)) for (name, codec), field in zip(named, fields))


# ── invariant guards (shared by constructors and decoders) ─────────────────

def guard_length(raw: bytes, expected: int, ctx: str, path: DataPath = ROOT) -> bytes:
    if len(raw) != expected:
        raise InvariantViolation(
            f"{ctx} must be exactly {expected} bytes, got {len(raw)} ({raw.hex() or 'empty'})", path
        )
    return raw


def guard_max_length(raw: bytes, limit: int, ctx: str, path: DataPath = ROOT) -> bytes:
    if len(raw) > limit:
        raise InvariantViolation(
            f"{ctx} must be at most {limit} bytes, got {len(raw)} ({raw.hex()})", path
        )
    return raw


def guard_non_negative(value: int, ctx: str, path: DataPath = ROOT) -> int:
    if value < 0:
        raise InvariantViolation(f"{ctx} must be non-negative, got {value}", path)
    return value


def as_bytes(raw: Any, ctx: str) -> bytes:
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raise TypeError(f"{ctx} expects bytes, got {type(raw).__name__}")
    return bytes(raw)


def as_int(value: Any, ctx: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{ctx} expects an int, got {type(value).__name__}")
    return value


# ── sum types ───────────────────────────────────────────────────────────────

def variant_table(*variants) -> Mapping[int, Any]:
    """
    Pin constructor tags to declaration order.

    Each variant class declares its own `TAG`; the table refuses to build if
    a declared tag disagrees with the variant's position, so the wire
    numbering can never drift silently.
    """
    table = {}
    for index, variant in enumerate(variants):
        if variant.TAG != index:
            raise TypeError(
                f"{variant.__name__} declares tag {variant.TAG} but is variant #{index}"
            )
        table[index] = variant
    return MappingProxyType(table)


def decode_sum(data: PlutusData, table: Mapping[int, Any], path: DataPath = ROOT):
    tag, fields = parse_constr(data, path)
    variant = table.get(tag)
    if variant is None:
        raise UnexpectedConstructorIndex(tuple(table), tag, path)
    return variant.decode_fields(fields, path + (variant.__name__,))


# ── primitive codecs ────────────────────────────────────────────────────────

def _encode_text(value: str) -> PlutusData:
    return Bytes(value.encode("utf-8"))


def _decode_text(data: PlutusData, path: DataPath = ROOT) -> str:
    raw = parse_bytes(data, path)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InternalConversionFailure(f"Bytes are not valid UTF-8: {e}", path) from e


def _encode_bool(value: bool) -> PlutusData:
    return Constr(1 if value else 0)


def _decode_bool(data: PlutusData, path: DataPath = ROOT) -> bool:
    tag, fields = parse_constr(data, path)
    if tag not in (0, 1):
        raise UnexpectedConstructorIndex((0, 1), tag, path)
    expect_fields(fields, 0, path)
    return tag == 1


def _decode_unit(data: PlutusData, path: DataPath = ROOT) -> None:
    parse_record(data, 0, path)
    return None


def _decode_data(data: PlutusData, path: DataPath = ROOT) -> PlutusData:
    return data


INTEGER: Codec[int] = Codec("Integer", Integer, parse_integer)
BYTES: Codec[bytes] = Codec("Bytes", Bytes, parse_bytes)
TEXT: Codec[str] = Codec("Text", _encode_text, _decode_text)
BOOL: Codec[bool] = Codec("Bool", _encode_bool, _decode_bool)
UNIT: Codec[None] = Codec("Unit", lambda _: Constr(0), _decode_unit)
DATA: Codec[PlutusData] = Codec("Data", lambda data: data, _decode_data)


# ── combinators ─────────────────────────────────────────────────────────────

OPTION_SOME_TAG = 0
OPTION_NONE_TAG = 1


def optional(inner: Codec[T]) -> Codec[Optional[T]]:
    """Present -> Constr 0 [v]; absent (None) -> Constr 1 []."""

    def encode(value: Optional[T]) -> PlutusData:
        if value is None:
            return Constr(OPTION_NONE_TAG)
        return Constr(OPTION_SOME_TAG, (inner.encode(value),))

    def decode(data: PlutusData, path: DataPath = ROOT) -> Optional[T]:
        tag, fields = parse_constr(data, path)
        if tag == OPTION_SOME_TAG:
            (field,) = expect_fields(fields, 1, path)
            return inner.decode(field, path + ("Some", 0))
        if tag == OPTION_NONE_TAG:
            expect_fields(fields, 0, path)
            return None
        raise UnexpectedConstructorIndex((OPTION_SOME_TAG, OPTION_NONE_TAG), tag, path)

    return Codec(f"Optional[{inner.name}]", encode, decode)


def list_of(inner: Codec[T]) -> Codec[Tuple[T, ...]]:
    def encode(values) -> PlutusData:
        return DataList(tuple(inner.encode(v) for v in values))

    def decode(data: PlutusData, path: DataPath = ROOT) -> Tuple[T, ...]:
        return tuple(
            inner.decode(item, path + (i,)) for i, item in enumerate(parse_list(data, path))
        )

    return Codec(f"List[{inner.name}]", encode, decode)


def pair_of(first: Codec[A], second: Codec[B]) -> Codec[Tuple[A, B]]:
    """Tuples travel as a two-field record."""

    def encode(value: Tuple[A, B]) -> PlutusData:
        a, b = value
        return Constr(0, (first.encode(a), second.encode(b)))

    def decode(data: PlutusData, path: DataPath = ROOT) -> Tuple[A, B]:
        a, b = parse_record(data, 2, path)
        return first.decode(a, path + (0,)), second.decode(b, path + (1,))

    return Codec(f"Pair[{first.name}, {second.name}]", encode, decode)


def codec_for(cls) -> Codec:
    """Codec built from a type's own to_plutus_data / from_plutus_data pair."""
    return Codec(cls.__name__, lambda value: value.to_plutus_data(), cls.from_plutus_data)
