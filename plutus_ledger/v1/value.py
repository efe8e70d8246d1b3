# plutus_ledger/v1/value.py
"""
Currency identifiers and the multi-asset Value algebra.

A Value is a two-level association map CurrencySymbol -> TokenName -> amount,
encoded as a nested Map. Arithmetic keeps keys in first-seen order (left
operand, then right) and prunes zero amounts; comparisons are pointwise over
the union of keys, with a missing key counting as 0.
"""

import logging
import operator
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from plutus_ledger.core.codec import (
    INTEGER,
    Codec,
    codec_for,
    guard_max_length,
    parse_record,
)
from plutus_ledger.core.data import Constr, PlutusData
from plutus_ledger.core.encoding import hex_decode
from plutus_ledger.core.errors import ROOT, DataPath, InvariantViolation
from plutus_ledger.v1.assoc_map import AssocMap, assoc_map_of
from plutus_ledger.v1.crypto import LedgerBytes
from plutus_ledger.v1.newtype import LedgerInteger
from plutus_ledger.v1.script import MintingPolicyHash

logger = logging.getLogger(__name__)

CURRENCY_SYMBOL_LENGTH = 28
TOKEN_NAME_MAX_LENGTH = 32


class CurrencySymbol(LedgerBytes):
    """Identifier of a minting policy; the empty bytestring identifies Ada."""

    @classmethod
    def validate(cls, raw: bytes, path: DataPath = ROOT) -> bytes:
        if len(raw) not in (0, CURRENCY_SYMBOL_LENGTH):
            raise InvariantViolation(
                f"CurrencySymbol must be empty (Ada) or {CURRENCY_SYMBOL_LENGTH} bytes, got {len(raw)}",
                path,
            )
        return raw

    @classmethod
    def from_minting_policy_hash(cls, mph: MintingPolicyHash) -> "CurrencySymbol":
        return cls(mph.raw)

    @classmethod
    def parse(cls, text: str) -> "CurrencySymbol":
        if text == "lovelace":
            return ADA
        return cls(hex_decode(text))

    def is_ada(self) -> bool:
        return not self.raw

    @property
    def minting_policy_hash(self) -> Optional[MintingPolicyHash]:
        return None if self.is_ada() else MintingPolicyHash(self.raw)

    def display(self, alternate: bool = False) -> str:
        if alternate and self.is_ada():
            return "lovelace"
        return self.hex()


ADA = CurrencySymbol(b"")


class TokenName(LedgerBytes):
    """Name of a token within a currency, at most 32 bytes."""

    @classmethod
    def validate(cls, raw: bytes, path: DataPath = ROOT) -> bytes:
        return guard_max_length(raw, TOKEN_NAME_MAX_LENGTH, cls.__name__, path)

    @classmethod
    def from_string(cls, name: str) -> "TokenName":
        return cls(name.encode("utf-8"))

    @classmethod
    def parse(cls, text: str) -> "TokenName":
        return cls(hex_decode(text))

    def is_empty(self) -> bool:
        return not self.raw

    def try_into_string(self) -> Optional[str]:
        try:
            return self.raw.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def display(self, alternate: bool = False) -> str:
        """Hex; with `alternate`, the UTF-8 text or `0x`-prefixed hex."""
        if not alternate:
            return self.hex()
        text = self.try_into_string()
        return text if text is not None else f"0x{self.hex()}"


ADA_TOKEN = TokenName(b"")


@dataclass(frozen=True)
class AssetClass:
    currency_symbol: CurrencySymbol
    token_name: TokenName = ADA_TOKEN

    def display(self, alternate: bool = False) -> str:
        cs = self.currency_symbol.hex()
        if self.token_name.is_empty():
            return cs
        return f"{cs}.{self.token_name.display(alternate)}"

    def __str__(self) -> str:
        return self.display()

    @classmethod
    def parse(cls, text: str) -> "AssetClass":
        cs, sep, tn = text.partition(".")
        if not sep:
            return cls(CurrencySymbol.parse(cs), ADA_TOKEN)
        return cls(CurrencySymbol.parse(cs), TokenName.parse(tn))

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (self.currency_symbol.to_plutus_data(), self.token_name.to_plutus_data()))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "AssetClass":
        cs, tn = parse_record(data, 2, path)
        return cls(
            CurrencySymbol.from_plutus_data(cs, path + ("currency_symbol",)),
            TokenName.from_plutus_data(tn, path + ("token_name",)),
        )


class Lovelace(LedgerInteger):
    """An amount of Ada, in lovelace."""


CURRENCY_SYMBOL: Codec[CurrencySymbol] = codec_for(CurrencySymbol)
TOKEN_NAME: Codec[TokenName] = codec_for(TokenName)
_TOKENS = assoc_map_of(TOKEN_NAME, INTEGER)
_ASSETS = assoc_map_of(CURRENCY_SYMBOL, _TOKENS)

# amount, then an optional asset class after a single space; entries joined by `+`
_ENTRY_RE = re.compile(r"([+-]?[0-9]+)(?: ([0-9A-Za-z]+(?:\.[0-9A-Za-z]*)?))?")
_SEPARATOR_RE = re.compile(r"[ \t]*\+")


@dataclass(frozen=True)
class Value:
    """
    Multi-asset amount.

    `==` is structural and follows the wire order of entries; use `eq`
    for the algebraic comparison that ignores order and zero entries.
    """
    assets: AssocMap = AssocMap()

    # ── construction ──────────────────────────────────────────────────────

    @classmethod
    def zero(cls) -> "Value":
        return cls()

    @classmethod
    def ada_value(cls, amount: int) -> "Value":
        return cls.token_value(ADA, ADA_TOKEN, amount)

    @classmethod
    def token_value(cls, currency_symbol: CurrencySymbol, token_name: TokenName, amount: int) -> "Value":
        return cls(AssocMap(((currency_symbol, AssocMap(((token_name, amount),))),)))

    @classmethod
    def unflatten(cls, triples: Iterable[Tuple[CurrencySymbol, TokenName, int]]) -> "Value":
        value = cls()
        for cs, tn, amount in triples:
            value = value.insert_token(cs, tn, amount)
        return value

    # ── access ────────────────────────────────────────────────────────────

    def get_token_amount(self, currency_symbol: CurrencySymbol, token_name: TokenName) -> int:
        """Amount held under (currency, token); 0 when absent."""
        tokens = self.assets.get(currency_symbol)
        if tokens is None:
            return 0
        return tokens.get(token_name, 0)

    def get_ada_amount(self) -> int:
        return self.get_token_amount(ADA, ADA_TOKEN)

    def insert_token(self, currency_symbol: CurrencySymbol, token_name: TokenName, amount: int) -> "Value":
        tokens = self.assets.get(currency_symbol, AssocMap())
        return Value(self.assets.insert(currency_symbol, tokens.insert(token_name, amount)))

    def flatten(self) -> Tuple[Tuple[CurrencySymbol, TokenName, int], ...]:
        return tuple(
            (cs, tn, amount)
            for cs, tokens in self.assets.items()
            for tn, amount in tokens.items()
        )

    def asset_classes(self) -> Tuple[Tuple[CurrencySymbol, TokenName], ...]:
        """Union-ready key list, in stored order, without duplicates."""
        seen = []
        for cs, tn, _ in self.flatten():
            if (cs, tn) not in seen:
                seen.append((cs, tn))
        return tuple(seen)

    # ── transforms ────────────────────────────────────────────────────────

    def filter_map_amount(
        self, f: Callable[[CurrencySymbol, TokenName, int], Optional[int]]
    ) -> "Value":
        """Apply `f` to every leaf; a None result drops the leaf, emptied currencies are dropped."""
        assets = []
        for cs, tokens in self.assets.items():
            kept = []
            for tn, amount in tokens.items():
                result = f(cs, tn, amount)
                if result is not None:
                    kept.append((tn, result))
            if kept:
                assets.append((cs, AssocMap(tuple(kept))))
        return Value(AssocMap(tuple(assets)))

    def map_amount(self, f: Callable[[CurrencySymbol, TokenName, int], int]) -> "Value":
        return self.filter_map_amount(f)

    def filter(self, predicate: Callable[[CurrencySymbol, TokenName, int], bool]) -> "Value":
        return self.filter_map_amount(lambda cs, tn, a: a if predicate(cs, tn, a) else None)

    def normalize(self) -> "Value":
        """Drop zero leaves and currencies left without tokens."""
        return self.filter(lambda _cs, _tn, amount: amount != 0)

    # ── algebra ───────────────────────────────────────────────────────────

    def add(self, other: "Value") -> "Value":
        merged = self.assets.union_with(
            lambda mine, theirs: mine.union_with(operator.add, theirs), other.assets
        )
        return Value(merged).normalize()

    def negate(self) -> "Value":
        return Value(
            AssocMap(
                tuple(
                    (cs, AssocMap(tuple((tn, -amount) for tn, amount in tokens.items())))
                    for cs, tokens in self.assets.items()
                )
            )
        )

    def subtract(self, other: "Value") -> "Value":
        return self.add(other.negate())

    def scale(self, n: int) -> "Value":
        if n == 0:
            return Value.zero()
        return self.map_amount(lambda _cs, _tn, amount: amount * n)

    def _pointwise(self, other: "Value", compare: Callable[[int, int], bool]) -> bool:
        keys = self.asset_classes() + other.asset_classes()
        return all(
            compare(self.get_token_amount(cs, tn), other.get_token_amount(cs, tn))
            for cs, tn in keys
        )

    def eq(self, other: "Value") -> bool:
        return self._pointwise(other, operator.eq)

    def leq(self, other: "Value") -> bool:
        return self._pointwise(other, operator.le)

    def geq(self, other: "Value") -> bool:
        return self._pointwise(other, operator.ge)

    def is_zero(self) -> bool:
        return all(amount == 0 for _, _, amount in self.flatten())

    def is_empty(self) -> bool:
        return not self.assets

    def is_subset(self, other: "Value") -> bool:
        """Every non-zero amount in self is covered by other."""
        return self.normalize().leq(other)

    def is_pure_ada(self) -> bool:
        return all(cs.is_ada() for cs, _, amount in self.flatten() if amount != 0)

    __add__ = add
    __sub__ = subtract
    __neg__ = negate

    def __mul__(self, n: int) -> "Value":
        return self.scale(n)

    __rmul__ = __mul__

    def __le__(self, other: "Value") -> bool:
        return self.leq(other)

    def __ge__(self, other: "Value") -> bool:
        return self.geq(other)

    # ── text form ─────────────────────────────────────────────────────────

    def display(self, alternate: bool = False) -> str:
        parts = []
        for cs, tn, amount in self.flatten():
            if cs.is_ada():
                parts.append(str(amount))
            else:
                parts.append(f"{amount} {AssetClass(cs, tn).display(alternate)}")
        return "+".join(parts)

    def __str__(self) -> str:
        return self.display()

    @classmethod
    def parse(cls, text: str) -> "Value":
        """Parse `123+5 <cs>.<tn>`: Ada entries are a bare amount, others name the asset class in hex."""
        triples = []
        pos = 0
        while pos < len(text):
            if triples:
                sep = _SEPARATOR_RE.match(text, pos)
                if sep is None:
                    raise ValueError(f"Error while parsing Value {text!r}: expected '+' at {pos}")
                pos = sep.end()
            entry = _ENTRY_RE.match(text, pos)
            if entry is None:
                raise ValueError(f"Error while parsing Value {text!r}: expected an amount at {pos}")
            amount, asset = entry.groups()
            if asset is None:
                triples.append((ADA, ADA_TOKEN, int(amount)))
            else:
                ac = AssetClass.parse(asset)
                triples.append((ac.currency_symbol, ac.token_name, int(amount)))
            pos = entry.end()
        logger.debug("Parsed %d value entries from %r", len(triples), text)
        return cls.unflatten(triples)

    # ── codec ─────────────────────────────────────────────────────────────

    def to_plutus_data(self) -> PlutusData:
        return _ASSETS.encode(self.assets)

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "Value":
        return cls(_ASSETS.decode(data, path))


def sum_values(values: Iterable[Value]) -> Value:
    total = Value.zero()
    for value in values:
        total = total.add(value)
    return total
