# plutus_ledger/v1/crypto.py
"""Byte strings and public key hashes."""

from dataclasses import dataclass
from typing import ClassVar

from plutus_ledger.core.codec import as_bytes, guard_length, parse_bytes
from plutus_ledger.core.data import Bytes, PlutusData
from plutus_ledger.core.encoding import hex_decode, hex_encode
from plutus_ledger.core.errors import ROOT, DataPath


@dataclass(frozen=True)
class LedgerBytes:
    """A bytestring in the ledger context. Encodes transparently as Bytes."""
    raw: bytes = b""

    def __post_init__(self):
        object.__setattr__(self, "raw", as_bytes(self.raw, type(self).__name__))
        self.validate(self.raw)

    @classmethod
    def validate(cls, raw: bytes, path: DataPath = ROOT) -> bytes:
        return raw

    @classmethod
    def from_hex(cls, s: str):
        return cls(hex_decode(s))

    def hex(self) -> str:
        return hex_encode(self.raw)

    def __len__(self) -> int:
        return len(self.raw)

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()!r})"

    def to_plutus_data(self) -> PlutusData:
        return Bytes(self.raw)

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT):
        raw = parse_bytes(data, path)
        cls.validate(raw, path)
        return cls(raw)


class FixedLedgerBytes(LedgerBytes):
    """Hash-like bytestring whose length is part of its type."""
    LENGTH: ClassVar[int] = 0

    @classmethod
    def validate(cls, raw: bytes, path: DataPath = ROOT) -> bytes:
        return guard_length(raw, cls.LENGTH, cls.__name__, path)


class Ed25519PubKeyHash(FixedLedgerBytes):
    """Blake2b-224 hash of an ED25519 verification key (`PubKeyHash` on-chain)."""
    LENGTH = 28


class PaymentPubKeyHash(FixedLedgerBytes):
    """Public key hash used to verify a transaction witness."""
    LENGTH = 28

    @classmethod
    def from_pub_key_hash(cls, pkh: Ed25519PubKeyHash) -> "PaymentPubKeyHash":
        return cls(pkh.raw)

    @property
    def pub_key_hash(self) -> Ed25519PubKeyHash:
        return Ed25519PubKeyHash(self.raw)


class StakePubKeyHash(FixedLedgerBytes):
    """Public key hash used to verify staking operations."""
    LENGTH = 28

    @classmethod
    def from_pub_key_hash(cls, pkh: Ed25519PubKeyHash) -> "StakePubKeyHash":
        return cls(pkh.raw)

    @property
    def pub_key_hash(self) -> Ed25519PubKeyHash:
        return Ed25519PubKeyHash(self.raw)
