# plutus_ledger/v1/address.py
"""Credentials and addresses."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional

from plutus_ledger.core.codec import (
    Codec,
    codec_for,
    decode_positional,
    decode_record,
    decode_sum,
    optional,
    variant_table,
)
from plutus_ledger.core.data import Constr, PlutusData
from plutus_ledger.core.errors import ROOT, DataPath
from plutus_ledger.v1.crypto import Ed25519PubKeyHash
from plutus_ledger.v1.newtype import NonNegativeInteger
from plutus_ledger.v1.script import ValidatorHash

PUB_KEY_HASH: Codec[Ed25519PubKeyHash] = codec_for(Ed25519PubKeyHash)
VALIDATOR_HASH: Codec[ValidatorHash] = codec_for(ValidatorHash)


class Slot(NonNegativeInteger):
    pass


class TransactionIndex(NonNegativeInteger):
    """Position of a transaction within its block."""


class CertificateIndex(NonNegativeInteger):
    """Position of a certificate within its transaction."""


SLOT: Codec[Slot] = codec_for(Slot)
TRANSACTION_INDEX: Codec[TransactionIndex] = codec_for(TransactionIndex)
CERTIFICATE_INDEX: Codec[CertificateIndex] = codec_for(CertificateIndex)


# ── Credential ──────────────────────────────────────────────────────────────

class Credential(ABC):
    """Something that can lock an output or a staking right: a key or a script."""

    @abstractmethod
    def to_plutus_data(self) -> PlutusData:
        pass

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "Credential":
        return decode_sum(data, CREDENTIAL_VARIANTS, path)


@dataclass(frozen=True)
class PubKeyCredential(Credential):
    TAG: ClassVar[int] = 0
    pub_key_hash: Ed25519PubKeyHash

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.pub_key_hash.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "PubKeyCredential":
        return cls(*decode_positional(fields, (PUB_KEY_HASH,), path))


@dataclass(frozen=True)
class ScriptCredential(Credential):
    TAG: ClassVar[int] = 1
    validator_hash: ValidatorHash

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.validator_hash.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "ScriptCredential":
        return cls(*decode_positional(fields, (VALIDATOR_HASH,), path))


CREDENTIAL_VARIANTS = variant_table(PubKeyCredential, ScriptCredential)
CREDENTIAL: Codec[Credential] = codec_for(Credential)


# ── StakingCredential ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class ChainPointer:
    """Location of a stake registration certificate on chain."""
    slot_number: Slot
    transaction_index: TransactionIndex
    certificate_index: CertificateIndex


class StakingCredential(ABC):
    @abstractmethod
    def to_plutus_data(self) -> PlutusData:
        pass

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "StakingCredential":
        return decode_sum(data, STAKING_CREDENTIAL_VARIANTS, path)


@dataclass(frozen=True)
class StakingHash(StakingCredential):
    TAG: ClassVar[int] = 0
    credential: Credential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.credential.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "StakingHash":
        return cls(*decode_positional(fields, (CREDENTIAL,), path))


@dataclass(frozen=True)
class StakingPtr(StakingCredential):
    """Pointer credential; the three pointer fields travel inline."""
    TAG: ClassVar[int] = 1
    pointer: ChainPointer

    def to_plutus_data(self) -> PlutusData:
        p = self.pointer
        return Constr(self.TAG, (
            p.slot_number.to_plutus_data(),
            p.transaction_index.to_plutus_data(),
            p.certificate_index.to_plutus_data(),
        ))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "StakingPtr":
        slot, tx_index, cert_index = decode_positional(
            fields, (SLOT, TRANSACTION_INDEX, CERTIFICATE_INDEX), path
        )
        return cls(ChainPointer(slot, tx_index, cert_index))


STAKING_CREDENTIAL_VARIANTS = variant_table(StakingHash, StakingPtr)
STAKING_CREDENTIAL: Codec[StakingCredential] = codec_for(StakingCredential)


# ── Address ─────────────────────────────────────────────────────────────────

_OPTIONAL_STAKING = optional(STAKING_CREDENTIAL)


@dataclass(frozen=True)
class Address:
    """A payment credential with an optional staking credential."""
    credential: Credential
    staking_credential: Optional[StakingCredential] = None

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (
            self.credential.to_plutus_data(),
            _OPTIONAL_STAKING.encode(self.staking_credential),
        ))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "Address":
        return cls(*decode_record(data, (
            ("credential", CREDENTIAL),
            ("staking_credential", _OPTIONAL_STAKING),
        ), path))


ADDRESS: Codec[Address] = codec_for(Address)
