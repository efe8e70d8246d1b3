# plutus_ledger/v1/transaction.py
"""Transactions as seen by a Plutus V1 validator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import ClassVar, Optional, Tuple

from plutus_ledger.core.codec import (
    INTEGER,
    Codec,
    as_int,
    codec_for,
    decode_positional,
    decode_record,
    decode_sum,
    guard_non_negative,
    list_of,
    optional,
    pair_of,
    parse_record,
    variant_table,
)
from plutus_ledger.core.data import Constr, PlutusData
from plutus_ledger.core.errors import ROOT, DataPath
from plutus_ledger.v1.address import (
    ADDRESS,
    STAKING_CREDENTIAL,
    Address,
    StakingCredential,
)
from plutus_ledger.v1.crypto import FixedLedgerBytes, PaymentPubKeyHash
from plutus_ledger.v1.datum import Datum, DatumHash
from plutus_ledger.v1.interval import PlutusInterval, interval_of
from plutus_ledger.v1.newtype import NonNegativeInteger
from plutus_ledger.v1.value import CurrencySymbol, Value

PAYMENT_PUB_KEY_HASH: Codec[PaymentPubKeyHash] = codec_for(PaymentPubKeyHash)
DATUM_HASH: Codec[DatumHash] = codec_for(DatumHash)
DATUM: Codec[Datum] = codec_for(Datum)
VALUE: Codec[Value] = codec_for(Value)
CURRENCY_SYMBOL: Codec[CurrencySymbol] = codec_for(CurrencySymbol)


class TransactionHash(FixedLedgerBytes):
    """
    32-byte blake2b-256 hash of a transaction body, also known as the TxId.

    Unlike the other hashes it travels wrapped in a one-field record.
    """
    LENGTH = 32

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (super().to_plutus_data(),))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "TransactionHash":
        (raw,) = parse_record(data, 1, path)
        return super().from_plutus_data(raw, path + (0,))


TRANSACTION_HASH: Codec[TransactionHash] = codec_for(TransactionHash)


@dataclass(frozen=True)
class TransactionInput:
    """Reference to a UTxO by transaction hash and output index (`TxOutRef`)."""
    transaction_id: TransactionHash
    index: int

    def __post_init__(self):
        guard_non_negative(as_int(self.index, "TransactionInput.index"), "TransactionInput.index")

    def __str__(self) -> str:
        return f"{self.transaction_id}#{self.index}"

    @classmethod
    def parse(cls, text: str) -> "TransactionInput":
        """Parse `<64 hex chars>#<index>`."""
        tx_hash, sep, index = text.partition("#")
        if not sep or not index.isdigit():
            raise ValueError(f"Error while parsing TransactionInput {text!r}: expected '<hash>#<index>'")
        return cls(TransactionHash.from_hex(tx_hash), int(index))

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (self.transaction_id.to_plutus_data(), INTEGER.encode(self.index)))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "TransactionInput":
        tx_id, index = decode_record(data, (
            ("transaction_id", TRANSACTION_HASH),
            ("index", INTEGER),
        ), path)
        guard_non_negative(index, "TransactionInput.index", path + ("index",))
        return cls(tx_id, index)


TRANSACTION_INPUT: Codec[TransactionInput] = codec_for(TransactionInput)


@dataclass(frozen=True)
class TransactionOutput:
    address: Address
    value: Value
    datum_hash: Optional[DatumHash] = None

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (
            self.address.to_plutus_data(),
            self.value.to_plutus_data(),
            _OPTIONAL_DATUM_HASH.encode(self.datum_hash),
        ))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "TransactionOutput":
        return cls(*decode_record(data, (
            ("address", ADDRESS),
            ("value", VALUE),
            ("datum_hash", _OPTIONAL_DATUM_HASH),
        ), path))


_OPTIONAL_DATUM_HASH = optional(DATUM_HASH)
TRANSACTION_OUTPUT: Codec[TransactionOutput] = codec_for(TransactionOutput)


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class POSIXTime(NonNegativeInteger):
    """Milliseconds since 1970-01-01T00:00:00Z."""

    @classmethod
    def from_datetime(cls, dt: datetime) -> "POSIXTime":
        if dt.tzinfo is None:
            raise ValueError("POSIXTime.from_datetime needs a timezone-aware datetime")
        return cls((dt - _EPOCH) // timedelta(milliseconds=1))

    def to_datetime(self) -> datetime:
        return _EPOCH + timedelta(milliseconds=self.value)


POSIX_TIME: Codec[POSIXTime] = codec_for(POSIXTime)

POSIXTimeRange = PlutusInterval
POSIX_TIME_RANGE: Codec[PlutusInterval] = interval_of(POSIX_TIME)


@dataclass(frozen=True)
class TxInInfo:
    """An input of the pending transaction, with the output it spends."""
    reference: TransactionInput
    output: TransactionOutput

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (self.reference.to_plutus_data(), self.output.to_plutus_data()))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "TxInInfo":
        return cls(*decode_record(data, (
            ("reference", TRANSACTION_INPUT),
            ("output", TRANSACTION_OUTPUT),
        ), path))


TX_IN_INFO: Codec[TxInInfo] = codec_for(TxInInfo)


# ── DCert ───────────────────────────────────────────────────────────────────

class DCert(ABC):
    """Digest of a ledger certificate, as far as V1 scripts can see it."""

    @abstractmethod
    def to_plutus_data(self) -> PlutusData:
        pass

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "DCert":
        return decode_sum(data, DCERT_VARIANTS, path)


@dataclass(frozen=True)
class DelegRegKey(DCert):
    TAG: ClassVar[int] = 0
    staking_credential: StakingCredential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.staking_credential.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "DelegRegKey":
        return cls(*decode_positional(fields, (STAKING_CREDENTIAL,), path))


@dataclass(frozen=True)
class DelegDeRegKey(DCert):
    TAG: ClassVar[int] = 1
    staking_credential: StakingCredential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.staking_credential.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "DelegDeRegKey":
        return cls(*decode_positional(fields, (STAKING_CREDENTIAL,), path))


@dataclass(frozen=True)
class DelegDelegate(DCert):
    TAG: ClassVar[int] = 2
    delegator: StakingCredential
    delegatee: PaymentPubKeyHash

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.delegator.to_plutus_data(), self.delegatee.to_plutus_data()))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "DelegDelegate":
        return cls(*decode_positional(fields, (STAKING_CREDENTIAL, PAYMENT_PUB_KEY_HASH), path))


@dataclass(frozen=True)
class PoolRegister(DCert):
    TAG: ClassVar[int] = 3
    pool_id: PaymentPubKeyHash
    pool_vrf: PaymentPubKeyHash

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.pool_id.to_plutus_data(), self.pool_vrf.to_plutus_data()))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "PoolRegister":
        return cls(*decode_positional(fields, (PAYMENT_PUB_KEY_HASH, PAYMENT_PUB_KEY_HASH), path))


@dataclass(frozen=True)
class PoolRetire(DCert):
    TAG: ClassVar[int] = 4
    pool_id: PaymentPubKeyHash
    epoch: int

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.pool_id.to_plutus_data(), INTEGER.encode(self.epoch)))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "PoolRetire":
        return cls(*decode_positional(fields, (PAYMENT_PUB_KEY_HASH, INTEGER), path))


@dataclass(frozen=True)
class Genesis(DCert):
    TAG: ClassVar[int] = 5

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG)

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "Genesis":
        decode_positional(fields, (), path)
        return cls()


@dataclass(frozen=True)
class Mir(DCert):
    TAG: ClassVar[int] = 6

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG)

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "Mir":
        decode_positional(fields, (), path)
        return cls()


DCERT_VARIANTS = variant_table(
    DelegRegKey, DelegDeRegKey, DelegDelegate, PoolRegister, PoolRetire, Genesis, Mir
)
DCERT: Codec[DCert] = codec_for(DCert)


# ── ScriptPurpose ───────────────────────────────────────────────────────────

class ScriptPurpose(ABC):
    """Why the currently executing script is being run."""

    @abstractmethod
    def to_plutus_data(self) -> PlutusData:
        pass

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "ScriptPurpose":
        return decode_sum(data, SCRIPT_PURPOSE_VARIANTS, path)


@dataclass(frozen=True)
class Minting(ScriptPurpose):
    TAG: ClassVar[int] = 0
    currency_symbol: CurrencySymbol

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.currency_symbol.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "Minting":
        return cls(*decode_positional(fields, (CURRENCY_SYMBOL,), path))


@dataclass(frozen=True)
class Spending(ScriptPurpose):
    TAG: ClassVar[int] = 1
    reference: TransactionInput

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.reference.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "Spending":
        return cls(*decode_positional(fields, (TRANSACTION_INPUT,), path))


@dataclass(frozen=True)
class Rewarding(ScriptPurpose):
    TAG: ClassVar[int] = 2
    staking_credential: StakingCredential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.staking_credential.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "Rewarding":
        return cls(*decode_positional(fields, (STAKING_CREDENTIAL,), path))


@dataclass(frozen=True)
class Certifying(ScriptPurpose):
    TAG: ClassVar[int] = 3
    certificate: DCert

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.certificate.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "Certifying":
        return cls(*decode_positional(fields, (DCERT,), path))


SCRIPT_PURPOSE_VARIANTS = variant_table(Minting, Spending, Rewarding, Certifying)
SCRIPT_PURPOSE: Codec[ScriptPurpose] = codec_for(ScriptPurpose)


# ── TransactionInfo / ScriptContext ─────────────────────────────────────────

_TX_IN_INFOS = list_of(TX_IN_INFO)
_TX_OUTPUTS = list_of(TRANSACTION_OUTPUT)
_DCERTS = list_of(DCERT)
_WITHDRAWALS = list_of(pair_of(STAKING_CREDENTIAL, INTEGER))
_SIGNATORIES = list_of(PAYMENT_PUB_KEY_HASH)
_DATUMS = list_of(pair_of(DATUM_HASH, DATUM))


@dataclass(frozen=True)
class TransactionInfo:
    """A pending transaction as seen by a V1 validator (`TxInfo`)."""
    inputs: Tuple[TxInInfo, ...]
    outputs: Tuple[TransactionOutput, ...]
    fee: Value
    mint: Value
    d_cert: Tuple[DCert, ...]
    wdrl: Tuple[Tuple[StakingCredential, int], ...]
    valid_range: PlutusInterval
    signatories: Tuple[PaymentPubKeyHash, ...]
    datums: Tuple[Tuple[DatumHash, Datum], ...]
    id: TransactionHash

    def __post_init__(self):
        for name in ("inputs", "outputs", "d_cert", "wdrl", "signatories", "datums"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (
            _TX_IN_INFOS.encode(self.inputs),
            _TX_OUTPUTS.encode(self.outputs),
            self.fee.to_plutus_data(),
            self.mint.to_plutus_data(),
            _DCERTS.encode(self.d_cert),
            _WITHDRAWALS.encode(self.wdrl),
            POSIX_TIME_RANGE.encode(self.valid_range),
            _SIGNATORIES.encode(self.signatories),
            _DATUMS.encode(self.datums),
            self.id.to_plutus_data(),
        ))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "TransactionInfo":
        return cls(*decode_record(data, (
            ("inputs", _TX_IN_INFOS),
            ("outputs", _TX_OUTPUTS),
            ("fee", VALUE),
            ("mint", VALUE),
            ("d_cert", _DCERTS),
            ("wdrl", _WITHDRAWALS),
            ("valid_range", POSIX_TIME_RANGE),
            ("signatories", _SIGNATORIES),
            ("datums", _DATUMS),
            ("id", TRANSACTION_HASH),
        ), path))


TRANSACTION_INFO: Codec[TransactionInfo] = codec_for(TransactionInfo)


@dataclass(frozen=True)
class ScriptContext:
    """The context handed to the currently executing V1 script."""
    tx_info: TransactionInfo
    purpose: ScriptPurpose

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (self.tx_info.to_plutus_data(), self.purpose.to_plutus_data()))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "ScriptContext":
        return cls(*decode_record(data, (
            ("tx_info", TRANSACTION_INFO),
            ("purpose", SCRIPT_PURPOSE),
        ), path))


SCRIPT_CONTEXT: Codec[ScriptContext] = codec_for(ScriptContext)
