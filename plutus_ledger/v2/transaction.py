# plutus_ledger/v2/transaction.py
"""
Transactions as seen by a Plutus V2 validator.

Adds reference inputs, inline datums and reference scripts; withdrawals,
redeemers and datums become association maps instead of pair lists.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from plutus_ledger.core.codec import (
    INTEGER,
    Codec,
    codec_for,
    decode_record,
    list_of,
    optional,
)
from plutus_ledger.core.data import Constr, PlutusData
from plutus_ledger.core.errors import ROOT, DataPath
from plutus_ledger.v1.address import ADDRESS, STAKING_CREDENTIAL, Address
from plutus_ledger.v1.assoc_map import AssocMap, assoc_map_of
from plutus_ledger.v1.crypto import PaymentPubKeyHash
from plutus_ledger.v1.interval import PlutusInterval
from plutus_ledger.v1.redeemer import Redeemer
from plutus_ledger.v1.script import ScriptHash
from plutus_ledger.v1.transaction import (
    DATUM,
    DATUM_HASH,
    DCERT,
    PAYMENT_PUB_KEY_HASH,
    POSIX_TIME_RANGE,
    SCRIPT_PURPOSE,
    TRANSACTION_HASH,
    TRANSACTION_INPUT,
    VALUE,
    DCert,
    ScriptPurpose,
    TransactionHash,
    TransactionInput,
)
from plutus_ledger.v1.value import Value
from plutus_ledger.v2.datum import OUTPUT_DATUM, NoOutputDatum, OutputDatum

SCRIPT_HASH: Codec[ScriptHash] = codec_for(ScriptHash)
REDEEMER: Codec[Redeemer] = codec_for(Redeemer)

_OPTIONAL_SCRIPT_HASH = optional(SCRIPT_HASH)


@dataclass(frozen=True)
class TransactionOutput:
    address: Address
    value: Value
    datum: OutputDatum = NoOutputDatum()
    reference_script: Optional[ScriptHash] = None

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (
            self.address.to_plutus_data(),
            self.value.to_plutus_data(),
            self.datum.to_plutus_data(),
            _OPTIONAL_SCRIPT_HASH.encode(self.reference_script),
        ))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "TransactionOutput":
        return cls(*decode_record(data, (
            ("address", ADDRESS),
            ("value", VALUE),
            ("datum", OUTPUT_DATUM),
            ("reference_script", _OPTIONAL_SCRIPT_HASH),
        ), path))


TRANSACTION_OUTPUT: Codec[TransactionOutput] = codec_for(TransactionOutput)


@dataclass(frozen=True)
class TxInInfo:
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

_TX_IN_INFOS = list_of(TX_IN_INFO)
_TX_OUTPUTS = list_of(TRANSACTION_OUTPUT)
_DCERTS = list_of(DCERT)
_WITHDRAWALS = assoc_map_of(STAKING_CREDENTIAL, INTEGER)
_SIGNATORIES = list_of(PAYMENT_PUB_KEY_HASH)
_REDEEMERS = assoc_map_of(SCRIPT_PURPOSE, REDEEMER)
_DATUMS = assoc_map_of(DATUM_HASH, DATUM)


@dataclass(frozen=True)
class TransactionInfo:
    """A pending transaction as seen by a V2 validator."""
    inputs: Tuple[TxInInfo, ...]
    reference_inputs: Tuple[TxInInfo, ...]
    outputs: Tuple[TransactionOutput, ...]
    fee: Value
    mint: Value
    d_cert: Tuple[DCert, ...]
    wdrl: AssocMap  # StakingCredential -> int
    valid_range: PlutusInterval
    signatories: Tuple[PaymentPubKeyHash, ...]
    redeemers: AssocMap  # ScriptPurpose -> Redeemer
    datums: AssocMap  # DatumHash -> Datum
    id: TransactionHash

    def __post_init__(self):
        for name in ("inputs", "reference_inputs", "outputs", "d_cert", "signatories"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (
            _TX_IN_INFOS.encode(self.inputs),
            _TX_IN_INFOS.encode(self.reference_inputs),
            _TX_OUTPUTS.encode(self.outputs),
            self.fee.to_plutus_data(),
            self.mint.to_plutus_data(),
            _DCERTS.encode(self.d_cert),
            _WITHDRAWALS.encode(self.wdrl),
            POSIX_TIME_RANGE.encode(self.valid_range),
            _SIGNATORIES.encode(self.signatories),
            _REDEEMERS.encode(self.redeemers),
            _DATUMS.encode(self.datums),
            self.id.to_plutus_data(),
        ))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "TransactionInfo":
        return cls(*decode_record(data, (
            ("inputs", _TX_IN_INFOS),
            ("reference_inputs", _TX_IN_INFOS),
            ("outputs", _TX_OUTPUTS),
            ("fee", VALUE),
            ("mint", VALUE),
            ("d_cert", _DCERTS),
            ("wdrl", _WITHDRAWALS),
            ("valid_range", POSIX_TIME_RANGE),
            ("signatories", _SIGNATORIES),
            ("redeemers", _REDEEMERS),
            ("datums", _DATUMS),
            ("id", TRANSACTION_HASH),
        ), path))


TRANSACTION_INFO: Codec[TransactionInfo] = codec_for(TransactionInfo)


@dataclass(frozen=True)
class ScriptContext:
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
