"""
Plutus V1 ledger types.
"""

from plutus_ledger.v1.address import (
    Address,
    CertificateIndex,
    ChainPointer,
    Credential,
    PubKeyCredential,
    ScriptCredential,
    Slot,
    StakingCredential,
    StakingHash,
    StakingPtr,
    TransactionIndex,
)
from plutus_ledger.v1.assoc_map import AssocMap, assoc_map_of
from plutus_ledger.v1.crypto import (
    Ed25519PubKeyHash,
    LedgerBytes,
    PaymentPubKeyHash,
    StakePubKeyHash,
)
from plutus_ledger.v1.datum import Datum, DatumHash
from plutus_ledger.v1.interval import (
    Extended,
    ExtendedKind,
    Interval,
    IntervalConversionError,
    IntervalKind,
    InvalidInterval,
    LowerBound,
    PlutusInterval,
    UnexpectedOpenBound,
    UpperBound,
    interval_of,
)
from plutus_ledger.v1.redeemer import Redeemer, RedeemerHash
from plutus_ledger.v1.script import MintingPolicyHash, ScriptHash, ValidatorHash
from plutus_ledger.v1.transaction import (
    POSIXTime,
    POSIXTimeRange,
    DCert,
    ScriptContext,
    ScriptPurpose,
    TransactionHash,
    TransactionInfo,
    TransactionInput,
    TransactionOutput,
    TxInInfo,
)
from plutus_ledger.v1.value import (
    ADA,
    ADA_TOKEN,
    AssetClass,
    CurrencySymbol,
    Lovelace,
    TokenName,
    Value,
    sum_values,
)

__all__ = [
    "Address", "CertificateIndex", "ChainPointer", "Credential", "PubKeyCredential",
    "ScriptCredential", "Slot", "StakingCredential", "StakingHash", "StakingPtr",
    "TransactionIndex",
    "AssocMap", "assoc_map_of",
    "Ed25519PubKeyHash", "LedgerBytes", "PaymentPubKeyHash", "StakePubKeyHash",
    "Datum", "DatumHash", "Redeemer", "RedeemerHash",
    "Extended", "ExtendedKind", "LowerBound", "UpperBound", "PlutusInterval", "interval_of",
    "Interval", "IntervalKind", "IntervalConversionError", "InvalidInterval", "UnexpectedOpenBound",
    "MintingPolicyHash", "ScriptHash", "ValidatorHash",
    "POSIXTime", "POSIXTimeRange", "DCert", "ScriptContext", "ScriptPurpose",
    "TransactionHash", "TransactionInfo", "TransactionInput", "TransactionOutput", "TxInInfo",
    "ADA", "ADA_TOKEN", "AssetClass", "CurrencySymbol", "Lovelace", "TokenName", "Value",
    "sum_values",
]
