"""
Plutus V2 ledger types. Everything unchanged since V1 is re-exported.
"""

from plutus_ledger.v1 import *  # noqa: F401,F403
from plutus_ledger.v1 import __all__ as _v1_all
from plutus_ledger.v2.datum import InlineDatum, NoOutputDatum, OutputDatum, OutputDatumHash
from plutus_ledger.v2.transaction import (
    ScriptContext,
    TransactionInfo,
    TransactionOutput,
    TxInInfo,
)

__all__ = list(_v1_all) + [
    "OutputDatum", "NoOutputDatum", "OutputDatumHash", "InlineDatum",
]
