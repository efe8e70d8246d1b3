# plutus_ledger/registry.py
"""
Explicit lookup table from qualified type name to Codec.

The table is built on request and handed to whoever needs it (the CLI,
the fixture checker). Nothing registers itself at import time.
"""

import logging
from types import MappingProxyType
from typing import Mapping

from plutus_ledger.core.codec import DATA, INTEGER, Codec, codec_for
from plutus_ledger.v1 import address as v1_address
from plutus_ledger.v1 import crypto as v1_crypto
from plutus_ledger.v1 import datum as v1_datum
from plutus_ledger.v1 import redeemer as v1_redeemer
from plutus_ledger.v1 import script as v1_script
from plutus_ledger.v1 import transaction as v1_tx
from plutus_ledger.v1 import value as v1_value
from plutus_ledger.v1.interval import interval_of
from plutus_ledger.v2 import datum as v2_datum
from plutus_ledger.v2 import transaction as v2_tx
from plutus_ledger.v3 import ratio as v3_ratio
from plutus_ledger.v3 import transaction as v3_tx

logger = logging.getLogger(__name__)


def build_codec_table() -> Mapping[str, Codec]:
    table = {"Data": DATA}

    def add(prefix: str, *types):
        for cls in types:
            table[f"{prefix}.{cls.__name__}"] = codec_for(cls)

    add(
        "v1",
        v1_crypto.LedgerBytes,
        v1_crypto.Ed25519PubKeyHash,
        v1_crypto.PaymentPubKeyHash,
        v1_crypto.StakePubKeyHash,
        v1_script.ScriptHash,
        v1_script.ValidatorHash,
        v1_script.MintingPolicyHash,
        v1_datum.DatumHash,
        v1_datum.Datum,
        v1_redeemer.Redeemer,
        v1_redeemer.RedeemerHash,
        v1_value.CurrencySymbol,
        v1_value.TokenName,
        v1_value.AssetClass,
        v1_value.Value,
        v1_value.Lovelace,
        v1_address.Credential,
        v1_address.StakingCredential,
        v1_address.Address,
        v1_address.Slot,
        v1_address.TransactionIndex,
        v1_address.CertificateIndex,
        v1_tx.TransactionHash,
        v1_tx.TransactionInput,
        v1_tx.TransactionOutput,
        v1_tx.POSIXTime,
        v1_tx.TxInInfo,
        v1_tx.DCert,
        v1_tx.ScriptPurpose,
        v1_tx.TransactionInfo,
        v1_tx.ScriptContext,
    )
    table["v1.POSIXTimeRange"] = v1_tx.POSIX_TIME_RANGE
    table["v1.Interval[Integer]"] = interval_of(INTEGER)

    add(
        "v2",
        v2_datum.OutputDatum,
        v2_tx.TransactionOutput,
        v2_tx.TxInInfo,
        v2_tx.TransactionInfo,
        v2_tx.ScriptContext,
    )

    add(
        "v3",
        v3_ratio.Rational,
        v3_tx.ColdCommitteeCredential,
        v3_tx.HotCommitteeCredential,
        v3_tx.DRepCredential,
        v3_tx.DRep,
        v3_tx.Delegatee,
        v3_tx.TxCert,
        v3_tx.Voter,
        v3_tx.Vote,
        v3_tx.GovernanceActionId,
        v3_tx.Committee,
        v3_tx.Constitution,
        v3_tx.ProtocolVersion,
        v3_tx.ChangeParameters,
        v3_tx.GovernanceAction,
        v3_tx.ProtocolProcedure,
        v3_tx.ScriptPurpose,
        v3_tx.ScriptInfo,
        v3_tx.TransactionInfo,
        v3_tx.ScriptContext,
    )

    logger.debug("Built codec table with %d entries", len(table))
    return MappingProxyType(table)
