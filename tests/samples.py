# tests/samples.py
"""Sample ledger values shared by the test modules."""

from plutus_ledger.core.data import Bytes, Constr, Integer
from plutus_ledger.v1 import (
    Address,
    AssetClass,
    CurrencySymbol,
    Datum,
    DatumHash,
    Ed25519PubKeyHash,
    MintingPolicyHash,
    PaymentPubKeyHash,
    PlutusInterval,
    POSIXTime,
    PubKeyCredential,
    Redeemer,
    ScriptCredential,
    ScriptHash,
    StakingHash,
    TokenName,
    TransactionHash,
    TransactionInput,
    ValidatorHash,
    Value,
)
from plutus_ledger.v1 import transaction as v1_tx


def sample_script_hash() -> ScriptHash:
    return ScriptHash(bytes([1] * 28))


def sample_currency_symbol() -> CurrencySymbol:
    return CurrencySymbol.from_minting_policy_hash(MintingPolicyHash(bytes([1] * 28)))


def sample_token_name() -> TokenName:
    return TokenName.from_string("Something")


def sample_asset_class() -> AssetClass:
    return AssetClass(sample_currency_symbol(), sample_token_name())


def sample_value() -> Value:
    return Value.token_value(sample_currency_symbol(), sample_token_name(), 123) + Value.ada_value(234)


def sample_plutus_interval() -> PlutusInterval:
    return PlutusInterval.start_at(POSIXTime(1723106785))


def sample_ed25519_pub_key_hash() -> Ed25519PubKeyHash:
    return Ed25519PubKeyHash(bytes(28))


def sample_payment_pub_key_hash() -> PaymentPubKeyHash:
    return PaymentPubKeyHash.from_pub_key_hash(sample_ed25519_pub_key_hash())


def sample_credential() -> ScriptCredential:
    return ScriptCredential(ValidatorHash.from_script_hash(sample_script_hash()))


def sample_staking_credential() -> StakingHash:
    return StakingHash(sample_credential())


def sample_address() -> Address:
    return Address(PubKeyCredential(sample_ed25519_pub_key_hash()), sample_staking_credential())


def sample_transaction_hash() -> TransactionHash:
    return TransactionHash(bytes(32))


def sample_transaction_input() -> TransactionInput:
    return TransactionInput(sample_transaction_hash(), 3)


def sample_datum_hash() -> DatumHash:
    return DatumHash(bytes(32))


def sample_plutus_data():
    return Constr(1, (Bytes(b"Something"),))


def sample_datum() -> Datum:
    return Datum(sample_plutus_data())


def sample_redeemer() -> Redeemer:
    return Redeemer(Integer(144))


def sample_v1_transaction_output() -> v1_tx.TransactionOutput:
    return v1_tx.TransactionOutput(sample_address(), sample_value(), sample_datum_hash())


def sample_v1_transaction_info() -> v1_tx.TransactionInfo:
    return v1_tx.TransactionInfo(
        inputs=[v1_tx.TxInInfo(sample_transaction_input(), sample_v1_transaction_output())],
        outputs=[sample_v1_transaction_output()],
        fee=sample_value(),
        mint=sample_value(),
        d_cert=[v1_tx.DelegDelegate(sample_staking_credential(), sample_payment_pub_key_hash())],
        wdrl=[(sample_staking_credential(), 12)],
        valid_range=sample_plutus_interval(),
        signatories=[sample_payment_pub_key_hash()],
        datums=[(sample_datum_hash(), sample_datum())],
        id=sample_transaction_hash(),
    )


def sample_v1_script_context() -> v1_tx.ScriptContext:
    return v1_tx.ScriptContext(sample_v1_transaction_info(), v1_tx.Minting(sample_currency_symbol()))
