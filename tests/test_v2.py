# tests/test_v2.py
import pytest

from plutus_ledger.core import Bytes, Constr, DataMap, Integer, UnexpectedConstructorIndex
from plutus_ledger.v1 import AssocMap, ScriptHash, Value
from plutus_ledger.v1 import transaction as v1_tx
from plutus_ledger.v2 import InlineDatum, NoOutputDatum, OutputDatumHash
from plutus_ledger.v2 import transaction as v2_tx
from plutus_ledger.v2.datum import OUTPUT_DATUM
from samples import (
    sample_address,
    sample_currency_symbol,
    sample_datum,
    sample_datum_hash,
    sample_payment_pub_key_hash,
    sample_plutus_interval,
    sample_redeemer,
    sample_staking_credential,
    sample_transaction_hash,
    sample_transaction_input,
    sample_value,
)


def sample_v2_transaction_output(datum=None):
    return v2_tx.TransactionOutput(
        sample_address(),
        sample_value(),
        datum if datum is not None else InlineDatum(sample_datum()),
        ScriptHash(bytes([1] * 28)),
    )


def sample_v2_transaction_info():
    return v2_tx.TransactionInfo(
        inputs=[v2_tx.TxInInfo(sample_transaction_input(), sample_v2_transaction_output())],
        reference_inputs=[v2_tx.TxInInfo(sample_transaction_input(), sample_v2_transaction_output())],
        outputs=[sample_v2_transaction_output(NoOutputDatum())],
        fee=sample_value(),
        mint=Value.zero(),
        d_cert=[v1_tx.DelegRegKey(sample_staking_credential())],
        wdrl=AssocMap(((sample_staking_credential(), 12),)),
        valid_range=sample_plutus_interval(),
        signatories=[sample_payment_pub_key_hash()],
        redeemers=AssocMap(((v1_tx.Minting(sample_currency_symbol()), sample_redeemer()),)),
        datums=AssocMap(((sample_datum_hash(), sample_datum()),)),
        id=sample_transaction_hash(),
    )


@pytest.mark.parametrize("datum, tree", [
    (NoOutputDatum(), Constr(0)),
    (OutputDatumHash(sample_datum_hash()), Constr(1, (Bytes(bytes(32)),))),
    (InlineDatum(sample_datum()), Constr(2, (Constr(1, (Bytes(b"Something"),)),))),
])
def test_output_datum(datum, tree):
    assert OUTPUT_DATUM.encode(datum) == tree
    assert OUTPUT_DATUM.decode(tree) == datum


def test_output_datum_unknown_tag():
    with pytest.raises(UnexpectedConstructorIndex) as exc:
        OUTPUT_DATUM.decode(Constr(3))
    assert exc.value.valid == (0, 1, 2)


def test_transaction_output_defaults():
    out = v2_tx.TransactionOutput(sample_address(), sample_value())
    tree = out.to_plutus_data()
    assert tree.fields[2] == Constr(0)
    assert tree.fields[3] == Constr(1)
    assert v2_tx.TRANSACTION_OUTPUT.decode(tree) == out


def test_transaction_info_roundtrip():
    info = sample_v2_transaction_info()
    tree = info.to_plutus_data()
    assert len(tree.fields) == 12
    assert tree.fields[6] == DataMap(((sample_staking_credential().to_plutus_data(), Integer(12)),))
    assert v2_tx.TRANSACTION_INFO.decode(tree) == info


def test_redeemer_map_keys_are_purposes():
    tree = sample_v2_transaction_info().to_plutus_data()
    (key, value), = tree.fields[9].entries
    assert key == Constr(0, (Bytes(bytes([1] * 28)),))
    assert value == Integer(144)


def test_script_context_roundtrip():
    ctx = v2_tx.ScriptContext(sample_v2_transaction_info(), v1_tx.Spending(sample_transaction_input()))
    assert v2_tx.SCRIPT_CONTEXT.decode(ctx.to_plutus_data()) == ctx


def test_v2_reexports_v1_names():
    import plutus_ledger.v1 as v1
    import plutus_ledger.v2 as v2

    assert v2.Address is v1.Address
    assert v2.TransactionOutput is v2_tx.TransactionOutput
    assert "InlineDatum" in v2.__all__
