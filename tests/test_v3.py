# tests/test_v3.py
from fractions import Fraction

import pytest

from plutus_ledger.core import (
    Bytes,
    Constr,
    Integer,
    InvariantViolation,
    UnexpectedConstructorIndex,
    UnexpectedDataVariant,
)
from plutus_ledger.v1 import AssocMap, Lovelace, PubKeyCredential, ScriptHash, StakePubKeyHash, Value
from plutus_ledger.v2 import InlineDatum, NoOutputDatum
from plutus_ledger.v2 import transaction as v2_tx
from plutus_ledger.v3 import transaction as v3_tx
from plutus_ledger.v3 import Rational, Vote
from samples import (
    sample_address,
    sample_credential,
    sample_currency_symbol,
    sample_datum,
    sample_datum_hash,
    sample_ed25519_pub_key_hash,
    sample_payment_pub_key_hash,
    sample_plutus_interval,
    sample_redeemer,
    sample_staking_credential,
    sample_transaction_hash,
    sample_transaction_input,
    sample_value,
)


def sample_cold():
    return v3_tx.ColdCommitteeCredential(sample_credential())


def sample_hot():
    return v3_tx.HotCommitteeCredential(sample_credential())


def sample_drep_credential():
    return v3_tx.DRepCredential(sample_credential())


def sample_drep():
    return v3_tx.RegisteredDRep(sample_drep_credential())


def sample_stake_pub_key_hash():
    return StakePubKeyHash.from_pub_key_hash(sample_ed25519_pub_key_hash())


def sample_governance_action_id():
    return v3_tx.GovernanceActionId(sample_transaction_hash(), 0)


def sample_rational():
    return Rational(2, 3)


def sample_tx_certs():
    stake = sample_staking_credential()
    return [
        v3_tx.TxCertRegStaking(stake, Lovelace(2000000)),
        v3_tx.TxCertRegStaking(stake),
        v3_tx.TxCertUnRegStaking(stake, Lovelace(2000000)),
        v3_tx.TxCertDelegStaking(stake, v3_tx.DelegStake(sample_stake_pub_key_hash())),
        v3_tx.TxCertRegDeleg(stake, v3_tx.DelegVote(v3_tx.DRepAlwaysAbstain()), Lovelace(1)),
        v3_tx.TxCertRegDRep(sample_drep_credential(), Lovelace(500)),
        v3_tx.TxCertUpdateDRep(sample_drep_credential()),
        v3_tx.TxCertUnRegDRep(sample_drep_credential(), Lovelace(500)),
        v3_tx.TxCertPoolRegister(sample_payment_pub_key_hash(), sample_payment_pub_key_hash()),
        v3_tx.TxCertPoolRetire(sample_payment_pub_key_hash(), 302),
        v3_tx.TxCertAuthHotCommittee(sample_cold(), sample_hot()),
        v3_tx.TxCertResignColdCommittee(sample_cold()),
    ]


def sample_governance_actions():
    ga_id = sample_governance_action_id()
    script = ScriptHash(bytes([1] * 28))
    return [
        v3_tx.ParameterChange(ga_id, v3_tx.ChangeParameters(Integer(1)), script),
        v3_tx.ParameterChange(None, v3_tx.ChangeParameters(Constr(0))),
        v3_tx.HardForkInitiation(None, v3_tx.ProtocolVersion(10, 0)),
        v3_tx.TreasuryWithdrawals(AssocMap(((sample_credential(), Lovelace(100)),)), script),
        v3_tx.NoConfidence(ga_id),
        v3_tx.UpdateCommittee(
            ga_id,
            [sample_cold()],
            AssocMap(((sample_cold(), 600),)),
            sample_rational(),
        ),
        v3_tx.NewConstitution(ga_id, v3_tx.Constitution(script)),
        v3_tx.InfoAction(),
    ]


def sample_protocol_procedure():
    return v3_tx.ProtocolProcedure(Lovelace(1000), sample_credential(), v3_tx.InfoAction())


def sample_v3_transaction_info():
    output = v2_tx.TransactionOutput(sample_address(), sample_value(), InlineDatum(sample_datum()))
    return v3_tx.TransactionInfo(
        inputs=[v2_tx.TxInInfo(sample_transaction_input(), output)],
        reference_inputs=[],
        outputs=[v2_tx.TransactionOutput(sample_address(), sample_value(), NoOutputDatum())],
        fee=Lovelace(234),
        mint=sample_value(),
        tx_certs=sample_tx_certs(),
        wdrl=AssocMap(((sample_staking_credential(), 12),)),
        valid_range=sample_plutus_interval(),
        signatories=[sample_payment_pub_key_hash()],
        redeemers=AssocMap(((v3_tx.Minting(sample_currency_symbol()), sample_redeemer()),)),
        datums=AssocMap(((sample_datum_hash(), sample_datum()),)),
        id=sample_transaction_hash(),
        votes=AssocMap((
            (v3_tx.DRepVoter(sample_drep_credential()),
             AssocMap(((sample_governance_action_id(), Vote.VOTE_YES),))),
        )),
        protocol_procedures=[sample_protocol_procedure()],
        current_treasury_amount=Lovelace(1000000),
    )


def test_rational():
    r = Rational.from_fraction(Fraction(6, 4))
    assert (r.numerator, r.denominator) == (3, 2)
    assert r.to_fraction() == Fraction(3, 2)
    assert str(r) == "3/2"
    assert r.to_plutus_data() == Constr(0, (Integer(3), Integer(2)))


def test_rational_keeps_unreduced_pair():
    tree = Constr(0, (Integer(2), Integer(4)))
    assert v3_tx.RATIONAL.decode(tree).to_plutus_data() == tree


def test_rational_denominator_must_be_positive():
    with pytest.raises(InvariantViolation):
        Rational(1, 0)
    with pytest.raises(InvariantViolation) as exc:
        v3_tx.RATIONAL.decode(Constr(0, (Integer(1), Integer(-2))))
    assert exc.value.path == (1,)


def test_committee_credentials_are_transparent():
    assert sample_cold().to_plutus_data() == sample_credential().to_plutus_data()
    assert v3_tx.COLD_COMMITTEE_CREDENTIAL.decode(sample_credential().to_plutus_data()) == sample_cold()


@pytest.mark.parametrize("vote, tag", [(Vote.VOTE_NO, 0), (Vote.VOTE_YES, 1), (Vote.ABSTAIN, 2)])
def test_vote(vote, tag):
    assert vote.to_plutus_data() == Constr(tag)
    assert v3_tx.VOTE.decode(Constr(tag)) is vote


def test_vote_unknown_tag():
    with pytest.raises(UnexpectedConstructorIndex) as exc:
        v3_tx.VOTE.decode(Constr(3))
    assert exc.value.valid == (0, 1, 2)


def test_drep_variants():
    assert v3_tx.DRepAlwaysAbstain().to_plutus_data() == Constr(1)
    assert v3_tx.DRepAlwaysNoConfidence().to_plutus_data() == Constr(2)
    assert v3_tx.DREP.decode(sample_drep().to_plutus_data()) == sample_drep()


def test_delegatee_variants():
    both = v3_tx.DelegStakeVote(sample_stake_pub_key_hash(), v3_tx.DRepAlwaysNoConfidence())
    assert both.to_plutus_data() == Constr(2, (Bytes(bytes(28)), Constr(2)))
    assert v3_tx.DELEGATEE.decode(both.to_plutus_data()) == both


@pytest.mark.parametrize("cert", sample_tx_certs(), ids=lambda c: type(c).__name__)
def test_tx_cert_roundtrip(cert):
    assert v3_tx.TX_CERT.decode(cert.to_plutus_data()) == cert


def test_tx_cert_tags():
    tags = [cert.to_plutus_data().tag for cert in sample_tx_certs()]
    assert tags == [0, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_reg_staking_optional_deposit():
    cert = v3_tx.TxCertRegStaking(sample_staking_credential())
    assert cert.to_plutus_data().fields[1] == Constr(1)


@pytest.mark.parametrize("action", sample_governance_actions(), ids=lambda a: type(a).__name__)
def test_governance_action_roundtrip(action):
    assert v3_tx.GOVERNANCE_ACTION.decode(action.to_plutus_data()) == action


def test_constitution_is_wrapped():
    assert v3_tx.Constitution().to_plutus_data() == Constr(0, (Constr(1),))


def test_change_parameters_pass_through():
    assert v3_tx.ChangeParameters(Integer(7)).to_plutus_data() == Integer(7)


@pytest.mark.parametrize("voter", [
    v3_tx.CommitteeVoter(sample_hot()),
    v3_tx.DRepVoter(sample_drep_credential()),
    v3_tx.StakePoolVoter(sample_payment_pub_key_hash()),
])
def test_voter_roundtrip(voter):
    assert v3_tx.VOTER.decode(voter.to_plutus_data()) == voter


@pytest.mark.parametrize("purpose", [
    v3_tx.Minting(sample_currency_symbol()),
    v3_tx.Spending(sample_transaction_input()),
    v3_tx.Rewarding(sample_credential()),
    v3_tx.Certifying(0, sample_tx_certs()[0]),
    v3_tx.Voting(v3_tx.StakePoolVoter(sample_payment_pub_key_hash())),
    v3_tx.Proposing(1, sample_protocol_procedure()),
], ids=lambda p: type(p).__name__)
def test_script_purpose_roundtrip(purpose):
    assert v3_tx.SCRIPT_PURPOSE.decode(purpose.to_plutus_data()) == purpose


@pytest.mark.parametrize("info", [
    v3_tx.MintingScript(sample_currency_symbol()),
    v3_tx.SpendingScript(sample_transaction_input(), sample_datum()),
    v3_tx.SpendingScript(sample_transaction_input()),
    v3_tx.RewardingScript(sample_credential()),
    v3_tx.CertifyingScript(3, v3_tx.TxCertResignColdCommittee(sample_cold())),
    v3_tx.VotingScript(v3_tx.CommitteeVoter(sample_hot())),
    v3_tx.ProposingScript(0, sample_protocol_procedure()),
], ids=lambda i: type(i).__name__)
def test_script_info_roundtrip(info):
    assert v3_tx.SCRIPT_INFO.decode(info.to_plutus_data()) == info


def test_spending_script_without_datum():
    tree = v3_tx.SpendingScript(sample_transaction_input()).to_plutus_data()
    assert tree.fields[1] == Constr(1)


def test_transaction_info_roundtrip():
    info = sample_v3_transaction_info()
    tree = info.to_plutus_data()
    assert len(tree.fields) == 16
    assert tree.fields[3] == Integer(234)
    assert tree.fields[14] == Constr(0, (Integer(1000000),))
    assert tree.fields[15] == Constr(1)
    assert v3_tx.TRANSACTION_INFO.decode(tree) == info


def test_script_context_roundtrip():
    ctx = v3_tx.ScriptContext(
        sample_v3_transaction_info(),
        sample_redeemer(),
        v3_tx.SpendingScript(sample_transaction_input(), sample_datum()),
    )
    tree = ctx.to_plutus_data()
    assert tree.fields[1] == Integer(144)
    assert v3_tx.SCRIPT_CONTEXT.decode(tree) == ctx


def test_transaction_info_error_path():
    tree = sample_v3_transaction_info().to_plutus_data()
    fields = list(tree.fields)
    fields[12] = Constr(0)
    with pytest.raises(UnexpectedDataVariant) as exc:
        v3_tx.TRANSACTION_INFO.decode(Constr(0, fields))
    assert exc.value.path == ("votes",)


def test_pub_key_credential_voter():
    voter = v3_tx.DRepVoter(v3_tx.DRepCredential(PubKeyCredential(sample_ed25519_pub_key_hash())))
    assert voter.to_plutus_data() == Constr(1, (Constr(0, (Bytes(bytes(28)),)),))


def test_v3_value_helpers_still_available():
    import plutus_ledger.v3 as v3

    assert v3.Value is Value
    assert v3.ScriptContext is v3_tx.ScriptContext
