"""
Plutus V3 ledger types. Everything unchanged since V2 is re-exported.
"""

from plutus_ledger.v2 import *  # noqa: F401,F403
from plutus_ledger.v2 import __all__ as _v2_all
from plutus_ledger.v3.ratio import Rational
from plutus_ledger.v3.transaction import (
    ChangeParameters,
    ColdCommitteeCredential,
    Committee,
    CommitteeVoter,
    Constitution,
    DelegStake,
    DelegStakeVote,
    Delegatee,
    DelegVote,
    DRep,
    DRepAlwaysAbstain,
    DRepAlwaysNoConfidence,
    DRepCredential,
    DRepVoter,
    GovernanceAction,
    GovernanceActionId,
    HardForkInitiation,
    HotCommitteeCredential,
    InfoAction,
    NewConstitution,
    NoConfidence,
    ParameterChange,
    ProtocolProcedure,
    ProtocolVersion,
    RegisteredDRep,
    ScriptContext,
    ScriptInfo,
    ScriptPurpose,
    StakePoolVoter,
    TransactionInfo,
    TreasuryWithdrawals,
    TxCert,
    UpdateCommittee,
    Vote,
    Voter,
)

__all__ = list(_v2_all) + [
    "Rational", "ChangeParameters", "ColdCommitteeCredential", "Committee", "CommitteeVoter",
    "Constitution", "DelegStake", "DelegStakeVote", "Delegatee", "DelegVote", "DRep",
    "DRepAlwaysAbstain", "DRepAlwaysNoConfidence", "DRepCredential", "DRepVoter",
    "GovernanceAction", "GovernanceActionId", "HardForkInitiation", "HotCommitteeCredential",
    "InfoAction", "NewConstitution", "NoConfidence", "ParameterChange", "ProtocolProcedure",
    "ProtocolVersion", "RegisteredDRep", "ScriptInfo", "StakePoolVoter", "TreasuryWithdrawals",
    "TxCert", "UpdateCommittee", "Vote", "Voter",
]
