# plutus_ledger/v3/transaction.py
"""
Transactions as seen by a Plutus V3 script (Conway era).

Certificates are replaced by TxCert, governance (votes, proposals, the
constitution and the committee) becomes visible, and the script context
carries the redeemer together with a ScriptInfo.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional, Tuple

from plutus_ledger.core.codec import (
    DATA,
    INTEGER,
    Codec,
    codec_for,
    decode_positional,
    decode_record,
    decode_sum,
    expect_fields,
    list_of,
    optional,
    parse_constr,
    variant_table,
)
from plutus_ledger.core.data import Constr, PlutusData
from plutus_ledger.core.errors import ROOT, DataPath, UnexpectedConstructorIndex
from plutus_ledger.v1.address import (
    CREDENTIAL,
    STAKING_CREDENTIAL,
    Credential,
    StakingCredential,
)
from plutus_ledger.v1.assoc_map import AssocMap, assoc_map_of
from plutus_ledger.v1.crypto import PaymentPubKeyHash, StakePubKeyHash
from plutus_ledger.v1.datum import Datum
from plutus_ledger.v1.interval import PlutusInterval
from plutus_ledger.v1.redeemer import Redeemer
from plutus_ledger.v1.script import ScriptHash
from plutus_ledger.v1.transaction import (
    CURRENCY_SYMBOL,
    DATUM,
    DATUM_HASH,
    PAYMENT_PUB_KEY_HASH,
    POSIX_TIME_RANGE,
    TRANSACTION_HASH,
    TRANSACTION_INPUT,
    VALUE,
    TransactionHash,
    TransactionInput,
)
from plutus_ledger.v1.value import CurrencySymbol, Lovelace, Value
from plutus_ledger.v2.transaction import (
    REDEEMER,
    SCRIPT_HASH,
    TRANSACTION_OUTPUT,
    TX_IN_INFO,
    TransactionOutput,
    TxInInfo,
)
from plutus_ledger.v3.ratio import Rational

LOVELACE: Codec[Lovelace] = codec_for(Lovelace)
STAKE_PUB_KEY_HASH: Codec[StakePubKeyHash] = codec_for(StakePubKeyHash)
RATIONAL: Codec[Rational] = codec_for(Rational)

_OPTIONAL_LOVELACE = optional(LOVELACE)
_OPTIONAL_SCRIPT_HASH = optional(SCRIPT_HASH)


# ── credential newtypes ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class _CredentialNewtype:
    """A Credential in a specific governance role; encodes as the bare Credential."""
    credential: Credential

    def to_plutus_data(self) -> PlutusData:
        return self.credential.to_plutus_data()

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT):
        return cls(Credential.from_plutus_data(data, path))


class ColdCommitteeCredential(_CredentialNewtype):
    pass


class HotCommitteeCredential(_CredentialNewtype):
    pass


class DRepCredential(_CredentialNewtype):
    pass


COLD_COMMITTEE_CREDENTIAL: Codec[ColdCommitteeCredential] = codec_for(ColdCommitteeCredential)
HOT_COMMITTEE_CREDENTIAL: Codec[HotCommitteeCredential] = codec_for(HotCommitteeCredential)
DREP_CREDENTIAL: Codec[DRepCredential] = codec_for(DRepCredential)


# ── DRep ────────────────────────────────────────────────────────────────────

class DRep(ABC):
    """A delegated representative, or one of the two predefined voting options."""

    @abstractmethod
    def to_plutus_data(self) -> PlutusData:
        pass

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "DRep":
        return decode_sum(data, DREP_VARIANTS, path)


@dataclass(frozen=True)
class RegisteredDRep(DRep):
    TAG: ClassVar[int] = 0
    credential: DRepCredential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.credential.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "RegisteredDRep":
        return cls(*decode_positional(fields, (DREP_CREDENTIAL,), path))


@dataclass(frozen=True)
class DRepAlwaysAbstain(DRep):
    TAG: ClassVar[int] = 1

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG)

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "DRepAlwaysAbstain":
        decode_positional(fields, (), path)
        return cls()


@dataclass(frozen=True)
class DRepAlwaysNoConfidence(DRep):
    TAG: ClassVar[int] = 2

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG)

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "DRepAlwaysNoConfidence":
        decode_positional(fields, (), path)
        return cls()


DREP_VARIANTS = variant_table(RegisteredDRep, DRepAlwaysAbstain, DRepAlwaysNoConfidence)
DREP: Codec[DRep] = codec_for(DRep)


# ── Delegatee ───────────────────────────────────────────────────────────────

class Delegatee(ABC):
    @abstractmethod
    def to_plutus_data(self) -> PlutusData:
        pass

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "Delegatee":
        return decode_sum(data, DELEGATEE_VARIANTS, path)


@dataclass(frozen=True)
class DelegStake(Delegatee):
    TAG: ClassVar[int] = 0
    pool: StakePubKeyHash

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.pool.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "DelegStake":
        return cls(*decode_positional(fields, (STAKE_PUB_KEY_HASH,), path))


@dataclass(frozen=True)
class DelegVote(Delegatee):
    TAG: ClassVar[int] = 1
    drep: DRep

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.drep.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "DelegVote":
        return cls(*decode_positional(fields, (DREP,), path))


@dataclass(frozen=True)
class DelegStakeVote(Delegatee):
    TAG: ClassVar[int] = 2
    pool: StakePubKeyHash
    drep: DRep

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.pool.to_plutus_data(), self.drep.to_plutus_data()))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "DelegStakeVote":
        return cls(*decode_positional(fields, (STAKE_PUB_KEY_HASH, DREP), path))


DELEGATEE_VARIANTS = variant_table(DelegStake, DelegVote, DelegStakeVote)
DELEGATEE: Codec[Delegatee] = codec_for(Delegatee)


# ── TxCert ──────────────────────────────────────────────────────────────────

class TxCert(ABC):
    """A certificate carried by the transaction."""

    @abstractmethod
    def to_plutus_data(self) -> PlutusData:
        pass

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "TxCert":
        return decode_sum(data, TX_CERT_VARIANTS, path)


@dataclass(frozen=True)
class TxCertRegStaking(TxCert):
    """Register staking credential with an optional deposit amount."""
    TAG: ClassVar[int] = 0
    staking_credential: StakingCredential
    deposit: Optional[Lovelace] = None

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (
            self.staking_credential.to_plutus_data(), _OPTIONAL_LOVELACE.encode(self.deposit),
        ))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TxCertRegStaking":
        return cls(*decode_positional(fields, (STAKING_CREDENTIAL, _OPTIONAL_LOVELACE), path))


@dataclass(frozen=True)
class TxCertUnRegStaking(TxCert):
    """Un-register staking credential with an optional refund amount."""
    TAG: ClassVar[int] = 1
    staking_credential: StakingCredential
    refund: Optional[Lovelace] = None

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (
            self.staking_credential.to_plutus_data(), _OPTIONAL_LOVELACE.encode(self.refund),
        ))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TxCertUnRegStaking":
        return cls(*decode_positional(fields, (STAKING_CREDENTIAL, _OPTIONAL_LOVELACE), path))


@dataclass(frozen=True)
class TxCertDelegStaking(TxCert):
    TAG: ClassVar[int] = 2
    staking_credential: StakingCredential
    delegatee: Delegatee

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (
            self.staking_credential.to_plutus_data(), self.delegatee.to_plutus_data(),
        ))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TxCertDelegStaking":
        return cls(*decode_positional(fields, (STAKING_CREDENTIAL, DELEGATEE), path))


@dataclass(frozen=True)
class TxCertRegDeleg(TxCert):
    """Register and delegate staking credential in one certificate, with a deposit."""
    TAG: ClassVar[int] = 3
    staking_credential: StakingCredential
    delegatee: Delegatee
    deposit: Lovelace

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (
            self.staking_credential.to_plutus_data(),
            self.delegatee.to_plutus_data(),
            self.deposit.to_plutus_data(),
        ))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TxCertRegDeleg":
        return cls(*decode_positional(fields, (STAKING_CREDENTIAL, DELEGATEE, LOVELACE), path))


@dataclass(frozen=True)
class TxCertRegDRep(TxCert):
    TAG: ClassVar[int] = 4
    drep_credential: DRepCredential
    deposit: Lovelace

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.drep_credential.to_plutus_data(), self.deposit.to_plutus_data()))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TxCertRegDRep":
        return cls(*decode_positional(fields, (DREP_CREDENTIAL, LOVELACE), path))


@dataclass(frozen=True)
class TxCertUpdateDRep(TxCert):
    TAG: ClassVar[int] = 5
    drep_credential: DRepCredential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.drep_credential.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TxCertUpdateDRep":
        return cls(*decode_positional(fields, (DREP_CREDENTIAL,), path))


@dataclass(frozen=True)
class TxCertUnRegDRep(TxCert):
    TAG: ClassVar[int] = 6
    drep_credential: DRepCredential
    refund: Lovelace

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.drep_credential.to_plutus_data(), self.refund.to_plutus_data()))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TxCertUnRegDRep":
        return cls(*decode_positional(fields, (DREP_CREDENTIAL, LOVELACE), path))


@dataclass(frozen=True)
class TxCertPoolRegister(TxCert):
    TAG: ClassVar[int] = 7
    pool_id: PaymentPubKeyHash
    pool_vfr: PaymentPubKeyHash

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.pool_id.to_plutus_data(), self.pool_vfr.to_plutus_data()))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TxCertPoolRegister":
        return cls(*decode_positional(fields, (PAYMENT_PUB_KEY_HASH, PAYMENT_PUB_KEY_HASH), path))


@dataclass(frozen=True)
class TxCertPoolRetire(TxCert):
    TAG: ClassVar[int] = 8
    pool_id: PaymentPubKeyHash
    epoch: int

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.pool_id.to_plutus_data(), INTEGER.encode(self.epoch)))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TxCertPoolRetire":
        return cls(*decode_positional(fields, (PAYMENT_PUB_KEY_HASH, INTEGER), path))


@dataclass(frozen=True)
class TxCertAuthHotCommittee(TxCert):
    TAG: ClassVar[int] = 9
    cold: ColdCommitteeCredential
    hot: HotCommitteeCredential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.cold.to_plutus_data(), self.hot.to_plutus_data()))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TxCertAuthHotCommittee":
        return cls(*decode_positional(fields, (COLD_COMMITTEE_CREDENTIAL, HOT_COMMITTEE_CREDENTIAL), path))


@dataclass(frozen=True)
class TxCertResignColdCommittee(TxCert):
    TAG: ClassVar[int] = 10
    cold: ColdCommitteeCredential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.cold.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TxCertResignColdCommittee":
        return cls(*decode_positional(fields, (COLD_COMMITTEE_CREDENTIAL,), path))


TX_CERT_VARIANTS = variant_table(
    TxCertRegStaking,
    TxCertUnRegStaking,
    TxCertDelegStaking,
    TxCertRegDeleg,
    TxCertRegDRep,
    TxCertUpdateDRep,
    TxCertUnRegDRep,
    TxCertPoolRegister,
    TxCertPoolRetire,
    TxCertAuthHotCommittee,
    TxCertResignColdCommittee,
)
TX_CERT: Codec[TxCert] = codec_for(TxCert)


# ── voting ──────────────────────────────────────────────────────────────────

class Voter(ABC):
    @abstractmethod
    def to_plutus_data(self) -> PlutusData:
        pass

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "Voter":
        return decode_sum(data, VOTER_VARIANTS, path)


@dataclass(frozen=True)
class CommitteeVoter(Voter):
    TAG: ClassVar[int] = 0
    credential: HotCommitteeCredential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.credential.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "CommitteeVoter":
        return cls(*decode_positional(fields, (HOT_COMMITTEE_CREDENTIAL,), path))


@dataclass(frozen=True)
class DRepVoter(Voter):
    TAG: ClassVar[int] = 1
    credential: DRepCredential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.credential.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "DRepVoter":
        return cls(*decode_positional(fields, (DREP_CREDENTIAL,), path))


@dataclass(frozen=True)
class StakePoolVoter(Voter):
    TAG: ClassVar[int] = 2
    pool_id: PaymentPubKeyHash

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.pool_id.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "StakePoolVoter":
        return cls(*decode_positional(fields, (PAYMENT_PUB_KEY_HASH,), path))


VOTER_VARIANTS = variant_table(CommitteeVoter, DRepVoter, StakePoolVoter)
VOTER: Codec[Voter] = codec_for(Voter)


class Vote(IntEnum):
    """A ballot; the member value is the constructor tag."""
    VOTE_NO = 0
    VOTE_YES = 1
    ABSTAIN = 2

    def to_plutus_data(self) -> PlutusData:
        return Constr(int(self))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "Vote":
        tag, fields = parse_constr(data, path)
        valid = tuple(int(v) for v in cls)
        if tag not in valid:
            raise UnexpectedConstructorIndex(valid, tag, path)
        expect_fields(fields, 0, path)
        return cls(tag)


VOTE: Codec[Vote] = codec_for(Vote)


@dataclass(frozen=True)
class GovernanceActionId:
    """A governance proposal: the submitting transaction and the proposal's index in it."""
    tx_id: TransactionHash
    gov_action_id: int

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (self.tx_id.to_plutus_data(), INTEGER.encode(self.gov_action_id)))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "GovernanceActionId":
        return cls(*decode_record(data, (
            ("tx_id", TRANSACTION_HASH),
            ("gov_action_id", INTEGER),
        ), path))


GOVERNANCE_ACTION_ID: Codec[GovernanceActionId] = codec_for(GovernanceActionId)
_OPTIONAL_GA_ID = optional(GOVERNANCE_ACTION_ID)
_COMMITTEE_MEMBERS = assoc_map_of(COLD_COMMITTEE_CREDENTIAL, INTEGER)


@dataclass(frozen=True)
class Committee:
    """Constitutional committee: member expiration epochs and the voting quorum."""
    members: AssocMap  # ColdCommitteeCredential -> int
    quorum: Rational

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (_COMMITTEE_MEMBERS.encode(self.members), self.quorum.to_plutus_data()))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "Committee":
        return cls(*decode_record(data, (
            ("members", _COMMITTEE_MEMBERS),
            ("quorum", RATIONAL),
        ), path))


@dataclass(frozen=True)
class Constitution:
    """Travels wrapped in a one-field record."""
    constitution_script: Optional[ScriptHash] = None

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (_OPTIONAL_SCRIPT_HASH.encode(self.constitution_script),))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "Constitution":
        return cls(*decode_record(data, (("constitution_script", _OPTIONAL_SCRIPT_HASH),), path))


CONSTITUTION: Codec[Constitution] = codec_for(Constitution)


@dataclass(frozen=True)
class ProtocolVersion:
    major: int
    minor: int

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (INTEGER.encode(self.major), INTEGER.encode(self.minor)))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "ProtocolVersion":
        return cls(*decode_record(data, (("major", INTEGER), ("minor", INTEGER)), path))


PROTOCOL_VERSION: Codec[ProtocolVersion] = codec_for(ProtocolVersion)


@dataclass(frozen=True)
class ChangeParameters:
    """Opaque protocol parameter update; passes through unwrapped."""
    data: PlutusData

    def to_plutus_data(self) -> PlutusData:
        return self.data

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "ChangeParameters":
        return cls(DATA.decode(data, path))


CHANGE_PARAMETERS: Codec[ChangeParameters] = codec_for(ChangeParameters)


# ── GovernanceAction ────────────────────────────────────────────────────────

class GovernanceAction(ABC):
    @abstractmethod
    def to_plutus_data(self) -> PlutusData:
        pass

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "GovernanceAction":
        return decode_sum(data, GOVERNANCE_ACTION_VARIANTS, path)


_WITHDRAWAL_MAP = assoc_map_of(CREDENTIAL, LOVELACE)
_COLD_CREDENTIALS = list_of(COLD_COMMITTEE_CREDENTIAL)


@dataclass(frozen=True)
class ParameterChange(GovernanceAction):
    TAG: ClassVar[int] = 0
    previous_action: Optional[GovernanceActionId]
    parameters: ChangeParameters
    constitution_script: Optional[ScriptHash] = None

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (
            _OPTIONAL_GA_ID.encode(self.previous_action),
            self.parameters.to_plutus_data(),
            _OPTIONAL_SCRIPT_HASH.encode(self.constitution_script),
        ))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "ParameterChange":
        return cls(*decode_positional(
            fields, (_OPTIONAL_GA_ID, CHANGE_PARAMETERS, _OPTIONAL_SCRIPT_HASH), path
        ))


@dataclass(frozen=True)
class HardForkInitiation(GovernanceAction):
    TAG: ClassVar[int] = 1
    previous_action: Optional[GovernanceActionId]
    protocol_version: ProtocolVersion

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (
            _OPTIONAL_GA_ID.encode(self.previous_action),
            self.protocol_version.to_plutus_data(),
        ))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "HardForkInitiation":
        return cls(*decode_positional(fields, (_OPTIONAL_GA_ID, PROTOCOL_VERSION), path))


@dataclass(frozen=True)
class TreasuryWithdrawals(GovernanceAction):
    TAG: ClassVar[int] = 2
    withdrawals: AssocMap  # Credential -> Lovelace
    constitution_script: Optional[ScriptHash] = None

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (
            _WITHDRAWAL_MAP.encode(self.withdrawals),
            _OPTIONAL_SCRIPT_HASH.encode(self.constitution_script),
        ))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "TreasuryWithdrawals":
        return cls(*decode_positional(fields, (_WITHDRAWAL_MAP, _OPTIONAL_SCRIPT_HASH), path))


@dataclass(frozen=True)
class NoConfidence(GovernanceAction):
    TAG: ClassVar[int] = 3
    previous_action: Optional[GovernanceActionId] = None

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (_OPTIONAL_GA_ID.encode(self.previous_action),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "NoConfidence":
        return cls(*decode_positional(fields, (_OPTIONAL_GA_ID,), path))


@dataclass(frozen=True)
class UpdateCommittee(GovernanceAction):
    TAG: ClassVar[int] = 4
    previous_action: Optional[GovernanceActionId]
    removed_members: Tuple[ColdCommitteeCredential, ...]
    added_members: AssocMap  # ColdCommitteeCredential -> int
    new_quorum: Rational

    def __post_init__(self):
        object.__setattr__(self, "removed_members", tuple(self.removed_members))

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (
            _OPTIONAL_GA_ID.encode(self.previous_action),
            _COLD_CREDENTIALS.encode(self.removed_members),
            _COMMITTEE_MEMBERS.encode(self.added_members),
            self.new_quorum.to_plutus_data(),
        ))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "UpdateCommittee":
        return cls(*decode_positional(
            fields, (_OPTIONAL_GA_ID, _COLD_CREDENTIALS, _COMMITTEE_MEMBERS, RATIONAL), path
        ))


@dataclass(frozen=True)
class NewConstitution(GovernanceAction):
    TAG: ClassVar[int] = 5
    previous_action: Optional[GovernanceActionId]
    constitution: Constitution

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (
            _OPTIONAL_GA_ID.encode(self.previous_action),
            self.constitution.to_plutus_data(),
        ))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "NewConstitution":
        return cls(*decode_positional(fields, (_OPTIONAL_GA_ID, CONSTITUTION), path))


@dataclass(frozen=True)
class InfoAction(GovernanceAction):
    TAG: ClassVar[int] = 6

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG)

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "InfoAction":
        decode_positional(fields, (), path)
        return cls()


GOVERNANCE_ACTION_VARIANTS = variant_table(
    ParameterChange,
    HardForkInitiation,
    TreasuryWithdrawals,
    NoConfidence,
    UpdateCommittee,
    NewConstitution,
    InfoAction,
)
GOVERNANCE_ACTION: Codec[GovernanceAction] = codec_for(GovernanceAction)


@dataclass(frozen=True)
class ProtocolProcedure:
    """A governance proposal as submitted: deposit, refund address and the action."""
    deposit: Lovelace
    return_addr: Credential
    governance_action: GovernanceAction

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (
            self.deposit.to_plutus_data(),
            self.return_addr.to_plutus_data(),
            self.governance_action.to_plutus_data(),
        ))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "ProtocolProcedure":
        return cls(*decode_record(data, (
            ("deposit", LOVELACE),
            ("return_addr", CREDENTIAL),
            ("governance_action", GOVERNANCE_ACTION),
        ), path))


PROTOCOL_PROCEDURE: Codec[ProtocolProcedure] = codec_for(ProtocolProcedure)


# ── ScriptPurpose ───────────────────────────────────────────────────────────

class ScriptPurpose(ABC):
    """What a redeemer is for; keys the redeemer map."""

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
    credential: Credential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.credential.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "Rewarding":
        return cls(*decode_positional(fields, (CREDENTIAL,), path))


@dataclass(frozen=True)
class Certifying(ScriptPurpose):
    TAG: ClassVar[int] = 3
    index: int
    certificate: TxCert

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (INTEGER.encode(self.index), self.certificate.to_plutus_data()))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "Certifying":
        return cls(*decode_positional(fields, (INTEGER, TX_CERT), path))


@dataclass(frozen=True)
class Voting(ScriptPurpose):
    TAG: ClassVar[int] = 4
    voter: Voter

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.voter.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "Voting":
        return cls(*decode_positional(fields, (VOTER,), path))


@dataclass(frozen=True)
class Proposing(ScriptPurpose):
    TAG: ClassVar[int] = 5
    index: int
    procedure: ProtocolProcedure

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (INTEGER.encode(self.index), self.procedure.to_plutus_data()))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "Proposing":
        return cls(*decode_positional(fields, (INTEGER, PROTOCOL_PROCEDURE), path))


SCRIPT_PURPOSE_VARIANTS = variant_table(Minting, Spending, Rewarding, Certifying, Voting, Proposing)
SCRIPT_PURPOSE: Codec[ScriptPurpose] = codec_for(ScriptPurpose)


# ── ScriptInfo ──────────────────────────────────────────────────────────────

class ScriptInfo(ABC):
    """Like ScriptPurpose, but a spending script also sees its datum."""

    @abstractmethod
    def to_plutus_data(self) -> PlutusData:
        pass

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "ScriptInfo":
        return decode_sum(data, SCRIPT_INFO_VARIANTS, path)


_OPTIONAL_DATUM = optional(DATUM)


@dataclass(frozen=True)
class MintingScript(ScriptInfo):
    TAG: ClassVar[int] = 0
    currency_symbol: CurrencySymbol

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.currency_symbol.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "MintingScript":
        return cls(*decode_positional(fields, (CURRENCY_SYMBOL,), path))


@dataclass(frozen=True)
class SpendingScript(ScriptInfo):
    TAG: ClassVar[int] = 1
    reference: TransactionInput
    datum: Optional[Datum] = None

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.reference.to_plutus_data(), _OPTIONAL_DATUM.encode(self.datum)))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "SpendingScript":
        return cls(*decode_positional(fields, (TRANSACTION_INPUT, _OPTIONAL_DATUM), path))


@dataclass(frozen=True)
class RewardingScript(ScriptInfo):
    TAG: ClassVar[int] = 2
    credential: Credential

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.credential.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "RewardingScript":
        return cls(*decode_positional(fields, (CREDENTIAL,), path))


@dataclass(frozen=True)
class CertifyingScript(ScriptInfo):
    TAG: ClassVar[int] = 3
    index: int
    certificate: TxCert

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (INTEGER.encode(self.index), self.certificate.to_plutus_data()))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "CertifyingScript":
        return cls(*decode_positional(fields, (INTEGER, TX_CERT), path))


@dataclass(frozen=True)
class VotingScript(ScriptInfo):
    TAG: ClassVar[int] = 4
    voter: Voter

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.voter.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "VotingScript":
        return cls(*decode_positional(fields, (VOTER,), path))


@dataclass(frozen=True)
class ProposingScript(ScriptInfo):
    TAG: ClassVar[int] = 5
    index: int
    procedure: ProtocolProcedure

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (INTEGER.encode(self.index), self.procedure.to_plutus_data()))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "ProposingScript":
        return cls(*decode_positional(fields, (INTEGER, PROTOCOL_PROCEDURE), path))


SCRIPT_INFO_VARIANTS = variant_table(
    MintingScript, SpendingScript, RewardingScript, CertifyingScript, VotingScript, ProposingScript
)
SCRIPT_INFO: Codec[ScriptInfo] = codec_for(ScriptInfo)


# ── TransactionInfo / ScriptContext ─────────────────────────────────────────

_TX_IN_INFOS = list_of(TX_IN_INFO)
_TX_OUTPUTS = list_of(TRANSACTION_OUTPUT)
_TX_CERTS = list_of(TX_CERT)
_WITHDRAWALS = assoc_map_of(STAKING_CREDENTIAL, INTEGER)
_SIGNATORIES = list_of(PAYMENT_PUB_KEY_HASH)
_REDEEMERS = assoc_map_of(SCRIPT_PURPOSE, REDEEMER)
_DATUMS = assoc_map_of(DATUM_HASH, DATUM)
_VOTES = assoc_map_of(VOTER, assoc_map_of(GOVERNANCE_ACTION_ID, VOTE))
_PROCEDURES = list_of(PROTOCOL_PROCEDURE)


@dataclass(frozen=True)
class TransactionInfo:
    """A pending transaction as seen by a V3 script."""
    inputs: Tuple[TxInInfo, ...]
    reference_inputs: Tuple[TxInInfo, ...]
    outputs: Tuple[TransactionOutput, ...]
    fee: Lovelace
    mint: Value
    tx_certs: Tuple[TxCert, ...]
    wdrl: AssocMap  # StakingCredential -> int
    valid_range: PlutusInterval
    signatories: Tuple[PaymentPubKeyHash, ...]
    redeemers: AssocMap  # ScriptPurpose -> Redeemer
    datums: AssocMap  # DatumHash -> Datum
    id: TransactionHash
    votes: AssocMap  # Voter -> AssocMap[GovernanceActionId, Vote]
    protocol_procedures: Tuple[ProtocolProcedure, ...]
    current_treasury_amount: Optional[Lovelace] = None
    treasury_donation: Optional[Lovelace] = None

    def __post_init__(self):
        for name in (
            "inputs", "reference_inputs", "outputs", "tx_certs", "signatories", "protocol_procedures",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (
            _TX_IN_INFOS.encode(self.inputs),
            _TX_IN_INFOS.encode(self.reference_inputs),
            _TX_OUTPUTS.encode(self.outputs),
            self.fee.to_plutus_data(),
            self.mint.to_plutus_data(),
            _TX_CERTS.encode(self.tx_certs),
            _WITHDRAWALS.encode(self.wdrl),
            POSIX_TIME_RANGE.encode(self.valid_range),
            _SIGNATORIES.encode(self.signatories),
            _REDEEMERS.encode(self.redeemers),
            _DATUMS.encode(self.datums),
            self.id.to_plutus_data(),
            _VOTES.encode(self.votes),
            _PROCEDURES.encode(self.protocol_procedures),
            _OPTIONAL_LOVELACE.encode(self.current_treasury_amount),
            _OPTIONAL_LOVELACE.encode(self.treasury_donation),
        ))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "TransactionInfo":
        return cls(*decode_record(data, (
            ("inputs", _TX_IN_INFOS),
            ("reference_inputs", _TX_IN_INFOS),
            ("outputs", _TX_OUTPUTS),
            ("fee", LOVELACE),
            ("mint", VALUE),
            ("tx_certs", _TX_CERTS),
            ("wdrl", _WITHDRAWALS),
            ("valid_range", POSIX_TIME_RANGE),
            ("signatories", _SIGNATORIES),
            ("redeemers", _REDEEMERS),
            ("datums", _DATUMS),
            ("id", TRANSACTION_HASH),
            ("votes", _VOTES),
            ("protocol_procedures", _PROCEDURES),
            ("current_treasury_amount", _OPTIONAL_LOVELACE),
            ("treasury_donation", _OPTIONAL_LOVELACE),
        ), path))


TRANSACTION_INFO: Codec[TransactionInfo] = codec_for(TransactionInfo)


@dataclass(frozen=True)
class ScriptContext:
    """The context handed to the currently executing V3 script."""
    tx_info: TransactionInfo
    redeemer: Redeemer
    script_info: ScriptInfo

    def to_plutus_data(self) -> PlutusData:
        return Constr(0, (
            self.tx_info.to_plutus_data(),
            self.redeemer.to_plutus_data(),
            self.script_info.to_plutus_data(),
        ))

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "ScriptContext":
        return cls(*decode_record(data, (
            ("tx_info", TRANSACTION_INFO),
            ("redeemer", REDEEMER),
            ("script_info", SCRIPT_INFO),
        ), path))


SCRIPT_CONTEXT: Codec[ScriptContext] = codec_for(ScriptContext)
