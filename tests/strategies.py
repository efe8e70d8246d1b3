# tests/strategies.py
"""Hypothesis strategies for Data trees and the V1 ledger types."""

from hypothesis import strategies as st

from plutus_ledger.core.data import Bytes, Constr, DataList, DataMap, Integer
from plutus_ledger.v1 import (
    ADA,
    Address,
    ChainPointer,
    CurrencySymbol,
    Ed25519PubKeyHash,
    Extended,
    LowerBound,
    PlutusInterval,
    PubKeyCredential,
    ScriptCredential,
    StakingHash,
    StakingPtr,
    TokenName,
    UpperBound,
    ValidatorHash,
    Value,
)
from plutus_ledger.v1.address import CertificateIndex, Slot, TransactionIndex

amounts = st.integers(min_value=-(2**80), max_value=2**80)

currency_symbols = st.one_of(
    st.just(ADA),
    st.binary(min_size=28, max_size=28).map(CurrencySymbol),
)

token_names = st.binary(max_size=32).map(TokenName)

# a handful of distinct keys so that operands share currencies and tokens
_small_currency_symbols = st.sampled_from(
    [ADA] + [CurrencySymbol(bytes([i] * 28)) for i in range(1, 4)]
)
_small_token_names = st.sampled_from([TokenName(b""), TokenName(b"x"), TokenName(b"y")])

values = st.lists(
    st.tuples(
        st.one_of(_small_currency_symbols, currency_symbols),
        st.one_of(_small_token_names, token_names),
        amounts,
    ),
    max_size=8,
).map(Value.unflatten)

credentials = st.one_of(
    st.binary(min_size=28, max_size=28).map(lambda b: PubKeyCredential(Ed25519PubKeyHash(b))),
    st.binary(min_size=28, max_size=28).map(lambda b: ScriptCredential(ValidatorHash(b))),
)

_counters = st.integers(min_value=0, max_value=2**64)

chain_pointers = st.builds(
    ChainPointer,
    _counters.map(Slot),
    _counters.map(TransactionIndex),
    _counters.map(CertificateIndex),
)

staking_credentials = st.one_of(
    credentials.map(StakingHash),
    chain_pointers.map(StakingPtr),
)

addresses = st.builds(Address, credentials, st.none() | staking_credentials)


def extendeds(points=st.integers(min_value=-20, max_value=20)):
    return st.one_of(
        st.just(Extended.neg_inf()),
        st.just(Extended.pos_inf()),
        points.map(Extended.finite),
    )


def intervals(points=st.integers(min_value=-20, max_value=20)):
    """Any interval, including empty ones and odd encodings such as (+inf, -inf]."""
    return st.builds(
        PlutusInterval,
        st.builds(LowerBound, extendeds(points), st.booleans()),
        st.builds(UpperBound, extendeds(points), st.booleans()),
    )


data_trees = st.recursive(
    st.one_of(amounts.map(Integer), st.binary(max_size=40).map(Bytes)),
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(lambda items: DataList(tuple(items))),
        st.lists(st.tuples(children, children), max_size=4).map(lambda entries: DataMap(tuple(entries))),
        st.builds(
            lambda tag, fields: Constr(tag, tuple(fields)),
            st.integers(min_value=0, max_value=2**32 - 1),
            st.lists(children, max_size=4),
        ),
    ),
    max_leaves=20,
)
