"""
Data tree, codec contract and error taxonomy shared by every ledger version.
"""

from plutus_ledger.core.codec import (
    BOOL,
    BYTES,
    DATA,
    INTEGER,
    TEXT,
    UNIT,
    Codec,
    DecodeResult,
    codec_for,
    list_of,
    optional,
    pair_of,
)
from plutus_ledger.core.data import (
    Bytes,
    Constr,
    DataKind,
    DataList,
    DataMap,
    Integer,
    PlutusData,
    constr,
    data_list,
    data_map,
    kind_of,
)
from plutus_ledger.core.errors import (
    ROOT,
    FieldCountMismatch,
    InternalConversionFailure,
    InvariantViolation,
    PlutusDataError,
    UnexpectedConstructorIndex,
    UnexpectedDataVariant,
    render_path,
)

__all__ = [
    "PlutusData", "Constr", "DataMap", "DataList", "Integer", "Bytes", "DataKind",
    "constr", "data_map", "data_list", "kind_of",
    "Codec", "DecodeResult", "codec_for", "optional", "list_of", "pair_of",
    "INTEGER", "BYTES", "TEXT", "BOOL", "UNIT", "DATA",
    "ROOT", "render_path", "PlutusDataError", "UnexpectedDataVariant",
    "UnexpectedConstructorIndex", "FieldCountMismatch", "InvariantViolation",
    "InternalConversionFailure",
]
