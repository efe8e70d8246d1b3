# plutus_ledger/v2/datum.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from plutus_ledger.core.codec import codec_for, decode_positional, decode_sum, variant_table
from plutus_ledger.core.data import Constr, PlutusData
from plutus_ledger.core.errors import ROOT, DataPath
from plutus_ledger.v1.datum import Datum, DatumHash

_DATUM_HASH = codec_for(DatumHash)
_DATUM = codec_for(Datum)


class OutputDatum(ABC):
    """Datum attached to an output: nothing, a hash of it, or the datum inline."""

    @abstractmethod
    def to_plutus_data(self) -> PlutusData:
        pass

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "OutputDatum":
        return decode_sum(data, OUTPUT_DATUM_VARIANTS, path)


@dataclass(frozen=True)
class NoOutputDatum(OutputDatum):
    TAG: ClassVar[int] = 0

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG)

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "NoOutputDatum":
        decode_positional(fields, (), path)
        return cls()


@dataclass(frozen=True)
class OutputDatumHash(OutputDatum):
    TAG: ClassVar[int] = 1
    datum_hash: DatumHash

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.datum_hash.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "OutputDatumHash":
        return cls(*decode_positional(fields, (_DATUM_HASH,), path))


@dataclass(frozen=True)
class InlineDatum(OutputDatum):
    TAG: ClassVar[int] = 2
    datum: Datum

    def to_plutus_data(self) -> PlutusData:
        return Constr(self.TAG, (self.datum.to_plutus_data(),))

    @classmethod
    def decode_fields(cls, fields, path: DataPath) -> "InlineDatum":
        return cls(*decode_positional(fields, (_DATUM,), path))


OUTPUT_DATUM_VARIANTS = variant_table(NoOutputDatum, OutputDatumHash, InlineDatum)
OUTPUT_DATUM = codec_for(OutputDatum)
