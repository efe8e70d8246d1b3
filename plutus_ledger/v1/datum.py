# plutus_ledger/v1/datum.py
from dataclasses import dataclass

from plutus_ledger.core.data import PlutusData
from plutus_ledger.core.errors import ROOT, DataPath
from plutus_ledger.v1.crypto import FixedLedgerBytes


class DatumHash(FixedLedgerBytes):
    """Blake2b-256 hash of a datum."""
    LENGTH = 32


@dataclass(frozen=True)
class Datum:
    """Arbitrary data attached to a script output. Passes through unwrapped."""
    data: PlutusData

    def to_plutus_data(self) -> PlutusData:
        return self.data

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "Datum":
        return cls(data)
