# plutus_ledger/v1/redeemer.py
from dataclasses import dataclass

from plutus_ledger.core.data import PlutusData
from plutus_ledger.core.errors import ROOT, DataPath
from plutus_ledger.v1.crypto import FixedLedgerBytes


@dataclass(frozen=True)
class Redeemer:
    """Argument passed to a validator alongside the datum. Passes through unwrapped."""
    data: PlutusData

    def to_plutus_data(self) -> PlutusData:
        return self.data

    @classmethod
    def from_plutus_data(cls, data: PlutusData, path: DataPath = ROOT) -> "Redeemer":
        return cls(data)


class RedeemerHash(FixedLedgerBytes):
    LENGTH = 32
