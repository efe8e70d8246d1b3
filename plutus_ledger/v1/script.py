# plutus_ledger/v1/script.py
"""Script hashes. All encode transparently as 28-byte Bytes."""

from plutus_ledger.v1.crypto import FixedLedgerBytes


class ScriptHash(FixedLedgerBytes):
    """Hash of a native or Plutus script."""
    LENGTH = 28


class ValidatorHash(FixedLedgerBytes):
    """Hash of a validator script (the script guarding an address)."""
    LENGTH = 28

    @classmethod
    def from_script_hash(cls, script_hash: ScriptHash) -> "ValidatorHash":
        return cls(script_hash.raw)

    @property
    def script_hash(self) -> ScriptHash:
        return ScriptHash(self.raw)


class MintingPolicyHash(FixedLedgerBytes):
    """Hash of a minting policy script."""
    LENGTH = 28

    @classmethod
    def from_script_hash(cls, script_hash: ScriptHash) -> "MintingPolicyHash":
        return cls(script_hash.raw)

    @property
    def script_hash(self) -> ScriptHash:
        return ScriptHash(self.raw)
