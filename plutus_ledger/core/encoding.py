# plutus_ledger/core/encoding.py
import re

_HEX = re.compile(r"[0-9a-fA-F]*")


def hex_encode(data: bytes) -> str:
    """Encode bytes to lowercase base16 (empty bytes -> empty string)."""
    return bytes(data).hex()


def hex_decode(s: str) -> bytes:
    """Decode a base16 string back to bytes. Accepts upper or lower case, nothing else."""
    if not _HEX.fullmatch(s):
        raise ValueError(f"String cannot be parsed as a hexadecimal value: {s!r}")
    if len(s) % 2:
        raise ValueError(f"Hex string has odd length: {s!r}")
    return bytes.fromhex(s)
