# plutus_ledger/__init__.py
"""
plutus_ledger: off-chain construction and inspection of on-chain script arguments.
Generic five-variant Data tree codec, plus the ledger types that travel through it:
multi-asset values, extended-bound time intervals, addresses and script contexts (V1–V3).

Every encoding here must match the on-chain representation byte for byte.
"""

__version__ = "0.1.0-dev"
