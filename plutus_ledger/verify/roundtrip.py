# plutus_ledger/verify/roundtrip.py
"""
Fixture round-trip checker.

A fixture is a Data tree that a codec must decode and re-encode to exactly
the same tree. Failures are collected instead of raised so a whole batch
can be reported at once.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Tuple

from plutus_ledger.core.codec import Codec
from plutus_ledger.core.data import PlutusData
from plutus_ledger.core.errors import render_path

logger = logging.getLogger(__name__)


@dataclass
class RoundTripFailure:
    index: int
    message: str
    category: str = "decode"  # "decode", "mismatch" or "unknown_type"


@dataclass
class RoundTripResult:
    is_valid: bool
    message: str = ""
    failures: List[RoundTripFailure] = field(default_factory=list)

    @property
    def first_failure(self) -> Optional[RoundTripFailure]:
        return self.failures[0] if self.failures else None

    def fail(self, failure: RoundTripFailure):
        self.failures.append(failure)
        self.is_valid = False

    def __bool__(self):
        return self.is_valid

    def __str__(self):
        if self.is_valid:
            return "Round trip is exact ✓"
        lines = [f"Round trip FAILED ({len(self.failures)} issues):"]
        for f in self.failures:
            lines.append(f"  • [{f.index}] {f.category}: {f.message}")
        return "\n".join(lines)


def _check_one(codec: Codec, tree: PlutusData, index: int, result: RoundTripResult):
    decoded = codec.try_decode(tree)
    if not decoded.ok:
        err = decoded.error
        result.fail(RoundTripFailure(index, f"{codec.name}: {err.reason} at {render_path(err.path)}", "decode"))
        return
    encoded = codec.encode(decoded.value)
    if encoded != tree:
        result.fail(RoundTripFailure(index, f"{codec.name}: re-encoded tree differs from the fixture", "mismatch"))


def check_round_trip(codec: Codec, tree: PlutusData) -> RoundTripResult:
    """Decode `tree` with `codec`, re-encode, and compare structurally."""
    result = RoundTripResult(True)
    _check_one(codec, tree, 0, result)
    result.message = "Round trip is exact" if result.is_valid else result.failures[0].message
    logger.debug("Round trip of %s: %s", codec.name, "ok" if result.is_valid else "failed")
    return result


def check_fixtures(table: Mapping[str, Codec], fixtures: Iterable[Tuple[str, PlutusData]]) -> RoundTripResult:
    """Check a batch of (type name, tree) fixtures against a codec table."""
    result = RoundTripResult(True)
    count = 0
    for index, (type_name, tree) in enumerate(fixtures):
        count += 1
        codec = table.get(type_name)
        if codec is None:
            result.fail(RoundTripFailure(index, f"No codec registered for {type_name!r}", "unknown_type"))
            continue
        _check_one(codec, tree, index, result)

    if result.is_valid:
        result.message = f"All {count} fixtures round-trip exactly"
    else:
        result.message = f"Failed with {len(result.failures)} issues out of {count} fixtures"
    logger.debug(result.message)
    return result
