from plutus_ledger.verify.roundtrip import (
    RoundTripFailure,
    RoundTripResult,
    check_fixtures,
    check_round_trip,
)

__all__ = ["RoundTripFailure", "RoundTripResult", "check_fixtures", "check_round_trip"]
