# tests/test_verify.py
import pytest

from plutus_ledger.core import Bytes, Constr, DataMap, Integer
from plutus_ledger.core.codec import Codec, parse_integer
from plutus_ledger.registry import build_codec_table
from plutus_ledger.verify import check_fixtures, check_round_trip
from samples import sample_v1_script_context, sample_value


@pytest.fixture
def table():
    return build_codec_table()


def test_table_is_read_only(table):
    with pytest.raises(TypeError):
        table["v1.Extra"] = table["Data"]


def test_table_names(table):
    for name in ("Data", "v1.Value", "v1.POSIXTimeRange", "v2.OutputDatum", "v3.Vote", "v3.ScriptContext"):
        assert name in table


def test_exact_round_trip(table):
    result = check_round_trip(table["v1.ScriptContext"], sample_v1_script_context().to_plutus_data())
    assert result.is_valid
    assert result
    assert result.failures == []
    assert str(result) == "Round trip is exact ✓"


def test_decode_failure(table):
    result = check_round_trip(table["v1.Value"], Integer(1))
    assert not result
    assert result.first_failure.category == "decode"
    assert "at $" in result.message


def test_mismatch_is_reported():
    # encoder ignores its input, so the tree cannot be reproduced
    lossy = Codec("Lossy", lambda _: Integer(0), parse_integer)
    result = check_round_trip(lossy, Integer(7))
    assert not result.is_valid
    assert result.first_failure.category == "mismatch"
    assert "FAILED" in str(result)


def test_value_keeps_zero_and_order(table):
    tree = DataMap((
        (Bytes(bytes([1] * 28)), DataMap(((Bytes(b"t"), Integer(0)),))),
        (Bytes(b""), DataMap(((Bytes(b""), Integer(5)),))),
    ))
    assert check_round_trip(table["v1.Value"], tree).is_valid


def test_check_fixtures(table):
    fixtures = [
        ("v1.Value", sample_value().to_plutus_data()),
        ("v1.Credential", Constr(0, (Bytes(bytes(28)),))),
        ("v1.Credential", Constr(5, (Bytes(bytes(28)),))),
        ("v9.Missing", Integer(0)),
    ]
    result = check_fixtures(table, fixtures)
    assert not result.is_valid
    assert [(f.index, f.category) for f in result.failures] == [(2, "decode"), (3, "unknown_type")]
    assert result.message == "Failed with 2 issues out of 4 fixtures"


def test_check_fixtures_all_good(table):
    result = check_fixtures(table, [("Data", Integer(1)), ("v3.Vote", Constr(2))])
    assert result.is_valid
    assert result.message == "All 2 fixtures round-trip exactly"
