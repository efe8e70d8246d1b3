# tests/test_core.py
import json

import pytest

from plutus_ledger.core.canon import (
    DataJsonError,
    canonical_json,
    canonical_json_str,
    data_from_json,
    data_to_json,
    loads_data,
)
from plutus_ledger.core.data import Bytes, Constr, DataKind, DataList, DataMap, Integer, kind_of
from plutus_ledger.core.encoding import hex_decode, hex_encode


@pytest.fixture
def sample_tree():
    return Constr(0, (
        Integer(-7),
        Bytes(b"\x00\xff"),
        DataList((Integer(1), Integer(2))),
        DataMap(((Bytes(b"a"), Integer(1)), (Bytes(b"a"), Integer(2)))),
    ))


def test_data_immutable(sample_tree):
    with pytest.raises(AttributeError):
        sample_tree.tag = 3


def test_equality_is_order_sensitive():
    a = DataMap(((Integer(1), Integer(10)), (Integer(2), Integer(20))))
    b = DataMap(((Integer(2), Integer(20)), (Integer(1), Integer(10))))
    assert a != b
    assert DataList((Integer(1), Integer(2))) != DataList((Integer(2), Integer(1)))


def test_map_keeps_duplicate_keys(sample_tree):
    entries = sample_tree.fields[3].entries
    assert len(entries) == 2
    assert entries[0][0] == entries[1][0]


def test_fields_are_normalised_to_tuples():
    c = Constr(1, [Integer(1)])
    assert c.fields == (Integer(1),)
    assert c == Constr(1, (Integer(1),))
    assert hash(c) == hash(Constr(1, (Integer(1),)))


def test_kinds(sample_tree):
    assert kind_of(sample_tree) is DataKind.CONSTR
    assert [kind_of(f) for f in sample_tree.fields] == [
        DataKind.INTEGER, DataKind.BYTES, DataKind.LIST, DataKind.MAP,
    ]
    assert str(DataKind.MAP) == "Map"


@pytest.mark.parametrize("bad", [
    lambda: Constr(-1),
    lambda: Constr(True),
    lambda: Integer(True),
    lambda: Integer("3"),
    lambda: Bytes("not bytes"),
])
def test_rejects_malformed_nodes(bad):
    with pytest.raises((TypeError, ValueError)):
        bad()


def test_hex_helpers():
    assert hex_encode(b"") == ""
    assert hex_encode(b"\xde\xad") == "dead"
    assert hex_decode("DEAD") == b"\xde\xad"
    with pytest.raises(ValueError):
        hex_decode("abc")
    with pytest.raises(ValueError):
        hex_decode("zz")


@pytest.mark.parametrize("text", ["01  02", " 0102", "0102\n", "0x0102", "０１"])
def test_hex_decode_is_strict(text):
    with pytest.raises(ValueError):
        hex_decode(text)


def test_json_form(sample_tree):
    obj = data_to_json(sample_tree)
    assert obj["name"] == "Constr"
    body = obj["fields"][0]
    assert body["index"] == 0
    assert body["fields"][0] == {"name": "Integer", "fields": [-7]}
    assert body["fields"][1] == {"name": "Bytes", "fields": ["00ff"]}
    assert data_from_json(obj) == sample_tree


def test_canonical_json_deterministic(sample_tree):
    json1 = canonical_json(sample_tree)
    json2 = canonical_json(Constr(0, list(sample_tree.fields)))
    assert json1 == json2
    assert json1.startswith(b'{"fields":[{"fields":')
    assert loads_data(canonical_json_str(sample_tree)) == sample_tree


@pytest.mark.parametrize("n", [2**70, -(2**70), 2**53, 12345678901234567890])
def test_big_integers_survive_canonical_json(n):
    text = canonical_json_str(Integer(n))
    assert text == f'{{"fields":["{n}"],"name":"Integer"}}'
    assert loads_data(text) == Integer(n)


def test_safe_integers_stay_json_numbers():
    limit = 2**53 - 1
    assert data_to_json(Integer(limit)) == {"name": "Integer", "fields": [limit]}
    assert data_to_json(Integer(-limit)) == {"name": "Integer", "fields": [-limit]}
    assert canonical_json_str(Integer(limit)) == '{"fields":[9007199254740991],"name":"Integer"}'


def test_canonical_json_preserves_map_order():
    a = DataMap(((Integer(2), Integer(0)), (Integer(1), Integer(0))))
    text = canonical_json_str(a)
    assert text.index("2") < text.index("1")


@pytest.mark.parametrize("doc, path", [
    ({"name": "Nope", "fields": [1]}, ()),
    ({"name": "Integer", "fields": ["1.5"]}, ()),
    ({"name": "Integer", "fields": [1.5]}, ()),
    ({"name": "Integer", "fields": ["007"]}, ()),
    ({"name": "Bytes", "fields": ["xyz"]}, ()),
    ({"name": "List", "fields": [[{"name": "Integer", "fields": [1]}, {"fields": []}]]}, (1,)),
    ({"name": "Constr", "fields": [{"index": -1, "fields": []}]}, ()),
    ({"name": "Map", "fields": [[[{"name": "Integer", "fields": [1]}]]]}, (0,)),
])
def test_malformed_json_reports_path(doc, path):
    with pytest.raises(DataJsonError) as exc:
        data_from_json(doc)
    assert exc.value.path == path


def test_loads_data_rejects_invalid_json():
    with pytest.raises(DataJsonError):
        loads_data("{not json")
    tree = loads_data(json.dumps({"name": "Integer", "fields": [12345678901234567890]}))
    assert tree == Integer(12345678901234567890)
