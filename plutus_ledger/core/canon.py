# plutus_ledger/core/canon.py
"""
JSON form of Data trees.

Each variant becomes {"name": <variant>, "fields": [...]}:
  Constr  -> {"name": "Constr", "fields": [{"index": n, "fields": [...]}]}
  Map     -> {"name": "Map", "fields": [[[k, v], ...]]}
  List    -> {"name": "List", "fields": [[...]]}
  Integer -> {"name": "Integer", "fields": [n]}
             {"name": "Integer", "fields": ["<decimal>"]} when |n| > 2**53 - 1
  Bytes   -> {"name": "Bytes", "fields": ["<lowercase hex>"]}
"""

import json
import re
from typing import Any, Union

try:
    import jcs
except ImportError:
    raise ImportError("Please install jcs: pip install jcs")

from plutus_ledger.core.data import Bytes, Constr, DataList, DataMap, Integer, PlutusData
from plutus_ledger.core.encoding import hex_decode, hex_encode
from plutus_ledger.core.errors import ROOT, DataPath, render_path


# JCS writes numbers as IEEE doubles; larger integers travel as decimal strings.
MAX_SAFE_INTEGER = 2**53 - 1
_DECIMAL = re.compile(r"-?(0|[1-9][0-9]*)")


def _integer_to_json(n: int) -> Union[int, str]:
    return n if -MAX_SAFE_INTEGER <= n <= MAX_SAFE_INTEGER else str(n)


class DataJsonError(ValueError):
    """JSON document does not describe a Data tree."""

    def __init__(self, message: str, path: DataPath = ROOT):
        self.path = tuple(path)
        super().__init__(f"{message} (at {render_path(self.path)})")


def data_to_json(data: PlutusData) -> Any:
    if isinstance(data, Constr):
        body = {"index": data.tag, "fields": [data_to_json(f) for f in data.fields]}
        return {"name": "Constr", "fields": [body]}
    if isinstance(data, DataMap):
        pairs = [[data_to_json(k), data_to_json(v)] for k, v in data.entries]
        return {"name": "Map", "fields": [pairs]}
    if isinstance(data, DataList):
        return {"name": "List", "fields": [[data_to_json(i) for i in data.items]]}
    if isinstance(data, Integer):
        return {"name": "Integer", "fields": [_integer_to_json(data.value)]}
    if isinstance(data, Bytes):
        return {"name": "Bytes", "fields": [hex_encode(data.value)]}
    raise TypeError(f"Not a Data tree: {type(data).__name__}")


def _single_field(obj: dict, path: DataPath) -> Any:
    fields = obj.get("fields")
    if not isinstance(fields, list) or len(fields) != 1:
        raise DataJsonError("Expected 'fields' to be an array with one element", path)
    return fields[0]


def _expect_array(value: Any, what: str, path: DataPath) -> list:
    if not isinstance(value, list):
        raise DataJsonError(f"Expected {what} to be an array, got {type(value).__name__}", path)
    return value


def data_from_json(obj: Any, path: DataPath = ROOT) -> PlutusData:
    """Inverse of data_to_json. Raises DataJsonError with the offending path."""
    if not isinstance(obj, dict) or "name" not in obj:
        raise DataJsonError("Expected an object with a 'name' key", path)

    name = obj["name"]
    body = _single_field(obj, path)

    if name == "Constr":
        if not isinstance(body, dict) or "index" not in body or "fields" not in body:
            raise DataJsonError("Constr body needs 'index' and 'fields'", path)
        index = body["index"]
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise DataJsonError(f"Constr index must be a non-negative integer, got {index!r}", path)
        fields = _expect_array(body["fields"], "Constr fields", path)
        return Constr(index, tuple(data_from_json(f, path + (i,)) for i, f in enumerate(fields)))

    if name == "Map":
        entries = []
        for i, pair in enumerate(_expect_array(body, "Map entries", path)):
            if not isinstance(pair, list) or len(pair) != 2:
                raise DataJsonError("Map entry must be a [key, value] array", path + (i,))
            entries.append((
                data_from_json(pair[0], path + (i, "key")),
                data_from_json(pair[1], path + (i, "value")),
            ))
        return DataMap(tuple(entries))

    if name == "List":
        items = _expect_array(body, "List items", path)
        return DataList(tuple(data_from_json(item, path + (i,)) for i, item in enumerate(items)))

    if name == "Integer":
        if isinstance(body, str):
            if not _DECIMAL.fullmatch(body):
                raise DataJsonError(f"Integer string must be a decimal integer, got {body!r}", path)
            return Integer(int(body))
        if isinstance(body, bool) or not isinstance(body, int):
            raise DataJsonError(f"Integer payload must be an integer, got {body!r}", path)
        return Integer(body)

    if name == "Bytes":
        if not isinstance(body, str):
            raise DataJsonError("Bytes payload must be a base16 string", path)
        try:
            return Bytes(hex_decode(body))
        except ValueError as e:
            raise DataJsonError(str(e), path) from e

    raise DataJsonError(f"Unknown Data variant {name!r}", path)


def canonical_json(data: PlutusData) -> bytes:
    """
    Deterministic UTF-8 bytes according to RFC 8785 (JSON Canonicalization Scheme).
    Object keys are sorted; array order (List items, Map entries) is preserved.
    """
    return jcs.canonicalize(data_to_json(data))


def canonical_json_str(data: PlutusData) -> str:
    """Same as above, but returns string (mostly for debugging)."""
    return canonical_json(data).decode("utf-8")


def loads_data(text: str) -> PlutusData:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise DataJsonError(f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    return data_from_json(obj)
