# plutus_ledger/core/errors.py
"""
Decode error taxonomy.

Encoding is total and never raises. Decoding raises one of the errors below,
each carrying the path of the nested field or tag that failed to match.
"""

from typing import Tuple, Union

from plutus_ledger.core.data import DataKind

PathSegment = Union[str, int]
DataPath = Tuple[PathSegment, ...]

ROOT: DataPath = ()


def render_path(path: DataPath) -> str:
    """Render a path as `$.tx_info.inputs[0].output`."""
    out = "$"
    for segment in path:
        if isinstance(segment, int):
            out += f"[{segment}]"
        else:
            out += f".{segment}"
    return out


class PlutusDataError(ValueError):
    """Base class for everything that can go wrong while decoding a Data tree."""

    def __init__(self, message: str, path: DataPath = ROOT):
        self.path = tuple(path)
        self.reason = message
        super().__init__(f"{message} (at {render_path(self.path)})")


class UnexpectedDataVariant(PlutusDataError):
    def __init__(self, expected: DataKind, found: DataKind, path: DataPath = ROOT):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected a {expected} node, but got {found}", path)


class UnexpectedConstructorIndex(PlutusDataError):
    def __init__(self, valid: Tuple[int, ...], found: int, path: DataPath = ROOT):
        self.valid = tuple(valid)
        self.found = found
        allowed = ", ".join(str(tag) for tag in self.valid)
        super().__init__(f"Expected a Constr with tag in {{{allowed}}}, but got {found}", path)


class FieldCountMismatch(PlutusDataError):
    def __init__(self, expected: int, found: int, path: DataPath = ROOT):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected} fields, but got {found}", path)


class InvariantViolation(PlutusDataError):
    def __init__(self, description: str, path: DataPath = ROOT):
        self.description = description
        super().__init__(description, path)


class InternalConversionFailure(PlutusDataError):
    def __init__(self, description: str, path: DataPath = ROOT):
        self.description = description
        super().__init__(f"Conversion failed: {description}", path)


__all__ = [
    "DataPath",
    "ROOT",
    "render_path",
    "PlutusDataError",
    "UnexpectedDataVariant",
    "UnexpectedConstructorIndex",
    "FieldCountMismatch",
    "InvariantViolation",
    "InternalConversionFailure",
]
