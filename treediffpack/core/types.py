"""Value kinds and the absent marker for JSON-like trees."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
import math
import numbers
from typing import Any, Literal

from treediffpack.core.exceptions import UnsupportedValueError

ValueKind = Literal[
    "null",
    "boolean",
    "number",
    "string",
    "array",
    "object",
]

VALUE_KINDS: tuple[str, ...] = (
    "null",
    "boolean",
    "number",
    "string",
    "array",
    "object",
)

LEAF_KINDS = frozenset({"null", "boolean", "number", "string"})


class Absent:
    """Marker for a path that does not exist on one side of a comparison.

    Distinct from ``None``, which is a present JSON null.
    """

    _instance: "Absent | None" = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<absent>"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "Absent":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Absent":
        return self

    def __reduce__(self) -> tuple[type, tuple[()]]:
        return (Absent, ())


ABSENT = Absent()


def is_absent(value: Any) -> bool:
    return value is ABSENT


def kind_of(value: Any, *, path: str = "") -> ValueKind:
    """Classify a Python value as one of the JSON value kinds."""
    if value is None:
        return "null"
    # bool subclasses int, so it must be checked first.
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (numbers.Real, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    raise UnsupportedValueError(value, path=path)


def numbers_equal(left: Any, right: Any) -> bool:
    """Compare two numbers by decoded value; NaN equals NaN."""
    # Signalling NaN Decimals raise on ==, so NaNs never reach the comparison.
    left_nan = _is_nan(left)
    right_nan = _is_nan(right)
    if left_nan or right_nan:
        return left_nan and right_nan
    return left == right


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, numbers.Rational):
        return False
    try:
        return math.isnan(value)
    except (TypeError, ValueError, OverflowError):
        return False
