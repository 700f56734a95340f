"""Deterministic JSON rendering for diff values."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from fractions import Fraction
import json
from typing import Any

from treediffpack.core.types import ABSENT

ABSENT_TEXT = "<absent>"


def to_jsonable(value: Any) -> Any:
    """Convert a JSON-like tree into plain ``json`` module types."""
    if isinstance(value, Mapping):
        return {str(key): to_jsonable(item) for key, item in value.items()}

    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]

    if isinstance(value, bool) or value is None:
        return value

    if isinstance(value, Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return float(value)

    if isinstance(value, Fraction):
        if value.denominator == 1:
            return int(value)
        return float(value)

    return value


def canonical_json(value: Any) -> str:
    """Serialize a value to stable canonical JSON."""
    return json.dumps(
        to_jsonable(value),
        ensure_ascii=True,
        separators=(",", ":"),
        sort_keys=True,
    )


def render_value(value: Any) -> str:
    if value is ABSENT:
        return ABSENT_TEXT
    return canonical_json(value)
