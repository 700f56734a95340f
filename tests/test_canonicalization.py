from decimal import Decimal
from fractions import Fraction

from treediffpack.core import ABSENT, canonical_json, render_value, to_jsonable


def test_equivalent_inputs_canonicalize_to_same_json() -> None:
    left = {"b": [1, 2], "a": {"y": None, "x": True}}
    right = {"a": {"x": True, "y": None}, "b": (1, 2)}

    assert canonical_json(left) == canonical_json(right)
    assert canonical_json(left) == '{"a":{"x":true,"y":null},"b":[1,2]}'


def test_exact_numbers_render_as_json_numbers() -> None:
    assert to_jsonable(Decimal("2.00")) == 2
    assert to_jsonable(Decimal("1.50")) == 1.5
    assert to_jsonable(Fraction(4, 2)) == 2
    assert to_jsonable(Fraction(1, 4)) == 0.25
    assert canonical_json({"n": Decimal("3")}) == '{"n":3}'


def test_render_value_marks_absent() -> None:
    assert render_value(ABSENT) == "<absent>"
    assert render_value(None) == "null"
    assert render_value("Alice") == '"Alice"'
