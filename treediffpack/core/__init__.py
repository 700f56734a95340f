"""Core value model and deterministic primitives for tree diffing."""

from treediffpack.core.canonical import canonical_json, render_value, to_jsonable
from treediffpack.core.exceptions import (
    DiffConfigError,
    DiffDepthError,
    DocumentError,
    TreeDiffError,
    UnsupportedValueError,
)
from treediffpack.core.types import (
    ABSENT,
    LEAF_KINDS,
    VALUE_KINDS,
    Absent,
    ValueKind,
    is_absent,
    kind_of,
    numbers_equal,
)

__all__ = [
    "ABSENT",
    "Absent",
    "LEAF_KINDS",
    "VALUE_KINDS",
    "ValueKind",
    "is_absent",
    "kind_of",
    "numbers_equal",
    "canonical_json",
    "render_value",
    "to_jsonable",
    "TreeDiffError",
    "UnsupportedValueError",
    "DiffDepthError",
    "DiffConfigError",
    "DocumentError",
]
