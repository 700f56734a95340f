"""Diff subsystem for treediff."""

from treediffpack.diff.assertion import (
    AssertionResult,
    TreeMismatchError,
    assert_trees,
    assert_trees_equal,
)
from treediffpack.diff.engine import DiffOptions, deep_diff, diff_values
from treediffpack.diff.formatting import (
    render_diff_summary,
    render_difference,
    render_differences,
)
from treediffpack.diff.models import (
    DIFFERENCE_STATUSES,
    Difference,
    DifferenceStatus,
    DiffResult,
)
from treediffpack.diff.paths import PathSegment, join_index, join_key, render_path

__all__ = [
    "Difference",
    "DifferenceStatus",
    "DIFFERENCE_STATUSES",
    "DiffResult",
    "DiffOptions",
    "deep_diff",
    "diff_values",
    "PathSegment",
    "join_key",
    "join_index",
    "render_path",
    "AssertionResult",
    "TreeMismatchError",
    "assert_trees",
    "assert_trees_equal",
    "render_diff_summary",
    "render_difference",
    "render_differences",
]
