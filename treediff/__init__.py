"""Stable public API surface for treediff.

This module is the supported import path for library users.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from treediffpack.core import ABSENT, TreeDiffError
from treediffpack.diff import (
    AssertionResult,
    Difference,
    DiffOptions,
    DiffResult,
    TreeMismatchError,
    assert_trees,
    assert_trees_equal,
    deep_diff,
    diff_values,
)
from treediffpack.documents import load_document

__version__ = "0.1.0"


def compare(
    left: Any,
    right: Any,
    *,
    max_depth: int | None = None,
    max_differences: int | None = None,
) -> DiffResult:
    """Diff two in-memory trees and return structured comparison data.

    Args:
        left: Tree before the change.
        right: Tree after the change.
        max_depth: Maximum nested arrays/objects to descend into.
        max_differences: Stop collecting after this many differences.

    Returns:
        Structured diff result.
    """
    return diff_values(
        left,
        right,
        options=DiffOptions(max_depth=max_depth, max_differences=max_differences),
    )


def compare_files(
    left: str | Path,
    right: str | Path,
    *,
    max_depth: int | None = None,
    max_differences: int | None = None,
    decimal_numbers: bool = False,
) -> DiffResult:
    """Diff two JSON documents on disk.

    Args:
        left: Left document path.
        right: Right document path.
        max_depth: Maximum nested arrays/objects to descend into.
        max_differences: Stop collecting after this many differences.
        decimal_numbers: Parse fractional numbers as ``Decimal``.

    Returns:
        Structured diff result.
    """
    return compare(
        load_document(left, decimal_numbers=decimal_numbers),
        load_document(right, decimal_numbers=decimal_numbers),
        max_depth=max_depth,
        max_differences=max_differences,
    )


__all__ = [
    "__version__",
    "ABSENT",
    "Difference",
    "DiffResult",
    "DiffOptions",
    "AssertionResult",
    "TreeDiffError",
    "TreeMismatchError",
    "deep_diff",
    "compare",
    "compare_files",
    "assert_trees",
    "assert_trees_equal",
]
