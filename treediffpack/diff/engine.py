"""Recursive tree diff engine.

Both trees are walked in lock-step, depth-first and pre-order. A kind
mismatch is reported at the node where it is found and its children are not
compared. Arrays are compared by position; objects by key, enumerating the
keys of the left tree in its order and then the keys only present in the
right tree in their order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from treediffpack.core.exceptions import DiffConfigError, DiffDepthError
from treediffpack.core.types import ABSENT, LEAF_KINDS, kind_of, numbers_equal
from treediffpack.diff.models import Difference, DiffResult
from treediffpack.diff.paths import ROOT_PATH, PathSegment, join_index, join_key


@dataclass(frozen=True, slots=True)
class DiffOptions:
    """Configuration for a tree diff.

    ``max_depth`` bounds how many nested arrays/objects may be entered.
    ``max_differences`` caps how many differences are collected; the result
    is marked truncated only when a further difference had to be dropped.
    """

    max_depth: int | None = None
    max_differences: int | None = None

    def __post_init__(self) -> None:
        _validate_limit("max_depth", self.max_depth)
        _validate_limit("max_differences", self.max_differences)

    def to_dict(self) -> dict[str, int | None]:
        return {
            "max_depth": self.max_depth,
            "max_differences": self.max_differences,
        }


def _validate_limit(name: str, value: int | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise DiffConfigError(f"{name} must be an integer or None")
    if value < 1:
        raise DiffConfigError(f"{name} must be >= 1")


def deep_diff(left: Any, right: Any) -> list[Difference]:
    """Return every difference between two JSON-like trees.

    The result is empty if and only if the trees are equal. Inputs are not
    modified.
    """
    return diff_values(left, right).differences


def diff_values(
    left: Any,
    right: Any,
    *,
    options: DiffOptions | None = None,
) -> DiffResult:
    """Diff two trees and return a structured result.

    Args:
        left: Tree before the change.
        right: Tree after the change.
        options: Optional depth and size limits.

    Returns:
        Differences in traversal order. ``truncated`` is set when a difference
        beyond ``options.max_differences`` was dropped.

    Raises:
        UnsupportedValueError: A tree holds a non JSON-like value.
        DiffDepthError: Nesting exceeded ``options.max_depth``.
    """
    resolved = options or DiffOptions()
    differences: list[Difference] = []
    truncated = _collect(
        left,
        right,
        path=ROOT_PATH,
        segments=(),
        depth=0,
        out=differences,
        options=resolved,
    )
    return DiffResult(differences=differences, truncated=truncated)


def _collect(
    left: Any,
    right: Any,
    *,
    path: str,
    segments: tuple[PathSegment, ...],
    depth: int,
    out: list[Difference],
    options: DiffOptions,
) -> bool:
    left_kind = kind_of(left, path=path)
    right_kind = kind_of(right, path=path)

    if left_kind != right_kind:
        return _emit(out, options, path=path, segments=segments, before=left, after=right)

    if left_kind in LEAF_KINDS:
        if _leaves_equal(left_kind, left, right):
            return False
        return _emit(out, options, path=path, segments=segments, before=left, after=right)

    if options.max_depth is not None and depth >= options.max_depth:
        raise DiffDepthError(path=path, max_depth=options.max_depth)

    if left_kind == "array":
        return _collect_array(
            left,
            right,
            path=path,
            segments=segments,
            depth=depth,
            out=out,
            options=options,
        )

    return _collect_object(
        left,
        right,
        path=path,
        segments=segments,
        depth=depth,
        out=out,
        options=options,
    )


def _collect_array(
    left: Any,
    right: Any,
    *,
    path: str,
    segments: tuple[PathSegment, ...],
    depth: int,
    out: list[Difference],
    options: DiffOptions,
) -> bool:
    for idx in range(max(len(left), len(right))):
        child_path = join_index(path, idx)
        child_segments = segments + (idx,)

        if idx >= len(left):
            stopped = _emit(
                out,
                options,
                path=child_path,
                segments=child_segments,
                before=ABSENT,
                after=right[idx],
            )
        elif idx >= len(right):
            stopped = _emit(
                out,
                options,
                path=child_path,
                segments=child_segments,
                before=left[idx],
                after=ABSENT,
            )
        else:
            stopped = _collect(
                left[idx],
                right[idx],
                path=child_path,
                segments=child_segments,
                depth=depth + 1,
                out=out,
                options=options,
            )

        if stopped:
            return True
    return False


def _collect_object(
    left: Any,
    right: Any,
    *,
    path: str,
    segments: tuple[PathSegment, ...],
    depth: int,
    out: list[Difference],
    options: DiffOptions,
) -> bool:
    keys = list(left.keys())
    keys.extend(key for key in right.keys() if key not in left)

    for key in keys:
        child_path = join_key(path, key)
        child_segments = segments + (str(key),)

        if key not in left:
            stopped = _emit(
                out,
                options,
                path=child_path,
                segments=child_segments,
                before=ABSENT,
                after=right[key],
            )
        elif key not in right:
            stopped = _emit(
                out,
                options,
                path=child_path,
                segments=child_segments,
                before=left[key],
                after=ABSENT,
            )
        else:
            stopped = _collect(
                left[key],
                right[key],
                path=child_path,
                segments=child_segments,
                depth=depth + 1,
                out=out,
                options=options,
            )

        if stopped:
            return True
    return False


def _leaves_equal(kind: str, left: Any, right: Any) -> bool:
    if kind == "null":
        return True
    if kind == "number":
        return numbers_equal(left, right)
    return left == right


def _emit(
    out: list[Difference],
    options: DiffOptions,
    *,
    path: str,
    segments: tuple[PathSegment, ...],
    before: Any,
    after: Any,
) -> bool:
    if options.max_differences is not None and len(out) >= options.max_differences:
        return True
    out.append(Difference(path=path, before=before, after=after, segments=segments))
    return False
