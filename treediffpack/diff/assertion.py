"""Assertion helpers for test suites and CI checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from treediffpack.diff.engine import DiffOptions, diff_values
from treediffpack.diff.formatting import render_differences
from treediffpack.diff.models import DiffResult


class TreeMismatchError(AssertionError):
    """Raised when two trees expected to be equal are not."""

    def __init__(self, result: DiffResult, *, max_changes: int = 8) -> None:
        self.result = result
        super().__init__(
            f"trees differ at {len(result)} path(s)\n"
            + render_differences(result, max_changes=max_changes)
        )


@dataclass(slots=True)
class AssertionResult:
    """Outcome of an expected vs actual tree comparison."""

    diff: DiffResult
    passed: bool

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> dict[str, Any]:
        first_divergence = self.diff.first_divergence
        return {
            "status": "pass" if self.passed else "fail",
            "exit_code": self.exit_code,
            "total_differences": len(self.diff),
            "truncated": self.diff.truncated,
            "summary": self.diff.summary(),
            "first_divergence": (
                first_divergence.to_dict() if first_divergence is not None else None
            ),
        }


def assert_trees(
    expected: Any,
    actual: Any,
    *,
    options: DiffOptions | None = None,
) -> AssertionResult:
    """Compare expected vs actual and return the assertion outcome."""
    diff = diff_values(expected, actual, options=options)
    return AssertionResult(diff=diff, passed=diff.identical)


def assert_trees_equal(expected: Any, actual: Any, *, max_changes: int = 8) -> None:
    """Raise ``TreeMismatchError`` listing differences when the trees differ."""
    result = assert_trees(expected, actual)
    if not result.passed:
        raise TreeMismatchError(result.diff, max_changes=max_changes)
