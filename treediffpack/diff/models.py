"""Data models for tree differences."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Literal

from treediffpack.core.canonical import to_jsonable
from treediffpack.core.types import ABSENT, kind_of
from treediffpack.diff.paths import PathSegment

DifferenceStatus = Literal["added", "removed", "type_changed", "changed"]

DIFFERENCE_STATUSES: tuple[str, ...] = (
    "added",
    "removed",
    "type_changed",
    "changed",
)


@dataclass(frozen=True, slots=True)
class Difference:
    """A single divergence between two trees at a rendered path.

    ``before`` or ``after`` is ``ABSENT`` when the path exists on one side only.
    """

    path: str
    before: Any
    after: Any
    segments: tuple[PathSegment, ...] = ()

    @property
    def status(self) -> DifferenceStatus:
        if self.before is ABSENT:
            return "added"
        if self.after is ABSENT:
            return "removed"
        if kind_of(self.before) != kind_of(self.after):
            return "type_changed"
        return "changed"

    def swapped(self) -> "Difference":
        """Return the same divergence as seen from the other side."""
        return Difference(
            path=self.path,
            before=self.after,
            after=self.before,
            segments=self.segments,
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "path": self.path,
            "segments": list(self.segments),
            "status": self.status,
        }
        if self.before is not ABSENT:
            payload["before"] = to_jsonable(self.before)
        if self.after is not ABSENT:
            payload["after"] = to_jsonable(self.after)
        return payload


@dataclass(slots=True)
class DiffResult:
    """Ordered differences between two trees, in traversal order."""

    differences: list[Difference] = field(default_factory=list)
    truncated: bool = False

    def __len__(self) -> int:
        return len(self.differences)

    def __iter__(self) -> Iterator[Difference]:
        return iter(self.differences)

    @property
    def identical(self) -> bool:
        return not self.differences

    @property
    def first_divergence(self) -> Difference | None:
        if self.differences:
            return self.differences[0]
        return None

    def paths(self) -> list[str]:
        return [difference.path for difference in self.differences]

    def summary(self) -> dict[str, int]:
        counts = {status: 0 for status in DIFFERENCE_STATUSES}
        for difference in self.differences:
            counts[difference.status] += 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        return {
            "identical": self.identical,
            "truncated": self.truncated,
            "total_differences": len(self.differences),
            "summary": self.summary(),
            "first_divergence": (
                self.first_divergence.to_dict() if self.first_divergence is not None else None
            ),
            "differences": [difference.to_dict() for difference in self.differences],
        }
