"""CLI-friendly rendering for diff results."""

from __future__ import annotations

from treediffpack.core.canonical import render_value
from treediffpack.diff.models import Difference, DiffResult


def render_diff_summary(result: DiffResult) -> str:
    summary = result.summary()
    return (
        f"identical={str(result.identical).lower()} differences={len(result)} "
        f"changed={summary['changed']} type_changed={summary['type_changed']} "
        f"added={summary['added']} removed={summary['removed']}"
    )


def render_difference(difference: Difference) -> str:
    location = difference.path or "$"
    return (
        f"{location}: {render_value(difference.before)} -> "
        f"{render_value(difference.after)} [{difference.status}]"
    )


def render_differences(result: DiffResult, *, max_changes: int = 8) -> str:
    if result.identical:
        return "no differences"

    limit = max(1, max_changes)
    lines = ["differences:"]
    for difference in result.differences[:limit]:
        lines.append(f"  {render_difference(difference)}")

    remaining = len(result) - limit
    if remaining > 0:
        lines.append(f"  ... {remaining} additional difference(s) not shown")
    if result.truncated:
        lines.append("  ... collection stopped at max_differences")

    return "\n".join(lines)
