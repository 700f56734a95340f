"""Path rendering for difference locations.

Object keys are joined with ``.``; array indexes are appended as ``[i]``
with no separator. The root is the empty string, so the first key has no
leading dot: ``items[2].name``, ``[0].id``.
"""

from __future__ import annotations

from collections.abc import Iterable

PathSegment = str | int

ROOT_PATH = ""


def join_key(path: str, key: object) -> str:
    if not path:
        return str(key)
    return f"{path}.{key}"


def join_index(path: str, index: int) -> str:
    return f"{path}[{index}]"


def render_path(segments: Iterable[PathSegment]) -> str:
    path = ROOT_PATH
    for segment in segments:
        # bool is never an index; keys are always strings in JSON objects.
        if isinstance(segment, int) and not isinstance(segment, bool):
            path = join_index(path, segment)
        else:
            path = join_key(path, segment)
    return path
