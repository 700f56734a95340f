"""Tree diff exceptions."""

from __future__ import annotations

from typing import Any


class TreeDiffError(Exception):
    """Base class for tree diff errors."""


class UnsupportedValueError(TreeDiffError, TypeError):
    """Input tree contains a value that is not JSON-like."""

    def __init__(self, value: Any, *, path: str = "") -> None:
        self.value = value
        self.path = path
        location = path or "$"
        super().__init__(
            f"Unsupported value type at {location}: {type(value).__name__}"
        )


class DiffDepthError(TreeDiffError):
    """Input tree nesting exceeded the configured max_depth."""

    def __init__(self, *, path: str, max_depth: int) -> None:
        self.path = path
        self.max_depth = max_depth
        super().__init__(f"max_depth={max_depth} exceeded at {path or '$'}")


class DiffConfigError(TreeDiffError, ValueError):
    """Invalid diff configuration."""


class DocumentError(TreeDiffError):
    """Document could not be read or parsed as JSON."""
