"""JSON document loading for file-based diffs."""

from __future__ import annotations

from decimal import Decimal
import json
from pathlib import Path
from typing import Any

from treediffpack.core.exceptions import DocumentError


def load_document(path: str | Path, *, decimal_numbers: bool = False) -> Any:
    """Read a JSON document into a tree of plain Python values.

    With ``decimal_numbers`` fractional numbers are parsed as ``Decimal`` so
    the literal precision of the file is kept.
    """
    target = Path(path)
    try:
        raw_text = target.read_text(encoding="utf-8")
    except FileNotFoundError as error:
        raise DocumentError(f"Document not found: {target}") from error
    except UnicodeDecodeError as error:
        raise DocumentError(f"Document is not valid UTF-8 text: {target}") from error
    except OSError as error:
        raise DocumentError(f"Document could not be read: {target} ({error})") from error

    try:
        return json.loads(raw_text, parse_float=Decimal if decimal_numbers else None)
    except json.JSONDecodeError as error:
        raise DocumentError(f"Document is not valid JSON: {target} ({error})") from error
