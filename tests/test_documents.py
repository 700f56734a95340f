from decimal import Decimal
from pathlib import Path

import pytest

from treediffpack.core import DocumentError
from treediffpack.documents import load_document


def test_load_document_parses_json(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text('{"a": [1, 2.5, null], "b": "x"}', encoding="utf-8")

    assert load_document(path) == {"a": [1, 2.5, None], "b": "x"}


def test_load_document_can_keep_decimal_precision(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text('{"price": 1.50}', encoding="utf-8")

    tree = load_document(path, decimal_numbers=True)

    assert tree["price"] == Decimal("1.50")
    assert isinstance(tree["price"], Decimal)


def test_load_document_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DocumentError, match="not found"):
        load_document(tmp_path / "missing.json")


def test_load_document_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DocumentError, match="not valid JSON"):
        load_document(path)


def test_load_document_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_bytes(b"\xff\xfe\x00")

    with pytest.raises(DocumentError, match="UTF-8"):
        load_document(path)
