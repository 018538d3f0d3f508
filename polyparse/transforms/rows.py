"""
Row/Field Splitter and Header Binder for delimited text.

Works on text already processed by ``encode_enclosures()``: every
remaining ``\\n`` is a row break and every remaining delimiter is a
field break, so splitting is plain ``str.split``.

Header binding turns ``[["a", "b"], ["1", "2"]]`` into
``[{"a": "1", "b": "2"}]``:
- short rows are padded so every record has every header key;
- long rows are rejected with RowTooLongError (line numbers are 1-based
  with the header on line 1);
- duplicate header names keep the position of their first occurrence
  and the value of their last, like any dict built from pairs.
"""

from __future__ import annotations

import logging
from typing import Any

from polyparse.exceptions import RowTooLongError
from polyparse.transforms.enclosures import decode_markers

logger = logging.getLogger(__name__)


def split_rows(encoded: str) -> list[str]:
    """Split encoded text into raw row strings.

    Trailing newlines are dropped, so a final line break does not yield an
    empty row. Empty text yields no rows at all.
    """
    body = encoded.rstrip("\n")
    if not body:
        return []
    return body.split("\n")


def split_fields(line: str, delimiter: str, enclosure: str) -> list[str]:
    """Split one encoded row on *delimiter* and restore markers in each field."""
    return [decode_markers(field, delimiter, enclosure) for field in line.split(delimiter)]


def bind_header(rows: list[list[Any]], fill: Any = "") -> list[dict[Any, Any]]:
    """Use the first row as keys for every following row.

    Args:
        rows: Split rows; the first one is the header.
        fill: Value used to pad rows shorter than the header.

    Returns:
        One dict per data row, keys in header order. Empty when *rows*
        is empty or holds only the header.

    Raises:
        RowTooLongError: If a data row has more fields than the header.
    """
    if not rows:
        return []

    header = rows[0]
    width = len(header)
    if len(set(header)) != width:
        logger.warning("Header row has duplicate names; later columns win: %s", header)

    records: list[dict[Any, Any]] = []
    for idx, row in enumerate(rows[1:]):
        if len(row) > width:
            raise RowTooLongError(line=idx + 2, row=row)
        padded = list(row) + [fill] * (width - len(row))
        records.append(dict(zip(header, padded)))

    return records
