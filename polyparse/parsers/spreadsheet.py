"""
XLSX parser for polyparse.

Reads one worksheet with ``pandas.read_excel`` (openpyxl engine) and
returns the same shapes as the CSV parser:
- headerless: ``list[list[value]]``;
- header mode: ``list[dict[header, value]]``.

Cell values keep the types openpyxl reports (str, int, float, datetime,
bool); empty cells become None. Unlike CSV, a worksheet's used range is
rectangular, so every row comes back as wide as the widest row. To keep
header binding meaningful:
- trailing empty cells are ignored, in the header and in data rows;
- short rows are padded with "" like CSV rows;
- a non-empty cell beyond the header width raises RowTooLongError, with
  the worksheet row number as the line.
"""

from __future__ import annotations

import io
import logging
from typing import Any

import pandas as pd

from polyparse.config import XlsxOptions
from polyparse.exceptions import MalformedInputError
from polyparse.parsers.base import BaseParser
from polyparse.transforms.rows import bind_header

logger = logging.getLogger(__name__)


def _read_sheet(data: bytes, sheet: int | str) -> list[list[Any]]:
    """Read a worksheet into rows of plain Python values (None for empty cells)."""
    try:
        df = pd.read_excel(
            io.BytesIO(data),
            sheet_name=sheet,
            header=None,
            dtype=object,
            engine="openpyxl",
        )
    except Exception as exc:
        raise MalformedInputError(f"Failed to read XLSX workbook: {exc}") from exc

    if df.empty:
        return []
    df = df.astype(object).where(df.notna(), None)
    return df.values.tolist()


def _trim_trailing_empty(row: list[Any]) -> list[Any]:
    end = len(row)
    while end and row[end - 1] in (None, ""):
        end -= 1
    return row[:end]


def parse_xlsx(data: bytes, has_header: bool = True, sheet: int | str = 0) -> list[Any]:
    """Parse one worksheet of an XLSX workbook.

    Args:
        data: Raw bytes of the ``.xlsx`` file.
        has_header: If True, the first row supplies the keys of each record.
        sheet: Zero-based sheet index or sheet name.

    Returns:
        Rows or records; an empty worksheet returns ``[]``.

    Raises:
        MalformedInputError: If the workbook cannot be read.
        RowTooLongError: If a data row has values beyond the header width.
    """
    options = XlsxOptions(has_header=has_header, sheet=sheet)
    rows = _read_sheet(data, options.sheet)
    logger.debug("Read %d worksheet row(s) from sheet %r", len(rows), options.sheet)

    if not options.has_header or not rows:
        return rows

    header = [
        "" if cell is None else str(cell)
        for cell in _trim_trailing_empty(rows[0])
    ]
    # Trailing empty cells are padding from the used range, not data:
    # dropping them lets short rows pad with "" and ignores empty overflow.
    body = [_trim_trailing_empty(row) for row in rows[1:]]
    return bind_header([header] + body)


class XlsxParser(BaseParser):
    """Parser for XLSX workbooks (binary input)."""

    binary = True

    def parse(self, content: bytes, has_header: bool = True, sheet: int | str = 0) -> list[Any]:
        return parse_xlsx(content, has_header=has_header, sheet=sheet)
