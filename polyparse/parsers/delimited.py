"""
CSV / TSV parser for polyparse.

Hand-rolled instead of built on the ``csv`` module so the behaviour for
enclosures, embedded line breaks and mixed line endings is exactly the
one described below, independent of ``csv.Dialect`` quirks.

Pipeline:
  1. encode_enclosures(): strip enclosures, hide enclosed delimiters /
     line breaks / escaped enclosures behind marker tokens, normalize
     line endings outside enclosures.
  2. split_rows(): split on ``\\n`` (trailing line breaks dropped).
  3. split_fields(): split on the delimiter and decode markers.
  4. bind_header(): optional -- zip the first row with each data row.

Example::

    >>> parse_csv('some,"text,with",comma', has_header=False)
    [['some', 'text,with', 'comma']]
    >>> parse_csv("a,b,c\\nd,e,f\\ng")
    [{'a': 'd', 'b': 'e', 'c': 'f'}, {'a': 'g', 'b': '', 'c': ''}]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from polyparse.config import CsvDialect
from polyparse.parsers.base import BaseParser
from polyparse.transforms.enclosures import encode_enclosures
from polyparse.transforms.line_endings import CR, LF, detect_line_ending
from polyparse.transforms.rows import bind_header, split_fields, split_rows

logger = logging.getLogger(__name__)


def parse_csv(
    text: str,
    has_header: bool = True,
    delimiter: str = ",",
    enclosure: str = '"',
) -> list[Any]:
    """Parse delimited text into rows or header-keyed records.

    Args:
        text: Raw CSV text in any line-ending style.
        has_header: If True, the first row supplies the keys of each record.
        delimiter: Single-character field separator.
        enclosure: Single-character field wrapper.

    Returns:
        ``list[dict[str, str]]`` in header mode, otherwise
        ``list[list[str]]``. Empty text returns ``[]``.

    Raises:
        MalformedInputError: If an enclosure is never closed.
        RowTooLongError: If a data row has more fields than the header.
        pydantic.ValidationError: If the dialect options are invalid.
    """
    dialect = CsvDialect(delimiter=delimiter, enclosure=enclosure, has_header=has_header)

    encoded = encode_enclosures(text, dialect.delimiter, dialect.enclosure)
    rows = [
        split_fields(line, dialect.delimiter, dialect.enclosure)
        for line in split_rows(encoded)
    ]
    logger.debug(
        "Split %d row(s) (delimiter=%r, line ending=%r)",
        len(rows), dialect.delimiter, detect_line_ending(text),
    )

    if dialect.has_header:
        return bind_header(rows)
    return rows


def format_csv(
    rows: Sequence[Sequence[Any]] | Sequence[Mapping[str, Any]],
    delimiter: str = ",",
    enclosure: str = '"',
    line_ending: str = LF,
) -> str:
    """Serialize rows (or header-keyed records) back to delimited text.

    Records (mappings) are written with a header row taken from the
    keys of the first record. Fields containing the delimiter, the
    enclosure or a line break are enclosed, with inner enclosures doubled,
    so ``parse_csv(format_csv(rows))`` reproduces *rows*.

    Args:
        rows: Output of ``parse_csv`` in either mode.
        delimiter: Single-character field separator.
        enclosure: Single-character field wrapper.
        line_ending: Row terminator written after every row.

    Returns:
        The serialized text (empty string for no rows).
    """
    dialect = CsvDialect(delimiter=delimiter, enclosure=enclosure)
    if not rows:
        return ""

    if isinstance(rows[0], Mapping):
        header = list(rows[0].keys())
        table: list[Sequence[Any]] = [header]
        table.extend([record.get(key, "") for key in header] for record in rows)
    else:
        table = list(rows)

    lines = [
        dialect.delimiter.join(_quote(str(value), dialect) for value in row)
        for row in table
    ]
    return "".join(line + line_ending for line in lines)


def _quote(value: str, dialect: CsvDialect) -> str:
    special = (dialect.delimiter, dialect.enclosure, CR, LF)
    if not any(char in value for char in special):
        return value
    escaped = value.replace(dialect.enclosure, dialect.enclosure * 2)
    return f"{dialect.enclosure}{escaped}{dialect.enclosure}"


class CsvParser(BaseParser):
    """Parser for comma-separated text."""

    default_delimiter = ","

    def parse(
        self,
        content: str,
        has_header: bool = True,
        delimiter: str | None = None,
        enclosure: str = '"',
    ) -> list[Any]:
        return parse_csv(
            content,
            has_header=has_header,
            delimiter=self.default_delimiter if delimiter is None else delimiter,
            enclosure=enclosure,
        )


class TsvParser(CsvParser):
    """Parser for tab-separated text."""

    default_delimiter = "\t"
