"""
polyparse: one entry point for YAML, JSON, INI, CSV/TSV and XLSX files.

Public API surface:

- ``load(source, format=None, is_string=False, as_object=False, **options)``
  -- **recommended entry point**. Reads a file (or takes a literal string),
  picks the parser from the extension or the explicit *format*, and
  returns plain nested data.

- ``load_config(filename)`` -- like ``load()`` but restricted to
  configuration formats (YAML, JSON, INI).

- ``load_csv`` / ``load_tsv`` / ``load_yaml`` / ``load_json`` /
  ``load_ini`` / ``load_xlsx`` -- per-format shortcuts with the same
  ``is_string`` and ``as_object`` switches.

- ``to_object(data)`` -- shallow conversion of a result into a
  ``types.SimpleNamespace`` (what ``as_object=True`` returns).

- Pure text-level functions: ``parse_csv``, ``format_csv``,
  ``parse_ini``, ``parse_ini_flat``, ``unnest``, ``parse_json``,
  ``parse_yaml``, ``parse_xlsx``, ``detect_line_ending``.

All failures are raised as subclasses of ``PolyparseError``; invalid
option values additionally surface as ``pydantic.ValidationError``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any

from polyparse.detect import CONFIG_FORMATS, Format, detect_format, get_parser
from polyparse.exceptions import (
    MalformedInputError,
    PolyparseError,
    RowTooLongError,
    SourceReadError,
    StructureConflictError,
    UnsupportedFormatError,
    UnsupportedOptionError,
)
from polyparse.parsers.base import ParsedData
from polyparse.parsers.delimited import format_csv, parse_csv
from polyparse.parsers.document import parse_json, parse_yaml
from polyparse.parsers.ini import parse_ini, parse_ini_flat
from polyparse.parsers.spreadsheet import parse_xlsx
from polyparse.reader import read_bytes, read_text
from polyparse.transforms.line_endings import detect_line_ending
from polyparse.transforms.nesting import unnest

__all__ = [
    "load",
    "load_config",
    "load_csv",
    "load_tsv",
    "load_yaml",
    "load_json",
    "load_ini",
    "load_xlsx",
    "to_object",
    "parse_csv",
    "format_csv",
    "parse_ini",
    "parse_ini_flat",
    "unnest",
    "parse_json",
    "parse_yaml",
    "parse_xlsx",
    "detect_line_ending",
    "Format",
    "PolyparseError",
    "MalformedInputError",
    "RowTooLongError",
    "StructureConflictError",
    "UnsupportedFormatError",
    "UnsupportedOptionError",
    "SourceReadError",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load(
    source: str | bytes | Path,
    format: Format | str | None = None,
    *,
    is_string: bool = False,
    as_object: bool = False,
    **options: Any,
) -> ParsedData | SimpleNamespace:
    """Parse a file or a literal string into nested data.

    Args:
        source: Path of the file to parse, or the content itself when
            *is_string* is True (``bytes`` for XLSX).
        format: ``Format`` member or name (``"csv"``, ``"yml"``, ...).
            Detected from the file extension when omitted; required for
            string input.
        is_string: Treat *source* as content instead of a path.
        as_object: Return the result through ``to_object()``.
        **options: Parser options; they must match the format:
            ``has_header``, ``delimiter``, ``enclosure`` for CSV/TSV,
            ``has_header`` and ``sheet`` for XLSX, none for YAML / JSON /
            INI.

    Returns:
        A dict for YAML / JSON / INI, a list of rows or records for
        CSV / TSV / XLSX, or a ``SimpleNamespace`` when *as_object*.

    Raises:
        UnsupportedFormatError: If the format is unknown or cannot be
            determined.
        UnsupportedOptionError: If an option does not apply to the format.
        SourceReadError: If the file cannot be read.
        MalformedInputError: If the content cannot be parsed.
        RowTooLongError: If a tabular data row is wider than its header.
        StructureConflictError: If INI dotted keys contradict each other.

    Examples::

        data = polyparse.load("settings.yaml")
        rows = polyparse.load("people.csv", delimiter=";")
        rows = polyparse.load("a,b\\n1,2", "csv", is_string=True)
        cfg = polyparse.load("settings.ini", as_object=True)
    """
    if format is None:
        if is_string:
            raise UnsupportedFormatError(
                "", "A format must be given when parsing a literal string."
            )
        fmt = detect_format(source)
    else:
        fmt = Format.coerce(format)

    parser = get_parser(fmt)
    accepted = parser.accepted_options()
    unknown = set(options) - accepted
    if unknown:
        raise UnsupportedOptionError(fmt.value, list(unknown), list(accepted))

    if is_string:
        content = source
        logger.debug("load() -- parsing %s string (%d chars)", fmt.value, len(source))
    else:
        logger.info("load() -- parsing %s as %s", source, fmt.value)
        content = read_bytes(source) if parser.binary else read_text(source)

    data = parser.parse(content, **options)
    return to_object(data) if as_object else data


def to_object(data: ParsedData) -> SimpleNamespace:
    """Expose the top level of a parse result as attributes.

    The conversion is shallow: nested values stay dicts and lists.
    Mapping keys become attribute names as strings; list results are
    keyed by their index (``getattr(obj, "0")``).

    Example::

        >>> to_object({"zero": {"id": "0001"}}).zero
        {'id': '0001'}
    """
    items = data.items() if isinstance(data, dict) else enumerate(data)
    return SimpleNamespace(**{str(key): value for key, value in items})


def load_config(
    filename: str | Path, *, as_object: bool = False
) -> ParsedData | SimpleNamespace:
    """Parse a configuration file (YAML, JSON or INI) chosen by extension.

    Raises:
        UnsupportedFormatError: If the extension is not a config format.
        SourceReadError: If the file cannot be read.
        MalformedInputError: If the content cannot be parsed.
    """
    try:
        fmt = detect_format(filename)
    except UnsupportedFormatError:
        fmt = None

    if fmt not in CONFIG_FORMATS:
        raise UnsupportedFormatError(
            Path(filename).suffix,
            f"The given config file '{filename}' is of an unsupported file "
            "type (supported: YAML, JSON, INI).",
        )

    return load(filename, fmt, as_object=as_object)


def load_csv(
    source: str | Path,
    is_string: bool = False,
    has_header: bool = True,
    delimiter: str = ",",
    enclosure: str = '"',
    *,
    as_object: bool = False,
) -> list[Any] | SimpleNamespace:
    """Parse CSV from a file or string. See ``parse_csv`` for details."""
    return load(
        source, Format.CSV, is_string=is_string, as_object=as_object,
        has_header=has_header, delimiter=delimiter, enclosure=enclosure,
    )


def load_tsv(
    source: str | Path,
    is_string: bool = False,
    has_header: bool = True,
    enclosure: str = '"',
    *,
    as_object: bool = False,
) -> list[Any] | SimpleNamespace:
    """Parse tab-separated values from a file or string."""
    return load(
        source, Format.TSV, is_string=is_string, as_object=as_object,
        has_header=has_header, enclosure=enclosure,
    )


def load_yaml(
    source: str | Path, is_string: bool = False, *, as_object: bool = False
) -> ParsedData | SimpleNamespace:
    """Parse YAML from a file or string."""
    return load(source, Format.YAML, is_string=is_string, as_object=as_object)


def load_json(
    source: str | Path, is_string: bool = False, *, as_object: bool = False
) -> ParsedData | SimpleNamespace:
    """Parse JSON from a file or string."""
    return load(source, Format.JSON, is_string=is_string, as_object=as_object)


def load_ini(
    source: str | Path, is_string: bool = False, *, as_object: bool = False
) -> dict[str, Any] | SimpleNamespace:
    """Parse INI from a file or string, expanding dotted keys."""
    return load(source, Format.INI, is_string=is_string, as_object=as_object)


def load_xlsx(
    source: str | bytes | Path,
    is_string: bool = False,
    has_header: bool = True,
    sheet: int | str = 0,
    *,
    as_object: bool = False,
) -> list[Any] | SimpleNamespace:
    """Parse an XLSX worksheet from a file, or from raw bytes with *is_string*."""
    return load(
        source, Format.XLSX, is_string=is_string, as_object=as_object,
        has_header=has_header, sheet=sheet,
    )
