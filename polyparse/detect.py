"""
Format detection and parser dispatch for polyparse.

Design: closed set of formats + static dispatch table
- ``Format`` enumerates every supported format; nothing is looked up by
  class name at runtime.
- detect_format() maps a filename extension to a ``Format``.
- get_parser() maps a ``Format`` to its parser instance.

Extension table:
  .yaml / .yml -> YAML      .json -> JSON      .ini -> INI
  .csv -> CSV               .tsv / .tab -> TSV .xlsx -> XLSX
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from polyparse.exceptions import UnsupportedFormatError
from polyparse.parsers.base import BaseParser

logger = logging.getLogger(__name__)


class Format(str, Enum):
    """Supported input formats."""

    YAML = "yaml"
    JSON = "json"
    INI = "ini"
    CSV = "csv"
    TSV = "tsv"
    XLSX = "xlsx"

    @classmethod
    def coerce(cls, value: Format | str) -> Format:
        """Accept a ``Format`` or its case-insensitive name / alias."""
        if isinstance(value, Format):
            return value
        name = str(value).strip().lower().lstrip(".")
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedFormatError(
                str(value),
                f"Unsupported format: '{value}'. "
                f"Supported formats: {[f.value for f in cls]}",
            ) from None


_ALIASES = {"yml": "yaml", "tab": "tsv"}

# Formats accepted by load_config()
CONFIG_FORMATS = frozenset({Format.YAML, Format.JSON, Format.INI})

# Maps Format to parser instance
_PARSER_MAP: dict[Format, BaseParser] = {}


def _get_parser_map() -> dict[Format, BaseParser]:
    """Lazily build the parser map so importing detect stays cheap."""
    if not _PARSER_MAP:
        from polyparse.parsers.delimited import CsvParser, TsvParser
        from polyparse.parsers.document import JsonParser, YamlParser
        from polyparse.parsers.ini import IniParser
        from polyparse.parsers.spreadsheet import XlsxParser

        _PARSER_MAP[Format.YAML] = YamlParser()
        _PARSER_MAP[Format.JSON] = JsonParser()
        _PARSER_MAP[Format.INI] = IniParser()
        _PARSER_MAP[Format.CSV] = CsvParser()
        _PARSER_MAP[Format.TSV] = TsvParser()
        _PARSER_MAP[Format.XLSX] = XlsxParser()
    return _PARSER_MAP


def get_parser(fmt: Format | str) -> BaseParser:
    """Return the parser registered for *fmt*.

    Raises:
        UnsupportedFormatError: If *fmt* is not a supported format name.
    """
    return _get_parser_map()[Format.coerce(fmt)]


def detect_format(path: str | Path) -> Format:
    """Determine the format of a file from its extension.

    Args:
        path: File path; only the suffix is inspected.

    Returns:
        The matching ``Format``.

    Raises:
        UnsupportedFormatError: If the extension is missing or unknown.
    """
    suffix = Path(path).suffix.lower()
    if not suffix:
        raise UnsupportedFormatError(
            "",
            f"Cannot detect format of '{path}': the file has no extension.",
        )
    try:
        fmt = Format.coerce(suffix)
    except UnsupportedFormatError:
        raise UnsupportedFormatError(
            suffix,
            f"Unsupported file type '{suffix}' for '{path}'. "
            f"Supported formats: {[f.value for f in Format]}",
        ) from None
    logger.debug("Detected format '%s' for %s", fmt.value, path)
    return fmt
