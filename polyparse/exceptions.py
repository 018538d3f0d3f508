"""
Custom exception hierarchy for polyparse.

Why a custom hierarchy:
- Callers can catch specific failures (e.g., RowTooLongError vs
  UnsupportedFormatError) without relying on generic ValueError/OSError.
- Each error carries the context needed to locate the problem (line
  number, raw snippet, dotted path) so the parse does not have to be
  re-run to debug it.
"""

from __future__ import annotations

from typing import Any


class PolyparseError(Exception):
    """Base exception for all polyparse errors."""


class MalformedInputError(PolyparseError):
    """Raised when input text does not match the expected grammar.

    Typical causes: an unterminated CSV enclosure, invalid INI syntax,
    or a JSON/YAML document that cannot be decoded.

    Attributes:
        line: 1-based line number of the offending construct, if known.
        snippet: A short excerpt of the raw input around the problem.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        snippet: str | None = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.snippet = snippet


class RowTooLongError(PolyparseError):
    """Raised when a data row has more fields than the header row.

    Attributes:
        line: 1-based logical line number (the header is line 1).
        row: The raw field values of the offending row.
    """

    def __init__(self, line: int, row: list[Any]) -> None:
        self.line = line
        self.row = list(row)
        super().__init__(
            f"The row of data on line {line} has more fields than the "
            f"header. Data: {self.row!r}"
        )


class StructureConflictError(PolyparseError):
    """Raised when dotted keys disagree about the shape at a shared path.

    For example ``a = 1`` together with ``a.b = 2``: ``a`` cannot be
    both a scalar and a mapping.

    Attributes:
        path: The dotted path where the conflict was found.
    """

    def __init__(self, path: str, message: str | None = None) -> None:
        self.path = path
        super().__init__(
            message
            or f"Conflicting structure at '{path}': a value cannot be both "
            "a scalar and a nested mapping."
        )


class UnsupportedFormatError(PolyparseError):
    """Raised when no parser is registered for a format or file extension.

    Attributes:
        format_name: The requested format name or extension.
    """

    def __init__(self, format_name: str, message: str | None = None) -> None:
        self.format_name = format_name
        super().__init__(
            message or f"Unsupported format: '{format_name}'."
        )


class SourceReadError(PolyparseError):
    """Raised when a named input file cannot be opened or decoded.

    The underlying ``OSError`` / ``UnicodeDecodeError`` is chained as
    ``__cause__``.

    Attributes:
        path: The path that could not be read.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class UnsupportedOptionError(PolyparseError):
    """Raised when parser options are passed that the chosen format does not take.

    For example ``has_header`` for a YAML file.

    Attributes:
        format_name: The format the options were passed to.
        options: The rejected option names, sorted.
    """

    def __init__(self, format_name: str, options: list[str], accepted: list[str]) -> None:
        self.format_name = format_name
        self.options = sorted(options)
        super().__init__(
            f"Format '{format_name}' does not accept option(s) {self.options}. "
            f"Accepted options: {sorted(accepted) or 'none'}"
        )
