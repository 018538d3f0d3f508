"""
Base parser ABC for polyparse.

All format-specific parsers implement this interface. The contract is:
1. parse() takes the file content (``str``, or ``bytes`` for binary
   formats) plus format-specific keyword options.
2. It returns plain nested Python data: a dict for key-value formats
   (YAML, JSON, INI) or a list of rows/records for tabular formats
   (CSV, TSV, XLSX).

Parsers are stateless; a single instance may be reused or shared
between threads.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Union

ParsedData = Union[dict[str, Any], list[Any]]


class BaseParser(ABC):
    """Abstract base class for format parsers.

    Attributes:
        binary: True if parse() expects raw bytes instead of decoded text.
            The façade reads the source file accordingly.
    """

    binary: ClassVar[bool] = False

    @abstractmethod
    def parse(self, content: Any, **options: Any) -> ParsedData:
        """Parse file content into nested data.

        Args:
            content: Decoded text, or bytes when ``binary`` is True.
            **options: Format-specific options (e.g., ``delimiter``).

        Returns:
            Parsed data as dicts / lists of plain values.

        Raises:
            MalformedInputError: If the content cannot be parsed.
        """

    @classmethod
    def accepted_options(cls) -> frozenset[str]:
        """Names of the keyword options this parser's parse() takes."""
        params = list(inspect.signature(cls.parse).parameters.values())[2:]
        return frozenset(
            p.name for p in params
            if p.kind in (p.POSITIONAL_OR_KEYWORD, p.KEYWORD_ONLY)
        )
