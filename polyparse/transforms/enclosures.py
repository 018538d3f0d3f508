"""
Enclosure Scanner for delimited text.

A naive split on newline and then on the delimiter breaks as soon as a
field contains either of them. This module solves that by walking the
raw text once and, for every enclosed span (``"..."`` by default):

- stripping the enclosure characters that open and close the span;
- replacing the special characters inside it with marker tokens::

      delimiter          -> !!D!!
      doubled enclosure  -> !!E!!   ("" inside a quoted field = one ")
      \\n                 -> !!N!!
      \\r                 -> !!R!!

Text outside enclosures is left as-is apart from line endings, which are
normalized to ``\\n``. After encoding, the text can be split on ``\\n``
and on the delimiter safely; ``decode_markers()`` restores each field.

Limitation: a marker token that already occurs literally in the input is
decoded as the character it stands for. Pick a different delimiter or
enclosure if the data may contain strings like ``!!D!!``.

The scanner jumps between enclosure characters with ``str.find`` instead
of a regular expression, so delimiter and enclosure never need escaping.
"""

from __future__ import annotations

import logging

from polyparse.exceptions import MalformedInputError
from polyparse.transforms.line_endings import CR, LF, normalize_line_endings

logger = logging.getLogger(__name__)

DELIMITER_MARKER = "!!D!!"
ENCLOSURE_MARKER = "!!E!!"
LF_MARKER = "!!N!!"
CR_MARKER = "!!R!!"

_SNIPPET_LENGTH = 40


def encode_markers(span: str, delimiter: str, enclosure: str) -> str:
    """Replace special characters inside one enclosed span with markers.

    The replacement order matters: the delimiter is handled before the
    doubled enclosure, then LF, then CR.
    """
    return (
        span.replace(delimiter, DELIMITER_MARKER)
        .replace(enclosure + enclosure, ENCLOSURE_MARKER)
        .replace(LF, LF_MARKER)
        .replace(CR, CR_MARKER)
    )


def decode_markers(field: str, delimiter: str, enclosure: str) -> str:
    """Restore marker tokens in a single field to literal characters."""
    return (
        field.replace(DELIMITER_MARKER, delimiter)
        .replace(ENCLOSURE_MARKER, enclosure)
        .replace(LF_MARKER, LF)
        .replace(CR_MARKER, CR)
    )


def encode_enclosures(text: str, delimiter: str = ",", enclosure: str = '"') -> str:
    """Strip enclosures from *text* and hide their special characters.

    Args:
        text: Raw delimited text in any line-ending style.
        delimiter: The field separator character.
        enclosure: The character wrapping fields with special content.

    Returns:
        Text with enclosures removed, markers inserted for enclosed
        special characters, and ``\\n`` as the only line ending outside
        enclosures.

    Raises:
        MalformedInputError: If an enclosure is opened but never closed.
    """
    pieces: list[str] = []
    spans = 0
    pos = 0
    length = len(text)

    while pos < length:
        start = text.find(enclosure, pos)
        if start == -1:
            pieces.append(normalize_line_endings(text[pos:]))
            break

        pieces.append(normalize_line_endings(text[pos:start]))
        end = _find_closing_enclosure(text, start, enclosure)
        pieces.append(encode_markers(text[start + 1:end], delimiter, enclosure))
        spans += 1
        pos = end + 1

    logger.debug("Encoded %d enclosed span(s)", spans)
    return "".join(pieces)


def _find_closing_enclosure(text: str, start: int, enclosure: str) -> int:
    """Return the index of the enclosure character closing the span at *start*.

    A doubled enclosure inside the span is an escaped literal, not a
    closing character.
    """
    pos = start + 1
    while True:
        end = text.find(enclosure, pos)
        if end == -1:
            line = _line_number(text, start)
            snippet = text[start:start + _SNIPPET_LENGTH]
            raise MalformedInputError(
                f"Unterminated enclosure {enclosure!r} opened on line {line}: "
                f"{snippet!r}",
                line=line,
                snippet=snippet,
            )
        if text.startswith(enclosure, end + 1):
            pos = end + 2
            continue
        return end


def _line_number(text: str, index: int) -> int:
    """1-based line number of *index*, counting CRLF, CR and LF as one break each."""
    head = text[:index]
    return head.count(LF) + head.count(CR) - head.count(CR + LF) + 1
