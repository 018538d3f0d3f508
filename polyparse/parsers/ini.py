"""
INI parser for polyparse.

Two stages:
  1. parse_ini_flat(): ``configparser`` reads the text into a flat
     ``{key: value, section: {key: value}}`` dict.
  2. unnest(): dotted keys become nested dicts (see transforms/nesting.py).

configparser is configured to behave like a plain key-value INI reader:
- keys before the first section are allowed and land at the top level
  (read through a synthetic root section);
- key case is preserved, ``%`` interpolation is off, and ``[DEFAULT]`` is
  an ordinary section;
- ``;`` and ``#`` start comments, ``;`` also inline;
- duplicate keys or sections are errors;
- values stay strings; surrounding quotes are removed.
"""

from __future__ import annotations

import configparser
import logging
from typing import Any

from polyparse.exceptions import MalformedInputError, StructureConflictError
from polyparse.parsers.base import BaseParser
from polyparse.transforms.nesting import unnest

logger = logging.getLogger(__name__)

_ROOT_SECTION = "\x00root"
_DEFAULT_SECTION = "\x00defaults"
_QUOTES = ('"', "'")


def _make_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=(";", "#"),
        inline_comment_prefixes=(";",),
        strict=True,
        interpolation=None,
        default_section=_DEFAULT_SECTION,
    )
    parser.optionxform = str  # preserve key case
    return parser


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def _error_line(exc: configparser.Error) -> int | None:
    """Source line of a configparser error, corrected for the root header line."""
    lineno = getattr(exc, "lineno", None)
    if lineno is None and getattr(exc, "errors", None):
        lineno = exc.errors[0][0]
    return lineno - 1 if lineno else None


def parse_ini_flat(text: str) -> dict[str, Any]:
    """Parse INI text into a flat dict without interpreting dotted keys.

    Args:
        text: Raw INI text.

    Returns:
        Top-level keys map to strings; each section maps to a dict of
        its keys. Empty text returns ``{}``.

    Raises:
        MalformedInputError: On syntax errors or duplicate keys/sections.
        StructureConflictError: If a top-level key has the same name as
            a section.
    """
    body = text.rstrip()
    if not body:
        return {}

    parser = _make_parser()
    try:
        parser.read_string(f"[{_ROOT_SECTION}]\n{body}")
    except configparser.Error as exc:
        line = _error_line(exc)
        raise MalformedInputError(
            f"Invalid INI structure (line {line}): {exc}", line=line
        ) from exc

    flat: dict[str, Any] = {
        key: _unquote(value) for key, value in parser.items(_ROOT_SECTION, raw=True)
    }
    for section in parser.sections():
        if section == _ROOT_SECTION:
            continue
        if section in flat:
            raise StructureConflictError(
                section,
                f"Top-level key '{section}' has the same name as a section.",
            )
        flat[section] = {
            key: _unquote(value) for key, value in parser.items(section, raw=True)
        }

    logger.debug("Read %d top-level INI entries", len(flat))
    return flat


def parse_ini(text: str) -> dict[str, Any]:
    """Parse INI text and expand dotted keys into nested dicts.

    Example::

        >>> parse_ini("[0]\\nname.first = Adam")
        {'0': {'name': {'first': 'Adam'}}}
    """
    return unnest(parse_ini_flat(text))


class IniParser(BaseParser):
    """Parser for INI text with dotted-key nesting."""

    def parse(self, content: str) -> dict[str, Any]:
        return parse_ini(content)
