"""
JSON and YAML parsers for polyparse.

Thin adapters over ``json`` and PyYAML (``yaml.safe_load``). Both
normalize the same way:
- surrounding whitespace is ignored;
- an empty document (or a bare ``null``) becomes ``{}``;
- the top level must be a mapping or a sequence -- a bare scalar is
  rejected, since callers expect nested key-value data;
- decoder errors are re-raised as MalformedInputError with the line
  number when the decoder reports one.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import yaml

from polyparse.exceptions import MalformedInputError
from polyparse.parsers.base import BaseParser, ParsedData

logger = logging.getLogger(__name__)


def _check_container(data: Any, kind: str) -> ParsedData:
    if data is None:
        return {}
    if not isinstance(data, (dict, list)):
        raise MalformedInputError(
            f"The {kind} input must contain a mapping or a sequence at the "
            f"top level, got {type(data).__name__}: {data!r}"
        )
    return data


def parse_json(text: str) -> ParsedData:
    """Parse a JSON document.

    Raises:
        MalformedInputError: If the text is not valid JSON or is a bare scalar.
    """
    body = text.strip()
    if not body:
        return {}
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(
            f"Failed to parse JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            line=exc.lineno,
            snippet=body[max(exc.pos - 20, 0):exc.pos + 20],
        ) from exc
    return _check_container(data, "JSON")


def parse_yaml(text: str) -> ParsedData:
    """Parse a YAML document with ``yaml.safe_load``.

    Raises:
        MalformedInputError: If the text is not valid YAML or is a bare scalar.
    """
    body = text.strip()
    if not body:
        return {}
    try:
        data = yaml.safe_load(body)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        raise MalformedInputError(
            f"Failed to parse YAML: {exc}",
            line=line,
        ) from exc
    return _check_container(data, "YAML")


class JsonParser(BaseParser):
    """Parser for JSON documents."""

    def parse(self, content: str) -> ParsedData:
        return parse_json(content)


class YamlParser(BaseParser):
    """Parser for YAML documents."""

    def parse(self, content: str) -> ParsedData:
        return parse_yaml(content)
