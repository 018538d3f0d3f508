"""
File-reading collaborator for polyparse.

Every named input goes through read_text() or read_bytes(). Both read
the file in one blocking call and convert low-level failures (missing
file, directory instead of file, permission denied, undecodable bytes)
into SourceReadError, so callers only ever see polyparse exceptions.
The original error is chained as ``__cause__``.

Text is decoded as ``utf-8-sig`` so a leading BOM (common in CSV files
exported from Excel) never ends up in the first header name.
"""

from __future__ import annotations

import logging
from pathlib import Path

from polyparse.exceptions import SourceReadError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8-sig"


def read_bytes(path: str | Path) -> bytes:
    """Read a file's raw bytes.

    Raises:
        SourceReadError: If the file cannot be opened or read.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise SourceReadError(
            str(path), f"Could not read file '{path}': {exc.strerror or exc}"
        ) from exc
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def read_text(path: str | Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read and decode a text file.

    Args:
        path: File to read.
        encoding: Text encoding; defaults to ``utf-8-sig``.

    Raises:
        SourceReadError: If the file cannot be read or decoded.
    """
    data = read_bytes(path)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise SourceReadError(
            str(path),
            f"Could not decode file '{path}' as {encoding}: {exc.reason} "
            f"at byte {exc.start}",
        ) from exc
