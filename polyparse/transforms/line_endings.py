"""
Line-ending helpers for polyparse.

- normalize_line_endings(): collapse CRLF and lone CR into LF.
- detect_line_ending(): report the dominant line-ending style of a string.

Detection counts raw CR and LF characters rather than line breaks, so
``"a\\r\\nb"`` has one CR and one LF. Rules:
  - more CR than LF      -> ``"\\r"``
  - more LF than CR      -> ``"\\n"``
  - equal, non-zero      -> ``"\\r\\n"``
  - no CR or LF at all   -> ``"\\n"``
"""

from __future__ import annotations

CR = "\r"
LF = "\n"
CRLF = "\r\n"


def normalize_line_endings(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` to ``\\n``."""
    return text.replace(CRLF, LF).replace(CR, LF)


def detect_line_ending(text: str) -> str:
    """Return the most frequent line-ending style in *text*.

    Args:
        text: Any string.

    Returns:
        One of ``"\\r\\n"``, ``"\\n"`` or ``"\\r"``. Ties between CR and LF
        counts resolve to ``"\\r\\n"``; text without line endings
        resolves to ``"\\n"``.
    """
    cr_count = text.count(CR)
    lf_count = text.count(LF)

    if cr_count == lf_count:
        return CRLF if cr_count else LF
    return CR if cr_count > lf_count else LF
