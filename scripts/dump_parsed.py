"""
Demo script: parse files via the public API and print them as JSON.

Usage:
    python scripts/dump_parsed.py settings.yaml people.csv
    python scripts/dump_parsed.py --no-header data.tsv

The format of each file is detected from its extension. Files that
cannot be parsed are reported and skipped; the exit code is 1 if any
file failed.
"""

from __future__ import annotations

import json
import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("dump_parsed")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import polyparse
    from polyparse.detect import Format, detect_format
    from polyparse.reader import read_text

    args = sys.argv[1:]
    has_header = "--no-header" not in args
    paths = [a for a in args if not a.startswith("--")]

    if not paths:
        log.error("No input files given.")
        return 2

    failed = 0
    for input_path in paths:
        log.info("=" * 70)
        log.info("Parsing: %s", input_path)

        try:
            fmt = detect_format(input_path)
            options = {}
            if fmt in (Format.CSV, Format.TSV, Format.XLSX):
                options["has_header"] = has_header
            if fmt in (Format.CSV, Format.TSV):
                # read once: the same text feeds detection and parsing
                text = read_text(input_path)
                log.info("  line ending : %r", polyparse.detect_line_ending(text))
                data = polyparse.load(text, fmt, is_string=True, **options)
            else:
                data = polyparse.load(input_path, fmt, **options)
        except polyparse.PolyparseError as exc:
            log.error("FAILED  %s: %s", input_path, exc)
            failed += 1
            continue

        print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        log.info("Done: %s\n", input_path)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
