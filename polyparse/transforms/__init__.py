"""
Transforms sub-package for polyparse.

Contains the text- and structure-level building blocks the format
parsers are assembled from. Each module is pure: plain values in,
plain values out, no shared state.

Modules:
- line_endings.py: normalize CR / CRLF / LF and detect the dominant style.
- enclosures.py: Enclosure Scanner -- hides special characters inside
  enclosed CSV fields behind marker tokens, and restores them.
- rows.py: Row/Field Splitter and Header Binder for delimited text.
- nesting.py: Dotted-Key Unnester for INI-style flat keys.

Pipeline order for CSV (orchestrated by parsers/delimited.py):
  encode_enclosures -> split_rows -> split_fields -> bind_header
"""
