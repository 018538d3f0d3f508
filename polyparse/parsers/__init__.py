"""
Parsers sub-package for polyparse.

Contains one parser per format family, each converting file content into
plain nested Python data.

Design: Strategy Pattern
- base.py defines the BaseParser ABC.
- delimited.py implements CsvParser / TsvParser on top of the transforms
  (enclosure scanner, row splitter, header binder).
- ini.py implements IniParser (configparser + dotted-key unnesting).
- document.py implements JsonParser / YamlParser (thin adapters).
- spreadsheet.py implements XlsxParser (pandas + openpyxl).

detect.py maps each ``Format`` to its parser through a static table.
"""
