"""
Shared test fixtures and sample documents for polyparse tests.

The same "donut" document is defined once as Python data and rendered
into YAML, JSON and INI text, so every format parser can be checked
against one expected value. INI has no list syntax; its expected value
is the same document with lists turned into dicts keyed "0", "1", ...
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

# ---------------------------------------------------------------------------
# Sample documents -- edit here if the shared fixtures need to change
# ---------------------------------------------------------------------------
DONUT_DATA: dict[str, Any] = {
    "zero": {
        "id": "0001",
        "type": "donut",
        "name": "Cake",
        "ppu": "0.55",
        "batters": {
            "batter": [
                {"id": "1001", "type": "Regular"},
                {"id": "1004", "type": "Devil's Food"},
            ],
        },
        "topping": [
            {"id": "5001", "type": "None"},
            {"id": "5002", "type": "Glazed"},
        ],
    },
    "one": {
        "id": "0002",
        "type": "donut",
        "name": "Raised",
        "ppu": "0.55",
        "batters": {
            "batter": [
                {"id": "1001", "type": "Regular"},
            ],
        },
        "topping": [
            {"id": "5001", "type": "None"},
        ],
    },
}

DONUT_YAML = """\
zero:
  id: "0001"
  type: donut
  name: Cake
  ppu: "0.55"
  batters:
    batter:
      - id: "1001"
        type: Regular
      - id: "1004"
        type: Devil's Food
  topping:
    - id: "5001"
      type: None
    - id: "5002"
      type: Glazed
one:
  id: "0002"
  type: donut
  name: Raised
  ppu: "0.55"
  batters:
    batter:
      - id: "1001"
        type: Regular
  topping:
    - id: "5001"
      type: None
"""

DONUT_JSON = json.dumps(DONUT_DATA, indent=2)

DONUT_INI = """\
; donut menu
[zero]
id = 0001
type = donut
name = Cake
ppu = 0.55
batters.batter.0.id = 1001
batters.batter.0.type = Regular
batters.batter.1.id = 1004
batters.batter.1.type = "Devil's Food"
topping.0.id = 5001
topping.0.type = None
topping.1.id = 5002
topping.1.type = Glazed

[one]
id = 0002
type = donut
name = Raised
ppu = 0.55
batters.batter.0.id = 1001
batters.batter.0.type = Regular
topping.0.id = 5001
topping.0.type = None
"""

PEOPLE_CSV = (
    "id,name,age,color,sentence\r\n"
    '0000,Adam,25,blue,"has, a comma"\r\n'
    '0001,Brad,24,green,"""""is quoted"""""\r\n'
    "0002,Carl,26,yellow,\r\n"
    "0003,Dave,24,green\r\n"
)

PEOPLE_RECORDS = [
    {"id": "0000", "name": "Adam", "age": "25", "color": "blue", "sentence": "has, a comma"},
    {"id": "0001", "name": "Brad", "age": "24", "color": "green", "sentence": '""is quoted""'},
    {"id": "0002", "name": "Carl", "age": "26", "color": "yellow", "sentence": ""},
    {"id": "0003", "name": "Dave", "age": "24", "color": "green", "sentence": ""},
]


def lists_to_index_maps(data: Any) -> Any:
    """Convert every list into a dict keyed by the string index."""
    if isinstance(data, list):
        return {str(i): lists_to_index_maps(v) for i, v in enumerate(data)}
    if isinstance(data, dict):
        return {k: lists_to_index_maps(v) for k, v in data.items()}
    return data


DONUT_INI_DATA = lists_to_index_maps(DONUT_DATA)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def write_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes text (or bytes) to ``tmp_path / name``."""

    def _write(name: str, content: str | bytes, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            # newline="" keeps \r\n sequences exactly as given
            with open(path, "w", encoding=encoding, newline="") as f:
                f.write(content)
        return path

    return _write


@pytest.fixture()
def config_files(write_file: Callable[..., Path]) -> dict[str, Path]:
    """The donut document written as .yaml, .yml, .json and .ini files."""
    return {
        "yaml": write_file("valid.yaml", DONUT_YAML),
        "yml": write_file("valid.yml", DONUT_YAML),
        "json": write_file("valid.json", DONUT_JSON),
        "ini": write_file("valid.ini", DONUT_INI),
    }


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against files written to disk)",
    )
