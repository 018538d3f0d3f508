"""
Parser option models for polyparse.

Defines the Pydantic models that validate per-call parser options
before any text is scanned:

- CsvDialect: delimiter / enclosure / header flag for CSV and TSV.
- XlsxOptions: header flag and sheet selector for XLSX workbooks.

Why Pydantic:
- Bad options (a two-character delimiter, delimiter == enclosure) fail
  up front with a clear message instead of producing silently wrong rows.
- Models are frozen, so a dialect can be shared between calls safely.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Characters that make up the internal marker tokens (!!D!!, !!E!!, ...).
# Using any of them as delimiter or enclosure would corrupt decoding.
MARKER_CHARACTERS = frozenset("!DENR")


class CsvDialect(BaseModel):
    """Options controlling how delimited text is split into rows and fields."""

    model_config = ConfigDict(frozen=True)

    delimiter: str = Field(",", description="Single character separating fields")
    enclosure: str = Field(
        '"', description="Single character wrapping fields that contain special characters"
    )
    has_header: bool = Field(
        True, description="If True, the first row supplies the keys for every record"
    )

    @field_validator("delimiter", "enclosure")
    @classmethod
    def _check_single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"must be exactly one character, got {value!r}")
        if value in ("\r", "\n"):
            raise ValueError("line-ending characters cannot be used")
        if value in MARKER_CHARACTERS:
            raise ValueError(
                f"{value!r} is reserved for internal marker tokens; "
                f"choose a character other than {sorted(MARKER_CHARACTERS)}"
            )
        return value

    @model_validator(mode="after")
    def _check_distinct(self) -> CsvDialect:
        if self.delimiter == self.enclosure:
            raise ValueError(
                f"delimiter and enclosure must differ (both are {self.delimiter!r})"
            )
        return self


class XlsxOptions(BaseModel):
    """Options for reading a worksheet out of an XLSX workbook."""

    model_config = ConfigDict(frozen=True)

    has_header: bool = Field(
        True, description="If True, the first row supplies the keys for every record"
    )
    sheet: int | str = Field(
        0, description="Worksheet to read: zero-based index or sheet name"
    )

    @field_validator("sheet")
    @classmethod
    def _check_sheet(cls, value: int | str) -> int | str:
        if isinstance(value, int) and value < 0:
            raise ValueError("sheet index must be >= 0")
        if isinstance(value, str) and not value.strip():
            raise ValueError("sheet name must not be blank")
        return value
