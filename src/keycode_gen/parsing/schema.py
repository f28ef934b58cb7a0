"""Pydantic models for parsed code tables.

A Section is created once per table block and never mutated afterwards;
normalization produces new copies via ``model_copy``.
"""

import re

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

_CODE_TOKEN_RE = re.compile(r"^\w+$")
_SECTION_ID_RE = re.compile(r"^[\w-]+$")


class CodeEntry(BaseModel):
    """One row of a code table: the code token plus an optional description."""

    model_config = ConfigDict(frozen=True)

    code: str
    description: str | None = None

    @field_validator("code")
    @classmethod
    def validate_code(cls, value: str) -> str:
        """Codes are bare identifier tokens such as 'KeyA' or 'Numpad0'."""
        if not _CODE_TOKEN_RE.match(value):
            raise ValueError(f"Invalid code token {value!r}")
        return value

    @field_validator("description")
    @classmethod
    def blank_description_is_absent(cls, value: str | None) -> str | None:
        """An empty or whitespace-only description means there is no description."""
        if value is None or not value.strip():
            return None
        return value


class Section(BaseModel):
    """Parsed representation of one table block."""

    model_config = ConfigDict(frozen=True)

    id: str
    description: str
    codes: tuple[CodeEntry, ...] = ()

    @field_validator("id")
    @classmethod
    def validate_id(cls, value: str) -> str:
        if not _SECTION_ID_RE.match(value):
            raise ValueError(f"Invalid section id {value!r}")
        return value

    @model_validator(mode="after")
    def validate_unique_codes(self) -> "Section":
        """Ensure no code appears twice within the same section."""
        seen: set[str] = set()
        for entry in self.codes:
            if entry.code in seen:
                raise ValueError(f"Duplicate code {entry.code!r} in section {self.id!r}")
            seen.add(entry.code)
        return self
