"""
Generation request — the validated (kind, count, filename) triple.

Built once from user input, consumed once by the generator and writer,
never persisted.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from datagen.core.errors import InvalidCount, InvalidDataType


class DataKind(str, Enum):
    """Type of values to generate."""

    INTEGER = "integer"
    FLOAT = "float"

    @classmethod
    def parse(cls, raw: str) -> DataKind:
        """Parse user input: i/I/integer or f/F/float.

        Raises:
            InvalidDataType: For anything else.
        """
        text = raw.strip().lower()
        if text in ("i", cls.INTEGER.value):
            return cls.INTEGER
        if text in ("f", cls.FLOAT.value):
            return cls.FLOAT
        raise InvalidDataType(raw)


def parse_count(raw: str) -> int:
    """Parse a positive element count from user input.

    Raises:
        InvalidCount: If the text is not a whole number or is <= 0.
    """
    text = raw.strip()
    try:
        count = int(text)
    except ValueError:
        raise InvalidCount(raw, "not a whole number") from None
    if count <= 0:
        raise InvalidCount(raw, "must be greater than zero")
    return count


class GenerationRequest(BaseModel):
    """One generate-and-write operation."""

    kind: DataKind
    count: int = Field(gt=0)
    filename: str

    @field_validator("filename")
    @classmethod
    def filename_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("filename must not be empty")
        return value
