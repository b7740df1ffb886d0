"""
Generator settings — value range and float precision.

Defaults produce integers in [-1000, 1000] and floats rounded to
3 decimals.  Overridable through datagen.yml.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

DEFAULT_MIN_VALUE = -1000
DEFAULT_MAX_VALUE = 1000
DEFAULT_PRECISION = 3


class GeneratorSettings(BaseModel):
    """Range and precision used by the generator and writer."""

    min_value: int = DEFAULT_MIN_VALUE
    max_value: int = DEFAULT_MAX_VALUE
    precision: int = Field(default=DEFAULT_PRECISION, ge=0, le=10)

    @model_validator(mode="after")
    def check_range(self) -> GeneratorSettings:
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must be <= max_value ({self.max_value})"
            )
        return self
