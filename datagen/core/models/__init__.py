"""
Domain models — Pydantic types for datagen.

    from datagen.core.models import DataKind, GenerationRequest, GeneratorSettings
"""

from datagen.core.models.request import DataKind, GenerationRequest, parse_count
from datagen.core.models.settings import GeneratorSettings

__all__ = [
    "DataKind",
    "GenerationRequest",
    "GeneratorSettings",
    "parse_count",
]
