"""
Create-file use case — generate values for a request and write them out.

Shared by the interactive menu and the one-shot ``generate`` command.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path

from datagen.core.errors import FileWriteError
from datagen.core.models.request import GenerationRequest
from datagen.core.models.settings import GeneratorSettings
from datagen.core.services.generator import generate_values
from datagen.core.services.writer import write_data_file

logger = logging.getLogger(__name__)


@dataclass
class CreateFileResult:
    """Result of one generate-and-write run."""

    request: GenerationRequest
    path: Path
    written: int = 0
    duration_ms: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "kind": self.request.kind.value,
            "count": self.request.count,
            "path": str(self.path),
            "written": self.written,
            "duration_ms": self.duration_ms,
            "error": self.error,
        }


def create_data_file(
    request: GenerationRequest,
    settings: GeneratorSettings | None = None,
    rng: random.Random | None = None,
) -> CreateFileResult:
    """Generate ``request.count`` values and write them to ``request.filename``.

    Write failures are captured in ``result.error`` instead of raised,
    so callers can report them and carry on.
    """
    settings = settings or GeneratorSettings()
    result = CreateFileResult(request=request, path=Path(request.filename))

    logger.info(
        "Creating %s with %d %s values",
        result.path,
        request.count,
        request.kind.value,
    )

    start = time.monotonic()
    values = generate_values(request.kind, request.count, settings=settings, rng=rng)
    try:
        result.written = write_data_file(
            result.path,
            request.count,
            values,
            precision=settings.precision,
        )
    except FileWriteError as e:
        result.error = str(e)
        logger.info("Write failed: %s", e)
    result.duration_ms = int((time.monotonic() - start) * 1000)

    return result
