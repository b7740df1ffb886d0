"""
Data file writer — header line plus one value per line.

File layout (UTF-8):

    Count: <N>
    <value_1>
    ...
    <value_N>

An existing file is truncated.  The handle is closed on every path,
including errors, before control returns to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from datagen.core.errors import FileWriteError
from datagen.core.services.generator import Value, format_value

logger = logging.getLogger(__name__)

HEADER_PREFIX = "Count: "


def format_header(count: int) -> str:
    """The first line of every data file."""
    return f"{HEADER_PREFIX}{count}"


def write_data_file(
    path: Path,
    count: int,
    values: Iterable[Value],
    *,
    precision: int = 3,
) -> int:
    """Write the header and values to ``path``.

    Args:
        path: Destination file (created or truncated).
        count: Value written in the header line.
        values: Values to write, one per line, in iteration order.
        precision: Decimal places for float values.

    Returns:
        Number of value lines written.

    Raises:
        FileWriteError: If the file cannot be opened or written.
        ValueError: If ``values`` does not yield exactly ``count`` items.
    """
    written = 0
    try:
        fh = open(path, "w", encoding="utf-8", newline="\n")
    except (OSError, ValueError) as e:
        # ValueError: a path the OS cannot represent, e.g. an embedded NUL
        logger.info("Cannot open %s: %s", path, e)
        raise FileWriteError(path, e) from e

    try:
        with fh:
            fh.write(format_header(count) + "\n")
            for value in values:
                fh.write(format_value(value, precision) + "\n")
                written += 1
    except OSError as e:
        logger.info("Failed to write %s after %d values: %s", path, written, e)
        raise FileWriteError(path, e) from e

    if written != count:
        raise ValueError(f"header says {count} values but {written} were written")

    logger.debug("Wrote %d values to %s", written, path)
    return written
