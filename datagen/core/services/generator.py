"""
Value generator — uniform random integers or rounded floats.

Values are yielded lazily, in generation order.  The random source is
``random.SystemRandom`` unless a seed is supplied, in which case a
seeded ``random.Random`` makes the output reproducible.
"""

from __future__ import annotations

import logging
import random
from typing import Iterator, Union

from datagen.core.models.request import DataKind
from datagen.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

Value = Union[int, float]


def make_rng(seed: int | None = None) -> random.Random:
    """Return a random source: OS entropy by default, seeded if asked."""
    if seed is None:
        return random.SystemRandom()
    logger.debug("Using seeded RNG (seed=%d)", seed)
    return random.Random(seed)


def generate_values(
    kind: DataKind,
    count: int,
    *,
    settings: GeneratorSettings | None = None,
    rng: random.Random | None = None,
) -> Iterator[Value]:
    """Yield ``count`` random values of the given kind.

    Integers are drawn from the closed interval [min_value, max_value].
    Floats are drawn from the same interval and rounded to
    ``settings.precision`` decimals.

    Args:
        kind: INTEGER or FLOAT.
        count: Number of values to produce (must be > 0).
        settings: Range and precision (default: [-1000, 1000], 3 decimals).
        rng: Random source (default: ``make_rng()``).

    Raises:
        ValueError: If count is not positive.
    """
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")

    settings = settings or GeneratorSettings()
    rng = rng or make_rng()
    lo, hi = settings.min_value, settings.max_value

    if kind is DataKind.INTEGER:
        for _ in range(count):
            yield rng.randint(lo, hi)
    else:
        for _ in range(count):
            # Rounding cannot leave [lo, hi]: both bounds are integers
            yield round(rng.uniform(lo, hi), settings.precision)


def format_value(value: Value, precision: int = 3) -> str:
    """Render a value as one output line (without the newline).

    Integers are plain decimal.  Floats always carry exactly
    ``precision`` decimals; negative zero is written as positive zero.
    """
    if isinstance(value, int):
        return str(value)
    if value == 0:
        value = 0.0
    return f"{value:.{precision}f}"
