"""Magnitudes and the table of "nice" multipliers used to round bar lengths.

A bar length is ``multiplier * magnitude`` where the magnitude is the largest
power of ten not above the distance and the multiplier comes from
:data:`MULTIPLIER_TABLE`. Each multiplier carries the segment counts that keep
every tick label on the bar a round number.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

__all__ = [
    "MULTIPLIER_TABLE",
    "MultiplierEntry",
    "calculate_magnitude",
    "is_degenerate_distance",
    "segment_options_for_distance",
    "select_multiplier",
]

logger = logging.getLogger(__name__)

# 0.3 / 0.1 evaluates to 2.9999999999999996; such residuals still match 3
_RESIDUAL_TOLERANCE = 1e-12


@dataclass(frozen=True)
class MultiplierEntry:
    """A multiplier and the segment counts that suit it (ascending)."""

    multiplier: float
    segment_options: Tuple[int, ...]


MULTIPLIER_TABLE: Tuple[MultiplierEntry, ...] = (
    MultiplierEntry(1.0, (1, 2, 4, 5)),
    MultiplierEntry(1.2, (1, 2, 3, 4)),
    MultiplierEntry(1.25, (1, 2)),
    MultiplierEntry(1.5, (1, 2, 3, 5)),
    MultiplierEntry(1.75, (1, 2)),
    MultiplierEntry(2.0, (1, 2, 4, 5)),
    MultiplierEntry(2.4, (1, 2, 3)),
    MultiplierEntry(2.5, (1, 2, 5)),
    MultiplierEntry(3.0, (1, 2, 3)),
    MultiplierEntry(3.75, (1, 3)),
    MultiplierEntry(4.0, (1, 2, 4)),
    MultiplierEntry(5.0, (1, 2, 5)),
    MultiplierEntry(6.0, (1, 2, 3)),
    MultiplierEntry(7.5, (1, 2)),
    MultiplierEntry(8.0, (1, 2, 4)),
    MultiplierEntry(9.0, (1, 2, 3)),
    MultiplierEntry(10.0, (1, 2, 5)),
)


def _validate_table(table: Sequence[MultiplierEntry]) -> None:
    """Check the ordering the selector and the segment scan rely on."""

    if not table:
        raise ValueError("multiplier table must not be empty")
    previous = None
    for entry in table:
        if previous is not None and entry.multiplier <= previous:
            raise ValueError(f"multipliers must be strictly ascending, got {entry.multiplier} after {previous}")
        options = entry.segment_options
        if not options or options[0] < 1:
            raise ValueError(f"segment options for {entry.multiplier} must be positive")
        if any(later <= earlier for earlier, later in zip(options, options[1:])):
            raise ValueError(f"segment options for {entry.multiplier} must be strictly ascending")
        previous = entry.multiplier


_validate_table(MULTIPLIER_TABLE)


def is_degenerate_distance(distance: float) -> bool:
    """Return ``True`` for distances that cannot be rounded (<= 0, NaN or infinite)."""

    return not math.isfinite(distance) or distance <= 0


def calculate_magnitude(distance: float) -> float:
    """Return the largest power of ten that is <= *distance*.

    Degenerate distances (see :func:`is_degenerate_distance`) yield ``0.0``.
    """

    if is_degenerate_distance(distance):
        return 0.0
    exponent = math.floor(math.log10(distance))
    magnitude = 10.0 ** exponent
    # log10 rounds up to the next integer for values an ulp below a power of ten
    if magnitude > distance:
        magnitude = 10.0 ** (exponent - 1)
    return magnitude


def select_multiplier(distance: float, magnitude: float) -> MultiplierEntry:
    """Return the table entry with the largest multiplier <= ``distance / magnitude``.

    Residuals within a relative 1e-12 below a multiplier still match it. Falls
    back to the first entry when no multiplier qualifies.
    """

    residual = distance / magnitude if magnitude > 0 else 0.0
    selected = None
    for entry in MULTIPLIER_TABLE:
        if entry.multiplier > residual * (1.0 + _RESIDUAL_TOLERANCE):
            break
        selected = entry
    if selected is None:
        logger.warning(
            "No multiplier fits residual %s (distance=%s, magnitude=%s); using %s",
            residual,
            distance,
            magnitude,
            MULTIPLIER_TABLE[0].multiplier,
        )
        return MULTIPLIER_TABLE[0]
    return selected


def segment_options_for_distance(distance: float) -> Tuple[int, ...]:
    """Return the segment counts suitable for a bar covering *distance*."""

    return select_multiplier(distance, calculate_magnitude(distance)).segment_options
