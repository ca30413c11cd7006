"""Utility helpers for computing scale bar lengths, segments and labels.

These are the numeric core shared by every bar layout: pick a round length
that fits the available distance, decide how many segments the bar can be
split into, and format the numbers written next to it.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .constants import LABEL_DECIMALS
from .multipliers import (
    calculate_magnitude,
    is_degenerate_distance,
    segment_options_for_distance,
    select_multiplier,
)
from .units import FEET, LinearUnit, UnitSystem, _coerce_unit, select_linear_unit

__all__ = [
    "best_scalebar_length",
    "label_string",
    "optimal_number_of_segments",
]

logger = logging.getLogger(__name__)

_LABEL_QUANTUM = Decimal(1).scaleb(-LABEL_DECIMALS)


def _nice_length(max_length: float) -> float:
    magnitude = calculate_magnitude(max_length)
    # the tolerant multiplier match can land an ulp above max_length
    return min(select_multiplier(max_length, magnitude).multiplier * magnitude, max_length)


def best_scalebar_length(max_length: float, unit: LinearUnit, is_segmented: bool = False) -> float:
    """Return the highest "nice" length that is <= *max_length*.

    Parameters
    ----------
    max_length:
        Longest distance the bar may represent, in *unit*.
    unit:
        Unit *max_length* is measured in, normally meters or feet.
    is_segmented:
        Whether the bar is drawn with segments. Accepted so callers can pass
        the same arguments as for the segment count; it does not change the
        length.

    Returns
    -------
    float
        The bar length in *unit*, or ``0.0`` for a degenerate *max_length*.
    """

    unit = _coerce_unit(unit, argument="unit")
    if is_degenerate_distance(max_length):
        logger.debug("Degenerate scale bar length %s; returning 0", max_length)
        return 0.0

    best_length = _nice_length(max_length)

    # A round number of feet past the mile threshold is labelled in miles, so
    # round in miles instead and hand the result back in feet.
    if unit == FEET:
        display_unit = select_linear_unit(best_length, UnitSystem.IMPERIAL)
        if display_unit != unit:
            # miles never enter this branch again, so this recurses once
            assert display_unit != FEET
            promoted_length = best_scalebar_length(
                unit.convert_to(display_unit, max_length), display_unit, is_segmented
            )
            best_length = display_unit.convert_to(unit, promoted_length)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Rounded %s ft in %s: %s %s -> %s ft",
                    max_length,
                    display_unit.abbreviation,
                    promoted_length,
                    display_unit.abbreviation,
                    best_length,
                )
    return best_length


def optimal_number_of_segments(distance: float, max_num_segments: int) -> int:
    """Return how many segments a bar covering *distance* should have.

    The result is the largest segment option for *distance* that does not
    exceed *max_num_segments*, or 1 when none fits. A degenerate *distance*
    has no segments and yields 0.
    """

    if is_degenerate_distance(distance):
        return 0
    result = 1
    for option in segment_options_for_distance(distance):
        if option > max_num_segments:
            break
        result = option
    return result


def label_string(distance: float) -> str:
    """Format *distance* for a bar label: two decimals with trailing zeros trimmed.

    Ties round up on the shortest decimal form of *distance*, so ``0.625``
    becomes ``"0.63"``. NaN and infinities are written as Python formats them.
    """

    if not math.isfinite(distance):
        return f"{distance:.{LABEL_DECIMALS}f}"
    with localcontext() as context:
        # enough digits for any finite float before the decimal point
        context.prec = 400
        rounded = Decimal(repr(float(distance))).quantize(_LABEL_QUANTUM, rounding=ROUND_HALF_UP)
    formatted = f"{rounded:f}"
    return formatted.rstrip("0").rstrip(".") if "." in formatted else formatted
