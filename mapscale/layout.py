"""Recompute-on-demand layout for single and dual unit scale bars.

A widget layer calls :func:`compute_scale_bar_spec` (or
:func:`compute_dual_unit_spec`) whenever its size, viewpoint or unit system
changes, passing the ground distance its available width covers. The returned
specs hold everything needed to place the line, the ticks and the labels; no
state is kept between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .constants import DEFAULT_MAX_SEGMENTS, SHADOW_OFFSET, STROKE_WIDTH
from .errors import ScaleBarError
from .multipliers import is_degenerate_distance
from .scale_bar import best_scalebar_length, label_string, optimal_number_of_segments
from .units import (
    LinearUnit,
    UnitSystem,
    base_unit_for,
    distance_in_display_units,
    secondary_unit_system,
    select_linear_unit,
)

__all__ = [
    "Alignment",
    "DualUnitScaleBarSpec",
    "ScaleBarSpec",
    "SegmentMark",
    "calculate_alignment_translation_x",
    "calculate_display_width",
    "compute_dual_unit_spec",
    "compute_scale_bar_spec",
]

logger = logging.getLogger(__name__)


class Alignment(str, Enum):
    """Horizontal placement of the bar inside its container."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class SegmentMark:
    """Position and label of one segment boundary along the bar."""

    offset: float
    distance: float
    label: str


@dataclass(frozen=True)
class ScaleBarSpec:
    """Describes the geometry and labels of one scale bar."""

    max_distance: float
    base_unit: LinearUnit
    length: float
    display_width: float
    display_unit: LinearUnit
    display_distance: float
    segments: int
    label: str

    @property
    def text(self) -> str:
        """Label followed by the display unit abbreviation, e.g. ``"500 m"``."""

        return f"{self.label} {self.display_unit.abbreviation}"

    @property
    def is_empty(self) -> bool:
        return self.segments == 0

    def segment_marks(self) -> Tuple[SegmentMark, ...]:
        """Return a mark for every segment boundary, from 0 to the bar end."""

        if self.segments <= 0:
            return ()
        offsets = np.linspace(0.0, self.display_width, self.segments + 1)
        distances = np.linspace(0.0, self.display_distance, self.segments + 1)
        return tuple(
            SegmentMark(offset=float(offset), distance=float(distance), label=label_string(float(distance)))
            for offset, distance in zip(offsets, distances)
        )


@dataclass(frozen=True)
class DualUnitScaleBarSpec:
    """A bar labelled in both unit systems, one above and one below the line."""

    primary: ScaleBarSpec
    secondary: ScaleBarSpec

    @property
    def line_width(self) -> float:
        return max(self.primary.display_width, self.secondary.display_width)


def _coerce_width(value: float, *, argument: str) -> float:
    try:
        width = float(value)
    except (TypeError, ValueError):
        raise ScaleBarError(f"{argument} must be a number, got {value!r}.")
    if width < 0 or np.isnan(width):
        raise ScaleBarError(f"{argument} must be >= 0, got {width}.")
    return width


def calculate_display_width(display_distance: float, maximum_distance: float, available_width: float) -> float:
    """Scale *available_width* down to the part covered by *display_distance*."""

    if is_degenerate_distance(maximum_distance):
        return 0.0
    return display_distance / maximum_distance * available_width


def calculate_alignment_translation_x(
    width: float,
    actual_width: float,
    alignment: Alignment | str = Alignment.CENTER,
    *,
    stroke_width: float = STROKE_WIDTH,
    shadow_offset: float = SHADOW_OFFSET,
) -> float:
    """Return the X translation that moves a centred bar to *alignment*."""

    if not isinstance(alignment, Alignment):
        try:
            alignment = Alignment(str(alignment).strip().lower())
        except ValueError:
            raise ScaleBarError(f"Unsupported alignment: {alignment!r}")
    if alignment is Alignment.LEFT:
        return -((width - actual_width - stroke_width) / 2.0)
    if alignment is Alignment.RIGHT:
        return (width - actual_width - stroke_width - shadow_offset) / 2.0
    return 0.0


def compute_scale_bar_spec(
    *,
    max_distance: float,
    available_width: float,
    unit_system: UnitSystem | str = UnitSystem.METRIC,
    segmented: bool = False,
    max_segments: Optional[int] = None,
) -> ScaleBarSpec:
    """Compute the scale bar for a ground distance.

    Parameters
    ----------
    max_distance:
        Ground distance covered by *available_width*, in the base unit of
        *unit_system* (meters or feet).
    available_width:
        Width (in pixels) the bar line may occupy.
    unit_system:
        Unit system the bar is labelled in.
    segmented:
        Whether the bar is split into segments. Unsegmented bars have one.
    max_segments:
        Most segments that fit without labels overlapping. Defaults to
        :data:`~mapscale.constants.DEFAULT_MAX_SEGMENTS`.

    Returns
    -------
    ScaleBarSpec
        An empty spec (zero length, width and segments) when *max_distance*
        is degenerate.
    """

    width = _coerce_width(available_width, argument="available_width")
    if max_segments is None:
        max_segments = DEFAULT_MAX_SEGMENTS
    if max_segments < 0:
        raise ScaleBarError(f"max_segments must be >= 0, got {max_segments}.")

    base_unit = base_unit_for(unit_system)
    length = best_scalebar_length(max_distance, base_unit, segmented)
    display_width = calculate_display_width(length, max_distance, width)
    display_unit = select_linear_unit(length, unit_system)
    display_distance = distance_in_display_units(length, base_unit, display_unit)

    if length <= 0:
        segments = 0
    elif segmented:
        segments = optimal_number_of_segments(display_distance, max_segments)
    else:
        segments = 1

    spec = ScaleBarSpec(
        max_distance=float(max_distance),
        base_unit=base_unit,
        length=length,
        display_width=display_width,
        display_unit=display_unit,
        display_distance=display_distance,
        segments=segments,
        label=label_string(display_distance),
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Scale bar for %s %s over %spx: %s, width=%s, segments=%s",
            max_distance,
            base_unit.abbreviation,
            width,
            spec.text,
            display_width,
            segments,
        )
    return spec


def compute_dual_unit_spec(
    *,
    max_distance: float,
    available_width: float,
    unit_system: UnitSystem | str = UnitSystem.METRIC,
) -> DualUnitScaleBarSpec:
    """Compute a bar labelled in *unit_system* above and the other system below.

    *max_distance* is measured in the base unit of *unit_system*; it is
    converted to the base unit of the secondary system for the lower labels.
    """

    primary = compute_scale_bar_spec(
        max_distance=max_distance,
        available_width=available_width,
        unit_system=unit_system,
    )
    other_system = secondary_unit_system(unit_system)
    secondary_max = distance_in_display_units(max_distance, primary.base_unit, base_unit_for(other_system))
    secondary = compute_scale_bar_spec(
        max_distance=secondary_max,
        available_width=available_width,
        unit_system=other_system,
    )
    return DualUnitScaleBarSpec(primary=primary, secondary=secondary)
