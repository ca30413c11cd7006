"""Scale bar length, unit and segment calculations for map views.

The package turns the ground distance a map widget can spare for its scale bar
into a round bar length, a display unit, a segment count and label text.
"""

from .errors import InvalidUnitError, InvalidUnitSystemError, ScaleBarError
from .layout import (
    Alignment,
    DualUnitScaleBarSpec,
    ScaleBarSpec,
    SegmentMark,
    calculate_alignment_translation_x,
    calculate_display_width,
    compute_dual_unit_spec,
    compute_scale_bar_spec,
)
from .multipliers import MULTIPLIER_TABLE, MultiplierEntry, calculate_magnitude, select_multiplier
from .scale_bar import best_scalebar_length, label_string, optimal_number_of_segments
from .units import (
    FEET,
    KILOMETERS,
    METERS,
    MILES,
    LinearUnit,
    LinearUnitId,
    UnitSystem,
    base_unit_for,
    distance_in_display_units,
    linear_unit,
    secondary_unit_system,
    select_linear_unit,
)

__all__ = [
    "Alignment",
    "DualUnitScaleBarSpec",
    "FEET",
    "InvalidUnitError",
    "InvalidUnitSystemError",
    "KILOMETERS",
    "LinearUnit",
    "LinearUnitId",
    "METERS",
    "MILES",
    "MULTIPLIER_TABLE",
    "MultiplierEntry",
    "ScaleBarError",
    "ScaleBarSpec",
    "SegmentMark",
    "UnitSystem",
    "base_unit_for",
    "best_scalebar_length",
    "calculate_alignment_translation_x",
    "calculate_display_width",
    "calculate_magnitude",
    "compute_dual_unit_spec",
    "compute_scale_bar_spec",
    "distance_in_display_units",
    "label_string",
    "linear_unit",
    "optimal_number_of_segments",
    "secondary_unit_system",
    "select_linear_unit",
    "select_multiplier",
]

__version__ = "0.1.0"
