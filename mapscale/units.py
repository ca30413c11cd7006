"""Linear units, unit systems and the conversions between them.

A scale bar measures in a *base unit* (meters or feet) and is labelled in a
*display unit* that may be promoted to the larger unit of the same system
(kilometers or miles) once the distance is long enough.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .constants import IMPERIAL_PROMOTION_THRESHOLD, METRIC_PROMOTION_THRESHOLD
from .errors import InvalidUnitError, InvalidUnitSystemError

__all__ = [
    "FEET",
    "KILOMETERS",
    "LinearUnit",
    "LinearUnitId",
    "METERS",
    "MILES",
    "UnitSystem",
    "base_unit_for",
    "distance_in_display_units",
    "linear_unit",
    "secondary_unit_system",
    "select_linear_unit",
]

logger = logging.getLogger(__name__)


class UnitSystem(str, Enum):
    """Family of units a scale bar is labelled in."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class LinearUnitId(str, Enum):
    METERS = "meters"
    FEET = "feet"
    KILOMETERS = "kilometers"
    MILES = "miles"


@dataclass(frozen=True)
class LinearUnit:
    """A unit of length and its size in micrometers.

    Sizes are whole micrometers so conversions between feet and miles stay
    exact at the half mile threshold.
    """

    unit_id: LinearUnitId
    name: str
    abbreviation: str
    micrometers_per_unit: int

    def convert_to(self, other: "LinearUnit", value: float) -> float:
        """Return *value*, measured in this unit, expressed in *other*."""

        other = _coerce_unit(other, argument="other")
        if other == self:
            return float(value)
        return float(value) * self.micrometers_per_unit / other.micrometers_per_unit

    def __str__(self) -> str:
        return self.abbreviation


METERS = LinearUnit(LinearUnitId.METERS, "Meters", "m", 1_000_000)
FEET = LinearUnit(LinearUnitId.FEET, "Feet", "ft", 304_800)
KILOMETERS = LinearUnit(LinearUnitId.KILOMETERS, "Kilometers", "km", 1_000_000_000)
MILES = LinearUnit(LinearUnitId.MILES, "Miles", "mi", 1_609_344_000)

_UNITS_BY_ID: Dict[LinearUnitId, LinearUnit] = {
    unit.unit_id: unit for unit in (METERS, FEET, KILOMETERS, MILES)
}


def _coerce_unit(value: Any, *, argument: str) -> LinearUnit:
    if value is None:
        raise InvalidUnitError(f"{argument} cannot be None")
    if not isinstance(value, LinearUnit):
        raise InvalidUnitError(f"{argument} must be a LinearUnit, got {value!r}")
    return value


def _coerce_unit_system(value: Any) -> UnitSystem:
    if value is None:
        raise InvalidUnitSystemError("unit_system cannot be None")
    if isinstance(value, UnitSystem):
        return value
    if isinstance(value, str):
        try:
            return UnitSystem(value.strip().lower())
        except ValueError:
            pass
    raise InvalidUnitSystemError(f"Unsupported unit system: {value!r}")


def linear_unit(name: str) -> LinearUnit:
    """Look up a unit by identifier (``"meters"``) or abbreviation (``"km"``)."""

    key = str(name).strip().lower()
    for unit in _UNITS_BY_ID.values():
        if key in (unit.unit_id.value, unit.abbreviation):
            return unit
    raise InvalidUnitError(f"Unknown linear unit: {name!r}")


def base_unit_for(unit_system: UnitSystem | str) -> LinearUnit:
    """Return the unit distances are measured in for *unit_system*."""

    system = _coerce_unit_system(unit_system)
    if system is UnitSystem.IMPERIAL:
        return FEET
    return METERS


def secondary_unit_system(unit_system: UnitSystem | str) -> UnitSystem:
    """Return the system shown on the other side of a dual unit bar."""

    system = _coerce_unit_system(unit_system)
    if system is UnitSystem.METRIC:
        return UnitSystem.IMPERIAL
    return UnitSystem.METRIC


def select_linear_unit(distance: float, unit_system: UnitSystem | str) -> LinearUnit:
    """Choose the unit a bar covering *distance* should be labelled in.

    Parameters
    ----------
    distance:
        Length represented by the whole bar, in feet for ``IMPERIAL`` and in
        meters for ``METRIC``.
    unit_system:
        The unit system in use.

    Raises
    ------
    InvalidUnitSystemError
        If *unit_system* is ``None`` or not recognised.
    """

    system = _coerce_unit_system(unit_system)
    if system is UnitSystem.IMPERIAL:
        # miles from half a mile upwards
        if distance >= IMPERIAL_PROMOTION_THRESHOLD:
            return MILES
        return FEET
    if distance >= METRIC_PROMOTION_THRESHOLD:
        return KILOMETERS
    return METERS


def distance_in_display_units(distance: float, base_unit: LinearUnit, display_unit: LinearUnit) -> float:
    """Express *distance*, measured in *base_unit*, in *display_unit*.

    Raises
    ------
    InvalidUnitError
        If either unit is ``None`` or not a :class:`LinearUnit`.
    """

    base_unit = _coerce_unit(base_unit, argument="base_unit")
    display_unit = _coerce_unit(display_unit, argument="display_unit")
    if display_unit == base_unit:
        return float(distance)
    converted = base_unit.convert_to(display_unit, distance)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Converted %s %s to %s %s",
            distance,
            base_unit.abbreviation,
            converted,
            display_unit.abbreviation,
        )
    return converted
