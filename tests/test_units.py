import itertools
import unittest

import numpy as np

from mapscale.errors import InvalidUnitError, InvalidUnitSystemError
from mapscale.units import (
    FEET,
    KILOMETERS,
    METERS,
    MILES,
    LinearUnitId,
    UnitSystem,
    base_unit_for,
    distance_in_display_units,
    linear_unit,
    secondary_unit_system,
    select_linear_unit,
)


class SelectLinearUnitTests(unittest.TestCase):
    def test_metric_boundary(self):
        self.assertEqual(select_linear_unit(999, UnitSystem.METRIC), METERS)
        self.assertEqual(select_linear_unit(1000, UnitSystem.METRIC), KILOMETERS)
        self.assertEqual(select_linear_unit(0, UnitSystem.METRIC), METERS)

    def test_imperial_boundary(self):
        self.assertEqual(select_linear_unit(2639, UnitSystem.IMPERIAL), FEET)
        self.assertEqual(select_linear_unit(2640, UnitSystem.IMPERIAL), MILES)

    def test_accepts_system_names(self):
        self.assertEqual(select_linear_unit(5000, "imperial"), MILES)
        self.assertEqual(select_linear_unit(5000, " Metric "), KILOMETERS)

    def test_rejects_missing_or_unknown_system(self):
        with self.assertRaises(InvalidUnitSystemError):
            select_linear_unit(100, None)
        with self.assertRaises(InvalidUnitSystemError):
            select_linear_unit(100, "nautical")
        with self.assertRaises(InvalidUnitSystemError):
            select_linear_unit(100, 3)

    def test_unit_system_error_is_value_error(self):
        with self.assertRaises(ValueError):
            select_linear_unit(100, None)


class DistanceInDisplayUnitsTests(unittest.TestCase):
    def test_same_unit_is_identity(self):
        self.assertEqual(distance_in_display_units(123.4, METERS, METERS), 123.4)
        self.assertEqual(distance_in_display_units(-7.0, MILES, MILES), -7.0)

    def test_promotes_to_larger_unit(self):
        self.assertAlmostEqual(distance_in_display_units(1500, METERS, KILOMETERS), 1.5)
        self.assertAlmostEqual(distance_in_display_units(2640, FEET, MILES), 0.5)
        self.assertAlmostEqual(distance_in_display_units(1, MILES, METERS), 1609.344)

    def test_round_trip_between_any_two_units(self):
        units = (METERS, FEET, KILOMETERS, MILES)
        for first, second in itertools.permutations(units, 2):
            for distance in np.logspace(-4, 8, 25):
                there = distance_in_display_units(float(distance), first, second)
                back = distance_in_display_units(there, second, first)
                self.assertTrue(np.isclose(back, distance, rtol=1e-12, atol=0.0))

    def test_rejects_missing_units(self):
        with self.assertRaises(InvalidUnitError):
            distance_in_display_units(1.0, None, METERS)
        with self.assertRaises(InvalidUnitError):
            distance_in_display_units(1.0, METERS, None)
        with self.assertRaises(InvalidUnitError):
            distance_in_display_units(1.0, "meters", KILOMETERS)


class UnitLookupTests(unittest.TestCase):
    def test_linear_unit_lookup(self):
        self.assertIs(linear_unit("km"), KILOMETERS)
        self.assertIs(linear_unit("Feet"), FEET)
        self.assertEqual(linear_unit("miles").unit_id, LinearUnitId.MILES)
        with self.assertRaises(InvalidUnitError):
            linear_unit("furlong")

    def test_base_and_secondary_systems(self):
        self.assertIs(base_unit_for(UnitSystem.METRIC), METERS)
        self.assertIs(base_unit_for("imperial"), FEET)
        self.assertIs(secondary_unit_system(UnitSystem.METRIC), UnitSystem.IMPERIAL)
        self.assertIs(secondary_unit_system(UnitSystem.IMPERIAL), UnitSystem.METRIC)
        with self.assertRaises(InvalidUnitSystemError):
            base_unit_for(None)

    def test_unit_text_is_abbreviation(self):
        self.assertEqual(str(MILES), "mi")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
